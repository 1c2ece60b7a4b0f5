from __future__ import annotations

"""
Domain Constants.

Recognized source extensions and the textual vocabulary of the
dependency report.
"""

from typing import Tuple

APP_NAME = "include-analyser"

SOURCE_EXTENSIONS: Tuple[str, ...] = (".h", ".hpp", ".c", ".cpp")

# -----------------------------------------------------------------------------
# REPORT VOCABULARY
# -----------------------------------------------------------------------------
INDENTATION_UNIT = "...."
PRESENT_MARK = " "
LOOP_MARK = " @ "
ABSENT_MARK = " ! "
ARROW = " -> "
