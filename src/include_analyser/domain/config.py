from __future__ import annotations

"""
Configuration Domain Management.

Provides the default session configuration that drives an analysis run.
Interface layers merge their overrides on top of it before handing the
dictionary to the engine.
"""

import os
from typing import Any, Dict

from include_analyser.domain.constants import SOURCE_EXTENSIONS

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "sources_dir": os.getcwd(),
        "include_dirs": [],

        # Discovery
        "extensions": list(SOURCE_EXTENSIONS),

        # Report Format
        "relative_paths": False,
        "json_output": False,
    }
