from __future__ import annotations

"""
Include Directive Extractor.

Scans source text line by line and yields the '#include' directives it
recognizes. Only whole lines are matched: a directive preceded by other
tokens, or continued on the next line, is ignored. Comments are not
interpreted, so a directive inside a block comment is still reported.
"""

import logging
import re
from typing import Iterable, Iterator

from include_analyser.domain.include_models import IncludeDirective
from include_analyser.infra.fs import stream_file_lines

logger = logging.getLogger(__name__)

INCLUDE_RX = re.compile(r'\s*#\s*include\s*(?:<(\S+)>|"(\S+)")\s*(.*)')

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def iter_include_directives(lines: Iterable[str]) -> Iterator[IncludeDirective]:
    """
    Lazily extract directives from an iterable of text lines.

    Args:
        lines: Source lines, with or without their terminators.

    Yields:
        IncludeDirective: One per matching line, in encounter order.
    """
    for line in lines:
        match = INCLUDE_RX.fullmatch(line.rstrip("\r\n"))
        if not match:
            continue
        if match.group(1) is not None:
            yield IncludeDirective(pathname=match.group(1), is_global=True)
        else:
            yield IncludeDirective(pathname=match.group(2), is_global=False)


def extract_include_directives(file_path: str) -> Iterator[IncludeDirective]:
    """
    Lazily extract the directives of one file on disk.

    A file that cannot be opened or read is reported and contributes
    whatever was yielded before the failure (nothing, if it could not be
    opened at all).

    Args:
        file_path: Path of the source file.

    Yields:
        IncludeDirective: Directives in file order.
    """
    try:
        yield from iter_include_directives(stream_file_lines(file_path))
    except OSError as e:
        logger.warning(f"failed to open {file_path} for reading: {e}")
