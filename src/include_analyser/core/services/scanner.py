from __future__ import annotations

"""
Source File Discovery Service.

Walks the sources directory and lists the C/C++ files to analyze.
Directory symlinks are followed; a directory reached twice through
links is walked only once. Entries that cannot be listed are reported
and skipped without stopping the walk.
"""

import logging
import os
from typing import Iterable, Iterator, List, Optional, Set

from include_analyser.domain.constants import SOURCE_EXTENSIONS

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def is_source_file(file_path: str, extensions: Iterable[str] = SOURCE_EXTENSIONS) -> bool:
    """
    Check that a path is a regular file with a recognized extension.

    The comparison is case-sensitive: 'main.C' is not a source file.
    """
    _, ext = os.path.splitext(file_path)
    if not ext or ext not in tuple(extensions):
        return False
    return os.path.isfile(file_path)


def yield_source_files(
        sources_dir: str,
        extensions: Optional[Iterable[str]] = None,
) -> Iterator[str]:
    """
    Traverse the sources directory and yield canonical source file paths.

    Directories and files are visited in sorted order so that the report
    is reproducible.

    Args:
        sources_dir: Canonical path of the directory to walk.
        extensions: Recognized extensions; the C/C++ defaults when omitted.

    Yields:
        str: Canonical path of each source file, at most once.
    """
    exts = tuple(extensions) if extensions is not None else SOURCE_EXTENSIONS
    seen_dirs: Set[str] = set()
    seen_files: Set[str] = set()

    for root, dirs, files in os.walk(sources_dir, onerror=_log_walk_error, followlinks=True):
        real_root = os.path.realpath(root)
        if real_root in seen_dirs:
            dirs[:] = []
            continue
        seen_dirs.add(real_root)

        dirs.sort()
        files.sort()

        for file_name in files:
            file_path = os.path.join(root, file_name)
            if not is_source_file(file_path, exts):
                continue

            canonical = os.path.realpath(file_path)
            if canonical in seen_files:
                continue
            seen_files.add(canonical)
            yield canonical


def list_source_files(
        sources_dir: str,
        extensions: Optional[Iterable[str]] = None,
) -> List[str]:
    """Materialize 'yield_source_files' into a list."""
    return list(yield_source_files(sources_dir, extensions))


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _log_walk_error(error: OSError) -> None:
    logger.warning(f"Skipping unreadable entry: {error}")
