from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path normalization, canonicalization and resilient line streaming.
Acts as the only place where the analysis touches 'os.path' directly
for existence checks, so resolution semantics stay uniform.
"""

import os
from typing import Iterator, Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a user-supplied path string into an absolute path.

    Expands '~' and environment variables. Empty input falls back to
    'fallback'.

    Args:
        path: Raw input path string.
        fallback: Default path to use when the input is empty.

    Returns:
        str: Normalized absolute path (symlinks untouched).
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def canonicalize(pathname: str, base_dir: Optional[str] = None) -> Optional[str]:
    """
    Resolve a pathname to its unique absolute form.

    Relative pathnames are joined onto 'base_dir' (the current directory
    when omitted). Symlinks and '..' segments are resolved.

    Args:
        pathname: Path as spelled by the caller.
        base_dir: Directory that relative pathnames are anchored to.

    Returns:
        Optional[str]: The canonical path if it names an existing regular
                       file, otherwise None.
    """
    if not pathname:
        return None
    if os.path.isabs(pathname) or base_dir is None:
        candidate = pathname
    else:
        candidate = os.path.join(base_dir, pathname)

    # Spellings may carry bytes the OS rejects in paths (e.g. NUL)
    try:
        canonical = os.path.realpath(candidate)
        if not os.path.isfile(canonical):
            return None
    except (OSError, ValueError):
        return None
    return canonical


def canonical_dir(pathname: str) -> str:
    """
    Canonicalize a configured directory.

    Raises:
        FileNotFoundError: If the path does not exist.
        NotADirectoryError: If the path exists but is not a directory.
    """
    path = normalize_path(pathname, os.getcwd())
    if not os.path.exists(path):
        raise FileNotFoundError(f"{pathname} doesn't exist")
    if not os.path.isdir(path):
        raise NotADirectoryError(f"{pathname} isn't a directory")
    return os.path.realpath(path)


def display_path(path: str, root_dir: Optional[str]) -> str:
    """
    Render a canonical path relative to 'root_dir' when it lies inside it.

    Paths outside the root (e.g. headers found in a search directory) are
    returned unchanged.
    """
    if not root_dir:
        return path
    try:
        if os.path.commonpath([path, root_dir]) != root_dir:
            return path
    except ValueError:
        return path
    return os.path.relpath(path, root_dir)

# -----------------------------------------------------------------------------
# STREAM READING OPERATIONS
# -----------------------------------------------------------------------------

def stream_file_lines(file_path: str) -> Iterator[str]:
    """
    Generate a line-by-line stream of a text file.

    Undecodable byte sequences are replaced instead of raising, and line
    terminators (including CR from CRLF files) are stripped.

    Args:
        file_path: Absolute path to the target file.

    Yields:
        str: Lines without their terminator.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(file_path, "r", encoding="utf-8", errors="replace", newline="") as f:
        for line in f:
            yield line.rstrip("\r\n")
