from __future__ import annotations

"""
Include Path Resolver.

Maps a directive's spelled pathname to a canonical file on disk, using
the including file's directory for quoted includes and the ordered
global search path for angle-bracket includes. Quoted includes that are
not found beside the including file fall through to the search path,
like a conventional preprocessor.
"""

import logging
import os
from typing import Optional, Sequence

from include_analyser.domain.include_models import IncludeDirective, ResolvedInclude
from include_analyser.infra.fs import canonicalize

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_include_path(
        directive: IncludeDirective,
        containing_file: str,
        include_dirs: Sequence[str],
) -> Optional[str]:
    """
    Resolve one directive to a canonical path.

    Args:
        directive: The directive to resolve.
        containing_file: Canonical path of the file holding the directive.
        include_dirs: Global search directories, in search order.

    Returns:
        Optional[str]: Canonical target path, or None when absent.
    """
    pathname = directive.pathname

    # Absolute spellings never consult the search path
    if os.path.isabs(pathname):
        return canonicalize(pathname)

    if not directive.is_global:
        local = canonicalize(pathname, os.path.dirname(containing_file))
        if local is not None:
            return local

    for include_dir in include_dirs:
        found = canonicalize(pathname, include_dir)
        if found is not None:
            return found

    return None


def resolve_include_directive(
        directive: IncludeDirective,
        containing_file: str,
        include_dirs: Sequence[str],
) -> ResolvedInclude:
    """Resolve a directive and pair it with its target."""
    path = resolve_include_path(directive, containing_file, include_dirs)
    if path is None:
        logger.debug(f"Unresolved {directive.spelled()} in {containing_file}")
    return ResolvedInclude(directive=directive, path=path)
