from __future__ import annotations

"""
Include Dependency Data Models.

Provides the value objects exchanged between the directive extractor,
the path resolver, the graph builder and the tree renderer.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

# -----------------------------------------------------------------------------
# DIRECTIVES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class IncludeDirective:
    """
    A recognized '#include' line as spelled in the source text.

    Attributes:
        pathname: Raw spelling between the delimiters.
        is_global: True for '<...>' includes, False for '"..."' includes.
    """
    pathname: str
    is_global: bool

    def spelled(self) -> str:
        """Return the pathname wrapped in its original delimiters."""
        if self.is_global:
            return f"<{self.pathname}>"
        return f'"{self.pathname}"'


@dataclass(frozen=True)
class ResolvedInclude:
    """
    A directive paired with the file it resolved to.

    Attributes:
        directive: The directive as extracted.
        path: Canonical target path, or None when the include is absent.
    """
    directive: IncludeDirective
    path: Optional[str] = None

    @property
    def is_absent(self) -> bool:
        """True when no file was found for the directive."""
        return self.path is None

# -----------------------------------------------------------------------------
# GRAPH STRUCTURES
# -----------------------------------------------------------------------------

DependencyGraph = Dict[str, List[ResolvedInclude]]
GlobalResolutionCache = Dict[str, ResolvedInclude]
