from __future__ import annotations

"""
Dependency Graph Builder.

Drives extraction and resolution across every source file. Global
(angle-bracket) spellings are resolved once per build and shared through
a resolution cache; quoted includes depend on the including file's
directory and are always resolved afresh.
"""

import logging
from typing import Optional, Sequence

from include_analyser.core.analysis import path_resolver
from include_analyser.core.analysis.directive_extractor import extract_include_directives
from include_analyser.domain.include_models import (
    DependencyGraph,
    GlobalResolutionCache,
    ResolvedInclude,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_dependency_graph(
        source_files: Sequence[str],
        include_dirs: Sequence[str],
        cache: Optional[GlobalResolutionCache] = None,
) -> DependencyGraph:
    """
    Build the mapping from each source file to its resolved includes.

    Every source file gets an entry, in the order given, even when it has
    no directives. Includes keep file order and duplicates.

    Args:
        source_files: Canonical paths of the files to analyze.
        include_dirs: Global search directories, in search order.
        cache: Resolution cache for global spellings. A fresh one is
               created when omitted; pass one in to inspect it afterwards.

    Returns:
        DependencyGraph: Resolved includes per source file.
    """
    if cache is None:
        cache = {}

    graph: DependencyGraph = {}
    directive_count = 0

    for file_path in source_files:
        file_dependencies = graph.setdefault(file_path, [])

        for directive in extract_include_directives(file_path):
            directive_count += 1

            if directive.is_global and directive.pathname in cache:
                file_dependencies.append(cache[directive.pathname])
                continue

            resolved: ResolvedInclude = path_resolver.resolve_include_directive(
                directive, file_path, include_dirs
            )
            if directive.is_global:
                cache[directive.pathname] = resolved
            file_dependencies.append(resolved)

    logger.debug(
        f"Dependency graph built: {len(graph)} files, {directive_count} directives, "
        f"{len(cache)} global spellings cached"
    )
    return graph
