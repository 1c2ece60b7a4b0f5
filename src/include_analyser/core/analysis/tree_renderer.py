from __future__ import annotations

"""
Dependency Tree Renderer.

Converts the dependency graph into an indented plain-text report, one
tree per source file. The walk is depth-first and cycle-aware: a target
already on the current path is marked as a loop and not expanded, while
a target reached through two different paths (a diamond) is expanded
under each of them.
"""

import sys
from typing import Callable, FrozenSet, Iterable, List, Optional, Sequence, TextIO

from include_analyser.domain.constants import (
    ABSENT_MARK,
    ARROW,
    INDENTATION_UNIT,
    LOOP_MARK,
    PRESENT_MARK,
)
from include_analyser.domain.include_models import DependencyGraph
from include_analyser.infra.fs import display_path

PathFormatter = Callable[[str], str]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_file_dependency_tree(
        node: str,
        graph: DependencyGraph,
        lines: List[str],
        depth: int = 0,
        visited: FrozenSet[str] = frozenset(),
        path_formatter: PathFormatter = str,
) -> None:
    """
    Recursively render the includes of 'node' into 'lines'.

    Args:
        node: Canonical path of the file being expanded.
        graph: Resolved includes per file.
        lines: Accumulator list for output strings.
        depth: Nesting level of 'node'; 0 for a report root.
        visited: Files on the path from the root down to 'node'.
        path_formatter: Maps canonical paths to their displayed form.
    """
    if depth == 0:
        lines.append(path_formatter(node))

    on_path = visited | {node}
    indent = INDENTATION_UNIT * (depth + 1)

    for resolved in graph.get(node, []):
        spelled = resolved.directive.spelled()

        if resolved.is_absent:
            lines.append(f"{indent}{ABSENT_MARK}{spelled}")
            continue

        target = path_formatter(resolved.path)
        if resolved.path in on_path:
            lines.append(f"{indent}{LOOP_MARK}{spelled}{ARROW}{target}")
            continue

        lines.append(f"{indent}{PRESENT_MARK}{spelled}{ARROW}{target}")
        render_file_dependency_tree(
            resolved.path,
            graph,
            lines,
            depth=depth + 1,
            visited=on_path,
            path_formatter=path_formatter,
        )


def render_dependency_report(
        source_files: Sequence[str],
        graph: DependencyGraph,
        root_dir: Optional[str] = None,
        relative: bool = False,
) -> List[str]:
    """
    Render the full report: one tree per source file, each followed by a
    blank separator line.

    Args:
        source_files: Report roots, in order.
        graph: Resolved includes per file.
        root_dir: Sources directory, used when 'relative' is set.
        relative: Show paths under 'root_dir' relative to it.

    Returns:
        List[str]: Report lines without terminators.
    """
    root = root_dir if relative else None

    def formatter(path: str) -> str:
        return display_path(path, root)

    lines: List[str] = []
    for source_file in source_files:
        render_file_dependency_tree(source_file, graph, lines, path_formatter=formatter)
        lines.append("")
    return lines


def print_dependency_report(
        report_lines: Iterable[str],
        stream: Optional[TextIO] = None,
) -> None:
    """
    Write rendered report lines to 'stream' (stdout by default).

    Accepts the output of 'render_dependency_report' or of the JSON
    exporter, one terminator per line.
    """
    out = stream if stream is not None else sys.stdout
    for line in report_lines:
        out.write(line + "\n")
    out.flush()
