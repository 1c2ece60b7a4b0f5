from __future__ import annotations

"""
Analysis Run Domain Data Models.

Defines the result objects passed from the validation stage and the
analysis engine back to the interface layer, which alone decides the
process exit code.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from include_analyser.domain.include_models import DependencyGraph

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisSetup:
    """
    Outcome of validating the configured directories.

    Attributes:
        ok: Flag indicating that every directory is usable.
        error: Descriptive message in case of failure.
        sources_dir: Canonical directory holding the analyzed sources.
        include_dirs: Canonical global search directories, in search order.
    """
    ok: bool
    error: str
    sources_dir: str = ""
    include_dirs: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class AnalysisResult:
    """
    Unified result object of a complete analysis run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        sources_dir: Canonical sources directory.
        include_dirs: Canonical global search directories.
        source_files: Discovered source files, in report order.
        graph: Resolved includes per source file.
        report_lines: Rendered report (tree or JSON lines).
        summary: Execution statistics.
    """
    ok: bool
    error: str

    sources_dir: str = ""
    include_dirs: List[str] = field(default_factory=list)

    source_files: List[str] = field(default_factory=list)
    graph: DependencyGraph = field(default_factory=dict)
    report_lines: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_setup_error(error: str) -> AnalysisSetup:
    """Create a failed directory validation outcome."""
    return AnalysisSetup(ok=False, error=error)


def create_setup_success(sources_dir: str, include_dirs: List[str]) -> AnalysisSetup:
    """Create a successful directory validation outcome."""
    return AnalysisSetup(
        ok=True,
        error="",
        sources_dir=sources_dir,
        include_dirs=list(include_dirs),
    )


def create_error_result(
        error: str,
        setup: Optional[AnalysisSetup] = None,
) -> AnalysisResult:
    """
    Create a failed analysis result.

    Args:
        error: Detailed error description.
        setup: Validation outcome, when the failure happened after it.

    Returns:
        AnalysisResult: An immutable error result object.
    """
    return AnalysisResult(
        ok=False,
        error=error,
        sources_dir=setup.sources_dir if setup else "",
        include_dirs=list(setup.include_dirs) if setup else [],
    )


def create_success_result(
        setup: AnalysisSetup,
        source_files: List[str],
        graph: DependencyGraph,
        report_lines: List[str],
        summary_extra: Optional[Dict[str, Any]] = None,
) -> AnalysisResult:
    """
    Create a successful analysis result.

    Args:
        setup: Validation outcome the run was based on.
        source_files: Files discovered under the sources directory.
        graph: The dependency graph built from those files.
        report_lines: Rendered report.
        summary_extra: Execution metrics.

    Returns:
        AnalysisResult: An immutable success result object.
    """
    return AnalysisResult(
        ok=True,
        error="",
        sources_dir=setup.sources_dir,
        include_dirs=list(setup.include_dirs),
        source_files=list(source_files),
        graph=graph,
        report_lines=report_lines,
        summary=summary_extra or {},
    )
