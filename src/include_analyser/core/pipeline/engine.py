from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates one analysis run:
1. Normalizes the configuration.
2. Validates and canonicalizes the configured directories.
3. Discovers the source files.
4. Builds the dependency graph with a run-scoped resolution cache.
5. Renders the report (dependency tree or JSON).
"""

import logging
from typing import Any, Dict, List, Optional

from include_analyser.core.analysis.graph_builder import build_dependency_graph
from include_analyser.core.analysis.graph_export import render_json_report
from include_analyser.core.analysis.tree_renderer import render_dependency_report
from include_analyser.core.pipeline.stages.setup import prepare_directories
from include_analyser.core.pipeline.stages.validator import validate_config
from include_analyser.core.services.scanner import list_source_files
from include_analyser.domain.analysis_models import (
    AnalysisResult,
    create_error_result,
    create_success_result,
)
from include_analyser.domain.include_models import GlobalResolutionCache

logger = logging.getLogger(__name__)


def run_analysis(config: Optional[Dict[str, Any]]) -> AnalysisResult:
    """
    Execute the full include analysis.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        AnalysisResult: Status, graph, rendered report and statistics.
    """
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    setup = prepare_directories(cfg)
    if not setup.ok:
        return create_error_result(setup.error)

    logger.info(f"Scanning sources in: {setup.sources_dir}")
    source_files = list_source_files(setup.sources_dir, cfg["extensions"])

    cache: GlobalResolutionCache = {}
    graph = build_dependency_graph(source_files, setup.include_dirs, cache)

    report_lines: List[str]
    if cfg["json_output"]:
        report_lines = render_json_report(source_files, graph)
    else:
        report_lines = render_dependency_report(
            source_files,
            graph,
            root_dir=setup.sources_dir,
            relative=cfg["relative_paths"],
        )

    includes = [r for deps in graph.values() for r in deps]
    summary = {
        "source_files": len(source_files),
        "directives": len(includes),
        "absent": sum(1 for r in includes if r.is_absent),
        "global_spellings": len(cache),
    }
    logger.info(
        f"Analysis finished: {summary['source_files']} files, "
        f"{summary['directives']} directives, {summary['absent']} absent"
    )

    return create_success_result(setup, source_files, graph, report_lines, summary)
