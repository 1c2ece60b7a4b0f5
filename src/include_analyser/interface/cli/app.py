from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
configuration merging, analysis execution and report output. This is
the single place that turns analysis outcomes into process exit codes.
"""

import sys
from contextlib import redirect_stdout
from typing import Any, Dict, List, Optional, TextIO

from include_analyser.core.analysis.tree_renderer import print_dependency_report
from include_analyser.core.pipeline.engine import run_analysis
from include_analyser.domain.config import get_default_config
from include_analyser.infra.logging import LoggingConfig, configure_logging, get_logger
from include_analyser.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, stdout: Optional[TextIO] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        stdout: Stream receiving the report and '--help' text. Defaults to
                sys.stdout. Usage errors always go to sys.stderr.

    Returns:
        int: Process exit code (0 for success, 1 for failure).
    """
    out = stdout if stdout is not None else sys.stdout

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    try:
        with redirect_stdout(out):
            args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits 0 after --help and 2 on usage errors
        return EXIT_SUCCESS if e.code in (0, None) else EXIT_FAILURE

    # 2. Logging bootstrap (diagnostics on stderr)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Merge overrides over defaults
    raw_conf = _merge_config(get_default_config(), cli_args.args_to_overrides(args))

    # 4. Analysis phase
    try:
        result = run_analysis(raw_conf)
    except KeyboardInterrupt:
        logger.warning("Analysis interrupted.")
        return 130
    except Exception as e:
        logger.critical(f"Analysis failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return EXIT_FAILURE

    # 5. Output rendering phase
    print_dependency_report(result.report_lines, stream=out)

    return EXIT_SUCCESS

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known, non-None override values into the base config.
    """
    out = dict(base)
    keys_to_merge = [
        "sources_dir", "include_dirs", "extensions", "relative_paths", "json_output",
    ]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
