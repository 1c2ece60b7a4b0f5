from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the analysis engine.
"""

import argparse
from typing import Any, Dict

from include_analyser.domain.constants import APP_NAME

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the analyser CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        usage=f"{APP_NAME} [OPTION]... DIRECTORY",
        description="Print the #include dependency tree of every C/C++ file in DIRECTORY.",
    )

    p.add_argument(
        "sources_dir",
        metavar="DIRECTORY",
        help="directory with the source code",
    )
    p.add_argument(
        "-I", "--include-dir",
        dest="include_dirs",
        metavar="<dir>",
        action="append",
        default=[],
        help="add the directory to the header files' search paths",
    )

    # --- Report Format ---
    p.add_argument(
        "--relative",
        dest="relative_paths",
        action="store_true",
        help="show paths inside DIRECTORY relative to it",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="print the dependency graph as JSON instead of a tree",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="elevate logging verbosity to DEBUG",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        metavar="<file>",
        default=None,
        help="also write diagnostics to a rotating log file",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "sources_dir": args.sources_dir,
        "include_dirs": list(args.include_dirs),
    }

    if args.relative_paths:
        overrides["relative_paths"] = True
    if args.json_output:
        overrides["json_output"] = True

    return overrides
