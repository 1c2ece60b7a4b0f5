from __future__ import annotations

"""
Directory Setup Stage.

Canonicalizes the sources directory and every global search directory,
checking that each exists and is a directory. Failures come back as an
AnalysisSetup value rather than an exception so that a single caller
decides the exit status.
"""

import logging
from typing import Any, Dict, List

from include_analyser.domain.analysis_models import (
    AnalysisSetup,
    create_setup_error,
    create_setup_success,
)
from include_analyser.infra.fs import canonical_dir

logger = logging.getLogger(__name__)


def prepare_directories(cfg: Dict[str, Any]) -> AnalysisSetup:
    """
    Validate the directories named in a normalized configuration.

    Args:
        cfg: Output of 'validate_config'.

    Returns:
        AnalysisSetup: Canonical directories, or the first failure.
    """
    try:
        sources_dir = canonical_dir(cfg["sources_dir"])
        include_dirs: List[str] = [canonical_dir(d) for d in cfg["include_dirs"]]
    except (FileNotFoundError, NotADirectoryError) as e:
        logger.error(str(e))
        return create_setup_error(str(e))
    except OSError as e:
        msg = f"Failed to canonicalize configured directories: {e}"
        logger.error(msg)
        return create_setup_error(msg)

    logger.debug(f"Sources directory: {sources_dir}; search path: {include_dirs}")
    return create_setup_success(sources_dir, include_dirs)
