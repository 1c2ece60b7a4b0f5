from __future__ import annotations

"""
Dependency Graph Export.

Serializes the graph into plain JSON-compatible structures for the
'--json' output mode.
"""

import json
from dataclasses import asdict
from typing import Any, Dict, List, Sequence

from include_analyser.domain.include_models import DependencyGraph


def graph_to_dict(source_files: Sequence[str], graph: DependencyGraph) -> Dict[str, Any]:
    """
    Flatten the graph into a dictionary keyed by source file.

    Each include becomes {"pathname", "is_global", "path"}, with "path"
    set to null for absent includes.
    """
    files: Dict[str, List[Dict[str, Any]]] = {}
    for source_file in source_files:
        files[source_file] = [
            {**asdict(resolved.directive), "path": resolved.path}
            for resolved in graph.get(source_file, [])
        ]
    return {"files": files}


def render_json_report(source_files: Sequence[str], graph: DependencyGraph) -> List[str]:
    """Render the graph as indented JSON, split into lines."""
    payload = json.dumps(graph_to_dict(source_files, graph), ensure_ascii=False, indent=2)
    return payload.splitlines()
