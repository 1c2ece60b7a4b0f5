from __future__ import annotations

"""
Unit tests for the Configuration Validation Stage.

Verifies type coercion, default injection and strict mode.
"""

import pytest

from include_analyser.core.pipeline.stages.validator import validate_config
from include_analyser.domain.config import get_default_config


def test_validate_config_defaults_for_non_dict() -> None:
    conf, warnings = validate_config(None)

    assert conf == get_default_config()
    assert warnings and "Invalid config type" in warnings[0]


def test_validate_config_strict_raises() -> None:
    with pytest.raises(TypeError):
        validate_config("not a dict", strict=True)


def test_validate_config_fills_missing_keys() -> None:
    conf, warnings = validate_config({"sources_dir": "/src"})

    assert warnings == []
    assert conf["sources_dir"] == "/src"
    assert conf["include_dirs"] == []
    assert conf["extensions"] == [".h", ".hpp", ".c", ".cpp"]
    assert conf["relative_paths"] is False
    assert conf["json_output"] is False


def test_validate_config_coerces_single_include_dir() -> None:
    conf, _ = validate_config({"include_dirs": "/usr/include"})
    assert conf["include_dirs"] == ["/usr/include"]


def test_validate_config_keeps_include_dir_order() -> None:
    conf, _ = validate_config({"include_dirs": ("/b", "/a", "/c")})
    assert conf["include_dirs"] == ["/b", "/a", "/c"]


def test_validate_config_rejects_bad_types() -> None:
    conf, warnings = validate_config({
        "include_dirs": [1, 2],
        "relative_paths": "yes",
        "sources_dir": 42,
    })

    assert conf["include_dirs"] == []
    assert conf["relative_paths"] is False
    assert conf["sources_dir"] == get_default_config()["sources_dir"]
    assert len(warnings) == 3


def test_validate_config_drops_extensions_without_dot() -> None:
    conf, warnings = validate_config({"extensions": [".c", "h"]})

    assert conf["extensions"] == [".c"]
    assert any("leading dot" in w for w in warnings)
