from __future__ import annotations

"""
Unit tests for the Directory Setup Stage.

Failures must surface as AnalysisSetup values, never as exceptions.
"""

import os
from pathlib import Path
from unittest.mock import patch

from include_analyser.core.pipeline.stages.setup import prepare_directories


def _cfg(sources: str, *includes: str):
    return {"sources_dir": sources, "include_dirs": list(includes)}


def test_prepare_directories_success(tmp_path: Path) -> None:
    (tmp_path / "src").mkdir()
    (tmp_path / "inc").mkdir()

    setup = prepare_directories(_cfg(str(tmp_path / "src"), str(tmp_path / "inc")))

    assert setup.ok
    assert setup.sources_dir == os.path.realpath(tmp_path / "src")
    assert setup.include_dirs == [os.path.realpath(tmp_path / "inc")]


def test_prepare_directories_relative_paths(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "src").mkdir()
    monkeypatch.chdir(tmp_path)

    setup = prepare_directories(_cfg("src"))

    assert setup.ok
    assert setup.sources_dir == os.path.realpath(tmp_path / "src")


def test_prepare_directories_missing_source(tmp_path: Path) -> None:
    setup = prepare_directories(_cfg(str(tmp_path / "nope")))

    assert not setup.ok
    assert "doesn't exist" in setup.error


def test_prepare_directories_include_dir_is_a_file(tmp_path: Path) -> None:
    (tmp_path / "src").mkdir()
    (tmp_path / "file.h").write_text("", encoding="utf-8")

    setup = prepare_directories(_cfg(str(tmp_path / "src"), str(tmp_path / "file.h")))

    assert not setup.ok
    assert "isn't a directory" in setup.error


def test_prepare_directories_unexpected_os_error(tmp_path: Path) -> None:
    with patch(
        "include_analyser.core.pipeline.stages.setup.canonical_dir",
        side_effect=PermissionError("denied"),
    ):
        setup = prepare_directories(_cfg(str(tmp_path)))

    assert not setup.ok
    assert "denied" in setup.error
