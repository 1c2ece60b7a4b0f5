from __future__ import annotations

"""
Unit tests for the Source File Discovery Service.

Verifies extension filtering, regular-file checks, ordering, symlink
handling and that walk errors do not stop discovery.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Dict

import pytest

from include_analyser.core.services.scanner import (
    is_source_file,
    list_source_files,
    yield_source_files,
)
from include_analyser.domain.constants import SOURCE_EXTENSIONS

MakeTree = Callable[[Dict[str, str]], Path]


@pytest.fixture
def project(make_tree: MakeTree) -> Path:
    root = make_tree({
        "main.c": "",
        "main.cpp": "",
        "api.h": "",
        "api.hpp": "",
        "notes.txt": "",
        "Makefile": "",
        "legacy.C": "",
        "lib/z.c": "",
        "lib/a.h": "",
        "lib/deep/x.hpp": "",
    })
    (root / "dir.h").mkdir()
    return root


def test_only_recognized_regular_files(project: Path) -> None:
    files = list_source_files(str(project))

    for f in files:
        assert os.path.splitext(f)[1] in SOURCE_EXTENSIONS
        assert os.path.isfile(f)

    names = {os.path.relpath(f, project) for f in files}
    assert names == {
        "main.c", "main.cpp", "api.h", "api.hpp",
        os.path.join("lib", "z.c"), os.path.join("lib", "a.h"),
        os.path.join("lib", "deep", "x.hpp"),
    }


def test_listing_is_sorted_per_directory(project: Path) -> None:
    rel = [os.path.relpath(f, project) for f in list_source_files(str(project))]

    assert rel[:4] == ["api.h", "api.hpp", "main.c", "main.cpp"]
    assert rel[4:] == [
        os.path.join("lib", "a.h"),
        os.path.join("lib", "z.c"),
        os.path.join("lib", "deep", "x.hpp"),
    ]


def test_is_source_file_rejects_directories_and_case_variants(project: Path) -> None:
    assert not is_source_file(str(project / "dir.h"))
    assert not is_source_file(str(project / "legacy.C"))
    assert not is_source_file(str(project / "Makefile"))
    assert is_source_file(str(project / "api.h"))


def test_custom_extensions(project: Path) -> None:
    files = list_source_files(str(project), [".txt"])
    assert [os.path.basename(f) for f in files] == ["notes.txt"]


def test_symlinked_directory_is_followed_once(project: Path) -> None:
    """A link back to an ancestor neither loops nor duplicates files."""
    try:
        (project / "lib" / "loop").symlink_to(project, target_is_directory=True)
        (project / "extra").symlink_to(project / "lib" / "deep", target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported")

    files = list_source_files(str(project))

    assert len(files) == len(set(files)) == 7
    assert all(f == os.path.realpath(f) for f in files)


def test_walk_errors_are_logged_and_skipped(
        project: Path,
        caplog: pytest.LogCaptureFixture,
        monkeypatch: pytest.MonkeyPatch,
) -> None:
    """An os.walk error callback logs a warning and discovery carries on."""
    entries = list(os.walk(str(project), followlinks=True))

    def flaky_walk(top, onerror=None, followlinks=False):
        onerror(PermissionError(13, "Permission denied", str(project / "secret")))
        yield from entries

    monkeypatch.setattr("include_analyser.core.services.scanner.os.walk", flaky_walk)
    with caplog.at_level(logging.WARNING):
        files = list(yield_source_files(str(project)))

    assert len(files) == 7
    assert "Permission denied" in caplog.text
