from __future__ import annotations

"""
Integration tests for the FileSystem Infrastructure Layer.
"""

import os
from pathlib import Path

import pytest

from include_analyser.infra.fs import (
    canonical_dir,
    canonicalize,
    display_path,
    normalize_path,
    stream_file_lines,
)


def test_normalize_path_fallback_and_home(tmp_path: Path) -> None:
    assert normalize_path("", str(tmp_path)) == os.path.abspath(str(tmp_path))
    assert normalize_path("~", "/") == os.path.abspath(os.path.expanduser("~"))


def test_canonicalize_requires_regular_file(tmp_path: Path) -> None:
    (tmp_path / "a.h").write_text("", encoding="utf-8")
    (tmp_path / "d").mkdir()

    assert canonicalize("a.h", str(tmp_path)) == os.path.realpath(tmp_path / "a.h")
    assert canonicalize("d", str(tmp_path)) is None
    assert canonicalize("missing.h", str(tmp_path)) is None
    assert canonicalize("", str(tmp_path)) is None


def test_canonicalize_rejects_invalid_path_bytes(tmp_path: Path) -> None:
    """A pathname the OS cannot represent is simply not found."""
    assert canonicalize("a\x00b.h", str(tmp_path)) is None
    assert canonicalize("/abs/a\x00b.h") is None


def test_canonicalize_absolute_ignores_base(tmp_path: Path) -> None:
    target = tmp_path / "abs.h"
    target.write_text("", encoding="utf-8")

    assert canonicalize(str(target), "/nonexistent") == os.path.realpath(target)


def test_canonical_dir_errors(tmp_path: Path) -> None:
    (tmp_path / "f").write_text("", encoding="utf-8")

    with pytest.raises(FileNotFoundError):
        canonical_dir(str(tmp_path / "nope"))
    with pytest.raises(NotADirectoryError):
        canonical_dir(str(tmp_path / "f"))
    assert canonical_dir(str(tmp_path)) == os.path.realpath(tmp_path)


def test_display_path() -> None:
    assert display_path("/p/src/a.c", None) == "/p/src/a.c"
    assert display_path("/p/src/x/a.c", "/p/src") == os.path.join("x", "a.c")
    assert display_path("/p/srcx/a.c", "/p/src") == "/p/srcx/a.c"


def test_stream_file_lines_strips_terminators(tmp_path: Path) -> None:
    f = tmp_path / "mixed.c"
    f.write_bytes(b"one\r\ntwo\nthree")

    assert list(stream_file_lines(str(f))) == ["one", "two", "three"]


def test_stream_file_lines_missing_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        list(stream_file_lines(str(tmp_path / "none.c")))
