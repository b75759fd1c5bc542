"""Tests for filesystem and environment helpers."""

import os

import pytest

from windriver._utils import (
    copy_directory,
    expand_environment_variables,
    remove_directory,
)
from windriver.errors import ExternalCallError


def test_expand_percent_variables(monkeypatch):
    monkeypatch.setenv("WINDRIVER_TEST_ROOT", "/data/root")
    assert expand_environment_variables("%WINDRIVER_TEST_ROOT%/Packages") == (
        "/data/root/Packages"
    )


def test_expand_leaves_unknown_variables(monkeypatch):
    monkeypatch.delenv("WINDRIVER_MISSING", raising=False)
    assert expand_environment_variables("%WINDRIVER_MISSING%/x") == "%WINDRIVER_MISSING%/x"


def test_copy_directory_creates_destination(tmp_path):
    src = tmp_path / "src"
    (src / "nested").mkdir(parents=True)
    (src / "a.txt").write_text("a")
    (src / "nested" / "b.bin").write_bytes(b"\x00\x01")

    dst = tmp_path / "out" / "dst"
    copy_directory(str(src), str(dst))

    assert (dst / "a.txt").read_text() == "a"
    assert (dst / "nested" / "b.bin").read_bytes() == b"\x00\x01"


def test_copy_directory_overwrites_existing(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "a.txt").write_text("new")
    dst = tmp_path / "dst"
    dst.mkdir()
    (dst / "a.txt").write_text("old")
    (dst / "keep.txt").write_text("keep")

    copy_directory(str(src), str(dst))

    assert (dst / "a.txt").read_text() == "new"
    assert (dst / "keep.txt").read_text() == "keep"


def test_copy_directory_missing_source(tmp_path):
    with pytest.raises(ExternalCallError) as exc_info:
        copy_directory(str(tmp_path / "nope"), str(tmp_path / "dst"))
    assert exc_info.value.operation == "CopyDirectory"
    assert not os.path.exists(tmp_path / "dst")


def test_remove_directory(tmp_path):
    target = tmp_path / "state"
    (target / "nested").mkdir(parents=True)
    (target / "nested" / "f.txt").write_text("x")

    remove_directory(str(target))
    remove_directory(str(target))

    assert not target.exists()
