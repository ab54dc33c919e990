import os
from pathlib import Path

import pytest

from filescout.adapters.local_fs import LocalFS
from filescout.domain.errors import FilesystemError


def test_lists_files_and_directories_separately(tmp_path: Path):
    (tmp_path / "b.txt").write_text("b")
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "nested.txt").write_text("n")

    fs = LocalFS(sort=True)
    assert fs.list_files(tmp_path) == [tmp_path / "a.txt", tmp_path / "b.txt"]
    assert fs.list_directories(tmp_path) == [tmp_path / "sub"]


def test_relative_root_gives_relative_paths(tmp_path: Path, monkeypatch):
    (tmp_path / "x.txt").write_text("x")
    monkeypatch.chdir(tmp_path)

    files = LocalFS().list_files(Path("."))
    assert files == [Path(".") / "x.txt"]
    assert not files[0].is_absolute()


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_directory_symlinks_are_not_descended(tmp_path: Path):
    real = tmp_path / "real"
    real.mkdir()
    try:
        (tmp_path / "link").symlink_to(real, target_is_directory=True)
    except OSError:
        pytest.skip("cannot create symlink here")

    assert LocalFS().list_directories(tmp_path) == [real]


def test_missing_directory_raises_filesystem_error(tmp_path: Path):
    missing = tmp_path / "nope"
    with pytest.raises(FilesystemError) as exc:
        LocalFS().list_files(missing)
    assert exc.value.path == missing


def test_listing_a_file_raises_filesystem_error(tmp_path: Path):
    f = tmp_path / "f.txt"
    f.write_text("hello")
    with pytest.raises(FilesystemError):
        LocalFS().list_directories(f)


def test_stat_reports_size(tmp_path: Path):
    f = tmp_path / "f.txt"
    f.write_bytes(b"12345")
    meta = LocalFS().stat(f)
    assert meta["size"] == 5
    assert meta["path"] == str(f)


def test_stat_on_missing_file_raises(tmp_path: Path):
    with pytest.raises(FilesystemError):
        LocalFS().stat(tmp_path / "gone.bin")
