import os
from pathlib import Path

import pytest

from picsort.errors import WalkError
from picsort.formats import parse_formats
from picsort.scanner import scan_candidates


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


def _lock_dirs_named(monkeypatch, name):
    real_scandir = os.scandir

    def guarded_scandir(path):
        if Path(path).name == name:
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    monkeypatch.setattr("picsort.scanner.os.scandir", guarded_scandir)


def test_scan_recurses_and_filters(src):
    _touch(src / "a.jpg")
    _touch(src / "b.txt")
    _touch(src / "nested" / "deeper" / "c.PNG")
    _touch(src / "nested" / "noext")

    found = [c.path.relative_to(src) for c in scan_candidates(src)]
    assert found == [Path("a.jpg"), Path("nested/deeper/c.PNG")]


def test_scan_reports_lowercase_extension(src):
    _touch(src / "IMG_0001.JPG")
    (cand,) = list(scan_candidates(src))
    assert cand.ext == ".jpg"
    assert cand.path.name == "IMG_0001.JPG"


def test_scan_never_yields_directories(src):
    (src / "album.jpg").mkdir()
    _touch(src / "album.jpg" / "inner.jpg")
    found = [c.path for c in scan_candidates(src)]
    assert found == [src / "album.jpg" / "inner.jpg"]


def test_scan_visits_files_and_folders_in_one_lexical_order(src):
    for name in ("b/2.jpg", "a/1.jpg", "c.jpg", "a/0.jpg"):
        _touch(src / name)
    found = [c.path.relative_to(src).as_posix() for c in scan_candidates(src)]
    assert found == ["a/0.jpg", "a/1.jpg", "b/2.jpg", "c.jpg"]


def test_scan_with_explicit_formats(src):
    for name in ("a.jpg", "b.jpeg", "c.png", "d.gif"):
        _touch(src / name)
    found = [c.path.name for c in scan_candidates(src, parse_formats("jpg, PNG"))]
    assert found == ["a.jpg", "c.png"]


def test_scan_does_not_follow_symlinked_directories(src, tmp_path):
    outside = tmp_path / "outside"
    _touch(outside / "elsewhere.jpg")
    (src / "link").symlink_to(outside, target_is_directory=True)
    assert list(scan_candidates(src)) == []


def test_scan_raises_walk_error_for_unreadable_root(tmp_path):
    with pytest.raises(WalkError) as exc:
        list(scan_candidates(tmp_path / "missing"))
    assert isinstance(exc.value.__cause__, OSError)


def test_scan_aborts_when_locked_directory_comes_up(src, monkeypatch):
    _touch(src / "0.jpg")
    _touch(src / "a_locked" / "x.jpg")
    _touch(src / "b.jpg")
    _lock_dirs_named(monkeypatch, "a_locked")

    seen = []
    with pytest.raises(WalkError) as exc:
        for cand in scan_candidates(src):
            seen.append(cand.path.name)
    assert seen == ["0.jpg"]
    assert exc.value.path.endswith("a_locked")
