"""Utility helpers"""
from pathlib import Path
import os


def path_taken(path: Path) -> bool:
    """True if anything occupies `path`, a dangling symlink included.

    Errors other than "not found" (e.g. EACCES) propagate.
    """
    try:
        os.lstat(path)
    except FileNotFoundError:
        return False
    return True


def safe_move(src: Path, dst: Path) -> Path:
    """Rename `src` to `dst`. Raises FileExistsError instead of overwriting."""
    if path_taken(dst):
        raise FileExistsError(f"Destination exists: {dst}")
    os.rename(src, dst)
    return dst


def safe_copy(src: Path, dst: Path) -> Path:
    """Copy the bytes of `src` to a new file `dst`.

    The source is read fully into memory. `dst` is opened with exclusive
    creation, so an existing file raises FileExistsError and is left alone.
    A failed write removes the partial `dst` before re-raising.
    """
    data = src.read_bytes()
    f = dst.open("xb")
    try:
        with f:
            f.write(data)
    except OSError:
        dst.unlink(missing_ok=True)
        raise
    return dst
