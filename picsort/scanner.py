"""Recursive directory walk yielding candidate image files."""
from dataclasses import dataclass
from pathlib import Path
import os
import logging
from typing import FrozenSet, Iterator

from .errors import WalkError
from .formats import is_accepted

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileCandidate:
    path: Path
    ext: str


def _raise_walk_error(err: OSError) -> None:
    raise WalkError(f"Error reading {err.filename}: {err.strerror or err}", path=err.filename) from err


def _sorted_entries(directory: Path):
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda e: e.name)
    except OSError as e:
        _raise_walk_error(e)


def scan_candidates(root: Path, formats: FrozenSet[str] = frozenset()) -> Iterator[FileCandidate]:
    """Yield files under `root` whose extension passes the format filter.

    Files and subdirectories of a directory are visited together in lexical
    name order, depth-first, so `a/0.jpg` comes before `b.jpg`. Directories
    are only descended into, never yielded, and symlinked directories are not
    followed. Rejected files are skipped silently. An OS error while listing
    a directory raises WalkError when that directory's turn comes, which
    stops iteration.
    """
    for entry in _sorted_entries(root):
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            _raise_walk_error(e)
        if is_dir:
            yield from scan_candidates(Path(entry.path), formats)
            continue
        ext = os.path.splitext(entry.name)[1].lower()
        if not is_accepted(ext, formats):
            continue
        yield FileCandidate(path=Path(entry.path), ext=ext)
