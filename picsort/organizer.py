"""Sort image files into <dest>/YYYY/MM folders by capture date.

Functions:
- destination_for(dest_root, date, src)
- place_file(src, date, dest_root, move=False)
- organize(config, decoder=pillow_decoder)
"""
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
import logging
from typing import List, Optional

from .config import RunConfig, prepare_paths
from .errors import DateResolutionError, PlacementError
from .exif import CaptureDate, Decoder, pillow_decoder, resolve_date
from .scanner import scan_candidates
from .utils import path_taken, safe_copy, safe_move

_LOG = logging.getLogger(__name__)

_PAST_TENSE = {"copy": "Copied", "move": "Moved"}


class Outcome(Enum):
    PLACED = "placed"
    SKIPPED_EXISTING = "exists"
    SKIPPED_NO_DATE = "no-date"
    FAILED = "error"

    @property
    def fatal(self) -> bool:
        return self is Outcome.FAILED


@dataclass(frozen=True)
class PlacementResult:
    src: Path
    dst: Optional[Path]
    outcome: Outcome
    action: str = ""  # "copy" or "move"
    reason: str = ""


@dataclass
class RunReport:
    results: List[PlacementResult] = field(default_factory=list)

    def add(self, result: PlacementResult) -> None:
        self.results.append(result)

    def counts(self) -> Counter:
        return Counter(r.outcome for r in self.results)

    def summary(self) -> str:
        c = self.counts()
        return (
            f"{c[Outcome.PLACED]} placed, "
            f"{c[Outcome.SKIPPED_EXISTING]} already present, "
            f"{c[Outcome.SKIPPED_NO_DATE]} without capture date"
        )


def destination_for(dest_root: Path, date: CaptureDate, src: Path) -> Path:
    """Return <dest_root>/YYYY/MM/<basename of src>."""
    return dest_root / f"{date.year:04d}" / f"{date.month:02d}" / src.name


def place_file(src: Path, date: CaptureDate, dest_root: Path, move: bool = False) -> PlacementResult:
    """Copy or move `src` into its year/month folder under `dest_root`.

    Never overwrites: an existing destination yields SKIPPED_EXISTING and the
    source is left where it is. OS failures come back as a FAILED result;
    the caller decides to abort.
    """
    action = "move" if move else "copy"
    dst = destination_for(dest_root, date, src)
    try:
        dst.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return PlacementResult(src, dst, Outcome.FAILED, action, f"failed to create directory {dst.parent}: {e}")

    try:
        taken = path_taken(dst)
    except OSError as e:
        return PlacementResult(src, dst, Outcome.FAILED, action, f"failed to check {dst}: {e}")
    if taken:
        _LOG.info("Skipping %s: file already exists at destination", dst)
        return PlacementResult(src, dst, Outcome.SKIPPED_EXISTING, action)

    try:
        if move:
            safe_move(src, dst)
        else:
            safe_copy(src, dst)
    except FileExistsError:
        _LOG.info("Skipping %s: file already exists at destination", dst)
        return PlacementResult(src, dst, Outcome.SKIPPED_EXISTING, action)
    except OSError as e:
        return PlacementResult(src, dst, Outcome.FAILED, action, f"failed to {action} {src} to {dst}: {e}")

    result = PlacementResult(src, dst, Outcome.PLACED, action)
    _LOG.info("%s %s to %s", _PAST_TENSE[result.action], src, dst)
    return result


def organize(config: RunConfig, decoder: Decoder = pillow_decoder) -> RunReport:
    """Run the whole pipeline for `config`.

    Returns a RunReport on success. Raises PathError, WalkError or
    PlacementError on the first fatal problem; files placed before that
    stay where they are.
    """
    prepare_paths(config)
    report = RunReport()
    for cand in scan_candidates(config.source, config.formats):
        try:
            date = resolve_date(cand.path, decoder)
        except DateResolutionError as e:
            _LOG.warning("Could not get date for %s: %s", cand.path, e)
            report.add(PlacementResult(cand.path, None, Outcome.SKIPPED_NO_DATE, reason=str(e)))
            continue

        result = place_file(cand.path, date, config.dest, move=config.move)
        report.add(result)
        if result.outcome.fatal:
            raise PlacementError(result.reason, path=str(cand.path))
    return report
