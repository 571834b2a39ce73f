"""Run configuration and source/destination validation."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Optional
import logging

from .errors import ConfigError, PathError
from .formats import parse_formats

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunConfig:
    source: Path
    dest: Path
    move: bool = False
    # empty means the built-in image list applies
    formats: FrozenSet[str] = field(default_factory=frozenset)


def load_config(source: Optional[str], dest: Optional[str], move: bool = False, formats: Optional[str] = None) -> RunConfig:
    """Build a RunConfig from raw argument values.

    Raises ConfigError if `source` or `dest` is missing or blank. No
    filesystem access happens here; see `prepare_paths`.
    """
    missing = [name for name, value in (("source", source), ("dest", dest)) if not (value or "").strip()]
    if missing:
        raise ConfigError(f"Missing required argument(s): {', '.join(missing)}")
    return RunConfig(
        source=Path(source).expanduser(),
        dest=Path(dest).expanduser(),
        move=bool(move),
        formats=parse_formats(formats),
    )


def prepare_paths(config: RunConfig) -> None:
    """Check the source directory and create the destination root if needed."""
    src = config.source
    try:
        is_dir = src.is_dir()
    except OSError as e:
        raise PathError(f"Cannot access source directory {src}: {e}", path=str(src)) from e
    if not is_dir:
        raise PathError(f"Source directory does not exist or is not a directory: {src}", path=str(src))
    try:
        config.dest.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PathError(f"Failed to create destination directory {config.dest}: {e}", path=str(config.dest)) from e
    _LOG.debug("Sorting %s into %s (move=%s)", src, config.dest, config.move)
