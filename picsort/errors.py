"""Exception hierarchy for picsort.

Fatal errors abort the whole run. `DateResolutionError` is the only error
the pipeline recovers from (the file is skipped).
"""
from typing import Optional


class PicsortError(Exception):
    """Base error for the project."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ConfigError(PicsortError):
    """Missing or empty required argument."""


class DateResolutionError(PicsortError):
    """No usable capture date could be read from a file."""


class FatalError(PicsortError):
    pass


class PathError(FatalError):
    pass


class WalkError(FatalError):
    pass


class PlacementError(FatalError):
    pass
