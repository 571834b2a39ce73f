"""Capture-date extraction from embedded EXIF metadata.

The decoder is a plain callable taking an open binary file and returning a
`datetime`, or raising. `pillow_decoder` is the default; tests and callers
can pass any other callable with the same shape.
"""
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, Callable, Optional

from PIL import Image, ExifTags

from .errors import DateResolutionError

Decoder = Callable[[BinaryIO], datetime]

_DATE_FORMATS = ("%Y:%m:%d %H:%M:%S", "%Y-%m-%d %H:%M:%S")

# Exif sub-IFD first, then IFD0
_EXIF_IFD_TAGS = (ExifTags.Base.DateTimeOriginal, ExifTags.Base.DateTimeDigitized)
_IFD0_TAGS = (ExifTags.Base.DateTimeOriginal, ExifTags.Base.DateTime)


@dataclass(frozen=True)
class CaptureDate:
    year: int
    month: int

    @classmethod
    def from_datetime(cls, dt: datetime) -> "CaptureDate":
        return cls(dt.year, dt.month)


def parse_exif_datetime(value) -> Optional[datetime]:
    """Parse an EXIF date string. Returns None for blank or zeroed values."""
    if isinstance(value, bytes):
        value = value.decode("ascii", errors="ignore")
    value = str(value).strip().strip("\x00")
    if not value or value.startswith("0000"):
        return None
    # some cameras append sub-seconds or a timezone
    value = value[:19]
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def pillow_decoder(fh: BinaryIO) -> datetime:
    """Read the capture timestamp from an image file handle using Pillow."""
    with Image.open(fh) as img:
        exif = img.getexif()
    if not exif:
        raise ValueError("no EXIF metadata")
    sub_ifd = exif.get_ifd(ExifTags.IFD.Exif)
    candidates = [sub_ifd.get(tag) for tag in _EXIF_IFD_TAGS]
    candidates += [exif.get(tag) for tag in _IFD0_TAGS]
    for raw in candidates:
        if raw is None:
            continue
        dt = parse_exif_datetime(raw)
        if dt is not None:
            return dt
    raise ValueError("no capture date in EXIF metadata")


def resolve_date(path: Path, decoder: Decoder = pillow_decoder) -> CaptureDate:
    """Return the capture year/month of `path`.

    Every failure (unreadable file, unsupported format, missing tag, bad
    value) is raised as DateResolutionError. The file handle is closed on
    every path.
    """
    try:
        with open(path, "rb") as fh:
            dt = decoder(fh)
    except DateResolutionError:
        raise
    except Exception as e:
        raise DateResolutionError(str(e) or type(e).__name__, path=str(path)) from e
    if not isinstance(dt, datetime) or not 1 <= dt.month <= 12:
        raise DateResolutionError(f"decoder returned an unusable date: {dt!r}", path=str(path))
    return CaptureDate.from_datetime(dt)
