from datetime import datetime
from pathlib import Path
from typing import Optional

import pytest
from PIL import Image, ExifTags

_EXIF_FMT = "%Y:%m:%d %H:%M:%S"


def write_jpeg(path: Path, when: Optional[str] = None, tag=ExifTags.Base.DateTime) -> Path:
    """Write a tiny JPEG, optionally carrying `when` in the given IFD0 tag."""
    path.parent.mkdir(parents=True, exist_ok=True)
    exif = Image.Exif()
    if when is not None:
        exif[tag] = when
    Image.new("RGB", (4, 4), "red").save(path, "JPEG", exif=exif)
    return path


def write_dated(path: Path, when: str) -> Path:
    """Write a plain file whose content is the date `text_decoder` will return."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(when.encode())
    return path


def text_decoder(fh) -> datetime:
    return datetime.strptime(fh.read().decode(), _EXIF_FMT)


@pytest.fixture
def src(tmp_path):
    p = tmp_path / "src"
    p.mkdir()
    return p


@pytest.fixture
def dest(tmp_path):
    return tmp_path / "dest"
