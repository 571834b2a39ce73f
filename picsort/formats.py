"""Extension allow-list parsing and classification."""
from typing import FrozenSet, Optional

DEFAULT_EXTENSIONS: FrozenSet[str] = frozenset({
    ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff", ".tif",
    ".heic", ".heif", ".raw", ".cr2", ".nef",
})


def parse_formats(raw: Optional[str]) -> FrozenSet[str]:
    """Turn a comma-separated list like ``"jpg, PNG"`` into ``{".jpg", ".png"}``.

    An empty result means "unset": callers fall back to DEFAULT_EXTENSIONS.
    """
    formats = set()
    for token in (raw or "").split(","):
        token = token.strip().lower()
        if not token:
            continue
        if not token.startswith("."):
            token = "." + token
        formats.add(token)
    return frozenset(formats)


def is_accepted(ext: str, formats: FrozenSet[str]) -> bool:
    ext = ext.lower()
    if formats:
        return ext in formats
    return ext in DEFAULT_EXTENSIONS
