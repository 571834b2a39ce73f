"""picsort package init"""
from . import config, errors, exif, formats, organizer, scanner, utils

__all__ = ["config", "errors", "exif", "formats", "organizer", "scanner", "utils"]
