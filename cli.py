#!/usr/bin/env python3
"""Sort photos into year/month folders by EXIF capture date."""
import argparse
import logging
import sys

from picsort.config import load_config
from picsort.errors import ConfigError, FatalError
from picsort.organizer import organize

_LOG = logging.getLogger("picsort")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="picsort", description=__doc__)
    p.add_argument("-source", "--source", default="", help="Source directory containing photos")
    p.add_argument("-dest", "--dest", default="", help="Destination directory for sorted photos")
    p.add_argument("-move", "--move", action="store_true", help="Move files instead of copying them")
    p.add_argument(
        "-format", "--format", dest="formats", default="",
        help="Specific file formats to process (e.g. 'jpg,png'). Leave empty for all supported formats",
    )
    p.add_argument("-verbose", "--verbose", action="store_true", help="Enable debug logging")
    return p


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
    )


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(args.source, args.dest, move=args.move, formats=args.formats)
    except ConfigError as e:
        print(f"{parser.prog}: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    try:
        report = organize(config)
    except FatalError as e:
        _LOG.error("Fatal: %s", e)
        return 1

    _LOG.info("Photo sorting completed successfully! (%s)", report.summary())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
