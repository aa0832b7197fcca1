"""CLI entry point for psd2fgui."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from .core.exceptions import Psd2FguiError
from .core.models import ConvertOptions
from .core.services import ConversionService
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def _split_build_id_arg(argv: Sequence[str]) -> Tuple[List[str], Optional[str]]:
    """Pull a legacy ``#buildId`` argument out of *argv*."""
    rest: List[str] = []
    build_id = None
    for arg in argv:
        if arg.startswith("#") and len(arg) > 1:
            build_id = arg[1:]
        else:
            rest.append(arg)
    return rest, build_id


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="psd2fgui",
        description="Convert a PSD file into a FairyGUI package",
        epilog="A build id may also be given as '#<id>'.",
    )
    parser.add_argument("psd_file", help="Path to the PSD file")
    parser.add_argument(
        "output", nargs="?", default=None,
        help="Output .fairypackage file, or output folder with --nopack",
    )
    parser.add_argument(
        "--nopack", action="store_true",
        help="Write a package folder instead of a zip archive",
    )
    parser.add_argument(
        "--ignore-font", action="store_true",
        help="Do not write font names on text elements",
    )
    parser.add_argument(
        "--build-id", type=str, default=None,
        help="Reuse a build id to keep resource ids unchanged across runs",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    if not argv:
        parser.print_usage()
        return 0
    argv, legacy_build_id = _split_build_id_arg(argv)
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)
    options = ConvertOptions(ignore_font=args.ignore_font, no_pack=args.nopack)
    service = ConversionService()
    try:
        result = service.convert(
            args.psd_file,
            args.output,
            options,
            build_id=args.build_id or legacy_build_id,
        )
    except (Psd2FguiError, FileNotFoundError, ValueError) as exc:
        logger.error("Conversion failed: %s", exc)
        return 1

    print(f"buildId: {result.build_id}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
