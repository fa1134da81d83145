"""Command line entry point: ``vd2svg <input.xml> <output.svg>``."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from vd2svg.config import settings
from vd2svg.errors import ConversionError
from vd2svg.pipeline import convert_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vd2svg",
        description="Convert an Android VectorDrawable .xml file to .svg",
    )
    parser.add_argument("input", help="VectorDrawable XML file")
    parser.add_argument("output", help="SVG file to write")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(
        level=getattr(logging, settings.vd2svg_cli_log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    # Wrong argument count → usage on stderr, exit status 2
    args = build_parser().parse_args(argv)

    try:
        convert_file(args.input, args.output)
    except ConversionError as e:
        print(f"Failed to convert {args.input} ({e.kind.value}): {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Failed to convert {args.input}: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
