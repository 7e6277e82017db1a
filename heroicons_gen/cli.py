"""
heroicons-gen — compile the heroicons SVG sources into Python shape modules.

Usage:
  heroicons-gen --heroicons path/to/heroicons --to src/icons/
  python -m heroicons_gen --heroicons path/to/heroicons -t src/icons/

Writes outline.py, solid.py and mini.py into the destination directory.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from heroicons_gen import __version__
from heroicons_gen.config import Settings, settings
from heroicons_gen.engine.formatter import create_formatter
from heroicons_gen.engine.pipeline import IconCompiler
from heroicons_gen.errors import IconCompileError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="heroicons-gen",
        description="Generate Python icon shape modules from the heroicons sources",
    )
    parser.add_argument("--heroicons", type=Path, required=True, help="Path to the heroicons repo")
    parser.add_argument(
        "-t", "--to", type=Path, required=True, help="Path to the directory where files will be written"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(config: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def main(argv: list[str] | None = None, config: Settings | None = None) -> int:
    config = config or settings
    args = build_parser().parse_args(argv)
    _configure_logging(config)

    compiler = IconCompiler(
        asset_root=args.heroicons / "src",
        to=args.to,
        formatter=create_formatter(config.formatter, timeout=config.formatter_timeout),
    )
    try:
        compiler.run()
    except (IconCompileError, OSError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
