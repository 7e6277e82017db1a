"""Compiler orchestrator — discovery → extraction → naming → emission, per style."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from heroicons_gen.engine.emitter import write_style_module
from heroicons_gen.engine.formatter import Formatter, NullFormatter
from heroicons_gen.engine.naming import check_unique_names
from heroicons_gen.engine.styles import ALL_STYLES, Style, style_to_dir
from heroicons_gen.models.icon import IconRecord, StyleSet
from heroicons_gen.svg.discovery import find_icon_files
from heroicons_gen.svg.parser import load_icon

logger = logging.getLogger(__name__)


def make_icons(src_dir: Path) -> list[IconRecord]:
    """Parse every icon under ``src_dir`` in file name order."""
    return [load_icon(path) for path in find_icon_files(src_dir)]


def build_style_set(style: Style | str, asset_root: Path, to: Path) -> StyleSet:
    subdir = style_to_dir(style)
    key = Style(style).value

    icons = make_icons(asset_root / subdir)
    check_unique_names(icons)
    logger.info("%s: %d icons from %s", key, len(icons), subdir)
    return StyleSet(
        style=key,
        source_subdir=subdir,
        output_path=to / f"{key}.py",
        icons=tuple(icons),
    )


def compile_style(
    style: Style | str,
    asset_root: Path,
    to: Path,
    formatter: Formatter | None = None,
) -> Path:
    style_set = build_style_set(style, asset_root, to)
    return write_style_module(style_set, formatter)


class IconCompiler:
    """Compiles every heroicons style into one module each."""

    def __init__(
        self,
        asset_root: Path,
        to: Path,
        formatter: Formatter | None = None,
        styles: tuple[Style | str, ...] = ALL_STYLES,
    ) -> None:
        self.asset_root = Path(asset_root)
        self.to = Path(to)
        self.formatter = formatter or NullFormatter()
        self.styles = tuple(Style(s) for s in styles)

    def run(self) -> list[Path]:
        """Compile each style in turn. A failure leaves earlier outputs in place."""
        start = time.perf_counter()
        self.to.mkdir(parents=True, exist_ok=True)

        written: list[Path] = []
        for style in self.styles:
            t0 = time.perf_counter()
            written.append(compile_style(style, self.asset_root, self.to, self.formatter))
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.1fms", style.value, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info("Compiled %d styles in %.0fms", len(written), total)
        return written


def compile_all(asset_root: Path, to: Path, formatter: Formatter | None = None) -> list[Path]:
    return IconCompiler(asset_root, to, formatter).run()
