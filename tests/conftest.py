"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


# Shaped like the heroicons sources

ARROW_LEFT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" fill="none" viewBox="0 0 24 24" stroke-width="1.5" stroke="currentColor" aria-hidden="true" data-slot="icon">
  <path stroke-linecap="round" stroke-linejoin="round" d="M1"/>
</svg>'''

TRASH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="currentColor" aria-hidden="true" data-slot="icon">
  <path fill-rule="evenodd" d="M2"/>
</svg>'''

TWO_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M1"/>
  <path d="M2"/>
</svg>'''

SECOND_PATH_RULES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20" fill="currentColor">
  <path d="M1"/>
  <path fill-rule="evenodd" clip-rule="evenodd" d="M2"/>
  <path fill-rule="nonzero" clip-rule="nonzero" d="M3"/>
</svg>'''

MINI_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20" fill="currentColor" aria-hidden="true">
  <path fill-rule="evenodd" d="M10 18a8 8 0 100-16 8 8 0 000 16z" clip-rule="evenodd"/>
</svg>'''


def simple_svg(d: str = "M1", viewbox: str = "0 0 24 24", **attrs: str) -> str:
    extra = "".join(f' {k.replace("_", "-")}="{v}"' for k, v in attrs.items())
    return f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{viewbox}"><path d="{d}"{extra}/></svg>'


def write_icons(directory: Path, icons: dict[str, str]) -> Path:
    """Write ``{file name: svg text}`` under ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    for name, text in icons.items():
        target = directory / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    return directory


class RecordingFormatter:
    """Stands in for the external formatter."""

    def __init__(self, result: bool = True) -> None:
        self.result = result
        self.calls: list[Path] = []

    def format(self, path: Path) -> bool:
        self.calls.append(path)
        return self.result


@pytest.fixture
def heroicons_repo(tmp_path: Path) -> Path:
    """A heroicons checkout with one icon per style."""
    src = tmp_path / "heroicons" / "src"
    write_icons(src / "24" / "outline", {"arrow-left.svg": ARROW_LEFT_SVG, "trash.svg": TRASH_SVG})
    write_icons(src / "24" / "solid", {"trash.svg": TRASH_SVG})
    write_icons(src / "20" / "solid", {"check-circle.svg": MINI_SVG})
    return tmp_path / "heroicons"


@pytest.fixture
def recording_formatter() -> RecordingFormatter:
    return RecordingFormatter()


def load_generated(path: Path, module_name: str | None = None):
    """Import a generated shape module from disk."""
    import importlib.util

    spec = importlib.util.spec_from_file_location(module_name or f"generated_{path.stem}", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
