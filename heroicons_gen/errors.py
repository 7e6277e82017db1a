"""Compiler errors. Every input-structure problem aborts the run."""

from __future__ import annotations


class IconCompileError(Exception):
    """Base class for errors raised while compiling an icon set."""


class IconSourceError(IconCompileError, ValueError):
    """An icon source tree or file is missing something the compiler needs."""


class DuplicateIconNameError(IconSourceError):
    """Two source files in one style normalize to the same identifier."""

    def __init__(self, name: str, sources: list[str]) -> None:
        self.name = name
        self.sources = sources
        super().__init__(f"Duplicate icon name {name!r} from: {', '.join(sources)}")
