"""Icon file name → enum member name."""

from __future__ import annotations

import keyword
import re
from collections.abc import Iterable
from pathlib import Path

from heroicons_gen.errors import DuplicateIconNameError, IconSourceError
from heroicons_gen.models.icon import IconRecord

_SEPARATOR_RE = re.compile(r"[^0-9A-Za-z]+")
# fooBar → foo|Bar, HTMLParser → HTML|Parser
_CASE_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def _words(stem: str) -> list[str]:
    words: list[str] = []
    for chunk in _SEPARATOR_RE.split(stem):
        words.extend(w for w in _CASE_BOUNDARY_RE.split(chunk) if w)
    return words


def to_upper_camel_case(stem: str) -> str:
    """``arrow-narrow-left`` → ``ArrowNarrowLeft``."""
    return "".join(w[0].upper() + w[1:].lower() for w in _words(stem))


def check_identifier(name: str, source: Path | None = None) -> None:
    """Reject names that cannot be an enum member in generated code."""
    where = f"{source}: " if source else ""
    if not name.isidentifier():
        raise IconSourceError(f"{where}{name!r} is not a valid identifier")
    if keyword.iskeyword(name):
        raise IconSourceError(f"{where}{name!r} is a reserved keyword")
    if name.startswith("_"):
        raise IconSourceError(f"{where}{name!r} starts with an underscore")


def check_unique_names(icons: Iterable[IconRecord]) -> None:
    seen: dict[str, IconRecord] = {}
    for icon in icons:
        first = seen.get(icon.name)
        if first is not None:
            raise DuplicateIconNameError(icon.name, [str(first.source), str(icon.source)])
        seen[icon.name] = icon
