"""Render a StyleSet into a Python module of icon shapes.

The module is built by template substitution: one whole-file template plus a
per-icon clause template rendered once per icon and concatenated.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from string import Template

from heroicons_gen.engine.formatter import Formatter, NullFormatter
from heroicons_gen.errors import IconSourceError
from heroicons_gen.models.icon import IconRecord, StyleSet

logger = logging.getLogger(__name__)

MODULE_TEMPLATE = Template('''\
"""Heroicons $style icon shapes.

Generated by heroicons-gen. Do not edit by hand.
"""

from __future__ import annotations

import enum
from xml.sax.saxutils import quoteattr

VIEW_BOX = $viewbox


class Shape(enum.Enum):
    """All available icon shapes.

    See the members for the shape names. These names are always the
    CamelCase version of the original heroicon name. So for example,
    "arrow-narrow-left" becomes ``ArrowNarrowLeft``.
    """

$names

    def view_box(self) -> str:
        return VIEW_BOX

    def path(self) -> str:
        attrs = " ".join(
            f"{_MARKUP_NAMES[key]}={quoteattr(value)}"
            for key, value in _ATTRIBUTES[self].items()
        )
        return f"<path {attrs}/>"


_MARKUP_NAMES = {"d": "d", "clip_rule": "clip-rule", "fill_rule": "fill-rule"}

_ATTRIBUTES: dict[Shape, dict[str, str]] = {
$paths
}


def attributes(shape: Shape) -> dict[str, str]:
    """Rendering attributes for ``shape``: ``d`` plus any clip or fill rule."""
    return dict(_ATTRIBUTES[shape])
''')

NAME_TEMPLATE = Template("    $name = enum.auto()")

PATH_TEMPLATE = Template("    Shape.$name: {$attrs},")


def _literal(value: str) -> str:
    """Double-quoted Python string literal; non-ASCII text is kept verbatim."""
    return json.dumps(value, ensure_ascii=False)


def _render_attrs(icon: IconRecord) -> str:
    return ", ".join(f"{_literal(k)}: {_literal(v)}" for k, v in icon.attributes().items())


def _check_viewboxes(style_set: StyleSet) -> None:
    expected = style_set.viewbox
    mismatched = [i.name for i in style_set.icons if i.viewbox != expected]
    if mismatched:
        logger.warning(
            "%s: %d icons differ from viewBox %r (using first icon's): %s",
            style_set.style,
            len(mismatched),
            expected,
            ", ".join(mismatched),
        )


def render_style_module(style_set: StyleSet) -> str:
    """Generated source for one style."""
    if not style_set.icons:
        raise IconSourceError(f"No icons found for style {style_set.style!r}")

    _check_viewboxes(style_set)

    names = "\n".join(NAME_TEMPLATE.substitute(name=i.name) for i in style_set.icons)
    paths = "\n".join(
        PATH_TEMPLATE.substitute(name=i.name, attrs=_render_attrs(i)) for i in style_set.icons
    )
    return MODULE_TEMPLATE.substitute(
        style=style_set.style,
        viewbox=_literal(style_set.viewbox),
        names=names,
        paths=paths,
    )


def write_style_module(style_set: StyleSet, formatter: Formatter | None = None) -> Path:
    """Write the style's module, then run the formatter on it."""
    code = render_style_module(style_set)
    to = style_set.output_path
    with open(to, "w", encoding="utf-8", newline="\n") as f:
        f.write(code)
    logger.info("Wrote %d %s icons to %s", len(style_set.icons), style_set.style, to)

    (formatter or NullFormatter()).format(to)
    return to
