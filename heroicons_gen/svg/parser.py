"""SVG parser — extracts the geometry the code emitter needs from one icon.

Converts raw SVG string → IconRecord (viewBox, joined path data, fill/clip rule).
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path

from heroicons_gen.engine.naming import check_identifier, to_upper_camel_case
from heroicons_gen.errors import IconSourceError
from heroicons_gen.models.icon import IconRecord

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _find_svg(root: ET.Element) -> ET.Element | None:
    for element in root.iter():
        if isinstance(element.tag, str) and _strip_ns(element.tag) == "svg":
            return element
    return None


def _path_elements(svg: ET.Element) -> list[ET.Element]:
    return [
        el for el in svg.iter()
        if isinstance(el.tag, str) and _strip_ns(el.tag) == "path"
    ]


def _first_attr(elements: list[ET.Element], attr: str) -> str | None:
    for el in elements:
        value = el.get(attr)
        if value is not None:
            return value
    return None


def extract_icon(svg_text: str, name: str = "", source: Path | None = None) -> IconRecord:
    """Parse one icon's markup into an IconRecord.

    Only the first clip-rule and the first fill-rule across all paths are kept;
    they stand for the whole icon.
    """
    where = str(source) if source else "<string>"
    svg_text = _COMMENT_RE.sub("", svg_text).strip()

    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise IconSourceError(f"{where}: malformed SVG: {e}") from e

    svg = _find_svg(root)
    if svg is None:
        raise IconSourceError(f"{where}: no <svg> element found")

    viewbox = svg.get("viewBox")
    if viewbox is None:
        raise IconSourceError(f"{where}: <svg> has no viewBox attribute")

    paths = _path_elements(svg)
    d_values: list[str] = []
    for i, el in enumerate(paths):
        d = el.get("d")
        if d is None:
            raise IconSourceError(f"{where}: <path> #{i + 1} has no d attribute")
        d_values.append(d)

    record = IconRecord(
        name=name,
        viewbox=viewbox,
        path=" ".join(d_values),
        clip_rule=_first_attr(paths, "clip-rule"),
        fill_rule=_first_attr(paths, "fill-rule"),
        source=source,
    )
    logger.debug("Parsed %s: %d paths, viewBox %s", where, len(paths), viewbox)
    return record


def load_icon(path: Path) -> IconRecord:
    """Read an icon file and name it after its file stem."""
    name = to_upper_camel_case(path.stem)
    check_identifier(name, source=path)
    return extract_icon(path.read_text(encoding="utf-8"), name=name, source=path)
