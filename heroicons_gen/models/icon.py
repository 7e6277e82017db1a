"""Icon records collected during a single compiler run."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class IconRecord(BaseModel):
    """Geometry of one icon source file."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    viewbox: str
    # All `d` attributes, space-joined in document order
    path: str
    clip_rule: str | None = None
    fill_rule: str | None = None
    source: Path | None = None

    def attributes(self) -> dict[str, str]:
        """Rendering attributes, optional rules only when present."""
        attrs = {"d": self.path}
        if self.clip_rule is not None:
            attrs["clip_rule"] = self.clip_rule
        if self.fill_rule is not None:
            attrs["fill_rule"] = self.fill_rule
        return attrs


class StyleSet(BaseModel):
    """All icons of one visual style, in source filename order."""

    model_config = ConfigDict(frozen=True)

    style: str
    source_subdir: str
    output_path: Path
    icons: tuple[IconRecord, ...] = Field(default_factory=tuple)

    @property
    def viewbox(self) -> str:
        return self.icons[0].viewbox

    @property
    def names(self) -> list[str]:
        return [icon.name for icon in self.icons]
