"""The capability every generated ``Shape`` member provides.

Rendering components accept any ``IconShape``, so shapes from the
``outline``, ``solid`` and ``mini`` modules are interchangeable.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IconShape(Protocol):
    def view_box(self) -> str:
        """The viewBox shared by every icon of the shape's style."""
        ...

    def path(self) -> str:
        """``<path/>`` markup for the icon."""
        ...
