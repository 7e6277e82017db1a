"""Locate icon source files under a style directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from heroicons_gen.errors import IconSourceError

logger = logging.getLogger(__name__)

SVG_EXTENSION = ".svg"


def _raise(error: OSError) -> None:
    raise error


def find_icon_files(root: Path, extension: str = SVG_EXTENSION) -> list[Path]:
    """Every file under ``root`` ending in ``extension``, sorted by file name.

    The sort key is the bare file name, not the full path, so nested
    directories do not affect declaration order. A directory that cannot be
    listed raises instead of silently dropping its icons.
    """
    if not root.is_dir():
        raise IconSourceError(f"Icon directory not found: {root}")

    files: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise):
        for fname in filenames:
            path = Path(dirpath) / fname
            if fname.endswith(extension) and path.is_file():
                files.append(path)

    files.sort(key=lambda p: (p.name, str(p)))
    logger.debug("Found %d %s files under %s", len(files), extension, root)
    return files
