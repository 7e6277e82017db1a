"""Best-effort formatting of generated files.

Formatting is cosmetic: the generated code is valid without it, so every
failure here is logged and swallowed.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class Formatter(Protocol):
    def format(self, path: Path) -> bool:
        """Format ``path`` in place. Returns False if formatting did not happen."""
        ...


class NullFormatter:
    def format(self, path: Path) -> bool:
        return False


class SubprocessFormatter:
    """Runs an external formatter command with the file path appended."""

    def __init__(self, command: list[str], timeout: float = 30.0) -> None:
        self.command = list(command)
        self.timeout = timeout

    def format(self, path: Path) -> bool:
        argv = [*self.command, str(path)]
        try:
            result = subprocess.run(
                argv, capture_output=True, text=True, errors="replace", timeout=self.timeout
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("Formatter %s failed on %s: %s", self.command[0], path, e)
            return False

        if result.returncode != 0:
            logger.warning(
                "Formatter %s exited %d on %s: %s",
                self.command[0],
                result.returncode,
                path,
                result.stderr.strip(),
            )
            return False

        logger.debug("Formatted %s", path)
        return True


def create_formatter(command: list[str] | None, timeout: float = 30.0) -> Formatter:
    if not command:
        return NullFormatter()
    return SubprocessFormatter(command, timeout=timeout)
