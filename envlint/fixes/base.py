"""The common behaviour of all fixers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import ClassVar

from envlint.entries import LineEntry, Warning


class FixError(Exception):
    """Raised when warnings do not match the lines they are said to belong to."""


class Fixer:
    """Repairs the lines named by the warnings of one check."""

    name: ClassVar[str] = ""

    def fix_warnings(self, warnings: Iterable[Warning], lines: list[LineEntry]) -> int:
        """Fix every line a warning points at; return how many were fixed."""
        count = 0
        for warning in warnings:
            index = warning.line_number - 1
            if not 0 <= index < len(lines):
                raise FixError(
                    f"warning for line {warning.line_number} but only {len(lines)} lines"
                )
            if self.fix_line(lines[index]):
                count += 1
        return count

    def fix_line(self, line: LineEntry) -> bool:
        """Fix a single line; return True if it was fixed."""
        return False