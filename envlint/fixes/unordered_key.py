"""Fixer that puts keys into alphabetical order."""

from __future__ import annotations

from collections.abc import Iterable

from envlint.entries import LineEntry, Warning
from envlint.fixes.base import Fixer


class UnorderedKeyFixer(Fixer):
    """Sorts keys alphabetically within each group of lines.

    A line with a key is moved together with the comments directly above it.
    Groups are separated by blank lines, by the last line of the file and by
    control comments; lines where this check is switched off stay in place.
    """

    name = "UnorderedKey"

    def fix_warnings(self, warnings: Iterable[Warning], lines: list[LineEntry]) -> int:
        warnings = list(warnings)
        start = 0
        end: int | None = None
        disabled = False

        for index, line in enumerate(lines):
            comment = line.control_comment()
            is_control_comment = comment is not None
            controls_this_check = comment is not None and self.name in comment.checks

            if not disabled:
                if not line.is_empty_or_comment():
                    end = index + 1

                if line.is_empty() or line.is_last_line() or is_control_comment:
                    if end is not None:
                        lines[start:end] = self._sorted_part(lines[start:end])
                        end = None
                    start = index + 1

            if controls_this_check:
                disabled = comment.is_disabled()
                start = index + 1

        return len(warnings)

    @staticmethod
    def _sorted_part(part: list[LineEntry]) -> list[LineEntry]:
        """Sort a group, keeping each key line with the comments above it."""
        chunks: list[list[LineEntry]] = []
        pending: list[LineEntry] = []
        for line in part:
            pending.append(line)
            if not line.is_comment():
                chunks.append(pending)
                pending = []

        def sort_key(chunk: list[LineEntry]) -> tuple[bool, str]:
            key = chunk[-1].key
            return (key is not None, key or "")

        ordered = [line for chunk in sorted(chunks, key=sort_key) for line in chunk]
        # Comments after the last key line are never part of a group, but keep
        # them in place should one appear.
        return ordered + pending