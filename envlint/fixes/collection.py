"""Fixers that work on the whole collection of lines at once."""

from __future__ import annotations

from collections.abc import Iterable

from envlint.entries import LF, LineEntry, Warning
from envlint.fixes.base import FixError, Fixer


class DuplicatedKeyFixer(Fixer):
    """Comments out every repeated key after its first appearance.

    Lines where this check is switched off by a control comment are left alone.
    """

    name = "DuplicatedKey"

    def fix_warnings(self, warnings: Iterable[Warning], lines: list[LineEntry]) -> int:
        warnings = list(warnings)
        seen: set[str] = set()
        disabled = False

        for line in lines:
            comment = line.control_comment()
            if comment is not None and self.name in comment.checks:
                disabled = comment.is_disabled()
            if disabled:
                continue

            key = line.key
            if key is None:
                continue
            if key in seen:
                self.fix_line(line)
            else:
                seen.add(key)

        return len(warnings)

    def fix_line(self, line: LineEntry) -> bool:
        line.raw_string = f"# {line.raw_string}"
        return True


class EndingBlankLineFixer(Fixer):
    """Adds a blank line at the end of the file when it is missing."""

    name = "EndingBlankLine"

    def fix_warnings(self, warnings: Iterable[Warning], lines: list[LineEntry]) -> int:
        if not lines:
            raise FixError("cannot add an ending blank line to an empty file")

        if lines[-1].raw_string.endswith(LF):
            return 0

        first = lines[0]
        lines.append(
            LineEntry(
                number=len(lines) + 1,
                raw_string=LF,
                total_lines=first.total_lines,
                path=first.path,
            )
        )
        return 1