"""Lines of an environment file and the warnings raised against them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

LF = "\n"

_EXPORT_PREFIX = "export "
_CONTROL_COMMENT = re.compile(
    r"^#\s*dotenv-linter:(?P<mode>on|off)\s+(?P<checks>.*)$"
)


def remove_invalid_leading_chars(key: str) -> str:
    """Drop everything before the first letter or underscore of ``key``."""
    for index, char in enumerate(key):
        if char.isalpha() or char == "_":
            return key[index:]
    return ""


@dataclass(frozen=True)
class ControlComment:
    """A comment that switches checks on or off for the lines below it."""

    mode: str
    checks: tuple[str, ...]

    def is_disabled(self) -> bool:
        return self.mode == "off"


@dataclass
class LineEntry:
    """One line of an environment file."""

    number: int
    raw_string: str
    total_lines: int
    path: Path | None = None
    is_deleted: bool = False

    @property
    def _trimmed(self) -> str:
        return self.raw_string.strip()

    @property
    def _without_export(self) -> str:
        trimmed = self._trimmed
        if trimmed.startswith(_EXPORT_PREFIX):
            return trimmed[len(_EXPORT_PREFIX):].strip()
        return trimmed

    @property
    def key(self) -> str | None:
        """The key of the line, or None for blank lines and comments."""
        if self.is_empty_or_comment():
            return None
        return self._without_export.partition("=")[0]

    @property
    def value(self) -> str | None:
        """Everything after the first equal sign, or None if there is none."""
        if self.is_empty_or_comment():
            return None
        key, sep, value = self.raw_string.partition("=")
        return value if sep else None

    def is_empty(self) -> bool:
        return not self._trimmed

    def is_comment(self) -> bool:
        return self._trimmed.startswith("#")

    def is_empty_or_comment(self) -> bool:
        return self.is_empty() or self.is_comment()

    def is_last_line(self) -> bool:
        return self.number == self.total_lines

    def mark_as_deleted(self) -> None:
        self.is_deleted = True

    def control_comment(self) -> ControlComment | None:
        """Parse the line as a control comment, if it is one."""
        if not self.is_comment():
            return None
        match = _CONTROL_COMMENT.match(self._trimmed)
        if match is None:
            return None
        checks = tuple(
            check.strip() for check in match.group("checks").split(",") if check.strip()
        )
        return ControlComment(match.group("mode"), checks)


@dataclass
class Warning:
    """A problem found by a check on a particular line."""

    line: LineEntry
    check_name: str
    message: str

    @property
    def line_number(self) -> int:
        return self.line.number