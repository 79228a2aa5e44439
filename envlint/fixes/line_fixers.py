"""Fixers that repair one line at a time."""

from __future__ import annotations

from envlint.entries import LineEntry, remove_invalid_leading_chars
from envlint.fixes.base import Fixer


class KeyWithoutValueFixer(Fixer):
    """Appends an equal sign to a bare key."""

    name = "KeyWithoutValue"

    def fix_line(self, line: LineEntry) -> bool:
        line.raw_string += "="
        return True


class LowercaseKeyFixer(Fixer):
    """Turns the key into upper case."""

    name = "LowercaseKey"

    def fix_line(self, line: LineEntry) -> bool:
        key, value = line.key, line.value
        if key is None or value is None:
            return False
        line.raw_string = f"{key.upper()}={value}"
        return True


class SpaceCharacterFixer(Fixer):
    """Removes spaces around the equal sign."""

    name = "SpaceCharacter"

    def fix_line(self, line: LineEntry) -> bool:
        key, value = line.key, line.value
        if key is None or value is None:
            return False
        line.raw_string = f"{key.rstrip()}={value.lstrip()}"
        return True


class TrailingWhitespaceFixer(Fixer):
    """Strips whitespace from the end of the line."""

    name = "TrailingWhitespace"

    def fix_line(self, line: LineEntry) -> bool:
        line.raw_string = line.raw_string.rstrip()
        return True


class LeadingCharacterFixer(Fixer):
    """Drops characters that may not start a key."""

    name = "LeadingCharacter"

    def fix_line(self, line: LineEntry) -> bool:
        key, value = line.key, line.value
        if key is None or value is None:
            return False
        line.raw_string = f"{remove_invalid_leading_chars(key)}={value}"
        return True


class QuoteCharacterFixer(Fixer):
    """Removes single and double quotes from the value."""

    name = "QuoteCharacter"

    def fix_line(self, line: LineEntry) -> bool:
        key, value = line.key, line.value
        if key is None or value is None:
            return False
        bare = value.replace("'", "").replace('"', "")
        line.raw_string = f"{key}={bare}"
        return True


class IncorrectDelimiterFixer(Fixer):
    """Replaces non-alphanumeric characters inside the key with underscores."""

    name = "IncorrectDelimiter"

    def fix_line(self, line: LineEntry) -> bool:
        key, value = line.key, line.value
        if key is None or value is None:
            return False
        start = len(key) - len(remove_invalid_leading_chars(key))
        cleaned = "".join(c if c.isalnum() else "_" for c in key[start:])
        line.raw_string = f"{key[:start]}{cleaned}={value}"
        return True


class ExtraBlankLineFixer(Fixer):
    """Marks a superfluous blank line for removal."""

    name = "ExtraBlankLine"

    def fix_line(self, line: LineEntry) -> bool:
        line.mark_as_deleted()
        return True