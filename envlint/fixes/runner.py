"""Running all fixers over the warnings found in one file."""

from __future__ import annotations

from collections.abc import Iterable

from envlint.entries import LineEntry, Warning
from envlint.fixes.base import FixError, Fixer
from envlint.fixes.collection import DuplicatedKeyFixer, EndingBlankLineFixer
from envlint.fixes.line_fixers import (
    ExtraBlankLineFixer,
    IncorrectDelimiterFixer,
    KeyWithoutValueFixer,
    LeadingCharacterFixer,
    LowercaseKeyFixer,
    QuoteCharacterFixer,
    SpaceCharacterFixer,
    TrailingWhitespaceFixer,
)
from envlint.fixes.unordered_key import UnorderedKeyFixer

# Earlier fixers can create new problems for these, so they always run.
_MANDATORY = frozenset({"DuplicatedKey", "UnorderedKey"})


def fixers() -> list[Fixer]:
    """All fixers, in the order they must run.

    Single-line fixers come first, then those that work on the whole file.
    """
    return [
        KeyWithoutValueFixer(),
        LowercaseKeyFixer(),
        SpaceCharacterFixer(),
        TrailingWhitespaceFixer(),
        LeadingCharacterFixer(),
        QuoteCharacterFixer(),
        IncorrectDelimiterFixer(),
        ExtraBlankLineFixer(),
        UnorderedKeyFixer(),
        DuplicatedKeyFixer(),
        EndingBlankLineFixer(),
    ]


def run(
    warnings: list[Warning],
    lines: list[LineEntry],
    skip_checks: Iterable[str] = (),
) -> int:
    """Fix ``lines`` in place and return the number of fixed warnings.

    Returns 0 when there is nothing to fix or when the warnings do not fit
    the lines.
    """
    if not warnings:
        return 0

    skipped = set(skip_checks)
    count = 0
    for fixer in fixers():
        if fixer.name in skipped:
            continue
        fixer_warnings = [w for w in warnings if w.check_name == fixer.name]
        if fixer.name in _MANDATORY or fixer_warnings:
            try:
                count += fixer.fix_warnings(fixer_warnings, lines)
            except FixError:
                return 0

    lines[:] = [line for line in lines if not line.is_deleted]
    return count