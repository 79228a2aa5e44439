from dataclasses import replace

from envlint.entries import LineEntry, Warning
from envlint.fixes.runner import fixers, run


def line_entry(number, total, raw):
    return LineEntry(number=number, raw_string=raw, total_lines=total)


def blank_line_entry(number, total):
    return LineEntry(number=number, raw_string="\n", total_lines=total)


def lowercase_lines():
    return [
        line_entry(1, 5, "A1=1"),
        line_entry(2, 5, "A2=2"),
        line_entry(3, 5, "a0=0"),
        line_entry(4, 5, "a2=2"),
        blank_line_entry(5, 5),
    ]


def lowercase_warnings(lines):
    return [
        Warning(replace(lines[2]), "LowercaseKey", "The a0 key should be in uppercase"),
        Warning(replace(lines[3]), "LowercaseKey", "The a2 key should be in uppercase"),
    ]


def test_fixers_order():
    assert [f.name for f in fixers()] == [
        "KeyWithoutValue",
        "LowercaseKey",
        "SpaceCharacter",
        "TrailingWhitespace",
        "LeadingCharacter",
        "QuoteCharacter",
        "IncorrectDelimiter",
        "ExtraBlankLine",
        "UnorderedKey",
        "DuplicatedKey",
        "EndingBlankLine",
    ]


def test_run_with_empty_warnings():
    lines = [line_entry(1, 2, "A=B"), blank_line_entry(2, 2)]
    assert run([], lines, []) == 0
    assert [line.raw_string for line in lines] == ["A=B", "\n"]


def test_run_with_fixable_warning():
    lines = [line_entry(1, 3, "A=B"), line_entry(2, 3, "c=d"), blank_line_entry(3, 3)]
    warnings = [
        Warning(replace(lines[1]), "LowercaseKey", "The c key should be in uppercase")
    ]

    assert run(warnings, lines, []) == 1
    assert lines[1].raw_string == "C=d"


def test_run_with_unfixable_warning():
    lines = [
        line_entry(1, 3, "A=B"),
        line_entry(2, 3, "UNFIXABLE-"),
        blank_line_entry(3, 3),
    ]
    warnings = [
        Warning(replace(lines[1]), "Unfixable", "The UNFIXABLE- key is not fixable")
    ]

    assert run(warnings, lines, []) == 0


def test_run_when_lines_do_not_fit_numbers():
    lines = [line_entry(1, 3, "a=B"), line_entry(4, 3, "c=D"), blank_line_entry(3, 3)]
    warnings = [
        Warning(replace(lines[0]), "LowercaseKey", "The a key should be in uppercase"),
        Warning(replace(lines[1]), "LowercaseKey", "The c key should be in uppercase"),
    ]

    assert run(warnings, lines, []) == 0


def test_new_warnings_after_fix():
    lines = lowercase_lines()
    warnings = lowercase_warnings(lines)

    assert run(warnings, lines, []) == 2
    assert [line.raw_string for line in lines] == [
        "A0=0",
        "A1=1",
        "A2=2",
        "# A2=2",
        "\n",
    ]


def test_skip_duplicated_key():
    lines = lowercase_lines()
    warnings = lowercase_warnings(lines)

    assert run(warnings, lines, ["DuplicatedKey"]) == 2
    assert [line.raw_string for line in lines] == [
        "A0=0",
        "A1=1",
        "A2=2",
        "A2=2",
        "\n",
    ]


def test_skip_unordered_key():
    lines = lowercase_lines()
    warnings = lowercase_warnings(lines)

    assert run(warnings, lines, ["UnorderedKey"]) == 2
    assert [line.raw_string for line in lines] == [
        "A1=1",
        "A2=2",
        "A0=0",
        "# A2=2",
        "\n",
    ]


def test_run_removes_extra_blank_lines():
    lines = [
        line_entry(1, 5, "A=B"),
        line_entry(2, 5, ""),
        line_entry(3, 5, ""),
        line_entry(4, 5, "C=D"),
        blank_line_entry(5, 5),
    ]
    warnings = [Warning(replace(lines[2]), "ExtraBlankLine", "Extra blank line detected")]

    assert run(warnings, lines, []) == 1
    assert [line.raw_string for line in lines] == ["A=B", "", "C=D", "\n"]


def test_run_adds_ending_blank_line():
    lines = [line_entry(1, 2, "A=B"), line_entry(2, 2, "C=D")]
    warnings = [
        Warning(
            replace(lines[1]), "EndingBlankLine", "No blank line at the end of the file"
        )
    ]

    assert run(warnings, lines, []) == 1
    assert [line.raw_string for line in lines] == ["A=B", "C=D", "\n"]


def test_run_skipped_check_is_not_fixed():
    lines = [line_entry(1, 2, "a=B"), blank_line_entry(2, 2)]
    warnings = [
        Warning(replace(lines[0]), "LowercaseKey", "The a key should be in uppercase")
    ]

    assert run(warnings, lines, ["LowercaseKey"]) == 0
    assert lines[0].raw_string == "a=B"