"""
Interval-to-regex compilation and pattern assembly.
File: tt_regex/core/pattern.py

Usage:
    start = parse_timestamp("2021-07-04 12:30:00")
    end = parse_timestamp("2021-07-04 12:30:05")
    compile_interval_to_pattern(start, end)   # '2021-07-04 12:30:0[0-5]'

The pattern is a single linear regex (no alternation). Fields compiled in
broadened mode are a per-digit bounding box over two ranges, so the pattern is
not exact: it can match timestamps outside the interval, and once a field
spans more than one rollover (e.g. December 2019 to February 2021) it can also
miss timestamps inside it ("2020-06-15 ..." fails "[0-1][1-2]" for the month).
"""

from dataclasses import dataclass

from tt_regex.constants import (
    DATE_SEPARATOR,
    DATE_TIME_SEPARATOR,
    TIME_SEPARATOR,
    FULL_DIGIT_CLASS,
    DIGIT_SHORTHAND
)
from tt_regex.core.timestamp import Timestamp
from tt_regex.core.field_compiler import CompiledField, FIELD_SPECS, compile_fields

# Separator placed after each field except the last
FIELD_SEPARATORS = (
    DATE_SEPARATOR,         # year-month
    DATE_SEPARATOR,         # month-day
    DATE_TIME_SEPARATOR,    # day hour
    TIME_SEPARATOR,         # hour:minute
    TIME_SEPARATOR,         # minute:second
)


@dataclass(frozen=True)
class CompiledInterval:
    """Pattern for an interval together with its per-field breakdown."""
    start: Timestamp
    end: Timestamp
    fields: tuple[CompiledField, ...]
    pattern: str

    def __str__(self):
        return self.pattern


def assemble_pattern(fragments: list[str]) -> str:
    """Join six field fragments with the layout's literal separators."""
    if len(fragments) != len(FIELD_SPECS):
        raise ValueError(f"Expected {len(FIELD_SPECS)} field fragments, got {len(fragments)}")

    parts = []
    for fragment, separator in zip(fragments, FIELD_SEPARATORS + ('',)):
        parts.append(fragment)
        parts.append(separator)
    return ''.join(parts)


def simplify_pattern(pattern: str) -> str:
    """Replace every full digit class with the \\d shorthand."""
    return pattern.replace(FULL_DIGIT_CLASS, DIGIT_SHORTHAND)


def compile_interval(start: Timestamp, end: Timestamp) -> CompiledInterval:
    """
    Compile [start, end] into a CompiledInterval.

    The caller is expected to have checked that start precedes end
    (see check_interval_order).

    Raises:
        FieldOrderError: a field pinned by equal higher fields has start > end
    """
    fields = compile_fields(start.as_tuple(), end.as_tuple())
    pattern = simplify_pattern(assemble_pattern([field.fragment for field in fields]))
    return CompiledInterval(start, end, tuple(fields), pattern)


def compile_interval_to_pattern(start: Timestamp, end: Timestamp) -> str:
    """Compile [start, end] into a regex matching timestamps in that interval."""
    return compile_interval(start, end).pattern


# End of file #
