"""
Interval-to-regex compiler for "YYYY-MM-DD HH:MM:SS" timestamps.
File: tt_regex/core/__init__.py

Compiles two boundary timestamps into one regex that matches timestamps
falling between them, for use with grep-style tools.
"""

from tt_regex.core.exceptions import (
    TimestampError,
    TimestampParseError,
    IntervalOrderError,
    FieldOrderError
)
from tt_regex.core.timestamp import Timestamp, parse_timestamp, check_interval_order
from tt_regex.core.digit_range import DigitRange, extract_digit_ranges, merge_digit_ranges
from tt_regex.core.field_compiler import FieldSpec, CompiledField, compile_field, FIELD_SPECS
from tt_regex.core.pattern import CompiledInterval, compile_interval, compile_interval_to_pattern


__all__ = [
    'TimestampError',
    'TimestampParseError',
    'IntervalOrderError',
    'FieldOrderError',
    'Timestamp',
    'parse_timestamp',
    'check_interval_order',
    'DigitRange',
    'extract_digit_ranges',
    'merge_digit_ranges',
    'FieldSpec',
    'CompiledField',
    'compile_field',
    'FIELD_SPECS',
    'CompiledInterval',
    'compile_interval',
    'compile_interval_to_pattern'
]

# End of file #
