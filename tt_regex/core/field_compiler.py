"""
Field compiler: turns one timestamp field's start/end values into a regex fragment.
File: tt_regex/core/field_compiler.py

Each field (year, month, day, hour, minute, second) is compiled in one of two modes:

- tight: every more significant field is equal between start and end, so the
  field's values run exactly from start to end.
- broadened: a more significant field differs, so the field may roll over.
  Values from start up to the field maximum and from the field minimum up to
  end are both possible. The two ranges are merged per digit into a single
  bounding box instead of being emitted as an alternation.

Year has no domain bounds and is always compiled tight.
"""

from typing import Optional
from dataclasses import dataclass

from tt_regex.core.exceptions import FieldOrderError
from tt_regex.core.digit_range import (
    DigitRange,
    extract_digit_ranges,
    merge_digit_ranges,
    render_digit_ranges
)


@dataclass(frozen=True)
class FieldSpec:
    name: str
    width: int
    minimum: Optional[int] = None   # None: no rollover domain (year)
    maximum: Optional[int] = None

    @property
    def has_domain(self) -> bool:
        return self.minimum is not None and self.maximum is not None


YEAR = FieldSpec('year', 4)
MONTH = FieldSpec('month', 2, 1, 12)
DAY = FieldSpec('day', 2, 1, 31)
HOUR = FieldSpec('hour', 2, 0, 23)
MINUTE = FieldSpec('minute', 2, 0, 59)
SECOND = FieldSpec('second', 2, 0, 59)

# Most significant first; this is the order the cascade flag travels in
FIELD_SPECS = (YEAR, MONTH, DAY, HOUR, MINUTE, SECOND)


@dataclass(frozen=True)
class CompiledField:
    """Result of compiling one field of an interval."""
    spec: FieldSpec
    start: int
    end: int
    tight: bool
    digit_ranges: tuple[DigitRange, ...]

    @property
    def fragment(self) -> str:
        return render_digit_ranges(self.digit_ranges)

    @property
    def mode(self) -> str:
        return 'tight' if self.tight else 'broadened'

    @property
    def pins_next_field(self) -> bool:
        """Whether the next, less significant field may still be compiled tight."""
        return self.tight and self.start == self.end


def compile_field(spec: FieldSpec, start: int, end: int, tight: bool = True) -> CompiledField:
    """
    Compile one field's value range into per-digit ranges.

    Args:
        spec: Field description (name, digit width, domain bounds)
        start: Field value in the interval's start timestamp
        end: Field value in the interval's end timestamp
        tight: True when every more significant field is equal between
            start and end

    Returns:
        CompiledField holding the digit ranges and rendered fragment

    Raises:
        FieldOrderError: tight range requested with start > end
    """
    if tight or not spec.has_domain:
        if start > end:
            raise FieldOrderError(spec.name, start, end)
        digit_ranges = extract_digit_ranges(start, end, spec.width)
        return CompiledField(spec, start, end, True, digit_ranges)

    digit_ranges = merge_digit_ranges(
        extract_digit_ranges(start, spec.maximum, spec.width),
        extract_digit_ranges(spec.minimum, end, spec.width)
    )
    return CompiledField(spec, start, end, False, digit_ranges)


def compile_fields(start_values: tuple[int, ...], end_values: tuple[int, ...]) -> list[CompiledField]:
    """
    Compile all six fields in order, threading the cascade flag.

    Args:
        start_values: (year, month, day, hour, minute, second) of the start
        end_values: (year, month, day, hour, minute, second) of the end

    Returns:
        List of CompiledField, most significant field first
    """
    if len(start_values) != len(FIELD_SPECS) or len(end_values) != len(FIELD_SPECS):
        raise ValueError(f"Expected {len(FIELD_SPECS)} field values per timestamp")

    compiled = []
    tight = True
    for spec, start, end in zip(FIELD_SPECS, start_values, end_values):
        field = compile_field(spec, start, end, tight)
        compiled.append(field)
        tight = field.pins_next_field

    return compiled


# End of file #
