"""
Per-digit range extraction for fixed-width integer fields.
File: tt_regex/core/digit_range.py

For an integer range such as 7-23 rendered with width 2, each decimal position
is reduced to the smallest and largest digit seen at that position:

    ones: 0..9   (7, 8, 9, 10, ... 19, 20 cover every digit)
    tens: 0..2

which renders as "[0-2][0-9]". The result is a bounding box per position, so
it can match values outside the original range (here 00-06 and 24-29).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DigitRange:
    """Inclusive range of digit values observed at one decimal position."""
    low: int
    high: int

    def merge(self, other: 'DigitRange') -> 'DigitRange':
        """Return the smallest range covering both self and other."""
        return DigitRange(min(self.low, other.low), max(self.high, other.high))

    def render(self) -> str:
        """Render as a literal digit or a bracketed digit class."""
        if self.low == self.high:
            return str(self.low)
        return f"[{self.low}-{self.high}]"


def digit_at(value: int, position: int) -> int:
    """Return the decimal digit of value at position (0 = ones)."""
    return (value // 10 ** position) % 10


def extract_digit_ranges(lo: int, hi: int, width: int) -> tuple[DigitRange, ...]:
    """
    Collect min/max digits per position over every integer in [lo, hi].

    Args:
        lo: First value of the range (inclusive)
        hi: Last value of the range (inclusive)
        width: Number of least significant digits to keep

    Returns:
        Tuple of `width` DigitRange values, index 0 is the ones position.
        Digits above `width` are discarded.
    """
    if lo > hi:
        raise ValueError(f"Empty range: {lo} > {hi}")
    if width < 1:
        raise ValueError(f"Digit width must be positive, got {width}")

    # Ranges here are at most a few hundred values; a plain scan is enough
    values = range(lo, hi + 1)
    ranges = []
    for position in range(width):
        digits = [digit_at(value, position) for value in values]
        ranges.append(DigitRange(min(digits), max(digits)))

    return tuple(ranges)


def merge_digit_ranges(first: tuple[DigitRange, ...],
                       second: tuple[DigitRange, ...]) -> tuple[DigitRange, ...]:
    """Merge two digit range vectors position by position."""
    if len(first) != len(second):
        raise ValueError(
            f"Cannot merge digit ranges of width {len(first)} and {len(second)}")
    return tuple(a.merge(b) for a, b in zip(first, second))


def render_digit_ranges(ranges: tuple[DigitRange, ...]) -> str:
    """Render a digit range vector most significant position first."""
    return ''.join(digit_range.render() for digit_range in reversed(ranges))


# End of file #
