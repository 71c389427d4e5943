"""
Timestamp value type and strict "YYYY-MM-DD HH:MM:SS" parsing.
File: tt_regex/core/timestamp.py
"""

from datetime import datetime
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tt_regex.constants import DEFAULT_TIMEZONE, TIMESTAMP_FORMAT, TIMESTAMP_REGEX
from tt_regex.core.exceptions import IntervalOrderError, TimestampParseError


@dataclass(frozen=True, order=True)
class Timestamp:
    """A point in time as the six numeric fields of the timestamp layout."""
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    @classmethod
    def from_datetime(cls, moment: datetime) -> 'Timestamp':
        return cls(moment.year, moment.month, moment.day,
                   moment.hour, moment.minute, moment.second)

    def as_tuple(self) -> tuple[int, int, int, int, int, int]:
        return (self.year, self.month, self.day, self.hour, self.minute, self.second)

    def format(self) -> str:
        """Render back into the "YYYY-MM-DD HH:MM:SS" layout."""
        return (f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
                f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}")

    def __str__(self):
        return self.format()


def parse_timestamp(text: str, tz_name: str = DEFAULT_TIMEZONE) -> Timestamp:
    """
    Parse a "YYYY-MM-DD HH:MM:SS" string interpreted in a fixed time zone.

    Every field must carry its full width ("2020-5-1 0:0:0" is rejected) and
    the date must exist in the calendar. Year 0000 is rejected since datetime
    starts at year 1.

    The zone is only resolved to check that tz_name exists; Timestamp keeps
    the six wall-clock fields and no offset, so the zone never changes them.

    Args:
        text: Timestamp string
        tz_name: IANA zone name the string is interpreted in

    Returns:
        Timestamp with the six parsed fields

    Raises:
        TimestampParseError: malformed text, impossible date or unknown zone
    """
    if not TIMESTAMP_REGEX.fullmatch(text):
        raise TimestampParseError(text)

    try:
        naive = datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise TimestampParseError(text, str(e)) from e

    try:
        zone = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise TimestampParseError(text, f"unknown time zone {tz_name!r}") from e

    return Timestamp.from_datetime(naive.replace(tzinfo=zone))


def check_interval_order(start: Timestamp, end: Timestamp):
    """Raise IntervalOrderError unless start strictly precedes end."""
    if not start < end:
        raise IntervalOrderError(start, end)


# End of file #
