"""
Exceptions raised while parsing timestamps and compiling interval patterns.
File: tt_regex/core/exceptions.py
"""


class TimestampError(ValueError):
    """Base class for every timestamp and interval error raised by tt_regex."""


class TimestampParseError(TimestampError):
    """
    Raised when a timestamp string cannot be parsed.

    This exception is raised when:
    - The text does not follow the "YYYY-MM-DD HH:MM:SS" layout
    - The text names a value the calendar does not have (e.g. February 30)
    - The configured time zone is unknown
    """

    def __init__(self, text, reason=None):
        """
        Initialize parse error.

        Args:
            text: The string that failed to parse
            reason: Optional detail appended to the message
        """
        self.text = text
        self.reason = reason

        message = f'cannot parse "{text}" as "YYYY-MM-DD HH:MM:SS"'
        if reason:
            message += f": {reason}"
        super().__init__(message)


class IntervalOrderError(TimestampError):
    """Raised when the end of an interval does not strictly follow its start."""

    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(f'"{start}" must be older than "{end}"')


class FieldOrderError(TimestampError):
    """
    Raised when a field compiled as a tight range has start > end.

    A tight range is only requested when every more significant field is
    equal between the two timestamps, so this signals inconsistent input
    rather than anything the compiler can recover from.
    """

    def __init__(self, field, start, end):
        self.field = field
        self.start = start
        self.end = end
        super().__init__(
            f"start {field} ({start}) is greater than end {field} ({end})")


# End of file #
