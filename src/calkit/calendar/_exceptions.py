class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class InvalidFormatError(CalendarError, ValueError):
    """Date text that cannot be parsed into a calendar date."""


class InvalidArgumentError(CalendarError, ValueError):
    """Numeric parameter outside its valid range."""


class CapabilityNotImplementedError(CalendarError, NotImplementedError):
    """A capability that is deliberately not provided."""
