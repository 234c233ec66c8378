"""Errors raised by the Jalali calendar engine."""

from __future__ import annotations

from .core import DAY_OF_WEEK_IN_MONTH, FIELD_NAMES


def field_name(field: int) -> str:
    if isinstance(field, int) and 0 <= field < len(FIELD_NAMES):
        return FIELD_NAMES[field]
    return str(field)


class CalendarError(ValueError):
    """Base class for every calendar engine error."""


class InvalidField(CalendarError):
    """``field`` is unknown or cannot be used with ``operation``."""

    def __init__(self, field: int, operation: str = "access") -> None:
        self.field = field
        self.operation = operation
        super().__init__(f"Field {field_name(field)} does not support {operation}")


class InvalidEra(CalendarError):
    """ERA holds something other than BH or AH."""

    def __init__(self, era: int) -> None:
        self.era = era
        super().__init__(f"Invalid era {era}; expected BH (0) or AH (1)")


class FieldOutOfRange(CalendarError):
    """A field set by the caller lies outside ``[minimum, maximum]``."""

    def __init__(self, field: int, value: int, minimum: int, maximum: int) -> None:
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"{field_name(field)}={value} is outside [{minimum}, {maximum}]"
        )


class DayOfWeekInMonthZero(CalendarError):
    """DAY_OF_WEEK_IN_MONTH was set to 0, which names no week."""

    def __init__(self) -> None:
        self.field = DAY_OF_WEEK_IN_MONTH
        super().__init__("DAY_OF_WEEK_IN_MONTH must not be 0")
