"""Encoding Request model for date-based serial encoding."""

from dataclasses import dataclass, replace
from datetime import date as date_type
from typing import Any

from ..errors import InvalidSerialError


@dataclass(frozen=True)
class EncodingRequest:
    """
    Inputs for encoding one date-based serial.

    Toggles never mutate the request; each returns a new request with
    one field changed, so a base request can be shared and refined
    independently:

        request = EncodingRequest(date=today, serial=102)
        timed = request.with_time().with_filler(1100)
    """

    date: date_type
    serial: int
    include_time: bool = False
    two_digit_year: bool = True
    filler: int = 0  # 0 = omit

    def __post_init__(self):
        """Validate serial and filler are non-negative."""
        if self.serial < 0:
            raise InvalidSerialError("serial", self.serial)
        if self.filler < 0:
            raise InvalidSerialError("filler", self.filler)

    @property
    def has_filler(self) -> bool:
        """Check if a filler is inserted between date and serial."""
        return self.filler > 0

    def with_time(self) -> "EncodingRequest":
        """Include hour and minute (HHmm) in the date portion."""
        if self.include_time:
            return self
        return replace(self, include_time=True)

    def with_full_year(self) -> "EncodingRequest":
        """Use the four-digit year in the date portion."""
        if not self.two_digit_year:
            return self
        return replace(self, two_digit_year=False)

    def with_filler(self, filler: int) -> "EncodingRequest":
        """Set the filler separating the date from the serial (0 omits it)."""
        return replace(self, filler=filler)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'date': self.date.isoformat(),
            'serial': self.serial,
            'include_time': self.include_time,
            'two_digit_year': self.two_digit_year,
            'filler': self.filler,
        }

    def __str__(self) -> str:
        """String representation for logging."""
        parts = [self.date.isoformat(), f"serial:{self.serial}"]
        if self.include_time:
            parts.append("time")
        if not self.two_digit_year:
            parts.append("full_year")
        if self.filler:
            parts.append(f"filler:{self.filler}")
        return "/".join(parts)
