"""
Serial Encoder for date-based numeric identifiers.

Packs a date, an optional filler and a serial into one integer that fits
a signed 64-bit range, e.g. 2025-05-11 / filler 1100 / serial 5:

    "250511" + "1100" + "0005" -> 25051111000005

The digit budget is the 19 decimal digits of the int64 maximum. The date
portion and the filler claim their share first; whatever is left bounds
the serial.
"""

from datetime import date as date_type
from enum import Enum
from typing import Callable, Optional

import structlog

from ..errors import EncodingOverflowError, SerialOverflowError
from ..logging import encoder_logger
from ..models.encoding_request import EncodingRequest
from ..utils.constants import INT64_MAX, MAX_DIGITS, PAD_WIDTH
from ..utils.date_format import digit_count, format_date_portion

# Called with the request and its computed serial budget
BudgetHook = Callable[[EncodingRequest, int], None]


class PaddingMode(str, Enum):
    """How the filler and serial are zero-padded when assembling digits."""

    FIXED = "fixed"  # Always 4 digits, regardless of the computed budget
    BUDGET = "budget"  # Filler at its own width, serial at exactly the budget


class SerialEncoder:
    """
    Encodes EncodingRequests into bounded integers.

    In FIXED mode the budget check and the assembly can disagree: a filler
    of 5 reserves one digit but is written as "0005", and a serial is
    padded to 4 digits even when the budget is 3. Such requests pass the
    budget check and then fail the int64 ceiling check. BUDGET mode pads
    to the computed widths so the two checks agree.
    """

    def __init__(
        self,
        padding: PaddingMode | str = PaddingMode.FIXED,
        on_budget: Optional[BudgetHook] = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ):
        """
        Initialize the encoder.

        Args:
            padding: Padding mode for the filler and serial
            on_budget: Optional callback receiving each computed serial budget
            logger: Logger instance (uses the encoder logger if not provided)
        """
        self.padding = PaddingMode(padding)
        self.on_budget = on_budget
        self._log = logger or encoder_logger()

    # Request construction and toggles

    def configure(self, date: date_type, serial: int) -> EncodingRequest:
        """Create a request with default flags (no time, 2-digit year, no filler)."""
        return EncodingRequest(date=date, serial=serial)

    def with_time(self, request: EncodingRequest) -> EncodingRequest:
        return request.with_time()

    def with_full_year(self, request: EncodingRequest) -> EncodingRequest:
        return request.with_full_year()

    def with_filler(self, request: EncodingRequest, filler: int) -> EncodingRequest:
        return request.with_filler(filler)

    # Encoding

    def digit_budget(self, request: EncodingRequest) -> int:
        """
        Compute how many digits the serial may occupy.

        Returns:
            19 minus the date portion length minus the filler's digit count.
            Zero or negative means nothing is left for the serial.
        """
        return self._budget(request)[2]

    def assemble(self, request: EncodingRequest) -> str:
        """
        Build the digit string for a request without parsing it.

        Raises:
            SerialOverflowError: If the serial does not fit the digit budget
        """
        date_part, filler_len, max_serial_len = self._budget(request)

        self._log.debug(
            "Serial budget computed",
            request=str(request),
            max_serial_len=max_serial_len,
        )
        if self.on_budget is not None:
            self.on_budget(request, max_serial_len)

        if max_serial_len <= 0 or request.serial >= 10 ** max_serial_len:
            self._log.warning(
                "Serial exceeds digit budget",
                serial=request.serial,
                max_serial_len=max_serial_len,
            )
            raise SerialOverflowError(request.serial, max_serial_len)

        if self.padding == PaddingMode.BUDGET:
            filler_width, serial_width = filler_len, max_serial_len
        else:
            filler_width = serial_width = PAD_WIDTH

        parts = [date_part]
        if request.has_filler:
            parts.append(f"{request.filler:0{filler_width}d}")
        parts.append(f"{request.serial:0{serial_width}d}")
        return "".join(parts)

    def generate(self, request: EncodingRequest) -> int:
        """
        Encode a request into a single integer.

        Args:
            request: The request to encode

        Returns:
            The encoded serial, at most 9223372036854775807

        Raises:
            SerialOverflowError: If the serial does not fit the digit budget
            EncodingOverflowError: If the assembled digits exceed the int64 maximum
        """
        digits = self.assemble(request)
        value = int(digits)
        if value > INT64_MAX:
            self._log.warning(
                "Encoded serial exceeds int64 maximum",
                digits=digits,
                maximum=INT64_MAX,
            )
            raise EncodingOverflowError(digits, INT64_MAX)
        return value

    def _budget(self, request: EncodingRequest) -> tuple[str, int, int]:
        date_part = format_date_portion(
            request.date,
            include_time=request.include_time,
            two_digit_year=request.two_digit_year,
        )
        filler_len = digit_count(request.filler) if request.has_filler else 0
        return date_part, filler_len, MAX_DIGITS - len(date_part) - filler_len


def encode(
    request: EncodingRequest,
    padding: PaddingMode | str = PaddingMode.FIXED,
) -> int:
    """
    Encode a request with a throwaway encoder.

    Example:
        encode(EncodingRequest(date(2025, 5, 11), 102))  # 2505110102
    """
    return SerialEncoder(padding=padding).generate(request)
