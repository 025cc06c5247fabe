"""
Exceptions raised by dateserial.

Range failures subclass ValueError so callers that only care about
"bad input" can catch them without importing this module.
"""


class DateSerialError(Exception):
    """Base exception for dateserial errors."""
    pass


class InvalidSerialError(DateSerialError, ValueError):
    """Raised when a serial or filler is negative."""

    def __init__(self, field_name: str, value: int):
        self.field_name = field_name
        self.value = value
        super().__init__(f"{field_name} must be a non-negative integer, got {value}")


class SerialRangeError(DateSerialError, ValueError):
    """Base exception for values that do not fit the 64-bit digit budget."""
    pass


class SerialOverflowError(SerialRangeError):
    """Raised when the serial does not fit in the digits left after date and filler."""

    def __init__(self, serial: int, max_serial_len: int):
        self.serial = serial
        self.max_serial_len = max_serial_len
        super().__init__(
            f"Serial {serial} exceeds the allowed serial length of "
            f"{max_serial_len} digit(s)"
        )


class EncodingOverflowError(SerialRangeError):
    """Raised when the assembled digit string exceeds the int64 maximum."""

    def __init__(self, digits: str, maximum: int):
        self.digits = digits
        self.maximum = maximum
        super().__init__(
            f"Generated serial {digits} exceeds the maximum value of int64 {maximum}"
        )


class GeneratorConfigError(DateSerialError):
    """Raised when a generator configuration file cannot be parsed."""
    pass
