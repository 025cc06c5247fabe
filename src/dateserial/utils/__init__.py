"""dateserial Utilities."""

from .constants import (
    DEFAULT_FILLER,
    DEFAULT_MAX_SERIAL,
    DEFAULT_MIN_SERIAL,
    INT64_MAX,
    MAX_DIGITS,
    PAD_WIDTH,
)
from .date_format import digit_count, format_date_portion, format_year

__all__ = [
    'DEFAULT_FILLER',
    'DEFAULT_MAX_SERIAL',
    'DEFAULT_MIN_SERIAL',
    'INT64_MAX',
    'MAX_DIGITS',
    'PAD_WIDTH',
    'digit_count',
    'format_date_portion',
    'format_year',
]
