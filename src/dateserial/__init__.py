"""
dateserial - date-based numeric serials.

Packs a calendar date, an optional filler and a random serial into a
single integer within the signed 64-bit range, for human-scannable
reference numbers such as invoice or ticket numbers.
"""

from .encoder import PaddingMode, SerialEncoder, encode
from .errors import (
    DateSerialError,
    EncodingOverflowError,
    GeneratorConfigError,
    InvalidSerialError,
    SerialOverflowError,
    SerialRangeError,
)
from .generator import SerialGenerator, get_generator, quick_generate
from .models import EncodingRequest

__version__ = '1.0.0'

__all__ = [
    'EncodingRequest',
    'SerialEncoder',
    'PaddingMode',
    'encode',
    'SerialGenerator',
    'quick_generate',
    'get_generator',
    'DateSerialError',
    'InvalidSerialError',
    'SerialRangeError',
    'SerialOverflowError',
    'EncodingOverflowError',
    'GeneratorConfigError',
]
