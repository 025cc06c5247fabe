"""Random serial generator facade."""

from .serial_generator import (
    RandomSource,
    SerialGenerator,
    draw_serial,
    get_generator,
    get_serial_generator,
    quick_generate,
    reset_serial_generator,
)

__all__ = [
    'RandomSource',
    'SerialGenerator',
    'draw_serial',
    'get_generator',
    'get_serial_generator',
    'quick_generate',
    'reset_serial_generator',
]
