"""
Random Serial Generator

Convenience facade over SerialEncoder: draws a random serial, applies the
default toggles and encodes. The random source is injected so tests can
pass a seeded generator; any object with ``randrange(start, stop)`` works.
"""

import random
import threading
from datetime import date as date_type
from typing import Optional, Protocol

from ..config.generator_config import GeneratorConfig, get_generator_config
from ..encoder.serial_encoder import PaddingMode, SerialEncoder
from ..logging import generator_logger
from ..models.encoding_request import EncodingRequest
from ..utils.constants import DEFAULT_FILLER, DEFAULT_MAX_SERIAL, DEFAULT_MIN_SERIAL


class RandomSource(Protocol):
    """Source of uniformly distributed integers."""

    def randrange(self, start: int, stop: int) -> int:
        """Return a random integer in [start, stop)."""
        ...


def draw_serial(
    rng: RandomSource,
    min_serial: int = DEFAULT_MIN_SERIAL,
    max_serial: int = DEFAULT_MAX_SERIAL,
) -> int:
    """
    Draw a serial from the half-open range [min_serial, max_serial).

    Raises:
        ValueError: If the range is empty or starts below zero
    """
    if min_serial < 0:
        raise ValueError(f"min_serial must be non-negative, got {min_serial}")
    if min_serial >= max_serial:
        raise ValueError(
            f"min_serial must be less than max_serial, got {min_serial} >= {max_serial}"
        )
    return rng.randrange(min_serial, max_serial)


class SerialGenerator:
    """
    Generates date-based serials with random suffixes.

    Holds its own random source and encoder, so separate instances never
    share state.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        rng: RandomSource | None = None,
        random_seed: int | None = None,
        encoder: SerialEncoder | None = None,
    ):
        """
        Initialize the serial generator.

        Args:
            config: Generator defaults (toggles, filler, serial range)
            rng: Random source (a new random.Random is used if not provided)
            random_seed: Optional seed for reproducible serials, ignored with rng
            encoder: Encoder instance (built from config.padding if not provided)
        """
        self.config = config or GeneratorConfig()
        self._rng = rng if rng is not None else random.Random(random_seed)
        self.encoder = encoder or SerialEncoder(padding=PaddingMode(self.config.padding))
        self._log = generator_logger()

    def draw_serial(self) -> int:
        """Draw a serial from the configured range."""
        return draw_serial(self._rng, self.config.min_serial, self.config.max_serial)

    def request(self, date: date_type) -> EncodingRequest:
        """
        Build a request with a random serial and the configured toggles.

        Args:
            date: Date (or datetime) to base the serial on

        Returns:
            EncodingRequest ready for further refinement or encoding
        """
        request = self.encoder.configure(date, self.draw_serial())
        if self.config.include_time:
            request = request.with_time()
        if not self.config.two_digit_year:
            request = request.with_full_year()
        if self.config.filler:
            request = request.with_filler(self.config.filler)
        return request

    def generate(self, date: date_type) -> int:
        """Generate an encoded serial for the given date."""
        request = self.request(date)
        value = self.encoder.generate(request)
        self._log.debug("Serial generated", request=str(request), value=value)
        return value


def quick_generate(
    date: date_type,
    min_serial: int = DEFAULT_MIN_SERIAL,
    max_serial: int = DEFAULT_MAX_SERIAL,
    rng: RandomSource | None = None,
    filler: int = DEFAULT_FILLER,
) -> int:
    """
    Generate a serial in one call: random serial, filler 1100, 2-digit year.

    Args:
        date: Date (or datetime) to base the serial on
        min_serial: Inclusive lower bound of the random serial
        max_serial: Exclusive upper bound of the random serial
        rng: Random source (a fresh random.Random if not provided)
        filler: Filler inserted between date and serial

    Returns:
        Encoded serial
        Example: quick_generate(date(2025, 5, 11)) -> 25051111000102
    """
    encoder = SerialEncoder()
    serial = draw_serial(rng if rng is not None else random.Random(), min_serial, max_serial)
    request = encoder.with_filler(encoder.configure(date, serial), filler)
    return encoder.generate(request)


def get_generator(
    date: date_type,
    min_serial: int = DEFAULT_MIN_SERIAL,
    max_serial: int = DEFAULT_MAX_SERIAL,
    rng: RandomSource | None = None,
) -> EncodingRequest:
    """
    Get an unconfigured request with a random serial.

    Unlike quick_generate, no filler is applied; the caller chooses the
    toggles before encoding.
    """
    serial = draw_serial(rng if rng is not None else random.Random(), min_serial, max_serial)
    return EncodingRequest(date=date, serial=serial)


# Global instance for easy access
_generator: Optional[SerialGenerator] = None
_generator_lock = threading.Lock()


def get_serial_generator() -> SerialGenerator:
    """Get the global serial generator, built from the global config."""
    global _generator
    if _generator is None:
        with _generator_lock:
            if _generator is None:
                _generator = SerialGenerator(config=get_generator_config())
    return _generator


def reset_serial_generator() -> None:
    """Drop the global serial generator so the next access rebuilds it."""
    global _generator
    with _generator_lock:
        _generator = None
