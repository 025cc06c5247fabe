"""Tests for the random serial generator facade."""

import random
from datetime import date, datetime

import pytest

from dateserial.config import CONFIG_ENV_VAR, GeneratorConfig, reset_generator_config
from dateserial.encoder import PaddingMode
from dateserial.generator import (
    SerialGenerator,
    draw_serial,
    get_generator,
    get_serial_generator,
    quick_generate,
    reset_serial_generator,
)
from dateserial.models import EncodingRequest


class FixedRandom:
    """Random source that always returns the same value and records calls."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        return self.value


class TestDrawSerial:
    """Test suite for draw_serial."""

    def test_passes_half_open_range(self):
        """Test that the range bounds reach the random source unchanged."""
        rng = FixedRandom(7)

        assert draw_serial(rng, 1, 999) == 7
        assert rng.calls == [(1, 999)]

    def test_seeded_within_range(self):
        """Test that seeded draws stay in [min, max)."""
        rng = random.Random(42)
        serials = [draw_serial(rng, 10, 20) for _ in range(200)]

        assert min(serials) >= 10
        assert max(serials) < 20

    def test_empty_range(self):
        """Test that min >= max is rejected."""
        with pytest.raises(ValueError):
            draw_serial(FixedRandom(1), 5, 5)

    def test_negative_min(self):
        """Test that a negative lower bound is rejected."""
        with pytest.raises(ValueError):
            draw_serial(FixedRandom(1), -1, 5)


class TestQuickGenerate:
    """Test suite for quick_generate."""

    def test_applies_default_filler(self):
        """Test the one-shot layout with filler 1100."""
        rng = FixedRandom(5)

        assert quick_generate(date(2025, 5, 11), rng=rng) == 25051111000005
        assert rng.calls == [(1, 999)]

    def test_custom_range(self):
        """Test that a custom serial range is passed to the source."""
        rng = FixedRandom(150)

        assert quick_generate(date(2025, 5, 11), 100, 200, rng=rng) == 25051111000150
        assert rng.calls == [(100, 200)]

    def test_seeded_reproducible(self):
        """Test that the same seed gives the same serial."""
        first = quick_generate(datetime(2025, 5, 11, 22, 0), rng=random.Random(42))
        second = quick_generate(datetime(2025, 5, 11, 22, 0), rng=random.Random(42))

        expected_serial = random.Random(42).randrange(1, 999)
        assert first == second
        assert first == int(f"2505111100{expected_serial:04d}")

    def test_without_rng(self):
        """Test that a random source is created when none is injected."""
        value = quick_generate(date(2025, 5, 11))

        digits = str(value)
        assert digits.startswith("2505111100")
        assert 1 <= int(digits[-4:]) < 999


class TestGetGenerator:
    """Test suite for get_generator."""

    def test_returns_unconfigured_request(self):
        """Test that no filler or toggles are applied."""
        request = get_generator(date(2025, 5, 11), rng=FixedRandom(102))

        assert request == EncodingRequest(date=date(2025, 5, 11), serial=102)

    def test_request_can_be_refined(self):
        """Test refining and encoding the returned request."""
        request = get_generator(datetime(2025, 5, 11, 22, 0), rng=FixedRandom(102))

        assert request.with_time().serial == 102


class TestSerialGenerator:
    """Test suite for SerialGenerator."""

    @pytest.fixture
    def may_11(self):
        """Reference date at 22:00."""
        return datetime(2025, 5, 11, 22, 0)

    def test_default_config(self, may_11):
        """Test that defaults match quick_generate."""
        generator = SerialGenerator(rng=FixedRandom(5))

        assert generator.generate(may_11) == 25051111000005

    def test_request_applies_config(self, may_11):
        """Test that configured toggles reach the request."""
        config = GeneratorConfig(include_time=True, two_digit_year=False, filler=7)
        generator = SerialGenerator(config=config, rng=FixedRandom(3))

        request = generator.request(may_11)

        assert request.include_time is True
        assert request.two_digit_year is False
        assert request.filler == 7
        assert request.serial == 3

    def test_zero_filler_omitted(self, may_11):
        """Test that a zero filler in config leaves the filler out."""
        config = GeneratorConfig(filler=0)
        generator = SerialGenerator(config=config, rng=FixedRandom(102))

        assert generator.generate(may_11) == 2505110102

    def test_uses_config_range(self, may_11):
        """Test that the configured serial range is drawn from."""
        rng = FixedRandom(50)
        generator = SerialGenerator(config=GeneratorConfig(min_serial=10, max_serial=100), rng=rng)

        generator.draw_serial()

        assert rng.calls == [(10, 100)]

    def test_random_seed_reproducible(self, may_11):
        """Test that equal seeds produce equal sequences."""
        first = SerialGenerator(random_seed=7)
        second = SerialGenerator(random_seed=7)

        assert [first.generate(may_11) for _ in range(5)] == [
            second.generate(may_11) for _ in range(5)
        ]

    def test_budget_padding_from_config(self, may_11):
        """Test that the padding mode is taken from config."""
        generator = SerialGenerator(
            config=GeneratorConfig(filler=0, padding="budget"),
            rng=FixedRandom(102),
        )

        assert generator.encoder.padding == PaddingMode.BUDGET
        assert generator.generate(may_11) == 2505110000000000102


class TestGlobalSerialGenerator:
    """Test suite for the module-level generator."""

    @pytest.fixture(autouse=True)
    def clean_globals(self, monkeypatch):
        """Reset cached config and generator around each test."""
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        reset_generator_config()
        reset_serial_generator()
        yield
        reset_generator_config()
        reset_serial_generator()

    def test_singleton(self):
        """Test that the same instance is returned."""
        assert get_serial_generator() is get_serial_generator()

    def test_reset(self):
        """Test that reset builds a new instance."""
        first = get_serial_generator()
        reset_serial_generator()

        assert get_serial_generator() is not first

    def test_built_from_config_file(self, tmp_path, monkeypatch):
        """Test that the global generator reads DATESERIAL_CONFIG."""
        config_file = tmp_path / "dateserial.yaml"
        config_file.write_text("include_time: true\nfiller: 0\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

        generator = get_serial_generator()

        assert generator.config.include_time is True
        assert generator.config.filler == 0
