"""
Generator Configuration Management

Loads the defaults used by the random serial facade from a YAML file.
The file location comes from the DATESERIAL_CONFIG environment variable
when no explicit path is given; a missing file yields the built-in
defaults.

Example file:

    include_time: false
    two_digit_year: true
    filler: 1100
    min_serial: 1
    max_serial: 999
    padding: fixed
"""

import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ..errors import GeneratorConfigError
from ..logging import config_logger, log_execution_time
from ..utils.constants import DEFAULT_FILLER, DEFAULT_MAX_SERIAL, DEFAULT_MIN_SERIAL

CONFIG_ENV_VAR = "DATESERIAL_CONFIG"

PADDING_MODES = ("fixed", "budget")


def _get_bool(data: dict[str, Any], key: str, default: bool) -> bool:
    """Read a boolean setting, rejecting strings and numbers."""
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false, got {value!r}")
    return value


@dataclass
class GeneratorConfig:
    """Defaults applied by SerialGenerator when building requests."""

    include_time: bool = False
    two_digit_year: bool = True
    filler: int = DEFAULT_FILLER
    min_serial: int = DEFAULT_MIN_SERIAL
    max_serial: int = DEFAULT_MAX_SERIAL  # Exclusive upper bound
    padding: str = "fixed"

    def __post_init__(self):
        """Validate filler, serial range and padding mode."""
        if self.filler < 0:
            raise ValueError(f"filler must be non-negative, got {self.filler}")
        if self.min_serial < 0:
            raise ValueError(f"min_serial must be non-negative, got {self.min_serial}")
        if self.min_serial >= self.max_serial:
            raise ValueError(
                f"min_serial must be less than max_serial, got "
                f"{self.min_serial} >= {self.max_serial}"
            )
        if self.padding not in PADDING_MODES:
            raise ValueError(
                f"padding must be one of {', '.join(PADDING_MODES)}, got {self.padding!r}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "include_time": self.include_time,
            "two_digit_year": self.two_digit_year,
            "filler": self.filler,
            "min_serial": self.min_serial,
            "max_serial": self.max_serial,
            "padding": self.padding,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GeneratorConfig":
        """Create config from dictionary."""
        return cls(
            include_time=_get_bool(data, "include_time", False),
            two_digit_year=_get_bool(data, "two_digit_year", True),
            filler=int(data.get("filler", DEFAULT_FILLER)),
            min_serial=int(data.get("min_serial", DEFAULT_MIN_SERIAL)),
            max_serial=int(data.get("max_serial", DEFAULT_MAX_SERIAL)),
            padding=str(data.get("padding", "fixed")).lower(),
        )


@log_execution_time(config_logger())
def load_generator_config(path: str | Path | None = None) -> GeneratorConfig:
    """
    Load a generator configuration from YAML.

    Args:
        path: Config file path (defaults to $DATESERIAL_CONFIG)

    Returns:
        GeneratorConfig, with defaults when no file is found

    Raises:
        GeneratorConfigError: If the file is not valid YAML or holds invalid values
    """
    log = config_logger()
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return GeneratorConfig()

    config_path = Path(path)
    if not config_path.exists():
        log.info("Generator config not found, using defaults", path=str(config_path))
        return GeneratorConfig()

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise GeneratorConfigError(f"YAML error in {config_path}: {e}") from e

    if not data:
        return GeneratorConfig()
    if not isinstance(data, dict):
        raise GeneratorConfigError(f"Expected a mapping in {config_path}")

    try:
        config = GeneratorConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        raise GeneratorConfigError(f"Invalid generator config in {config_path}: {e}") from e

    log.info("Generator config loaded", path=str(config_path), **config.to_dict())
    return config


# Global instance for easy access
_config: GeneratorConfig | None = None
_config_lock = threading.Lock()


def get_generator_config() -> GeneratorConfig:
    """Get the global generator config, loading it on first use."""
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = load_generator_config()
    return _config


def reset_generator_config() -> None:
    """Drop the cached global config so the next access reloads it."""
    global _config
    with _config_lock:
        _config = None
