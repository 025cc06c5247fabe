"""
dateserial Configuration Module

Provides the defaults used by the random serial facade, loaded from YAML.
"""

from .generator_config import (
    CONFIG_ENV_VAR,
    GeneratorConfig,
    get_generator_config,
    load_generator_config,
    reset_generator_config,
)

__all__ = [
    "CONFIG_ENV_VAR",
    "GeneratorConfig",
    "get_generator_config",
    "load_generator_config",
    "reset_generator_config",
]
