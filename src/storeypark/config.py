# File: src/storeypark/config.py
"""
Runtime configuration for the Storey Parking System

Values come from keyword arguments or from STOREYPARK_* environment
variables via StoreyConfig.from_env().
"""

from dataclasses import dataclass
import logging
import os
from typing import Mapping, Optional

from .domain.strategies import STRATEGIES

ENV_PREFIX = "STOREYPARK_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got: {raw!r}")


@dataclass
class StoreyConfig:
    """Configuration for one storey and its service"""
    capacity: int = 6
    unique_plates: bool = True
    strategy: str = "gap_scan"
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        """Validate configuration values"""
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int) or self.capacity < 1:
            raise ValueError(f"Capacity must be a positive integer, got: {self.capacity}")

        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown strategy '{self.strategy}', expected one of: {', '.join(sorted(STRATEGIES))}"
            )

        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'StoreyConfig':
        """Build a config from STOREYPARK_* variables, defaults for the rest"""
        env = os.environ if environ is None else environ
        kwargs = {}

        raw = env.get(ENV_PREFIX + "CAPACITY")
        if raw is not None:
            try:
                kwargs["capacity"] = int(raw)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}CAPACITY must be an integer, got: {raw!r}")

        raw = env.get(ENV_PREFIX + "UNIQUE_PLATES")
        if raw is not None:
            kwargs["unique_plates"] = _parse_bool(ENV_PREFIX + "UNIQUE_PLATES", raw)

        for field_name in ("strategy", "log_level", "log_file"):
            raw = env.get(ENV_PREFIX + field_name.upper())
            if raw:
                kwargs[field_name] = raw

        return cls(**kwargs)
