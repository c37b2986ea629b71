"""
Runtime settings for the demo and the dashboard.
"""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from fintree.exceptions import ConfigError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    seed_path: str = "data/financeiro.json"
    lookup_name: str = "Aluguel"
    amount_precision: int = 2

    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from FINTREE_* environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()

        if "FINTREE_SEED_PATH" in env:
            settings.seed_path = env["FINTREE_SEED_PATH"]
        if "FINTREE_LOOKUP_NAME" in env:
            settings.lookup_name = env["FINTREE_LOOKUP_NAME"]
        if "FINTREE_PRECISION" in env:
            raw = env["FINTREE_PRECISION"]
            try:
                settings.amount_precision = int(raw)
            except ValueError as e:
                raise ConfigError(f"FINTREE_PRECISION must be an integer, got {raw!r}",
                                  config_key="amount_precision") from e
        if "FINTREE_LOG_LEVEL" in env:
            settings.log_level = env["FINTREE_LOG_LEVEL"].upper()

        settings.validate()
        return settings

    def validate(self) -> None:
        if self.log_level not in _LOG_LEVELS:
            raise ConfigError(f"Unknown log level {self.log_level!r}", config_key="log_level")
        if self.amount_precision < 0:
            raise ConfigError("amount_precision must not be negative", config_key="amount_precision")


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=settings.log_format)
