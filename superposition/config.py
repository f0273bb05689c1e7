"""
Superposition Configuration

Logging setup and the small set of runtime settings used by the CLI.
Supports environment variable overrides.

The library never installs handlers on import; only setup_logging()
does, and the CLI is its caller.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

LOGGER_NAME = "superposition"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Handlers added by setup_logging, so a later call removes only these
_installed_handlers: list[logging.Handler] = []

# ============================================================================
# LOGGING SETUP
# ============================================================================

def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure logging for the superposition package.

    Calling it again replaces the handlers it installed before. Handlers
    attached by anything else are left in place.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    while _installed_handlers:
        handler = _installed_handlers.pop()
        logger.removeHandler(handler)
        handler.close()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG)
    console_format = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    # File handler (if specified)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_format = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s'
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    return logger


# ============================================================================
# CONFIGURATION
# ============================================================================

@dataclass
class SuperpositionConfig:
    """Runtime settings."""
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    sample_seed: Optional[int] = None    # Seed for the CLI sampling generator

    def validate(self) -> bool:
        """Check the log level name and seed type."""
        return (
            self.log_level.upper() in LOG_LEVELS and
            (self.sample_seed is None or isinstance(self.sample_seed, int))
        )

    @classmethod
    def from_env(cls) -> SuperpositionConfig:
        """
        Create configuration with environment variable overrides.

        Raises:
            ValueError: If SUPERPOSITION_SEED is not an integer
        """
        config = cls()

        if os.getenv('SUPERPOSITION_LOG_LEVEL'):
            config.log_level = os.getenv('SUPERPOSITION_LOG_LEVEL').upper()
        if os.getenv('SUPERPOSITION_LOG_FILE'):
            config.log_file = os.getenv('SUPERPOSITION_LOG_FILE')
        if os.getenv('SUPERPOSITION_SEED'):
            seed = os.getenv('SUPERPOSITION_SEED')
            try:
                config.sample_seed = int(seed)
            except ValueError:
                raise ValueError(f"SUPERPOSITION_SEED must be an integer, got {seed!r}")

        return config


# ============================================================================
# GLOBAL INSTANCE
# ============================================================================

_config: Optional[SuperpositionConfig] = None


def get_config() -> SuperpositionConfig:
    """Get the process default configuration, reading the environment once."""
    global _config
    if _config is None:
        _config = SuperpositionConfig.from_env()
    return _config


def set_config(config: SuperpositionConfig):
    """Set the process default configuration."""
    global _config
    _config = config


def reset_config():
    """Drop the cached configuration so the environment is read again."""
    global _config
    _config = None
