"""
Configuration for the charset password generator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .strength import DEFAULT_POLICY, StrengthPolicy

LOGGER_NAME = "spgen"
LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"


@dataclass
class GeneratorConfig:
    # Initial password length (the slider starts here).
    password_length: int = 6

    # Slider range. The core itself accepts any length >= 0.
    min_length: int = 1
    max_length: int = 64

    # How the strength label is chosen. See strength.StrengthPolicy.
    strength_policy: StrengthPolicy = DEFAULT_POLICY

    # Draw from the qiskit simulator instead of the stdlib PRNG.
    use_quantum: bool = False
    # NOTE: Keep this <= backend limit (often 20-29 for local simulators).
    num_qubits: int = 16
    entropy_rounds: int = 2

    window_title: str = "Password generator!"

    # Clear the clipboard this long after a copy; 0 keeps it.
    clipboard_clear_ms: int = 15000


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = GeneratorConfig()


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Safe to call repeatedly: a second call only updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
