"""
Charset password generator package.
"""

from .charsets import CharsetEntry, CharsetRegistry, default_registry
from .config import GeneratorConfig, DEFAULT_CONFIG
from .errors import (
    PasswordGenError,
    OutOfRangeError,
    InvalidArgumentError,
    RandomSourceError,
)
from .generator import generate
from .strength import StrengthPolicy, StrengthReport, StrengthRule, estimate
from .session import PasswordSession
from .cli import generate_password

__all__ = [
    "CharsetEntry",
    "CharsetRegistry",
    "default_registry",
    "GeneratorConfig",
    "DEFAULT_CONFIG",
    "PasswordGenError",
    "OutOfRangeError",
    "InvalidArgumentError",
    "RandomSourceError",
    "generate",
    "StrengthPolicy",
    "StrengthReport",
    "StrengthRule",
    "estimate",
    "PasswordSession",
    "generate_password",
]
