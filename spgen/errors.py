"""
Exception types raised by the password generator core.
"""


class PasswordGenError(Exception):
    """Base class for every error raised by spgen."""


class OutOfRangeError(PasswordGenError, IndexError):
    """A charset index (or label) does not address a registry entry."""


class InvalidArgumentError(PasswordGenError, ValueError):
    """A caller supplied a value the core cannot work with (e.g. negative length)."""


class RandomSourceError(PasswordGenError, RuntimeError):
    """
    The random source failed while drawing.

    Fatal for the current call: the generator never falls back to a
    predictable or partially filled password.
    """
