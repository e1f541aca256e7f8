"""
Password generation: uniform draws with replacement from the active alphabet.
"""

from __future__ import annotations

import logging
import random
from typing import Protocol

from .charsets import CharsetRegistry
from .errors import InvalidArgumentError, RandomSourceError

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


# Process-wide general-purpose PRNG, used whenever no rng is passed.
# Callers drawing from several threads should pass their own rng.
_default_rng = random.Random()


def check_length(length: int) -> int:
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidArgumentError(
            f"Password length must be an int, got {type(length).__name__}."
        )
    if length < 0:
        raise InvalidArgumentError(f"Password length must be >= 0, got {length}.")
    return length


def generate(
    length: int,
    registry: CharsetRegistry,
    rng: RandomSource | None = None,
) -> str:
    """
    Build a password of exactly ``length`` characters.

    Each character is drawn independently and uniformly from
    ``registry.active_alphabet()``; repeats are expected. The registry is
    only read.
    """
    check_length(length)
    alphabet = registry.active_alphabet()
    size = len(alphabet)
    source = rng if rng is not None else _default_rng

    logger.debug("Generating password: length=%d alphabet_size=%d", length, size)

    chars: list[str] = []
    for _ in range(length):
        try:
            idx = source.randrange(size)
        except RandomSourceError:
            raise
        except Exception as exc:
            raise RandomSourceError(f"Random source failed: {exc}") from exc

        if not 0 <= idx < size:
            raise RandomSourceError(
                f"Random source returned index {idx} outside [0, {size})."
            )
        chars.append(alphabet[idx])

    return "".join(chars)
