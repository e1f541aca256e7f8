"""
Strength estimation: entropy bits and a coarse label for the readout.

The estimate only depends on the requested length and the alphabet size,
never on the password actually generated.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

from .charsets import CharsetRegistry
from .generator import check_length


@dataclass(frozen=True)
class StrengthRule:
    # Both thresholds are strict: size > min_alphabet_size and value > min_length.
    label: str
    min_alphabet_size: float
    min_length: float

    def matches(self, alphabet_size: float, value: float) -> bool:
        return alphabet_size > self.min_alphabet_size and value > self.min_length


@dataclass(frozen=True)
class StrengthPolicy:
    """
    Ordered label rules; the first matching rule wins.

    The cutoffs of the default policy are arbitrary and kept for
    compatibility with the desktop application.
    """

    rules: Tuple[StrengthRule, ...] = (StrengthRule("strong", 26, 10),)
    fallback_label: str = "weak"
    legacy_fallback: bool = True

    def classify(self, alphabet_size: float, value: float) -> str:
        for rule in self.rules:
            if rule.matches(alphabet_size, value):
                return rule.label
        return self.fallback_label

    @property
    def labels(self) -> list[str]:
        return [r.label for r in self.rules] + [self.fallback_label]


DEFAULT_POLICY = StrengthPolicy()


@dataclass(frozen=True)
class StrengthReport:
    entropy_bits: float
    label: str
    alphabet_size: float = field(default=0.0, compare=False)

    def formatted_entropy(self) -> str:
        return f"{self.entropy_bits:.2f}"

    def __str__(self) -> str:
        return f"Strength: {self.label} | Entropy: {self.formatted_entropy()} bit"


def entropy_bits(length: int, alphabet_size: float) -> float:
    if alphabet_size <= 0:
        return 0.0
    return length * math.log2(alphabet_size)


def estimate(
    length: int,
    registry: CharsetRegistry,
    value: float | None = None,
    policy: StrengthPolicy | None = None,
) -> StrengthReport:
    """
    Estimate entropy and label for a password of ``length`` characters.

    ``value`` is the number compared against the length threshold (the
    slider position in the GUI); it defaults to ``length``.
    """
    check_length(length)
    pol = policy or DEFAULT_POLICY
    size = registry.active_alphabet_size(legacy_fallback=pol.legacy_fallback)
    threshold_value = length if value is None else value

    return StrengthReport(
        entropy_bits=entropy_bits(length, size),
        label=pol.classify(size, threshold_value),
        alphabet_size=size,
    )
