"""
Long-lived generator state shared by the front-ends.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Tuple

from .charsets import CharsetRegistry, default_registry
from .config import DEFAULT_CONFIG, GeneratorConfig
from .generator import RandomSource, generate
from .strength import StrengthReport, estimate

logger = logging.getLogger(__name__)


def make_random_source(config: GeneratorConfig) -> RandomSource | None:
    """None selects the generator's default PRNG."""
    if not config.use_quantum:
        return None
    # qiskit is slow to import; only pay for it when asked.
    from .quantum_engine import QuantumRandom

    return QuantumRandom(config.num_qubits, config.entropy_rounds)


@dataclass(frozen=True)
class SessionSnapshot:
    password: str
    length: int
    entropy_bits: float
    strength: str
    # (label, enabled) per registry entry, in registry order
    charsets: Tuple[Tuple[str, bool], ...]


class PasswordSession:
    """
    Registry, length and last result behind one lock.

    Every method that reads or writes the registry holds the lock for its
    whole duration, so a toggle can never interleave with a generation.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        registry: CharsetRegistry | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.registry = registry or default_registry()
        self.rng = rng if rng is not None else make_random_source(self.config)
        self.length = self._clamp(self.config.password_length)

        self.password = ""
        self.entropy_bits = 0.0
        self.strength = self.config.strength_policy.fallback_label

        self._lock = threading.Lock()

    def _clamp(self, length: int) -> int:
        return max(self.config.min_length, min(self.config.max_length, int(length)))

    def _regenerate_locked(self) -> StrengthReport:
        password = generate(self.length, self.registry, self.rng)
        report = estimate(
            len(password),
            self.registry,
            value=self.length,
            policy=self.config.strength_policy,
        )
        self.password = password
        self.entropy_bits = report.entropy_bits
        self.strength = report.label
        return report

    def regenerate(self) -> StrengthReport:
        with self._lock:
            return self._regenerate_locked()

    def toggle(self, index: int) -> StrengthReport:
        """Toggle one charset and draw a fresh password with the new alphabet."""
        with self._lock:
            enabled = self.registry.toggle(index)
            logger.debug(
                "Charset %s %s", self.registry[index].label, "enabled" if enabled else "disabled"
            )
            try:
                return self._regenerate_locked()
            except Exception:
                # Undo the flip so the flags still match the shown password.
                self.registry.toggle(index)
                raise

    def set_length(self, length: int) -> int:
        with self._lock:
            self.length = self._clamp(length)
            return self.length

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                password=self.password,
                length=self.length,
                entropy_bits=self.entropy_bits,
                strength=self.strength,
                charsets=tuple((e.label, e.enabled) for e in self.registry),
            )
