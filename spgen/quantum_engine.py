"""
Quantum engine: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and returns raw bitstrings.

QuantumRandom wraps the engine as a random source the generator can use
in place of the stdlib PRNG.
"""

from __future__ import annotations

import hashlib
import logging
from typing import List

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .errors import InvalidArgumentError, RandomSourceError

logger = logging.getLogger(__name__)


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, num_qubits: int = 16) -> None:
        if num_qubits < 1:
            raise InvalidArgumentError(f"num_qubits must be >= 1, got {num_qubits}.")

        self.num_qubits = num_qubits
        self.backend = AerSimulator()

        backend_cfg = self.backend.configuration()
        max_qubits = getattr(backend_cfg, "num_qubits", None)

        if max_qubits is not None and num_qubits > max_qubits:
            raise InvalidArgumentError(
                f"num_qubits={num_qubits} exceeds backend limit ({max_qubits})."
            )

    def _build_circuit(self) -> QuantumCircuit:
        """
        Prepare N qubits in superposition, then measure in alternating
        bases (Z, X, Z, X, ...).
        """
        n = self.num_qubits
        qc = QuantumCircuit(n, n)

        for i in range(n):
            qc.h(i)

        for i in range(n):
            if i % 2 == 1:
                # X basis: extra H before measuring
                qc.h(i)
            qc.measure(i, i)

        return qc

    def get_raw_bits(self) -> List[int]:
        """Run the circuit once and return one bit per qubit."""
        tqc = transpile(self._build_circuit(), self.backend)
        result = self.backend.run(tqc, shots=1).result()
        counts = result.get_counts()

        # counts is {'0101...': 1}; qiskit orders bits q_(n-1) ... q_0.
        bitstring = next(iter(counts.keys()))[::-1]
        return [int(b) for b in bitstring]


class QuantumRandom:
    """
    Random source backed by the simulator.

    Each engine run is amplified through ``entropy_rounds`` of SHA-256 and
    buffered; ``randrange`` rejection-samples from the buffer so every
    index is equally likely.
    """

    def __init__(
        self,
        num_qubits: int = 16,
        entropy_rounds: int = 2,
        engine: QuantumEngine | None = None,
    ) -> None:
        self.engine = engine or QuantumEngine(num_qubits)
        self.entropy_rounds = entropy_rounds
        # Pending random bits as a "0101..." string, consumed from the left.
        self._buffer = ""

    def _mix(self, bitstring: str) -> str:
        """
        Hash a raw bitstring ``entropy_rounds`` times with SHA-256.

        Each run yields the 256 digest bits; with no rounds the raw bits
        pass through unchanged.
        """
        if self.entropy_rounds <= 0:
            return bitstring

        data = int(bitstring, 2).to_bytes((len(bitstring) + 7) // 8, "big")
        for _ in range(self.entropy_rounds):
            data = hashlib.sha256(data).digest()
        return "".join(f"{byte:08b}" for byte in data)

    def _refill(self) -> None:
        try:
            bits = self.engine.get_raw_bits()
        except Exception as exc:
            raise RandomSourceError(f"Quantum engine failed: {exc}") from exc

        if not bits:
            raise RandomSourceError("Quantum engine returned no bits.")

        self._buffer += self._mix("".join(str(b) for b in bits))
        logger.debug("Quantum buffer refilled: %d bits available", len(self._buffer))

    def getrandbits(self, k: int) -> int:
        if k < 0:
            raise InvalidArgumentError(f"Number of bits must be >= 0, got {k}.")
        while len(self._buffer) < k:
            self._refill()
        chunk, self._buffer = self._buffer[:k], self._buffer[k:]
        return int(chunk, 2) if chunk else 0

    def randrange(self, stop: int) -> int:
        if stop <= 0:
            raise InvalidArgumentError(f"randrange() needs stop > 0, got {stop}.")
        k = (stop - 1).bit_length()
        while True:
            value = self.getrandbits(k)
            if value < stop:
                return value
