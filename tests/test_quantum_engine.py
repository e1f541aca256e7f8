import pytest

pytest.importorskip("qiskit_aer")

from spgen.errors import InvalidArgumentError, RandomSourceError  # noqa: E402
from spgen.generator import generate  # noqa: E402
from spgen.config import GeneratorConfig  # noqa: E402
from spgen.quantum_engine import QuantumEngine, QuantumRandom  # noqa: E402
from spgen.session import PasswordSession  # noqa: E402


class FakeEngine:
    def __init__(self, bits):
        self.bits = bits
        self.runs = 0

    def get_raw_bits(self):
        self.runs += 1
        return list(self.bits)


class BrokenEngine:
    def get_raw_bits(self):
        raise RuntimeError("simulator crashed")


def test_randrange_reads_buffer_msb_first():
    rng = QuantumRandom(entropy_rounds=0, engine=FakeEngine([1, 0, 0, 1]))

    assert rng.randrange(4) == 2
    assert rng.randrange(4) == 1


def test_randrange_rejects_values_out_of_range():
    # 0b11 = 3 is rejected for stop=3, then 0b01 is accepted
    rng = QuantumRandom(entropy_rounds=0, engine=FakeEngine([1, 1, 0, 1]))
    assert rng.randrange(3) == 1


def test_randrange_single_value_needs_no_bits():
    engine = FakeEngine([1])
    rng = QuantumRandom(entropy_rounds=0, engine=engine)

    assert rng.randrange(1) == 0
    assert engine.runs == 0


def test_refills_across_engine_runs():
    engine = FakeEngine([1, 0, 1])
    rng = QuantumRandom(entropy_rounds=0, engine=engine)

    assert rng.getrandbits(7) == 0b1011011
    assert engine.runs == 3


def test_invalid_stop():
    rng = QuantumRandom(engine=FakeEngine([1]))
    with pytest.raises(InvalidArgumentError):
        rng.randrange(0)


def test_engine_failure_becomes_random_source_error(registry):
    rng = QuantumRandom(engine=BrokenEngine())

    with pytest.raises(RandomSourceError):
        generate(8, registry, rng)


def test_invalid_qubit_count():
    with pytest.raises(InvalidArgumentError):
        QuantumEngine(0)


def test_simulator_bits_and_generation(registry):
    engine = QuantumEngine(8)
    bits = engine.get_raw_bits()

    assert len(bits) == 8
    assert set(bits) <= {0, 1}

    registry.toggle(2)
    password = generate(12, registry, QuantumRandom(engine=engine))
    assert len(password) == 12
    assert password.isdigit()


def test_amplified_refill_yields_digest_bits():
    engine = FakeEngine([1, 0, 1])
    rng = QuantumRandom(entropy_rounds=2, engine=engine)

    rng.getrandbits(256)
    assert engine.runs == 1
    rng.getrandbits(1)
    assert engine.runs == 2


def test_amplification_is_deterministic_for_equal_input():
    first = QuantumRandom(entropy_rounds=2, engine=FakeEngine([1, 1, 0, 1]))
    second = QuantumRandom(entropy_rounds=2, engine=FakeEngine([1, 1, 0, 1]))
    other = QuantumRandom(entropy_rounds=1, engine=FakeEngine([1, 1, 0, 1]))

    value = first.getrandbits(256)
    assert second.getrandbits(256) == value
    assert other.getrandbits(256) != value


def test_engine_returning_no_bits():
    rng = QuantumRandom(engine=FakeEngine([]))
    with pytest.raises(RandomSourceError):
        rng.getrandbits(4)


def test_session_follows_use_quantum_config():
    session = PasswordSession(GeneratorConfig(use_quantum=True, num_qubits=8))

    assert isinstance(session.rng, QuantumRandom)
    assert session.rng.engine.num_qubits == 8

    session.toggle(2)
    assert len(session.password) == 6
    assert session.password.isdigit()
