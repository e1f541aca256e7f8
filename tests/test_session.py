import random
import threading

import pytest

from spgen.config import GeneratorConfig
from spgen.errors import OutOfRangeError, RandomSourceError
from spgen.session import PasswordSession


@pytest.fixture
def session():
    return PasswordSession(rng=random.Random(7))


def test_initial_state(session):
    snap = session.snapshot()

    assert snap.password == ""
    assert snap.length == 6
    assert snap.entropy_bits == 0.0
    assert snap.strength == "weak"
    assert snap.charsets == (("a-z", False), ("A-Z", False), ("0-9", False), ("%!$", False))


def test_regenerate_updates_readout(session):
    report = session.regenerate()

    assert len(session.password) == 6
    assert session.password.islower()
    assert session.entropy_bits == report.entropy_bits
    assert f"{session.entropy_bits:.2f}" == "28.20"


def test_toggle_regenerates_with_new_alphabet(session):
    session.set_length(12)
    session.toggle(1)
    session.toggle(2)

    snap = session.snapshot()
    assert len(snap.password) == 12
    assert set(snap.password) <= set("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")
    assert snap.strength == "strong"


def test_bad_toggle_keeps_previous_result(session):
    session.regenerate()
    before = session.snapshot()

    with pytest.raises(OutOfRangeError):
        session.toggle(9)

    assert session.snapshot() == before


@pytest.mark.parametrize("requested, expected", [(0, 1), (-5, 1), (30, 30), (500, 64)])
def test_set_length_clamps_to_slider_range(session, requested, expected):
    assert session.set_length(requested) == expected
    assert session.length == expected


def test_custom_config_bounds():
    session = PasswordSession(GeneratorConfig(password_length=100, max_length=32))
    assert session.length == 32


def test_concurrent_toggles_and_generation():
    session = PasswordSession(rng=random.Random(3))
    errors = []

    def worker(index):
        try:
            for _ in range(200):
                session.toggle(index)
                session.regenerate()
        except Exception as exc:  # noqa: BLE001
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    # 200 toggles per entry: everything is back to disabled
    assert session.registry.enabled_labels() == []
    assert set(session.password) <= set(session.registry.active_alphabet())


class SwitchableRandom:
    def __init__(self):
        self.rng = random.Random(11)
        self.broken = False

    def randrange(self, stop):
        if self.broken:
            raise OSError("entropy source unplugged")
        return self.rng.randrange(stop)


def test_failed_toggle_rolls_back_charset():
    rng = SwitchableRandom()
    session = PasswordSession(rng=rng)
    session.regenerate()
    before = session.snapshot()

    rng.broken = True
    with pytest.raises(RandomSourceError):
        session.toggle(2)

    assert session.snapshot() == before
    assert session.registry.enabled_labels() == []


def test_failed_regenerate_keeps_previous_result():
    rng = SwitchableRandom()
    session = PasswordSession(rng=rng)
    session.toggle(0)
    before = session.snapshot()

    rng.broken = True
    with pytest.raises(RandomSourceError):
        session.regenerate()

    assert session.snapshot() == before


def test_default_config_uses_stdlib_prng():
    assert PasswordSession().rng is None
