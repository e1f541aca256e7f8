import logging
import random

import pytest

from spgen.charsets import default_registry
from spgen.cli import generate_password, generate_password_with_meta, main
from spgen.config import GeneratorConfig, setup_logging


def test_generate_password_defaults():
    password = generate_password()
    assert len(password) == 6
    assert password.islower()


def test_generate_password_with_meta():
    registry = default_registry()
    registry.toggle(1)
    registry.toggle(2)

    meta = generate_password_with_meta(
        GeneratorConfig(password_length=12), registry, random.Random(0)
    )

    assert len(meta.password) == 12
    assert meta.strength == "strong"
    assert meta.entropy_bits == pytest.approx(62.04, abs=0.01)
    assert meta.charsets == ["A-Z", "0-9"]


def test_main_prints_password_and_readout(capsys):
    assert main(["-l", "12", "-c", "A-Z", "-c", "0-9"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert len(lines[0]) == 12
    assert set(lines[0]) <= set("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")
    assert lines[1] == "Strength: strong | Entropy: 62.04 bit"


def test_main_count(capsys):
    assert main(["-n", "3"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 6


def test_main_unknown_charset(capsys):
    assert main(["-c", "emoji"]) == 2
    assert "error" in capsys.readouterr().err


def test_main_negative_length(capsys):
    assert main(["-l", "-4"]) == 2
    assert "length" in capsys.readouterr().err


def test_setup_logging_does_not_duplicate_handlers():
    logger = setup_logging(logging.INFO)
    count = len(logger.handlers)

    setup_logging(logging.DEBUG)

    assert len(logger.handlers) == count
    assert logger.level == logging.DEBUG
    logger.setLevel(logging.WARNING)
