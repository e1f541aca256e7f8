"""
Command-line interface and high-level generator function.
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Sequence

from .charsets import CharsetRegistry, default_registry
from .config import DEFAULT_CONFIG, GeneratorConfig, setup_logging
from .errors import PasswordGenError
from .generator import RandomSource, generate
from .session import make_random_source
from .strength import StrengthReport, estimate

logger = logging.getLogger(__name__)


@dataclass
class GenerationMeta:
    """
    Full result of one password generation.
    """
    password: str
    report: StrengthReport
    # Labels of the charsets that were enabled (empty means default fallback)
    charsets: list[str]
    config: GeneratorConfig

    @property
    def entropy_bits(self) -> float:
        return self.report.entropy_bits

    @property
    def strength(self) -> str:
        return self.report.label


def generate_password_with_meta(
    config: GeneratorConfig | None = None,
    registry: CharsetRegistry | None = None,
    rng: RandomSource | None = None,
) -> GenerationMeta:
    """
    Generate one password and its strength report.

    - Draw ``config.password_length`` characters from the enabled charsets.
    - Estimate entropy and label from the same length and registry.
    """
    cfg = config or DEFAULT_CONFIG
    reg = registry or default_registry()
    source = rng if rng is not None else make_random_source(cfg)

    password = generate(cfg.password_length, reg, source)
    report = estimate(len(password), reg, policy=cfg.strength_policy)

    return GenerationMeta(
        password=password,
        report=report,
        charsets=reg.enabled_labels(),
        config=cfg,
    )


def generate_password(
    config: GeneratorConfig | None = None,
    registry: CharsetRegistry | None = None,
) -> str:
    meta = generate_password_with_meta(config, registry)
    return meta.password


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spgen",
        description="Generate random passwords from selectable character sets.",
    )
    parser.add_argument(
        "-l", "--length", type=int, default=DEFAULT_CONFIG.password_length,
        help="number of characters (default: %(default)s)",
    )
    parser.add_argument(
        "-c", "--charset", action="append", default=[], metavar="LABEL",
        help="enable a charset by label (a-z, A-Z, 0-9, %%!$); repeatable",
    )
    parser.add_argument(
        "-n", "--count", type=int, default=1,
        help="how many passwords to print (default: %(default)s)",
    )
    parser.add_argument(
        "--quantum", action="store_true",
        help="draw from the qiskit simulator instead of the stdlib PRNG",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for `python -m spgen.cli`, the `spgen` script or `run_spgen.py`.
    """
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    cfg = GeneratorConfig(password_length=args.length, use_quantum=args.quantum)
    registry = default_registry()

    try:
        for label in args.charset:
            registry.set_enabled(registry.index_of(label), True)
        rng = make_random_source(cfg)
        for _ in range(max(0, args.count)):
            meta = generate_password_with_meta(cfg, registry, rng)
            print(meta.password)
            print(meta.report)
    except PasswordGenError as exc:
        logger.debug("Generation failed", exc_info=True)
        print(f"spgen: error: {exc}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
