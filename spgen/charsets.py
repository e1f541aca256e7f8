"""
Charset registry: the named character subsets a password is drawn from.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Iterable, Iterator, List

from .errors import InvalidArgumentError, OutOfRangeError

# Alphabet size reported when no charset is enabled. Kept as a fixed
# constant so entropy values match older releases exactly.
LEGACY_FALLBACK_SIZE = 26.0


@dataclass
class CharsetEntry:
    label: str
    characters: str
    enabled: bool = False

    def __post_init__(self) -> None:
        if not self.characters:
            raise InvalidArgumentError(
                f"Charset {self.label!r} must contain at least one character."
            )


class CharsetRegistry:
    """
    Fixed, ordered collection of charset entries.

    The set of entries never changes after construction; only their
    ``enabled`` flags do. Entries are addressed by position, which is the
    stable key front-ends should bind their buttons to.
    """

    def __init__(self, entries: Iterable[CharsetEntry], default_index: int = 0) -> None:
        self._entries: List[CharsetEntry] = list(entries)
        if not self._entries:
            raise InvalidArgumentError("A charset registry needs at least one entry.")
        if not 0 <= default_index < len(self._entries):
            raise InvalidArgumentError(
                f"default_index={default_index} does not address one of "
                f"{len(self._entries)} entries."
            )
        self.default_index = default_index

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CharsetEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> CharsetEntry:
        return self._entries[self._check_index(index)]

    def __repr__(self) -> str:
        flags = ", ".join(
            f"{e.label}={'on' if e.enabled else 'off'}" for e in self._entries
        )
        return f"CharsetRegistry({flags})"

    def _check_index(self, index: int) -> int:
        # No negative wrap-around: -1 is as invalid as len(self).
        if isinstance(index, bool) or not isinstance(index, int):
            raise OutOfRangeError(f"Charset index must be an int, got {index!r}.")
        if not 0 <= index < len(self._entries):
            raise OutOfRangeError(
                f"Charset index {index} out of range [0, {len(self._entries)})."
            )
        return index

    @property
    def default_entry(self) -> CharsetEntry:
        return self._entries[self.default_index]

    def toggle(self, index: int) -> bool:
        """Flip the enabled flag of one entry and return its new value."""
        entry = self._entries[self._check_index(index)]
        entry.enabled = not entry.enabled
        return entry.enabled

    def set_enabled(self, index: int, enabled: bool) -> None:
        self._entries[self._check_index(index)].enabled = bool(enabled)

    def index_of(self, label: str) -> int:
        for i, entry in enumerate(self._entries):
            if entry.label == label:
                return i
        raise OutOfRangeError(f"No charset labelled {label!r}.")

    def enabled_labels(self) -> list[str]:
        return [e.label for e in self._entries if e.enabled]

    def active_alphabet(self) -> str:
        """
        Characters of every enabled entry, in registry order.

        Falls back to the default entry's characters when nothing is
        enabled, so the result is never empty.
        """
        alphabet = "".join(e.characters for e in self._entries if e.enabled)
        if not alphabet:
            alphabet = self.default_entry.characters
        return alphabet

    def active_alphabet_size(self, legacy_fallback: bool = True) -> float:
        """
        Alphabet size used by the entropy formula.

        With nothing enabled this is ``LEGACY_FALLBACK_SIZE`` when
        ``legacy_fallback`` is set, otherwise the size of the default entry.
        """
        size = sum(len(e.characters) for e in self._entries if e.enabled)
        if size == 0:
            if legacy_fallback:
                return LEGACY_FALLBACK_SIZE
            return float(len(self.default_entry.characters))
        return float(size)

    def copy(self) -> "CharsetRegistry":
        return CharsetRegistry(copy.deepcopy(self._entries), self.default_index)


def default_registry() -> CharsetRegistry:
    """The four charsets of the desktop application, all disabled."""
    return CharsetRegistry(
        [
            CharsetEntry("a-z", "abcdefghijklmnopqrstuvwxyz"),
            CharsetEntry("A-Z", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"),
            CharsetEntry("0-9", "0123456789"),
            CharsetEntry("%!$", ")(*&^%$#@!~"),
        ]
    )
