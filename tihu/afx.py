"""Prefix and suffix rules of the lexicon."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from .hash_manager import HashEntry

if TYPE_CHECKING:
    from .word import Word


class AffixHost(Protocol):
    """What an affix rule needs from the manager that owns it."""

    def lookup(self, text: str) -> list[HashEntry]:
        """Every reading of the root word ``text``."""

    def parse_entry(
        self,
        hentry: HashEntry,
        prefix: PrefixEntry | None,
        suffix: SuffixEntry | None,
        word: Word,
    ) -> None:
        """Add to ``word`` the entry built from a root and its affixes."""

    def suffix_check(
        self, text: str, prefix: PrefixEntry | None, needflag: int, word: Word
    ) -> None:
        """Try every suffix rule on ``text``."""


@dataclass(eq=False)
class AffixEntry:
    """An affix: the text it appends, its pronunciation and its tag."""

    manager: AffixHost = field(repr=False)
    flag: int = 0
    append: str = ""
    pron: str = ""
    pos: str = ""

    @property
    def key(self) -> str:
        """The string the affix rules are sorted and searched by."""
        return self.append


@dataclass(eq=False)
class PrefixEntry(AffixEntry):
    """A prefix rule."""

    def check_word(self, text: str, needflag: int, word: Word) -> None:
        """Strip this prefix from ``text`` and look the root up, then try suffixes.

        ``text`` is expected to start with the prefix.
        """
        if len(text) - len(self.append) <= 0:
            return

        root = text[len(self.append):]
        for hentry in self.manager.lookup(root):
            if hentry.has_flag(needflag):
                self.manager.parse_entry(hentry, self, None, word)

        self.manager.suffix_check(root, self, needflag, word)


@dataclass(eq=False)
class SuffixEntry(AffixEntry):
    """A suffix rule; searched by its reversed text."""

    @property
    def key(self) -> str:
        """The suffix text reversed."""
        return self.append[::-1]

    def check_word(
        self, text: str, prefix: PrefixEntry | None, needflag: int, word: Word
    ) -> None:
        """Strip this suffix from ``text`` and add every root that accepts it.

        ``text`` is expected to end with the suffix.
        """
        root_length = len(text) - len(self.append)
        if root_length < 0:
            return

        root = text[:root_length]
        for hentry in self.manager.lookup(root):
            if hentry.has_flag(self.flag) and hentry.has_flag(needflag):
                self.manager.parse_entry(hentry, prefix, self, word)