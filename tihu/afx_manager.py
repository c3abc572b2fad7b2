"""Affix rules of the lexicon and the search for affixed forms of root words."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from .afx import PrefixEntry, SuffixEntry
from .entry import Entry
from .file_manager import FileManager
from .hash_manager import HashEntry, HashManager
from .helper import ZWNJ, concat_pronunciations

if TYPE_CHECKING:
    from .word import Word

_log = logging.getLogger(__name__)

_WILDCARD = "."
_KEEP_POS = "."
_ATTRIBUTE_MARK = "*"


def _encode_flag(text: str) -> int:
    """A two-character affix flag as one number."""
    high = ord(text[0]) if text else 0
    low = ord(text[1]) if len(text) > 1 else 0
    return (high << 8) + low


def _prefix_order(entry: PrefixEntry) -> bytes:
    return entry.key.encode("utf-8")


def _suffix_order(entry: SuffixEntry) -> bytes:
    # suffixes are ordered by their text reversed byte by byte
    return entry.append.encode("utf-8")[::-1]


def _is_subset(key: str, text: str) -> bool:
    """Whether ``key`` is a leading part of ``text``."""
    return text.startswith(key)


def _is_rev_subset(key: str, text: str) -> bool:
    """Whether the reversed suffix ``key`` matches the end of ``text``.

    A ``.`` in the key matches any character.
    """
    if len(key) > len(text):
        return False
    return all(k == t or k == _WILDCARD for k, t in zip(key, reversed(text)))


class AffixManager:
    """Holds the prefix and suffix rules and finds affixed forms of root words."""

    def __init__(self, hash_manager: HashManager) -> None:
        self.hash_manager = hash_manager
        self._prefixes: list[PrefixEntry] = []
        self._suffixes: list[SuffixEntry] = []

    @property
    def prefixes(self) -> tuple[PrefixEntry, ...]:
        """The prefix rules in search order."""
        return tuple(self._prefixes)

    @property
    def suffixes(self) -> tuple[SuffixEntry, ...]:
        """The suffix rules in search order."""
        return tuple(self._suffixes)

    def load(self, path: str | Path) -> None:
        """Read ``PFX``/``SFX`` affix blocks from an affix file."""
        with FileManager(path) as reader:
            while reader.read_line():
                piece = reader.next_piece()
                if piece.startswith(("PFX", "SFX")):
                    self._parse_affix(piece[0], reader, path)

        # Entries are added at the front, so among equal keys the one read
        # last is searched first.
        self._prefixes.sort(key=_prefix_order)
        self._suffixes.sort(key=_suffix_order)

    def _parse_affix(self, afx_type: str, reader: FileManager, path: str | Path) -> None:
        flag_text = reader.next_piece()
        count_text = reader.next_piece()
        try:
            count = int(count_text)
        except ValueError:
            raise ValueError(
                f"{path}: line {reader.line_num}: bad affix count {count_text!r}"
            ) from None
        if count <= 0:
            return

        flag = _encode_flag(flag_text)
        entry_class = SuffixEntry if afx_type == "S" else PrefixEntry
        entries: list[PrefixEntry | SuffixEntry] = []

        for _ in range(count):
            reader.read_line()
            reader.next_piece()  # affix type
            reader.next_piece()  # affix flag
            append = reader.next_piece()
            pos = reader.next_piece()
            pron = reader.next_piece()

            if not pron:
                _log.warning("error: line %d: wrong affix entry.", reader.line_num)
                break

            entries.append(
                entry_class(
                    manager=self,
                    flag=flag,
                    append=append.replace("_", ZWNJ),
                    pron=pron,
                    pos=pos,
                )
            )

        for entry in entries:
            if afx_type == "P":
                self._prefixes.insert(0, entry)
            else:
                self._suffixes.insert(0, entry)

    def lookup(self, text: str) -> list[HashEntry]:
        """Every reading of the root word ``text``."""
        return self.hash_manager.lookup(text)

    def _matching_prefixes(self, text: str) -> Iterator[PrefixEntry]:
        return (p for p in self._prefixes if p.key and _is_subset(p.key, text))

    def _matching_suffixes(self, text: str) -> Iterator[SuffixEntry]:
        return (s for s in self._suffixes if s.key and _is_rev_subset(s.key, text))

    def affix_check(self, text: str, needflag: int, word: Word) -> None:
        """Try every prefix (crossed with suffixes), then every suffix, on ``text``."""
        self.prefix_check(text, needflag, word)
        self.suffix_check(text, None, needflag, word)

    def prefix_check(self, text: str, needflag: int, word: Word) -> None:
        """Try every prefix rule that ``text`` starts with."""
        for prefix in list(self._matching_prefixes(text)):
            prefix.check_word(text, needflag, word)

    def suffix_check(
        self, text: str, prefix: PrefixEntry | None, needflag: int, word: Word
    ) -> None:
        """Try every suffix rule that ``text`` ends with."""
        if not text:
            return
        for suffix in list(self._matching_suffixes(text)):
            suffix.check_word(text, prefix, needflag, word)

    def is_prefix(self, text: str) -> bool:
        """Whether ``text`` starts with one of the prefixes."""
        return any(True for _ in self._matching_prefixes(text))

    def parse_entry(
        self,
        hentry: HashEntry,
        prefix: PrefixEntry | None,
        suffix: SuffixEntry | None,
        word: Word,
    ) -> None:
        """Add to ``word`` the entry built from a root and the affixes around it."""
        pos = hentry.pos
        pron = hentry.pron
        stem = hentry.word
        weight = hentry.weight
        lemma_weight = self.hash_manager.lemma_weight(hentry.lemma)
        if lemma_weight > 0:
            weight = lemma_weight

        if prefix is not None:
            pron = concat_pronunciations(prefix.pron, pron)
            stem = f"{prefix.append}+{stem}"
            pos = prefix.pos

        if suffix is not None:
            if suffix.pos != _KEEP_POS:
                if suffix.pos.startswith(_ATTRIBUTE_MARK):
                    attribute = suffix.pos[1:]
                    if attribute not in pos:
                        pos = f"{pos}_{attribute}"
                else:
                    pos = suffix.pos
            pron = concat_pronunciations(pron, suffix.pron)
            stem = f"{stem}+{suffix.append}"

        word.add_entry(
            Entry(lemma=hentry.lemma, stem=stem, pron=pron, pos=pos, weight=weight)
        )