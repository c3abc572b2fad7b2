"""Root-word table of the lexicon, keyed by the written form of each word."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .file_manager import FileManager

_log = logging.getLogger(__name__)

FLAG_NULL = 0
"""The empty affix flag: every entry accepts it."""

USERWORD = 1000
"""Approximate number of user-defined words reserved beyond the declared count."""

_TABLE_EXTRA = USERWORD + 5


def decode_flags(flags: str) -> list[int]:
    """Split an affix flag string into two-character flags, in written order.

    Each flag is the first character's code shifted left by eight bits plus
    the second character's code. A trailing odd character is ignored.
    """
    if len(flags) % 2 == 1:
        _log.warning("bad flag vector: %s", flags)
    pairs = zip(flags[0::2], flags[1::2])
    return [(ord(high) << 8) + ord(low) for high, low in pairs]


@dataclass(frozen=True)
class HashEntry:
    """A root word with one of its readings and the affix flags it accepts."""

    word: str
    pos: str
    pron: str
    lemma: str
    weight: int = 0
    flags: tuple[int, ...] = ()

    def has_flag(self, flag: int) -> bool:
        """Whether the entry accepts ``flag``; the null flag is always accepted."""
        return flag == FLAG_NULL or flag in self.flags

    def same_reading(self, other: HashEntry) -> bool:
        """Whether both entries hold the same word, tag, pronunciation and lemma."""
        return (self.word, self.pos, self.pron, self.lemma) == (
            other.word,
            other.pos,
            other.pron,
            other.lemma,
        )


class HashManager:
    """Holds the root words of the dictionary and the total weight of each lemma."""

    def __init__(self) -> None:
        self._table: dict[str, list[HashEntry]] = {}
        self._lemma_weights: dict[str, int] = {}

    def load_table(self, path: str | Path) -> None:
        """Load a dictionary file.

        The first line gives the word count; each following line holds
        ``word[/flags] pos pron weight [lemma]``.
        """
        with FileManager(path) as reader:
            reader.read_line()
            count_text = reader.next_piece()
            try:
                count = int(count_text)
            except ValueError:
                raise ValueError(
                    f"{path}: line 1: missing or bad word count in the dic file"
                ) from None
            if count == 0:
                raise ValueError(f"empty dic file {path}")
            if count + _TABLE_EXTRA <= 0:
                raise ValueError(
                    f"{path}: line 1: missing or bad word count in the dic file"
                )

            while reader.read_line():
                word = reader.next_piece()
                pos = reader.next_piece()
                pron = reader.next_piece()
                weight_text = reader.next_piece()
                lemma = reader.next_piece()

                word, slash, flag_text = word.partition("/")
                flags = decode_flags(flag_text) if slash else []

                try:
                    weight = int(weight_text)
                except ValueError:
                    raise ValueError(
                        f"{path}: line {reader.line_num}: bad weight {weight_text!r}"
                    ) from None
                self.add_word(word, lemma, pos, pron, flags, weight)

    def add_word(
        self,
        word: str,
        lemma: str,
        pos: str,
        pron: str,
        flags: Iterable[int],
        weight: int,
    ) -> bool:
        """Add a reading of ``word``; False if the same reading is already there."""
        entry = HashEntry(word, pos, pron, lemma, weight, tuple(sorted(flags)))
        homonyms = self._table.setdefault(word, [])
        if any(entry.same_reading(existing) for existing in homonyms):
            _log.warning("duplicated entry: %s", word)
            return False
        homonyms.append(entry)

        if lemma:
            self._lemma_weights[lemma] = self._lemma_weights.get(lemma, 0) + weight
        return True

    def lookup(self, text: str) -> list[HashEntry]:
        """Every reading of the root word ``text``, in the order they were added."""
        return list(self._table.get(text, ()))

    def lemma_weight(self, lemma: str) -> int:
        """Total weight of all entries with this lemma, or 0."""
        if not lemma:
            return 0
        return self._lemma_weights.get(lemma, 0)

    def __contains__(self, text: object) -> bool:
        return text in self._table

    def __len__(self) -> int:
        return len(self._table)