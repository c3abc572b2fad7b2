"""Lexicon entries and word events."""

from __future__ import annotations

from dataclasses import dataclass

from .helper import EventType, concat_pronunciations

_GENITIVE_TAG = "_GEN"


@dataclass
class Entry:
    """One reading of a word: pronunciation, part of speech, stem and lemma."""

    lemma: str = ""
    stem: str = ""
    pron: str = ""
    pos: str = ""
    weight: int = 0

    def is_verb(self) -> bool:
        """Whether the part-of-speech tag marks a verb."""
        return self.pos.startswith("V")

    def is_noun(self) -> bool:
        """Whether the part-of-speech tag marks a noun."""
        return self.pos.startswith("N")

    def is_pronoun(self) -> bool:
        """Whether the part-of-speech tag marks a pronoun."""
        return self.pos.startswith("P")

    def is_adjective(self) -> bool:
        """Whether the part-of-speech tag marks an adjective."""
        return self.pos.startswith("AJ")

    def is_determiner(self) -> bool:
        """Whether the part-of-speech tag marks a determiner."""
        return self.pos.startswith("DET")

    def is_adverb(self) -> bool:
        """Whether the part-of-speech tag marks an adverb."""
        return self.pos.startswith("ADV")

    def is_adposition(self) -> bool:
        """Whether the part-of-speech tag marks an adposition."""
        return self.pos.startswith("POS")

    def is_conjunction(self) -> bool:
        """Conjunctions are not told apart by the tag set; always False."""
        return False

    def is_numeral(self) -> bool:
        """Whether the part-of-speech tag marks a numeral."""
        return self.pos.startswith("NUM")

    def is_interjection(self) -> bool:
        """Interjections are not told apart by the tag set; always False."""
        return False

    def add_genitive(self) -> None:
        """Mark the entry as genitive (ezafe) and add the linking vowel."""
        self.pos += _GENITIVE_TAG
        self.pron = concat_pronunciations(self.pron, "e")

    def has_genitive(self) -> bool:
        """Whether the entry has been marked as genitive."""
        return _GENITIVE_TAG in self.pos


@dataclass
class Event:
    """A control event attached to a word (bookmark, rate change, ...)."""

    type: EventType = EventType.UNKNOWN
    value: str = ""