"""A token of the input text together with its readings and phonemes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .entry import Entry, Event
from .helper import KASRE, EventType, TokenType, strip_diacritics
from .phoneme import Phoneme

_log = logging.getLogger(__name__)

_SYLLABLE_MARK = "^"


@dataclass
class Word:
    """A word of the corpus: its text, position, flags, entries and phonemes."""

    text: str = ""
    type: TokenType = TokenType.UNKNOWN
    length: int = 0
    offset: int = 0
    end_of_sentence: bool = False
    end_of_paragraph: bool = False
    has_diacritic: bool = False
    auto_phonetics: bool = False
    entries: list[Entry] = field(default_factory=list)
    events: list[Event] = field(default_factory=list)
    phonemes: list[Phoneme] = field(default_factory=list)

    def text_without_diacritics(self) -> str:
        """The text with diacritics removed, if the word is marked as having any."""
        if not self.has_diacritic:
            return self.text
        return strip_diacritics(self.text)

    def is_persian_word(self) -> bool:
        """Whether the token is a Persian word."""
        return self.type == TokenType.PERSIAN

    def is_non_persian_word(self) -> bool:
        """Whether the token is a word in another script."""
        return self.type == TokenType.NON_PERSIAN

    def is_punctuation(self) -> bool:
        """Whether the token is a punctuation mark."""
        return self.type == TokenType.PUNCTUATION

    def is_number(self) -> bool:
        """Whether the token is a number."""
        return self.type == TokenType.NUMBER

    def is_empty(self) -> bool:
        """Whether no entry has been found for the word yet."""
        return not self.entries

    def ends_with_kasre(self) -> bool:
        """Whether the text ends with a kasre (ezafe) mark."""
        return self.text.endswith(KASRE)

    def first_entry(self) -> Entry:
        """The first entry, or an empty entry (with a warning) if there is none."""
        if self.entries:
            return self.entries[0]
        _log.warning("no entry for '%s'.", self.text)
        return Entry()

    def parse_pronunciation(self) -> None:
        """Turn the first entry's pronunciation into phonemes."""
        pron = self.first_entry().pron
        previous = [""] + list(pron[:-1])
        following = list(pron[1:]) + [""]
        for prev, current, nxt in zip(previous, pron, following):
            if current == _SYLLABLE_MARK:
                continue
            self.phonemes.append(Phoneme.from_context(prev, current, nxt))

    def add_entry(self, entry: Entry) -> None:
        """Append a reading of the word."""
        self.entries.append(entry)

    def add_event(self, event_type: EventType, value: str) -> None:
        """Attach a control event to the word."""
        self.events.append(Event(event_type, value))