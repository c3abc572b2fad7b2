"""A line of input text and the words found in it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from .word import Word

_log = logging.getLogger(__name__)


@dataclass
class Corpus:
    """The words of one line of text, with the line's offset in the input."""

    text: str = ""
    offset: int = 0
    words: list[Word] = field(default_factory=list)

    def add_word(self, word: Word) -> None:
        """Append a word."""
        self.words.append(word)

    def first_word(self) -> Word | None:
        """The first word, or None if there are none."""
        return self.words[0] if self.words else None

    def last_word(self) -> Word | None:
        """The last word, or None if there are none."""
        return self.words[-1] if self.words else None

    def is_empty(self) -> bool:
        """Whether the corpus has no words."""
        return not self.words

    def clear(self) -> None:
        """Forget the text and all words."""
        self.text = ""
        self.words.clear()

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self.words)

    def to_xml(self) -> str:
        """The words and their entries as an XML document."""
        lines = ['<?xml version="1.0" encoding="utf-8" ?>', "<corpus>"]
        for word in self.words:
            flags = "".join(
                (
                    ' g2p="1"' if word.auto_phonetics else "",
                    ' eop="1"' if word.end_of_paragraph else "",
                    ' eos="1"' if word.end_of_sentence else "",
                )
            )
            lines.append(
                f'\t<word offset="{word.offset}" length="{word.length}" '
                f'text="{word.text}"{flags}>'
            )
            for entry in word.entries:
                lines.append(
                    f'\t\t<entry pron="{entry.pron}" pos="{entry.pos}" '
                    f'stem="{entry.stem}" lemma="{entry.lemma}" '
                    f'weight="{entry.weight}" />'
                )
            lines.append("\t</word>")
        lines.append("</corpus>")
        return "\n".join(lines)

    def to_txt(self) -> str:
        """One line per word: text, tag, and pronunciation (``*`` if guessed)."""
        lines = []
        for word in self.words:
            entry = word.first_entry()
            mark = "*" if word.auto_phonetics else " "
            lines.append(f"{word.text}\t{entry.pos}\t{mark}{entry.pron}\n")
        return "".join(lines)

    def dump(self, filename: str, directory: str | Path = "log") -> None:
        """Write the corpus to ``directory/filename``: XML for ``.xml``, text otherwise.

        A directory that cannot be written to is skipped, as this is a debug log.
        """
        _, dot, extension = filename.rpartition(".")
        content = self.to_xml() if dot and extension == "xml" else self.to_txt()
        try:
            Path(directory, filename).write_text(content, encoding="utf-8")
        except OSError as error:
            _log.debug("cannot dump corpus to %s: %s", filename, error)