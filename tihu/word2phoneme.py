"""Pronunciation of Persian words not found in the lexicon."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from .g2p import G2PSeq2Seq

_log = logging.getLogger(__name__)

DEFAULT_LOG_PATH = "./log/unknown_words.txt"


class Converter(Protocol):
    """What a grapheme-to-phoneme converter provides."""

    def load_model(self, model: str) -> None: ...

    def convert(self, word: str) -> str: ...

    def close(self) -> None: ...


class Word2Phoneme:
    """Guesses pronunciations with a g2p model and counts the words it was asked for."""

    def __init__(
        self,
        log_path: str | Path = DEFAULT_LOG_PATH,
        g2p: Converter | None = None,
    ) -> None:
        self.log_path = Path(log_path)
        self.g2p: Converter = g2p if g2p is not None else G2PSeq2Seq()
        self.unknown_words: dict[str, int] = {}
        self.load_unknown_words()

    def load_model(self, model: str) -> None:
        """Start the g2p model stored in ``model``."""
        self.g2p.load_model(model)

    def convert(self, word: str) -> str:
        """The guessed pronunciation of ``word``; the word is counted as unknown."""
        self.unknown_words[word] = self.unknown_words.get(word, 0) + 1
        return self.g2p.convert(word)

    def load_unknown_words(self) -> None:
        """Read ``word<TAB>count`` lines from the log; bad lines are skipped."""
        try:
            content = self.log_path.read_text(encoding="utf-8")
        except OSError:
            return

        for line in content.splitlines():
            word, tab, count = line.partition("\t")
            if not tab or not word:
                continue
            try:
                self.unknown_words[word] = int(count.strip())
            except ValueError:
                continue

    def save_unknown_words(self) -> None:
        """Write the counted words to the log, most frequent first."""
        ranked = sorted(self.unknown_words.items(), key=lambda item: item[1], reverse=True)
        content = "".join(f"{word}\t{count}\n" for word, count in ranked)
        try:
            self.log_path.write_text(content, encoding="utf-8")
        except OSError as error:
            _log.debug("cannot save unknown words to %s: %s", self.log_path, error)

    def close(self) -> None:
        """Save the counted words and stop the g2p model."""
        self.save_unknown_words()
        self.g2p.close()

    def __enter__(self) -> Word2Phoneme:
        return self

    def __exit__(self, *args) -> None:
        self.close()