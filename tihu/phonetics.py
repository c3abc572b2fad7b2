"""Phonetics stage: pronunciations for words the lexicon did not know."""

from __future__ import annotations

from pathlib import Path

from .corpus import Corpus
from .entry import Entry
from .number2phoneme import number_to_phoneme
from .parser import MessageCallback, Parser
from .punctuation import PunctuationTable
from .settings import Settings
from .word2phoneme import Word2Phoneme

DEFAULT_MODEL_DIR = "./data/g2p-seq2seq-tihudict"
DEFAULT_PUNCTUATIONS_PATH = "data/punctuations.txt"

_GUESSED_POS = "."


class Phonetics(Parser):
    """Gives every word without entries a pronunciation: g2p, numbers or punctuation."""

    def __init__(
        self,
        model_dir: str = DEFAULT_MODEL_DIR,
        punctuations_path: str | Path = DEFAULT_PUNCTUATIONS_PATH,
        word2phoneme: Word2Phoneme | None = None,
        settings: Settings | None = None,
        callback: MessageCallback | None = None,
        log_dir: str | Path | None = "log",
    ) -> None:
        super().__init__(settings, callback)
        self.model_dir = model_dir
        self.punctuations_path = punctuations_path
        self.log_dir = log_dir
        self.word2phoneme = word2phoneme if word2phoneme is not None else Word2Phoneme()
        self.punctuations = PunctuationTable()

    def load(self) -> None:
        """Start the g2p model and read the punctuation table."""
        self.word2phoneme.load_model(self.model_dir)
        self.punctuations.load(self.punctuations_path)

    def parse_text(self, corpus: Corpus) -> None:
        """Add a guessed entry (tagged ``.``) to every word that has none."""
        for word in corpus.words:
            if self.is_stopped:
                break
            if not word.is_empty():
                continue

            pron = ""
            if word.is_persian_word():
                pron = self.word2phoneme.convert(word.text)
                word.auto_phonetics = True
            elif word.is_number():
                pron = number_to_phoneme(word.text)
            elif word.is_punctuation():
                pron = self.punctuations.convert(word.text)

            word.add_entry(Entry(pos=_GUESSED_POS, pron=pron))

        if self.log_dir is not None:
            corpus.dump("g2p.xml", self.log_dir)

    def close(self) -> None:
        """Save the unknown-word log and stop the g2p model."""
        self.word2phoneme.close()