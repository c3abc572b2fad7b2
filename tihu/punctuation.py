"""Punctuation marks and how they are read aloud."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

from .file_manager import FileManager


class ReadStatus(IntEnum):
    """Whether a punctuation mark is spoken."""

    ALWAYS_READ = 0
    NEVER_READ = 1


@dataclass
class Punctuation:
    """A punctuation mark with its pronunciation."""

    text: str
    pronunciation: str
    read_status: ReadStatus


class PunctuationTable:
    """Maps punctuation marks to their pronunciations."""

    def __init__(self) -> None:
        self.punctuations: dict[str, Punctuation] = {}

    def load(self, path: str | Path) -> None:
        """Read ``text status pronunciation`` lines; the first of duplicates wins."""
        with FileManager(path) as reader:
            while reader.read_line():
                text = reader.next_piece()
                status = ReadStatus(int(reader.next_piece()))
                pron = reader.next_piece()
                self.punctuations.setdefault(text, Punctuation(text, pron, status))

    def convert(self, text: str) -> str:
        """The pronunciation of ``text``, or ``""`` if it is not known."""
        punctuation = self.punctuations.get(text)
        return punctuation.pronunciation if punctuation else ""

    def __len__(self) -> int:
        return len(self.punctuations)

    def __contains__(self, text: object) -> bool:
        return text in self.punctuations