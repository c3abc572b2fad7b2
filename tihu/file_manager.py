"""Line reader for the lexicon and table data files."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator

from .helper import chomp

_BOM = "\ufeff"
_PIECE = re.compile(r"[^ \t]+")


class FileManager:
    """Reads a data file line by line, skipping blank and ``#`` comment lines.

    Each accepted line is split into pieces separated by spaces or tabs,
    handed out one at a time by :meth:`next_piece`.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._file = open(self.path, encoding="utf-8", newline="\n")
        self.line_num = 0
        self.line = ""
        self._pieces: Iterator[str] = iter(())

    def read_line(self) -> bool:
        """Advance to the next meaningful line; False at end of file."""
        while self._file is not None:
            raw = self._file.readline()
            if not raw:
                break
            if self.line_num == 0 and raw.startswith(_BOM):
                raw = raw[len(_BOM):]
            self.line_num += 1

            line = chomp(raw)
            if not line or line.startswith("#"):
                continue

            self.line = line
            self._pieces = iter(_PIECE.findall(line))
            return True

        self.line = ""
        self._pieces = iter(())
        return False

    def next_piece(self) -> str:
        """The next space- or tab-separated piece of the line, or ``""``."""
        return next(self._pieces, "")

    def close(self) -> None:
        """Close the underlying file."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> FileManager:
        return self

    def __exit__(self, *args) -> None:
        self.close()