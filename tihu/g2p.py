"""Grapheme-to-phoneme conversion through an interactive g2p-seq2seq process."""

from __future__ import annotations

import logging
import os
import subprocess
from typing import Sequence

_log = logging.getLogger(__name__)

_READ_SIZE = 256
_MAX_LINE = 255
DEFAULT_COMMAND = ("g2p-seq2seq",)


def parse_g2p_output(output: str) -> str:
    """Phonemes from one answer of the model, such as ``"> s a l A m\\n"``.

    The two leading characters and the final one are dropped, and of the
    rest every second character (the spaces) is skipped.
    """
    if len(output) <= 3:
        return ""
    return output[2:len(output) - 1:2]


class G2PSeq2Seq:
    """Talks to a running ``g2p-seq2seq --interactive`` process over pipes."""

    def __init__(self, command: Sequence[str] = DEFAULT_COMMAND) -> None:
        self.command = tuple(command)
        self._process: subprocess.Popen | None = None

    @property
    def is_running(self) -> bool:
        """Whether a model process has been started and not closed."""
        return self._process is not None

    def load_model(self, model: str) -> None:
        """Start the model process for the model directory ``model``."""
        self.close()
        self._process = subprocess.Popen(
            [*self.command, "--interactive", "--model_dir", model],
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            bufsize=0,
        )

    def convert(self, word: str) -> str:
        """The phonemes the model gives for ``word``, or ``""`` if none."""
        process = self._process
        if process is None or not word:
            return ""

        request = (word + "\n").encode("utf-8")[:_MAX_LINE]
        try:
            process.stdin.write(request)
            process.stdin.flush()
        except OSError as error:
            _log.warning("error on writing to g2p: %s (%s)", word, error)
            return ""

        # The model must flush its output after every answer.
        try:
            data = os.read(process.stdout.fileno(), _READ_SIZE)
        except OSError as error:
            _log.warning("error on reading from g2p: %s (%s)", word, error)
            return ""

        return parse_g2p_output(data.decode("utf-8", errors="replace"))

    def close(self) -> None:
        """Tell the process to finish, then stop it and wait for it."""
        process = self._process
        if process is None:
            return
        self._process = None
        try:
            process.stdin.write(b"\n")
            process.stdin.flush()
        except OSError:
            pass
        for stream in (process.stdin, process.stdout):
            try:
                stream.close()
            except OSError:
                pass
        process.terminate()
        process.wait()

    def __enter__(self) -> G2PSeq2Seq:
        return self

    def __exit__(self, *args) -> None:
        self.close()