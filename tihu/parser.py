"""Base class of the stages that process a corpus."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from .corpus import Corpus
from .settings import Settings

MessageCallback = Callable[[str], Any]


class Parser(ABC):
    """A pipeline stage: loads its data once, then processes corpora."""

    def __init__(
        self,
        settings: Settings | None = None,
        callback: MessageCallback | None = None,
    ) -> None:
        self.settings = settings if settings is not None else Settings()
        self.callback = callback
        self.is_stopped = False

    @abstractmethod
    def load(self) -> None:
        """Load the data the stage needs; raise if it cannot be loaded."""

    @abstractmethod
    def parse_text(self, corpus: Corpus) -> None:
        """Process the words of a corpus in place."""

    def stop(self, stopped: bool) -> None:
        """Ask the stage to stop (or to resume) processing."""
        self.is_stopped = stopped

    def message(self, text: str) -> None:
        """Send a text message to the callback, if one is set."""
        if self.callback is not None:
            self.callback(text)