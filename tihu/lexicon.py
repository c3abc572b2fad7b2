"""Lexicon stage: tags words from the dictionary, joins compounds, splits run-ons."""

from __future__ import annotations

from pathlib import Path

from .afx_manager import AffixManager
from .corpus import Corpus
from .entry import Entry
from .hash_manager import FLAG_NULL, HashManager
from .helper import (
    ALEF,
    DAL,
    MI,
    NEMI,
    RE,
    WAW,
    ZAL,
    ZE,
    ZHE,
    ZWNJ,
    TokenType,
    remove_last,
    replace_first,
)
from .parser import MessageCallback, Parser
from .settings import Settings
from .word import Word

MAX_COMPOUND = 3
DEFAULT_AFFIX_PATH = "./data/lexicon.aff"
DEFAULT_DICTIONARY_PATH = "./data/lexicon.dic"

_DETACHED_LETTERS = frozenset((ALEF, DAL, ZAL, RE, ZE, ZHE, WAW))
_MAX_PARTS = 100

Part = tuple[str, int]


class Lexicon(Parser):
    """Looks words up in the dictionary and affix rules and attaches their entries."""

    def __init__(
        self,
        affix_path: str | Path = DEFAULT_AFFIX_PATH,
        dictionary_path: str | Path = DEFAULT_DICTIONARY_PATH,
        settings: Settings | None = None,
        callback: MessageCallback | None = None,
        log_dir: str | Path | None = "log",
    ) -> None:
        super().__init__(settings, callback)
        self.affix_path = affix_path
        self.dictionary_path = dictionary_path
        self.log_dir = log_dir
        self.hash_manager = HashManager()
        self.affix_manager = AffixManager(self.hash_manager)

    def load(self) -> None:
        """Load the affix rules and then the dictionary."""
        self.affix_manager.load(self.affix_path)
        self.hash_manager.load_table(self.dictionary_path)

    def parse_text(self, corpus: Corpus) -> None:
        """Tag every Persian word of the corpus, merging and splitting words as needed."""
        words = corpus.words
        index = 0
        while index < len(words):
            if self.is_stopped:
                break

            word = words[index]
            if word.is_persian_word() and not self.tag_compound(words, index):
                if word.ends_with_kasre():
                    if self.tag_word(word, remove_last(word.text)):
                        for entry in word.entries:
                            entry.add_genitive()

                if self.try_to_break(words, index):
                    continue

            index += 1

        if self.log_dir is not None:
            corpus.dump("lexicon.xml", self.log_dir)

    def tag_word(self, word: Word, text: str) -> bool:
        """Add to ``word`` every entry found for ``text``; True if it has any."""
        if not text:
            return False

        for hentry in self.hash_manager.lookup(text):
            self.affix_manager.parse_entry(hentry, None, None, word)

        self.affix_manager.affix_check(text, FLAG_NULL, word)
        return not word.is_empty()

    def find_best_entry(self, text: str, only_verb: bool) -> Entry | None:
        """The first verb entry (or first non-verb entry) found for ``text``."""
        word = Word()
        if self.tag_word(word, text):
            for entry in word.entries:
                if entry.is_verb() == only_verb:
                    return entry
        return None

    def tag_compound(self, words: list[Word], index: int) -> bool:
        """Tag the longest compound starting at ``index``, merging its words."""
        count = MAX_COMPOUND
        while count > 0:
            compound = self.make_compound(words, index, count)
            if not compound:
                return False

            text = self.compound_text(compound)
            word = words[index]
            if self.tag_word(word, text):
                if len(compound) > 1:
                    word.text = text
                    word.length = len(text)
                    del words[index + 1:index + len(compound)]
                return True

            count = len(compound) - 1
        return False

    def make_compound(self, words: list[Word], index: int, count: int) -> list[str]:
        """Texts of up to ``count`` Persian words from ``index`` that may form a compound."""
        if count <= 0:
            return []

        compound: list[str] = []
        for word in words[index:index + count]:
            if not word.is_persian_word():
                break
            compound.append(word.text)

        if not self.can_be_compound_word(compound):
            compound = self.make_compound(words, index, len(compound) - 1)
        return compound

    def can_be_compound_word(self, compound: list[str]) -> bool:
        """Whether the parts may form a compound: the last is neither mi/nemi nor a prefix."""
        if len(compound) <= 1:
            return True

        last = compound[-1]
        if last in (MI, NEMI):
            return False
        return not self.affix_manager.is_prefix(last)

    def compound_text(self, compound: list[str]) -> str:
        """The parts joined with zero-width non-joiners."""
        if not compound:
            raise ValueError("a compound needs at least one part")
        return ZWNJ.join(compound)

    def try_to_break(self, words: list[Word], index: int) -> bool:
        """Fix a mi/nemi verb or split the word at ``index`` into known words."""
        word = words[index]
        text = word.text

        if text.startswith(MI) or text.startswith(NEMI):
            joined = replace_first(text, MI, MI + ZWNJ)
            entry = self.find_best_entry(joined, True)
            if entry is not None and entry.is_verb():
                word.text = joined
                return True

        partials: list[list[Part]] = []
        self.break_word([], text, partials)
        if not partials:
            return False

        best: list[Part] | None = None
        min_count = _MAX_PARTS
        for partial in partials:
            if len(partial) < min_count:
                min_count = len(partial)
                if sum(weight for _, weight in partial) > 0:
                    best = partial
        if best is None:
            return False

        offset = word.offset
        pieces = []
        for part, _ in best:
            pieces.append(
                Word(text=part, type=TokenType.PERSIAN, offset=offset, length=len(part))
            )
            offset += len(part)

        words[index:index + 1] = pieces
        return True

    def break_word(
        self, parts: list[Part], text: str, partials: list[list[Part]]
    ) -> None:
        """Append to ``partials`` every way of splitting ``text`` into known non-verbs."""
        if not text:
            return

        entry = self.find_best_entry(text, False)
        if entry is not None and not entry.is_verb():
            partials.append([*parts, (text, entry.weight)])

        last = len(text) - 1
        for position in range(len(text)):
            head = text[:position + 1]
            if self.can_be_detached(head) or position == last:
                entry = self.find_best_entry(head, False)
                if entry is not None and not entry.is_verb():
                    self.break_word(
                        [*parts, (head, entry.weight)], text[position + 1:], partials
                    )

    def can_be_detached(self, text: str) -> bool:
        """Whether ``text`` ends with a letter that never joins the next one."""
        return bool(text) and text[-1] in _DETACHED_LETTERS