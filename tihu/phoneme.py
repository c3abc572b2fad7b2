"""Phoneme table and per-phoneme data for the synthesiser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from .helper import is_vowel_phoneme


class ConsonantType(Enum):
    """Manner of articulation of a phoneme."""

    NOT_SET = auto()
    VOWEL = auto()
    STOP = auto()
    FRICATIVE = auto()
    AFFRICATIVE = auto()
    NASAL = auto()
    LIQUID = auto()
    APPROXIMANT = auto()


@dataclass(frozen=True)
class PhonemeInfo:
    """One row of the phoneme table."""

    symbol: str
    mbrola_name: str
    ipa_name: str
    duration: int
    consonant: ConsonantType


_C = ConsonantType
PHONEME_TABLE: tuple[PhonemeInfo, ...] = (
    PhonemeInfo("!", "_", "_", 100, _C.NOT_SET),  # unknown, error
    PhonemeInfo("_", "_", "_", 100, _C.NOT_SET),
    PhonemeInfo("h", "h", "h", 83, _C.FRICATIVE),
    PhonemeInfo("C", "c:", "tS", 120, _C.AFFRICATIVE),
    PhonemeInfo("?", "?", "?", 50, _C.STOP),
    PhonemeInfo("p", "p", "p", 112, _C.STOP),
    PhonemeInfo("t", "t", "t", 81, _C.STOP),
    PhonemeInfo("c", "c", "k", 100, _C.STOP),
    PhonemeInfo("k", "k", "k", 100, _C.STOP),
    PhonemeInfo("s", "s", "s", 123, _C.FRICATIVE),
    PhonemeInfo("S", "s:", "S", 111, _C.FRICATIVE),
    PhonemeInfo("x", "x", "x", 109, _C.FRICATIVE),
    PhonemeInfo("f", "f", "f", 99, _C.FRICATIVE),
    PhonemeInfo("b", "b", "b", 70, _C.STOP),
    PhonemeInfo("d", "d", "d", 66, _C.STOP),
    PhonemeInfo("g", "g:", "g", 78, _C.STOP),
    PhonemeInfo("G", "g", "g", 78, _C.STOP),
    PhonemeInfo("q", "q", "q", 87, _C.STOP),
    PhonemeInfo("z", "z", "z", 86, _C.FRICATIVE),
    PhonemeInfo("Z", "z:", "Z", 96, _C.FRICATIVE),
    PhonemeInfo("v", "v", "v", 52, _C.FRICATIVE),
    PhonemeInfo("j", "j:", "dZ", 92, _C.AFFRICATIVE),
    PhonemeInfo("r", "r", "R", 38, _C.APPROXIMANT),
    PhonemeInfo("m", "m", "m", 73, _C.NASAL),
    PhonemeInfo("n", "n", "n", 61, _C.NASAL),
    PhonemeInfo("l", "l", "l", 58, _C.APPROXIMANT),
    PhonemeInfo("y", "y", "j", 71, _C.APPROXIMANT),
    PhonemeInfo("i", "i", "i", 101, _C.VOWEL),
    PhonemeInfo("u", "u", "u", 112, _C.VOWEL),
    PhonemeInfo("A", "a:", "A:", 138, _C.VOWEL),
    PhonemeInfo("e", "e", "e", 69, _C.VOWEL),
    PhonemeInfo("o", "o", "u", 83, _C.VOWEL),
    PhonemeInfo("a", "a", "a", 90, _C.VOWEL),
)

_INDEX_BY_SYMBOL = {info.symbol: index for index, info in enumerate(PHONEME_TABLE)}
_BACK_VOWELS = ("A", "o", "u")
_GLOTTAL_STOP = "? 50 \n"


@dataclass
class PitchRange:
    """Pitch at the start (1%) and end (100%) of a phoneme."""

    first: int = 0
    last: int = 0


@dataclass
class Phoneme:
    """A phoneme in context, ready to be written for the MBROLA synthesiser."""

    pitch_range: PitchRange = field(default_factory=PitchRange)
    index: int = 0
    duration: int = 0
    prev_voweled: bool = False

    @classmethod
    def from_context(
        cls, prev_phoneme: str, phoneme: str, next_phoneme: str
    ) -> Phoneme:
        """Build a phoneme from its symbol and its neighbours (``""`` for none)."""
        result = cls()
        result.set_phonetic(prev_phoneme, phoneme, next_phoneme)
        return result

    @property
    def info(self) -> PhonemeInfo:
        """The table row of this phoneme."""
        return PHONEME_TABLE[self.index]

    def set_phonetic(self, prev_phoneme: str, phoneme: str, next_phoneme: str) -> None:
        """Choose the table entry for ``phoneme`` given its neighbours.

        ``g`` before a back vowel and ``k`` elsewhere take their contextual
        variants; a vowel at the start or after another vowel is preceded
        by a glottal stop.
        """
        if phoneme == "g" and next_phoneme in _BACK_VOWELS and next_phoneme:
            phoneme = "G"
        elif phoneme == "k" and not (next_phoneme and next_phoneme in _BACK_VOWELS):
            phoneme = "c"

        if is_vowel_phoneme(phoneme) and (
            not prev_phoneme or is_vowel_phoneme(prev_phoneme)
        ):
            self.prev_voweled = True

        index = _INDEX_BY_SYMBOL.get(phoneme, 0)
        if index == 0:
            raise ValueError(f"unknown phoneme {phoneme!r}")
        self.index = index

    def mbrola_name(self) -> str:
        """The phoneme's name in the MBROLA voice."""
        return self.info.mbrola_name

    def ipa_name(self) -> str:
        """The phoneme's IPA-like name."""
        return self.info.ipa_name

    def mbrola_string(self) -> str:
        """The MBROLA input line(s): ``name duration``, after a glottal stop if needed."""
        prefix = _GLOTTAL_STOP if self.prev_voweled else ""
        info = self.info
        return f"{prefix}{info.mbrola_name} {info.duration} \n"