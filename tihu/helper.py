"""Text helpers: token kinds, Persian letters and pronunciation joining."""

from __future__ import annotations

from enum import Enum, IntEnum

ZWNJ = "\u200c"
TANVIN_NASB = "\u064b"
TANVIN_ZAM = "\u064c"
TANVIN_JAR = "\u064d"
FATHE = "\u064e"
ZAME = "\u064f"
KASRE = "\u0650"
TASHDID = "\u0651"
SUKUN = "\u0652"
YE = "\u06cc"
ALEF = "\u0627"
HE = "\u0647"
WAW = "\u0648"
KAF = "\u06a9"
GAF = "\u06af"
HAMZE = "\u0654"
LAM = "\u0644"
DAL = "\u062f"
ZAL = "\u0630"
RE = "\u0631"
ZE = "\u0632"
ZHE = "\u0698"
MIM = "\u0645"
NON = "\u0646"
MI = MIM + YE
NEMI = NON + MIM + YE

_VOWEL_PHONEMES = frozenset("aeouiA")
_DETACHED_LETTERS = (ALEF, DAL, ZAL, RE, ZE, WAW, ZHE)
_DIACRITIC_FIRST = 0x064B
_DIACRITIC_LAST = 0x0652


class TokenType(str, Enum):
    """Kind of a token found in the input text."""

    LINE_BREAK = "n"
    NON_PERSIAN = "@"
    PERSIAN = "!"
    NUMBER = "#"
    PUNCTUATION = "$"
    DELIMITER = "-"
    UNKNOWN = "?"


class EventType(IntEnum):
    """Kind of an event attached to a word."""

    UNKNOWN = 0
    BOOKMARK = 1
    SPEED_RATIO = 2
    PITCH_RATIO = 3
    VOLUME_RATIO = 4
    SILENCE = 5
    SPELL_OUT = 6


def chomp(line: str) -> str:
    """Remove a trailing line end (``\\n``, ``\\r`` or ``\\r\\n``)."""
    size = len(line)
    if line[-1:] in ("\r", "\n") and line:
        size -= 1
    if len(line) > 1 and line[-2] == "\r":
        size -= 1
    return line[:size]


def is_vowel_phoneme(phoneme: str) -> bool:
    """Whether a single phoneme symbol is a vowel."""
    return bool(phoneme) and phoneme in _VOWEL_PHONEMES


def pronunciation_ends_with_vowel(pronunciation: str) -> bool:
    """Whether the pronunciation ends with a vowel phoneme."""
    return is_vowel_phoneme(pronunciation[-1:])


def pronunciation_starts_with_vowel(pronunciation: str) -> bool:
    """Whether the pronunciation starts with a vowel phoneme."""
    return is_vowel_phoneme(pronunciation[:1])


def concat_pronunciations(first: str, second: str) -> str:
    """Join two pronunciations, inserting or merging glides between vowels."""
    last = first[-1:]
    head = second[:1]

    if last == "u" and head == "a":
        # tanbAku + aS -> tanbAkuS
        return first + second[1:]
    if last in ("e", "i") and head == "e":
        return first + "ye"
    if last == "i" and head == "A":
        return first + "yA"
    if last == "A" and head == "i":
        return first + "ye"
    return first + second


def ends_with_detached(value: str) -> bool:
    """Whether the text ends with a letter that never joins the next one."""
    return value.endswith(_DETACHED_LETTERS)


def replace_first(text: str, search: str, replacement: str) -> str:
    """Replace the first occurrence of ``search`` in ``text``."""
    return text.replace(search, replacement, 1)


def substr_before(text: str, search: str) -> str:
    """The part of ``text`` before the first ``search``, or all of it."""
    position = text.find(search)
    return text if position < 0 else text[:position]


def remove_first(value: str) -> str:
    """Drop the first character of a non-empty string."""
    if not value:
        raise ValueError("cannot remove a character from an empty string")
    return value[1:]


def remove_last(value: str) -> str:
    """Drop the last character of a non-empty string."""
    if not value:
        raise ValueError("cannot remove a character from an empty string")
    return value[:-1]


def is_diacritic_char(char: str) -> bool:
    """Whether the character is an Arabic-script diacritic (tanvin to sukun)."""
    return len(char) == 1 and _DIACRITIC_FIRST <= ord(char) <= _DIACRITIC_LAST


def strip_diacritics(text: str) -> str:
    """The text with every diacritic removed."""
    return "".join(char for char in text if not is_diacritic_char(char))