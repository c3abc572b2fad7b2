"""Pronunciation of numbers written with digits."""

from __future__ import annotations

from .helper import concat_pronunciations

_SEG_APPENDER = "o"

SEG_SUFFIXES = (
    "hezAr",
    "melyon",
    "melyArd",
    "bilyon",
    "bilyArd",
    "trilyun",
    "trilyArd",
)

YEKAN_DIGITS = (
    "yek", "do", "se", "CAhAr", "panj", "SeS", "haft",
    "haSt", "noh", "dah", "yAzdah", "davAzdah", "sizdah", "CAhArdah",
    "pAnzdah", "SAnzdah", "hefdah", "hejdah", "nuzdah",
)

DAHGAN_DIGITS = (
    "_", "bist", "si", "Cehel", "panjAh", "Sast", "haftAd", "haStAd", "navad",
)

SADGAN_DIGITS = (
    "sad", "devist", "sisad", "CAhArsad", "pAnsad",
    "SeSsad", "haftsad", "haStsad", "nohsad",
)

_DIGIT_TABLES = (YEKAN_DIGITS, DAHGAN_DIGITS, SADGAN_DIGITS)


def digit_pronounce(order: int, index: int) -> str:
    """The word for a digit: ``order`` 0 ones, 1 tens, 2 hundreds."""
    if not 0 <= order < len(_DIGIT_TABLES):
        raise ValueError(f"digit order out of range: {order}")
    table = _DIGIT_TABLES[order]
    if not 0 <= index < len(table):
        raise IndexError(f"digit index out of range: {index}")
    return table[index]


def block_pronounce(number: int, seg_len: int) -> str:
    """The pronunciation of a block of at most three digits."""
    if number > 999 or seg_len > 3:
        raise ValueError(f"block too large: {number} ({seg_len} digits)")
    if number == 0:
        return ""
    if 0 < number < 20:
        return digit_pronounce(0, number - 1)

    pronounce = ""
    remainder = number
    index = seg_len - 1
    while index >= 0:
        powered = 10**index
        division, remainder = divmod(remainder, powered)
        if division == 0:
            index -= 1
            continue

        if index == 1 and division == 1:
            # ten to nineteen have words of their own
            position = division * 10 + remainder - 1
            index -= 1
        else:
            position = division - 1

        digit_text = digit_pronounce(index, position)
        if pronounce:
            pronounce = concat_pronunciations(pronounce, _SEG_APPENDER)
        pronounce += digit_text
        index -= 1
    return pronounce


def number_to_phoneme(text: str) -> str:
    """The pronunciation of a signed decimal number written with ASCII digits."""
    prefix = ""
    digits = text
    if digits.startswith("-"):
        prefix += "manfiye"
        digits = digits[1:]
    elif digits.startswith("+"):
        prefix += "mosbate"
        digits = digits[1:]

    stripped = digits.lstrip("0")
    prefix += "sefr_" * (len(digits) - len(stripped))
    digits = stripped

    length = len(digits)
    seg_count = -(-length // 3)
    pronounce = ""
    for seg_no in range(seg_count - 1, -1, -1):
        seg_start = length - (seg_no + 1) * 3
        seg_length = 3
        if seg_start < 0:
            seg_length += seg_start
            seg_start = 0

        seg_text = digits[seg_start:seg_start + seg_length]
        if not seg_text.isascii() or not seg_text.isdigit():
            raise ValueError(f"not a number: {text!r}")

        block = block_pronounce(int(seg_text), seg_length)
        pronounce += block
        if seg_no == 0:
            break
        if block:
            pronounce += SEG_SUFFIXES[(seg_no - 1) % len(SEG_SUFFIXES)]

    return prefix + pronounce