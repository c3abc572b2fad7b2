import pytest

from tihu.helper import (
    ALEF,
    DAL,
    FATHE,
    KASRE,
    MI,
    MIM,
    SUKUN,
    TANVIN_NASB,
    ZWNJ,
    EventType,
    TokenType,
    chomp,
    concat_pronunciations,
    ends_with_detached,
    is_diacritic_char,
    is_vowel_phoneme,
    pronunciation_ends_with_vowel,
    pronunciation_starts_with_vowel,
    remove_first,
    remove_last,
    replace_first,
    strip_diacritics,
    substr_before,
)


@pytest.mark.parametrize("text", ["abc\n", "abc\r", "abc\r\n", "abc"])
def test_chomp_removes_line_ends(text):
    assert chomp(text) == "abc"


def test_chomp_empty_and_single():
    assert chomp("") == ""
    assert chomp("\n") == ""
    assert chomp("\r\n") == ""


@pytest.mark.parametrize("phoneme", list("aeouiA"))
def test_vowels(phoneme):
    assert is_vowel_phoneme(phoneme) is True


@pytest.mark.parametrize("phoneme", ["b", "E", "", "S", "y"])
def test_not_vowels(phoneme):
    assert is_vowel_phoneme(phoneme) is False


def test_pronunciation_vowel_edges():
    assert pronunciation_ends_with_vowel("ketAbe") is True
    assert pronunciation_ends_with_vowel("ketAb") is False
    assert pronunciation_ends_with_vowel("") is False
    assert pronunciation_starts_with_vowel("Ab") is True
    assert pronunciation_starts_with_vowel("bA") is False
    assert pronunciation_starts_with_vowel("") is False


def test_concat_u_and_a_merges():
    assert concat_pronunciations("tanbAku", "aS") == "tanbAkuS"


@pytest.mark.parametrize("first", ["xAne", "mAhi"])
def test_concat_e_or_i_then_e(first):
    assert concat_pronunciations(first, "e") == first + "ye"


def test_concat_i_then_long_a():
    assert concat_pronunciations("mAhi", "At") == "mAhi" + "yA"


def test_concat_long_a_then_i():
    assert concat_pronunciations("pA", "i") == "pA" + "ye"


def test_concat_plain():
    assert concat_pronunciations("ketAb", "e") == "ketAb" + "e"
    assert concat_pronunciations("", "dast") == "dast"
    assert concat_pronunciations("dast", "") == "dast"


def test_ends_with_detached():
    assert ends_with_detached(MIM + ALEF) is True
    assert ends_with_detached(MIM + DAL) is True
    assert ends_with_detached(ALEF + MIM) is False
    assert ends_with_detached("") is False


def test_replace_first():
    text = MI + "ravam" + MI
    assert replace_first(text, MI, MI + ZWNJ) == MI + ZWNJ + "ravam" + MI
    assert replace_first("ketAb", "x", "y") == "ketAb"


def test_substr_before():
    assert substr_before("N_GEN", "_") == "N"
    assert substr_before("ADV", "_") == "ADV"


def test_remove_first_and_last():
    word = ALEF + DAL + MIM
    assert remove_first(word) == DAL + MIM
    assert remove_last(word) == ALEF + DAL
    assert remove_last("Ne") == "N"


@pytest.mark.parametrize("func", [remove_first, remove_last])
def test_remove_on_empty_raises(func):
    with pytest.raises(ValueError):
        func("")


def test_is_diacritic_char():
    assert is_diacritic_char(TANVIN_NASB) is True
    assert is_diacritic_char(SUKUN) is True
    assert is_diacritic_char(FATHE) is True
    assert is_diacritic_char(ALEF) is False
    assert is_diacritic_char(chr(0x064A)) is False
    assert is_diacritic_char(chr(0x0653)) is False


def test_strip_diacritics():
    assert strip_diacritics(ALEF + FATHE + DAL + KASRE) == ALEF + DAL
    assert strip_diacritics(ALEF + DAL) == ALEF + DAL
    assert strip_diacritics("") == ""


def test_token_type_values():
    assert TokenType("!") is TokenType.PERSIAN
    assert TokenType("#") is TokenType.NUMBER
    assert EventType(0) is EventType.UNKNOWN