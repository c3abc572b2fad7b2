import pytest

from tihu.number2phoneme import (
    block_pronounce,
    digit_pronounce,
    number_to_phoneme,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("5", "panj"),
        ("15", "pAnzdah"),
        ("19", "nuzdah"),
        ("20", "bist"),
        ("300", "sisad"),
        ("900", "nohsad"),
    ],
)
def test_single_words(text, expected):
    assert number_to_phoneme(text) == expected


def test_tens_and_ones_are_joined():
    assert number_to_phoneme("25") == "bistopanj"


def test_thousand():
    assert number_to_phoneme("1000") == "yekhezAr"


def test_sign_prefixes():
    assert number_to_phoneme("-3") == "manfiye" + number_to_phoneme("3")
    assert number_to_phoneme("+7") == "mosbate" + number_to_phoneme("7")


def test_leading_zeros():
    assert number_to_phoneme("007") == "sefr_sefr_" + number_to_phoneme("7")


def test_segment_suffix_skipped_for_empty_block():
    result = number_to_phoneme("1000005")
    assert result.startswith("yekmelyon")
    assert "hezAr" not in result
    assert result.endswith("panj")


def test_block_with_teen():
    assert block_pronounce(112, 3).endswith("davAzdah")
    assert block_pronounce(112, 3).startswith("sad")


def test_block_zero_is_empty():
    assert block_pronounce(0, 3) == ""


def test_block_too_large():
    with pytest.raises(ValueError):
        block_pronounce(1000, 4)


def test_digit_pronounce_tables():
    assert digit_pronounce(0, 0) == "yek"
    assert digit_pronounce(1, 1) == "bist"
    assert digit_pronounce(2, 0) == "sad"


def test_digit_pronounce_bad_order():
    with pytest.raises(ValueError):
        digit_pronounce(3, 0)


def test_digit_pronounce_bad_index():
    with pytest.raises(IndexError):
        digit_pronounce(2, 9)


def test_not_a_number():
    with pytest.raises(ValueError):
        number_to_phoneme("12a")