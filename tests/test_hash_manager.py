import pytest

from tihu.hash_manager import FLAG_NULL, HashEntry, HashManager, decode_flags


def _write_dic(tmp_path, body):
    path = tmp_path / "lexicon.dic"
    path.write_text(body, encoding="utf-8")
    return path


def test_decode_flags_empty():
    assert decode_flags("") == []


def test_decode_flags_pair_value():
    assert decode_flags("AB") == [0x4142]


def test_decode_flags_odd_length_drops_last_character():
    assert decode_flags("ABC") == decode_flags("AB")


def test_decode_flags_keeps_written_order():
    flags = decode_flags("BAAB")
    assert len(flags) == 2
    assert flags[0] > flags[1]


def test_has_flag():
    ab = decode_flags("AB")[0]
    cd = decode_flags("CD")[0]
    entry = HashEntry("w", "N", "pron", "", 1, (ab,))
    assert entry.has_flag(FLAG_NULL) is True
    assert entry.has_flag(ab) is True
    assert entry.has_flag(cd) is False


def test_add_word_and_lookup():
    manager = HashManager()
    assert manager.add_word("ketAb", "lem", "N", "ketAb", [], 5) is True
    [entry] = manager.lookup("ketAb")
    assert (entry.word, entry.lemma, entry.pos, entry.pron, entry.weight) == (
        "ketAb",
        "lem",
        "N",
        "ketAb",
        5,
    )


def test_lookup_missing_word():
    assert HashManager().lookup("nothing") == []


def test_homonyms_kept_in_order():
    manager = HashManager()
    manager.add_word("dar", "", "N", "dar", [], 1)
    manager.add_word("dar", "", "P", "dar", [], 2)
    assert [entry.pos for entry in manager.lookup("dar")] == ["N", "P"]


def test_duplicate_reading_is_skipped():
    manager = HashManager()
    assert manager.add_word("ab", "x", "N", "Ab", [], 3) is True
    assert manager.add_word("ab", "x", "N", "Ab", [], 9) is False
    assert len(manager.lookup("ab")) == 1
    assert manager.lemma_weight("x") == 3


def test_lemma_weight_sums_entries():
    manager = HashManager()
    manager.add_word("raft", "rav", "V", "raft", [], 3)
    manager.add_word("ravad", "rav", "V", "ravad", [], 4)
    assert manager.lemma_weight("rav") == 3 + 4


def test_lemma_weight_empty_or_unknown():
    manager = HashManager()
    manager.add_word("a", "", "N", "a", [], 3)
    assert manager.lemma_weight("") == 0
    assert manager.lemma_weight("unknown") == 0


def test_add_word_sorts_flags():
    manager = HashManager()
    flags = decode_flags("BAAB")
    manager.add_word("w", "", "N", "w", flags, 1)
    assert manager.lookup("w")[0].flags == tuple(sorted(flags))


def test_load_table(tmp_path):
    path = _write_dic(
        tmp_path,
        "2\n"
        "# comment\n"
        "ketAb/BAAB N ketAb 10 ketAb\n"
        "\n"
        "dast N dast 4\n",
    )
    manager = HashManager()
    manager.load_table(path)

    [book] = manager.lookup("ketAb")
    assert book.flags == tuple(sorted(decode_flags("BAAB")))
    assert book.weight == 10
    assert manager.lemma_weight("ketAb") == 10

    [hand] = manager.lookup("dast")
    assert hand.lemma == ""
    assert hand.flags == ()
    assert "ketAb/BAAB" not in manager


def test_load_table_persian_words(tmp_path):
    word = "\u06a9\u062a\u0627\u0628"
    path = _write_dic(tmp_path, f"1\n{word} N ketAb 2 {word}\n")
    manager = HashManager()
    manager.load_table(path)
    assert manager.lookup(word)[0].pron == "ketAb"


def test_load_table_empty_count(tmp_path):
    path = _write_dic(tmp_path, "0\nab N Ab 1\n")
    with pytest.raises(ValueError):
        HashManager().load_table(path)


def test_load_table_bad_count(tmp_path):
    path = _write_dic(tmp_path, "many\nab N Ab 1\n")
    with pytest.raises(ValueError):
        HashManager().load_table(path)


def test_load_table_bad_weight(tmp_path):
    path = _write_dic(tmp_path, "1\nab N Ab heavy\n")
    with pytest.raises(ValueError):
        HashManager().load_table(path)


def test_load_table_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        HashManager().load_table(tmp_path / "absent.dic")