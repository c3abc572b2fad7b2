from tihu.word2phoneme import Word2Phoneme


class FakeG2P:
    def __init__(self, answers=None):
        self.answers = answers or {}
        self.model = None
        self.closed = False
        self.requests = []

    def load_model(self, model):
        self.model = model

    def convert(self, word):
        self.requests.append(word)
        return self.answers.get(word, "")

    def close(self):
        self.closed = True


def test_convert_returns_model_answer_and_counts(tmp_path):
    g2p = FakeG2P({"سلام": "salAm"})
    w2p = Word2Phoneme(tmp_path / "unknown.txt", g2p)
    assert w2p.convert("سلام") == "salAm"
    assert w2p.convert("سلام") == "salAm"
    assert w2p.convert("x") == ""
    assert w2p.unknown_words == {"سلام": 2, "x": 1}
    assert g2p.requests == ["سلام", "سلام", "x"]


def test_load_model_is_forwarded(tmp_path):
    g2p = FakeG2P()
    w2p = Word2Phoneme(tmp_path / "unknown.txt", g2p)
    w2p.load_model("some/model")
    assert g2p.model == "some/model"


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "unknown.txt"
    w2p = Word2Phoneme(path, FakeG2P())
    for word in ["a", "b", "b", "c", "c", "c"]:
        w2p.convert(word)
    w2p.save_unknown_words()

    again = Word2Phoneme(path, FakeG2P())
    assert again.unknown_words == {"a": 1, "b": 2, "c": 3}


def test_saved_most_frequent_first(tmp_path):
    path = tmp_path / "unknown.txt"
    w2p = Word2Phoneme(path, FakeG2P())
    for word in ["a", "b", "b", "c", "c", "c"]:
        w2p.convert(word)
    w2p.save_unknown_words()
    assert path.read_text(encoding="utf-8").splitlines() == ["c\t3", "b\t2", "a\t1"]


def test_load_skips_bad_lines(tmp_path):
    path = tmp_path / "unknown.txt"
    path.write_text("good\t5\nnotab\nbad\tnumber\n", encoding="utf-8")
    w2p = Word2Phoneme(path, FakeG2P())
    assert w2p.unknown_words == {"good": 5}


def test_missing_log_starts_empty(tmp_path):
    w2p = Word2Phoneme(tmp_path / "missing" / "unknown.txt", FakeG2P())
    assert w2p.unknown_words == {}


def test_save_into_missing_directory_is_skipped(tmp_path):
    path = tmp_path / "missing" / "unknown.txt"
    w2p = Word2Phoneme(path, FakeG2P())
    w2p.convert("a")
    w2p.save_unknown_words()
    assert not path.exists()


def test_close_saves_and_closes_model(tmp_path):
    path = tmp_path / "unknown.txt"
    g2p = FakeG2P()
    with Word2Phoneme(path, g2p) as w2p:
        w2p.convert("a")
    assert g2p.closed
    assert path.read_text(encoding="utf-8") == "a\t1\n"