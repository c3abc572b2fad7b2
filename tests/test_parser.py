import pytest

from tihu.corpus import Corpus
from tihu.parser import Parser
from tihu.settings import Settings
from tihu.word import Word


class _Upper(Parser):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.loaded = False

    def load(self):
        self.loaded = True

    def parse_text(self, corpus):
        for word in corpus:
            if self.is_stopped:
                break
            self.message(word.text)
            word.text = word.text.upper()


def _corpus(*texts):
    corpus = Corpus()
    for text in texts:
        corpus.add_word(Word(text=text))
    return corpus


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        Parser()


def test_default_settings():
    parser = _Upper()
    assert parser.settings == Settings()
    assert parser.is_stopped is False


def test_shared_settings():
    settings = Settings(pitch=5)
    parser = _Upper(settings)
    assert parser.settings is settings


def test_load_and_parse():
    parser = _Upper()
    parser.load()
    corpus = _corpus("ab")
    parser.parse_text(corpus)
    assert parser.loaded
    assert corpus.first_word().text == "AB"


def test_stop_prevents_processing():
    parser = _Upper()
    parser.stop(True)
    corpus = _corpus("ab")
    parser.parse_text(corpus)
    assert parser.is_stopped
    assert corpus.first_word().text == "ab"
    parser.stop(False)
    assert parser.is_stopped is False


def test_message_reaches_callback():
    received = []
    parser = _Upper(callback=received.append)
    corpus = _corpus("ab", "cd")
    parser.parse_text(corpus)
    assert received == ["ab", "cd"]
    assert corpus.last_word().text == "CD"


def test_message_without_callback_is_ignored():
    parser = _Upper()
    corpus = _corpus("ab")
    parser.parse_text(corpus)
    assert parser.callback is None
    assert corpus.first_word().text == "AB"