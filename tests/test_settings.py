from tihu.settings import Settings


def test_defaults():
    settings = Settings()
    assert settings.pitch == 0
    assert settings.rate == 0
    assert settings.volume == 10
    assert settings.frequency == 22050
    assert settings.debug_mode is False


def test_values_can_be_changed():
    settings = Settings()
    settings.pitch = 5
    settings.rate = -3
    settings.volume = 7
    settings.frequency = 16000
    settings.debug_mode = True
    assert (settings.pitch, settings.rate, settings.volume) == (5, -3, 7)
    assert settings.frequency == 16000
    assert settings.debug_mode is True


def test_instances_are_independent():
    first = Settings()
    second = Settings()
    first.volume = 1
    assert second.volume == Settings().volume
    assert first != second


def test_keyword_construction():
    settings = Settings(pitch=2, frequency=8000)
    assert settings.pitch == 2
    assert settings.frequency == 8000
    assert settings == Settings(pitch=2, frequency=8000)