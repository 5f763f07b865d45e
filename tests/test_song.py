import pytest

from yield_tasks import get_99_bottles_of_beer


def test_song_lines():
    lines = list(get_99_bottles_of_beer())
    assert len(lines) == 200
    assert lines[0] == "99 bottles of beer on the wall, 99 bottles of beer."
    assert lines[1] == "Take one down and pass it around, 98 bottles of beer on the wall."
    assert lines[-2] == "No more bottles of beer on the wall, no more bottles of beer."
    assert lines[-1] == "Go to the store and buy some more, 99 bottles of beer on the wall."


def test_singular_and_no_more():
    lines = list(get_99_bottles_of_beer())
    assert lines[-6] == "2 bottles of beer on the wall, 2 bottles of beer."
    assert lines[-5] == "Take one down and pass it around, 1 bottle of beer on the wall."
    assert lines[-4] == "1 bottle of beer on the wall, 1 bottle of beer."
    assert lines[-3] == "Take one down and pass it around, no more bottles of beer on the wall."


def test_song_is_lazy_and_reinvocable():
    song = get_99_bottles_of_beer()
    first = next(song)
    next(song)
    assert next(get_99_bottles_of_beer()) == first


def test_custom_start():
    assert list(get_99_bottles_of_beer(2)) == [
        "2 bottles of beer on the wall, 2 bottles of beer.",
        "Take one down and pass it around, 1 bottle of beer on the wall.",
        "1 bottle of beer on the wall, 1 bottle of beer.",
        "Take one down and pass it around, no more bottles of beer on the wall.",
        "No more bottles of beer on the wall, no more bottles of beer.",
        "Go to the store and buy some more, 2 bottles of beer on the wall.",
    ]


def test_default_song_ignores_environment(monkeypatch):
    monkeypatch.setenv("YIELD_TASKS_BOTTLES", "3")
    assert len(list(get_99_bottles_of_beer())) == 200


@pytest.mark.parametrize("start", [0, -5])
def test_start_must_be_positive(start):
    song = get_99_bottles_of_beer(start)
    with pytest.raises(ValueError):
        next(song)
