import dataclasses

import pytest

from tunedeck.hashing import generate
from tunedeck.song import Song, extract_name, extract_number


def test_id_is_hash_of_number_name_and_path():
    song = Song(3, "track.mp3", "/music/track.mp3")
    assert song.id == generate("3track.mp3/music/track.mp3")


def test_fields_are_kept():
    song = Song(1, "a.wav", "/m/a.wav")
    assert (song.number, song.name, song.path) == (1, "a.wav", "/m/a.wav")


def test_id_differs_with_number():
    assert Song(1, "a.mp3", "/p/a.mp3").id != Song(2, "a.mp3", "/p/a.mp3").id


def test_equal_inputs_give_equal_songs():
    first = Song(5, "x.mp3", "/x.mp3")
    second = Song(5, "x.mp3", "/x.mp3")
    assert first.id == second.id == generate("5x.mp3/x.mp3")
    assert [first] == [second]
    assert [first] != [Song(6, "x.mp3", "/x.mp3")]


def test_song_is_immutable():
    song = Song(1, "a.mp3", "/a.mp3")
    with pytest.raises(dataclasses.FrozenInstanceError):
        song.name = "b.mp3"
    assert song.name == "a.mp3"


@pytest.mark.parametrize(
    "query, expected",
    [("Love", True), ("love", False), ("", True), ("Song.mp3", True), ("Hate", False)],
)
def test_matches_is_case_sensitive_substring(query, expected):
    song = Song(1, "Love Song.mp3", "/m/Love Song.mp3")
    assert song.matches(query) is expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("12 Title.mp3", 12),
        ("(12) Title.mp3", 12),
        ("[7] - Title.mp3", 7),
        ("  5_abc.wav", 5),
        ("003: intro.mp3", 3),
        ("Title.mp3", 0),
        ("", 0),
        ("Title 9.mp3", 0),
    ],
)
def test_extract_number(name, expected):
    assert extract_number(name) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("(3) Hello World", "Hello World"),
        ("(3) Hello World  ", "Hello World"),
        ("  plain name \n", "plain name"),
        ("(3)Hello", "(3)Hello"),
        ("[3] Hello", "[3] Hello"),
        ("", ""),
        (" \t\r\n", ""),
    ],
)
def test_extract_name(name, expected):
    assert extract_name(name) == expected


def test_extract_name_requires_whole_match():
    assert extract_name("x (3) Hello") == "x (3) Hello"