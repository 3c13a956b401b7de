import random

import pytest

from tunedeck.song import Song, extract_name, extract_number
from tunedeck.sorting import quick_sort, shell_sort


def _songs(names):
    return [Song(i + 1, name, f"/music/{name}") for i, name in enumerate(names)]


def _random_names(seed, count):
    rng = random.Random(seed)
    words = ["Alpha", "beta", "Gamma", "delta", "Echo", "zulu", "Ómega"]
    names = []
    for _ in range(count):
        number = rng.randint(0, 40)
        style = rng.choice(["({n}) {w}.mp3", "{n} - {w}.wav", "[{n}] {w}.mp3", "{w}.mp3"])
        names.append(style.format(n=number, w=rng.choice(words)))
    return names


def test_shell_sort_empty_and_single():
    empty = []
    shell_sort(empty)
    assert empty == []
    one = _songs(["5 a.mp3"])
    shell_sort(one)
    assert [s.name for s in one] == ["5 a.mp3"]


def test_shell_sort_orders_by_track_number():
    songs = _songs(["(10) b.mp3", "2 c.mp3", "[1] a.mp3", "x.mp3", "03 - d.wav"])
    shell_sort(songs)
    assert [s.name for s in songs] == ["x.mp3", "[1] a.mp3", "2 c.mp3", "03 - d.wav", "(10) b.mp3"]


@pytest.mark.parametrize("seed", range(6))
def test_shell_sort_is_sorted_permutation(seed):
    songs = _songs(_random_names(seed, 30))
    original = list(songs)
    shell_sort(songs)
    numbers = [extract_number(s.name) for s in songs]
    assert numbers == sorted(numbers)
    assert sorted(s.id for s in songs) == sorted(s.id for s in original)


def test_quick_sort_empty_range_is_noop():
    songs = []
    quick_sort(songs, 0, len(songs) - 1)
    assert songs == []


def test_quick_sort_orders_by_title():
    songs = _songs(["(2) Zebra", "(1) apple", "Mango", "(9) Banana"])
    quick_sort(songs, 0, len(songs) - 1)
    assert [s.name for s in songs] == ["(9) Banana", "Mango", "(2) Zebra", "(1) apple"]


@pytest.mark.parametrize("seed", range(6))
def test_quick_sort_is_sorted_permutation(seed):
    songs = _songs(_random_names(seed, 40))
    original = list(songs)
    quick_sort(songs, 0, len(songs) - 1)
    titles = [extract_name(s.name) for s in songs]
    assert titles == sorted(titles)
    assert sorted(s.id for s in songs) == sorted(s.id for s in original)


def test_quick_sort_only_touches_given_range():
    songs = _songs(["d", "c", "b", "a", "z"])
    quick_sort(songs, 1, 3)
    assert [s.name for s in songs] == ["d", "a", "b", "c", "z"]


def test_quick_sort_handles_long_presorted_input():
    names = [f"title{i:05d}" for i in range(3000)]
    songs = _songs(names)
    quick_sort(songs, 0, len(songs) - 1)
    assert [s.name for s in songs] == names