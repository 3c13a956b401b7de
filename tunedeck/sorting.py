"""In-place orderings of song lists: by track number and by title."""

from __future__ import annotations

from typing import MutableSequence

from tunedeck.song import Song, extract_name, extract_number


def shell_sort(songs: MutableSequence[Song]) -> None:
    """Sort ``songs`` in place by the track number found in each name.

    Uses Shell sort with gaps n/2, n/4, ..., 1.
    """
    total = len(songs)
    gap = total // 2
    while gap > 0:
        for i in range(gap, total):
            item = songs[i]
            key = extract_number(item.name)
            j = i
            while j >= gap and extract_number(songs[j - gap].name) > key:
                songs[j] = songs[j - gap]
                j -= gap
            songs[j] = item
        gap //= 2


def quick_sort(songs: MutableSequence[Song], left: int, right: int) -> None:
    """Sort ``songs[left:right + 1]`` in place by title (see ``extract_name``).

    Uses quicksort with a Lomuto partition around the last element.
    """
    pending = [(left, right)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = _partition(songs, low, high)
        pending.append((pivot + 1, high))
        pending.append((low, pivot - 1))


def _partition(songs: MutableSequence[Song], left: int, right: int) -> int:
    pivot_name = extract_name(songs[right].name)
    boundary = left - 1
    for j in range(left, right):
        if extract_name(songs[j].name) < pivot_name:
            boundary += 1
            songs[boundary], songs[j] = songs[j], songs[boundary]
    songs[boundary + 1], songs[right] = songs[right], songs[boundary + 1]
    return boundary + 1