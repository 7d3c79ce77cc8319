from __future__ import annotations

"""
Unit tests for the Prefix Sequence Utilities.
"""

import pytest

from sway_utils.utils.prefixes import PrefixSequence, iter_prefixes


@pytest.mark.parametrize("n", range(0, 6))
def test_prefix_count_and_lengths(n: int) -> None:
    source = list(range(n))
    prefixes = list(iter_prefixes(source))

    assert len(prefixes) == n
    assert [len(p) for p in prefixes] == list(range(1, n + 1))
    if n:
        assert prefixes[-1] == source
        assert all(p == source[:len(p)] for p in prefixes)


def test_prefixes_smallest_first() -> None:
    it = iter(iter_prefixes([1, 2, 3]))

    assert next(it) == [1]
    assert next(it) == [1, 2]
    assert next(it) == [1, 2, 3]
    with pytest.raises(StopIteration):
        next(it)


def test_prefixes_reversed() -> None:
    assert list(reversed(iter_prefixes(("std", "hash", "sha256")))) == [
        ("std", "hash", "sha256"),
        ("std", "hash"),
        ("std",),
    ]


def test_prefixes_restartable() -> None:
    prefixes = iter_prefixes("abc")

    assert list(prefixes) == ["a", "ab", "abc"]
    assert list(prefixes) == ["a", "ab", "abc"]


def test_prefixes_empty() -> None:
    prefixes = iter_prefixes([])

    assert len(prefixes) == 0
    assert list(prefixes) == []
    assert list(reversed(prefixes)) == []


def test_prefixes_indexing() -> None:
    prefixes = iter_prefixes([10, 20, 30, 40])

    assert isinstance(prefixes, PrefixSequence)
    assert prefixes[0] == [10]
    assert prefixes[-1] == [10, 20, 30, 40]
    assert prefixes[1:3] == [[10, 20], [10, 20, 30]]
    assert [10, 20] in prefixes
    with pytest.raises(IndexError):
        prefixes[4]


def test_prefixes_follow_source() -> None:
    """The view slices lazily, so it reflects the source at access time."""
    source = [1]
    prefixes = iter_prefixes(source)
    source.append(2)

    assert list(prefixes) == [[1], [1, 2]]
