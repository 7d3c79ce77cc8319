from __future__ import annotations

"""
Prefix Sequence Utilities.

Lazy views over the leading sub-sequences of a sequence, used to validate
dotted paths one segment at a time (e.g. 'std', 'std::hash',
'std::hash::sha256').
"""

from collections.abc import Sequence
from typing import Any, Iterator, List, Union, overload


class PrefixSequence(Sequence):
    """
    All non-empty prefixes of a sequence, smallest first.

    Nothing is copied up front: each prefix is sliced from the source on
    access. Iterating again starts over, and reversed() walks from the full
    sequence down to its first element.
    """

    __slots__ = ("_source",)

    def __init__(self, source: Sequence) -> None:
        self._source = source

    def __len__(self) -> int:
        return len(self._source)

    @overload
    def __getitem__(self, index: int) -> Any: ...

    @overload
    def __getitem__(self, index: slice) -> List[Any]: ...

    def __getitem__(self, index: Union[int, slice]) -> Any:
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]

        n = len(self)
        if index < 0:
            index += n
        if not 0 <= index < n:
            raise IndexError("prefix index out of range")
        return self._source[:index + 1]

    def __iter__(self) -> Iterator[Any]:
        for length in range(1, len(self) + 1):
            yield self._source[:length]

    def __reversed__(self) -> Iterator[Any]:
        for length in range(len(self), 0, -1):
            yield self._source[:length]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r})"


def iter_prefixes(sequence: Sequence) -> PrefixSequence:
    """
    Create a view over all prefixes of 'sequence', smallest first.

    >>> list(iter_prefixes([1, 2, 3]))
    [[1], [1, 2], [1, 2, 3]]
    >>> list(reversed(iter_prefixes("abc")))
    ['abc', 'ab', 'a']
    """
    return PrefixSequence(sequence)
