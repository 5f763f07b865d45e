"""
Fibonacci numbers and a lazy merge of sorted sequences.

https://en.wikipedia.org/wiki/Fibonacci_number
https://en.wikipedia.org/wiki/Merge_algorithm
"""

from itertools import islice
from typing import Callable, Iterable, Iterator, List, TypeVar

T = TypeVar("T")

# Marks an exhausted source; no element can compare identical to it
_EXHAUSTED = object()


def get_fibonacci_sequence() -> Iterator[int]:
    """Yields 0, 1, 1, 2, 3, 5, 8, ... forever"""
    a, b = 0, 1
    while True:
        yield a
        a, b = b, a + b


def merge_sorted_sequences(
    source1: Callable[[], Iterable[T]], source2: Callable[[], Iterable[T]]
) -> Iterator[T]:
    """
    Merge two ascending sequences into one ascending sequence.

    Both arguments are factories, called once each to get a fresh iterable.
    Only one head per source is buffered, so infinite sources work. On ties
    source2's element comes out first.

        [1, 3, 5, ...], [2, 4, 6, ...] => [1, 2, 3, 4, 5, 6, ...]
        [0], [2, 4, 6, ...] => [0, 2, 4, 6, ...]
    """
    it1 = iter(source1())
    it2 = iter(source2())
    head1 = next(it1, _EXHAUSTED)
    head2 = next(it2, _EXHAUSTED)

    while head1 is not _EXHAUSTED and head2 is not _EXHAUSTED:
        if head1 < head2:
            yield head1
            head1 = next(it1, _EXHAUSTED)
        else:
            yield head2
            head2 = next(it2, _EXHAUSTED)

    # At most one of these still has elements
    if head1 is not _EXHAUSTED:
        yield head1
        yield from it1
    if head2 is not _EXHAUSTED:
        yield head2
        yield from it2


def take(n: int, iterable: Iterable[T]) -> List[T]:
    """First `n` elements of `iterable`; safe on infinite sequences"""
    return list(islice(iterable, n))
