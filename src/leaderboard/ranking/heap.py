"""Array-backed binary heap helpers.

Heaps live in a plain list: the children of index ``i`` sit at ``2i+1`` and
``2i+2``. ``before(a, b)`` is True when ``a`` belongs above ``b``, so
``operator.gt`` gives a max-heap and ``operator.lt`` a min-heap.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import TypeVar

T = TypeVar("T")

Before = Callable[[T, T], bool]


def sift_down(items: MutableSequence[T], pos: int, size: int, before: Before[T]) -> None:
    """Move ``items[pos]`` down until neither child in ``items[:size]`` belongs above it."""
    while True:
        left = 2 * pos + 1
        right = left + 1
        top = pos
        if left < size and before(items[left], items[top]):
            top = left
        if right < size and before(items[right], items[top]):
            top = right
        if top == pos:
            return
        items[pos], items[top] = items[top], items[pos]
        pos = top


def make_heap(items: MutableSequence[T], before: Before[T]) -> None:
    """Arrange the whole of ``items`` into a heap in place. O(n)."""
    size = len(items)
    for pos in range(size // 2 - 1, -1, -1):
        sift_down(items, pos, size, before)


def pop_heap(items: MutableSequence[T], size: int, before: Before[T]) -> None:
    """Move the root of the heap ``items[:size]`` to ``items[size - 1]``.

    ``items[:size - 1]`` is a heap again afterwards.
    """
    last = size - 1
    if last <= 0:
        return
    items[0], items[last] = items[last], items[0]
    sift_down(items, 0, last, before)
