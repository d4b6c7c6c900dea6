"""Unit tests for the array-backed heap helpers."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

import pytest

from leaderboard.ranking.heap import make_heap, pop_heap, sift_down

IsHeap = Callable[[list[Any], Callable[[Any, Any], bool]], bool]


class TestMakeHeap:
    @pytest.mark.parametrize("before", [operator.gt, operator.lt], ids=["max", "min"])
    def test_builds_valid_heap(self, before: Callable[[int, int], bool], is_heap: IsHeap) -> None:
        items = [(i * 37) % 101 for i in range(101)]
        make_heap(items, before)
        assert is_heap(items, before)

    def test_max_root(self) -> None:
        items = [3, 9, 1, 7, 5]
        make_heap(items, operator.gt)
        assert items[0] == 9

    @pytest.mark.parametrize("items", [[], [1]])
    def test_trivial(self, items: list[int], is_heap: IsHeap) -> None:
        make_heap(items, operator.gt)
        assert is_heap(items, operator.gt)


class TestSiftDown:
    def test_moves_root_to_leaf(self, is_heap: IsHeap) -> None:
        items = [0, 5, 4, 3, 2]
        sift_down(items, 0, len(items), operator.gt)
        assert items[0] == 5
        assert is_heap(items, operator.gt)

    def test_respects_size(self) -> None:
        items = [0, 1, 9]
        sift_down(items, 0, 2, operator.gt)
        assert items == [1, 0, 9]


class TestPopHeap:
    def test_pops_in_descending_order(self) -> None:
        items = [4, 8, 1, 9, 3, 7]
        make_heap(items, operator.gt)
        popped = []
        for size in range(len(items), 0, -1):
            pop_heap(items, size, operator.gt)
            popped.append(items[size - 1])
        assert popped == [9, 8, 7, 4, 3, 1]

    def test_single_element_is_noop(self) -> None:
        items = [42]
        pop_heap(items, 1, operator.gt)
        assert items == [42]
