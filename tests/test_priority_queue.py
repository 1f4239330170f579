"""Unit tests for the max priority queue behind Counter iteration."""

import pytest

from briefcount.priority_queue import PriorityQueue


def make_queue(items: list[tuple[str, float]]) -> PriorityQueue[str]:
    pq = PriorityQueue[str]()
    for key, priority in items:
        pq.add(key, priority)
    return pq


def test_drains_by_decreasing_priority() -> None:
    pq = make_queue([("a", 3.0), ("b", 1.0), ("c", 2.0), ("d", -4.0)])

    assert [pq.next() for _ in range(4)] == ["a", "c", "b", "d"]
    assert pq.is_empty()


def test_equal_priorities_keep_insertion_order() -> None:
    pq = make_queue([("x", 1.0), ("y", 1.0), ("z", 1.0)])
    assert list(pq) == ["x", "y", "z"]


def test_keys_do_not_need_to_be_comparable() -> None:
    first, second = {"name": "first"}, {"name": "second"}
    pq = PriorityQueue[dict]()
    pq.add(first, 1.0)
    pq.add(second, 1.0)
    assert list(pq) == [first, second]


def test_peek_and_priority_do_not_remove() -> None:
    pq = make_queue([("a", 1.0), ("b", 5.0)])

    assert pq.peek() == "b"
    assert pq.get_priority() == 5.0
    assert pq.size() == 2
    assert pq.has_next()


def test_iteration_is_not_restartable() -> None:
    pq = make_queue([("a", 2.0), ("b", 1.0)])
    assert list(pq) == ["a", "b"]
    assert list(pq) == []
    assert not pq.has_next()


@pytest.mark.parametrize("method", ["next", "peek", "get_priority"])
def test_empty_queue_raises(method: str) -> None:
    with pytest.raises(IndexError):
        getattr(PriorityQueue[str](), method)()


@pytest.mark.parametrize(
    "max_keys, expected",
    [
        (None, "[a : 3.0, c : 2.0, b : 1.0]"),
        (3, "[a : 3.0, c : 2.0, b : 1.0]"),
        (10, "[a : 3.0, c : 2.0, b : 1.0]"),
        (2, "[a : 3.0, c : 2.0, ...]"),
        (0, "[...]"),
        (-1, "[...]"),
    ],
)
def test_to_string(max_keys: int | None, expected: str) -> None:
    pq = make_queue([("a", 3.0), ("b", 1.0), ("c", 2.0)])
    assert pq.to_string(max_keys) == expected


def test_to_string_does_not_drain() -> None:
    pq = make_queue([("a", 3.0), ("b", 1.0)])
    assert str(pq) == "[a : 3.0, b : 1.0]"
    assert pq.size() == 2
    assert list(pq) == ["a", "b"]
