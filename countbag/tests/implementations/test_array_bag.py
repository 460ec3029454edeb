"""Tests specific to `ArrayBag`: its iterators, representation and logging."""

import logging

import pytest

from countbag.implementations.array_bag import TRACE_LOG_LEVEL, ArrayBag
from countbag.interface.exceptions import CapacityExceededError


@pytest.fixture
def example_bag() -> ArrayBag[str]:
    """Returns the bag {a: 3, b: 1, c: 2}."""
    bag: ArrayBag[str] = ArrayBag()
    bag.add_with_occurrences("a", 3)
    bag.add("b")
    bag.add_with_occurrences("c", 2)
    return bag


def test_all_occurrences_is_lazy(example_bag: ArrayBag[str]) -> None:
    """Does the iterator step through occurrences one at a time, then stop for good?"""
    iterator = example_bag.all_occurrences()
    assert [next(iterator) for _ in range(4)] == ["a", "a", "a", "b"]
    assert next(iterator) == "c"
    assert next(iterator) == "c"

    for _ in range(2):
        with pytest.raises(StopIteration):
            next(iterator)


@pytest.mark.parametrize("all_occurrences", [False, True])
def test_exhausted_iterator_ignores_mutation(
    example_bag: ArrayBag[str], all_occurrences: bool
) -> None:
    """Once an iterator is used up it should keep stopping, even if the bag changes afterwards."""
    iterator = example_bag.all_occurrences() if all_occurrences else iter(example_bag)
    list(iterator)

    example_bag.add("d")
    example_bag.remove("a")
    for _ in range(2):
        with pytest.raises(StopIteration):
            next(iterator)


def test_all_occurrences_single_entry() -> None:
    bag: ArrayBag[int] = ArrayBag(1)
    bag.add(7)
    assert list(bag.all_occurrences()) == [7]

    bag.add(7)
    assert list(bag.all_occurrences()) == [7, 7]


def test_iterators_are_independent(example_bag: ArrayBag[str]) -> None:
    iterator_1 = iter(example_bag)
    iterator_2 = iter(example_bag)
    assert next(iterator_1) == "a"
    assert next(iterator_1) == "b"
    assert next(iterator_2) == "a"
    assert list(iterator_1) == ["c"]
    assert list(iterator_2) == ["b", "c"]


def test_iterators_after_removal(example_bag: ArrayBag[str]) -> None:
    """Removing entries should be reflected by iterators created afterwards."""
    example_bag.remove("b")
    example_bag.remove("a")
    assert list(example_bag) == ["a", "c"]
    assert list(example_bag.all_occurrences()) == ["a", "a", "c", "c"]

    for _ in range(3):
        example_bag.remove("c")
    assert list(example_bag.all_occurrences()) == ["a", "a"]


@pytest.mark.parametrize("all_occurrences", [False, True])
@pytest.mark.parametrize("mutation", ["add", "remove"])
def test_mutation_invalidates_iterator(
    example_bag: ArrayBag[str], all_occurrences: bool, mutation: str
) -> None:
    iterator = example_bag.all_occurrences() if all_occurrences else iter(example_bag)
    next(iterator)

    getattr(example_bag, mutation)("a")
    with pytest.raises(RuntimeError):
        next(iterator)

    # New iterators are unaffected.
    assert "a" in list(example_bag)


def test_failed_add_does_not_invalidate_iterator() -> None:
    bag: ArrayBag[str] = ArrayBag(1)
    bag.add("a")
    iterator = iter(bag)

    with pytest.raises(CapacityExceededError):
        bag.add("b")
    bag.remove("not present")

    assert list(iterator) == ["a"]


def test_items_are_copies(example_bag: ArrayBag[str]) -> None:
    items = list(example_bag.items())
    example_bag.add("a")
    assert items == [("a", 3), ("b", 1), ("c", 2)]
    assert example_bag.count_of("a") == 4


def test_repr() -> None:
    bag: ArrayBag[str] = ArrayBag(5)
    bag.add_with_occurrences("a", 2)
    assert repr(bag) == "ArrayBag([('a', 2)], max_size=5)"


def test_logs_when_full(caplog: pytest.LogCaptureFixture) -> None:
    bag: ArrayBag[str] = ArrayBag(1)
    bag.add("a")

    with caplog.at_level(logging.DEBUG, logger="countbag.implementations.array_bag"):
        with pytest.raises(CapacityExceededError):
            bag.add("b")

    assert "already holds 1 values" in caplog.text


def test_trace_logging(caplog: pytest.LogCaptureFixture) -> None:
    bag: ArrayBag[str] = ArrayBag()

    with caplog.at_level(logging.DEBUG, logger="countbag.implementations.array_bag"):
        bag.add("a")
    assert caplog.records == []  # trace messages are below DEBUG

    with caplog.at_level(TRACE_LOG_LEVEL, logger="countbag.implementations.array_bag"):
        bag.add("a")
        bag.remove("a")
    assert "Added 'a', count now 2" in caplog.text
    assert "Removed 'a', count now 1" in caplog.text
