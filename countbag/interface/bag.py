"""
The `Bag` contract: a collection holding each distinct value once, along with the number of
occurrences of that value.

Values are matched using the ordering they define rather than `__eq__`: two values belong to the
same entry iff neither compares less than the other.
"""

from __future__ import annotations

import abc
from typing import Generic, Iterator, Protocol, TypeVar

MAX_SIZE = 1000  # maximum number of *distinct* values a bag can hold


class Comparable(Protocol):
    def __lt__(self, __other) -> bool:
        ...


ElementT = TypeVar("ElementT", bound=Comparable)


def values_match(first: Comparable, second: Comparable) -> bool:
    """Whether two values are equivalent under their ordering."""
    return not (first < second) and not (second < first)


class Bag(abc.ABC, Generic[ElementT]):
    """
    Base class for all bags.

    Subclasses store the entries and provide lookup, mutation and iteration. The merge operators
    and string rendering are written against that interface, so they are shared by every
    implementation.

    A bag must not be mutated while one of its iterators is in use; implementations invalidate
    active iterators when this happens.
    """

    @property
    @abc.abstractmethod
    def max_size(self) -> int:
        """Maximum number of distinct values this bag can hold."""

    @abc.abstractmethod
    def add(self, value: ElementT) -> None:
        """
        Add one occurrence of `value`.

        Raises:
            CapacityExceededError: if `value` is new and the bag already holds `max_size` values.
        """

    def add_with_occurrences(self, value: ElementT, occurrences: int) -> None:
        """
        Add `occurrences` occurrences of `value`, one at a time.

        Zero or negative `occurrences` do nothing. If the bag fills up part way through, the
        occurrences added so far are kept and the `CapacityExceededError` is propagated.
        """
        for _ in range(occurrences):
            self.add(value)

    @abc.abstractmethod
    def contains(self, value: ElementT) -> bool:
        """Whether the bag holds at least one occurrence of `value`."""

    @abc.abstractmethod
    def count_of(self, value: ElementT) -> int:
        """Number of occurrences of `value` (0 if absent)."""

    @abc.abstractmethod
    def remove(self, value: ElementT) -> None:
        """
        Remove one occurrence of `value`, dropping the entry once its count reaches zero.
        Removing a value which is not in the bag is a no-op.
        """

    @abc.abstractmethod
    def size(self) -> int:
        """Number of distinct values (occurrences are not taken into account)."""

    def is_empty(self) -> bool:
        return self.size() == 0

    @abc.abstractmethod
    def __iter__(self) -> Iterator[ElementT]:
        """Iterate over the distinct values, each one returned once."""

    @abc.abstractmethod
    def all_occurrences(self) -> Iterator[ElementT]:
        """Iterate over every occurrence, repeating each value as many times as it was added."""

    def items(self) -> Iterator[tuple[ElementT, int]]:
        """Iterate over `(value, count)` pairs."""
        for value in self:
            yield value, self.count_of(value)

    def __contains__(self, value) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return self.size()

    def _empty_copy(self) -> Bag[ElementT]:
        # Merged bags are of the same class as `self` and sized to the global maximum.
        return type(self)()  # type: ignore[call-arg]

    def create_merged_all_unique(self, other: Bag[ElementT]) -> Bag[ElementT]:
        """
        Create a new bag holding every distinct value of `self` and `other` exactly once.

        Neither operand is modified.

        Raises:
            CapacityExceededError: if the combined number of distinct values does not fit.
        """
        merged = self._empty_copy()
        for bag in (self, other):
            for value in bag:
                if not merged.contains(value):
                    merged.add(value)
        return merged

    def create_merged_all_occurrences(self, other: Bag[ElementT]) -> Bag[ElementT]:
        """
        Create a new bag holding every value of `self` and `other`, with the counts summed.

        Neither operand is modified.

        Raises:
            CapacityExceededError: if the combined number of distinct values does not fit.
        """
        merged = self._empty_copy()
        for bag in (self, other):
            for value, count in bag.items():
                merged.add_with_occurrences(value, count)
        return merged

    def __str__(self) -> str:
        return "[" + ", ".join(f"{value}: {count}" for value, count in self.items()) + "]"
