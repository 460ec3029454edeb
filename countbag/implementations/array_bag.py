"""Bag implementation backed by a list of (value, count) entries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Iterator, Optional

from countbag.interface.bag import MAX_SIZE, Bag, ElementT, values_match
from countbag.interface.exceptions import CapacityExceededError, InvalidCapacityError

logger = logging.getLogger(__name__)

TRACE_LOG_LEVEL = logging.DEBUG - 1  # per-operation logging is very low level


@dataclass
class _Entry(Generic[ElementT]):
    """One distinct value and its number of occurrences. Never handed out of `ArrayBag`."""

    value: ElementT
    count: int


class ArrayBag(Bag[ElementT]):
    """
    Bag storing its entries in a list, in insertion order.

    All lookups are linear scans comparing values with `values_match`, which is fine given that
    the number of distinct values is capped at `MAX_SIZE`.
    """

    def __init__(self, max_size: int = MAX_SIZE) -> None:
        if max_size > MAX_SIZE:
            raise InvalidCapacityError(
                f"Attempting to create a bag with max_size {max_size} greater than {MAX_SIZE}"
            )
        if max_size < 1:
            raise InvalidCapacityError(
                f"Attempting to create a bag with max_size {max_size} less than 1"
            )
        self._max_size = max_size
        self._entries: list[_Entry[ElementT]] = []

        # Bumped on every mutation so that active iterators can detect it.
        self._version = 0

    @property
    def max_size(self) -> int:
        return self._max_size

    def _find(self, value: ElementT) -> Optional[_Entry[ElementT]]:
        for entry in self._entries:
            if values_match(entry.value, value):
                return entry
        return None

    def add(self, value: ElementT) -> None:
        entry = self._find(value)
        if entry is not None:
            entry.count += 1
        elif len(self._entries) < self._max_size:
            self._entries.append(_Entry(value=value, count=1))
        else:
            logger.debug(f"Cannot add {value!r}: bag already holds {self._max_size} values")
            raise CapacityExceededError(f"Bag is full (max_size={self._max_size})")

        self._version += 1
        if logger.isEnabledFor(TRACE_LOG_LEVEL):
            logger.log(TRACE_LOG_LEVEL, f"Added {value!r}, count now {self.count_of(value)}")

    def contains(self, value: ElementT) -> bool:
        return self._find(value) is not None

    def count_of(self, value: ElementT) -> int:
        entry = self._find(value)
        return 0 if entry is None else entry.count

    def remove(self, value: ElementT) -> None:
        for idx, entry in enumerate(self._entries):
            if values_match(entry.value, value):
                entry.count -= 1
                if entry.count == 0:
                    del self._entries[idx]
                self._version += 1

                if logger.isEnabledFor(TRACE_LOG_LEVEL):
                    logger.log(TRACE_LOG_LEVEL, f"Removed {value!r}, count now {entry.count}")
                return

    def size(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ElementT]:
        return _UniqueValuesIterator(self)

    def all_occurrences(self) -> Iterator[ElementT]:
        return _AllOccurrencesIterator(self)

    def items(self) -> Iterator[tuple[ElementT, int]]:
        # Snapshot so that callers never see (or mutate) the entry records themselves.
        return iter([(entry.value, entry.count) for entry in self._entries])

    def _check_not_modified(self, version: int) -> None:
        if version != self._version:
            raise RuntimeError("Bag was modified during iteration")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.items())!r}, max_size={self._max_size})"


class _UniqueValuesIterator(Iterator[ElementT]):
    """Returns each distinct value once, in entry order."""

    def __init__(self, bag: ArrayBag[ElementT]) -> None:
        self._bag: Optional[ArrayBag[ElementT]] = bag
        self._version = bag._version
        self._index = 0

    def __next__(self) -> ElementT:
        if self._bag is None:
            raise StopIteration  # exhausted, later mutations no longer matter
        self._bag._check_not_modified(self._version)

        entries = self._bag._entries
        if self._index >= len(entries):
            self._bag = None
            raise StopIteration

        value = entries[self._index].value
        self._index += 1
        return value


class _AllOccurrencesIterator(Iterator[ElementT]):
    """
    Returns each value `count` times in a row before moving on to the next entry.

    State is `(index, num_emitted)`: the current entry and how many of its occurrences have been
    returned so far. Iteration stops once the last entry has no occurrences left.
    """

    def __init__(self, bag: ArrayBag[ElementT]) -> None:
        self._bag: Optional[ArrayBag[ElementT]] = bag
        self._version = bag._version
        self._index = 0
        self._num_emitted = 0

    def __next__(self) -> ElementT:
        if self._bag is None:
            raise StopIteration  # exhausted, later mutations no longer matter
        self._bag._check_not_modified(self._version)

        entries = self._bag._entries
        if self._index < len(entries) and self._num_emitted < entries[self._index].count:
            self._num_emitted += 1
            return entries[self._index].value

        # Current entry is used up: move on only if there is a next entry to move to.
        if self._index + 1 < len(entries):
            self._index += 1
            self._num_emitted = 1
            return entries[self._index].value

        self._index = len(entries)
        self._num_emitted = 0
        self._bag = None
        raise StopIteration
