from __future__ import annotations

import pytest

from countbag.config import BagClass
from countbag.interface.bag import Bag


class CaseInsensitive:
    """String wrapper ordered case-insensitively, with the default identity-based `__eq__`."""

    def __init__(self, text: str) -> None:
        self.text = text

    def __lt__(self, other: CaseInsensitive) -> bool:
        return self.text.lower() < other.text.lower()

    def __repr__(self) -> str:
        return f"CaseInsensitive({self.text!r})"


@pytest.fixture(params=list(BagClass), ids=lambda c: c.name)
def bag_cls(request) -> type[Bag]:
    """Each of the supported bag implementations."""
    return request.param.value


@pytest.fixture
def bag_a(bag_cls: type[Bag]) -> Bag[str]:
    """Returns the bag {x: 2, y: 1}."""
    bag = bag_cls()
    bag.add_with_occurrences("x", 2)
    bag.add("y")
    return bag


@pytest.fixture
def bag_b(bag_cls: type[Bag]) -> Bag[str]:
    """Returns the bag {y: 3, z: 1}."""
    bag = bag_cls()
    bag.add_with_occurrences("y", 3)
    bag.add("z")
    return bag
