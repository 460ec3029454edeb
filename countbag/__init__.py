from countbag.config import BagClass, BagConfig
from countbag.implementations.array_bag import ArrayBag
from countbag.interface.bag import MAX_SIZE, Bag, Comparable
from countbag.interface.exceptions import (
    BagError,
    CapacityExceededError,
    InvalidCapacityError,
    UnknownImplementationError,
)
from countbag.utils.bag_loading import get_bag

__all__ = [
    "MAX_SIZE",
    "Bag",
    "Comparable",
    "ArrayBag",
    "BagClass",
    "BagConfig",
    "get_bag",
    "BagError",
    "CapacityExceededError",
    "InvalidCapacityError",
    "UnknownImplementationError",
]
