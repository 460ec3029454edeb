from dataclasses import dataclass
from enum import Enum

from countbag.implementations.array_bag import ArrayBag
from countbag.interface.bag import MAX_SIZE


class BagClass(Enum):
    ArrayBag = ArrayBag


@dataclass
class BagConfig:
    """Config selecting which bag implementation to build, and how large."""

    bag_class: BagClass = BagClass.ArrayBag
    max_size: int = MAX_SIZE
