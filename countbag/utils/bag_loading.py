"""Construct bags from a `BagConfig`, without any process-wide factory state."""

import logging
from typing import Optional, Union

from countbag.config import BagClass, BagConfig
from countbag.interface.bag import Bag
from countbag.interface.exceptions import UnknownImplementationError

logger = logging.getLogger(__name__)


def bag_class_from_name(name: str) -> BagClass:
    """Look up a supported bag implementation by its name."""
    try:
        return BagClass[name]
    except KeyError:
        supported_names = ", ".join(c.name for c in BagClass)
        raise UnknownImplementationError(
            f"Unknown bag implementation {name!r}: bag_class should be set to one of "
            f"[{supported_names}]"
        ) from None


def get_bag(config: Union[BagConfig, BagClass], max_size: Optional[int] = None) -> Bag:
    """
    Create an empty bag of the configured class.

    Args:
        config: Either a full `BagConfig` (plain or loaded through `get_bag_config`), or just the
            `BagClass` to use, in which case the default size applies.
        max_size: If given, overrides the size from the config.
    """
    if isinstance(config, BagClass):
        config = BagConfig(bag_class=config)

    bag_class = config.bag_class
    if not isinstance(bag_class, BagClass):
        raise UnknownImplementationError(
            f"Attempting to create a bag from {bag_class!r}, which is not a bag class"
        )

    if max_size is None:
        max_size = config.max_size

    logger.debug(f"Creating {bag_class.name} with max_size={max_size}")
    return bag_class.value(max_size=max_size)
