"""Loading of `BagConfig` from yaml files and command-line style overrides."""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional, cast

from omegaconf import DictConfig, OmegaConf

from countbag.config import BagConfig
from countbag.interface.bag import MAX_SIZE
from countbag.interface.exceptions import InvalidCapacityError
from countbag.utils.bag_loading import bag_class_from_name

logger = logging.getLogger(__name__)


def get_bag_config(
    argv: Optional[List[str]] = None, defaults: Optional[Dict[str, Any]] = None
) -> BagConfig:
    """
    Build a read-only `BagConfig`, checked so that `get_bag` can always construct it.

    Args:
        argv: Arguments to parse; `sys.argv[1:]` is used if `None`. Any number of
            `--config path.yaml` arguments may be given, the remaining ones are treated as
            `key=value` overrides (e.g. `bag_class=ArrayBag max_size=50`).
        defaults: Optional values applied on top of the `BagConfig` defaults, before any yaml file.

    Later sources win: `BagConfig` defaults < `defaults` < yaml files (in order given) < overrides.

    Raises:
        UnknownImplementationError: if any source names a bag class which does not exist.
        InvalidCapacityError: if the resulting `max_size` is outside `[1, MAX_SIZE]`.
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(allow_abbrev=False)  # prevent prefix matching issues
    parser.add_argument(
        "--config",
        type=str,
        action="append",
        default=list(),
        help="Path to a yaml config file; may be repeated, later files take priority.",
    )
    args, overrides = parser.parse_known_args(argv)

    sources = []
    if defaults:
        sources.append(OmegaConf.create(defaults))
    sources += [OmegaConf.load(path) for path in args.config]
    sources.append(OmegaConf.from_cli(overrides))

    # Resolve class names up front so that a typo is reported as an unknown implementation
    # (with the supported names) rather than as a generic validation error.
    for source in sources:
        if isinstance(source, DictConfig):
            name = OmegaConf.select(source, "bag_class")
            if isinstance(name, str):
                bag_class_from_name(name)

    config = OmegaConf.merge(OmegaConf.structured(BagConfig), *sources)
    if not 1 <= config.max_size <= MAX_SIZE:
        raise InvalidCapacityError(
            f"Configured max_size {config.max_size} is outside of [1, {MAX_SIZE}]"
        )

    OmegaConf.set_readonly(config, True)  # should not be written to
    logger.debug(f"Loaded bag config: {config.bag_class.name} with max_size={config.max_size}")
    return cast(BagConfig, config)
