"""Calculation configuration with frozen, hashable, serializable dataclasses."""

from walkrank.config.experiment import PagerankConfig
from walkrank.config.defaults import DEFAULT_CONFIG
from walkrank.config.hashing import config_hash
from walkrank.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "PagerankConfig",
    "DEFAULT_CONFIG",
    "config_hash",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
]
