"""JSON serialization and deserialization for PageRank configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from walkrank.config.experiment import PagerankConfig

_DACITE_CONFIG = DaciteConfig(check_types=True, strict=True)


def config_to_json(config: PagerankConfig) -> str:
    """Write a PagerankConfig as JSON, one field per line in sorted order.

    max_walk_steps=None is written as null.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> PagerankConfig:
    """Load a PagerankConfig from JSON written by config_to_json or by hand.

    Missing fields take their defaults. Unknown fields, such as a misspelt
    "jump_probablity", raise dacite.UnexpectedDataError. Values outside
    their range (a jump probability above 1, a zero worker count) raise
    ValueError.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: PagerankConfig) -> dict[str, Any]:
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> PagerankConfig:
    """Build a PagerankConfig from a dict, rejecting unknown or mistyped fields."""
    return from_dict(data_class=PagerankConfig, data=d, config=_DACITE_CONFIG)
