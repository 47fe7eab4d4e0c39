"""Tests for the calculation configuration system."""

import json
from dataclasses import FrozenInstanceError, replace

import pytest
from dacite import UnexpectedDataError, WrongTypeError

from walkrank.config import (
    DEFAULT_CONFIG,
    PagerankConfig,
    config_from_dict,
    config_from_json,
    config_hash,
    config_to_dict,
    config_to_json,
)


class TestDefaults:
    """DEFAULT_CONFIG has the expected values."""

    def test_default_values(self):
        assert DEFAULT_CONFIG.jump_probability == 0.15
        assert DEFAULT_CONFIG.rounds_per_node == 500
        assert DEFAULT_CONFIG.seed == 31337
        assert DEFAULT_CONFIG.max_walk_steps is None
        assert DEFAULT_CONFIG.n_workers == 1


class TestImmutability:
    """Frozen dataclasses prevent mutation."""

    def test_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.seed = 99  # type: ignore[misc]


class TestValidation:
    """__post_init__ rejects out-of-range values."""

    @pytest.mark.parametrize("jump", [-0.01, 1.01])
    def test_jump_probability_range(self, jump):
        with pytest.raises(ValueError, match="jump_probability"):
            PagerankConfig(jump_probability=jump)

    @pytest.mark.parametrize("jump", [0.0, 1.0])
    def test_jump_probability_bounds_allowed(self, jump):
        assert PagerankConfig(jump_probability=jump).jump_probability == jump

    def test_negative_rounds(self):
        with pytest.raises(ValueError, match="rounds_per_node"):
            PagerankConfig(rounds_per_node=-1)

    def test_zero_max_walk_steps(self):
        with pytest.raises(ValueError, match="max_walk_steps"):
            PagerankConfig(max_walk_steps=0)

    def test_zero_workers(self):
        with pytest.raises(ValueError, match="n_workers"):
            PagerankConfig(n_workers=0)


class TestRoundTrip:
    """JSON and dict serialization preserve identity."""

    def test_json_round_trip(self):
        cfg = replace(DEFAULT_CONFIG, max_walk_steps=1000, description="wiki")
        restored = config_from_json(config_to_json(cfg))
        assert restored == cfg
        assert config_hash(restored) == config_hash(cfg)

    def test_dict_round_trip(self):
        assert config_from_dict(config_to_dict(DEFAULT_CONFIG)) == DEFAULT_CONFIG

    def test_json_sorted_keys(self):
        keys = list(json.loads(config_to_json(DEFAULT_CONFIG)).keys())
        assert keys == sorted(keys)

    def test_unknown_key_rejected(self):
        d = config_to_dict(DEFAULT_CONFIG)
        d["damping"] = 0.85
        with pytest.raises(UnexpectedDataError):
            config_from_dict(d)

    def test_wrong_type_rejected(self):
        d = config_to_dict(DEFAULT_CONFIG)
        d["rounds_per_node"] = "many"
        with pytest.raises(WrongTypeError):
            config_from_dict(d)

    def test_validation_runs_on_load(self):
        d = config_to_dict(DEFAULT_CONFIG)
        d["jump_probability"] = 2.0
        with pytest.raises(ValueError, match="jump_probability"):
            config_from_dict(d)


class TestHashing:
    """Deterministic hashes."""

    def test_hash_length(self):
        assert len(config_hash(DEFAULT_CONFIG)) == 16

    def test_hash_stable(self):
        assert config_hash(DEFAULT_CONFIG) == config_hash(PagerankConfig())

    def test_hash_changes_with_seed(self):
        assert config_hash(DEFAULT_CONFIG) != config_hash(replace(DEFAULT_CONFIG, seed=1))

    def test_hash_ignores_description(self):
        labelled = replace(DEFAULT_CONFIG, description="label")
        assert config_hash(labelled) == config_hash(DEFAULT_CONFIG)

    def test_hash_changes_with_step_bound(self):
        bounded = replace(DEFAULT_CONFIG, max_walk_steps=100)
        assert config_hash(bounded) != config_hash(DEFAULT_CONFIG)


class TestPartialJson:
    """Hand-written JSON with only some fields."""

    def test_missing_fields_default(self):
        cfg = config_from_json('{"jump_probability": 0.3}')
        assert cfg == replace(DEFAULT_CONFIG, jump_probability=0.3)

    def test_null_step_bound(self):
        cfg = config_from_json('{"max_walk_steps": null}')
        assert cfg.max_walk_steps is None
