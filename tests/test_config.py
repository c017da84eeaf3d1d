"""
Tests for ForceConfig.
"""

import dataclasses
import math

import pytest

from force_layout import CoincidentPolicy, ForceConfig
from force_layout.validation import InvalidConfigError


class TestForceConfig:
    """Tests for simulation parameters."""

    def test_defaults(self):
        """Defaults match the classic constants."""
        config = ForceConfig()

        assert config.k_repel == 0.005
        assert config.k_attract == 0.005
        assert config.min_distance == 0.01
        assert config.coincident_policy is CoincidentPolicy.clamp

    def test_policy_from_string(self):
        """Policies can be given by name."""
        assert ForceConfig(coincident_policy="skip").coincident_policy is CoincidentPolicy.skip
        assert ForceConfig(coincident_policy="raise").coincident_policy is CoincidentPolicy.raise_

    def test_unknown_policy(self):
        """Unknown policies are rejected with the valid choices."""
        with pytest.raises(InvalidConfigError, match="clamp, skip, raise"):
            ForceConfig(coincident_policy="ignore")

    def test_non_finite_constant(self):
        """NaN and infinite constants are rejected."""
        with pytest.raises(InvalidConfigError, match="k_repel"):
            ForceConfig(k_repel=math.nan)
        with pytest.raises(InvalidConfigError, match="k_attract"):
            ForceConfig(k_attract=math.inf)

    def test_min_distance_positive(self):
        """min_distance must be positive."""
        with pytest.raises(InvalidConfigError):
            ForceConfig(min_distance=0.0)

    def test_ints_normalized(self):
        """Integer constants are stored as floats."""
        config = ForceConfig(k_repel=1, k_attract=2)

        assert isinstance(config.k_repel, float)
        assert config.k_attract == 2.0

    def test_frozen(self):
        """Configs are immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            ForceConfig().k_repel = 1.0  # type: ignore[misc]

    def test_with_changes(self):
        """with_changes returns a validated copy."""
        base = ForceConfig()
        changed = base.with_changes(k_attract=0.5)

        assert changed.k_attract == 0.5
        assert base.k_attract == 0.005
        with pytest.raises(InvalidConfigError):
            base.with_changes(min_distance=-1)

    def test_from_dict(self):
        """from_dict ignores unknown keys and None values."""
        config = ForceConfig.from_dict(
            {"k_repel": 0.1, "k_attract": None, "duration": 3, "coincident_policy": "skip"}
        )

        assert config.k_repel == 0.1
        assert config.k_attract == 0.005
        assert config.coincident_policy is CoincidentPolicy.skip
