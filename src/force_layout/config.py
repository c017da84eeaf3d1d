"""
Simulation parameters.

Force constants are passed explicitly to the force computations instead of
living in module globals, so several simulations with different tuning can
run side by side.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Union

from .types import CoincidentPolicy
from .validation import InvalidConfigError, validate_force_constant, validate_min_distance

DEFAULT_K_REPEL = 0.005
DEFAULT_K_ATTRACT = 0.005
DEFAULT_MIN_DISTANCE = 0.01


@dataclass(frozen=True)
class ForceConfig:
    """
    Force constants for one simulation.

    Attributes:
        k_repel: Repulsion strength, force = k_repel / d
        k_attract: Attraction strength, force = k_attract * d^2
        min_distance: Distance used in place of anything shorter when the
            coincident policy is ``clamp``
        coincident_policy: Treatment of node pairs at distance zero

    Example:
        config = ForceConfig(k_repel=0.01)
        stronger = config.with_changes(k_attract=0.02)
    """

    k_repel: float = DEFAULT_K_REPEL
    k_attract: float = DEFAULT_K_ATTRACT
    min_distance: float = DEFAULT_MIN_DISTANCE
    coincident_policy: Union[CoincidentPolicy, str] = CoincidentPolicy.clamp

    def __post_init__(self) -> None:
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "k_repel", validate_force_constant("k_repel", self.k_repel))
        object.__setattr__(
            self, "k_attract", validate_force_constant("k_attract", self.k_attract)
        )
        object.__setattr__(self, "min_distance", validate_min_distance(self.min_distance))
        try:
            policy = CoincidentPolicy(self.coincident_policy)
        except ValueError as exc:
            choices = ", ".join(p.value for p in CoincidentPolicy)
            raise InvalidConfigError(
                f"coincident_policy must be one of {choices}, got {self.coincident_policy!r}"
            ) from exc
        object.__setattr__(self, "coincident_policy", policy)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ForceConfig:
        """
        Build a config from a mapping, ignoring unknown keys.

        Args:
            data: Mapping with any of the field names

        Returns:
            New ForceConfig
        """
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names and v is not None})

    def with_changes(self, **changes: Any) -> ForceConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


__all__ = [
    "ForceConfig",
    "DEFAULT_K_REPEL",
    "DEFAULT_K_ATTRACT",
    "DEFAULT_MIN_DISTANCE",
]
