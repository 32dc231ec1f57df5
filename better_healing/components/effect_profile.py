from dataclasses import dataclass, fields
from typing import Tuple


@dataclass(frozen=True)
class EffectProfile:
    """Numeric effects one item has on the subject that uses it.

    A field equal to exactly ``0`` leaves the matching attribute untouched; it
    does not mean "set to zero".

    Attributes:
        instant_health:
            One-time delta to current health. The result is clamped to
            ``[0, max_health]``.
        health_over_time:
            Amount registered on the subject's health-over-time channel with a
            scale of 1. Tick/decay semantics belong to the subject.
        calories:
            Signed delta to the calories accumulator.
        hydration:
            Signed delta to the hydration accumulator.
        poison:
            Signed delta to the poison accumulator.
        radiation:
            Signed delta to the radiation accumulator.
    """

    instant_health: float = 0.0
    health_over_time: float = 0.0
    calories: float = 0.0
    hydration: float = 0.0
    poison: float = 0.0
    radiation: float = 0.0

    @property
    def is_noop(self) -> bool:
        return all(value == 0 for value in self.values())

    def values(self) -> Tuple[float, ...]:
        """Return field values in declaration order."""
        return tuple(getattr(self, name) for name in PROFILE_FIELDS)


PROFILE_FIELDS: Tuple[str, ...] = tuple(f.name for f in fields(EffectProfile))
