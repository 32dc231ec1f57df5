"""Common type aliases and enumerations.

``ItemID`` keys the effect profile table; ``MetabolismAttribute`` names the
subject-side channels an :class:`better_healing.components.EffectProfile`
can touch.
"""

from enum import StrEnum, auto


ItemID = str


class MetabolismAttribute(StrEnum):
    """Metabolism channels exposed by a subject (reflected in debug logs)."""

    CALORIES = auto()
    HYDRATION = auto()
    POISON = auto()
    RADIATION = auto()
    HEALTH_OVER_TIME = auto()
