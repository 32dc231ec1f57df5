"""Structural types for the subject an effect profile is applied to.

The subject (typically a player) and its metabolism are owned by the host
game. The applicator only needs the small surface below, so anything that
quacks like it can be passed in; tests use a recording in-memory double.
"""

from typing import Protocol

from better_healing.types import MetabolismAttribute


class Accumulator(Protocol):
    """Signed running total mutated through add / subtract calls."""

    def add(self, amount: float) -> None: ...

    def subtract(self, amount: float) -> None: ...


class Metabolism(Protocol):
    """Accumulators plus the time-based health regeneration channel."""

    calories: Accumulator
    hydration: Accumulator
    poison: Accumulator
    radiation_poison: Accumulator

    def apply_change(
        self, attribute: MetabolismAttribute, amount: float, scale: float
    ) -> None: ...


class Subject(Protocol):
    """Entity whose health and metabolism an effect profile modifies."""

    health: float
    metabolism: Metabolism

    def max_health(self) -> float: ...
