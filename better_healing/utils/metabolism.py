"""Accumulator manipulation helpers."""

from typing import Callable, Tuple

from better_healing.subject import Accumulator, Metabolism
from better_healing.types import MetabolismAttribute


AccumulatorGetter = Callable[[Metabolism], Accumulator]

# (profile field, channel, accessor) in application order.
ACCUMULATOR_FIELDS: Tuple[Tuple[str, MetabolismAttribute, AccumulatorGetter], ...] = (
    ("calories", MetabolismAttribute.CALORIES, lambda m: m.calories),
    ("hydration", MetabolismAttribute.HYDRATION, lambda m: m.hydration),
    ("poison", MetabolismAttribute.POISON, lambda m: m.poison),
    ("radiation", MetabolismAttribute.RADIATION, lambda m: m.radiation_poison),
)


def apply_delta(accumulator: Accumulator, delta: float) -> None:
    """Add a positive ``delta`` or subtract the magnitude of a negative one.

    A zero ``delta`` issues no call on the accumulator.
    """
    if delta > 0:
        accumulator.add(delta)
    elif delta < 0:
        accumulator.subtract(abs(delta))
