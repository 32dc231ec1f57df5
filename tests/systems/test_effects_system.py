import pytest

from better_healing.components import EffectProfile
from better_healing.systems.effects import effects_system
from better_healing.types import MetabolismAttribute
from tests.test_utils import make_player, snapshot


ACCUMULATOR_FIELDS = [
    ("calories", "calories"),
    ("hydration", "hydration"),
    ("poison", "poison"),
    ("radiation", "radiation_poison"),
]


def test_all_zero_profile_is_noop() -> None:
    player = make_player(health=40, calories=10, hydration=20, poison=3, radiation=7)
    before = snapshot(player)
    effects_system(player, EffectProfile())
    assert snapshot(player) == before
    for acc in player.metabolism.accumulators():
        assert acc.calls == []
    assert player.metabolism.changes == []


def test_instant_health_adds_within_bounds() -> None:
    player = make_player(health=50, max_health=100)
    effects_system(player, EffectProfile(instant_health=5))
    assert player.health == 55


def test_instant_health_clamps_at_max() -> None:
    player = make_player(health=98, max_health=100)
    effects_system(player, EffectProfile(instant_health=5))
    assert player.health == 100


def test_instant_health_clamps_at_zero() -> None:
    player = make_player(health=10, max_health=100)
    effects_system(player, EffectProfile(instant_health=-25))
    assert player.health == 0


@pytest.mark.parametrize(
    "h0, d, expected",
    [
        (50.0, 1e9, 100.0),
        (50.0, -1e9, 0.0),
        (0.0, 0.5, 0.5),
        (100.0, -0.5, 99.5),
        (100.0, 3.0, 100.0),
    ],
)
def test_instant_health_matches_clamp(h0: float, d: float, expected: float) -> None:
    player = make_player(health=h0, max_health=100)
    effects_system(player, EffectProfile(instant_health=d))
    assert player.health == expected


def test_instant_health_only_touches_health() -> None:
    player = make_player(health=50)
    effects_system(player, EffectProfile(instant_health=5))
    for acc in player.metabolism.accumulators():
        assert acc.calls == []
    assert player.metabolism.changes == []


@pytest.mark.parametrize("amount", [20.0, -7.5])
def test_health_over_time_forwarded_with_unit_scale(amount: float) -> None:
    player = make_player(health=50)
    effects_system(player, EffectProfile(health_over_time=amount))
    assert player.metabolism.changes == [
        (MetabolismAttribute.HEALTH_OVER_TIME, amount, 1.0)
    ]
    # regen is not instant
    assert player.health == 50


@pytest.mark.parametrize("field_name, accumulator", ACCUMULATOR_FIELDS)
def test_positive_value_adds(field_name: str, accumulator: str) -> None:
    player = make_player(calories=10, hydration=10, poison=10, radiation=10)
    effects_system(player, EffectProfile(**{field_name: 4.0}))
    acc = getattr(player.metabolism, accumulator)
    assert acc.calls == [("add", 4.0)]
    assert acc.value == 14.0


@pytest.mark.parametrize("field_name, accumulator", ACCUMULATOR_FIELDS)
def test_negative_value_subtracts_magnitude(field_name: str, accumulator: str) -> None:
    player = make_player(calories=10, hydration=10, poison=10, radiation=10)
    effects_system(player, EffectProfile(**{field_name: -4.0}))
    acc = getattr(player.metabolism, accumulator)
    assert acc.calls == [("subtract", 4.0)]
    assert acc.value == 6.0


@pytest.mark.parametrize("field_name, accumulator", ACCUMULATOR_FIELDS)
def test_accumulator_fields_are_independent(field_name: str, accumulator: str) -> None:
    player = make_player()
    effects_system(player, EffectProfile(**{field_name: 2.0}))
    for name, acc in zip(
        [a for _, a in ACCUMULATOR_FIELDS], player.metabolism.accumulators()
    ):
        if name == accumulator:
            assert len(acc.calls) == 1
        else:
            assert acc.calls == []


def test_full_profile_applies_every_field() -> None:
    player = make_player(
        health=50, calories=100, hydration=100, poison=20, radiation=30
    )
    profile = EffectProfile(
        instant_health=15,
        health_over_time=20,
        calories=-10,
        hydration=5,
        poison=-5,
        radiation=-10,
    )
    effects_system(player, profile)
    m = player.metabolism
    assert player.health == 65
    assert m.changes == [(MetabolismAttribute.HEALTH_OVER_TIME, 20, 1.0)]
    assert m.calories.value == 90
    assert m.hydration.value == 105
    assert m.poison.value == 15
    assert m.radiation_poison.value == 20


def test_profile_is_not_modified() -> None:
    profile = EffectProfile(instant_health=5, poison=-2)
    effects_system(make_player(), profile)
    assert profile == EffectProfile(instant_health=5, poison=-2)


def test_bandage_scenario() -> None:
    player = make_player(health=50, max_health=100, poison=10)
    effects_system(player, EffectProfile(instant_health=5, poison=-2))
    m = player.metabolism
    assert player.health == 55
    assert m.poison.value == 8
    assert m.calories.calls == []
    assert m.hydration.calls == []
    assert m.radiation_poison.calls == []
    assert m.changes == []
