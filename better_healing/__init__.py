"""better_healing
==================

Configuration-driven effects for consumable and medical items.

An item identifier is resolved to an :class:`EffectProfile` through an
immutable :class:`EffectProfileTable`; the profile's non-zero fields are then
applied to a host-owned subject (health plus metabolism accumulators).

    from better_healing import EffectEngine, load_config

    engine = EffectEngine.from_config(load_config("config/BetterHealing.json"))
    engine.use_item("bandage", player)
"""

from better_healing.components import EffectProfile
from better_healing.config import (
    Configuration,
    ConsumableAttributes,
    default_config,
    load_config,
    save_config,
)
from better_healing.engine import EffectEngine
from better_healing.errors import BetterHealingError, ConfigInvalid
from better_healing.systems.effects import effects_system
from better_healing.table import EffectProfileTable, load

__all__ = [
    "BetterHealingError",
    "ConfigInvalid",
    "Configuration",
    "ConsumableAttributes",
    "EffectEngine",
    "EffectProfile",
    "EffectProfileTable",
    "default_config",
    "effects_system",
    "load",
    "load_config",
    "save_config",
]
