"""better_healing.components
=================================

Value objects shared by the table, the applicator and the configuration
layer. Components carry no behavior beyond their fields; transformation logic
lives in :mod:`better_healing.systems`.

Importing::

    from better_healing.components import EffectProfile

"""

from .effect_profile import EffectProfile, PROFILE_FIELDS

__all__ = [
    "EffectProfile",
    "PROFILE_FIELDS",
]
