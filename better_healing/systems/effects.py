"""Effect application system.

Applies an :class:`EffectProfile` to a subject. Every field is handled on its
own and only when it is non-zero:

1. ``instant_health``: current health moves by the delta, clamped to
    ``[0, max_health]``.
2. ``health_over_time``: forwarded to the subject's regen channel with a
    scale of 1. The sign is passed through unchanged; a negative value is a
    drain handled by the subject.
3. ``calories`` / ``hydration`` / ``poison`` / ``radiation``: positive values
    are added to the matching accumulator, negative values subtract their
    magnitude.

The profile is read-only input. The system performs no validation of its own.
"""

import logging

from better_healing.components import EffectProfile
from better_healing.subject import Subject
from better_healing.types import MetabolismAttribute
from better_healing.utils.health import heal
from better_healing.utils.metabolism import ACCUMULATOR_FIELDS, apply_delta

logger = logging.getLogger(__name__)

HEALTH_OVER_TIME_SCALE = 1.0


def apply_instant_health(subject: Subject, amount: float) -> None:
    """Move ``subject.health`` by ``amount`` within ``[0, max_health]``."""
    if amount == 0:
        return
    before = subject.health
    subject.health = heal(before, subject.max_health(), amount)
    logger.debug("instant_health %+g: %g -> %g", amount, before, subject.health)


def apply_health_over_time(subject: Subject, amount: float) -> None:
    if amount == 0:
        return
    subject.metabolism.apply_change(
        MetabolismAttribute.HEALTH_OVER_TIME, amount, HEALTH_OVER_TIME_SCALE
    )
    logger.debug("health_over_time %+g", amount)


def apply_metabolism(subject: Subject, profile: EffectProfile) -> None:
    """Apply the four accumulator fields of ``profile``, skipping zeros."""
    metabolism = subject.metabolism
    for field_name, attribute, get_accumulator in ACCUMULATOR_FIELDS:
        delta: float = getattr(profile, field_name)
        if delta == 0:
            continue
        apply_delta(get_accumulator(metabolism), delta)
        logger.debug("%s %+g", attribute, delta)


def effects_system(subject: Subject, profile: EffectProfile) -> None:
    """Apply every non-zero field of ``profile`` to ``subject``.

    Arguments:
        subject:
            Host-owned entity; mutated in place through its own setters.
        profile:
            Effects to apply. Not modified.
    """
    apply_instant_health(subject, profile.instant_health)
    apply_health_over_time(subject, profile.health_over_time)
    apply_metabolism(subject, profile)
