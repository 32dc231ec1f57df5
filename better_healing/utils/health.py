"""Health helpers."""


def clamp(value: float, lower: float, upper: float) -> float:
    """Return ``value`` limited to the closed range ``[lower, upper]``."""
    return max(lower, min(value, upper))


def heal(health: float, max_health: float, amount: float) -> float:
    """Return ``health + amount`` clamped to ``[0, max_health]``.

    ``amount`` may be negative; the result never drops below zero.
    """
    return clamp(health + amount, 0.0, max_health)
