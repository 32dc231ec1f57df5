"""Exception types raised by table construction and configuration loading."""


class BetterHealingError(ValueError):
    """Base class for invalid input detected by this package."""


class ConfigInvalid(BetterHealingError):
    """Raised when a configuration source is structurally malformed.

    Table lookups never raise this; an unknown item is a normal ``None``
    result.
    """
