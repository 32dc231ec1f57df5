"""Configuration document, defaults and version upgrade.

The on-disk document is JSON of the form::

    {
      "Version": "1.1.0",
      "Items": {
        "bandage": {
          "Instant Health": 5.0,
          "Health Over Time": 0.0,
          "Calories": 0.0,
          "Hydration": 0.0,
          "Poison (positive = adds, negative = removes)": -2.0,
          "Radiation (positive = adds, negative = removes)": 0.0
        }
      }
    }

Omitted effect keys default to ``0``. Loading always upgrades the version
marker and writes the document back, so a hand-edited file gains any missing
keys after the first load.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from better_healing.components import EffectProfile
from better_healing.errors import ConfigInvalid
from better_healing.table import EffectProfileTable, load
from better_healing.types import ItemID

logger = logging.getLogger(__name__)

PLUGIN_VERSION = "1.1.0"
# Stored versions older than this are discarded in favour of the defaults.
MIN_COMPATIBLE_VERSION = "1.0.0"


class ConsumableAttributes(BaseModel):
    """Effects of one item as written in the configuration file."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
        frozen=True,
        strict=True,
        allow_inf_nan=False,
    )

    instant_health: float = Field(default=0.0, alias="Instant Health")
    health_over_time: float = Field(default=0.0, alias="Health Over Time")
    calories: float = Field(default=0.0, alias="Calories")
    hydration: float = Field(default=0.0, alias="Hydration")
    poison: float = Field(
        default=0.0, alias="Poison (positive = adds, negative = removes)"
    )
    radiation: float = Field(
        default=0.0, alias="Radiation (positive = adds, negative = removes)"
    )

    def to_profile(self) -> EffectProfile:
        return EffectProfile(**self.model_dump(by_alias=False))


class Configuration(BaseModel):
    """Full configuration document."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    version: str = Field(alias="Version")
    items: Dict[ItemID, ConsumableAttributes] = Field(
        default_factory=dict, alias="Items"
    )


def default_config() -> Configuration:
    """Return the stock item set shipped with the current version."""
    items = {
        "bandage": ConsumableAttributes(instant_health=5.0, poison=-2.0),
        "syringe.medical": ConsumableAttributes(
            instant_health=15.0, health_over_time=20.0, poison=-5.0, radiation=-10.0
        ),
        "largemedkit": ConsumableAttributes(health_over_time=100.0, poison=-10.0),
        "pumpkin": ConsumableAttributes(
            health_over_time=10.0, calories=100.0, hydration=30.0
        ),
        "corn": ConsumableAttributes(health_over_time=6.0, calories=75.0, hydration=10.0),
        "mushroom": ConsumableAttributes(instant_health=3.0, calories=15.0, hydration=5.0),
        "apple": ConsumableAttributes(instant_health=2.0, calories=30.0, hydration=15.0),
    }
    return Configuration(version=PLUGIN_VERSION, items=items)


def parse_version(version: str) -> Tuple[int, ...]:
    """Parse a dotted version string into a comparable tuple of ints.

    Raises:
        ConfigInvalid: If any component is not a non-negative integer.
    """
    try:
        parts = tuple(int(part) for part in version.strip().split("."))
    except ValueError as exc:
        raise ConfigInvalid(f"Invalid version marker: {version!r}") from exc
    if any(part < 0 for part in parts):
        raise ConfigInvalid(f"Invalid version marker: {version!r}")
    return parts


def upgrade_config(config: Configuration) -> Configuration:
    """Bring ``config`` up to :data:`PLUGIN_VERSION`.

    Documents older than :data:`MIN_COMPATIBLE_VERSION` are replaced by the
    defaults; newer ones keep their items. The version marker is always
    stamped with the current version. Documents already at or above the
    current version are returned unchanged.
    """
    stored = parse_version(config.version)
    if stored >= parse_version(PLUGIN_VERSION):
        return config

    logger.warning("Config changes detected! Updating...")
    upgraded = config
    if stored < parse_version(MIN_COMPATIBLE_VERSION):
        upgraded = default_config()
    logger.warning(
        "Config update complete! Updated from version %s to %s",
        config.version,
        PLUGIN_VERSION,
    )
    return upgraded.model_copy(update={"version": PLUGIN_VERSION})


def parse_config(raw: Any) -> Configuration:
    """Validate a decoded JSON document.

    Raises:
        ConfigInvalid: If the document does not match the schema.
    """
    try:
        config = Configuration.model_validate(raw)
    except ValidationError as exc:
        raise ConfigInvalid(f"Invalid configuration: {exc}") from exc
    parse_version(config.version)
    for item_id in config.items:
        if not item_id:
            raise ConfigInvalid("Item id must be a non-empty string")
    return config


def dump_config(config: Configuration) -> Dict[str, Any]:
    """Return the JSON-ready form of ``config`` using the file's key names."""
    return config.model_dump(by_alias=True)


def save_config(path: Union[str, Path], config: Configuration) -> None:
    """Write ``config`` to ``path`` as indented JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(dump_config(config), indent=2) + "\n", encoding="utf-8")


def read_config(path: Union[str, Path]) -> Configuration:
    """Read and validate the document at ``path`` without upgrading it.

    Raises:
        ConfigInvalid: If the file cannot be read or is not valid JSON or
            does not match the schema.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigInvalid(f"Unable to read configuration file: {path}") from exc
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigInvalid(f"Invalid JSON in {path}: {exc}") from exc
    return parse_config(raw)


def load_config(path: Union[str, Path]) -> Configuration:
    """Load, upgrade and persist the configuration at ``path``.

    A missing file is created from :func:`default_config`. Malformed files
    raise :class:`ConfigInvalid`; the caller decides whether to fall back to
    the defaults.
    """
    path = Path(path)
    if path.exists():
        config = upgrade_config(read_config(path))
    else:
        logger.warning("Creating a new configuration file at %s", path)
        config = default_config()
    save_config(path, config)
    return config


def build_table(config: Configuration) -> EffectProfileTable:
    """Convert the items of ``config`` into an :class:`EffectProfileTable`."""
    return load(
        (item_id, attributes.to_profile())
        for item_id, attributes in config.items.items()
    )
