"""Immutable effect profile table.

The table maps an item identifier (exact, case-sensitive string) to its
:class:`EffectProfile`. It is built once from configuration and never mutated;
a reload builds a new table and swaps the reference (see
:mod:`better_healing.engine`).

Design notes:

* Profiles are stored in a **persistent map** (``pyrsistent.PMap``). Holding a
    reference to a table therefore pins a consistent snapshot.
* :func:`load` accepts either a mapping ``{item_id: profile}`` or an iterable
    of ``(item_id, profile)`` pairs. A profile may be an ``EffectProfile`` or a
    mapping of field name to number; omitted fields default to ``0``.
* Malformed input raises :class:`ConfigInvalid` instead of producing a
    partial or empty table.
"""

import math
from dataclasses import asdict, dataclass
from numbers import Real
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union, cast

from pyrsistent import pmap
from pyrsistent.typing import PMap

from better_healing.components import EffectProfile, PROFILE_FIELDS
from better_healing.errors import ConfigInvalid
from better_healing.types import ItemID


ProfileSource = Union[EffectProfile, Mapping[str, Any]]
TableSource = Union[
    Mapping[ItemID, ProfileSource], Iterable[Tuple[ItemID, ProfileSource]]
]


@dataclass(frozen=True)
class EffectProfileTable:
    """Read-only mapping from item identifier to effect profile.

    Attributes:
        profiles (PMap[ItemID, EffectProfile]): Backing persistent map.
    """

    profiles: PMap[ItemID, EffectProfile] = pmap()

    def lookup(self, item_id: ItemID) -> Optional[EffectProfile]:
        """Return the profile stored for ``item_id`` or ``None``."""
        return self.profiles.get(item_id)

    def item_ids(self) -> Tuple[ItemID, ...]:
        """Return stored identifiers sorted for stable iteration."""
        return tuple(sorted(self.profiles.keys()))

    def __contains__(self, item_id: object) -> bool:
        return item_id in self.profiles

    def __len__(self) -> int:
        return len(self.profiles)

    def __iter__(self) -> Iterator[ItemID]:
        return iter(self.item_ids())

    @property
    def description(self) -> PMap[ItemID, PMap[str, float]]:
        """Sparse serialization: each profile reduced to its non-zero fields."""
        return pmap(
            {
                item_id: pmap({k: v for k, v in asdict(profile).items() if v != 0})
                for item_id, profile in self.profiles.items()
            }
        )


def _require_item_id(item_id: object) -> ItemID:
    if not isinstance(item_id, str) or not item_id:
        raise ConfigInvalid(f"Item id must be a non-empty string, got {item_id!r}")
    return item_id


def _require_number(value: object, context: str) -> float:
    # bool is a Real subclass but never a meaningful effect amount
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConfigInvalid(f"{context} must be a number, got {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ConfigInvalid(f"{context} must be finite, got {value!r}")
    return number


def to_profile(item_id: ItemID, source: ProfileSource) -> EffectProfile:
    """Coerce a raw profile entry into an :class:`EffectProfile`."""
    if isinstance(source, EffectProfile):
        for name, value in zip(PROFILE_FIELDS, source.values()):
            _require_number(value, f"{item_id}.{name}")
        return source
    if not isinstance(source, Mapping):
        raise ConfigInvalid(f"Profile for {item_id!r} must be a mapping")

    unknown = set(source) - set(PROFILE_FIELDS)
    if unknown:
        raise ConfigInvalid(
            f"Profile for {item_id!r} has unknown fields: {sorted(map(str, unknown))}"
        )
    values: Dict[str, float] = {
        name: _require_number(value, f"{item_id}.{name}")
        for name, value in source.items()
    }
    return EffectProfile(**values)


def _iter_pairs(source: TableSource) -> Iterator[Tuple[object, object]]:
    if isinstance(source, Mapping):
        yield from source.items()
        return
    if isinstance(source, (str, bytes)) or not isinstance(source, Iterable):
        raise ConfigInvalid(
            f"Table source must be a mapping or (item_id, profile) pairs, "
            f"got {type(source).__name__}"
        )
    for entry in source:
        if not isinstance(entry, (tuple, list)) or len(entry) != 2:
            raise ConfigInvalid(
                f"Table entry must be an (item_id, profile) pair: {entry!r}"
            )
        yield entry[0], entry[1]


def load(source: TableSource) -> EffectProfileTable:
    """Build a table from ``source``.

    Raises:
        ConfigInvalid: If the source or any entry is malformed, or a pair list
            repeats an item id.
    """
    profiles: Dict[ItemID, EffectProfile] = {}
    for raw_id, raw_profile in _iter_pairs(source):
        item_id = _require_item_id(raw_id)
        if item_id in profiles:
            raise ConfigInvalid(f"Duplicate item id: {item_id!r}")
        profiles[item_id] = to_profile(
            item_id, cast(ProfileSource, raw_profile)
        )
    return EffectProfileTable(profiles=pmap(profiles))
