"""Lookup-and-apply entry points used by the host integration layer.

:class:`EffectEngine` holds the current :class:`EffectProfileTable` behind a
single attribute. :meth:`EffectEngine.reload` swaps that attribute in one
assignment; since tables are immutable, a caller that already fetched a
snapshot keeps seeing exactly the entries it was built with.

Typical host usage::

    engine = EffectEngine.from_config(load_config(path))

    def on_item_consumed(item_id, player):
        if engine.use_item(item_id, player):
            ...  # handled, skip the game's default effects
"""

import logging
from typing import Optional

from better_healing.components import EffectProfile
from better_healing.config import Configuration, build_table
from better_healing.subject import Subject
from better_healing.systems.effects import effects_system
from better_healing.table import EffectProfileTable, TableSource, load
from better_healing.types import ItemID

logger = logging.getLogger(__name__)


class EffectEngine:
    """Resolves item identifiers and applies their effect profiles."""

    def __init__(self, table: Optional[EffectProfileTable] = None) -> None:
        self._table: EffectProfileTable = (
            table if table is not None else EffectProfileTable()
        )

    @classmethod
    def from_source(cls, source: TableSource) -> "EffectEngine":
        """Build an engine from a raw table source (see :func:`table.load`)."""
        return cls(load(source))

    @classmethod
    def from_config(cls, config: Configuration) -> "EffectEngine":
        return cls(build_table(config))

    @property
    def table(self) -> EffectProfileTable:
        """Current snapshot."""
        return self._table

    def reload(self, table: EffectProfileTable) -> None:
        """Replace the whole table with ``table``."""
        self._table = table
        logger.info("Effect table reloaded with %d items", len(table))

    def reload_from(self, config: Configuration) -> None:
        """Rebuild the table from ``config`` and swap it in.

        The current table is kept if ``config`` fails to convert.
        """
        self.reload(build_table(config))

    def resolve(self, item_id: ItemID) -> Optional[EffectProfile]:
        """Return the profile for ``item_id`` or ``None`` when none applies."""
        profile = self._table.lookup(item_id)
        if profile is None:
            logger.debug("No effect profile for %r", item_id)
        return profile

    def apply_effects(self, subject: Subject, profile: EffectProfile) -> None:
        effects_system(subject, profile)

    def use_item(self, item_id: ItemID, subject: Subject) -> bool:
        """Resolve ``item_id`` and apply its profile to ``subject``.

        Returns:
            bool: ``True`` if a profile was found and applied, ``False`` if the
            item has no entry (the subject is left untouched).
        """
        profile = self.resolve(item_id)
        if profile is None:
            return False
        self.apply_effects(subject, profile)
        return True
