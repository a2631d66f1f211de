"""Display names for the engine's opaque atomic identifiers.

The engine refers to names, variables and symbols by integer ids; labels in
the atomic-data table are not unique (every replicated ``new k`` carries the
label ``k``). The renamer hands out a short alias per id, lazily and in
first-reference order:

  - the label itself when no other id holds it yet
  - otherwise ``label_n`` with the smallest free n >= 1

Within one renamer an id always keeps its alias and two ids never share one.
Rendering several trees with the same renamer therefore keeps names
consistent across them, e.g. process 1 and process 2 of an equivalence query.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from .errors import AtomicDataError
from .nodes import AtomicEntry, AtomId
from .serialization import atomic_table_from_json

logger = logging.getLogger(__name__)

AtomicData = Mapping[AtomId, AtomicEntry] | Sequence[Mapping[str, Any]] | Mapping[Any, Mapping[str, Any]]


def _as_table(data: AtomicData) -> dict[AtomId, AtomicEntry]:
    if isinstance(data, Mapping):
        if all(isinstance(v, AtomicEntry) for v in data.values()):
            return dict(data)  # type: ignore[arg-type]
        return atomic_table_from_json(data)  # type: ignore[arg-type]
    if all(isinstance(v, AtomicEntry) for v in data):
        return {e.id: e for e in data}  # type: ignore[union-attr]
    return atomic_table_from_json(data)


class AtomicRenamer:
    """Renaming table over one atomic-data table."""

    def __init__(self, atomic_data: AtomicData) -> None:
        self._entries = _as_table(atomic_data)
        self._aliases: dict[AtomId, str] = {}
        self._taken: set[str] = set()

    @classmethod
    def wrap(cls, source: AtomicRenamer | AtomicData) -> AtomicRenamer:
        """Reuse ``source`` if it already is a renamer, else wrap it in a new one.

        Passing the same renamer to several render calls is how callers opt
        into shared naming.
        """
        if isinstance(source, AtomicRenamer):
            return source
        return cls(source)

    def get(self, atom_id: AtomId) -> AtomicEntry:
        """Raw atomic-data entry for ``atom_id``; never creates an alias."""
        try:
            return self._entries[atom_id]
        except KeyError:
            raise AtomicDataError(atom_id) from None

    def get_and_rename(self, atom_id: AtomId) -> str:
        """Alias for ``atom_id``, assigning a fresh one on first reference."""
        alias = self._aliases.get(atom_id)
        if alias is not None:
            return alias
        alias = self._fresh_alias(self.get(atom_id).label)
        self._aliases[atom_id] = alias
        self._taken.add(alias)
        logger.debug("Renamed atomic %r to %r", atom_id, alias)
        return alias

    def _fresh_alias(self, label: str) -> str:
        if label not in self._taken:
            return label
        n = 1
        while f"{label}_{n}" in self._taken:
            n += 1
        return f"{label}_{n}"

    @property
    def aliases(self) -> Mapping[AtomId, str]:
        return MappingProxyType(self._aliases)

    def __contains__(self, atom_id: object) -> bool:
        return atom_id in self._entries

    def __len__(self) -> int:
        return len(self._aliases)

    def __repr__(self) -> str:
        return f"AtomicRenamer(entries={len(self._entries)}, aliases={len(self._aliases)})"
