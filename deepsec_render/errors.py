"""Exceptions raised while rendering processes and traces.

Unknown node kinds are never raised: the renderers log them and emit a
sentinel. What does raise is a broken contract with the caller, such as an
identifier the atomic-data table knows nothing about.
"""

from __future__ import annotations


class RenderError(Exception):
    """Base class for rendering failures."""


class AtomicDataError(RenderError, LookupError):
    """An atomic id is missing from the table, or its entry is inconsistent."""

    def __init__(self, atom_id: object, reason: str = "not in atomic data") -> None:
        super().__init__(f"Atomic id {atom_id!r}: {reason}")
        self.atom_id = atom_id
        self.reason = reason


class NestingTooDeepError(RenderError):
    """The tree nests deeper than the renderer is allowed to recurse."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Process tree nests deeper than {limit} nodes")
        self.limit = limit
