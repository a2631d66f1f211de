"""JSON deserialization for engine-produced processes and traces.

Every node is a dict with a "type" discriminator naming its kind. Parsing is
lenient about kinds: an unrecognized discriminator becomes an ``Unknown``
node instead of an error, so that output from newer engine versions can
still be displayed. Missing mandatory fields raise ``KeyError``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from .nodes import (
    Action,
    AtomicEntry,
    AtomId,
    Atomic,
    Attacker,
    Axiom,
    Bang,
    Equality,
    Function,
    IfThenElse,
    Input,
    LetInElse,
    New,
    Output,
    Par,
    Process,
    Recipe,
    SymbolCategory,
    Term,
    Unknown,
)


def _kind(d: Mapping[str, Any]) -> str | None:
    return d.get("type")


# ---------------------------------------------------------------------------
# Terms
# ---------------------------------------------------------------------------


def term_from_json(d: Mapping[str, Any]) -> Term:
    t = _kind(d)
    if t == "Atomic":
        return Atomic(id=d["id"])
    elif t == "Function":
        args = tuple(term_from_json(a) for a in d.get("args", ()))
        return Function(symbol=d["symbol"], args=args)
    elif t == "Equality":
        return Equality(term=term_from_json(d["term"]))
    elif t == "Axiom":
        return Axiom(id=d["id"])
    elif t == "Attacker":
        return Attacker(label=d["label"])
    return Unknown(kind=str(t), data=dict(d))


def recipe_from_json(d: Mapping[str, Any]) -> Recipe:
    # Recipes share the term grammar
    return term_from_json(d)


# ---------------------------------------------------------------------------
# Processes
# ---------------------------------------------------------------------------


def _optional_process(d: Mapping[str, Any], key: str) -> Process | None:
    value = d.get(key)
    if value is None:
        return None
    return process_from_json(value)


def process_from_json(d: Mapping[str, Any] | None) -> Process:
    if d is None:
        return None
    t = _kind(d)
    if t is None:
        return None
    elif t == "New":
        return New(name=d["name"], process=_optional_process(d, "process"))
    elif t == "LetInElse":
        return LetInElse(
            pattern=term_from_json(d["pattern"]),
            term=term_from_json(d["term"]),
            process_then=_optional_process(d, "process_then"),
            process_else=_optional_process(d, "process_else"),
        )
    elif t == "Output":
        return Output(
            channel=term_from_json(d["channel"]),
            term=term_from_json(d["term"]),
            process=_optional_process(d, "process"),
        )
    elif t == "Input":
        return Input(
            channel=term_from_json(d["channel"]),
            pattern=term_from_json(d["pattern"]),
            process=_optional_process(d, "process"),
        )
    elif t == "IfThenElse":
        return IfThenElse(
            term1=term_from_json(d["term1"]),
            term2=term_from_json(d["term2"]),
            process_then=_optional_process(d, "process_then"),
            process_else=_optional_process(d, "process_else"),
        )
    elif t == "Par":
        return Par(
            process_list=tuple(process_from_json(p) for p in d["process_list"])
        )
    elif t == "Bang":
        return Bang(
            multiplicity=d["multiplicity"],
            process=_optional_process(d, "process"),
        )
    return Unknown(kind=str(t), data=dict(d))


# ---------------------------------------------------------------------------
# Atomic data
# ---------------------------------------------------------------------------


def atomic_entry_from_json(d: Mapping[str, Any], default_id: AtomId) -> AtomicEntry:
    category = None
    raw_category = d.get("category")
    if isinstance(raw_category, Mapping):
        # The engine spells the discriminator "type"; older dumps used "kind"
        value = raw_category.get("kind", raw_category.get("type"))
        if value is not None:
            category = SymbolCategory.parse(value)
    return AtomicEntry(
        id=d.get("id", default_id),
        label=d["label"],
        kind=d.get("type"),
        category=category,
    )


def atomic_table_from_json(
    data: Sequence[Mapping[str, Any]] | Mapping[Any, Mapping[str, Any]],
) -> dict[AtomId, AtomicEntry]:
    """Index the engine's atomic data by id.

    Accepts either a list of entries (positions stand in for missing ids) or
    a mapping from id to entry. JSON object keys are strings, so numeric keys
    are converted back to ints.
    """
    if isinstance(data, Mapping):
        pairs = [(_coerce_id(k), v) for k, v in data.items()]
    else:
        pairs = list(enumerate(data))
    table: dict[AtomId, AtomicEntry] = {}
    for position, raw in pairs:
        entry = atomic_entry_from_json(raw, default_id=position)
        table[entry.id] = entry
    return table


def _coerce_id(key: Any) -> Any:
    if isinstance(key, str) and key.lstrip("-").isdigit():
        return int(key)
    return key


# ---------------------------------------------------------------------------
# Attack traces
# ---------------------------------------------------------------------------


def action_from_json(d: Mapping[str, Any]) -> Action:
    channel = d.get("channel")
    term = d.get("term")
    return Action(
        type=str(d["type"]),
        channel=recipe_from_json(channel) if channel is not None else None,
        term=recipe_from_json(term) if term is not None else None,
    )


def trace_from_json(actions: Sequence[Mapping[str, Any]]) -> tuple[Action, ...]:
    return tuple(action_from_json(a) for a in actions)


# ---------------------------------------------------------------------------
# Convenience: load from JSON strings
# ---------------------------------------------------------------------------


def loads_process(s: str) -> Process:
    return process_from_json(json.loads(s))


def loads_trace(s: str) -> tuple[Action, ...]:
    return trace_from_json(json.loads(s))
