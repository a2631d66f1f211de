"""Linearize an attack trace into one line of text.

Each shown action becomes one ``...;`` segment followed by a zero-width
space, so display layers can wrap between actions without a visible
delimiter and copied text stays intact.

Every ``output`` and ``eavesdrop`` hands the attacker a new message, named
``ax_1``, ``ax_2``, ... in trace order. Inputs consume no axiom number.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from .nodes import Action, ActionType, Attacker, Axiom, Function, Recipe
from .render import ProcessFormatter, kind_name, not_implemented
from .renamer import AtomicData, AtomicRenamer

logger = logging.getLogger(__name__)

BREAK_POINT = "\u200b"  # zero-width space


class TraceLevel(Enum):
    """How much of the trace to show.

    IO:      input/output transitions only (eavesdrop counts as output)
    DEFAULT: additionally choice, replication and internal communication
    ALL:     every transition, including tau
    """

    IO = "io"
    DEFAULT = "default"
    ALL = "all"

    def shows(self, action_type: str) -> bool:
        if self is TraceLevel.ALL:
            return True
        return action_type in _VISIBLE[self]


_OBSERVABLE = frozenset(
    {ActionType.INPUT.value, ActionType.OUTPUT.value, ActionType.EAVESDROP.value}
)

_VISIBLE: dict[TraceLevel, frozenset[str]] = {
    TraceLevel.IO: _OBSERVABLE,
    TraceLevel.DEFAULT: _OBSERVABLE
    | {ActionType.COMM.value, ActionType.CHOICE.value, ActionType.BANG.value},
}


def format_recipe(recipe: Recipe, atomic: AtomicRenamer) -> str:
    """Render a recipe (axiom, function application or attacker name)."""
    match recipe:
        case Axiom(id=axiom_id):
            return f"ax_{axiom_id}"
        case Function() | Attacker():
            return ProcessFormatter(atomic).term(recipe)
        case _:
            kind = kind_name(recipe)
            logger.error("Cannot render unknown recipe type %s", kind)
            return not_implemented(kind)


def _recipe_or_missing(recipe: Recipe | None, atomic: AtomicRenamer, action: Action) -> str:
    if recipe is None:
        logger.error("Action %s has no recipe where one is required", action.type)
        return not_implemented("None")
    return format_recipe(recipe, atomic)


def format_trace(
    actions: Iterable[Action],
    atomic_data: AtomicRenamer | AtomicData,
    level: TraceLevel = TraceLevel.IO,
) -> str:
    """Format the visible actions of an attack trace as a single string."""
    atomic = AtomicRenamer.wrap(atomic_data)

    axiom_id = 1
    parts: list[str] = []

    for action in actions:
        if not level.shows(action.type):
            continue
        match action.type:
            case "input":
                parts.append(
                    f"in({_recipe_or_missing(action.channel, atomic, action)},"
                    f"{_recipe_or_missing(action.term, atomic, action)});"
                )
            case "output":
                parts.append(f"out({_recipe_or_missing(action.channel, atomic, action)},ax_{axiom_id});")
                axiom_id += 1
            case "eavesdrop":
                parts.append(
                    f"eavesdrop({_recipe_or_missing(action.channel, atomic, action)},ax_{axiom_id});"
                )
                axiom_id += 1
            case other:
                parts.append(f"{other};")

    logger.debug("Formatted trace with %d shown actions, %d axioms", len(parts), axiom_id - 1)
    return "".join(p + BREAK_POINT for p in parts)
