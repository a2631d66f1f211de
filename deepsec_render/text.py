"""Display text for query results.

Verdict messages use ``%p`` for the attacked process number and ``%q`` for
the other one.
"""

from __future__ import annotations

from dataclasses import dataclass

STATUS: dict[str, str] = {
    "waiting": "waiting",
    "in_progress": "in progress",
    "completed": "completed",
    "internal_error": "stopped by internal error",
    "canceled": "canceled",
}

QUERY_TYPE: dict[str, str] = {
    "trace_equiv": "Trace equivalence",
    "trace_incl": "Trace inclusion",
    "observational_equiv": "Observational equivalence",
    "session_equiv": "Session equivalence",
    "session_incl": "Session inclusion",
}

QUERY_TYPE_HELP: dict[str, str] = {
    "trace_equiv": "Trace equivalence between processes 1 and 2.",
    "trace_incl": "Trace inclusion of process 1 into process 2.",
    "observational_equiv": "Observational equivalence between processes 1 and 2.",
    "session_equiv": "Session equivalence between processes 1 and 2.",
    "session_incl": "Session inclusion of process 1 into process 2.",
}

SEMANTICS_HELP: dict[str, str] = {
    "private": "Internal communication only allowed on private channels.",
    "classic": "Internal communications allowed on all channels.",
    "eavesdrop": (
        "Internal communication only allowed on private channels and "
        "the attacker is allowed to eavesdrop on public channels."
    ),
}

TRACE_LEVEL_HELP: dict[str, str] = {
    "default": (
        "Only display input/output/choice/replication/internal communication "
        "transitions. Other tau transitions are hidden."
    ),
    "io": "Only display input/output transitions. Tau transitions are hidden.",
    "all": "Display all transitions.",
}

RECIPES_HELP = (
    "Public names created by the attacker start with '#', e.g. '#n'. "
    "Reference to the i-th term of the frame is written 'ax_i'. "
    "The i-th projection of a j-tuple is written 'proj_{i,j}'."
)


@dataclass(frozen=True)
class Verdict:
    short: str
    long: str


ATTACK: dict[str, Verdict] = {
    "trace_equiv": Verdict(
        short="Not trace equivalent",
        long=(
            "The processes are not trace equivalent. The following trace from "
            "process %p doesn't have an equivalent in process %q."
        ),
    ),
    "trace_incl": Verdict(
        short="Not trace included",
        long=(
            "The process %p is not trace included in %q. The following trace from "
            "process %p doesn't have an equivalent in process %q."
        ),
    ),
    "observational_equiv": Verdict(
        short="Not observationally equivalent",
        long=(
            "The processes are not observationally equivalent. The following trace "
            "from process %p cannot be matched by process %q."
        ),
    ),
    "session_equiv": Verdict(
        short="Not session equivalent",
        long=(
            "The processes are not session equivalent. The following trace from "
            "process %p doesn't have an equivalent in process %q."
        ),
    ),
    "session_incl": Verdict(
        short="Not session included",
        long=(
            "The process %p is not session included in %q. The following trace from "
            "process %p doesn't have an equivalent in process %q."
        ),
    ),
}

NO_ATTACK: dict[str, Verdict] = {
    "trace_equiv": Verdict(
        short="Trace equivalent",
        long="The processes are trace equivalent. No attack trace found.",
    ),
    "trace_incl": Verdict(
        short="Trace included",
        long="The process 1 is trace included in process 2.",
    ),
    "observational_equiv": Verdict(
        short="Observationally equivalent",
        long="The processes are observationally equivalent. No attack trace found.",
    ),
    "session_equiv": Verdict(
        short="Session equivalent",
        long="The processes are session equivalent. No attack trace found.",
    ),
    "session_incl": Verdict(
        short="Session included",
        long="The process 1 is session included in process 2.",
    ),
}


def fill_processes(message: str, attacked: int, other: int) -> str:
    """Substitute ``%p`` and ``%q`` in a verdict message."""
    return message.replace("%p", str(attacked)).replace("%q", str(other))


def status_label(status: str) -> str:
    return STATUS.get(status, status)


def query_type_label(query_type: str) -> str:
    return QUERY_TYPE.get(query_type, query_type)
