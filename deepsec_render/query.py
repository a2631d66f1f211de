"""Query results as written by the verification engine.

A result file describes one query: the processes under comparison, the
atomic data they reference and, when the processes could be distinguished,
an attack trace from one of them. The processes and the trace all render
against one shared ``AtomicRenamer`` so an id keeps the same display name
across every listing of the query.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from . import text
from .nodes import Action, AtomicEntry, AtomId, Process
from .render import DEFAULT_MAX_NESTING, INDENT, format_process
from .renamer import AtomicRenamer
from .result import Err, Ok, Result
from .serialization import atomic_table_from_json, process_from_json, trace_from_json
from .trace import TraceLevel, format_trace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttackTrace:
    """The distinguishing trace and the (1-based) process it runs in."""

    id_proc: int
    actions: tuple[Action, ...]


@dataclass(frozen=True)
class QueryResult:
    status: str
    type: str
    semantics: str
    atomic_data: Mapping[AtomId, AtomicEntry]
    processes: tuple[Process, ...]
    batch_file: str | None = None
    run_file: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    error_msg: str | None = None
    attack_trace: AttackTrace | None = None
    renamer: AtomicRenamer = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "renamer", AtomicRenamer(self.atomic_data))

    @property
    def has_attack(self) -> bool:
        return self.attack_trace is not None

    @property
    def attacked_process(self) -> int | None:
        return self.attack_trace.id_proc if self.attack_trace else None

    @property
    def other_process(self) -> int | None:
        if self.attack_trace is None:
            return None
        return 2 if self.attack_trace.id_proc == 1 else 1

    @property
    def duration(self) -> float | None:
        if self.start_time is None or self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    def verdict(self) -> text.Verdict | None:
        """Short and long verdict text, or ``None`` while not completed."""
        if self.status != "completed":
            return None
        if self.attack_trace is None:
            return text.NO_ATTACK.get(self.type)
        template = text.ATTACK.get(self.type)
        if template is None:
            return None
        attacked, other = self.attacked_process, self.other_process
        assert attacked is not None and other is not None
        return text.Verdict(
            short=template.short,
            long=text.fill_processes(template.long, attacked, other),
        )


def _timestamp(value: float | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromtimestamp(value)


def query_from_json(d: Mapping[str, Any]) -> QueryResult:
    attack = d.get("attack_trace")
    attack_trace = None
    if attack:
        attack_trace = AttackTrace(
            id_proc=attack["id_proc"],
            actions=trace_from_json(attack["action_sequence"]),
        )
    return QueryResult(
        status=d["status"],
        type=d["type"],
        semantics=d["semantics"],
        atomic_data=atomic_table_from_json(d["atomic_data"]["data"]),
        processes=tuple(process_from_json(p) for p in d["processes"]),
        batch_file=d.get("batch_file"),
        run_file=d.get("run_file"),
        start_time=_timestamp(d.get("start_time")),
        end_time=_timestamp(d.get("end_time")),
        error_msg=d.get("error_msg") or None,
        attack_trace=attack_trace,
    )


def load_query(path: str | Path) -> Result[QueryResult, Exception]:
    """Read and parse a query result file."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        return Err(e)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        return Err(e)
    try:
        query = query_from_json(data)
    except (KeyError, TypeError, ValueError) as e:
        logger.error("Malformed query result %s: %r", path, e)
        return Err(ValueError(f"Malformed query result {path}: missing or invalid field {e}"))
    logger.debug("Loaded query %s (%s, %d processes)", path, query.type, len(query.processes))
    return Ok(query)


def render_processes(
    query: QueryResult,
    *,
    indent: str = INDENT,
    max_nesting: int = DEFAULT_MAX_NESTING,
) -> list[str]:
    """Render every process of the query with the query's shared renamer."""
    return [
        format_process(p, query.renamer, indent=indent, max_nesting=max_nesting)
        for p in query.processes
    ]


def render_attack(query: QueryResult, level: TraceLevel = TraceLevel.IO) -> str | None:
    """Linearize the attack trace, or ``None`` when there is none."""
    if query.attack_trace is None:
        return None
    return format_trace(query.attack_trace.actions, query.renamer, level)
