"""Plain-text query reports rendered from Jinja2 templates."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

from . import text
from .query import QueryResult, render_attack, render_processes
from .render import INDENT
from .trace import BREAK_POINT, TraceLevel

TEMPLATE_DIR = Path(__file__).parent / "templates"

_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(TEMPLATE_DIR),
    autoescape=False,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render(template_name: str, **kwargs: Any) -> str:
    return _env.get_template(template_name).render(**kwargs)


def render_report(
    query: QueryResult,
    level: TraceLevel = TraceLevel.IO,
    *,
    indent: str = INDENT,
) -> str:
    """Render a full report of one query: verdict, processes and attack trace."""
    # Processes before the trace so aliases match `render_processes`
    processes = render_processes(query, indent=indent)
    attack = render_attack(query, level)
    steps = [s for s in attack.split(BREAK_POINT) if s] if attack is not None else []
    return render(
        "query_report.txt.j2",
        query=query,
        query_type=text.query_type_label(query.type),
        status=text.status_label(query.status),
        semantics_help=text.SEMANTICS_HELP.get(query.semantics),
        verdict=query.verdict(),
        processes=processes,
        attack_steps=steps,
        trace_level=level.value,
    )
