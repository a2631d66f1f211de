"""deepsec_render: readable text for verification-engine processes and attack traces."""

from .nodes import (
    Action,
    ActionType,
    AtomicEntry,
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
from .errors import AtomicDataError, NestingTooDeepError, RenderError
from .renamer import AtomicRenamer
from .render import ProcessFormatter, format_process, format_term
from .trace import BREAK_POINT, TraceLevel, format_recipe, format_trace
from .serialization import (
    action_from_json,
    atomic_table_from_json,
    loads_process,
    loads_trace,
    process_from_json,
    term_from_json,
    trace_from_json,
)
from .query import QueryResult, load_query, query_from_json, render_attack, render_processes
from .result import Ok, Err, Result

__all__ = [
    # Nodes
    "Action", "ActionType", "AtomicEntry", "Atomic", "Attacker", "Axiom",
    "Bang", "Equality", "Function", "IfThenElse", "Input", "LetInElse",
    "New", "Output", "Par", "Process", "Recipe", "SymbolCategory", "Term",
    "Unknown",
    # Errors
    "AtomicDataError", "NestingTooDeepError", "RenderError",
    # Rendering
    "AtomicRenamer", "ProcessFormatter", "format_process", "format_term",
    "BREAK_POINT", "TraceLevel", "format_recipe", "format_trace",
    # Serialization
    "action_from_json", "atomic_table_from_json", "loads_process",
    "loads_trace", "process_from_json", "term_from_json", "trace_from_json",
    # Queries
    "QueryResult", "load_query", "query_from_json", "render_attack",
    "render_processes",
    # Result
    "Ok", "Err", "Result",
]
