"""Render process trees as indented, human-readable text.

Two mutually recursive renderers share one ``AtomicRenamer``:

  - terms render flat: no indentation, no line break, so they can be
    placed anywhere inline (channel, argument, pattern position)
  - statements own their indentation prefix and trailing line break, so
    sequencing is plain string concatenation

A conditional only indents its branches when it has an else branch; with a
then branch alone the continuation stays level with the ``if``/``let``.

Example (depth 0):

    new k;
    out(c,senc(m,k));
    in(c,x);
    0
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from .errors import AtomicDataError, NestingTooDeepError
from .nodes import (
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
    SymbolCategory,
    Term,
    Unknown,
)
from .renamer import AtomicData, AtomicRenamer

logger = logging.getLogger(__name__)

INDENT = "   "
# Each nesting level costs at most three interpreter frames
DEFAULT_MAX_NESTING = 250


def not_implemented(kind: str) -> str:
    """Placeholder text emitted for node kinds this renderer does not know."""
    return f"------------ not implemented : {kind} ------------"


def kind_name(node: object) -> str:
    if isinstance(node, Unknown):
        return node.kind
    return type(node).__name__


class ProcessFormatter:
    """Renders terms and processes against one renaming table."""

    def __init__(
        self,
        atomic: AtomicRenamer,
        indent: str = INDENT,
        max_nesting: int = DEFAULT_MAX_NESTING,
    ) -> None:
        self.atomic = atomic
        self.indent = indent
        self.max_nesting = max_nesting
        self._nesting = 0

    @contextmanager
    def _nested(self) -> Iterator[None]:
        if self._nesting >= self.max_nesting:
            raise NestingTooDeepError(self.max_nesting)
        self._nesting += 1
        try:
            yield
        finally:
            self._nesting -= 1

    def prefix(self, depth: int) -> str:
        return self.indent * depth

    # ------------------------------------------------------------------
    # Terms
    # ------------------------------------------------------------------

    def term(self, node: Term) -> str:
        with self._nested():
            match node:
                case Atomic(id=atom_id):
                    return self.atomic.get_and_rename(atom_id)
                case Function():
                    return self._function(node)
                case Equality(term=inner):
                    return "=" + self.term(inner)
                case Axiom(id=axiom_id):
                    return f"ax_{axiom_id}"
                case Attacker(label=label):
                    return label
                case _:
                    kind = kind_name(node)
                    logger.warning("Cannot render unknown term type %s", kind)
                    return not_implemented(kind)

    def _function(self, node: Function) -> str:
        symbol = self.atomic.get(node.symbol)
        if symbol.category is None:
            raise AtomicDataError(node.symbol, "applied as a function but has no symbol category")
        args = ",".join([self.term(a) for a in node.args])
        if symbol.category == SymbolCategory.TUPLE:
            return f"({args})"
        return f"{symbol.label}({args})"

    # ------------------------------------------------------------------
    # Processes
    # ------------------------------------------------------------------

    def process(self, node: Process, depth: int = 0) -> str:
        # Sequencing (new, !, in/out continuations, conditionals without an
        # else branch) stays at one depth and is walked iteratively; only
        # Par and two-branch conditionals recurse.
        with self._nested():
            line_prefix = self.prefix(depth)
            parts: list[str] = []
            while True:
                match node:
                    case None:
                        parts.append(line_prefix + "0\n")
                        break
                    case New(name=name, process=continuation):
                        parts.append(f"{line_prefix}new {self.atomic.get_and_rename(name)};\n")
                        node = continuation
                    case Bang(multiplicity=multiplicity, process=continuation):
                        parts.append(f"{line_prefix}!~{multiplicity}\n")
                        node = continuation
                    case Output() | Input():
                        parts.append(line_prefix + self._communication(node))
                        if node.process is None:
                            parts.append("\n")
                            break
                        parts.append(";\n")
                        node = node.process
                    case IfThenElse() | LetInElse():
                        parts.append(line_prefix + self._condition(node))
                        # No "else": the then branch continues at the same level
                        if node.process_else is None:
                            node = node.process_then
                            continue
                        parts.append(self._branches(node, depth))
                        break
                    case Par():
                        parts.append(line_prefix + self._par(node, depth))
                        break
                    case _:
                        kind = kind_name(node)
                        logger.error("Cannot render unknown process type %s", kind)
                        parts.append(line_prefix + not_implemented(kind) + "\n")
                        break
            return "".join(parts)

    def _communication(self, node: Output | Input) -> str:
        if isinstance(node, Output):
            return f"out({self.term(node.channel)},{self.term(node.term)})"
        return f"in({self.term(node.channel)},{self.term(node.pattern)})"

    def _condition(self, node: IfThenElse | LetInElse) -> str:
        if isinstance(node, IfThenElse):
            return f"if {self.term(node.term1)} = {self.term(node.term2)} then\n"
        return f"let {self.term(node.pattern)} = {self.term(node.term)} in \n"

    def _branches(self, node: IfThenElse | LetInElse, depth: int) -> str:
        return (
            self.process(node.process_then, depth + 1)
            + self.prefix(depth) + "else\n"
            + self.process(node.process_else, depth + 1)
        )

    def _par(self, node: Par, depth: int) -> str:
        blocks = [self.process(p, depth + 1) for p in node.process_list]
        separator = self.prefix(depth) + ")|(\n"
        return "(\n" + separator.join(blocks) + self.prefix(depth) + ")\n"


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def format_term(
    node: Term,
    atomic_data: AtomicRenamer | AtomicData,
    *,
    max_nesting: int = DEFAULT_MAX_NESTING,
) -> str:
    """Render one term as a flat string."""
    atomic = AtomicRenamer.wrap(atomic_data)
    return ProcessFormatter(atomic, max_nesting=max_nesting).term(node)


def format_process(
    process: Process,
    atomic_data: AtomicRenamer | AtomicData,
    *,
    depth: int = 0,
    indent: str = INDENT,
    max_nesting: int = DEFAULT_MAX_NESTING,
) -> str:
    """Render a process tree as indented multi-line text.

    ``atomic_data`` is either a raw atomic-data table, wrapped in a fresh
    renamer, or an ``AtomicRenamer`` whose aliases are reused and extended.
    Raises ``AtomicDataError`` when the tree references an id missing from
    the table.
    """
    atomic = AtomicRenamer.wrap(atomic_data)
    logger.debug("[Start] Rendering a process (atomic aliases so far: %d)", len(atomic))
    res = ProcessFormatter(atomic, indent=indent, max_nesting=max_nesting).process(process, depth)
    logger.debug("[Done] Rendering a process")
    return res
