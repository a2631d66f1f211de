"""AST nodes for processes of the applied pi-calculus and attack traces.

The verification engine emits every node as a JSON object with a ``type``
discriminator. Nodes fall into two categories:

  - Terms: inline expressions (names, function applications, patterns,
    axiom references, attacker constants)
  - Processes: statements (restriction, let, conditional, input, output,
    parallel composition, replication)

Termination (the nil process ``0``) is the absence of a node: ``None``.

Kinds this module does not know are kept as ``Unknown`` so renderers can
degrade instead of failing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

AtomId = int

# ---------------------------------------------------------------------------
# Terms
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Atomic:
    """Reference to a name or variable of the atomic-data table.

    Example: k  — Atomic(4)
    """

    id: AtomId


@dataclass(frozen=True)
class Function:
    """Application of a function symbol (or tuple constructor) to arguments.

    Example: senc(m, k)  — Function(7, (Atomic(2), Atomic(4)))
    Example: (a, b)      — Function(1, (Atomic(5), Atomic(6)))  [Tuple symbol]
    """

    symbol: AtomId
    args: tuple[Term, ...] = ()


@dataclass(frozen=True)
class Equality:
    """Equality pattern: matches only a value equal to ``term``.

    Example: =k
    """

    term: Term


@dataclass(frozen=True)
class Axiom:
    """Reference to the n-th message learnt by the attacker: ax_n."""

    id: int


@dataclass(frozen=True)
class Attacker:
    """A public name forged by the attacker, e.g. ``#n``."""

    label: str


# ---------------------------------------------------------------------------
# Processes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class New:
    """Restriction: new k; P"""

    name: AtomId
    process: Process = None


@dataclass(frozen=True)
class LetInElse:
    """let pattern = term in P [else Q]"""

    pattern: Term
    term: Term
    process_then: Process = None
    process_else: Process | None = None


@dataclass(frozen=True)
class Output:
    """out(c, t)[; P]"""

    channel: Term
    term: Term
    process: Process | None = None


@dataclass(frozen=True)
class Input:
    """in(c, x)[; P]"""

    channel: Term
    pattern: Term
    process: Process | None = None


@dataclass(frozen=True)
class IfThenElse:
    """if t1 = t2 then P [else Q]"""

    term1: Term
    term2: Term
    process_then: Process = None
    process_else: Process | None = None


@dataclass(frozen=True)
class Par:
    """Parallel composition: ( P1 )|( P2 )|...|( Pn )"""

    process_list: tuple[Process, ...]


@dataclass(frozen=True)
class Bang:
    """Replication of ``multiplicity`` copies: !^n P"""

    multiplicity: int
    process: Process = None


@dataclass(frozen=True)
class Unknown:
    """A node whose kind is not (yet) known to this package.

    ``data`` keeps the raw JSON object for diagnostics.
    """

    kind: str
    data: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


# Union of all term forms
Term = Atomic | Function | Equality | Axiom | Attacker | Unknown

# Union of all statement forms
Statement = New | LetInElse | Output | Input | IfThenElse | Par | Bang

# A process is a statement, an unknown node, or termination
Process = Statement | Unknown | None

# Recipes are the attacker-side terms appearing in attack traces
Recipe = Axiom | Function | Attacker | Atomic | Unknown


# ---------------------------------------------------------------------------
# Atomic data
# ---------------------------------------------------------------------------


class SymbolCategory(Enum):
    TUPLE = "Tuple"
    FUNCTION = "Function"

    @classmethod
    def parse(cls, value: str) -> SymbolCategory:
        """Engine categories other than ``Tuple`` all print as applications."""
        return cls.TUPLE if value == cls.TUPLE.value else cls.FUNCTION


@dataclass(frozen=True)
class AtomicEntry:
    """One row of the atomic-data table.

    Names and variables have no category; function symbols do.
    """

    id: AtomId
    label: str
    kind: str | None = None
    category: SymbolCategory | None = None

    @property
    def is_symbol(self) -> bool:
        return self.category is not None


# ---------------------------------------------------------------------------
# Attack traces
# ---------------------------------------------------------------------------


class ActionType(Enum):
    INPUT = "input"
    OUTPUT = "output"
    EAVESDROP = "eavesdrop"
    COMM = "comm"
    CHOICE = "choice"
    BANG = "bang"
    TAU = "tau"


@dataclass(frozen=True)
class Action:
    """One transition of an attack trace.

    ``type`` is kept as the engine's raw string so unknown transition kinds
    survive parsing; compare against ``ActionType`` values.
    """

    type: str
    channel: Recipe | None = None
    term: Recipe | None = None
