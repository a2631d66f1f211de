"""Builder helpers for writing process trees by hand.

Trees normally come from the engine's JSON output; these helpers keep tests
and examples short.
"""

from deepsec_render.nodes import (
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
)


def name(atom_id: AtomId, label: str) -> AtomicEntry:
    return AtomicEntry(id=atom_id, label=label, kind="Name")


def variable(atom_id: AtomId, label: str) -> AtomicEntry:
    return AtomicEntry(id=atom_id, label=label, kind="Variable")


def symbol(atom_id: AtomId, label: str, tuple_: bool = False) -> AtomicEntry:
    category = SymbolCategory.TUPLE if tuple_ else SymbolCategory.FUNCTION
    return AtomicEntry(id=atom_id, label=label, kind="Symbol", category=category)


def atomic(atom_id: AtomId) -> Atomic:
    return Atomic(id=atom_id)


def fn(symbol_id: AtomId, *args: Term) -> Function:
    return Function(symbol=symbol_id, args=tuple(args))


def eq(term: Term) -> Equality:
    return Equality(term=term)


def ax(n: int) -> Axiom:
    return Axiom(id=n)


def attacker(label: str) -> Attacker:
    return Attacker(label=label)


def new(name_id: AtomId, process: Process = None) -> New:
    return New(name=name_id, process=process)


def out(channel: Term, term: Term, process: Process | None = None) -> Output:
    return Output(channel=channel, term=term, process=process)


def inp(channel: Term, pattern: Term, process: Process | None = None) -> Input:
    return Input(channel=channel, pattern=pattern, process=process)


def if_(
    term1: Term, term2: Term, then: Process = None, else_: Process | None = None
) -> IfThenElse:
    return IfThenElse(term1=term1, term2=term2, process_then=then, process_else=else_)


def let(
    pattern: Term, term: Term, then: Process = None, else_: Process | None = None
) -> LetInElse:
    return LetInElse(pattern=pattern, term=term, process_then=then, process_else=else_)


def par(*processes: Process) -> Par:
    return Par(process_list=tuple(processes))


def bang(multiplicity: int, process: Process = None) -> Bang:
    return Bang(multiplicity=multiplicity, process=process)


def action(
    type_: str, channel: Recipe | None = None, term: Recipe | None = None
) -> Action:
    return Action(type=type_, channel=channel, term=term)
