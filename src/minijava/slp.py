"""Straight-line program model.

A tiny expression/statement language used to illustrate AST shapes. It
is independent of the lexer and parser: nothing in the front end builds
these nodes.

Node Hierarchy:
Exp
├── Id
├── Num
├── Op       (left OP right)
└── Eseq     (stm, exp)
ExpList
├── Pair     (exp, rest)
└── Last     (exp)
Stm
├── Compound (s1; s2)
├── Assign   (id := exp)
└── Print    (print(explist))

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class OpType(Enum):
    ADD = auto()
    SUB = auto()
    TIMES = auto()
    DIVIDE = auto()


# =============================================================================
# Expressions
# =============================================================================


@dataclass(frozen=True, slots=True)
class Id:
    name: str


@dataclass(frozen=True, slots=True)
class Num:
    value: int


@dataclass(frozen=True, slots=True)
class Op:
    """Binary operation."""

    op: OpType
    left: Exp
    right: Exp


@dataclass(frozen=True, slots=True)
class Eseq:
    """Run a statement for its effect, then evaluate an expression."""

    stm: Stm
    exp: Exp


Exp = Id | Num | Op | Eseq


# =============================================================================
# Expression lists
# =============================================================================


@dataclass(frozen=True, slots=True)
class Pair:
    exp: Exp
    rest: ExpList


@dataclass(frozen=True, slots=True)
class Last:
    exp: Exp


ExpList = Pair | Last


# =============================================================================
# Statements
# =============================================================================


@dataclass(frozen=True, slots=True)
class Compound:
    s1: Stm
    s2: Stm


@dataclass(frozen=True, slots=True)
class Assign:
    id: Id
    exp: Exp


@dataclass(frozen=True, slots=True)
class Print:
    explist: ExpList


Stm = Compound | Assign | Print


def exp_list_items(explist: ExpList) -> list[Exp]:
    """Flatten a Pair/Last chain into its expressions."""
    items: list[Exp] = []
    node: ExpList = explist
    while isinstance(node, Pair):
        items.append(node.exp)
        node = node.rest
    items.append(node.exp)
    return items


def max_args(stm: Stm) -> int:
    """Largest argument count of any ``print`` in the statement.

    Prints nested inside expressions (via Eseq) count too.
    """
    match stm:
        case Compound(s1, s2):
            return max(max_args(s1), max_args(s2))
        case Assign(_, exp):
            return _max_args_exp(exp)
        case Print(explist):
            items = exp_list_items(explist)
            return max(len(items), *(_max_args_exp(exp) for exp in items))
    raise TypeError(f"not a statement: {stm!r}")


def _max_args_exp(exp: Exp) -> int:
    match exp:
        case Op(_, left, right):
            return max(_max_args_exp(left), _max_args_exp(right))
        case Eseq(stm, inner):
            return max(max_args(stm), _max_args_exp(inner))
    return 0


# a := 5 + 3; b := (print(a, a - 1), 10 * a); print(b)
SAMPLE_PROGRAM: Stm = Compound(
    Assign(Id("a"), Op(OpType.ADD, Num(5), Num(3))),
    Compound(
        Assign(
            Id("b"),
            Eseq(
                Print(Pair(Id("a"), Last(Op(OpType.SUB, Id("a"), Num(1))))),
                Op(OpType.TIMES, Num(10), Id("a")),
            ),
        ),
        Print(Last(Id("b"))),
    ),
)
