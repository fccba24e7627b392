"""AST node types for parsed plclang source.

Nodes are frozen dataclasses and children are stored in tuples, so a parsed
tree is immutable and compares structurally. ``Stmt`` and ``Expr`` are closed
unions of the node classes below.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TypeAlias


# ----------------------------------------------------------------------
# Expressions
# ----------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Literal:
    """NIL, TRUE/FALSE, integer, decimal, character or string literal."""

    value: None | bool | int | Decimal | str


@dataclass(frozen=True, slots=True)
class Group:
    """Parenthesized expression."""

    expression: Expr


@dataclass(frozen=True, slots=True)
class Binary:
    """Binary operation; ``operator`` is the operator lexeme (``+``, ``&&``, ``<=``...)."""

    operator: str
    left: Expr
    right: Expr


@dataclass(frozen=True, slots=True)
class Access:
    """Property read (``arguments is None``) or method call on a receiver."""

    receiver: Expr
    name: str
    arguments: tuple[Expr, ...] | None = None


@dataclass(frozen=True, slots=True)
class Variable:
    name: str


@dataclass(frozen=True, slots=True)
class Call:
    """Function call by name: ``name(arg, ...)``."""

    name: str
    arguments: tuple[Expr, ...] = ()


@dataclass(frozen=True, slots=True)
class ObjectExpr:
    """Object construction: ``OBJECT { name = expr, ... }``."""

    fields: tuple[tuple[str, Expr], ...] = ()


Expr: TypeAlias = Literal | Group | Binary | Access | Variable | Call | ObjectExpr


# ----------------------------------------------------------------------
# Statements
# ----------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Let:
    name: str
    value: Expr | None = None


@dataclass(frozen=True, slots=True)
class Def:
    """Function declaration."""

    name: str
    parameters: tuple[str, ...]
    body: tuple[Stmt, ...]


@dataclass(frozen=True, slots=True)
class If:
    condition: Expr
    then_body: tuple[Stmt, ...]
    else_body: tuple[Stmt, ...] = ()


@dataclass(frozen=True, slots=True)
class For:
    name: str
    iterable: Expr
    body: tuple[Stmt, ...]


@dataclass(frozen=True, slots=True)
class Return:
    value: Expr | None = None


@dataclass(frozen=True, slots=True)
class Expression:
    """Expression evaluated for its effect: ``expr;``."""

    expression: Expr


@dataclass(frozen=True, slots=True)
class Assignment:
    target: Expr
    value: Expr


Stmt: TypeAlias = Let | Def | If | For | Return | Expression | Assignment


@dataclass(frozen=True, slots=True)
class Source:
    """Root node: the statements of a whole program."""

    statements: tuple[Stmt, ...]
