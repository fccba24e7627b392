"""Human-readable token and AST dumps (--tokens output and --debug to stderr)."""

from __future__ import annotations

import sys
from typing import TextIO

from plclang.ast import (
    Access,
    Assignment,
    Binary,
    Call,
    Def,
    Expression,
    For,
    Group,
    If,
    Let,
    Literal,
    ObjectExpr,
    Return,
    Source,
    Variable,
)
from plclang.tokens import Token


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one ``offset TYPE lexeme`` line per token to *file*."""
    for tok in tokens:
        file.write(f"{tok.offset:>5} {tok.type.name:<10} {tok.lexeme!r}\n")


def dump_ast(node: object, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable AST tree to *file*."""
    _dump(node, 0, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_block(label: str, body: tuple, depth: int, f: TextIO) -> None:
    f.write(f"{_indent(depth)}{label}\n")
    for stmt in body:
        _dump(stmt, depth + 1, f)


def _dump(node: object, depth: int, f: TextIO) -> None:
    pad = _indent(depth)
    match node:
        case Source(statements):
            _dump_block("Source", statements, depth, f)
        case Let(name, value):
            f.write(f"{pad}Let {name}\n")
            if value is not None:
                _dump(value, depth + 1, f)
        case Def(name, parameters, body):
            _dump_block(f"Def {name}({', '.join(parameters)})", body, depth, f)
        case If(condition, then_body, else_body):
            f.write(f"{pad}If\n")
            _dump(condition, depth + 1, f)
            _dump_block("Then", then_body, depth + 1, f)
            if else_body:
                _dump_block("Else", else_body, depth + 1, f)
        case For(name, iterable, body):
            f.write(f"{pad}For {name}\n")
            _dump(iterable, depth + 1, f)
            _dump_block("Body", body, depth + 1, f)
        case Return(value):
            f.write(f"{pad}Return\n")
            if value is not None:
                _dump(value, depth + 1, f)
        case Expression(expression):
            f.write(f"{pad}Expression\n")
            _dump(expression, depth + 1, f)
        case Assignment(target, value):
            f.write(f"{pad}Assignment\n")
            _dump(target, depth + 1, f)
            _dump(value, depth + 1, f)
        case Literal(value):
            f.write(f"{pad}Literal({value!r})\n")
        case Group(expression):
            f.write(f"{pad}Group\n")
            _dump(expression, depth + 1, f)
        case Binary(operator, left, right):
            f.write(f"{pad}Binary {operator}\n")
            _dump(left, depth + 1, f)
            _dump(right, depth + 1, f)
        case Access(receiver, name, None):
            f.write(f"{pad}Property .{name}\n")
            _dump(receiver, depth + 1, f)
        case Access(receiver, name, arguments):
            f.write(f"{pad}Method .{name}()\n")
            _dump(receiver, depth + 1, f)
            for arg in arguments:
                _dump(arg, depth + 2, f)
        case Variable(name):
            f.write(f"{pad}Variable {name}\n")
        case Call(name, arguments):
            f.write(f"{pad}Call {name}()\n")
            for arg in arguments:
                _dump(arg, depth + 1, f)
        case ObjectExpr(fields):
            f.write(f"{pad}Object\n")
            for name, value in fields:
                f.write(f"{_indent(depth + 1)}Field {name}\n")
                _dump(value, depth + 2, f)
        case _:
            raise TypeError(f"not an AST node: {type(node).__name__}")
