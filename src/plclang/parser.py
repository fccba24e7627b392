"""plclang parser: converts a token stream into an AST.

This is a recursive descent parser: every grammar rule has a dedicated
method, references to other rules are calls to those methods, and operator
precedence follows from the order of the expression methods, lowest first:

    logical (&& ||) -> comparison (< <= > >= == !=) -> additive (+ -)
    -> multiplicative (* /) -> access (.) -> primary

Like the lexer it works through a cursor with ``peek``/``match``; instead of
emitting text, matched tokens are read back with ``get(-1)``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum

from plclang.ast import (
    Access,
    Assignment,
    Binary,
    Call,
    Def,
    Expr,
    Expression,
    For,
    Group,
    If,
    Let,
    Literal,
    ObjectExpr,
    Return,
    Source,
    Stmt,
    Variable,
)
from plclang.cursor import TokenCursor
from plclang.errors import ParseError
from plclang.lexer import tokenize
from plclang.strings import character_value, decimal_value, integer_value, string_value
from plclang.tokens import Token, TokenType


class Rule(Enum):
    """Parser entry points."""

    SOURCE = "source"
    STMT = "stmt"
    EXPR = "expr"


KEYWORDS: frozenset[str] = frozenset(
    {"LET", "DEF", "IF", "ELSE", "FOR", "IN", "RETURN", "NIL", "TRUE", "FALSE", "OBJECT"}
)

_LOGICAL = ("&&", "||")
_COMPARISON = ("<", "<=", ">", ">=", "==", "!=")
_ADDITIVE = ("+", "-")
_MULTIPLICATIVE = ("*", "/")
_SPLIT_OPERATORS = frozenset(_LOGICAL)


class Parser:
    """Recursive descent parser for plclang token streams."""

    def __init__(self, tokens: Sequence[Token], source: str = "") -> None:
        self._tokens = TokenCursor(tokens)
        self._source = source

    def parse(self, rule: Rule | str = Rule.SOURCE) -> Source | Stmt | Expr:
        """Parse *rule* and require that every token is consumed."""
        rule = Rule(rule)
        try:
            if rule is Rule.SOURCE:
                ast: Source | Stmt | Expr = self._parse_source()
            elif rule is Rule.STMT:
                ast = self._parse_stmt()
            else:
                ast = self._parse_expr()
        except RecursionError:
            raise self._error("expression nested too deeply") from None
        if self._tokens.has(0):
            raise self._error("expected end of input")
        return ast

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _error(self, message: str) -> ParseError:
        return ParseError(message, self._tokens.next_token(), self._source)

    def _expect(self, pattern: TokenType | str, message: str) -> Token:
        if not self._tokens.match(pattern):
            raise self._error(message)
        return self._tokens.get(-1)

    def _at_name(self) -> bool:
        """True if the next token is an identifier that is not a keyword."""
        tokens = self._tokens
        return tokens.peek(TokenType.IDENTIFIER) and tokens.get(0).lexeme not in KEYWORDS

    def _expect_identifier(self, what: str) -> str:
        if not self._at_name():
            raise self._error(f"expected {what}")
        self._tokens.match(TokenType.IDENTIFIER)
        return self._tokens.get(-1).lexeme

    def _match_operator(self, operators: tuple[str, ...]) -> str | None:
        """Consume and return the next operator if it is one of *operators*."""
        tokens = self._tokens
        for op in operators:
            if tokens.peek(TokenType.OPERATOR) and tokens.get(0).lexeme == op:
                tokens.match(TokenType.OPERATOR)
                return op
            # && and || arrive as two one-character operator tokens
            if (
                op in _SPLIT_OPERATORS
                and tokens.peek(op[0], op[1])
                and self._adjacent(tokens.get(0), tokens.get(1))
            ):
                tokens.match(op[0], op[1])
                return op
        return None

    def _adjacent(self, first: Token, second: Token) -> bool:
        """True if *second* starts right after *first* in the source.

        Without source text the offsets carry no spacing, so tokens are
        taken as adjacent.
        """
        if not self._source:
            return True
        return second.offset == first.offset + len(first.lexeme)

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _parse_source(self) -> Source:
        statements: list[Stmt] = []
        while self._tokens.has(0):
            statements.append(self._parse_stmt())
        return Source(tuple(statements))

    def _parse_stmt(self) -> Stmt:
        if self._tokens.peek("LET"):
            return self._parse_let_stmt()
        if self._tokens.peek("DEF"):
            return self._parse_def_stmt()
        if self._tokens.peek("IF"):
            return self._parse_if_stmt()
        if self._tokens.peek("FOR"):
            return self._parse_for_stmt()
        if self._tokens.peek("RETURN"):
            return self._parse_return_stmt()
        return self._parse_expression_or_assignment_stmt()

    def _parse_block(self) -> tuple[Stmt, ...]:
        """``{ stmt* }``"""
        self._expect("{", "expected '{'")
        body: list[Stmt] = []
        while not self._tokens.peek("}"):
            if not self._tokens.has(0):
                raise self._error("expected '}'")
            body.append(self._parse_stmt())
        self._tokens.match("}")
        return tuple(body)

    def _parse_let_stmt(self) -> Let:
        self._tokens.match("LET")
        name = self._expect_identifier("variable name")
        value = None
        if self._tokens.match("="):
            value = self._parse_expr()
        self._expect(";", "expected ';'")
        return Let(name, value)

    def _parse_def_stmt(self) -> Def:
        self._tokens.match("DEF")
        name = self._expect_identifier("function name")
        self._expect("(", "expected '('")
        parameters: list[str] = []
        if not self._tokens.peek(")"):
            parameters.append(self._expect_identifier("parameter name"))
            while self._tokens.match(","):
                parameters.append(self._expect_identifier("parameter name"))
        self._expect(")", "expected ')'")
        body = self._parse_block()
        return Def(name, tuple(parameters), body)

    def _parse_if_stmt(self) -> If:
        self._tokens.match("IF")
        self._expect("(", "expected '('")
        condition = self._parse_expr()
        self._expect(")", "expected ')'")
        then_body = self._parse_block()
        else_body: tuple[Stmt, ...] = ()
        if self._tokens.match("ELSE"):
            else_body = self._parse_block()
        return If(condition, then_body, else_body)

    def _parse_for_stmt(self) -> For:
        self._tokens.match("FOR")
        self._expect("(", "expected '('")
        name = self._expect_identifier("loop variable name")
        self._expect("IN", "expected 'IN'")
        iterable = self._parse_expr()
        self._expect(")", "expected ')'")
        body = self._parse_block()
        return For(name, iterable, body)

    def _parse_return_stmt(self) -> Return:
        self._tokens.match("RETURN")
        value = None
        if not self._tokens.peek(";"):
            value = self._parse_expr()
        self._expect(";", "expected ';'")
        return Return(value)

    def _parse_expression_or_assignment_stmt(self) -> Expression | Assignment:
        expr = self._parse_expr()
        if self._tokens.match("="):
            value = self._parse_expr()
            self._expect(";", "expected ';'")
            return Assignment(expr, value)
        self._expect(";", "expected ';'")
        return Expression(expr)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _parse_expr(self) -> Expr:
        return self._parse_logical_expr()

    def _parse_binary(self, operators: tuple[str, ...], operand: Callable[[], Expr]) -> Expr:
        """Parse a left-associative chain of *operand* separated by *operators*."""
        left = operand()
        while True:
            op = self._match_operator(operators)
            if op is None:
                return left
            left = Binary(op, left, operand())

    def _parse_logical_expr(self) -> Expr:
        return self._parse_binary(_LOGICAL, self._parse_comparison_expr)

    def _parse_comparison_expr(self) -> Expr:
        return self._parse_binary(_COMPARISON, self._parse_additive_expr)

    def _parse_additive_expr(self) -> Expr:
        return self._parse_binary(_ADDITIVE, self._parse_multiplicative_expr)

    def _parse_multiplicative_expr(self) -> Expr:
        return self._parse_binary(_MULTIPLICATIVE, self._parse_secondary_expr)

    def _parse_secondary_expr(self) -> Expr:
        expr = self._parse_primary_expr()
        while self._tokens.match("."):
            expr = self._parse_property_or_method(expr)
        return expr

    def _parse_property_or_method(self, receiver: Expr) -> Access:
        name = self._expect_identifier("property or method name after '.'")
        if self._tokens.peek("("):
            return Access(receiver, name, self._parse_arguments())
        return Access(receiver, name)

    def _parse_arguments(self) -> tuple[Expr, ...]:
        """``( (expr (, expr)*)? )``"""
        self._expect("(", "expected '('")
        arguments: list[Expr] = []
        if not self._tokens.peek(")"):
            arguments.append(self._parse_expr())
            while self._tokens.match(","):
                arguments.append(self._parse_expr())
        self._expect(")", "expected ')'")
        return tuple(arguments)

    # ------------------------------------------------------------------
    # Primary expressions
    # ------------------------------------------------------------------

    def _parse_primary_expr(self) -> Expr:
        tokens = self._tokens
        if (
            tokens.peek("NIL")
            or tokens.peek("TRUE")
            or tokens.peek("FALSE")
            or tokens.peek(TokenType.INTEGER)
            or tokens.peek(TokenType.DECIMAL)
            or tokens.peek(TokenType.CHARACTER)
            or tokens.peek(TokenType.STRING)
        ):
            return self._parse_literal_expr()
        if tokens.peek("("):
            return self._parse_group_expr()
        if tokens.peek("OBJECT"):
            return self._parse_object_expr()
        if self._at_name():
            return self._parse_variable_or_function_expr()
        raise self._error("expected expression")

    def _parse_literal_expr(self) -> Literal:
        tokens = self._tokens
        if tokens.match("NIL"):
            return Literal(None)
        if tokens.match("TRUE"):
            return Literal(True)
        if tokens.match("FALSE"):
            return Literal(False)

        token = tokens.get(0)
        tokens.match(token.type)
        if token.type is TokenType.INTEGER:
            return Literal(integer_value(token.lexeme))
        if token.type is TokenType.DECIMAL:
            return Literal(decimal_value(token.lexeme))
        if token.type is TokenType.CHARACTER:
            return Literal(character_value(token.lexeme))
        return Literal(string_value(token.lexeme))

    def _parse_group_expr(self) -> Group:
        self._tokens.match("(")
        expr = self._parse_expr()
        self._expect(")", "expected ')'")
        return Group(expr)

    def _parse_object_expr(self) -> ObjectExpr:
        """``OBJECT { (name = expr (, name = expr)*)? }``"""
        self._tokens.match("OBJECT")
        self._expect("{", "expected '{'")
        fields: list[tuple[str, Expr]] = []
        if not self._tokens.peek("}"):
            fields.append(self._parse_object_field())
            while self._tokens.match(","):
                fields.append(self._parse_object_field())
        self._expect("}", "expected '}'")
        return ObjectExpr(tuple(fields))

    def _parse_object_field(self) -> tuple[str, Expr]:
        name = self._expect_identifier("field name")
        self._expect("=", "expected '='")
        return name, self._parse_expr()

    def _parse_variable_or_function_expr(self) -> Variable | Call:
        name = self._expect_identifier("identifier")
        if self._tokens.peek("("):
            return Call(name, self._parse_arguments())
        return Variable(name)


def parse_tokens(
    tokens: Sequence[Token], rule: Rule | str = Rule.SOURCE, source: str = ""
) -> Source | Stmt | Expr:
    """Parse an already lexed token sequence."""
    return Parser(tokens, source).parse(rule)


def parse(source: str, rule: Rule | str = Rule.SOURCE) -> Source | Stmt | Expr:
    """Convenience function: lex and parse source text."""
    return Parser(tokenize(source), source).parse(rule)
