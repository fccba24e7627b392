"""Property tests: lexemes cover the input exactly and identifiers are never split."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from plclang.lexer import tokenize
from plclang.tokens import TokenType

identifiers = st.from_regex(r"[A-Za-z_][A-Za-z0-9_-]{0,12}", fullmatch=True)
numbers = st.from_regex(r"[+-]?[1-9][0-9]{0,5}(\.[0-9]{1,3})?([eE][+-]?[0-9]{1,2})?", fullmatch=True)
characters = st.from_regex(r"'([a-z0-9 ]|\\[bnrt'\"\\])'", fullmatch=True)
strings = st.from_regex(r'"([a-z0-9 ,.!]|\\[bnrt\'"\\])*"', fullmatch=True)
operators = st.sampled_from(["(", ")", "{", "}", ";", ",", ".", "+", "*", "<", ">", "<=", "==", "!="])
tokens = st.one_of(identifiers, numbers, characters, strings, operators)
separators = st.sampled_from([" ", "  ", "\n", "\t", "\r\n", " // comment\n", "\n//\n"])


@given(st.lists(st.tuples(tokens, separators), max_size=20))
def test_lexemes_and_separators_reconstruct_input(pairs):
    source = "".join(token + sep for token, sep in pairs)
    lexed = tokenize(source)

    assert [t.lexeme for t in lexed] == [token for token, _ in pairs]

    rebuilt = []
    end = 0
    for tok, (_, sep) in zip(lexed, pairs):
        assert source[tok.offset : tok.offset + len(tok.lexeme)] == tok.lexeme
        rebuilt.append(source[end : tok.offset])
        rebuilt.append(tok.lexeme)
        end = tok.offset + len(tok.lexeme)
        assert source[end : end + len(sep)] == sep
    rebuilt.append(source[end:])
    assert "".join(rebuilt) == source


@given(identifiers)
def test_identifier_is_one_token(name):
    lexed = tokenize(name)
    assert len(lexed) == 1
    assert lexed[0].type is TokenType.IDENTIFIER
    assert lexed[0].lexeme == name


@given(identifiers, identifiers)
def test_identifiers_split_only_on_whitespace(first, second):
    lexed = tokenize(f"{first} {second}")
    assert [(t.type, t.lexeme) for t in lexed] == [
        (TokenType.IDENTIFIER, first),
        (TokenType.IDENTIFIER, second),
    ]
