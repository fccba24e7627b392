"""Minimal LSP server for plclang, diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from plclang import __version__
from plclang.errors import LexError, ParseError
from plclang.parser import parse

server = LanguageServer(
    "plclang-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _utf16_column(line: str, column: int) -> int:
    """Convert a 0-based code point column to LSP's UTF-16 code units."""
    units = len(line[:column].encode("utf-16-le")) // 2
    return units + max(0, column - len(line))


def _diagnostic(exc: LexError | ParseError) -> Diagnostic:
    pos = exc.position
    width = 1
    if isinstance(exc, ParseError) and exc.token is not None:
        width = len(exc.token.lexeme)
    message = exc.message
    if isinstance(exc, ParseError) and exc.at_end:
        message += " at end of input"
    line = exc.source.split("\n")[pos.line - 1]
    # Lexemes never span a line break, so the range stays on one line
    return Diagnostic(
        range=Range(
            start=Position(
                line=pos.line - 1, character=_utf16_column(line, pos.column - 1)
            ),
            end=Position(
                line=pos.line - 1,
                character=_utf16_column(line, pos.column - 1 + width),
            ),
        ),
        message=message,
        severity=DiagnosticSeverity.Error,
        source="plclang",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Lex and parse the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics: list[Diagnostic] = []

    try:
        parse(doc.source)
    except (LexError, ParseError) as exc:
        diagnostics.append(_diagnostic(exc))

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
