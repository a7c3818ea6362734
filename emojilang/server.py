"""
Emoji Lang Language Server entry point.

This server provides basic language features for Emoji Lang source files
using `pygls`. It reuses the lexer and parser to report parse errors as
diagnostics and to build a symbol index supporting definition lookup,
hover information, and document symbols.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List, Optional

from lsprotocol.types import (
    TEXT_DOCUMENT_DEFINITION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    DefinitionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    Location,
    MarkupContent,
    MarkupKind,
    Position,
    PublishDiagnosticsParams,
    Range,
    SymbolKind,
)
from pygls.lsp.server import LanguageServer

from emojilang.analysis import EmojiSymbol, collect_symbols, parse_document

SOURCE_SUFFIX = ".emj"


class EmojiLanguageServer(LanguageServer):
    """Language server for Emoji Lang source files."""

    def __init__(self) -> None:
        super().__init__("emj-ls", "v0.1")
        self.symbols_by_uri: Dict[str, List[EmojiSymbol]] = {}
        self.global_symbols: Dict[str, List[EmojiSymbol]] = {}
        self.indexed_workspace = False

    def _index_workspace(self) -> None:
        """Parse all `.emj` files under the current workspace."""
        root = self.workspace.root_path
        if not root:
            self.indexed_workspace = True
            return
        for path in Path(root).rglob(f"*{SOURCE_SUFFIX}"):
            uri = path.as_uri()
            if uri in self.symbols_by_uri:
                continue
            try:
                text = path.read_text(encoding="utf-8")
            except OSError as e:
                print(f"[LSP] Failed to index {path}: {e}", file=sys.stderr)
                continue
            self.update_index(uri, text)
        self.indexed_workspace = True

    def update_index(self, uri: str, text: str) -> List[Diagnostic]:
        """Parse ``text``, update the symbol index for ``uri`` and return diagnostics.

        A document that fails to parse keeps its previous symbols so
        navigation still works while the user is typing.
        """
        ast, problem = parse_document(uri, text)
        if problem is None:
            self.symbols_by_uri[uri] = collect_symbols(uri, text, ast)
            self._rebuild_global_index()
            return []
        rng = Range(
            Position(problem.line, problem.start_column),
            Position(problem.line, problem.end_column),
        )
        return [
            Diagnostic(
                range=rng,
                message=problem.message,
                severity=DiagnosticSeverity.Error,
                source="emj",
            )
        ]

    def _rebuild_global_index(self) -> None:
        self.global_symbols.clear()
        for syms in self.symbols_by_uri.values():
            for sym in syms:
                self.global_symbols.setdefault(sym.name, []).append(sym)

    def refresh(self, uri: str) -> None:
        """Re-index the open document ``uri`` and publish its diagnostics."""
        doc = self.workspace.get_text_document(uri)
        diagnostics = self.update_index(uri, doc.source)
        self.text_document_publish_diagnostics(
            PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
        )

    def lookup(self, uri: str, position: Position) -> Optional[EmojiSymbol]:
        """Return the symbol named by the word under ``position``."""
        doc = self.workspace.get_text_document(uri)
        word = doc.word_at_position(position)
        if not word:
            return None
        if not self.indexed_workspace:
            self._index_workspace()
        matches = self.global_symbols.get(word)
        if not matches:
            return None
        # Prefer the definition in the document being edited.
        for sym in matches:
            if sym.uri == uri:
                return sym
        return matches[0]


def _symbol_range(sym: EmojiSymbol) -> Range:
    return Range(Position(sym.line, sym.start_column), Position(sym.line, sym.end_column))


lang_server = EmojiLanguageServer()


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: EmojiLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Index a document when it is opened."""
    ls.refresh(params.text_document.uri)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: EmojiLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-index a document when it changes."""
    ls.refresh(params.text_document.uri)


@lang_server.feature(TEXT_DOCUMENT_DEFINITION)
def definition(ls: EmojiLanguageServer, params: DefinitionParams):
    """Return the location of the first assignment of the variable under the cursor."""
    sym = ls.lookup(params.text_document.uri, params.position)
    if sym is None:
        return None
    return Location(uri=sym.uri, range=_symbol_range(sym))


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: EmojiLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Return the assignment text for the variable under the cursor."""
    sym = ls.lookup(params.text_document.uri, params.position)
    if sym is None:
        return None
    contents = MarkupContent(kind=MarkupKind.PlainText, value=sym.detail)
    return Hover(contents=contents)


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: EmojiLanguageServer, params: DocumentSymbolParams):
    """Return the variables assigned in the given document."""
    symbols = ls.symbols_by_uri.get(params.text_document.uri, [])
    result: List[DocumentSymbol] = []
    for sym in symbols:
        rng = _symbol_range(sym)
        result.append(
            DocumentSymbol(
                name=sym.name,
                kind=SymbolKind.Variable,
                range=rng,
                selection_range=rng,
                detail=sym.detail,
            )
        )
    return result


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
