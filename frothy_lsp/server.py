from __future__ import annotations

"""
A minimal pygls-based Language Server for Frothy.

Features:
- Text synchronization and document store
- Diagnostics: the first lex or parse error, plus warnings for unassigned names
- Hover: builtins, reserved words and assigned names
- Completion: builtins, reserved words and assigned names
- Document Symbols: from indexer

Note: We avoid evaluating the buffer. We build a static index per document.
"""

from typing import Dict, Optional, List
from dataclasses import dataclass

from pygls.server import LanguageServer
from lsprotocol.types import (
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    Diagnostic,
    DiagnosticSeverity,
    Position,
    Range,
    Hover,
    MarkupContent,
    MarkupKind,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionParams,
    HoverParams,
    DocumentSymbolParams,
    DocumentSymbol,
    SymbolKind,
)

from frothy_lsp.indexer import (
    build_index,
    unassigned_references,
    BUILTIN_SIGNATURES,
    RESERVED_WORDS,
    DocumentIndex,
)


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class FrothyLanguageServer(LanguageServer):
    CMD_NAME = "frothy-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, "v0.1")
        self.documents: Dict[str, DocumentState] = {}


ls = FrothyLanguageServer()


# --- Text sync ---
@ls.feature("textDocument/didOpen")
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    text = params.text_document.text or ""
    ls.documents[uri] = DocumentState(text=text, index=build_index(text))
    _publish_diagnostics(uri)


@ls.feature("textDocument/didChange")
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents.get(uri, DocumentState("", build_index(""))).text
    ls.documents[uri] = DocumentState(text=text, index=build_index(text))
    _publish_diagnostics(uri)


@ls.feature("textDocument/didClose")
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    if uri in ls.documents:
        del ls.documents[uri]
    ls.publish_diagnostics(uri, [])


# --- Diagnostics ---
def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def diagnostics_for(idx: DocumentIndex) -> List[Diagnostic]:
    diags: List[Diagnostic] = []
    if idx.error is not None:
        diags.append(
            Diagnostic(
                range=_mk_range(idx.error.line, idx.error.col),
                message=idx.error.message,
                severity=DiagnosticSeverity.Error,
                source="frothy-ls",
            )
        )
    # names may still be bound by the host, so these are only warnings
    for name, line, col in unassigned_references(idx):
        diags.append(
            Diagnostic(
                range=_mk_range(line, col, len(name)),
                message=f"'{name}' is never assigned",
                severity=DiagnosticSeverity.Warning,
                source="frothy-ls",
            )
        )
    return diags


def _publish_diagnostics(uri: str):
    ls.publish_diagnostics(uri, diagnostics_for(ls.documents[uri].index))


# --- Hover ---
def hover_text(idx: DocumentIndex, word: str) -> Optional[str]:
    if word in BUILTIN_SIGNATURES:
        return BUILTIN_SIGNATURES[word]
    if word in RESERVED_WORDS:
        return RESERVED_WORDS[word]
    sdef = idx.symbols.get(word)
    if sdef is not None:
        return f"{word} ({sdef.kind}, assigned at {sdef.line + 1}:{sdef.col + 1})"
    if any(ref[0] == word for ref in idx.references):
        return f"{word} (never assigned in this document)"
    return None


@ls.feature("textDocument/hover")
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    word = _extract_word_at(state.text, params.position)
    if not word:
        return None

    contents = hover_text(state.index, word)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
def completion_items(idx: DocumentIndex) -> List[CompletionItem]:
    items: List[CompletionItem] = []
    for name, sig in BUILTIN_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig))
    for name, doc in RESERVED_WORDS.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Keyword, detail=doc))
    for name, sdef in idx.symbols.items():
        kind = CompletionItemKind.Function if sdef.kind == "function" else CompletionItemKind.Variable
        items.append(CompletionItem(label=name, kind=kind))
    return items


@ls.feature("textDocument/completion")
def on_completion(params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return CompletionList(is_incomplete=False, items=[])
    return CompletionList(is_incomplete=False, items=completion_items(state.index))


# --- Document Symbols ---
def document_symbols(idx: DocumentIndex) -> List[DocumentSymbol]:
    symbols: List[DocumentSymbol] = []
    for name, sdef in idx.symbols.items():
        rng = _mk_range(sdef.line, sdef.col, len(name))
        symbols.append(
            DocumentSymbol(
                name=name,
                kind=SymbolKind.Function if sdef.kind == "function" else SymbolKind.Variable,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


@ls.feature("textDocument/documentSymbol")
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    return document_symbols(state.index)


# --- Helpers ---
def _extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    start = end = pos.character
    while start > 0 and (line[start - 1].isalnum() or line[start - 1] == "_"):
        start -= 1
    while end < len(line) and (line[end].isalnum() or line[end] == "_"):
        end += 1
    return line[start:end] or None


def main():
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
