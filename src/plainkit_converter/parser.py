"""Markup parsing entry points."""

# ruff: noqa: N802, N803

from __future__ import annotations

import html5lib
from html5lib._tokenizer import HTMLTokenizer
from html5lib.constants import _ReparseException, tokenTypes
from html5lib.html5parser import ParseError as Html5libParseError

from .errors import ParseError
from .node import Document, DocumentFragment
from .treebuilder import AttributeDict, TreeBuilder


class AttributeTokenizer(HTMLTokenizer):
    """html5lib tokenizer that keeps repeated start tag attributes.

    The stock tokenizer keeps the first of each attribute name and drops the
    rest. Here the full list travels along as `AttributeDict.pairs`.
    """

    def emitCurrentToken(self):
        token = self.currentToken
        raw = token["data"] if token["type"] == tokenTypes["StartTag"] else None
        HTMLTokenizer.emitCurrentToken(self)
        if raw and len(raw) > len(token["data"]):
            token["data"] = AttributeDict(token["data"], raw)


class HTMLParser(html5lib.HTMLParser):
    def _parse(self, stream, innerHTML=False, container="div", scripting=False, **kwargs):
        self.innerHTMLMode = innerHTML
        self.container = container
        self.scripting = scripting
        self.tokenizer = AttributeTokenizer(stream, parser=self, **kwargs)
        self.reset()

        try:
            self.mainLoop()
        except _ReparseException:
            self.reset()
            self.mainLoop()


def _make_parser(strict: bool) -> HTMLParser:
    return HTMLParser(tree=TreeBuilder, strict=strict, namespaceHTMLElements=False)


def parse_document(html: str, *, strict: bool = False) -> Document:
    """Parse a complete HTML document."""
    try:
        return _make_parser(strict).parse(html)
    except Html5libParseError as exc:
        msg = f"failed to parse HTML: {exc}"
        raise ParseError(msg) from exc


def parse_fragment(html: str, *, container: str = "div", strict: bool = False) -> DocumentFragment:
    """Parse markup as the inner HTML of a `container` element.

    The container itself is not part of the returned fragment, so its
    children have the fragment as their root.
    """
    try:
        return _make_parser(strict).parseFragment(html, container=container)
    except Html5libParseError as exc:
        msg = f"failed to parse HTML fragment: {exc}"
        raise ParseError(msg) from exc
