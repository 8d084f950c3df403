"""Input classification and fragment unwrapping.

`is_full_page(html)` decides between the document and fragment paths with a
lexical check over the raw text. Malformed or ambiguous input is treated as
a fragment. `extract_content()` and `meaningful_nodes()` turn the parsed
fragment into the list of top-level nodes that get converted.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .constants import WRAPPER_ELEMENTS
from .node import Element, Node, Text

_DOCTYPE_RE = re.compile(r"<!doctype", re.IGNORECASE)
_HTML_RE = re.compile(r"<html(?=[\s/>]|$)", re.IGNORECASE)
_HEAD_RE = re.compile(r"<head(?=[\s/>]|$)", re.IGNORECASE)
_BODY_RE = re.compile(r"<body(?=[\s/>]|$)", re.IGNORECASE)


def is_full_page(html: str) -> bool:
    if _DOCTYPE_RE.search(html) or _HTML_RE.search(html):
        return True
    return bool(_HEAD_RE.search(html) and _BODY_RE.search(html))


def is_whitespace_text(node: Node) -> bool:
    return isinstance(node, Text) and not node.data.strip()


def extract_content(node: Node) -> list[Node]:
    """Return the content nodes of a parsed top-level node.

    html/head/body wrappers are replaced by their own content, recursively.
    Elements and text are kept, everything else (comments, doctypes) is
    dropped.
    """
    result: list[Node] = []
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, Element):
            if current.name in WRAPPER_ELEMENTS:
                stack.extend(reversed(current.children))
            else:
                result.append(current)
        elif isinstance(current, Text):
            result.append(current)
    return result


def meaningful_nodes(nodes: Iterable[Node]) -> list[Node]:
    """Drop whitespace-only text, keeping document order."""
    return [node for node in nodes if not is_whitespace_text(node)]


def find_root(document: Node) -> Element | None:
    """Return the first <html> element in document order."""
    for node in document.iter_descendants():
        if isinstance(node, Element) and node.name == "html":
            return node
    return None
