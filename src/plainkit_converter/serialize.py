"""Tree dumps in the html5lib test format.

Used by `plainkit-converter --tree` and by the tests to show what the parser
handed to the converter. The format uses '| ' prefixes and two-space
indentation per nesting level.
"""

from __future__ import annotations

from html5lib.constants import prefixes

from .node import Comment, Doctype, Document, DocumentFragment, Element, Node, Text


def to_test_format(node: Node, indent: int = 0) -> str:
    """Convert node to html5lib test format string."""
    if isinstance(node, (Document, DocumentFragment)):
        return "\n".join(_node_to_test_format(child, 0) for child in node.children)
    return _node_to_test_format(node, indent)


def _node_to_test_format(node: Node, indent: int) -> str:
    if isinstance(node, Text):
        return f'| {" " * indent}"{node.data}"'

    if isinstance(node, Comment):
        return f"| {' ' * indent}<!-- {node.data} -->"

    if isinstance(node, Doctype):
        return _doctype_to_test_format(node)

    if not isinstance(node, Element):
        return f"| {' ' * indent}{node.name}"

    sections = [f"| {' ' * indent}<{_qualified_name(node)}>"]
    sections.extend(_attrs_to_test_format(node, indent))
    sections.extend(_node_to_test_format(child, indent + 2) for child in node.children)
    return "\n".join(sections)


def _qualified_name(node: Element) -> str:
    if node.namespace:
        return f"{prefixes.get(node.namespace, node.namespace)} {node.name}"
    return node.name


def _attrs_to_test_format(node: Element, indent: int) -> list[str]:
    if not node.attrs:
        return []
    padding = " " * (indent + 2)
    # Sorted for canonical output; source order is kept on the node itself
    return [f'| {padding}{name}="{value or ""}"' for name, value in sorted(node.attrs, key=lambda pair: pair[0])]


def _doctype_to_test_format(node: Doctype) -> str:
    parts = ["| <!DOCTYPE"]
    parts.append(f" {node.doctype_name}" if node.doctype_name else " ")
    if node.public_id or node.system_id:
        parts.append(f' "{node.public_id or ""}"')
        parts.append(f' "{node.system_id or ""}"')
    parts.append(">")
    return "".join(parts)
