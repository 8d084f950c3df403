"""html5lib tree builder producing `plainkit_converter.node` trees.

html5lib drives tree construction through builder objects implementing
`html5lib.treebuilders.base.Node`. Each builder wraps one of our nodes
(`.node`) and forwards every mutation to it, so once parsing finishes the
builders can be dropped and only the plain node tree is kept.
"""

# ruff: noqa: N802, N803, N815

from __future__ import annotations

from collections.abc import Iterator, MutableMapping

from html5lib.constants import namespaces
from html5lib.treebuilders import base

from .node import Comment, Doctype, Document, DocumentFragment, Element, Node, Text
from .serialize import to_test_format


def _flatten_attribute_name(name: str | tuple[str | None, str, str]) -> str:
    # Adjusted foreign attributes arrive as (prefix, local name, namespace)
    if isinstance(name, tuple):
        prefix, local = name[0], name[1]
        return f"{prefix}:{local}" if prefix else local
    return name


class AttributeDict(dict):
    """Start tag attributes that also carry every `[name, value]` pair in source order.

    html5lib keeps only the first of repeated names in the mapping itself.
    """

    def __init__(self, attributes=(), pairs=()):
        dict.__init__(self, attributes)
        self.pairs = [(name, value) for name, value in pairs]


class AttributeView(MutableMapping):
    """Mapping over an element's attribute pairs, as html5lib expects.

    Lookups see the first pair with a name. Assignment replaces that pair or
    appends a new one.
    """

    __slots__ = ("element",)

    def __init__(self, element: Element) -> None:
        self.element = element

    @property
    def pairs(self) -> list[tuple[str, str]]:
        return self.element.attrs

    def __getitem__(self, name: str) -> str:
        for key, value in self.element.attrs:
            if key == name:
                return value
        raise KeyError(name)

    def __setitem__(self, name: str, value: str) -> None:
        attrs = self.element.attrs
        for index, (key, _) in enumerate(attrs):
            if key == name:
                attrs[index] = (name, value)
                return
        attrs.append((name, value))

    def __delitem__(self, name: str) -> None:
        remaining = [pair for pair in self.element.attrs if pair[0] != name]
        if len(remaining) == len(self.element.attrs):
            raise KeyError(name)
        self.element.attrs = remaining

    def __iter__(self) -> Iterator[str]:
        seen = set()
        for key, _ in self.element.attrs:
            if key not in seen:
                seen.add(key)
                yield key

    def __len__(self) -> int:
        return len({key for key, _ in self.element.attrs})


class NodeBuilder(base.Node):
    def __init__(self, node: Node) -> None:
        self.node = node
        base.Node.__init__(self, node.name)

    def appendChild(self, node: NodeBuilder) -> None:
        node.parent = self
        self.node.append_child(node.node)

    def insertText(self, data: str, insertBefore: NodeBuilder | None = None) -> None:
        children = self.node.children
        index = len(children) if insertBefore is None else children.index(insertBefore.node)
        # Merge with a directly preceding text node
        if index and isinstance(children[index - 1], Text):
            children[index - 1].data += data
            return
        text = Text(data)
        if insertBefore is None:
            self.node.append_child(text)
        else:
            self.node.insert_before(text, insertBefore.node)

    def insertBefore(self, node: NodeBuilder, refNode: NodeBuilder) -> None:
        self.node.insert_before(node.node, refNode.node)
        node.parent = self

    def removeChild(self, node: NodeBuilder) -> None:
        if node.node.parent is self.node:
            self.node.remove_child(node.node)
        node.parent = None

    def reparentChildren(self, newParent: NodeBuilder) -> None:
        for child in list(self.node.children):
            newParent.node.append_child(child)
        self.childNodes = []

    def hasContent(self) -> bool:
        return bool(self.node.children)


class ElementBuilder(NodeBuilder):
    def __init__(self, name: str, namespace: str | None = None) -> None:
        NodeBuilder.__init__(self, Element(name, namespace=namespace))

    @property
    def namespace(self) -> str | None:
        return self.node.namespace

    @property
    def nameTuple(self) -> tuple[str, str]:
        return (self.node.namespace or namespaces["html"], self.node.name)

    @property
    def attributes(self) -> AttributeView:
        return AttributeView(self.node)

    @attributes.setter
    def attributes(self, attributes) -> None:
        # Mappings rebuilt by html5lib (foreign attribute adjustment) carry no pairs
        pairs = getattr(attributes, "pairs", None) or list((attributes or {}).items())
        self.node.attrs = [(_flatten_attribute_name(key), value) for key, value in pairs]

    def cloneNode(self) -> ElementBuilder:
        clone = ElementBuilder(self.node.name, self.node.namespace)
        clone.node.attrs = list(self.node.attrs)
        return clone


class CommentBuilder(NodeBuilder):
    def __init__(self, data: str) -> None:
        NodeBuilder.__init__(self, Comment(data))


class DoctypeBuilder(NodeBuilder):
    def __init__(self, name: str | None, publicId: str | None = None, systemId: str | None = None) -> None:
        NodeBuilder.__init__(self, Doctype(name, publicId, systemId))


class DocumentBuilder(NodeBuilder):
    def __init__(self) -> None:
        NodeBuilder.__init__(self, Document())


class FragmentBuilder(NodeBuilder):
    def __init__(self) -> None:
        NodeBuilder.__init__(self, DocumentFragment())


class TreeBuilder(base.TreeBuilder):
    documentClass = DocumentBuilder
    elementClass = ElementBuilder
    commentClass = CommentBuilder
    doctypeClass = DoctypeBuilder
    fragmentClass = FragmentBuilder

    def getDocument(self) -> Document:
        return self.document.node

    def getFragment(self) -> DocumentFragment:
        fragment = self.fragmentClass()
        self.openElements[0].reparentChildren(fragment)
        return fragment.node

    def testSerializer(self, node: Node) -> str:
        return to_test_format(node)
