"""DOM-like nodes produced by the tree builder.

The converter only reads these trees. Mutating helpers exist for the tree
builder, which is the single owner of a tree while it is being built.

- name: tag name for elements, '#text', '#comment', '!doctype',
  '#document' or '#document-fragment' for the other node kinds
- children: ordered list of child nodes
- parent: back-reference to the parent node (None for roots)
"""

from __future__ import annotations

from collections.abc import Iterator


class Node:
    __slots__ = ("children", "name", "parent")

    def __init__(self, name: str) -> None:
        self.name = name
        self.parent: Node | None = None
        self.children: list[Node] = []

    def append_child(self, child: Node) -> None:
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)

    def insert_before(self, child: Node, reference: Node) -> None:
        """Insert child in front of reference. Raises ValueError if reference is not a child."""
        index = self.children.index(reference)
        if child.parent is not None:
            child.parent.remove_child(child)
            index = self.children.index(reference)
        child.parent = self
        self.children.insert(index, child)

    def remove_child(self, child: Node) -> None:
        if child not in self.children:
            return
        self.children.remove(child)
        child.parent = None

    def find_ancestor(self, tag_name: str) -> Element | None:
        """Return the nearest element above this node named tag_name, or None."""
        current = self.parent
        while current is not None:
            if isinstance(current, Element) and current.name == tag_name:
                return current
            current = current.parent
        return None

    def has_ancestor(self, tag_name: str) -> bool:
        return self.find_ancestor(tag_name) is not None

    def iter_descendants(self) -> Iterator[Node]:
        """Yield every node below this one in document order."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            if node.children:
                stack.extend(reversed(node.children))

    def __repr__(self) -> str:
        return f"<{self.name}>"


class Document(Node):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__("#document")


class DocumentFragment(Node):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__("#document-fragment")


class Element(Node):
    """An element.

    `attrs` is a list of `(name, value)` pairs in source order. A name can
    repeat when the markup repeats it.
    """

    __slots__ = ("attrs", "namespace")

    def __init__(
        self, name: str, attrs: list[tuple[str, str]] | None = None, namespace: str | None = None
    ) -> None:
        super().__init__(name)
        self.attrs: list[tuple[str, str]] = list(attrs) if attrs else []
        # None for HTML elements, the namespace URI for SVG/MathML
        self.namespace = namespace

    def __repr__(self) -> str:
        return f"Element(<{self.name}>, children={len(self.children)})"


class Text(Node):
    __slots__ = ("data",)

    def __init__(self, data: str) -> None:
        super().__init__("#text")
        self.data = data

    def __repr__(self) -> str:
        return f"Text({self.data[:30]!r})"


class Comment(Node):
    __slots__ = ("data",)

    def __init__(self, data: str) -> None:
        super().__init__("#comment")
        self.data = data

    def __repr__(self) -> str:
        return f"Comment({self.data[:30]!r})"


class Doctype(Node):
    __slots__ = ("doctype_name", "public_id", "system_id")

    def __init__(self, doctype_name: str | None, public_id: str | None = None, system_id: str | None = None) -> None:
        super().__init__("!doctype")
        self.doctype_name = doctype_name
        self.public_id = public_id
        self.system_id = system_id
