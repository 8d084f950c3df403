"""Tree walker that turns parsed nodes into Plain call expressions.

The walk is depth-first and pre-order, but runs on an explicit frame stack so
deeply nested markup cannot exhaust the interpreter's recursion limit. Each
frame collects the arguments of one element call: attribute calls first (in
source order), then the expressions of its children.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator

from .attributes import AttributeMapper
from .constants import TEXT_FUNCTION
from .formatting import format_call, quote_value
from .node import Element, Node, Text
from .tags import resolve_tag


class _Frame:
    __slots__ = ("args", "children", "depth", "function")

    def __init__(self, function: str, depth: int, args: list[str], children: Iterator[Node]) -> None:
        self.function = function
        self.depth = depth
        self.args = args
        self.children = children


class Emitter:
    __slots__ = ("debug", "mapper")

    def __init__(self, mapper: AttributeMapper, *, debug: bool = False) -> None:
        self.mapper = mapper
        self.debug = bool(debug)

    def _debug(self, message: str, indent: int = 0) -> None:
        if self.debug:
            print(f"{' ' * indent}{message}", file=sys.stderr)

    def text_call(self, node: Text) -> str:
        text = node.data.strip()
        if not text:
            return ""
        return f"{TEXT_FUNCTION}({quote_value(text)})"

    def emit(self, node: Node, depth: int = 0) -> str:
        """Return the expression for node, or "" if it contributes nothing.

        `depth` is the indentation level of the line the expression starts on.
        """
        if isinstance(node, Text):
            return self.text_call(node)
        if not isinstance(node, Element):
            return ""

        stack = [self._open(node, depth)]
        while True:
            frame = stack[-1]
            child = next(frame.children, None)
            if child is None:
                stack.pop()
                code = format_call(frame.function, frame.args, frame.depth)
                if not stack:
                    return code
                stack[-1].args.append(code)
            elif isinstance(child, Element):
                stack.append(self._open(child, frame.depth + 1))
            elif isinstance(child, Text):
                code = self.text_call(child)
                if code:
                    frame.args.append(code)
            # Comments and other node kinds carry nothing to convert

    def _open(self, node: Element, depth: int) -> _Frame:
        function = resolve_tag(node)
        indent = depth * 2
        self._debug(f"<{node.name}> -> {function} (depth={depth})", indent=indent)
        args = []
        for key, value in node.attrs:
            if self.debug:
                self._debug(f"{key}: {self.mapper.tier(key)} tier", indent=indent + 2)
            args.append(self.mapper.convert(key, value, node.name))
        return _Frame(function, depth, args, iter(node.children))
