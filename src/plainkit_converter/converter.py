"""HTML to Plain conversion.

`Converter.convert()` takes raw markup and returns the source of a Go file
that builds the same tree with the plainkit packages:

- full pages become `func Page() Node`
- a fragment with one top-level node becomes `func Component() Node`
- a fragment with several top-level nodes becomes `func Components() []Node`

Output is all-or-nothing: on failure a ConversionError is raised and no
source is produced.
"""

from __future__ import annotations

import sys

from .attributes import AttributeMapper
from .config import ConversionConfig
from .constants import COMPONENT_FUNCTION, COMPONENTS_FUNCTION, INDENT, PAGE_FUNCTION
from .emitter import Emitter
from .errors import NoConvertibleContentError, NoFragmentsFoundError, NoRootFoundError
from .fragment import extract_content, find_root, is_full_page, meaningful_nodes
from .imports import ImportSet
from .parser import parse_document, parse_fragment


class Converter:
    __slots__ = ("config", "debug")

    def __init__(
        self,
        config: ConversionConfig | None = None,
        *,
        htmx: bool = False,
        alpine: bool = False,
        debug: bool = False,
    ) -> None:
        self.config = config if config is not None else ConversionConfig(htmx=htmx, alpine=alpine)
        self.debug = bool(debug)

    def _debug(self, message: str, indent: int = 0) -> None:
        if self.debug:
            print(f"{' ' * indent}{message}", file=sys.stderr)

    def convert(self, html: str) -> str:
        html = html.strip()
        imports = ImportSet()
        mapper = AttributeMapper(htmx=self.config.htmx, alpine=self.config.alpine, imports=imports)
        emitter = Emitter(mapper, debug=self.debug)

        if is_full_page(html):
            self._debug("Classified input as full page")
            body = self._convert_page(html, emitter)
        else:
            self._debug("Classified input as fragment")
            body = self._convert_fragment(html, emitter)

        self._debug(f"Imports: {', '.join(imports)}")
        return f"package {self.config.package}\n\n{imports.render()}\n{body}"

    def _convert_page(self, html: str, emitter: Emitter) -> str:
        document = parse_document(html, strict=self.config.strict)
        root = find_root(document)
        if root is None:
            raise NoRootFoundError
        code = emitter.emit(root, 1)
        return f"func {PAGE_FUNCTION}() Node {{\n{INDENT}return {code}\n}}\n"

    def _convert_fragment(self, html: str, emitter: Emitter) -> str:
        fragment = parse_fragment(html, container=self.config.fragment_container, strict=self.config.strict)
        if not fragment.children:
            raise NoFragmentsFoundError

        content = []
        for node in fragment.children:
            extracted = extract_content(node)
            if len(extracted) != 1 or extracted[0] is not node:
                self._debug(f"Unwrapped {node!r} into {len(extracted)} node(s)", indent=2)
            content.extend(extracted)

        nodes = meaningful_nodes(content)
        if not nodes:
            raise NoConvertibleContentError
        self._debug(f"{len(nodes)} top-level node(s)", indent=2)

        if len(nodes) == 1:
            code = emitter.emit(nodes[0], 1)
            return f"func {COMPONENT_FUNCTION}() Node {{\n{INDENT}return {code}\n}}\n"

        lines = [f"func {COMPONENTS_FUNCTION}() []Node {{", f"{INDENT}return []Node{{"]
        lines.extend(f"{INDENT * 2}{emitter.emit(node, 2)}," for node in nodes)
        lines.append(f"{INDENT}}}")
        lines.append("}")
        return "\n".join(lines) + "\n"


def convert(
    html: str,
    *,
    htmx: bool = False,
    alpine: bool = False,
    package: str = "main",
    fragment_container: str = "div",
    strict: bool = False,
    debug: bool = False,
) -> str:
    """Convert markup in one call. See Converter.convert()."""
    config = ConversionConfig(
        htmx=htmx,
        alpine=alpine,
        package=package,
        fragment_container=fragment_container,
        strict=strict,
    )
    return Converter(config, debug=debug).convert(html)
