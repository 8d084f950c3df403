"""Tag name to Plain element function resolution."""

from __future__ import annotations

from .constants import CONTEXT_TAGS, TAG_FUNCTIONS
from .node import Element


def capitalize(name: str) -> str:
    # Only the first character changes: "foreignObject" -> "ForeignObject"
    return name[:1].upper() + name[1:]


def resolve_tag(node: Element) -> str:
    """Return the Plain function for an element.

    `title` and `label` depend on their ancestors (HeadTitle inside <head>,
    FormLabel inside <form>). Tags missing from the table are capitalized.
    """
    name = node.name
    function = TAG_FUNCTIONS.get(name)
    if function is not None:
        return function

    context = CONTEXT_TAGS.get(name)
    if context is not None:
        ancestor, inside, elsewhere = context
        return inside if node.has_ancestor(ancestor) else elsewhere

    return capitalize(name)
