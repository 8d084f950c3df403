"""Attribute to Plain call conversion.

Each attribute is checked against three tiers in order and the first one
that claims it wins:

1. htmx (`hx-*`), when enabled
2. Alpine.js (`x-*`, `@event`, `:attr`), when enabled
3. standard HTML attributes, ending in an unconditional `Custom(key, value)`

No attribute is ever dropped. An attribute routed to the htmx or Alpine.js
tier records that package's import in the shared ImportSet, even when it
ends in the `Custom` fallback.
"""

from __future__ import annotations

from .constants import (
    ALPINE_BIND_PREFIX,
    ALPINE_BINDINGS,
    ALPINE_DEBOUNCE_PREFIX,
    ALPINE_DIRECTIVE_PREFIX,
    ALPINE_DIRECTIVES,
    ALPINE_EVENT_MODIFIERS,
    ALPINE_EVENT_PREFIX,
    ALPINE_EVENTS,
    ALPINE_NO_ARG_DIRECTIVES,
    ALPINE_ON_PREFIX,
    ALPINE_XBIND_PREFIX,
    BOOLEAN_ATTRIBUTES,
    CUSTOM_FUNCTION,
    HTMX_ATTRIBUTES,
    HTMX_BOOLEAN_ATTRIBUTES,
    HTMX_PREFIX,
    PREFIXED_ATTRIBUTES,
    QUALIFIED_IMPORTS,
    STANDARD_ATTRIBUTES,
    TAG_SPECIFIC_ATTRIBUTES,
    TRUE_LITERAL,
)
from .formatting import go_bool, quote_value
from .imports import ImportSet

TIER_HTMX = "htmx"
TIER_ALPINE = "alpine"
TIER_STANDARD = "standard"


class AttributeMapper:
    __slots__ = ("alpine", "htmx", "imports")

    def __init__(self, *, htmx: bool = False, alpine: bool = False, imports: ImportSet | None = None) -> None:
        self.htmx = htmx
        self.alpine = alpine
        self.imports = imports if imports is not None else ImportSet()

    def tier(self, key: str) -> str:
        """Name of the tier that will handle key."""
        if self.htmx and key.startswith(HTMX_PREFIX):
            return TIER_HTMX
        if self.alpine and key.startswith((ALPINE_DIRECTIVE_PREFIX, ALPINE_EVENT_PREFIX, ALPINE_BIND_PREFIX)):
            return TIER_ALPINE
        return TIER_STANDARD

    def convert(self, key: str, value: str | None, tag_name: str) -> str:
        """Return the call expression for one attribute of a `tag_name` element."""
        value = value or ""
        tier = self.tier(key)
        if tier != TIER_STANDARD:
            self.imports.add(QUALIFIED_IMPORTS[tier])
        if tier == TIER_HTMX:
            return self._convert_htmx(key, value)
        if tier == TIER_ALPINE:
            if key.startswith(ALPINE_DIRECTIVE_PREFIX):
                return self._convert_alpine_directive(key, value)
            if key.startswith(ALPINE_EVENT_PREFIX):
                return self._convert_alpine_event(key, value)
            return self._convert_alpine_bind(key, value)
        return self._convert_standard(key, value, tag_name)

    def _qualified(self, package: str, function: str, *args: str) -> str:
        return f"{package}.{function}({', '.join(args)})"

    def _custom(self, key: str, value: str) -> str:
        return f"{CUSTOM_FUNCTION}({quote_value(key)}, {quote_value(value)})"

    def _convert_standard(self, key: str, value: str, tag_name: str) -> str:
        function = TAG_SPECIFIC_ATTRIBUTES.get((tag_name, key))
        if function is not None:
            return f"{function}({quote_value(value)})"

        function = BOOLEAN_ATTRIBUTES.get(key)
        if function is not None:
            return f"{function}()"

        function = STANDARD_ATTRIBUTES.get(key)
        if function is not None:
            return f"{function}({quote_value(value)})"

        for prefix, function in PREFIXED_ATTRIBUTES:
            if key.startswith(prefix):
                return f"{function}({quote_value(key[len(prefix) :])}, {quote_value(value)})"

        return self._custom(key, value)

    def _convert_htmx(self, key: str, value: str) -> str:
        function = HTMX_ATTRIBUTES.get(key)
        if function is None:
            return self._custom(key, value)
        if key in HTMX_BOOLEAN_ATTRIBUTES:
            if value == TRUE_LITERAL:
                return self._qualified("htmx", function)
            return self._qualified("htmx", function, go_bool(value == TRUE_LITERAL))
        return self._qualified("htmx", function, quote_value(value))

    def _convert_alpine_directive(self, key: str, value: str) -> str:
        if key.startswith(ALPINE_ON_PREFIX):
            event = key[len(ALPINE_ON_PREFIX) :]
            return self._qualified("alpine", "XOn", quote_value(event), quote_value(value))

        if key.startswith(ALPINE_XBIND_PREFIX):
            attr = key[len(ALPINE_XBIND_PREFIX) :]
            return self._qualified("alpine", "XBind", quote_value(attr), quote_value(value))

        if key.startswith(ALPINE_DEBOUNCE_PREFIX):
            parts = key.split(".")
            # x-model.debounce.<delay>; a bare x-model.debounce falls through
            if len(parts) > 2:
                return self._qualified("alpine", "XModelDebounce", quote_value(value), quote_value(parts[2]))

        function = ALPINE_DIRECTIVES.get(key)
        if function is None:
            return self._custom(key, value)
        if key in ALPINE_NO_ARG_DIRECTIVES:
            return self._qualified("alpine", function)
        return self._qualified("alpine", function, quote_value(value))

    def _convert_alpine_event(self, key: str, value: str) -> str:
        event_spec = key[len(ALPINE_EVENT_PREFIX) :]
        event, has_modifiers, _ = event_spec.partition(".")

        if has_modifiers:
            function = ALPINE_EVENT_MODIFIERS.get(event_spec)
            if function is not None:
                return self._qualified("alpine", function, quote_value(value))
            # Unknown event+modifier combinations keep the original spelling
            return self._custom(key, value)

        function = ALPINE_EVENTS.get(event)
        if function is not None:
            return self._qualified("alpine", function, quote_value(value))
        return self._qualified("alpine", "At", quote_value(event), quote_value(value))

    def _convert_alpine_bind(self, key: str, value: str) -> str:
        attr = key[len(ALPINE_BIND_PREFIX) :]
        function = ALPINE_BINDINGS.get(attr)
        if function is not None:
            return self._qualified("alpine", function, quote_value(value))
        return self._qualified("alpine", "Colon", quote_value(attr), quote_value(value))
