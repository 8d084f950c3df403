"""Go literal and call rendering.

Lengths are measured in UTF-8 bytes, matching how Go tooling counts them.
"""

from __future__ import annotations

from .constants import INDENT, MAX_INLINE_ARGS, MAX_INLINE_WIDTH, RAW_LITERAL_MARKERS, RAW_LITERAL_MIN_LENGTH

_BACKTICK_SPLICE = '` + "`" + `'


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


def needs_raw_literal(value: str) -> bool:
    """True for multi-line values and long values that look like script."""
    if "\n" in value:
        return True
    return _byte_length(value) > RAW_LITERAL_MIN_LENGTH and any(marker in value for marker in RAW_LITERAL_MARKERS)


def quote_value(value: str) -> str:
    """Render value as a Go string literal.

    Multi-line and script-like values become backtick literals, with embedded
    backticks spliced in as a separate interpreted string. Everything else is
    a double-quoted literal.
    """
    if needs_raw_literal(value):
        return f"`{value.replace('`', _BACKTICK_SPLICE)}`"
    escaped = value.replace('"', '\\"')
    return f'"{escaped}"'


def go_bool(value: bool) -> str:
    return "true" if value else "false"


def needs_multiline(args: list[str]) -> bool:
    if len(args) > MAX_INLINE_ARGS:
        return True
    if any("\n" in arg for arg in args):
        return True
    return _byte_length(", ".join(args)) > MAX_INLINE_WIDTH


def format_call(name: str, args: list[str], depth: int = 0) -> str:
    """Render `name(args...)`.

    Short argument lists stay on one line. Otherwise each argument goes on its
    own line one level deeper than `depth`, followed by a comma, and the
    closing parenthesis returns to `depth`.
    """
    if not args:
        return f"{name}()"
    if not needs_multiline(args):
        return f"{name}({', '.join(args)})"
    inner = INDENT * (depth + 1)
    lines = [f"{name}("]
    lines.extend(f"{inner}{arg}," for arg in args)
    lines.append(f"{INDENT * depth})")
    return "\n".join(lines)
