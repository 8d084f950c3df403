"""Import collection for generated files."""

from __future__ import annotations

from collections.abc import Iterator

from .constants import HTML_IMPORT, IMPORT_ORDER, INDENT


class ImportSet:
    """Deduplicated Go imports, always containing the core html package.

    Iteration and rendering follow IMPORT_ORDER regardless of the order in
    which imports were added.
    """

    __slots__ = ("_paths",)

    def __init__(self) -> None:
        self._paths = {HTML_IMPORT}

    def add(self, path: str) -> None:
        if path not in IMPORT_ORDER:
            msg = f"Unknown import path: {path}"
            raise ValueError(msg)
        self._paths.add(path)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[str]:
        return (path for path in IMPORT_ORDER if path in self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __repr__(self) -> str:
        return f"ImportSet({list(self)!r})"

    def render(self) -> str:
        """Render the `import ( ... )` block.

        The core package is dot-imported so element and attribute functions
        can be called unqualified.
        """
        lines = ["import ("]
        for path in self:
            if path == HTML_IMPORT:
                lines.append(f'{INDENT}. "{path}"')
            else:
                lines.append(f'{INDENT}"{path}"')
        lines.append(")")
        return "\n".join(lines) + "\n"
