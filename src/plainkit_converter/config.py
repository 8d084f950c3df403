"""Conversion options."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ConversionConfig:
    """Options for a single conversion.

    - `htmx`: map `hx-*` attributes to the htmx package.
    - `alpine`: map `x-*`, `@event` and `:attr` attributes to the alpine package.
    - `package`: Go package clause of the generated file.
    - `fragment_container`: context element used when parsing fragments.
    - `strict`: fail with ParseError on the first markup error instead of
      recovering the way browsers do.
    """

    htmx: bool = False
    alpine: bool = False
    package: str = "main"
    fragment_container: str = "div"
    strict: bool = False

    def __post_init__(self) -> None:
        package = str(self.package).strip()
        if not package:
            raise ValueError("package name must not be empty")
        container = str(self.fragment_container).strip().lower()
        if not container:
            raise ValueError("fragment container must not be empty")
        object.__setattr__(self, "package", package)
        object.__setattr__(self, "fragment_container", container)
        object.__setattr__(self, "htmx", bool(self.htmx))
        object.__setattr__(self, "alpine", bool(self.alpine))
        object.__setattr__(self, "strict", bool(self.strict))
