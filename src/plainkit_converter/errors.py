"""Conversion errors.

All errors are final: conversion is a pure function of its input, so
retrying with the same markup and options always fails the same way.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for everything the converter raises."""

    kind = "ConversionError"


class ParseError(ConversionError):
    """The markup parser rejected the input (strict mode only)."""

    kind = "ParseError"


class NoRootFoundError(ConversionError):
    """A full page was parsed but contains no <html> element."""

    kind = "NoRootFound"

    def __init__(self, message: str = "no html element found") -> None:
        super().__init__(message)


class NoFragmentsFoundError(ConversionError):
    """Fragment parsing produced no nodes at all."""

    kind = "NoFragmentsFound"

    def __init__(self, message: str = "no fragments found") -> None:
        super().__init__(message)


class NoConvertibleContentError(ConversionError):
    """Fragment nodes existed but none of them carry content."""

    kind = "NoConvertibleContent"

    def __init__(self, message: str = "no convertible content found") -> None:
        super().__init__(message)
