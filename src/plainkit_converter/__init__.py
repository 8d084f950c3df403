from .attributes import AttributeMapper
from .config import ConversionConfig
from .converter import Converter, convert
from .errors import (
    ConversionError,
    NoConvertibleContentError,
    NoFragmentsFoundError,
    NoRootFoundError,
    ParseError,
)
from .fragment import is_full_page
from .imports import ImportSet
from .parser import parse_document, parse_fragment
from .serialize import to_test_format
from .tags import resolve_tag

__version__ = "1.0.0"

__all__ = [
    "AttributeMapper",
    "ConversionConfig",
    "ConversionError",
    "Converter",
    "ImportSet",
    "NoConvertibleContentError",
    "NoFragmentsFoundError",
    "NoRootFoundError",
    "ParseError",
    "convert",
    "is_full_page",
    "parse_document",
    "parse_fragment",
    "resolve_tag",
    "to_test_format",
]
