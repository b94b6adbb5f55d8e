"""
XML load and dump for record-oriented documents.

This module provides:
- Loading a file as the ordered children of its root element
- Library-independent node views with ``find`` navigation
- Dumping homogeneous records as ``<{type}s><{type}>...`` documents
- Pretty-printed, lxml-backed serialization
"""

from .dumper import RecordXMLDumper, dump_to_file, dump_to_string
from .formatter import XMLFormatter
from .loader import XMLLoader, load_from_file, load_from_string
from .nodes import XMLNode
from .properties import PropertyReader, render_value
from .types import (
    AccessorMissingError,
    DumpFailedError,
    DumpResult,
    FormattingError,
    FormattingOptions,
    InputMissingError,
    NodeKind,
    ParseFailedError,
    RecordDescriptor,
    XMLConfig,
    XMLError,
)

__all__ = [
    # Core classes
    "XMLLoader",
    "RecordXMLDumper",
    "XMLFormatter",
    "PropertyReader",
    "XMLNode",
    # Functions
    "load_from_file",
    "load_from_string",
    "dump_to_file",
    "dump_to_string",
    "render_value",
    # Configuration
    "XMLConfig",
    "FormattingOptions",
    "RecordDescriptor",
    "DumpResult",
    "NodeKind",
    # Exceptions
    "XMLError",
    "InputMissingError",
    "ParseFailedError",
    "DumpFailedError",
    "AccessorMissingError",
    "FormattingError",
]
