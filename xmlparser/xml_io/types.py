"""
Type definitions for XML load/dump module.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Union

PathLike = Union[str, Path]


class XMLError(Exception):
    """Base exception for XML load/dump errors."""
    pass


class InputMissingError(XMLError):
    """Input path does not resolve to an existing regular file."""

    def __init__(self, message: str, path: Optional[PathLike] = None):
        self.path = path
        super().__init__(message)


class ParseFailedError(XMLError):
    """Input file exists but is not well-formed XML."""

    def __init__(
        self,
        message: str,
        path: Optional[PathLike] = None,
        line_number: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.path = path
        self.line_number = line_number
        self.column = column
        super().__init__(message)


class DumpFailedError(XMLError):
    """Records could not be written as an XML document."""

    def __init__(self, message: str, path: Optional[PathLike] = None):
        self.path = path
        super().__init__(message)


class AccessorMissingError(DumpFailedError):
    """No readable accessor for a declared property name."""

    def __init__(
        self,
        message: str,
        property_name: str,
        type_name: Optional[str] = None,
        path: Optional[PathLike] = None,
    ):
        self.property_name = property_name
        self.type_name = type_name
        super().__init__(message, path)


class FormattingError(DumpFailedError):
    """XML serialization error."""
    pass


class NodeKind(Enum):
    """Kinds of nodes a loaded document exposes."""
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    PROCESSING_INSTRUCTION = "processing_instruction"


@dataclass
class FormattingOptions:
    """Options for XML formatting."""

    pretty_print: bool = True
    indent_size: int = 2
    indent_char: str = " "

    # POSIX-friendly files
    trailing_newline: bool = True

    @property
    def indent(self) -> str:
        return self.indent_char * self.indent_size


@dataclass
class XMLConfig:
    """Configuration for XML load and dump operations."""

    # Output settings
    encoding: str = "UTF-8"
    xml_declaration: bool = True
    formatting: FormattingOptions = field(default_factory=FormattingOptions)

    # Parser settings. None leaves entity handling to lxml, which since
    # 5.0 expands internal entities only.
    resolve_entities: Optional[Union[bool, str]] = None
    huge_tree: bool = False
    remove_comments: bool = False
    remove_pis: bool = False

    # Whitespace-only text between elements is dropped from load results
    keep_whitespace_text: bool = False

    @classmethod
    def from_settings(cls, settings: Any) -> "XMLConfig":
        """Create configuration from application settings."""
        return cls(
            encoding=settings.encoding,
            xml_declaration=settings.xml_declaration,
            formatting=FormattingOptions(indent_size=settings.indent_size),
            resolve_entities=settings.resolve_entities,
            huge_tree=settings.huge_tree,
            keep_whitespace_text=settings.keep_whitespace_text,
        )

    @classmethod
    def for_debugging(cls) -> "XMLConfig":
        """Create configuration that keeps every node the parser sees."""
        return cls(keep_whitespace_text=True)

    @classmethod
    def compact(cls) -> "XMLConfig":
        """Create configuration for single-line output without a prolog."""
        return cls(
            xml_declaration=False,
            formatting=FormattingOptions(pretty_print=False, trailing_newline=False),
        )


@dataclass
class RecordDescriptor:
    """
    Explicit description of how records map to XML.

    Replaces type-name introspection and getter lookup: the caller names the
    record element and supplies one reader per property.
    """

    singular_name: str
    readers: Mapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    @property
    def property_names(self):
        return list(self.readers)

    def read(self, value: Any, property_name: str) -> Any:
        try:
            reader = self.readers[property_name]
        except KeyError:
            raise AccessorMissingError(
                f"No reader for property '{property_name}' in descriptor "
                f"'{self.singular_name}'",
                property_name=property_name,
                type_name=self.singular_name,
            )
        return reader(value)


@dataclass
class DumpResult:
    """Result of a record dump."""

    xml_content: bytes
    record_count: int
    property_count: int
    root_name: str
    dump_time: float = 0.0

    @property
    def elements_created(self) -> int:
        return 1 + self.record_count * (1 + self.property_count)

    def summary(self) -> str:
        return (
            f"XML dump <{self.root_name}>: "
            f"{self.record_count} records, "
            f"{self.elements_created} elements, "
            f"{len(self.xml_content)} bytes"
        )

