"""
xmlparser: load XML files as node lists and dump record sequences as XML.

    >>> from xmlparser import dump_to_file, load_from_file
    >>> dump_to_file(persons, "persons.xml", ["name", "age"])
    >>> nodes = load_from_file("persons.xml")
    >>> nodes[0].find_text("name")
    'Alice'
"""

from .xml_io import (
    AccessorMissingError,
    DumpFailedError,
    InputMissingError,
    ParseFailedError,
    RecordDescriptor,
    XMLConfig,
    XMLError,
    XMLNode,
    dump_to_file,
    dump_to_string,
    load_from_file,
    load_from_string,
)

__version__ = "1.0.0"

__all__ = [
    "load_from_file",
    "load_from_string",
    "dump_to_file",
    "dump_to_string",
    "XMLNode",
    "XMLConfig",
    "RecordDescriptor",
    "XMLError",
    "InputMissingError",
    "ParseFailedError",
    "DumpFailedError",
    "AccessorMissingError",
]
