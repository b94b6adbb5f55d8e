"""
Record dumping: project a sequence of values onto a pretty-printed XML file.

Output shape for records of type ``Person`` with properties name and age::

    <persons>
      <person>
        <name>Alice</name>
        <age>25</age>
      </person>
    </persons>
"""

import time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import structlog
from lxml import etree

from xmlparser.core.config import get_settings

from .formatter import XMLFormatter
from .properties import (
    PropertyReader,
    element_name_for,
    validate_property_names,
)
from .types import (
    DumpFailedError,
    DumpResult,
    PathLike,
    RecordDescriptor,
    XMLConfig,
)
from .utils import safe_xml_operation


logger = structlog.get_logger(__name__)


class RecordXMLDumper:
    """
    Converts homogeneous record sequences to XML documents.

    The record element is named after the lower-cased class name of the
    first value and the root after its plural (``+ "s"``). Every value uses
    that name, whatever its own class.
    """

    def __init__(self, config: Optional[XMLConfig] = None):
        """
        Initialize record dumper.

        Args:
            config: XML configuration
        """
        self.config = config or XMLConfig.from_settings(get_settings())
        self.formatter = XMLFormatter(self.config)
        self.logger = logger.bind(component="RecordXMLDumper")

        self.stats = {
            "total_dumps": 0,
            "failed_dumps": 0,
            "records_written": 0,
            "total_processing_time": 0.0,
        }

    def dump_file(
        self,
        values: Iterable[Any],
        path: PathLike,
        property_names: Optional[Sequence[str]] = None,
        element_name: Optional[str] = None,
        descriptor: Optional[RecordDescriptor] = None,
    ) -> DumpResult:
        """
        Write records to an XML file, replacing any existing file.

        Args:
            values: Records to write
            path: Destination file path
            property_names: Properties written for each record, in order
            element_name: Record element name; derived from values[0] if omitted
            descriptor: Explicit element name and property readers

        Returns:
            Dump result with the written document

        Raises:
            AccessorMissingError: If a property cannot be read from a record
            DumpFailedError: On any other construction or write failure
        """
        output_path = Path(path)
        values = self._as_list(values, output_path)

        with safe_xml_operation("xml_dump", output_path, records=len(values)):
            result = self._dump(values, property_names, element_name, descriptor, output_path)

            try:
                with open(output_path, "wb") as f:
                    f.write(result.xml_content)
            except OSError as e:
                self.stats["failed_dumps"] += 1
                raise DumpFailedError(f"Error writing XML: {e}", output_path) from e

            self.stats["records_written"] += result.record_count
            return result

    def dump_string(
        self,
        values: Iterable[Any],
        property_names: Optional[Sequence[str]] = None,
        element_name: Optional[str] = None,
        descriptor: Optional[RecordDescriptor] = None,
    ) -> str:
        """Serialize records to an XML string."""
        values = self._as_list(values)
        result = self._dump(values, property_names, element_name, descriptor)
        self.stats["records_written"] += result.record_count
        return result.xml_content.decode(self.config.encoding)

    def _as_list(self, values: Iterable[Any], path: Optional[Path] = None) -> List[Any]:
        try:
            return list(values)
        except TypeError as e:
            self.stats["total_dumps"] += 1
            self.stats["failed_dumps"] += 1
            raise DumpFailedError(f"Records must be iterable: {e}", path) from e

    def _dump(
        self,
        values: Sequence[Any],
        property_names: Optional[Sequence[str]],
        element_name: Optional[str],
        descriptor: Optional[RecordDescriptor],
        path: Optional[Path] = None,
    ) -> DumpResult:
        start_time = time.time()
        self.stats["total_dumps"] += 1

        try:
            root = self.build_document(values, property_names, element_name, descriptor)
            xml_content = self.formatter.serialize(root)
        except DumpFailedError as e:
            self.stats["failed_dumps"] += 1
            if e.path is None:
                e.path = path
            raise
        except Exception as e:
            self.stats["failed_dumps"] += 1
            raise DumpFailedError(f"Error writing XML: {e}", path) from e

        dump_time = time.time() - start_time
        self.stats["total_processing_time"] += dump_time

        result = DumpResult(
            xml_content=xml_content,
            record_count=len(values),
            property_count=len(root[0]) if len(root) else 0,
            root_name=root.tag,
            dump_time=dump_time,
        )

        self.logger.debug("Record dump built", summary=result.summary())
        return result

    def build_document(
        self,
        values: Sequence[Any],
        property_names: Optional[Sequence[str]] = None,
        element_name: Optional[str] = None,
        descriptor: Optional[RecordDescriptor] = None,
    ) -> etree._Element:
        """
        Build the element tree for a record sequence.

        Args:
            values: Records to convert
            property_names: Properties to emit; defaults to the descriptor's readers
            element_name: Record element name override
            descriptor: Explicit naming and property readers

        Returns:
            Root element of the new document
        """
        values = list(values)
        singular, plural = self._element_names(values, element_name, descriptor)

        if property_names is None:
            if descriptor is None:
                raise DumpFailedError("Property names are required without a descriptor")
            property_names = descriptor.property_names
        names = validate_property_names(property_names)

        reader = PropertyReader(descriptor)

        try:
            root = etree.Element(plural)
            for value in values:
                record_elem = etree.SubElement(root, singular)
                for property_name in names:
                    property_elem = etree.SubElement(record_elem, property_name)
                    property_elem.text = reader.read_text(value, property_name)
        except ValueError as e:
            # invalid tag names and XML-incompatible characters
            raise DumpFailedError(f"Error building XML: {e}") from e

        self.logger.debug("Built record document",
                          root=plural,
                          records=len(values),
                          properties=len(names))
        return root

    def _element_names(
        self,
        values: Sequence[Any],
        element_name: Optional[str],
        descriptor: Optional[RecordDescriptor],
    ) -> Tuple[str, str]:
        if element_name:
            singular = element_name
        elif descriptor is not None:
            singular = descriptor.singular_name
        elif values:
            singular = element_name_for(values[0])
        else:
            raise DumpFailedError(
                "Cannot derive element name from an empty sequence; "
                "pass element_name or a descriptor"
            )
        return singular, f"{singular}s"

    def get_statistics(self) -> Dict[str, Any]:
        """Get dump statistics."""
        total = self.stats["total_dumps"]
        return {
            **self.stats,
            "success_rate": (total - self.stats["failed_dumps"]) / max(1, total),
            "formatter": self.formatter.get_formatting_stats(),
        }


def dump_to_file(
    values: Iterable[Any],
    path: PathLike,
    property_names: Optional[Sequence[str]] = None,
    *,
    element_name: Optional[str] = None,
    descriptor: Optional[RecordDescriptor] = None,
    config: Optional[XMLConfig] = None,
) -> None:
    """
    Dump records as XML elements to a file.

    Example::

        persons = [Person("Alice", 25), Person("Bob", 30)]
        dump_to_file(persons, "output.xml", ["name", "age"])
    """
    RecordXMLDumper(config).dump_file(
        values, path, property_names, element_name=element_name, descriptor=descriptor
    )


def dump_to_string(
    values: Iterable[Any],
    property_names: Optional[Sequence[str]] = None,
    *,
    element_name: Optional[str] = None,
    descriptor: Optional[RecordDescriptor] = None,
    config: Optional[XMLConfig] = None,
) -> str:
    """Dump records as an XML string."""
    return RecordXMLDumper(config).dump_string(
        values, property_names, element_name=element_name, descriptor=descriptor
    )
