"""
XML serialization with pretty-printing.
"""

import re
from typing import Dict, Optional

import structlog
from lxml import etree

from .types import FormattingError, FormattingOptions, XMLConfig


logger = structlog.get_logger(__name__)


class XMLFormatter:
    """
    Serializes lxml trees to bytes.

    Pretty output puts the root on its own line and indents each nesting
    level by ``FormattingOptions.indent``.
    """

    def __init__(self, config: Optional[XMLConfig] = None):
        """
        Initialize XML formatter.

        Args:
            config: XML configuration
        """
        self.config = config or XMLConfig()
        self.options: FormattingOptions = self.config.formatting
        self.logger = logger.bind(component="XMLFormatter")

        self.stats = {
            "documents_formatted": 0,
            "bytes_written": 0,
        }

    def serialize(self, root: etree._Element) -> bytes:
        """
        Serialize an element tree according to configuration.

        Args:
            root: Root element of the document

        Returns:
            Encoded XML document
        """
        try:
            if self.options.pretty_print:
                xml_bytes = self._format_pretty(root)
            else:
                xml_bytes = self._format_compact(root)

            xml_bytes = self._post_process(xml_bytes)

        except (ValueError, LookupError, etree.LxmlError) as e:
            self.logger.error("Error formatting XML", error=str(e))
            raise FormattingError(f"XML formatting failed: {e}") from e

        self.stats["documents_formatted"] += 1
        self.stats["bytes_written"] += len(xml_bytes)

        self.logger.debug("XML formatting completed",
                          root=root.tag,
                          formatted_length=len(xml_bytes))

        return xml_bytes

    def _format_pretty(self, root: etree._Element) -> bytes:
        """Format XML with pretty-printing."""
        etree.indent(root, space=self.options.indent)

        return etree.tostring(
            root.getroottree(),
            pretty_print=True,
            xml_declaration=self.config.xml_declaration,
            encoding=self.config.encoding,
        )

    def _format_compact(self, root: etree._Element) -> bytes:
        """Format XML in compact form."""
        self._remove_whitespace_recursively(root)

        return etree.tostring(
            root.getroottree(),
            method="xml",
            xml_declaration=self.config.xml_declaration,
            encoding=self.config.encoding,
        )

    def _remove_whitespace_recursively(self, element: etree._Element) -> None:
        """Remove whitespace-only text between elements."""
        if len(element) and element.text and element.text.isspace():
            element.text = None

        for child in element:
            if child.tail and child.tail.isspace():
                child.tail = None
            self._remove_whitespace_recursively(child)

    def _post_process(self, xml_bytes: bytes) -> bytes:
        """Normalize line endings and the trailing newline."""
        xml_bytes = re.sub(rb"\r\n|\r", b"\n", xml_bytes)

        if self.options.trailing_newline and not xml_bytes.endswith(b"\n"):
            xml_bytes += b"\n"

        return xml_bytes

    def get_formatting_stats(self) -> Dict[str, int]:
        """Get formatting statistics."""
        return self.stats.copy()

    def reset_stats(self) -> None:
        """Reset formatting statistics."""
        for key in self.stats:
            self.stats[key] = 0
