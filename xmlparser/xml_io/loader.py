"""
XML loading: parse a document and expose the root element's content.
"""

from typing import Any, Dict, List, Optional

import structlog
from lxml import etree

from xmlparser.core.config import get_settings

from .nodes import XMLNode, element_content
from .types import ParseFailedError, PathLike, XMLConfig
from .utils import is_empty_file, safe_xml_operation, validate_input_path


logger = structlog.get_logger(__name__)


class XMLLoader:
    """
    Loads XML documents as a flat list of the root element's children.

    The root element itself is never part of the result. Comments,
    processing instructions and non-blank text directly under the root are
    returned alongside elements, in document order.
    """

    def __init__(self, config: Optional[XMLConfig] = None):
        """
        Initialize XML loader.

        Args:
            config: XML configuration
        """
        self.config = config or XMLConfig.from_settings(get_settings())
        self.logger = logger.bind(component="XMLLoader")

        self.stats = {
            "files_loaded": 0,
            "empty_files": 0,
            "parse_failures": 0,
            "nodes_returned": 0,
        }

    def _make_parser(self, encoding: Optional[str] = None) -> etree.XMLParser:
        options = {
            "huge_tree": self.config.huge_tree,
            "remove_comments": self.config.remove_comments,
            "remove_pis": self.config.remove_pis,
        }
        # only override lxml's entity policy when asked to
        if self.config.resolve_entities is not None:
            options["resolve_entities"] = self.config.resolve_entities
        if encoding is not None:
            options["encoding"] = encoding
        return etree.XMLParser(**options)

    def load_file(self, path: PathLike) -> List[XMLNode]:
        """
        Load an XML file.

        Args:
            path: Path to the XML file

        Returns:
            Child nodes of the root element in document order

        Raises:
            InputMissingError: If the file does not exist
            ParseFailedError: If the file is not well-formed XML
        """
        input_path = validate_input_path(path)

        with safe_xml_operation("xml_load", input_path) as op_logger:
            if is_empty_file(input_path):
                # parsers reject zero-byte input
                self.stats["empty_files"] += 1
                op_logger.debug("Empty XML file, skipping parse")
                return []

            try:
                tree = etree.parse(str(input_path), self._make_parser())
            except etree.XMLSyntaxError as e:
                raise self._parse_error(e, input_path) from e
            except (OSError, LookupError, ValueError, etree.LxmlError) as e:
                self.stats["parse_failures"] += 1
                raise ParseFailedError(f"Error reading XML: {e}", input_path) from e

            nodes = self._root_content(tree.getroot())
            self.stats["files_loaded"] += 1
            op_logger.debug("Parsed XML file", root=tree.getroot().tag, nodes=len(nodes))
            return nodes

    def load_string(self, xml_content: Any) -> List[XMLNode]:
        """
        Load an XML document held in memory.

        Args:
            xml_content: Document as str or bytes

        Returns:
            Child nodes of the root element in document order
        """
        if not xml_content:
            self.stats["empty_files"] += 1
            return []

        encoding = None
        if isinstance(xml_content, str):
            # lxml refuses str input carrying an encoding declaration, and the
            # declared encoding no longer describes the UTF-8 bytes
            xml_content = xml_content.encode("utf-8")
            encoding = "utf-8"

        with safe_xml_operation("xml_load_string", content_length=len(xml_content)):
            try:
                root = etree.fromstring(xml_content, self._make_parser(encoding))
            except etree.XMLSyntaxError as e:
                raise self._parse_error(e) from e
            except (LookupError, ValueError, etree.LxmlError) as e:
                self.stats["parse_failures"] += 1
                raise ParseFailedError(f"Error reading XML: {e}") from e

            self.stats["files_loaded"] += 1
            return self._root_content(root)

    def _root_content(self, root: etree._Element) -> List[XMLNode]:
        nodes = element_content(root, keep_whitespace_text=self.config.keep_whitespace_text)
        self.stats["nodes_returned"] += len(nodes)
        return nodes

    def _parse_error(self, error: etree.XMLSyntaxError, path: Optional[PathLike] = None) -> ParseFailedError:
        """Create a ParseFailedError from an lxml syntax error."""
        self.stats["parse_failures"] += 1
        line, column = error.position if error.position else (None, None)
        message = error.msg or str(error)

        self.logger.warning("XML parse error",
                            message=message,
                            line=line,
                            column=column,
                            path=str(path) if path is not None else None)

        return ParseFailedError(
            f"Error reading XML: {message}",
            path=path,
            line_number=line,
            column=column,
        )

    def get_statistics(self) -> Dict[str, int]:
        """Get loader statistics."""
        return self.stats.copy()


def load_from_file(path: PathLike, config: Optional[XMLConfig] = None) -> List[XMLNode]:
    """
    Load an XML file and return the root element's children.

    Example::

        for node in load_from_file("employees.xml"):
            print(node.find_text("name"))
    """
    return XMLLoader(config).load_file(path)


def load_from_string(xml_content: Any, config: Optional[XMLConfig] = None) -> List[XMLNode]:
    """Load an in-memory XML document and return the root element's children."""
    return XMLLoader(config).load_string(xml_content)
