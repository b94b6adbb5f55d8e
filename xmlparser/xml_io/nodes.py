"""
Read-only node views over parsed lxml documents.

Callers navigate loaded documents through XMLNode rather than lxml objects:
a node has a kind, an optional local name, text content, ordered children
and a ``find`` helper for the first descendant element by local name. The
raw lxml object stays available through ``XMLNode.element``.
"""

from typing import Any, Iterator, List, Optional
from xml.sax.saxutils import escape

from lxml import etree

from .types import NodeKind


class XMLNode:
    """View over one node of a parsed document."""

    __slots__ = ("kind", "_node", "_text", "_owner")

    def __init__(
        self,
        kind: NodeKind,
        node: Any = None,
        text: Optional[str] = None,
        owner: Any = None,
    ):
        self.kind = kind
        self._node = node
        self._text = text
        # Text nodes have no lxml object of their own; holding the parent
        # keeps the document alive for them too.
        self._owner = owner if owner is not None else node

    @classmethod
    def wrap(cls, node: Any) -> "XMLNode":
        """Create a view for an lxml element, comment, PI or entity."""
        if node.tag is etree.Comment:
            return cls(NodeKind.COMMENT, node)
        if node.tag is etree.ProcessingInstruction:
            return cls(NodeKind.PROCESSING_INSTRUCTION, node)
        if node.tag is etree.Entity:
            return cls(NodeKind.TEXT, text=node.text, owner=node)
        return cls(NodeKind.ELEMENT, node)

    @classmethod
    def text_node(cls, text: str, owner: Any) -> "XMLNode":
        return cls(NodeKind.TEXT, text=text, owner=owner)

    @property
    def is_element(self) -> bool:
        return self.kind is NodeKind.ELEMENT

    @property
    def element(self) -> Any:
        """The underlying lxml object, or None for text nodes."""
        return self._node

    @property
    def name(self) -> Optional[str]:
        """Local name for elements, target for processing instructions."""
        if self.kind is NodeKind.ELEMENT:
            return etree.QName(self._node).localname
        if self.kind is NodeKind.PROCESSING_INSTRUCTION:
            return self._node.target
        return None

    @property
    def text(self) -> str:
        """
        Direct text content of the node.

        For elements this joins the element's own text children without
        descending into child elements.
        """
        if self.kind is NodeKind.TEXT:
            return self._text or ""
        if self.kind is NodeKind.ELEMENT:
            parts = [self._node.text or ""]
            parts.extend(child.tail or "" for child in self._node)
            return "".join(parts)
        return self._node.text or ""

    @property
    def string_value(self) -> str:
        """All descendant text joined in document order."""
        if self.kind is NodeKind.ELEMENT:
            return str(self._node.xpath("string()"))
        return self.text

    @property
    def children(self) -> List["XMLNode"]:
        if self.kind is not NodeKind.ELEMENT:
            return []
        return element_content(self._node, keep_whitespace_text=True)

    def iter_elements(self) -> Iterator["XMLNode"]:
        """Iterate over descendant elements in document order."""
        if self.kind is not NodeKind.ELEMENT:
            return
        for descendant in self._node.iterdescendants():
            if isinstance(descendant.tag, str):
                yield XMLNode(NodeKind.ELEMENT, descendant)

    def find(self, name: str) -> Optional["XMLNode"]:
        """Return the first descendant element with the given local name."""
        for node in self.iter_elements():
            if node.name == name:
                return node
        return None

    def find_all(self, name: str) -> List["XMLNode"]:
        return [node for node in self.iter_elements() if node.name == name]

    def find_text(self, name: str, default: Optional[str] = None) -> Optional[str]:
        node = self.find(name)
        return node.text if node is not None else default

    def to_xml(self) -> str:
        """Serialize this node on its own."""
        if self.kind is NodeKind.TEXT:
            if self._owner is not None and self._owner.tag is etree.Entity:
                # unresolved entity reference, e.g. "&ent;"
                return self._owner.text
            return escape(self._text or "")
        return etree.tostring(self._node, encoding="unicode", with_tail=False)

    def __repr__(self) -> str:
        if self.kind is NodeKind.ELEMENT:
            return f"<XMLNode element name={self.name!r}>"
        preview = self.text if len(self.text) <= 30 else self.text[:27] + "..."
        return f"<XMLNode {self.kind.value} text={preview!r}>"


def element_content(element: Any, keep_whitespace_text: bool = False) -> List[XMLNode]:
    """
    Return every child node of an lxml element in document order.

    lxml keeps text as ``.text`` and ``.tail`` strings; those become TEXT
    nodes at the positions they occupy in the source. Whitespace-only text
    is formatting and is skipped unless ``keep_whitespace_text`` is set.
    """

    def wanted(text: Optional[str]) -> bool:
        if not text:
            return False
        return keep_whitespace_text or not text.isspace()

    content: List[XMLNode] = []

    if wanted(element.text):
        content.append(XMLNode.text_node(element.text, element))

    for child in element:
        content.append(XMLNode.wrap(child))
        if wanted(child.tail):
            content.append(XMLNode.text_node(child.tail, element))

    return content
