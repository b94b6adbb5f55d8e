"""
Unit tests for XML serialization.
"""

from lxml import etree

from xmlparser.xml_io import FormattingOptions, XMLConfig, XMLFormatter


def build_tree():
    root = etree.Element("items")
    item = etree.SubElement(root, "item")
    etree.SubElement(item, "name").text = "pen"
    return root


class TestXMLFormatter:
    """Test pretty and compact output."""

    def test_pretty_with_custom_indent(self):
        config = XMLConfig(xml_declaration=False, formatting=FormattingOptions(indent_size=4))

        output = XMLFormatter(config).serialize(build_tree())

        assert output == b"<items>\n    <item>\n        <name>pen</name>\n    </item>\n</items>\n"

    def test_compact(self):
        output = XMLFormatter(XMLConfig.compact()).serialize(build_tree())

        assert output == b"<items><item><name>pen</name></item></items>"

    def test_compact_strips_existing_indentation(self):
        root = etree.fromstring("<items>\n  <item>\n    <name>pen</name>\n  </item>\n</items>")

        output = XMLFormatter(XMLConfig.compact()).serialize(root)

        assert output == b"<items><item><name>pen</name></item></items>"

    def test_declaration(self):
        output = XMLFormatter(XMLConfig()).serialize(build_tree())

        assert output.startswith(b"<?xml version='1.0' encoding='UTF-8'?>\n<items>")

    def test_stats(self):
        formatter = XMLFormatter(XMLConfig())

        output = formatter.serialize(build_tree())

        stats = formatter.get_formatting_stats()
        assert stats["documents_formatted"] == 1
        assert stats["bytes_written"] == len(output)

        formatter.reset_stats()
        assert formatter.get_formatting_stats()["documents_formatted"] == 0
