"""
Tests for markup utilities.

Run with: pytest tests/test_xml_utils.py -v
"""

import codecs

from lxml import etree

from epubhtml_core.xml import (
    escape_markup,
    find_child_by_local_name,
    find_first_by_local_name,
    local_name,
    sniff_encoding,
)


class TestLocalName:
    """Tests for namespace-agnostic names."""

    def test_namespaced(self):
        elem = etree.Element("{http://www.idpf.org/2007/opf}package")
        assert local_name(elem) == "package"

    def test_plain(self):
        assert local_name(etree.Element("spine")) == "spine"

    def test_comment_has_no_name(self):
        assert local_name(etree.Comment("x")) == ""

    def test_find_helpers(self):
        root = etree.fromstring(
            '<a xmlns="urn:x"><b/><c><body id="inner"/></c><body id="outer"/></a>'
        )
        assert local_name(find_child_by_local_name(root, "c")) == "c"
        assert find_child_by_local_name(root, "missing") is None
        assert find_first_by_local_name(root, "body").get("id") == "inner"


class TestEscape:
    """Tests for escape_markup()."""

    def test_five_characters(self):
        assert escape_markup("<a href=\"x\">'&'</a>") == (
            "&lt;a href=&quot;x&quot;&gt;&#x27;&amp;&#x27;&lt;/a&gt;"
        )

    def test_plain_text_unchanged(self):
        assert escape_markup("Chapter 1") == "Chapter 1"


class TestSniffEncoding:
    """Tests for sniff_encoding()."""

    def test_default(self):
        assert sniff_encoding(b"<html><body>x</body></html>") == "utf-8"

    def test_bom(self):
        assert sniff_encoding(codecs.BOM_UTF8 + b"<html/>") == "utf-8"
        assert sniff_encoding(codecs.BOM_UTF16_LE + "<html/>".encode("utf-16-le")) == "utf-16"

    def test_xml_declaration(self):
        assert sniff_encoding(b'<?xml version="1.0" encoding="windows-1252"?><html/>') == "windows-1252"

    def test_meta_charset(self):
        data = b'<html><head><meta http-equiv="Content-Type" content="text/html; charset=ISO-8859-1"/></head></html>'
        assert sniff_encoding(data) == "iso-8859-1"

    def test_unknown_encoding_falls_back(self):
        assert sniff_encoding(b'<?xml version="1.0" encoding="no-such-codec"?><html/>') == "utf-8"
