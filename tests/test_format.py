"""Tests for the html5lib tree builder and the test-format dump."""

import unittest

from html5lib.constants import namespaces

from plainkit_converter import to_test_format
from plainkit_converter.node import Comment, Doctype, Document, DocumentFragment, Element, Text
from plainkit_converter.parser import parse_document, parse_fragment
from plainkit_converter.treebuilder import AttributeView


class TestDocumentTrees(unittest.TestCase):
    def test_implied_structure(self):
        """Missing html/head/body are synthesized by the parser."""
        doc = parse_document("<p>Hi")
        assert isinstance(doc, Document)
        assert to_test_format(doc) == "\n".join(
            [
                "| <html>",
                "|   <head>",
                "|   <body>",
                "|     <p>",
                '|       "Hi"',
            ]
        )

    def test_doctype_and_comments(self):
        doc = parse_document("<!DOCTYPE html><!-- top --><html><body></body></html>")
        assert isinstance(doc.children[0], Doctype)
        assert isinstance(doc.children[1], Comment)
        assert to_test_format(doc).splitlines()[:2] == ["| <!DOCTYPE html>", "| <!--  top  -->"]

    def test_parent_links(self):
        doc = parse_document("<html><body><div><p>x</p></div></body></html>")
        html = doc.children[0]
        body = html.children[1]
        div = body.children[0]
        p = div.children[0]
        assert p.parent is div
        assert div.parent is body
        assert body.parent is html
        assert html.parent is doc
        assert doc.parent is None
        assert p.find_ancestor("body") is body
        assert p.find_ancestor("form") is None

    def test_attributes_keep_source_order(self):
        doc = parse_document('<html><body><a id="x" href="/" class="c">x</a></body></html>')
        a = doc.children[0].children[1].children[0]
        assert a.attrs == [("id", "x"), ("href", "/"), ("class", "c")]
        assert to_test_format(a).splitlines()[1:4] == [
            '|   class="c"',
            '|   href="/"',
            '|   id="x"',
        ]

    def test_misnested_formatting_keeps_tree_consistent(self):
        doc = parse_document("<b>1<p>2</b>3</p>")
        for node in doc.iter_descendants():
            assert node in node.parent.children

    def test_stray_html_tag_adds_missing_attributes(self):
        doc = parse_document('<html lang="en"><body><html lang="fr" dir="rtl">')
        assert doc.children[0].attrs == [("lang", "en"), ("dir", "rtl")]

    def test_reconstructed_formatting_element_keeps_repeated_attributes(self):
        doc = parse_document('<p><b class="x" class="y">1<p>2')
        body = doc.children[0].children[1]
        second_b = body.children[1].children[0]
        assert second_b.name == "b"
        assert second_b.attrs == [("class", "x"), ("class", "y")]


class TestFragmentTrees(unittest.TestCase):
    def test_fragment_has_no_wrappers(self):
        fragment = parse_fragment("<div>First</div><p>Second</p>")
        assert isinstance(fragment, DocumentFragment)
        assert [child.name for child in fragment.children] == ["div", "p"]
        assert all(child.parent is fragment for child in fragment.children)

    def test_adjacent_text_is_merged(self):
        fragment = parse_fragment("a&amp;b")
        assert len(fragment.children) == 1
        assert isinstance(fragment.children[0], Text)
        assert fragment.children[0].data == "a&b"

    def test_container_changes_parsing(self):
        assert [child.name for child in parse_fragment("<td>x</td>").children] == ["#text"]
        assert [child.name for child in parse_fragment("<td>x</td>", container="tr").children] == ["td"]

    def test_repeated_attributes_are_kept(self):
        div = parse_fragment('<div class="a" id="x" class="b"></div>').children[0]
        assert div.attrs == [("class", "a"), ("id", "x"), ("class", "b")]
        assert to_test_format(div).splitlines()[1:] == [
            '|   class="a"',
            '|   class="b"',
            '|   id="x"',
        ]

    def test_framework_attribute_names(self):
        fragment = parse_fragment('<button @click.prevent="go()" :class="c" x-on:keyup="k()">Go</button>')
        button = fragment.children[0]
        assert [name for name, _ in button.attrs] == ["@click.prevent", ":class", "x-on:keyup"]

    def test_foreign_elements(self):
        fragment = parse_fragment('<svg viewBox="0 0 10 10"><use xlink:href="#icon"></use></svg>')
        svg = fragment.children[0]
        use = svg.children[0]
        assert svg.namespace == namespaces["svg"]
        assert svg.attrs == [("viewBox", "0 0 10 10")]
        assert use.attrs == [("xlink:href", "#icon")]
        assert to_test_format(svg).splitlines()[0] == "| <svg svg>"

    def test_empty_fragment(self):
        assert parse_fragment("").children == []


class TestNodeModel(unittest.TestCase):
    def test_append_moves_child(self):
        first = Element("div")
        second = Element("div")
        child = Text("x")
        first.append_child(child)
        second.append_child(child)
        assert first.children == []
        assert second.children == [child]
        assert child.parent is second

    def test_insert_before(self):
        parent = Element("ul")
        a, b, c = Element("li"), Element("li"), Element("li")
        parent.append_child(a)
        parent.append_child(c)
        parent.insert_before(b, c)
        assert parent.children == [a, b, c]
        parent.insert_before(c, a)
        assert parent.children == [c, a, b]

    def test_attribute_view_over_repeated_names(self):
        element = Element("div", [("class", "a"), ("class", "b")])
        view = AttributeView(element)
        assert view["class"] == "a"
        assert list(view) == ["class"]
        assert len(view) == 1
        view["class"] = "c"
        view["id"] = "x"
        assert element.attrs == [("class", "c"), ("class", "b"), ("id", "x")]
        del view["class"]
        assert element.attrs == [("id", "x")]
        with self.assertRaises(KeyError):
            view["class"]

    def test_insert_before_missing_reference(self):
        with self.assertRaises(ValueError):
            Element("ul").insert_before(Element("li"), Element("li"))

    def test_iter_descendants_is_preorder(self):
        fragment = parse_fragment("<div><p>a</p><p>b</p></div><span></span>")
        names = [node.name for node in fragment.iter_descendants()]
        assert names == ["div", "p", "#text", "p", "#text", "span"]
