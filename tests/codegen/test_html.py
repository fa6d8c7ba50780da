"""Tests for the static HTML generator."""

from html.parser import HTMLParser

import pytest

from ferrum.ast import Component, Element, Import, StateBinding, Text
from ferrum.codegen import DEFAULT_TITLE, load_stylesheet, to_html, to_html_body
from ferrum.parser import parse

VOID_TAGS = {"input", "img", "br", "hr", "meta", "link"}


class _TagBalance(HTMLParser):
    """Collects unbalanced tags while reading a document."""

    def __init__(self):
        super().__init__()
        self.stack = []
        self.errors = []

    def handle_starttag(self, tag, attrs):
        if tag not in VOID_TAGS:
            self.stack.append(tag)

    def handle_startendtag(self, tag, attrs):
        pass

    def handle_endtag(self, tag):
        if not self.stack or self.stack.pop() != tag:
            self.errors.append(tag)


def assert_well_formed(document: str) -> None:
    assert document.startswith("<!DOCTYPE html>")
    checker = _TagBalance()
    checker.feed(document)
    checker.close()
    assert checker.errors == []
    assert checker.stack == []


@pytest.mark.scenario
def test_welcome_page(welcome_forest):
    document = to_html(welcome_forest)

    assert "<div id='app' class='container'>" in document
    assert "<h1 class='title'>Hello World</h1>" in document
    assert "<p class='text-gray-600'>Welcome</p>" in document
    assert_well_formed(document)


def test_document_shell():
    document = to_html([])

    assert document.startswith("<!DOCTYPE html>\n<html lang='en'>")
    assert f"<title>{DEFAULT_TITLE}</title>" in document
    assert "<div id='ferrum-app'></div>" in document
    assert load_stylesheet().strip() in document
    assert document.endswith("</html>\n")


def test_title_is_escaped():
    assert "<title>Tom &amp; Jerry</title>" in to_html([], title="Tom & Jerry")


def test_stylesheet_is_packaged():
    stylesheet = load_stylesheet()
    assert "[data-component]" in stylesheet
    assert load_stylesheet() is stylesheet


class TestBody:
    """Per-node rendering."""

    def test_nested_elements(self):
        forest = [Element("ul", {}, (Element("li", {}, (Text("One"),)), Element("li", {}, (Text("Two"),))))]
        assert to_html_body(forest) == "<ul><li>One</li><li>Two</li></ul>"

    def test_void_elements(self):
        forest = [Element("input", {"id": "q", "type": "text"}), Element("br")]
        assert to_html_body(forest) == "<input id='q' type='text' /><br />"

    def test_component_wrapper(self, counter_source):
        body = to_html_body(parse(counter_source))

        assert "<div data-component='Button' data-onclick='set_count(-1)'>-</div>" in body
        assert "<div data-component='Button' data-onclick='set_count(1)'>+</div>" in body

    def test_component_without_arguments(self):
        assert to_html_body([Component("Card")]) == "<div data-component='Card'></div>"

    def test_component_name_is_not_overridden(self):
        node = Component("Card", {"component": "Other", "size": "2"})
        assert to_html_body([node]) == "<div data-component='Card' data-size='2'></div>"

    def test_text_is_not_escaped(self):
        assert to_html_body([Text("<b>bold</b> & more")]) == "<b>bold</b> & more"

    def test_bindings_and_imports_render_nothing(self):
        forest = [Import(("Button",), "./button"), StateBinding("count"), Element("p", {}, (StateBinding("count", "value"),))]
        assert to_html_body(forest) == "<p></p>"

    def test_unknown_node_type(self):
        with pytest.raises(TypeError):
            to_html_body(["div"])


@pytest.mark.parametrize("source_fixture", ["welcome_source", "counter_source", "form_source"])
def test_documents_are_well_formed(request, source_fixture):
    assert_well_formed(to_html(parse(request.getfixturevalue(source_fixture))))


def test_every_node_kind_renders():
    source = '''import { Card } from "./card"
main#root
    Card(title: "Hi")
        section.body
            img src="/logo.png"
                "ignored"
            <my-widget data-x="1">Text</my-widget>
            count.value
            hr
'''
    document = to_html(parse(source))

    assert "<img src='/logo.png' />" in document
    assert "<my-widget data-x='1'>Text</my-widget>" in document
    assert "<div data-component='Card' data-title='\"Hi\"'>" in document
    assert_well_formed(document)
