"""Tests for the view-code generator."""

import pytest

from ferrum.ast import Component, Element, Import, StateBinding, Text
from ferrum.codegen import to_view_code
from ferrum.codegen.view import PRELUDE
from ferrum.parser import parse


@pytest.mark.scenario
def test_welcome_page(welcome_forest):
    assert to_view_code(welcome_forest) == '''use leptos::*;

view! {
    <div id="app" class="container">
        <h1 class="title">
            "Hello World"
        </h1>
        <p class="text-gray-600">
            "Welcome"
        </p>
    </div>
}
'''


def test_counter_page(counter_source):
    assert to_view_code(parse(counter_source)) == '''use leptos::*;
use components::button::{Button};

view! {
    <div class="counter">
        <h2>
            "Counter"
        </h2>
        <p>
            {read(count.value)}
        </p>
        <Button onclick={set_count(-1)}>
            "-"
        </Button>
        <Button onclick={set_count(1)}>
            "+"
        </Button>
    </div>
}
'''


def test_empty_forest():
    assert to_view_code([]) == PRELUDE + "\n"


def test_one_block_per_top_level_node():
    code = to_view_code([Element("header"), StateBinding("count"), Text("bye")])

    assert code.count("view! {") == 3
    assert "view! {\n    <header />\n}" in code
    assert "view! {\n    {read(count)}\n}" in code
    assert 'view! {\n    "bye"\n}' in code


@pytest.mark.parametrize(
    "node, expected",
    [
        (Import(("Button", "Card"), "./ui"), "use ui::{Button, Card};"),
        (Import((), "./styles/main.css"), "use styles::main::css;"),
        (Import(("Icon",), "lucide-icons/solid"), "use lucide_icons::solid::{Icon};"),
        (Import(("Signal",), "leptos::reactive"), "use leptos::reactive::{Signal};"),
    ],
)
def test_imports_become_use_lines(node, expected):
    code = to_view_code([node])

    assert code == f"{PRELUDE}\n{expected}\n"
    assert "view!" not in code


def test_nested_imports_are_hoisted():
    forest = parse('div\n    import { Card } from "./card"\n    Card()\n')
    code = to_view_code(forest)

    assert code.startswith("use leptos::*;\nuse card::{Card};\n\n")
    assert "<Card />" in code


def test_component_attributes():
    node = Component("Card", {"title": '"Hi"', "open": ""}, (Text("body"),))

    assert to_view_code([node]).endswith('''view! {
    <Card title={"Hi"} open>
        "body"
    </Card>
}
''')


def test_void_and_childless_elements_self_close():
    code = to_view_code(parse('form\n    input#q type="text"\n    div.spacer\n'))

    assert '<input id="q" type="text" />' in code
    assert '<div class="spacer" />' in code


def test_text_is_quoted_as_a_string_literal():
    code = to_view_code([Text('say "hi" \\ bye')])
    assert '"say \\"hi\\" \\\\ bye"' in code


def test_unknown_node_type():
    with pytest.raises(TypeError):
        to_view_code(["div"])
