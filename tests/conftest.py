"""Shared Ferrum sources and fixtures."""

import pytest

from ferrum.parser import parse


WELCOME_PAGE = '''div#app.container
    h1.title "Hello World"
    p.text-gray-600 "Welcome"
'''

COUNTER_PAGE = '''import { Button } from "./components/button"

// simple counter
div.counter
    h2 "Counter"
    p
        count.value
    Button(onclick: set_count(-1))
        "-"
    Button(onclick: set_count(1))
        "+"
'''

FORM_PAGE = '''form#signup action="/signup"
    label for="email" "Email"
    input#email type="email" name="email"
    br
    <button type="submit">Sign up</button>
'''


def pytest_configure(config):
    """Register markers for pytest."""
    config.addinivalue_line("markers", "scenario: end-to-end examples from the language guide")


@pytest.fixture
def welcome_source():
    return WELCOME_PAGE


@pytest.fixture
def counter_source():
    return COUNTER_PAGE


@pytest.fixture
def form_source():
    return FORM_PAGE


@pytest.fixture
def welcome_forest(welcome_source):
    return parse(welcome_source)
