"""Test configuration and fixtures for formatting tests."""

import pytest


# Hand-written input with uneven spacing, bracketed tags and loose component
# arguments.
MESSY_PAGE = '''// dashboard
div#app.container
  h1.title   "Hello World"
  <section class="a.b">
      Button( onclick : inc( count ) , label: "Add one" )
          "+"
      count
  my-widget
'''

MESSY_PAGE_FORMATTED = '''div#app.container
    h1.title
        "Hello World"
    <section class="a.b">
        Button(onclick: inc( count ), label: "Add one")
            +
        count
    my-widget
'''

COUNTER_PAGE_FORMATTED = '''import { Button } from "./components/button"
div.counter
    h2
        "Counter"
    p
        count.value
    Button(onclick: set_count(-1))
        -
    Button(onclick: set_count(1))
        +
'''

FORM_PAGE_FORMATTED = '''form#signup action="/signup"
    label for="email"
        "Email"
    input#email type="email" name="email"
    br
    button type="submit"
        "Sign up"
'''


@pytest.fixture
def messy_source():
    return MESSY_PAGE


@pytest.fixture
def formatted_counter():
    return COUNTER_PAGE_FORMATTED


@pytest.fixture
def formatted_messy():
    return MESSY_PAGE_FORMATTED


@pytest.fixture
def formatted_form():
    return FORM_PAGE_FORMATTED
