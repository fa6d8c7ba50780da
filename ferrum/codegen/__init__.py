"""Code generation back ends: static HTML and view code."""

from .html import DEFAULT_TITLE, load_stylesheet, to_html, to_html_body
from .view import to_view_code

__all__ = ["to_html", "to_html_body", "to_view_code", "load_stylesheet", "DEFAULT_TITLE"]
