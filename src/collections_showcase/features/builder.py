"""A tiny HTML builder DSL based on nested context managers.

Usage:

    with html() as page:
        with page.head() as head:
            head.title("My Page")
        with page.body() as body:
            body.h1("Welcome")
            body.p("This is a paragraph")
    str(page)
    # '<html><head><title>My Page</title></head><body><h1>Welcome</h1>...</body></html>'

The only structural rule is parent/child append: a container element is
appended to its parent when its ``with`` block exits normally, leaves are
appended immediately. Text content is HTML-escaped.
"""
from __future__ import annotations

from contextlib import contextmanager
from html import escape as _escape
from typing import Iterator, List

__all__ = ["HtmlElement", "html"]


class HtmlElement:
    def __init__(self, name: str, content: str = ""):
        self.name = name
        self.content = content
        self.children: List[HtmlElement] = []

    def add_child(self, child: "HtmlElement") -> "HtmlElement":
        self.children.append(child)
        return child

    @contextmanager
    def element(self, name: str) -> Iterator["HtmlElement"]:
        """Open a nested container element; appended to `self` on exit."""
        child = HtmlElement(name)
        yield child
        self.add_child(child)

    def head(self):
        return self.element("head")

    def body(self):
        return self.element("body")

    def leaf(self, name: str, content: str) -> "HtmlElement":
        return self.add_child(HtmlElement(name, content))

    def title(self, content: str) -> "HtmlElement":
        return self.leaf("title", content)

    def h1(self, content: str) -> "HtmlElement":
        return self.leaf("h1", content)

    def p(self, content: str) -> "HtmlElement":
        return self.leaf("p", content)

    def render(self) -> str:
        inner = "".join(child.render() for child in self.children)
        return f"<{self.name}>{_escape(self.content, quote=False)}{inner}</{self.name}>"

    def __str__(self) -> str:
        return self.render()


@contextmanager
def html() -> Iterator[HtmlElement]:
    yield HtmlElement("html")
