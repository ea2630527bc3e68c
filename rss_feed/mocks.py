"""Test doubles for the network and DOM collaborators."""

from typing import Any

import requests


class MockResponse:
    """Response-like object returned by ``MockFetch``."""

    def __init__(self, data: Any, ok: bool = True):
        self.data = data
        self.ok = ok

    def json(self) -> Any:
        return self.data


class MockFetch:
    """Fetch capability returning a canned payload or a network failure."""

    def __init__(self, response_data: Any, should_fail: bool = False):
        """Initialize the mock.

        Args:
            response_data: Payload returned by ``json()`` on every response
            should_fail: Raise ``requests.ConnectionError`` on every fetch
        """
        self.response_data = response_data
        self.should_fail = should_fail
        self.calls: list[str] = []

    def fetch(self, url: str) -> MockResponse:
        self.calls.append(url)
        if self.should_fail:
            raise requests.ConnectionError("Network error")
        return MockResponse(self.response_data)

    __call__ = fetch


class MockText:
    """Element-like value carrying only text."""

    def __init__(self, text: str = ""):
        self.text = text


class MockItem:
    """Raw item node whose children are looked up in a mapping.

    Names missing from ``fields`` resolve to ``default``; a ``None``
    default makes them absent.
    """

    def __init__(self, fields: dict[str, str] | None = None, default: str | None = ""):
        self.fields = dict(fields or {})
        self.default = default

    def select_one(self, name: str) -> MockText | None:
        text = self.fields.get(name, self.default)
        if text is None:
            return None
        return MockText(text)


class MockClassList:
    def add(self, *names: str) -> None:
        pass

    def remove(self, *names: str) -> None:
        pass


class MockElement:
    """Element stand-in with empty content and no-op behavior."""

    def __init__(self, dom: "MockDOM", tag: str = "div"):
        self.tag = tag
        self.inner_html = ""
        self.text = ""
        self.style: dict[str, str] = {}
        self.class_list = MockClassList()
        self._dom = dom

    def select_one(self, selector: str) -> "MockElement":
        return self._dom.select_one(selector)

    def select(self, selector: str) -> list["MockElement"]:
        return self._dom.select(selector)


class MockDOM:
    """Factory and registry of element stand-ins."""

    def __init__(self):
        self.elements: dict[str, MockElement] = {}

    def create_element(self, tag: str) -> MockElement:
        return MockElement(self, tag)

    def get_element_by_id(self, element_id: str) -> MockElement:
        """Return the registered element, or a fresh one if none is."""
        return self.elements.get(element_id) or self.create_element("div")

    def select_one(self, selector: str) -> MockElement:
        return self.create_element("div")

    def select(self, selector: str) -> list[MockElement]:
        return []

    def set_element(self, element_id: str, element: MockElement) -> None:
        self.elements[element_id] = element
