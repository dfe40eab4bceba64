"""Shared fixtures for navigation unit tests.

Provides a recording fake of the PageDriver protocol, an event collector
and a small site configuration.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pytest

from schematicnav.domains.navigation.aggregates import SymbolicConfiguration
from schematicnav.domains.navigation.services import HIDDEN_PREDICATE, VISIBLE_PREDICATE


# =============================================================================
# Fake PageDriver
# =============================================================================


class FakeDriver:
    """Records every primitive call; behavior is configured per test.

    Attributes:
        calls: (primitive, args) tuples in call order
        absent: selectors for which query() returns None
        hidden: selector -> value of ``element.hidden``
        failures: primitive -> exception raised when it is called
    """

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[str, ...]]] = []
        self.absent: set = set()
        self.hidden: Dict[str, bool] = {}
        self.failures: Dict[str, Exception] = {}

    def _record(self, primitive: str, *args: str) -> None:
        self.calls.append((primitive, args))
        if primitive in self.failures:
            raise self.failures[primitive]

    async def navigate(self, url: str) -> None:
        self._record("navigate", url)

    async def click(self, selector: str) -> None:
        self._record("click", selector)

    async def fill(self, selector: str, value: str) -> None:
        self._record("fill", selector, value)

    async def select_option(self, selector: str, value: str) -> None:
        self._record("select_option", selector, value)

    async def hover(self, selector: str) -> None:
        self._record("hover", selector)

    async def focus(self, selector: str) -> None:
        self._record("focus", selector)

    async def query(self, selector: str) -> Optional[Any]:
        self._record("query", selector)
        return None if selector in self.absent else {"selector": selector}

    async def evaluate(self, selector: str, expression: str) -> bool:
        self._record("evaluate", selector, expression)
        hidden = self.hidden.get(selector, False)
        if expression == HIDDEN_PREDICATE:
            return hidden
        if expression == VISIBLE_PREDICATE:
            return not hidden
        raise AssertionError(f"unexpected predicate {expression}")

    async def wait_for_selector(self, selector: str) -> None:
        self._record("wait_for_selector", selector)

    async def wait_for_idle_network(self) -> None:
        self._record("wait_for_idle_network")


class CollectingPublisher:
    """Collects published events."""

    def __init__(self) -> None:
        self.events: list = []

    def publish(self, event: object) -> None:
        self.events.append(event)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def site_config() -> SymbolicConfiguration:
    return SymbolicConfiguration(
        base_url="https://a.io",
        pages={
            "Home": "{base}/home",
            "Login": "{base}/login",
            "Blog": "blog.example.com",
        },
        elements={
            "LoginButton": "#login-btn",
            "HomeMenu": "#home-menu",
            "EmailInput": "input[name=email]",
            "CountrySelect": "select#country",
        },
    )


@pytest.fixture
def driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def publisher() -> CollectingPublisher:
    return CollectingPublisher()
