"""Navigation Domain Service.

The IntentDispatcher is the execution engine of the navigation
bounded context. For one intent at a time it:
1. Validates the intent against the SymbolicConfiguration
2. Resolves symbolic names to a concrete URL or selector
3. Invokes exactly one driver primitive
4. Classifies the outcome into an ExecutionResult

It holds no state between calls beyond the page owned by the driver.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, ClassVar, Dict, NoReturn, Optional, Protocol

from .aggregates import SymbolicConfiguration
from .errors import DriverError, ElementAssertionError, IntentExecutionError
from .events import IntentExecuted, IntentRejected, UnrecognizedIntentReceived
from .resolver import normalize_url, resolve_element_selector, resolve_page_url
from .validation import (
    require_element_exists,
    require_first_input,
    require_inputs,
    require_page_exists,
    require_target_element,
    require_target_page,
)
from .value_objects import (
    ExecutionResult,
    ExecutionStatus,
    Intent,
    IntentKind,
    ResolvedTarget,
)

logger = logging.getLogger(__name__)

# Focusing the document root is how an element loses focus.
ROOT_SELECTOR = "html"
HIDDEN_PREDICATE = "(element) => element.hidden"
VISIBLE_PREDICATE = "(element) => !element.hidden"


class PageDriver(Protocol):
    """Protocol for the browser automation primitives.

    This is the anti-corruption layer between the navigation domain and
    the automation library. Every primitive may raise a driver-specific
    error; the dispatcher wraps it in DriverError without altering it.
    """

    async def navigate(self, url: str) -> None: ...

    async def click(self, selector: str) -> None: ...

    async def fill(self, selector: str, value: str) -> None: ...

    async def select_option(self, selector: str, value: str) -> None: ...

    async def hover(self, selector: str) -> None: ...

    async def focus(self, selector: str) -> None: ...

    async def query(self, selector: str) -> Optional[Any]:
        """Return a handle for the first match, or None when nothing matches."""
        ...

    async def evaluate(self, selector: str, expression: str) -> bool:
        """Evaluate a JS predicate against the first element matching selector."""
        ...

    async def wait_for_selector(self, selector: str) -> None: ...

    async def wait_for_idle_network(self) -> None: ...


class EventPublisher(Protocol):
    """Protocol for publishing domain events."""
    def publish(self, event: object) -> None: ...


Handler = Callable[[Intent], Awaitable[Optional[ResolvedTarget]]]


@dataclass
class IntentDispatcher:
    """Executes structured intents against a live page.

    Usage:

        dispatcher = IntentDispatcher(config, driver)
        result = await dispatcher.execute(
            Intent.create(IntentKind.CLICK_BUTTON, target_element="LoginButton")
        )
        # driver.click("#login-btn") was awaited once
        # result.success is True

    The intent is treated as untrusted: every field it relies on is
    re-validated here. Failures never escape ``execute``; they come back
    as a FAILED result carrying the typed error. Nothing is retried.
    """
    config: SymbolicConfiguration
    driver: PageDriver
    event_publisher: Optional[EventPublisher] = None

    # One handler per IntentKind; checked for completeness on construction.
    _HANDLERS: ClassVar[Dict[IntentKind, str]] = {
        IntentKind.NAVIGATE_TO_URL: "_navigate_to_url",
        IntentKind.NAVIGATE_TO_PAGE: "_navigate_to_page",
        IntentKind.CLICK_BUTTON: "_click_button",
        IntentKind.FILL_INPUT: "_fill_input",
        IntentKind.SELECT_DROPDOWN_OPTION: "_select_dropdown_option",
        IntentKind.HOVER_ELEMENT: "_hover_element",
        IntentKind.FOCUS_ELEMENT: "_focus_element",
        IntentKind.BLUR_ELEMENT: "_blur_element",
        IntentKind.ASSERT_ELEMENT_ATTACHED: "_assert_element_attached",
        IntentKind.ASSERT_ELEMENT_DETACHED: "_assert_element_detached",
        IntentKind.ASSERT_ELEMENT_VISIBLE: "_assert_element_visible",
        IntentKind.ASSERT_ELEMENT_HIDDEN: "_assert_element_hidden",
        IntentKind.WAIT_FOR_NETWORK: "_wait_for_network",
        IntentKind.WAIT_FOR_SELECTOR: "_wait_for_selector",
        IntentKind.OTHER_OR_UNKNOWN: "_other_or_unknown",
    }

    def __post_init__(self) -> None:
        missing = [kind.value for kind in IntentKind if kind not in self._HANDLERS]
        if missing:
            raise TypeError(f"No dispatch handler for intent kinds: {', '.join(missing)}")

    async def execute(self, intent: Intent) -> ExecutionResult:
        """Validate, resolve and run one intent.

        Returns:
            ExecutionResult; FAILED results carry one of MissingInputError,
            MissingTargetError, UnknownElementError, UnknownPageError,
            ElementAssertionError or DriverError
        """
        kind = intent.kind
        handler: Handler = getattr(self, self._HANDLERS[kind])
        start = time.perf_counter()

        try:
            resolved = await handler(intent)
        except IntentExecutionError as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.warning("%s failed (%s): %s", kind.value, exc.category, exc.message)
            self._publish(IntentRejected(
                intent_kind=kind.value,
                error_type=type(exc).__name__,
                category=exc.category,
                message=exc.message,
            ))
            return ExecutionResult(
                intent_kind=kind,
                status=ExecutionStatus.FAILED,
                error=exc,
                duration_ms=duration_ms,
            )

        duration_ms = (time.perf_counter() - start) * 1000
        if kind is IntentKind.OTHER_OR_UNKNOWN:
            logger.info("Unrecognized intent; nothing to execute")
            self._publish(UnrecognizedIntentReceived(intent_kind=kind.value))
            return ExecutionResult(
                intent_kind=kind,
                status=ExecutionStatus.UNRECOGNIZED,
                duration_ms=duration_ms,
            )

        logger.info(
            "%s succeeded%s in %.1f ms",
            kind.value,
            f" on {resolved.value}" if resolved else "",
            duration_ms,
        )
        self._publish(IntentExecuted(
            intent_kind=kind.value,
            target=resolved.value if resolved else None,
            duration_ms=duration_ms,
        ))
        return ExecutionResult(
            intent_kind=kind,
            status=ExecutionStatus.SUCCEEDED,
            resolved_target=resolved,
            duration_ms=duration_ms,
        )

    # ------------------------------------------------------------------
    # Handlers: validate -> resolve -> invoke driver
    # ------------------------------------------------------------------

    async def _navigate_to_url(self, intent: Intent) -> ResolvedTarget:
        url = normalize_url(require_first_input(intent, intent.kind))
        await self._invoke(intent.kind, "navigate", url)
        return ResolvedTarget.url(url)

    async def _navigate_to_page(self, intent: Intent) -> ResolvedTarget:
        page_name = require_page_exists(require_target_page(intent), self.config)
        url = resolve_page_url(page_name, self.config)
        await self._invoke(intent.kind, "navigate", url)
        return ResolvedTarget.url(url)

    async def _click_button(self, intent: Intent) -> ResolvedTarget:
        selector = self._element_selector(intent)
        await self._invoke(intent.kind, "click", selector)
        return ResolvedTarget.selector(selector)

    async def _fill_input(self, intent: Intent) -> ResolvedTarget:
        selector = self._element_selector(intent)
        value = require_inputs(intent, intent.kind)[0]
        await self._invoke(intent.kind, "fill", selector, value)
        return ResolvedTarget.selector(selector)

    async def _select_dropdown_option(self, intent: Intent) -> ResolvedTarget:
        selector = self._element_selector(intent)
        value = require_inputs(intent, intent.kind)[0]
        await self._invoke(intent.kind, "select_option", selector, value)
        return ResolvedTarget.selector(selector)

    async def _hover_element(self, intent: Intent) -> ResolvedTarget:
        selector = self._element_selector(intent)
        await self._invoke(intent.kind, "hover", selector)
        return ResolvedTarget.selector(selector)

    async def _focus_element(self, intent: Intent) -> ResolvedTarget:
        selector = self._element_selector(intent)
        await self._invoke(intent.kind, "focus", selector)
        return ResolvedTarget.selector(selector)

    async def _blur_element(self, intent: Intent) -> ResolvedTarget:
        await self._invoke(intent.kind, "focus", ROOT_SELECTOR)
        return ResolvedTarget.selector(ROOT_SELECTOR)

    async def _assert_element_attached(self, intent: Intent) -> ResolvedTarget:
        selector = self._element_selector(intent)
        handle = await self._invoke(intent.kind, "query", selector)
        if handle is None:
            self._fail_assertion(intent, "Element not attached")
        return ResolvedTarget.selector(selector)

    async def _assert_element_detached(self, intent: Intent) -> ResolvedTarget:
        selector = self._element_selector(intent)
        handle = await self._invoke(intent.kind, "query", selector)
        if handle is not None:
            self._fail_assertion(intent, "Element not detached")
        return ResolvedTarget.selector(selector)

    async def _assert_element_visible(self, intent: Intent) -> ResolvedTarget:
        selector = self._element_selector(intent)
        visible = await self._invoke(intent.kind, "evaluate", selector, VISIBLE_PREDICATE)
        if not visible:
            self._fail_assertion(intent, "Element not visible")
        return ResolvedTarget.selector(selector)

    async def _assert_element_hidden(self, intent: Intent) -> ResolvedTarget:
        selector = self._element_selector(intent)
        hidden = await self._invoke(intent.kind, "evaluate", selector, HIDDEN_PREDICATE)
        if not hidden:
            self._fail_assertion(intent, "Element not hidden")
        return ResolvedTarget.selector(selector)

    async def _wait_for_network(self, intent: Intent) -> None:
        await self._invoke(intent.kind, "wait_for_idle_network")
        return None

    async def _wait_for_selector(self, intent: Intent) -> ResolvedTarget:
        # Raw selector straight from the inputs; the element map is not consulted.
        selector = require_first_input(intent, intent.kind)
        await self._invoke(intent.kind, "wait_for_selector", selector)
        return ResolvedTarget.selector(selector)

    async def _other_or_unknown(self, intent: Intent) -> None:
        return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _element_selector(self, intent: Intent) -> str:
        name = require_target_element(intent, intent.kind)
        require_element_exists(name, self.config, intent.kind)
        return resolve_element_selector(name, self.config, intent.kind)

    async def _invoke(self, kind: IntentKind, primitive: str, *args: str) -> Any:
        """Await one driver primitive, wrapping any failure in DriverError."""
        operation = getattr(self.driver, primitive)
        logger.debug("driver.%s%r for %s", primitive, args, kind.value)
        try:
            return await operation(*args)
        except Exception as exc:
            raise DriverError(
                f"{kind.value} failed in driver.{primitive}: {exc}",
                kind,
                original=exc,
            ) from exc

    @staticmethod
    def _fail_assertion(intent: Intent, reason: str) -> NoReturn:
        name = str(intent.target_element)
        raise ElementAssertionError(f"{reason}: {name}", intent.kind, name)

    def _publish(self, event: object) -> None:
        """Publish a domain event if a publisher is configured."""
        if self.event_publisher:
            self.event_publisher.publish(event)


async def execute(
    intent: Intent,
    config: SymbolicConfiguration,
    driver: PageDriver,
    event_publisher: Optional[EventPublisher] = None,
) -> ExecutionResult:
    """Execute one intent with a throwaway dispatcher."""
    return await IntentDispatcher(config, driver, event_publisher).execute(intent)
