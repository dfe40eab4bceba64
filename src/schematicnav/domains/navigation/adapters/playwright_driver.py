"""Playwright Page Driver Adapter.

Implements the PageDriver protocol from services.py on top of the
Playwright async API, and owns the browser lifecycle through
BrowserSession.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

logger = logging.getLogger(__name__)

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class PlaywrightPageDriver:
    """Adapts a Playwright ``Page`` to the navigation PageDriver protocol.

    Playwright errors (``playwright.async_api.Error`` and its
    ``TimeoutError``) are not caught here; the dispatcher wraps them.
    """

    def __init__(self, page: Page) -> None:
        self._page = page

    @property
    def page(self) -> Page:
        return self._page

    async def navigate(self, url: str) -> None:
        await self._page.goto(url)

    async def click(self, selector: str) -> None:
        await self._page.click(selector)

    async def fill(self, selector: str, value: str) -> None:
        await self._page.fill(selector, value)

    async def select_option(self, selector: str, value: str) -> None:
        await self._page.select_option(selector, value)

    async def hover(self, selector: str) -> None:
        await self._page.hover(selector)

    async def focus(self, selector: str) -> None:
        await self._page.focus(selector)

    async def query(self, selector: str) -> Optional[Any]:
        return await self._page.query_selector(selector)

    async def evaluate(self, selector: str, expression: str) -> bool:
        return bool(await self._page.eval_on_selector(selector, expression))

    async def wait_for_selector(self, selector: str) -> None:
        await self._page.wait_for_selector(selector)

    async def wait_for_idle_network(self) -> None:
        await self._page.wait_for_load_state("networkidle")


@dataclass(frozen=True)
class BrowserOptions:
    """Launch options for BrowserSession.

    Attributes:
        browser: Playwright browser type ("chromium", "firefox", "webkit")
        headless: Run without a visible window
        timeout_ms: Default timeout for every page operation; None keeps
            Playwright's own default
        viewport_width / viewport_height: Page viewport size
    """
    browser: str = "chromium"
    headless: bool = False
    timeout_ms: Optional[int] = None
    viewport_width: int = 1280
    viewport_height: int = 720

    def __post_init__(self) -> None:
        if self.browser not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{self.browser}'. "
                f"Supported: {', '.join(SUPPORTED_BROWSERS)}"
            )


class BrowserSession:
    """Owns one browser, one context and one page for the process lifetime.

    Usage:

        async with BrowserSession(BrowserOptions(headless=True)) as session:
            dispatcher = IntentDispatcher(config, session.driver)
    """

    def __init__(self, options: Optional[BrowserOptions] = None) -> None:
        self.options = options or BrowserOptions()
        self._playwright_cm: Any = None
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._driver: Optional[PlaywrightPageDriver] = None

    @property
    def driver(self) -> PlaywrightPageDriver:
        if self._driver is None:
            raise RuntimeError("Playwright has not been initialized.")
        return self._driver

    async def start(self) -> PlaywrightPageDriver:
        """Launch the browser and open the page.

        On failure everything started so far is closed before the error
        propagates.
        """
        self._playwright_cm = async_playwright()
        self._playwright = await self._playwright_cm.start()
        try:
            browser_type = getattr(self._playwright, self.options.browser)
            self._browser = await browser_type.launch(headless=self.options.headless)
            context_kwargs: Dict[str, Any] = {
                "viewport": {
                    "width": self.options.viewport_width,
                    "height": self.options.viewport_height,
                }
            }
            self._context = await self._browser.new_context(**context_kwargs)
            if self.options.timeout_ms is not None:
                self._context.set_default_timeout(self.options.timeout_ms)
            page = await self._context.new_page()
        except BaseException:
            logger.error("Could not start %s; closing partial session", self.options.browser)
            await self.close()
            raise
        self._driver = PlaywrightPageDriver(page)
        logger.info(
            "Started %s (headless=%s)", self.options.browser, self.options.headless
        )
        return self._driver

    async def close(self) -> None:
        try:
            if self._context is not None:
                await self._context.close()
            if self._browser is not None:
                await self._browser.close()
        finally:
            if self._playwright is not None:
                await self._playwright.stop()
            self._context = None
            self._browser = None
            self._playwright = None
            self._driver = None
            logger.debug("Browser session closed")

    async def __aenter__(self) -> "BrowserSession":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
