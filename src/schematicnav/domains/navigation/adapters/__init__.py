"""Navigation domain adapters."""
from .event_logger import LoggingEventPublisher
from .playwright_driver import BrowserOptions, BrowserSession, PlaywrightPageDriver

__all__ = [
    "BrowserOptions",
    "BrowserSession",
    "LoggingEventPublisher",
    "PlaywrightPageDriver",
]
