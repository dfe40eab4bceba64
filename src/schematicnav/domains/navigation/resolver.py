"""Target resolution.

Turns validated symbolic names into the concrete URL or selector the
driver is called with.
"""
from __future__ import annotations

import logging
from urllib.parse import urlsplit

from .aggregates import SymbolicConfiguration
from .errors import UnknownElementError, UnknownPageError
from .value_objects import IntentKind

logger = logging.getLogger(__name__)

BASE_PLACEHOLDER = "{base}"
DEFAULT_SCHEME_PREFIX = "https://"
_WEB_SCHEMES = ("http", "https")


def normalize_url(raw: str) -> str:
    """Prefix ``https://`` unless ``raw`` is already an absolute http(s) URL.

    This is a heuristic, not validation: whatever comes out is handed to
    the driver, which reports malformed URLs itself.

        >>> normalize_url("example.com")
        'https://example.com'
        >>> normalize_url("http://x.io")
        'http://x.io'
    """
    url = raw.strip()
    try:
        parts = urlsplit(url)
    except ValueError:
        parts = None
    if parts is not None and parts.scheme.lower() in _WEB_SCHEMES and parts.netloc:
        return url
    normalized = DEFAULT_SCHEME_PREFIX + url
    logger.debug("Normalized URL %r to %r", raw, normalized)
    return normalized


def resolve_page_url(page_name: str, config: SymbolicConfiguration) -> str:
    """Expand a page's URL template against the base URL and normalize it."""
    template = config.pages.get(page_name)
    if template is None:
        raise UnknownPageError(
            f"Invalid page: {page_name}", IntentKind.NAVIGATE_TO_PAGE, page_name
        )
    return normalize_url(template.replace(BASE_PLACEHOLDER, config.base_url))


def resolve_element_selector(
    element_name: str,
    config: SymbolicConfiguration,
    kind: IntentKind = IntentKind.OTHER_OR_UNKNOWN,
) -> str:
    """Look up the selector configured for an element name."""
    selector = config.elements.get(element_name)
    if selector is None:
        raise UnknownElementError(
            f"Invalid element for {kind.value}: {element_name}", kind, element_name
        )
    return selector
