"""Navigation Domain Errors.

Every failure that ``IntentDispatcher.execute`` can report is an
``IntentExecutionError``. The category groups them the way callers
react to them:

- input_shape: the intent is missing a target or its inputs
- reference: the intent names a page/element the configuration lacks
- assertion: the page state does not match the expected condition
- driver: the automation layer failed; the original error is kept
"""
from __future__ import annotations

from typing import ClassVar, Optional

from .value_objects import IntentKind


class IntentExecutionError(Exception):
    """Base class for failures reported by intent execution.

    Attributes:
        intent_kind: The kind of the intent that failed
        category: Taxonomy bucket shared by all instances of the class
    """

    category: ClassVar[str] = "execution"

    def __init__(self, message: str, intent_kind: IntentKind) -> None:
        super().__init__(message)
        self.message = message
        self.intent_kind = intent_kind


class MissingInputError(IntentExecutionError):
    """Raised when an intent that needs payload data has no inputs."""

    category = "input_shape"


class MissingTargetError(IntentExecutionError):
    """Raised when an intent lacks its target element or target page."""

    category = "input_shape"


class UnknownElementError(IntentExecutionError):
    """Raised when a target element name is not configured."""

    category = "reference"

    def __init__(self, message: str, intent_kind: IntentKind, element_name: str) -> None:
        super().__init__(message, intent_kind)
        self.element_name = element_name


class UnknownPageError(IntentExecutionError):
    """Raised when a target page name is not configured."""

    category = "reference"

    def __init__(self, message: str, intent_kind: IntentKind, page_name: str) -> None:
        super().__init__(message, intent_kind)
        self.page_name = page_name


class ElementAssertionError(IntentExecutionError, AssertionError):
    """Raised when an element assertion does not hold on the live page."""

    category = "assertion"

    def __init__(self, message: str, intent_kind: IntentKind, element_name: str) -> None:
        super().__init__(message, intent_kind)
        self.element_name = element_name


class DriverError(IntentExecutionError):
    """Wraps an exception raised by the browser driver.

    The driver exception is stored untouched in ``original`` and chained
    as ``__cause__``.
    """

    category = "driver"

    def __init__(
        self,
        message: str,
        intent_kind: IntentKind,
        original: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, intent_kind)
        self.original = original


class ConfigurationError(Exception):
    """Raised when a symbolic configuration cannot be built."""

    pass


class TranslationError(Exception):
    """Raised when free text cannot be translated into an intent."""

    pass
