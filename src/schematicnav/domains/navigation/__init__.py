"""Navigation Bounded Context.

Validates structured intents against a symbolic configuration of named
pages and elements, resolves them to concrete URLs and selectors, and
dispatches each one to a single browser-driver primitive.
"""
from .value_objects import (
    ABSENT, Present, TargetName, target_name,
    IntentKind, Intent, TargetType, ResolvedTarget,
    ExecutionStatus, ExecutionResult,
)
from .aggregates import SymbolicConfiguration
from .errors import (
    IntentExecutionError, MissingInputError, MissingTargetError,
    UnknownElementError, UnknownPageError, ElementAssertionError,
    DriverError, ConfigurationError, TranslationError,
)
from .resolver import normalize_url, resolve_element_selector, resolve_page_url
from .validation import validate_intent
from .services import EventPublisher, IntentDispatcher, PageDriver, execute
from .events import IntentExecuted, IntentRejected, UnrecognizedIntentReceived

__all__ = [
    "ABSENT", "Present", "TargetName", "target_name",
    "IntentKind", "Intent", "TargetType", "ResolvedTarget",
    "ExecutionStatus", "ExecutionResult",
    "SymbolicConfiguration",
    "IntentExecutionError", "MissingInputError", "MissingTargetError",
    "UnknownElementError", "UnknownPageError", "ElementAssertionError",
    "DriverError", "ConfigurationError", "TranslationError",
    "normalize_url", "resolve_element_selector", "resolve_page_url",
    "validate_intent",
    "EventPublisher", "IntentDispatcher", "PageDriver", "execute",
    "IntentExecuted", "IntentRejected", "UnrecognizedIntentReceived",
]
