"""Intent validation.

Pure precondition checks run before any driver call. Each check either
returns the value it vouched for or raises a typed
``IntentExecutionError``. "Exists" checks presuppose the matching
"required" check passed, so a missing name is always reported as
missing, never as unknown.
"""
from __future__ import annotations

from typing import Tuple

from .aggregates import SymbolicConfiguration
from .errors import (
    MissingInputError,
    MissingTargetError,
    UnknownElementError,
    UnknownPageError,
)
from .value_objects import Intent, IntentKind, Present


def require_inputs(intent: Intent, kind: IntentKind) -> Tuple[str, ...]:
    """Require a non-empty input sequence."""
    if not intent.inputs:
        raise MissingInputError(f"Did not supply input to command {kind.value}", kind)
    return intent.inputs


def require_first_input(intent: Intent, kind: IntentKind) -> str:
    """Require a non-blank first input (a URL or a raw selector)."""
    first = require_inputs(intent, kind)[0]
    if not first.strip():
        raise MissingInputError(f"First input for command {kind.value} is empty", kind)
    return first


def require_target_element(intent: Intent, kind: IntentKind) -> str:
    target = intent.target_element
    if not isinstance(target, Present) or not target.name:
        raise MissingTargetError(f"Did not supply element to command {kind.value}", kind)
    return target.name


def require_target_page(intent: Intent) -> str:
    target = intent.target_page
    if not isinstance(target, Present) or not target.name:
        raise MissingTargetError(
            f"Did not supply page to command {IntentKind.NAVIGATE_TO_PAGE.value}",
            IntentKind.NAVIGATE_TO_PAGE,
        )
    return target.name


def require_element_exists(
    name: str,
    config: SymbolicConfiguration,
    kind: IntentKind = IntentKind.OTHER_OR_UNKNOWN,
) -> str:
    if not config.has_element(name):
        raise UnknownElementError(f"Invalid element for {kind.value}: {name}", kind, name)
    return name


def require_page_exists(name: str, config: SymbolicConfiguration) -> str:
    if not config.has_page(name):
        raise UnknownPageError(
            f"Invalid page: {name}", IntentKind.NAVIGATE_TO_PAGE, name
        )
    return name


def validate_intent(intent: Intent, config: SymbolicConfiguration) -> None:
    """Run every precondition for the intent's kind without side effects.

    Raises:
        IntentExecutionError: The first failing check, in the order
            target presence, target existence, inputs
    """
    kind = intent.kind
    if kind is IntentKind.NAVIGATE_TO_PAGE:
        require_page_exists(require_target_page(intent), config)
    if kind.requires_target_element:
        require_element_exists(require_target_element(intent, kind), config, kind)
    if kind in (IntentKind.NAVIGATE_TO_URL, IntentKind.WAIT_FOR_SELECTOR):
        require_first_input(intent, kind)
    elif kind.requires_inputs:
        require_inputs(intent, kind)
