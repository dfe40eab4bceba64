"""Navigation Domain Events.

Exactly one event is emitted per dispatched intent, for observability
and for the console's reporting.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class IntentExecuted:
    """Emitted when the driver call for an intent completed successfully."""
    intent_kind: str
    target: Optional[str]
    duration_ms: float
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class IntentRejected:
    """Emitted when an intent failed validation, assertion or the driver call.

    Consumers:
    - Console (reports the failure and keeps accepting input)
    """
    intent_kind: str
    error_type: str
    category: str
    message: str
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class UnrecognizedIntentReceived:
    """Emitted when the translator produced OtherOrUnknown."""
    intent_kind: str
    timestamp: datetime = field(default_factory=datetime.now)
