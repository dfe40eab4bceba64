"""Logging Event Publisher Adapter.

Implements the EventPublisher protocol from services.py by writing
each domain event to the standard logging system.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from ..events import IntentExecuted, IntentRejected, UnrecognizedIntentReceived

logger = logging.getLogger(__name__)


class LoggingEventPublisher:
    """Logs navigation events and optionally keeps them for inspection."""

    def __init__(
        self,
        event_logger: Optional[logging.Logger] = None,
        keep_history: bool = False,
    ) -> None:
        self._logger = event_logger or logger
        self._keep_history = keep_history
        self.history: List[object] = []

    def publish(self, event: object) -> None:
        if self._keep_history:
            self.history.append(event)

        if isinstance(event, IntentExecuted):
            self._logger.info(
                "event=intent_executed kind=%s target=%s duration_ms=%.1f",
                event.intent_kind,
                event.target,
                event.duration_ms,
            )
        elif isinstance(event, IntentRejected):
            self._logger.warning(
                "event=intent_rejected kind=%s error=%s category=%s message=%s",
                event.intent_kind,
                event.error_type,
                event.category,
                event.message,
            )
        elif isinstance(event, UnrecognizedIntentReceived):
            self._logger.warning("event=intent_unrecognized kind=%s", event.intent_kind)
        else:
            self._logger.debug("event=%s", type(event).__name__)
