"""Interactive and batch console for schematic-nav.

Each line of input is translated into an intent, executed, and
summarized. Failures are reported and the console keeps accepting
input; one intent is fully executed before the next line is read.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Protocol, TextIO, Union

from schematicnav.domains.navigation.errors import TranslationError
from schematicnav.domains.navigation.services import IntentDispatcher
from schematicnav.domains.navigation.value_objects import (
    ExecutionResult,
    ExecutionStatus,
    Intent,
    Present,
)

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "😀> "
EXIT_COMMANDS = frozenset({"quit", "exit"})


class IntentSource(Protocol):
    """Anything that turns a line of text into an Intent."""

    async def translate(self, text: str) -> Intent: ...


def format_intent_summary(intent: Intent) -> str:
    """Describe an intent the way the console reports it."""
    lines = [
        f"The intent is {intent.kind.value}",
        f"The target element is {_name_or_blank(intent.target_element)}",
        f"The target page is {_name_or_blank(intent.target_page)}",
    ]
    if intent.inputs:
        lines.append(f"The inputs are {', '.join(intent.inputs)}")
    return "\n".join(lines) + "\n"


def _name_or_blank(target: object) -> str:
    return target.name if isinstance(target, Present) else ""


class IntentConsole:
    """Reads commands, dispatches their intents and prints the outcome."""

    def __init__(
        self,
        translator: IntentSource,
        dispatcher: IntentDispatcher,
        *,
        prompt: str = DEFAULT_PROMPT,
        input_func: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> None:
        self._translator = translator
        self._dispatcher = dispatcher
        self.prompt = prompt
        self._input = input_func
        self._out = out or sys.stdout
        self._err = err or sys.stderr

    async def process_input(self, text: str) -> Optional[ExecutionResult]:
        """Translate and execute one command.

        Returns:
            The ExecutionResult, or None when translation failed
        """
        try:
            intent = await self._translator.translate(text)
        except TranslationError as exc:
            logger.warning("Translation failed: %s", exc)
            self._write_error(str(exc))
            return None

        result = await self._dispatcher.execute(intent)
        if result.status is ExecutionStatus.FAILED and result.error is not None:
            self._write_error(str(result.error))
        elif result.status is ExecutionStatus.UNRECOGNIZED:
            self._write_error(f"Unrecognized command: {text.strip()}")

        print(format_intent_summary(intent), file=self._out)
        return result

    async def run(self) -> List[ExecutionResult]:
        """Interactive loop; ends on quit/exit or end of input."""
        results: List[ExecutionResult] = []
        while True:
            try:
                line = await asyncio.to_thread(self._input, self.prompt)
            except EOFError:
                break
            text = line.strip()
            if not text:
                continue
            if text.lower() in EXIT_COMMANDS:
                break
            result = await self.process_input(text)
            if result is not None:
                results.append(result)
        return results

    async def run_batch(self, path: Union[str, Path]) -> List[ExecutionResult]:
        """Process every non-blank line of a file as one command."""
        batch_path = Path(path)
        logger.info("Running batch file %s", batch_path)
        results: List[ExecutionResult] = []
        with open(batch_path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
        for line in lines:
            text = line.strip()
            if not text:
                continue
            print(f"{self.prompt}{text}", file=self._out)
            result = await self.process_input(text)
            if result is not None:
                results.append(result)
        return results

    def _write_error(self, message: str) -> None:
        print(f"Error: {message}", file=self._err)
