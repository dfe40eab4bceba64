"""Natural-language intent translator using pydantic-ai.

Turns one free-text command into a structured ``Intent``. The agent is
told which page and element names the site configuration knows, but its
answer is still untrusted: the dispatcher re-validates every intent.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from pydantic_ai import Agent
from pydantic_ai.models import Model

from schematicnav.config.translator_config import TranslatorConfig
from schematicnav.domains.navigation.aggregates import SymbolicConfiguration
from schematicnav.domains.navigation.errors import TranslationError
from schematicnav.domains.navigation.value_objects import Intent, IntentKind
from schematicnav.translation.providers import get_model_instance
from schematicnav.translation.schema import IntentSchema

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You translate commands for a web browser into structured user interface intents.

Pick exactly one intent:
- NavigateToUrl: open an explicit address; put the URL in inputs
- NavigateToPage: open one of the known pages; set target_page
- ClickButton, HoverElement, FocusElement: act on one of the known elements; set target_element
- FillInput: type text into a known element; set target_element and put the text in inputs
- SelectDropdownOption: choose an option in a known element; set target_element and put the option in inputs
- BlurElement: remove focus from whatever is focused
- AssertElementAttached, AssertElementDetached, AssertElementVisible, AssertElementHidden:
  check the state of a known element; set target_element
- WaitForNetwork: wait until network activity settles
- WaitForSelector: wait for a CSS selector to appear; put the raw selector in inputs
- OtherOrUnknown: anything else

Use page and element names exactly as listed. Never invent names.
"""


def build_system_prompt(config: SymbolicConfiguration) -> str:
    """Append the configured page and element names to the base prompt."""
    pages = ", ".join(config.page_names()) or "(none)"
    elements = ", ".join(config.element_names()) or "(none)"
    return f"{SYSTEM_PROMPT}\nKnown pages: {pages}\nKnown elements: {elements}\n"


class IntentTranslator:
    """Translates free text into intents with a pydantic-ai agent."""

    def __init__(
        self,
        config: SymbolicConfiguration,
        model: Union[Model, str],
        *,
        retries: int = 1,
        temperature: Optional[float] = None,
    ) -> None:
        """Initialize the translator.

        Args:
            config: Site configuration whose names are offered to the model
            model: pydantic-ai model instance or model name string
            retries: Output validation retries granted to the agent
            temperature: Sampling temperature; None keeps the model default
        """
        model_settings = {"temperature": temperature} if temperature is not None else None
        self._agent = Agent(
            model,
            output_type=IntentSchema,
            system_prompt=build_system_prompt(config),
            retries=retries,
            model_settings=model_settings,
        )

    @classmethod
    def from_config(
        cls,
        config: SymbolicConfiguration,
        translator_config: TranslatorConfig,
    ) -> "IntentTranslator":
        return cls(
            config,
            get_model_instance(translator_config),
            retries=translator_config.retries,
            temperature=translator_config.temperature,
        )

    async def translate(self, text: str) -> Intent:
        """Translate one command.

        Raises:
            TranslationError: If the text is blank or the agent fails to
                produce a valid intent
        """
        if not text or not text.strip():
            raise TranslationError("Nothing to translate")

        try:
            result = await self._agent.run(text.strip())
        except Exception as exc:
            raise TranslationError(f"Could not translate '{text.strip()}': {exc}") from exc

        intent = result.output.to_intent()
        if intent.kind is IntentKind.OTHER_OR_UNKNOWN:
            logger.info("Translator could not map %r to a known intent", text)
        else:
            logger.debug("Translated %r to %s", text, intent)
        return intent
