"""Structured output schema for the intent translator.

The language model is asked to fill in exactly this shape; the result is
then converted into the immutable domain ``Intent``.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from schematicnav.domains.navigation.value_objects import Intent, IntentKind


class IntentSchema(BaseModel):
    """A user interface intent extracted from one command."""

    intent: IntentKind = Field(
        description=(
            "What the user wants to do. Use OtherOrUnknown when the command "
            "matches none of the other intents."
        )
    )
    target_element: Optional[str] = Field(
        default=None,
        description="Name of the element to act on, exactly as listed in the known elements.",
    )
    target_page: Optional[str] = Field(
        default=None,
        description="Name of the page to open for NavigateToPage, exactly as listed in the known pages.",
    )
    inputs: Optional[List[str]] = Field(
        default=None,
        description=(
            "Payload values: the URL for NavigateToUrl, the text for FillInput, "
            "the option for SelectDropdownOption, the CSS selector for WaitForSelector."
        ),
    )

    def to_intent(self) -> Intent:
        return Intent.create(
            kind=self.intent,
            target_element=self.target_element,
            target_page=self.target_page,
            inputs=self.inputs,
        )
