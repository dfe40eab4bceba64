"""Natural-language to intent translation backed by pydantic-ai."""
from .schema import IntentSchema
from .translator import IntentTranslator, build_system_prompt

__all__ = ["IntentSchema", "IntentTranslator", "build_system_prompt"]
