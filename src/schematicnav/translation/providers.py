"""AI provider abstraction.

Supports multiple AI providers through pydantic-ai:
- OpenAI (GPT)
- Anthropic (Claude)
- Ollama (local, OpenAI-compatible endpoint)
"""

from __future__ import annotations

from pydantic_ai.models import Model
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.openai import OpenAIProvider

from schematicnav.config.translator_config import TranslatorConfig

_OLLAMA_BASE_URL = "http://localhost:11434/v1"


def get_model_instance(config: TranslatorConfig) -> Model:
    """Get the pydantic-ai model instance for the configured provider.

    Raises:
        ValueError: If provider is not supported
    """
    provider = config.provider.lower()

    if provider == "openai":
        if config.base_url:
            openai_provider = OpenAIProvider(base_url=config.base_url, api_key=config.api_key)
        else:
            openai_provider = OpenAIProvider(api_key=config.api_key)
        return OpenAIChatModel(config.model, provider=openai_provider)

    elif provider == "anthropic":
        return AnthropicModel(config.model, provider=AnthropicProvider(api_key=config.api_key))

    elif provider == "ollama":
        ollama_provider = OpenAIProvider(
            base_url=config.base_url or _OLLAMA_BASE_URL,
            api_key="ollama",  # Ollama doesn't need a real key
        )
        return OpenAIChatModel(config.model, provider=ollama_provider)

    else:
        raise ValueError(
            f"Unsupported provider: {provider}. "
            f"Supported providers: openai, anthropic, ollama"
        )
