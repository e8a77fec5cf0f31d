"""LLM adapters."""

from ...config import LLMProvider, Settings, resolve_api_key
from ...ports.extraction import ExtractionPort
from .claude_api import ClaudeAPIAdapter
from .openai_api import OpenAIAdapter

__all__ = ["ClaudeAPIAdapter", "OpenAIAdapter", "create_extractor"]


def create_extractor(settings: Settings) -> ExtractionPort:
    """Create extraction adapter based on configuration.

    Raises ConfigurationError if no API key is configured.
    """
    config = settings.llm
    options = {
        "api_key": resolve_api_key(settings),
        "model": config.model_name,
        "max_retries": config.max_retries,
        "max_tokens": config.max_tokens,
        "examples": settings.prompt_examples,
    }
    if config.provider == LLMProvider.CLAUDE_API:
        return ClaudeAPIAdapter(**options)
    elif config.provider == LLMProvider.OPENAI:
        return OpenAIAdapter(**options)
    else:
        raise ValueError(f"Unknown LLM provider: {config.provider}")
