"""LLM runtime configuration.

Single source of truth for the parameters of an LLM request. Resolved once
from ``Settings`` and passed unchanged down to ``litellm.acompletion``.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from gpt_translate.config import Settings
from gpt_translate.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass
class LLMRuntimeConfig:
    """Complete LLM configuration for translation requests."""

    # Connection parameters
    provider: str
    model: str
    api_key: str
    base_url: Optional[str] = None

    # Generation parameters
    temperature: float = 0.3
    max_tokens: Optional[int] = None

    # Retry policy
    max_retries: int = 3
    retry_min_wait: float = 2.0
    retry_max_wait: float = 30.0

    def get_litellm_model(self) -> str:
        """Get model string in LiteLLM format (provider/model)."""
        if self.provider == "openai" or "/" in self.model:
            return self.model
        return f"{self.provider}/{self.model}"

    def to_litellm_kwargs(self) -> Dict[str, Any]:
        """Convert to kwargs for litellm.acompletion()."""
        kwargs: Dict[str, Any] = {
            "model": self.get_litellm_model(),
            "api_key": self.api_key,
            "temperature": self.temperature,
        }

        if self.base_url:
            kwargs["api_base"] = self.base_url

        if self.max_tokens is not None:
            kwargs["max_tokens"] = self.max_tokens

        return kwargs


# Environment variable fallback for each provider when no apikey input is set
ENV_VAR_MAP = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "deepseek": "DEEPSEEK_API_KEY",
    "openrouter": "OPENROUTER_API_KEY",
}


def resolve_llm_config(settings: Settings) -> LLMRuntimeConfig:
    """Resolve the LLM configuration from settings.

    The ``apikey`` action input wins; otherwise the provider's conventional
    environment variable is used.

    Raises:
        ConfigError: If no API key is available
    """
    api_key = settings.apikey
    source = "input"
    if not api_key:
        env_var = ENV_VAR_MAP.get(settings.provider)
        api_key = os.environ.get(env_var, "") if env_var else ""
        source = "environment"

    if not api_key:
        raise ConfigError(
            f"No API key available for provider '{settings.provider}'. "
            f"Set the 'apikey' input or the provider's environment variable."
        )

    config = LLMRuntimeConfig(
        provider=settings.provider,
        model=settings.model,
        api_key=api_key,
        base_url=settings.base_url,
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
        max_retries=settings.max_retries,
        retry_min_wait=settings.retry_min_wait,
        retry_max_wait=settings.retry_max_wait,
    )

    logger.info(
        f"Resolved LLM config: provider={config.provider}, model={config.model}, "
        f"api_key_source={source}"
    )
    return config
