"""LLM integration package.

- LLMRuntimeConfig / resolve_llm_config: parameters for every LLM call
- LLMGateway: the single entry point for litellm calls
"""

from .gateway import LLMGateway, LLMResponse
from .runtime_config import LLMRuntimeConfig, resolve_llm_config

__all__ = [
    "LLMGateway",
    "LLMResponse",
    "LLMRuntimeConfig",
    "resolve_llm_config",
]
