"""Unified LLM gateway.

Every LLM call goes through ``LLMGateway.execute``. Parameters come from
``LLMRuntimeConfig``; transient failures are retried with exponential
backoff and anything left over is raised as ``TranslationServiceError``.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from litellm import acompletion
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    stop_after_attempt,
    wait_exponential,
)

from gpt_translate.errors import TranslationServiceError

from .runtime_config import LLMRuntimeConfig

logger = logging.getLogger(__name__)


@dataclass
class LLMResponse:
    """Completion text plus usage metadata for one gateway call."""

    content: str
    model: str
    provider: str
    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0
    latency_ms: int = 0
    attempts: int = 1


class LLMGateway:
    """Single entry point for chat completions.

    Example:
        response = await LLMGateway.execute(
            system_prompt=bundle.system_prompt,
            user_prompt=source_text,
            config=resolve_llm_config(settings),
        )
    """

    @classmethod
    async def execute(
        cls,
        system_prompt: str,
        user_prompt: str,
        config: LLMRuntimeConfig,
    ) -> LLMResponse:
        """Send a system + user message pair.

        Args:
            system_prompt: Instructions for the model
            user_prompt: Text to translate
            config: Provider, model and retry settings

        Returns:
            The completion text with token usage and latency

        Raises:
            TranslationServiceError: If every attempt fails
        """
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]
        return await cls.execute_with_messages(messages, config)

    @classmethod
    async def execute_with_messages(
        cls,
        messages: List[Dict[str, str]],
        config: LLMRuntimeConfig,
    ) -> LLMResponse:
        """Send a pre-built messages array, retrying transient failures."""
        start_time = time.time()

        kwargs = config.to_litellm_kwargs()
        kwargs["messages"] = messages

        logger.info(
            f"LLM call: model={config.model}, provider={config.provider}, "
            f"temperature={config.temperature}, max_tokens={config.max_tokens}"
        )

        attempts = 0
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(config.max_retries),
                wait=wait_exponential(
                    multiplier=1, min=config.retry_min_wait, max=config.retry_max_wait
                ),
                before_sleep=before_sleep_log(logger, logging.WARNING),
                reraise=True,
            ):
                with attempt:
                    attempts = attempt.retry_state.attempt_number
                    response = await acompletion(**kwargs)
        except Exception as e:
            logger.error(
                f"LLM call failed: model={config.model}, attempts={attempts}, error={e}"
            )
            raise TranslationServiceError(
                f"LLM call failed after {attempts} attempt(s): {e}"
            ) from e

        latency_ms = int((time.time() - start_time) * 1000)
        usage: Optional[Any] = getattr(response, "usage", None)

        result = LLMResponse(
            content=response.choices[0].message.content or "",
            model=config.model,
            provider=config.provider,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
            total_tokens=usage.total_tokens if usage else 0,
            latency_ms=latency_ms,
            attempts=attempts,
        )

        logger.info(
            f"LLM response: tokens={result.total_tokens}, latency={latency_ms}ms"
        )

        return result
