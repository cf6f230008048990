"""Translator interface and the LLM-backed implementation."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from gpt_translate.core.llm import LLMGateway, LLMRuntimeConfig
from gpt_translate.errors import TranslationServiceError

from .prompts import build_prompt, extract_translation

logger = logging.getLogger(__name__)


class Translator(ABC):
    """Translates one unit of text."""

    @abstractmethod
    async def translate(self, text: str, target_lang: str, ext: str) -> str:
        """Translate ``text`` into ``target_lang``.

        Args:
            text: Source text (a whole file)
            target_lang: Language to translate into
            ext: File extension hint without the dot, "" if unknown

        Returns:
            Translated text
        """
        pass


class LLMTranslator(Translator):
    """Translator that sends each file to an LLM through ``LLMGateway``."""

    def __init__(self, config: LLMRuntimeConfig, custom_prompt: Optional[str] = None):
        self.config = config
        self.custom_prompt = custom_prompt

    async def translate(self, text: str, target_lang: str, ext: str) -> str:
        if not text.strip():
            return text

        bundle = build_prompt(text, target_lang, ext, self.custom_prompt)
        logger.debug(
            f"Translating {len(text)} chars into {target_lang} "
            f"(~{bundle.estimated_input_tokens} tokens)"
        )

        response = await LLMGateway.execute_with_messages(
            bundle.to_openai_format(), self.config
        )

        if not response.content.strip():
            raise TranslationServiceError(
                f"LLM returned an empty translation (model={self.config.model})"
            )
        return extract_translation(response.content, text)
