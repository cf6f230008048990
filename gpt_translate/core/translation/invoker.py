"""Translate a single file."""

import asyncio
import logging
from pathlib import Path

from .models.job import TranslationJob, TranslationOutcome
from .paths import extension_hint
from .translator import Translator

logger = logging.getLogger(__name__)


def _read_text(path: str) -> str:
    # newline="" keeps CRLF line endings as they are on disk
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _read_existing(path: str):
    """Existing output content, or None when there is no file."""
    target = Path(path)
    if not target.is_file():
        return None
    return _read_text(path)


def _write_text(path: str, content: str) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w", encoding="utf-8", newline="") as f:
        f.write(content)


async def translate_one(job: TranslationJob, translator: Translator) -> TranslationOutcome:
    """Translate ``job.input_path`` and write the result to ``job.output_path``.

    The write is skipped when the output file already holds exactly the
    translated text.

    Raises:
        OSError: If the input cannot be read or the output cannot be written
        TranslationServiceError: If the translator fails
    """
    content = await asyncio.to_thread(_read_text, job.input_path)
    ext = extension_hint(job.input_path)

    translated = await translator.translate(content, job.target_lang, ext)

    existing = await asyncio.to_thread(_read_existing, job.output_path)
    if existing is not None and existing == translated:
        logger.info(
            f"The result of translation was same as the existed output file: {job.output_path}"
        )
        return TranslationOutcome.SKIPPED

    logger.info(f"Create translated file {job.output_path}")
    await asyncio.to_thread(_write_text, job.output_path, translated)
    return TranslationOutcome.WRITTEN
