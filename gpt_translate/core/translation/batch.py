"""Concurrent translation of a batch of files."""

import asyncio
import logging
from typing import Optional, Sequence

from gpt_translate.errors import ConfigError

from .invoker import translate_one
from .models.job import TranslationJob, TranslationOutcome
from .translator import Translator

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENCY = 5


async def translate_all(
    input_paths: Sequence[str],
    output_paths: Sequence[str],
    target_lang: str,
    translator: Translator,
    *,
    max_concurrency: Optional[int] = None,
    semaphore: Optional[asyncio.Semaphore] = None,
) -> list[TranslationOutcome]:
    """Translate every input file into its paired output path.

    ``input_paths`` and ``output_paths`` pair up by index. At most
    ``max_concurrency`` translations run at once; pass ``semaphore`` to
    share one bound between several batches.

    Every sibling is allowed to finish. If any of them failed, the first
    failure in input order is raised; files already written stay written.

    Returns:
        One outcome per input, in input order

    Raises:
        ConfigError: If the two path lists differ in length
    """
    if len(input_paths) != len(output_paths):
        raise ConfigError(
            f"inputFilePaths and outputFilePaths must be same length "
            f"({len(input_paths)} != {len(output_paths)})"
        )

    if semaphore is None:
        semaphore = asyncio.Semaphore(max_concurrency or DEFAULT_MAX_CONCURRENCY)

    async def _run(job: TranslationJob) -> TranslationOutcome:
        async with semaphore:
            return await translate_one(job, translator)

    jobs = [
        TranslationJob(input_path=src, output_path=dst, target_lang=target_lang)
        for src, dst in zip(input_paths, output_paths)
    ]
    results = await asyncio.gather(*(_run(job) for job in jobs), return_exceptions=True)

    failures = [
        (job, result) for job, result in zip(jobs, results)
        if isinstance(result, BaseException)
    ]
    if failures:
        for job, error in failures:
            logger.error(f"Translation failed: {job.input_path} -> {job.output_path}: {error}")
        logger.error(
            f"{len(failures)} of {len(jobs)} translations into {target_lang} failed"
        )
        raise failures[0][1]

    written = sum(1 for result in results if result == TranslationOutcome.WRITTEN)
    logger.info(
        f"Translated {len(jobs)} file(s) into {target_lang}: "
        f"{written} written, {len(jobs) - written} unchanged"
    )
    return list(results)
