"""Manually-triggered flow (push, workflow_dispatch).

Explicit input files are translated into every configured language, each
language with its own output template, and one pull request is opened for
all of them.
"""

import asyncio
import logging
from typing import Optional, Sequence

from gpt_translate.core.context import TriggerContext
from gpt_translate.core.translation import Translator, derive_output_paths, translate_all
from gpt_translate.core.translation.batch import DEFAULT_MAX_CONCURRENCY
from gpt_translate.core.vcs import PR_TITLE, VersionControl, generate_pr_body
from gpt_translate.errors import ConfigError

from .state import FlowState

logger = logging.getLogger(__name__)

MISSING_PARAMETERS_MESSAGE = (
    "Error: For push execution, all three parameters "
    "(inputFiles, outputFiles and languages) are required"
)
LENGTH_MISMATCH_MESSAGE = "Error: outputFiles and languages must be same length."


def _unique(paths: Sequence[str]) -> list[str]:
    return list(dict.fromkeys(paths))


async def translate_by_manual(
    input_files: Sequence[str],
    output_files: Sequence[str],
    languages: Sequence[str],
    *,
    translator: Translator,
    vcs: VersionControl,
    trigger: TriggerContext,
    max_concurrency: Optional[int] = None,
    model: Optional[str] = None,
) -> FlowState:
    """Translate ``input_files`` into every language and open one pull request.

    ``output_files[i]`` is the output template for ``languages[i]``.

    Raises:
        ConfigError: If templates or languages are missing or differ in number
    """
    if not input_files:
        logger.info("No input files specified. Skip translation.")
        return FlowState.NOOP

    if not output_files or not languages:
        raise ConfigError(MISSING_PARAMETERS_MESSAGE)
    if len(output_files) != len(languages):
        raise ConfigError(LENGTH_MISMATCH_MESSAGE)

    output_groups = [
        derive_output_paths(input_files, template, language)
        for template, language in zip(output_files, languages)
    ]

    # TODO: Split files that exceed the model's context window into chunks
    semaphore = asyncio.Semaphore(max_concurrency or DEFAULT_MAX_CONCURRENCY)
    logger.info(
        f"Translating {len(input_files)} file(s) into {len(languages)} language(s): "
        f"{', '.join(languages)}"
    )
    results = await asyncio.gather(
        *(
            translate_all(input_files, outputs, language, translator, semaphore=semaphore)
            for outputs, language in zip(output_groups, languages)
        ),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            raise result

    await vcs.set_config()
    branch = await vcs.create_branch()
    await vcs.commit_push(branch, _unique([p for group in output_groups for p in group]))

    body = generate_pr_body(
        input_files,
        output_groups,
        languages,
        issue_number=trigger.issue_number,
        model=model,
    )
    await vcs.create_pull_request(branch, PR_TITLE, body)
    return FlowState.PR_CREATED
