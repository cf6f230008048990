"""Command-triggered flow: ``/gpt-translate <input> <output> <language>``.

Runs from an issue or pull request comment. On a pull request the
translations are pushed to the pull request's own branch; on an issue a new
branch and pull request are created.
"""

import logging
import shlex
from dataclasses import dataclass
from typing import Optional

from gpt_translate.core.context import TriggerContext
from gpt_translate.core.translation import (
    Translator,
    derive_output_paths,
    expand_glob,
    translate_all,
)
from gpt_translate.core.vcs import PR_TITLE, VersionControl, generate_pr_body
from gpt_translate.errors import ConfigError

from .state import FlowState

logger = logging.getLogger(__name__)

COMMAND_PREFIXES = ("/gpt-translate", "/gt")
USAGE = "Usage: /gpt-translate <input file path> <output file path> <target language>"

PR_UPDATED_COMMENT = "🎉Translation completed!"
PR_CREATED_COMMENT = "🎉 Translation PR created!"


@dataclass(frozen=True)
class CommandArgs:
    """Arguments of a translate command."""

    input_path: str
    output_path: str
    target_lang: str


def is_command(body: str) -> bool:
    """Whether a comment body starts with a translate command."""
    first = body.strip().split(maxsplit=1)
    return bool(first) and first[0] in COMMAND_PREFIXES


def parse_command(body: str) -> CommandArgs:
    """Parse the first line of a comment into command arguments.

    Quoted arguments are supported, e.g. ``/gt docs/*.md "docs/{lang}/*.md" "Traditional Chinese"``.

    Raises:
        ConfigError: If the comment is not a command or has the wrong arity
    """
    lines = body.strip().splitlines()
    first_line = lines[0] if lines else ""

    try:
        parts = shlex.split(first_line)
    except ValueError as e:
        raise ConfigError(f"Invalid command: {e}. {USAGE}") from e

    if not parts or parts[0] not in COMMAND_PREFIXES:
        raise ConfigError(f"Not a translate command. {USAGE}")

    args = parts[1:]
    if len(args) != 3:
        raise ConfigError(
            f"Invalid number of arguments: expected 3, got {len(args)}. {USAGE}"
        )

    input_path, output_path, target_lang = args
    return CommandArgs(input_path=input_path, output_path=output_path, target_lang=target_lang)


async def translate_by_command(
    input_pattern: str,
    output_template: str,
    target_lang: str,
    *,
    translator: Translator,
    vcs: VersionControl,
    trigger: TriggerContext,
    max_concurrency: Optional[int] = None,
    model: Optional[str] = None,
) -> FlowState:
    """Translate the files matching ``input_pattern`` and publish them.

    Raises:
        ConfigError: If the pattern matches no files
    """
    await vcs.set_config()
    branch = await vcs.checkout() if trigger.is_pr else await vcs.create_branch()

    input_paths = expand_glob(input_pattern)
    if not input_paths:
        raise ConfigError("No input files found.")

    output_paths = derive_output_paths(input_paths, output_template, target_lang)
    logger.info(f"Translating {len(input_paths)} file(s) into {target_lang} on {branch}")

    await translate_all(
        input_paths,
        output_paths,
        target_lang,
        translator,
        max_concurrency=max_concurrency,
    )

    await vcs.commit_push(branch, output_paths)
    if trigger.is_pr:
        await vcs.post_comment(PR_UPDATED_COMMENT)
        return FlowState.PR_UPDATED

    body = generate_pr_body(
        input_paths,
        output_paths,
        target_lang,
        issue_number=trigger.issue_number,
        model=model,
    )
    await vcs.create_pull_request(branch, PR_TITLE, body)
    await vcs.post_comment(PR_CREATED_COMMENT)
    return FlowState.PR_CREATED
