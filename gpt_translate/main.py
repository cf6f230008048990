"""Action entry point.

Dispatches on the GitHub event that started the run:

- ``issue_comment``: ``/gpt-translate`` command in an issue or pull request
- ``push`` / ``workflow_dispatch``: translate the configured file lists

Failures are logged, reported as a comment when the run belongs to an issue
or pull request, and turned into exit status 1.
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from gpt_translate.config import Settings, get_settings
from gpt_translate.core.context import TriggerContext
from gpt_translate.core.flow import (
    FlowState,
    is_command,
    parse_command,
    translate_by_command,
    translate_by_manual,
)
from gpt_translate.core.llm import resolve_llm_config
from gpt_translate.core.translation import LLMTranslator, Translator
from gpt_translate.core.vcs import GitHubVersionControl, VersionControl
from gpt_translate.errors import ConfigError
from gpt_translate.utils.text import normalize_for_display

logger = logging.getLogger(__name__)

COMMAND_EVENTS = ("issue_comment",)
MANUAL_EVENTS = ("push", "workflow_dispatch")
MAX_COMMENT_ERROR_LENGTH = 1000


def build_translator(settings: Settings) -> Translator:
    return LLMTranslator(resolve_llm_config(settings), custom_prompt=settings.prompt)


async def dispatch(
    settings: Settings,
    trigger: TriggerContext,
    vcs: VersionControl,
    translator: Optional[Translator] = None,
) -> FlowState:
    """Run the flow matching the trigger.

    Raises:
        ConfigError: For unsupported events, unauthorized users or bad input
    """
    event = trigger.event_name

    if event in COMMAND_EVENTS:
        if not is_command(trigger.comment_body):
            logger.info("Comment is not a translate command. Skip.")
            return FlowState.NOOP

        if not trigger.actor or not await vcs.is_authorized(trigger.actor):
            raise ConfigError("You have no permission to use this bot.")

        args = parse_command(trigger.comment_body)
        return await translate_by_command(
            args.input_path,
            args.output_path,
            args.target_lang,
            translator=translator or build_translator(settings),
            vcs=vcs,
            trigger=trigger,
            max_concurrency=settings.max_concurrency,
            model=settings.model,
        )

    if event in MANUAL_EVENTS:
        return await translate_by_manual(
            settings.input_files,
            settings.output_files,
            settings.languages,
            translator=translator or build_translator(settings),
            vcs=vcs,
            trigger=trigger,
            max_concurrency=settings.max_concurrency,
            model=settings.model,
        )

    raise ConfigError(f"This event is not supported: {event or 'unknown'}")


async def report_failure(
    error: BaseException, vcs: Optional[VersionControl], trigger: TriggerContext
) -> None:
    """Post the error to the triggering issue; never raises."""
    if vcs is None or trigger.issue_number is None:
        return
    message = normalize_for_display(str(error) or type(error).__name__, MAX_COMMENT_ERROR_LENGTH)
    try:
        await vcs.post_comment(f"❌ {message}")
    except Exception as e:
        logger.warning(f"Failed to post error comment: {e}")


async def main(
    settings: Optional[Settings] = None,
    *,
    trigger: Optional[TriggerContext] = None,
    vcs: Optional[VersionControl] = None,
    translator: Optional[Translator] = None,
) -> FlowState:
    """Build collaborators from settings (unless given) and run one flow."""
    settings = settings or get_settings()
    trigger = trigger or TriggerContext.load(
        settings.github_event_name, settings.github_event_path
    )

    try:
        vcs = vcs or GitHubVersionControl.from_settings(settings, trigger)
        state = await dispatch(settings, trigger, vcs, translator)
    except Exception as e:
        await report_failure(e, vcs, trigger)
        raise

    logger.info(f"Finished: {state.value}")
    return state


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # litellm is chatty at INFO
    logging.getLogger("LiteLLM").setLevel(logging.WARNING)


def run(argv: Optional[list[str]] = None) -> int:
    """Console script entry point. Returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="gpt-translate",
        description="Translate repository files with an LLM and open a pull request.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        asyncio.run(main())
    except Exception as e:
        logger.error(f"Translation failed: {e}")
        logger.debug("Traceback:", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
