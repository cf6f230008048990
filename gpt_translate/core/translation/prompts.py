"""Prompt building for file translation.

A file is sent as the user message; the system message tells the model
which language to produce and which file format to keep intact. The system
message can be replaced through the ``prompt`` action input, which may use
``{{target_language}}`` and ``{{file_extension}}`` variables.
"""

import re
from typing import Any, Dict, Optional

from .models.prompt import Message, PromptBundle

VARIABLE_PATTERN = re.compile(r"\{\{\s*([a-zA-Z_][a-zA-Z0-9_]*)\s*\}\}")

DEFAULT_SYSTEM_PROMPT = """You are a professional translator for software documentation and source files.

## Task
Translate the given text into {{target_language}}.
The text is the full content of a `{{file_extension}}` file.

## Requirements
1. Keep the original format and markup of the `{{file_extension}}` file exactly.
2. Do not translate code blocks, inline code, URLs, file paths or identifiers.
3. Keep front matter keys unchanged; translate only human-readable values.

## Output Requirements
Output only the translated file content, without any explanation or commentary."""


def render(template: str, variables: Dict[str, Any]) -> str:
    """Replace ``{{name}}`` variables; unknown variables are left as-is."""

    def _substitute(match: re.Match) -> str:
        name = match.group(1)
        if name in variables:
            return str(variables[name])
        return match.group(0)

    return VARIABLE_PATTERN.sub(_substitute, template)


def estimate_tokens(text: str) -> int:
    """Rough estimate: average 3 chars per token for mixed content."""
    return len(text) // 3


def build_prompt(
    text: str,
    target_lang: str,
    ext: str,
    custom_prompt: Optional[str] = None,
) -> PromptBundle:
    """Build the prompt bundle for one file.

    Args:
        text: Full file content
        target_lang: Language to translate into
        ext: File extension hint, without the dot
        custom_prompt: Optional replacement for the system prompt

    Returns:
        PromptBundle ready for the LLM gateway
    """
    variables = {
        "target_language": target_lang,
        "file_extension": ext or "plain text",
    }
    system_prompt = render(custom_prompt or DEFAULT_SYSTEM_PROMPT, variables)

    return PromptBundle(
        messages=[
            Message(role="system", content=system_prompt),
            Message(role="user", content=text),
        ],
        target_language=target_lang,
        file_extension=ext,
        estimated_input_tokens=estimate_tokens(system_prompt + text),
        template_variables=variables,
    )


def extract_translation(content: str, source: str) -> str:
    """Strip a code fence the model wrapped around the whole answer.

    The fence is only removed when the source itself did not start with
    one. A trailing newline is kept in step with the source.
    """
    result = content.strip("\n")

    if result.startswith("```") and not source.lstrip().startswith("```"):
        lines = result.split("\n")
        if len(lines) >= 3 and lines[-1].strip() == "```":
            result = "\n".join(lines[1:-1])

    if source.endswith("\n") and not result.endswith("\n"):
        result += "\n"
    return result
