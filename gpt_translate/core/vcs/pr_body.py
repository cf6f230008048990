"""Pull request text and branch naming."""

from datetime import datetime, timezone
from typing import Optional, Sequence, Union

PR_TITLE = "🌐 Add LLM Translations"
COMMIT_MESSAGE = "🌐 Add LLM Translations"
BRANCH_PREFIX = "gpt-translate"


def generate_branch_name(
    issue_number: Optional[int] = None,
    now: Optional[datetime] = None,
    run_id: Optional[str] = None,
) -> str:
    """Build a unique branch name such as ``gpt-translate/12-20261018-093000``.

    The issue number is used when there is one, otherwise the workflow run id.
    """
    now = now or datetime.now(timezone.utc)
    stamp = now.strftime("%Y%m%d-%H%M%S")
    key = issue_number if issue_number is not None else run_id
    if key:
        return f"{BRANCH_PREFIX}/{key}-{stamp}"
    return f"{BRANCH_PREFIX}/{stamp}"


def _file_list(paths: Sequence[str]) -> str:
    return "<br>".join(f"`{path}`" for path in paths)


def generate_pr_body(
    input_paths: Sequence[str],
    output_paths: Union[Sequence[str], Sequence[Sequence[str]]],
    languages: Union[str, Sequence[str]],
    issue_number: Optional[int] = None,
    model: Optional[str] = None,
) -> str:
    """Build the markdown body of a translation pull request.

    ``output_paths`` is either one list (single language) or one list per
    language, aligned with ``languages``.
    """
    if isinstance(languages, str):
        languages = [languages]
        output_groups = [list(output_paths)]
    else:
        output_groups = [list(group) for group in output_paths]

    lines = [
        "## ✅ LLM Translation completed",
        "",
        "| **Name** | **Value** |",
        "| --- | --- |",
        f"| **Source** | {_file_list(input_paths)} |",
    ]
    for language, outputs in zip(languages, output_groups):
        lines.append(f"| **Output ({language})** | {_file_list(outputs)} |")
    lines.append(f"| **Language** | {', '.join(languages)} |")
    if model:
        lines.append(f"| **Model** | {model} |")
    if issue_number is not None:
        lines.append(f"| **Event** | Triggered by #{issue_number} |")
    else:
        lines.append("| **Event** | Triggered by workflow |")

    lines.extend(
        [
            "",
            "> Translations are generated by an LLM. Please review them before merging.",
        ]
    )
    return "\n".join(lines) + "\n"
