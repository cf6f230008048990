"""Trigger context: what started this run.

The flow controllers receive a ``TriggerContext`` explicitly instead of
reading the GitHub event themselves.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class TriggerKind(str, Enum):
    """Where the run was triggered from."""

    PULL_REQUEST = "pull_request"  # Comment on a pull request
    ISSUE = "issue"  # Comment on a plain issue
    OTHER = "other"  # push, workflow_dispatch, schedule...


@dataclass(frozen=True)
class TriggerContext:
    """Explicit trigger information for one run."""

    kind: TriggerKind = TriggerKind.OTHER
    event_name: str = ""
    issue_number: Optional[int] = None
    comment_body: str = ""
    actor: Optional[str] = None

    @property
    def is_pr(self) -> bool:
        return self.kind == TriggerKind.PULL_REQUEST

    @classmethod
    def from_event(cls, event_name: str, payload: Dict[str, Any]) -> "TriggerContext":
        """Build the context from a GitHub event name and payload."""
        issue = payload.get("issue") or {}
        pull_request = payload.get("pull_request") or {}
        comment = payload.get("comment") or {}

        if event_name == "issue_comment":
            kind = TriggerKind.PULL_REQUEST if issue.get("pull_request") else TriggerKind.ISSUE
            number = issue.get("number")
        elif pull_request:
            kind = TriggerKind.PULL_REQUEST
            number = pull_request.get("number") or payload.get("number")
        else:
            kind = TriggerKind.OTHER
            number = issue.get("number")

        actor = (comment.get("user") or {}).get("login") or (
            payload.get("sender") or {}
        ).get("login")

        return cls(
            kind=kind,
            event_name=event_name,
            issue_number=number,
            comment_body=comment.get("body") or "",
            actor=actor,
        )

    @classmethod
    def load(cls, event_name: Optional[str], event_path: Optional[Path]) -> "TriggerContext":
        """Read the event payload file written by the Actions runner."""
        payload: Dict[str, Any] = {}
        if event_path and Path(event_path).is_file():
            with open(event_path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        elif event_path:
            logger.warning(f"Event payload not found: {event_path}")

        context = cls.from_event(event_name or "", payload)
        logger.info(
            f"Trigger: event={context.event_name or '-'}, kind={context.kind.value}, "
            f"issue={context.issue_number}"
        )
        return context
