"""Terminal states of a flow run."""

from enum import Enum


class FlowState(str, Enum):
    NOOP = "noop"
    PR_UPDATED = "pr-updated"
    PR_CREATED = "pr-created"
