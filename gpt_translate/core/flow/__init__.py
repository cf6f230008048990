"""Flow controllers.

- command: comment-triggered flow and the comment command parser
- manual: push / workflow_dispatch flow over explicit file lists
"""

from .command import CommandArgs, is_command, parse_command, translate_by_command
from .manual import translate_by_manual
from .state import FlowState

__all__ = [
    "CommandArgs",
    "FlowState",
    "is_command",
    "parse_command",
    "translate_by_command",
    "translate_by_manual",
]
