"""Translation data models."""

from .job import TranslationJob, TranslationOutcome
from .prompt import Message, PromptBundle

__all__ = [
    "TranslationJob",
    "TranslationOutcome",
    "Message",
    "PromptBundle",
]
