"""Prompt models handed from the prompt builder to the LLM gateway."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Message(BaseModel):
    """One chat message."""

    role: str = Field(..., description="'system', 'user' or 'assistant'")
    content: str = Field(..., description="Message text")


class PromptBundle(BaseModel):
    """Messages for translating one file, plus metadata for logging."""

    messages: List[Message] = Field(..., description="Chat messages in send order")

    target_language: str = Field(..., description="Language to translate into")
    file_extension: str = Field(default="", description="Extension hint without dot")
    estimated_input_tokens: int = Field(
        default=0, description="Rough token count of all messages"
    )
    template_variables: Dict[str, Any] = Field(
        default_factory=dict, description="Values substituted into the system prompt"
    )

    def _first(self, role: str) -> Optional[str]:
        return next((m.content for m in self.messages if m.role == role), None)

    @property
    def system_prompt(self) -> Optional[str]:
        return self._first("system")

    @property
    def user_prompt(self) -> Optional[str]:
        return self._first("user")

    def to_openai_format(self) -> List[Dict[str, str]]:
        """Messages as ``{"role", "content"}`` dicts for ``acompletion``."""
        return [m.model_dump(include={"role", "content"}) for m in self.messages]
