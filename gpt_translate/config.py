"""Application configuration."""

from pathlib import Path
from typing import Annotated, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .errors import ConfigError


def split_list_input(value: Optional[str]) -> list[str]:
    """Split a comma or newline separated action input into a list."""
    if not value:
        return []
    items = value.replace("\n", ",").split(",")
    return [item.strip() for item in items if item.strip()]


class Settings(BaseSettings):
    """Settings loaded from action inputs and runner environment variables.

    GitHub Actions exposes ``with:`` inputs as ``INPUT_<NAME>`` variables,
    hence the ``INPUT_`` prefix. Runner variables (``GITHUB_*``) are mapped
    through explicit aliases.
    """

    # LLM
    apikey: Optional[str] = None
    provider: str = "openai"
    model: str = "gpt-4o"
    base_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("INPUT_BASEURL", "INPUT_BASE_URL")
    )
    prompt: Optional[str] = None
    temperature: float = 0.3
    max_tokens: Optional[int] = None

    # Translation settings
    max_concurrency: int = 5
    max_retries: int = 3
    retry_min_wait: float = 2.0
    retry_max_wait: float = 30.0

    # Manual trigger inputs (comma or newline separated)
    input_files: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        validation_alias=AliasChoices("INPUT_INPUTFILES", "INPUT_INPUT_FILES"),
    )
    output_files: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        validation_alias=AliasChoices("INPUT_OUTPUTFILES", "INPUT_OUTPUT_FILES"),
    )
    languages: Annotated[list[str], NoDecode] = Field(default_factory=list)

    # GitHub
    github_token: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("INPUT_TOKEN", "GITHUB_TOKEN"),
    )
    github_repository: Optional[str] = Field(
        default=None, validation_alias="GITHUB_REPOSITORY"
    )
    github_event_name: Optional[str] = Field(
        default=None, validation_alias="GITHUB_EVENT_NAME"
    )
    github_event_path: Optional[Path] = Field(
        default=None, validation_alias="GITHUB_EVENT_PATH"
    )
    github_api_url: str = Field(
        default="https://api.github.com", validation_alias="GITHUB_API_URL"
    )
    github_run_id: Optional[str] = Field(default=None, validation_alias="GITHUB_RUN_ID")
    workspace: Path = Field(default=Path("."), validation_alias="GITHUB_WORKSPACE")

    # Git identity and PR target
    base_branch: Optional[str] = None
    git_user_name: str = "github-actions[bot]"
    git_user_email: str = "41898282+github-actions[bot]@users.noreply.github.com"

    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("input_files", "output_files", "languages", mode="before")
    @classmethod
    def _split_lists(cls, value):
        if isinstance(value, str):
            return split_list_input(value)
        return value

    @field_validator("max_concurrency", "max_retries")
    @classmethod
    def _at_least_one(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be at least 1")
        return value

    @property
    def repo_owner(self) -> str:
        return self._split_repository()[0]

    @property
    def repo_name(self) -> str:
        return self._split_repository()[1]

    def _split_repository(self) -> tuple[str, str]:
        if not self.github_repository or "/" not in self.github_repository:
            raise ConfigError(
                f"GITHUB_REPOSITORY must look like 'owner/repo', got {self.github_repository!r}"
            )
        owner, repo = self.github_repository.split("/", 1)
        return owner, repo


def get_settings(**overrides) -> Settings:
    """Build settings from the environment, with optional overrides."""
    return Settings(**overrides)
