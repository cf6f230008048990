"""Exception types raised by gpt-translate.

Filesystem failures are not wrapped: an unreadable input or unwritable
output surfaces as the builtin ``OSError``.
"""


class GptTranslateError(Exception):
    """Base class for all gpt-translate errors."""


class ConfigError(GptTranslateError):
    """Invalid or missing parameters (bad glob, list mismatch, bad command)."""


class TranslationServiceError(GptTranslateError):
    """The LLM call failed or returned nothing usable."""


class VersionControlError(GptTranslateError):
    """A git command or GitHub API request failed."""
