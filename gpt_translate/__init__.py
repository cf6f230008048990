"""gpt-translate: translate repository files with an LLM from GitHub Actions."""

__version__ = "0.1.0"
