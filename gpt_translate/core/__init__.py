"""Core components: translation, LLM access, version control and flows."""
