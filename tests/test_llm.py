"""Tests for LLM config resolution, the gateway and the LLM translator."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from gpt_translate.config import Settings
from gpt_translate.core.llm import LLMGateway, LLMRuntimeConfig, resolve_llm_config
from gpt_translate.core.translation import LLMTranslator, TranslationJob, TranslationOutcome, translate_one
from gpt_translate.errors import ConfigError, TranslationServiceError


def _completion(content, total_tokens=30):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(prompt_tokens=10, completion_tokens=20, total_tokens=total_tokens),
    )


@pytest.fixture
def config():
    return LLMRuntimeConfig(
        provider="openai",
        model="gpt-4o",
        api_key="sk-test",
        max_retries=3,
        retry_min_wait=0,
        retry_max_wait=0,
    )


class TestRuntimeConfig:

    def test_litellm_model_prefix(self):
        assert LLMRuntimeConfig("openai", "gpt-4o", "k").get_litellm_model() == "gpt-4o"
        assert (
            LLMRuntimeConfig("anthropic", "claude-sonnet-4", "k").get_litellm_model()
            == "anthropic/claude-sonnet-4"
        )
        assert LLMRuntimeConfig("gemini", "gemini/x", "k").get_litellm_model() == "gemini/x"

    def test_kwargs(self):
        config = LLMRuntimeConfig("openai", "gpt-4o", "k", base_url="http://proxy", max_tokens=100)
        kwargs = config.to_litellm_kwargs()
        assert kwargs["api_base"] == "http://proxy"
        assert kwargs["max_tokens"] == 100
        assert "max_tokens" not in LLMRuntimeConfig("openai", "m", "k").to_litellm_kwargs()

    def test_resolve_from_input(self):
        config = resolve_llm_config(Settings(apikey="sk-input", model="gpt-4o-mini", _env_file=None))
        assert config.api_key == "sk-input"
        assert config.model == "gpt-4o-mini"

    def test_resolve_from_provider_environment(self, monkeypatch):
        monkeypatch.delenv("INPUT_APIKEY", raising=False)
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant")
        config = resolve_llm_config(Settings(provider="anthropic", _env_file=None))
        assert config.api_key == "sk-ant"

    def test_resolve_without_key(self, monkeypatch):
        monkeypatch.delenv("INPUT_APIKEY", raising=False)
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with pytest.raises(ConfigError, match="No API key"):
            resolve_llm_config(Settings(_env_file=None))


class TestGateway:

    async def test_execute(self, config):
        mock = AsyncMock(return_value=_completion("Bonjour"))
        with patch("gpt_translate.core.llm.gateway.acompletion", mock):
            response = await LLMGateway.execute("system", "Hello", config)

        assert response.content == "Bonjour"
        assert response.total_tokens == 30
        kwargs = mock.call_args.kwargs
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["messages"][1] == {"role": "user", "content": "Hello"}

    async def test_retries_then_succeeds(self, config):
        mock = AsyncMock(side_effect=[RuntimeError("429"), _completion("ok")])
        with patch("gpt_translate.core.llm.gateway.acompletion", mock):
            response = await LLMGateway.execute("s", "u", config)

        assert response.content == "ok"
        assert response.attempts == 2
        assert mock.call_count == 2

    async def test_gives_up_after_max_retries(self, config):
        mock = AsyncMock(side_effect=RuntimeError("network down"))
        with patch("gpt_translate.core.llm.gateway.acompletion", mock):
            with pytest.raises(TranslationServiceError, match="3 attempt") as exc_info:
                await LLMGateway.execute("s", "u", config)

        assert mock.call_count == 3
        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestLLMTranslator:

    async def test_translate_builds_prompt(self, config):
        mock = AsyncMock(return_value=_completion("# Bonjour\n"))
        with patch("gpt_translate.core.llm.gateway.acompletion", mock):
            result = await LLMTranslator(config).translate("# Hello\n", "French", "md")

        assert result == "# Bonjour\n"
        messages = mock.call_args.kwargs["messages"]
        assert "French" in messages[0]["content"]
        assert "`md`" in messages[0]["content"]
        assert messages[1]["content"] == "# Hello\n"

    async def test_custom_prompt(self, config):
        mock = AsyncMock(return_value=_completion("Hola"))
        translator = LLMTranslator(config, custom_prompt="Translate to {{target_language}} ({{file_extension}}).")
        with patch("gpt_translate.core.llm.gateway.acompletion", mock):
            await translator.translate("Hi", "Spanish", "txt")

        assert mock.call_args.kwargs["messages"][0]["content"] == "Translate to Spanish (txt)."

    async def test_empty_completion_is_an_error(self, config):
        mock = AsyncMock(return_value=_completion("   "))
        with patch("gpt_translate.core.llm.gateway.acompletion", mock):
            with pytest.raises(TranslationServiceError, match="empty"):
                await LLMTranslator(config).translate("Hi", "fr", "md")

    @pytest.mark.parametrize("source", ["", "\n\n", "  "])
    async def test_blank_source_skips_llm(self, config, source):
        mock = AsyncMock(return_value=_completion(""))
        with patch("gpt_translate.core.llm.gateway.acompletion", mock):
            assert await LLMTranslator(config).translate(source, "fr", "md") == source
        mock.assert_not_called()

    async def test_blank_file_is_written(self, config, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "empty.md").write_text("", encoding="utf-8")
        mock = AsyncMock(return_value=_completion(""))

        with patch("gpt_translate.core.llm.gateway.acompletion", mock):
            outcome = await translate_one(
                TranslationJob("empty.md", "out/empty.md", "fr"), LLMTranslator(config)
            )

        assert outcome == TranslationOutcome.WRITTEN
        assert (tmp_path / "out" / "empty.md").read_text(encoding="utf-8") == ""
