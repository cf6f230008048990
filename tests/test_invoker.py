"""Tests for the per-file translation step."""

from unittest.mock import patch

import pytest

from conftest import FakeTranslator
from gpt_translate.core.translation import TranslationJob, TranslationOutcome, invoker, translate_one
from gpt_translate.errors import TranslationServiceError


async def test_writes_new_file_and_creates_directories(workdir, translator):
    (workdir / "a.md").write_text("Hello", encoding="utf-8")

    outcome = await translate_one(TranslationJob("a.md", "i18n/fr/a.md", "fr"), translator)

    assert outcome == TranslationOutcome.WRITTEN
    assert (workdir / "i18n" / "fr" / "a.md").read_text(encoding="utf-8") == "Bonjour"
    assert translator.calls == [("Hello", "fr", "md")]


async def test_skips_identical_output(workdir, translator):
    (workdir / "a.md").write_text("Hello", encoding="utf-8")
    target = workdir / "a.fr.md"
    target.write_text("Bonjour", encoding="utf-8")

    with patch("gpt_translate.core.translation.invoker._write_text") as write:
        outcome = await translate_one(TranslationJob("a.md", "a.fr.md", "fr"), translator)

    assert outcome == TranslationOutcome.SKIPPED
    write.assert_not_called()


async def test_second_run_is_a_skip(workdir, translator):
    (workdir / "a.md").write_text("Hello", encoding="utf-8")
    job = TranslationJob("a.md", "out/a.md", "fr")

    with patch.object(invoker, "_write_text", wraps=invoker._write_text) as write:
        first = await translate_one(job, translator)
        second = await translate_one(job, translator)

    assert (first, second) == (TranslationOutcome.WRITTEN, TranslationOutcome.SKIPPED)
    assert write.call_count == 1


async def test_overwrites_different_output(workdir):
    (workdir / "a.md").write_text("Hello", encoding="utf-8")
    (workdir / "a.fr.md").write_text("Salut", encoding="utf-8")

    outcome = await translate_one(TranslationJob("a.md", "a.fr.md", "fr"), FakeTranslator("Bonjour"))

    assert outcome == TranslationOutcome.WRITTEN
    assert (workdir / "a.fr.md").read_text(encoding="utf-8") == "Bonjour"


async def test_missing_input_raises_oserror(workdir, translator):
    with pytest.raises(OSError):
        await translate_one(TranslationJob("missing.md", "out.md", "fr"), translator)
    assert translator.calls == []


async def test_translator_failure_propagates_without_write(workdir):
    (workdir / "a.md").write_text("Hello", encoding="utf-8")
    failing = FakeTranslator(fail_on={"Hello": TranslationServiceError("rate limited")})

    with pytest.raises(TranslationServiceError, match="rate limited"):
        await translate_one(TranslationJob("a.md", "out/a.md", "fr"), failing)

    assert not (workdir / "out").exists()


async def test_extension_hint_passed_to_translator(workdir, translator):
    (workdir / "page.html").write_text("<p>Hi</p>", encoding="utf-8")
    await translate_one(TranslationJob("page.html", "page.fr.html", "fr"), translator)
    assert translator.calls[0][2] == "html"


async def test_crlf_content_is_kept_byte_for_byte(workdir):
    (workdir / "a.md").write_bytes(b"Hello\r\n")
    (workdir / "a.fr.md").write_bytes(b"Bonjour\r\n")
    translator = FakeTranslator("Bonjour\n")

    outcome = await translate_one(TranslationJob("a.md", "a.fr.md", "fr"), translator)

    assert translator.calls[0][0] == "Hello\r\n"
    assert outcome == TranslationOutcome.WRITTEN
    assert (workdir / "a.fr.md").read_bytes() == b"Bonjour\n"


async def test_crlf_translation_written_unchanged(workdir):
    (workdir / "a.md").write_bytes(b"Hello\r\n")

    await translate_one(TranslationJob("a.md", "a.fr.md", "fr"), FakeTranslator("Bonjour\r\n"))

    assert (workdir / "a.fr.md").read_bytes() == b"Bonjour\r\n"
