"""Shared pytest fixtures: fake translator and version control."""

import asyncio
from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from gpt_translate.core.context import TriggerContext, TriggerKind
from gpt_translate.core.translation import Translator
from gpt_translate.core.vcs import VersionControl


class FakeTranslator(Translator):
    """Returns canned translations and records every call."""

    def __init__(
        self,
        result: str = "Bonjour",
        by_lang: Optional[Dict[str, str]] = None,
        fail_on: Optional[Dict[str, Exception]] = None,
        delay: float = 0.0,
    ):
        self.result = result
        self.by_lang = by_lang or {}
        self.fail_on = fail_on or {}
        self.delay = delay
        self.calls: List[Tuple[str, str, str]] = []
        self.active = 0
        self.max_active = 0

    async def translate(self, text: str, target_lang: str, ext: str) -> str:
        self.calls.append((text, target_lang, ext))
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            if text in self.fail_on:
                raise self.fail_on[text]
            return self.by_lang.get(target_lang, self.result)
        finally:
            self.active -= 1


class FakeVersionControl(VersionControl):
    """Records every call in order instead of touching a repository."""

    def __init__(self, branch: str = "gpt-translate/test", pr_branch: str = "feature/docs",
                 authorized: bool = True):
        self.branch = branch
        self.pr_branch = pr_branch
        self.authorized = authorized
        self.calls: List[Tuple] = []
        self.comments: List[str] = []
        self.pull_requests: List[Tuple[str, str, str]] = []
        self.pushed: List[Tuple[str, List[str]]] = []

    @property
    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]

    async def set_config(self) -> None:
        self.calls.append(("set_config",))

    async def checkout(self) -> str:
        self.calls.append(("checkout",))
        return self.pr_branch

    async def create_branch(self) -> str:
        self.calls.append(("create_branch",))
        return self.branch

    async def commit_push(self, branch: str, paths: Sequence[str]) -> None:
        self.calls.append(("commit_push", branch, list(paths)))
        self.pushed.append((branch, list(paths)))

    async def create_pull_request(self, branch: str, title: str, body: str) -> str:
        self.calls.append(("create_pull_request", branch, title))
        self.pull_requests.append((branch, title, body))
        return "https://github.com/owner/repo/pull/1"

    async def post_comment(self, body: str) -> None:
        self.calls.append(("post_comment", body))
        self.comments.append(body)

    async def is_authorized(self, username: str) -> bool:
        self.calls.append(("is_authorized", username))
        return self.authorized


@pytest.fixture
def translator():
    return FakeTranslator()


@pytest.fixture
def vcs():
    return FakeVersionControl()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def issue_trigger():
    return TriggerContext(kind=TriggerKind.ISSUE, event_name="issue_comment", issue_number=7)


@pytest.fixture
def pr_trigger():
    return TriggerContext(kind=TriggerKind.PULL_REQUEST, event_name="issue_comment", issue_number=9)


@pytest.fixture
def push_trigger():
    return TriggerContext(kind=TriggerKind.OTHER, event_name="push")
