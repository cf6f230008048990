"""GitHub implementation of ``VersionControl``.

Local git plumbing goes through GitPython; pull requests, comments and
permission checks go through the GitHub REST API with ``requests``. Both
are blocking, so every public coroutine hands its work to a thread.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import git
import requests

from gpt_translate.config import Settings
from gpt_translate.core.context import TriggerContext
from gpt_translate.errors import ConfigError, VersionControlError
from gpt_translate.utils.text import safe_truncate

from .base import VersionControl
from .pr_body import COMMIT_MESSAGE, generate_branch_name

logger = logging.getLogger(__name__)

MAX_ERROR_MESSAGE_LENGTH = 500
WRITE_PERMISSIONS = ("admin", "maintain", "write")


class GitHubClient:
    """Minimal GitHub REST API client."""

    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        api_url: str = "https://api.github.com",
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ):
        self.owner = owner
        self.repo = repo
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )

    @property
    def repo_url(self) -> str:
        return f"{self.api_url}/repos/{self.owner}/{self.repo}"

    @staticmethod
    def _extract_error_message(response: requests.Response) -> str:
        """Extract a readable error message, including validation errors."""
        try:
            error_data = response.json()
        except ValueError:
            return f"HTTP {response.status_code}"

        message = error_data.get("message", f"HTTP {response.status_code}")
        details = []
        for err in error_data.get("errors") or []:
            if isinstance(err, dict):
                details.append(
                    err.get("message")
                    or f"{err.get('resource', 'unknown')}.{err.get('field', 'unknown')}: "
                    f"{err.get('code', 'unknown')}"
                )
            else:
                details.append(str(err))
        if details:
            message = f"{message} ({', '.join(details)})"
        return message

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        url = f"{self.repo_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise VersionControlError(f"GitHub API request failed: {method} {path}: {e}") from e

        if not response.ok:
            error_msg = safe_truncate(
                self._extract_error_message(response), MAX_ERROR_MESSAGE_LENGTH
            )
            raise VersionControlError(
                f"GitHub API error: {method} {path} -> {response.status_code}: {error_msg}"
            )
        return response.json() if response.content else {}

    def get_default_branch(self) -> str:
        return self._request("GET", "")["default_branch"]

    def get_pull_request(self, number: int) -> Dict[str, Any]:
        return self._request("GET", f"/pulls/{number}")

    def create_pull_request(self, head: str, base: str, title: str, body: str) -> str:
        data = self._request(
            "POST",
            "/pulls",
            json={"title": title, "body": body, "head": head, "base": base},
        )
        return data["html_url"]

    def create_comment(self, issue_number: int, body: str) -> None:
        self._request("POST", f"/issues/{issue_number}/comments", json={"body": body})

    def get_permission(self, username: str) -> str:
        data = self._request("GET", f"/collaborators/{username}/permission")
        return data.get("permission", "none")


class GitHubVersionControl(VersionControl):
    """VersionControl backed by a local checkout and the GitHub API."""

    def __init__(
        self,
        repo: git.Repo,
        client: GitHubClient,
        trigger: TriggerContext,
        *,
        user_name: str,
        user_email: str,
        base_branch: Optional[str] = None,
        run_id: Optional[str] = None,
    ):
        self.repo = repo
        self.client = client
        self.trigger = trigger
        self.user_name = user_name
        self.user_email = user_email
        self.base_branch = base_branch
        self.run_id = run_id

    @classmethod
    def from_settings(cls, settings: Settings, trigger: TriggerContext) -> "GitHubVersionControl":
        """Open the workspace repository and build the API client.

        Raises:
            ConfigError: If the token is missing
            VersionControlError: If the workspace is not a git repository
        """
        if not settings.github_token:
            raise ConfigError("A GitHub token is required (the 'token' input or GITHUB_TOKEN)")

        try:
            repo = git.Repo(Path(settings.workspace), search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise VersionControlError(
                f"Invalid git repository at {settings.workspace}: {e}"
            ) from e

        client = GitHubClient(
            token=settings.github_token,
            owner=settings.repo_owner,
            repo=settings.repo_name,
            api_url=settings.github_api_url,
        )
        return cls(
            repo,
            client,
            trigger,
            user_name=settings.git_user_name,
            user_email=settings.git_user_email,
            base_branch=settings.base_branch,
            run_id=settings.github_run_id,
        )

    def _git(self, operation: str, *args: str) -> str:
        """Run a git command, converting failures to VersionControlError."""
        try:
            return getattr(self.repo.git, operation)(*args)
        except git.exc.GitCommandError as e:
            raise VersionControlError(f"Git error {operation}: {e!s}") from e

    def _set_config(self) -> None:
        with self.repo.config_writer() as config:
            config.set_value("user", "name", self.user_name)
            config.set_value("user", "email", self.user_email)
        logger.info(f"Configured git identity: {self.user_name} <{self.user_email}>")

    def _checkout(self) -> str:
        if self.trigger.issue_number is None:
            raise VersionControlError("Cannot check out a pull request without its number")

        pull = self.client.get_pull_request(self.trigger.issue_number)
        branch = pull["head"]["ref"]
        self._git("fetch", "origin", branch)
        self._git("checkout", branch)
        logger.info(f"Checked out pull request branch {branch}")
        return branch

    def _create_branch(self) -> str:
        branch = generate_branch_name(self.trigger.issue_number, run_id=self.run_id)
        self._git("checkout", "-b", branch)
        logger.info(f"Created branch {branch}")
        return branch

    def _commit_push(self, branch: str, paths: Sequence[str]) -> None:
        # Paths are relative to the process working directory
        if paths:
            self._git("add", "--", *(str(Path(p).resolve()) for p in paths))

        if self.repo.is_dirty(index=True, working_tree=False, untracked_files=False):
            self._git("commit", "-m", COMMIT_MESSAGE)
            logger.info(f"Committed {len(paths)} file(s) to {branch}")
        else:
            logger.info("No changes to commit")

        self._git("push", "origin", f"HEAD:refs/heads/{branch}")
        logger.info(f"Pushed {branch}")

    def _create_pull_request(self, branch: str, title: str, body: str) -> str:
        base = self.base_branch or self.client.get_default_branch()
        url = self.client.create_pull_request(head=branch, base=base, title=title, body=body)
        logger.info(f"Created pull request {url}")
        return url

    def _post_comment(self, body: str) -> None:
        if self.trigger.issue_number is None:
            logger.warning(f"No issue to comment on, skipping comment: {body}")
            return
        self.client.create_comment(self.trigger.issue_number, body)

    def _is_authorized(self, username: str) -> bool:
        permission = self.client.get_permission(username)
        logger.info(f"Permission of {username}: {permission}")
        return permission in WRITE_PERMISSIONS

    async def set_config(self) -> None:
        await asyncio.to_thread(self._set_config)

    async def checkout(self) -> str:
        return await asyncio.to_thread(self._checkout)

    async def create_branch(self) -> str:
        return await asyncio.to_thread(self._create_branch)

    async def commit_push(self, branch: str, paths: Sequence[str]) -> None:
        await asyncio.to_thread(self._commit_push, branch, list(paths))

    async def create_pull_request(self, branch: str, title: str, body: str) -> str:
        return await asyncio.to_thread(self._create_pull_request, branch, title, body)

    async def post_comment(self, body: str) -> None:
        await asyncio.to_thread(self._post_comment, body)

    async def is_authorized(self, username: str) -> bool:
        return await asyncio.to_thread(self._is_authorized, username)
