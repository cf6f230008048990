"""Version control interface used by the flow controllers."""

from abc import ABC, abstractmethod
from typing import Sequence


class VersionControl(ABC):
    """Mutates one remote repository.

    All operations are network or repository side effects; failures are
    raised as ``VersionControlError``.
    """

    @abstractmethod
    async def set_config(self) -> None:
        """Configure the commit identity."""
        pass

    @abstractmethod
    async def checkout(self) -> str:
        """Check out the triggering pull request's branch and return its name."""
        pass

    @abstractmethod
    async def create_branch(self) -> str:
        """Create and check out a new branch and return its name."""
        pass

    @abstractmethod
    async def commit_push(self, branch: str, paths: Sequence[str]) -> None:
        """Commit ``paths`` and push them to ``branch``."""
        pass

    @abstractmethod
    async def create_pull_request(self, branch: str, title: str, body: str) -> str:
        """Open a pull request from ``branch`` and return its URL."""
        pass

    @abstractmethod
    async def post_comment(self, body: str) -> None:
        """Comment on the triggering issue or pull request."""
        pass

    async def is_authorized(self, username: str) -> bool:
        """Whether ``username`` may run translations. Allowed by default."""
        return True
