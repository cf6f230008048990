"""Version control package.

- VersionControl: interface the flow controllers depend on
- GitHubVersionControl: GitPython + GitHub REST implementation
- pr_body: pull request text and branch naming
"""

from .base import VersionControl
from .github import GitHubClient, GitHubVersionControl
from .pr_body import PR_TITLE, generate_branch_name, generate_pr_body

__all__ = [
    "VersionControl",
    "GitHubClient",
    "GitHubVersionControl",
    "PR_TITLE",
    "generate_branch_name",
    "generate_pr_body",
]
