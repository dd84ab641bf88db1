"""Git operations module.

- GitBackend: the protocol the tagging services depend on
- GitCli: implementation backed by the git executable
- InMemoryGitBackend: local-only double for tests

Usage:
    from gts.git import GitCli

    git = GitCli(Path("/path/to/repo"))
    tags = git.list_remote_tags("origin", "v*")
"""

from gts.git.backend import GitBackend, GitCli, GitError, parse_remote_tags
from gts.git.memory import InMemoryGitBackend

__all__ = [
    "GitBackend",
    "GitCli",
    "GitError",
    "InMemoryGitBackend",
    "parse_remote_tags",
]
