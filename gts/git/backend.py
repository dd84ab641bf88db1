"""Git backend abstraction.

The tagging services only need four git operations. ``GitBackend`` is the
protocol they are written against; ``GitCli`` implements it by running the
``git`` executable in a repository. All operations return Result types.

Usage:
    git = GitCli(Path("."))

    match git.list_remote_tags("origin", "v*"):
        case Ok(tags):
            print(tags)  # ["v1.0.0", "v1.1.0", ...] in refname order
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from gts.core.result import Err, Ok, Result
from gts.platform.process import ProcessError
from gts.platform.process import run as run_process

_GIT_TIMEOUT_SECONDS = 30.0
_GIT_NETWORK_TIMEOUT_SECONDS = 3 * 60.0
_NETWORK_COMMANDS = frozenset({"fetch", "pull", "push", "ls-remote", "clone"})

# <sha>\trefs/tags/<name>
_REMOTE_TAG_RE = re.compile(r"^\S+\s+refs/tags/(\S+)$")
_PEELED_SUFFIX = "^{}"

__all__ = [
    "GitBackend",
    "GitCli",
    "GitError",
    "parse_remote_tags",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed (without secrets)
        message: Error message, usually git's stderr
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class GitBackend(Protocol):
    """The git operations the tagging workflow depends on."""

    def list_remote_tags(self, remote: str, pattern: str) -> Result[list[str], GitError]:
        """List tag names on ``remote`` matching ``pattern`` in refname order."""
        ...

    def tag(self, name: str, *, ref: str = "HEAD", force: bool = False) -> Result[None, GitError]:
        """Create a local tag, or move it when ``force`` is set."""
        ...

    def push_tag(self, remote: str, name: str, *, force: bool = False) -> Result[None, GitError]:
        """Push a single tag to ``remote``."""
        ...

    def checkout(self, ref: str) -> Result[None, GitError]:
        """Check out ``ref`` in the working tree."""
        ...


def parse_remote_tags(output: str) -> Result[list[str], GitError]:
    """Parse ``git ls-remote --tags`` output into tag names.

    Peeled entries of annotated tags (``v1.0.0^{}``) repeat a tag that is
    already listed and are dropped.
    """
    tags: list[str] = []
    for line in output.splitlines():
        entry = line.strip()
        if not entry:
            continue
        match = _REMOTE_TAG_RE.match(entry)
        if match is None:
            return Err(
                GitError(
                    command="ls-remote --tags",
                    message=f"unexpected remote tag entry: {entry}",
                )
            )
        name = match.group(1)
        if name.endswith(_PEELED_SUFFIX):
            continue
        tags.append(name)
    return Ok(tags)


class GitCli:
    """GitBackend that runs the ``git`` executable.

    Attributes:
        path: Path to the repository working tree
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def exists(self) -> bool:
        """Check if this is a valid git repository."""
        return (self.path / ".git").exists()

    def list_remote_tags(self, remote: str, pattern: str) -> Result[list[str], GitError]:
        result = self._run(["ls-remote", "--tags", "--sort=refname", remote, pattern])
        match result:
            case Err(e):
                return Err(self._error("ls-remote --tags", e, "ls-remote failed"))
            case Ok(stdout):
                return parse_remote_tags(stdout)

    def tag(self, name: str, *, ref: str = "HEAD", force: bool = False) -> Result[None, GitError]:
        args = ["tag", name, ref]
        if force:
            args.append("--force")
        result = self._run(args)
        match result:
            case Err(e):
                return Err(self._error(f"tag {name}", e, "tag failed"))
            case Ok(_):
                return Ok(None)

    def push_tag(self, remote: str, name: str, *, force: bool = False) -> Result[None, GitError]:
        args = ["push"]
        if force:
            args.append("--force")
        args.extend([remote, f"refs/tags/{name}"])
        result = self._run(args)
        match result:
            case Err(e):
                return Err(self._error(f"push {name}", e, "push failed"))
            case Ok(_):
                return Ok(None)

    def checkout(self, ref: str) -> Result[None, GitError]:
        result = self._run(["checkout", ref])
        match result:
            case Err(e):
                return Err(self._error(f"checkout {ref}", e, "checkout failed"))
            case Ok(_):
                return Ok(None)

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        command = args[0] if args else ""
        timeout = (
            _GIT_NETWORK_TIMEOUT_SECONDS if command in _NETWORK_COMMANDS else _GIT_TIMEOUT_SECONDS
        )
        return run_process(["git", "-C", str(self.path), *args], cwd=self.path, timeout=timeout)

    @staticmethod
    def _error(command: str, e: ProcessError, fallback: str) -> GitError:
        return GitError(
            command=command,
            message=e.stderr.strip() or e.stdout.strip() or fallback,
            returncode=e.returncode,
        )
