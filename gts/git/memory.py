"""In-memory GitBackend for tests and offline runs.

Models one remote and the local tag refs closely enough to exercise the
force/no-force rules without spawning git. Every call is recorded in
``calls`` so tests can assert on ordering.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from fnmatch import fnmatchcase

from gts.core.result import Err, Ok, Result
from gts.git.backend import GitError

__all__ = ["InMemoryGitBackend"]


def _empty_calls() -> list[tuple[str, ...]]:
    return []


@dataclass
class InMemoryGitBackend:
    """Local-only GitBackend double.

    Attributes:
        remote_tags: Tag name -> ref on the (single) remote.
        local_tags: Tag name -> ref in the local repository.
        head: What ``HEAD`` resolves to.
        failures: Errors to return instead of running an operation. Keys are
            an operation (``"ls-remote"``, ``"tag"``, ``"push"``,
            ``"checkout"``) or an operation and tag, e.g. ``"push:v1.2.4"``.
        calls: Every operation attempted, in order.
    """

    remote_tags: dict[str, str] = field(default_factory=dict)
    local_tags: dict[str, str] = field(default_factory=dict)
    head: str = "HEAD"
    failures: dict[str, GitError] = field(default_factory=dict)
    calls: list[tuple[str, ...]] = field(default_factory=_empty_calls)

    @classmethod
    def with_remote_tags(cls, *names: str, ref: str = "0" * 40) -> InMemoryGitBackend:
        return cls(remote_tags={name: ref for name in names})

    def list_remote_tags(self, remote: str, pattern: str) -> Result[list[str], GitError]:
        self.calls.append(("ls-remote", remote, pattern))
        if failure := self._failure("ls-remote"):
            return Err(failure)
        return Ok(sorted(name for name in self.remote_tags if fnmatchcase(name, pattern)))

    def tag(self, name: str, *, ref: str = "HEAD", force: bool = False) -> Result[None, GitError]:
        self.calls.append(("tag", name, ref))
        if failure := self._failure("tag", name):
            return Err(failure)
        if name in self.local_tags and not force:
            return Err(
                GitError(
                    command=f"tag {name}",
                    message=f"fatal: tag '{name}' already exists",
                    returncode=128,
                )
            )
        self.local_tags[name] = self.head if ref == "HEAD" else ref
        return Ok(None)

    def push_tag(self, remote: str, name: str, *, force: bool = False) -> Result[None, GitError]:
        self.calls.append(("push", remote, name))
        if failure := self._failure("push", name):
            return Err(failure)
        if name not in self.local_tags:
            return Err(
                GitError(
                    command=f"push {name}",
                    message=f"error: src refspec refs/tags/{name} does not match any",
                )
            )
        target = self.local_tags[name]
        if name in self.remote_tags and self.remote_tags[name] != target and not force:
            return Err(
                GitError(
                    command=f"push {name}",
                    message=f"! [rejected] {name} -> {name} (already exists)",
                )
            )
        self.remote_tags[name] = target
        return Ok(None)

    def checkout(self, ref: str) -> Result[None, GitError]:
        self.calls.append(("checkout", ref))
        if failure := self._failure("checkout"):
            return Err(failure)
        self.head = ref
        return Ok(None)

    @property
    def operations(self) -> list[str]:
        """Operation names of ``calls``, e.g. ``["ls-remote", "tag", ...]``."""
        return [call[0] for call in self.calls]

    def _failure(self, operation: str, name: str | None = None) -> GitError | None:
        if name is not None and f"{operation}:{name}" in self.failures:
            return self.failures[f"{operation}:{name}"]
        return self.failures.get(operation)
