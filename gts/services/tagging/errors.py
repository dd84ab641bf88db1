"""Error types of a tagging run.

Each variant carries the raw details an operator needs to fix the remote by
hand; ``message`` is the one-line summary and ``hint`` the suggested action.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from gts.git.backend import GitError


@dataclass(frozen=True, slots=True)
class InvalidReleaseTypeError:
    value: str
    choices: tuple[str, ...]

    @property
    def message(self) -> str:
        return f"invalid release type {self.value!r} (expected one of: {', '.join(self.choices)})"

    @property
    def hint(self) -> str | None:
        return None


@dataclass(frozen=True, slots=True)
class NoValidVersionTagsError:
    tags: tuple[str, ...]

    @property
    def message(self) -> str:
        return f"found version tags but no fully compliant version tag: {json.dumps(list(self.tags))}"

    @property
    def hint(self) -> str | None:
        return "fix or delete the malformed tags on the remote"


@dataclass(frozen=True, slots=True)
class InvalidVersionIncrementError:
    version: str
    release_type: str
    reason: str

    @property
    def message(self) -> str:
        return f"cannot apply a {self.release_type} increment to {self.version}: {self.reason}"

    @property
    def hint(self) -> str | None:
        return None


@dataclass(frozen=True, slots=True)
class BackendOperationError:
    command: str
    detail: str
    returncode: int = 1

    @classmethod
    def from_git(cls, error: GitError) -> BackendOperationError:
        return cls(command=error.command, detail=error.message, returncode=error.returncode)

    @property
    def message(self) -> str:
        return f"git {self.command} failed (exit {self.returncode}): {self.detail}"

    @property
    def hint(self) -> str | None:
        if self.command.startswith(("tag", "push")):
            return "tags may be partially updated; verify local and remote tag state"
        if self.command.startswith("ls-remote"):
            return "check the remote name and its credentials"
        return None


TagError = (
    InvalidReleaseTypeError
    | NoValidVersionTagsError
    | InvalidVersionIncrementError
    | BackendOperationError
)
