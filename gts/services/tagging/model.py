from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Literal

from semver import Version


ReleaseType = Literal["patch", "minor", "major"]
RELEASE_TYPES: tuple[ReleaseType, ...] = ("patch", "minor", "major")


@dataclass(frozen=True, slots=True)
class TagTriple:
    """The floating major, floating minor and full tag of one release."""

    major: str
    minor: str
    full: str

    @property
    def names(self) -> tuple[str, str, str]:
        # Publish order.
        return (self.major, self.minor, self.full)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def as_list(self) -> list[str]:
        return list(self.names)


@dataclass(frozen=True, slots=True)
class TagRunResult:
    previous: Version
    version: Version
    tags: TagTriple
    published: bool

    def to_outputs(self) -> dict[str, str]:
        """Runner outputs for this run."""
        return {
            "tags": json.dumps(self.tags.as_list()),
            "major-tag": self.tags.major,
            "minor-tag": self.tags.minor,
            "full-tag": self.tags.full,
            "version": str(self.version),
            "previous-version": str(self.previous),
        }
