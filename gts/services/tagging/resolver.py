"""Resolve the latest released version from the remote's tags."""

from __future__ import annotations

import json
from collections.abc import Sequence

from semver import Version

from gts.core.config import DEFAULT_TAG_PATTERN
from gts.core.result import Err, Ok, Result
from gts.git.backend import GitBackend
from gts.output.console import ConsoleProtocol
from gts.services.tagging.errors import BackendOperationError, NoValidVersionTagsError, TagError
from gts.services.tagging.versioning import BASELINE_VERSION, parse_version, sort_descending


def latest_version(tags: Sequence[str]) -> Result[Version, NoValidVersionTagsError]:
    """Pick the greatest version among ``tags``.

    No tags at all means nothing was released yet and yields 0.0.0. Tags that
    are present but none of which parse are an error: the remote needs fixing.
    """
    if not tags:
        return Ok(BASELINE_VERSION)

    # Remove partials such as v1 or v1.2 and any other noise.
    versions = [v for v in (parse_version(tag) for tag in tags) if v is not None]
    if not versions:
        return Err(NoValidVersionTagsError(tags=tuple(tags)))

    return Ok(sort_descending(versions)[0])


class TagResolver:
    """Reads version tags from a remote. Never mutates anything."""

    def __init__(
        self,
        backend: GitBackend,
        *,
        remote: str,
        pattern: str = DEFAULT_TAG_PATTERN,
        console: ConsoleProtocol,
    ) -> None:
        self._backend = backend
        self._remote = remote
        self._pattern = pattern
        self._console = console

    def list_version_tags(self) -> Result[list[str], BackendOperationError]:
        """Raw tag listing in backend (refname) order, not version order."""
        return self._backend.list_remote_tags(self._remote, self._pattern).map_err(
            BackendOperationError.from_git
        )

    def resolve_latest_version(self) -> Result[Version, TagError]:
        tags = self.list_version_tags()
        if isinstance(tags, Err):
            return tags
        self._console.debug(f"found version tags: {json.dumps(tags.value)}")
        return latest_version(tags.value)
