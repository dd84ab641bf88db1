"""Tagging run orchestration.

resolve latest version -> derive tag triple -> publish

Steps run strictly in order and the first failure ends the run. There are no
retries; the error is handed back untouched for the CLI to render.
"""

from __future__ import annotations

from semver import Version

from gts.core.config import TaggingConfig
from gts.core.result import Err, Ok, Result
from gts.git.backend import GitBackend
from gts.output.console import ConsoleProtocol, Style
from gts.platform.actions import redact
from gts.services.tagging.errors import BackendOperationError, TagError
from gts.services.tagging.model import ReleaseType, TagRunResult, TagTriple
from gts.services.tagging.publisher import TagPublisher
from gts.services.tagging.resolver import TagResolver
from gts.services.tagging.versioning import derive_tag_triple


class TagHandler:
    def __init__(
        self,
        *,
        backend: GitBackend,
        config: TaggingConfig,
        console: ConsoleProtocol,
    ) -> None:
        self._backend = backend
        self._config = config
        self._console = console
        self.resolver = TagResolver(
            backend,
            remote=config.remote,
            pattern=config.tag_pattern,
            console=console,
        )
        self.publisher = TagPublisher(
            backend,
            remote=config.remote,
            ref=config.ref,
            console=console,
        )

    def run(self, release_type: ReleaseType) -> Result[TagRunResult, TagError]:
        self._console.debug(f"remote: {redact(self._config.remote, self._config.github_token)}")

        if self._config.checkout_ref is not None:
            checked_out = self._checkout(self._config.checkout_ref)
            if isinstance(checked_out, Err):
                return checked_out

        current = self.resolver.resolve_latest_version()
        if isinstance(current, Err):
            return current
        self._console.print(f"latest version: {current.value}", Style.DIM)

        derived = derive_tag_triple(current.value, release_type)
        if isinstance(derived, Err):
            return derived
        tags = derived.value
        self._console.print(f"{release_type} release: {', '.join(tags)}", Style.DIM)

        if self._config.dry_run:
            self._console.warning("dry run: tags were not created or pushed")
        else:
            published = self.publisher.publish(tags)
            if isinstance(published, Err):
                return published

        return Ok(
            TagRunResult(
                previous=current.value,
                version=_version_of(tags),
                tags=tags,
                published=not self._config.dry_run,
            )
        )

    def _checkout(self, ref: str) -> Result[None, TagError]:
        self._console.info(f"checking out {ref}")
        return self._backend.checkout(ref).map_err(BackendOperationError.from_git)


def _version_of(tags: TagTriple) -> Version:
    return Version.parse(tags.full.removeprefix("v"))
