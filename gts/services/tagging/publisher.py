"""Create and push the tags of a release."""

from __future__ import annotations

from gts.core.config import DEFAULT_REF
from gts.core.result import Err, Ok, Result
from gts.git.backend import GitBackend
from gts.output.console import ConsoleProtocol
from gts.services.tagging.errors import BackendOperationError
from gts.services.tagging.model import TagTriple


class TagPublisher:
    """Points the tags of a triple at ``ref`` and publishes them.

    Tags are always forced, locally and on the remote: re-running a release
    re-points floating tags such as ``v1`` and ``v1.2`` instead of failing.
    There is no rollback when a step fails midway.
    """

    def __init__(
        self,
        backend: GitBackend,
        *,
        remote: str,
        ref: str = DEFAULT_REF,
        console: ConsoleProtocol,
    ) -> None:
        self._backend = backend
        self._remote = remote
        self._ref = ref
        self._console = console

    def publish(self, tags: TagTriple) -> Result[None, BackendOperationError]:
        # Every local tag exists before the first push is attempted.
        for name in tags:
            self._console.info(f"tagging {self._ref} with: {name}")
            tagged = self._backend.tag(name, ref=self._ref, force=True)
            if isinstance(tagged, Err):
                return Err(BackendOperationError.from_git(tagged.error))

        for name in tags:
            self._console.info(f"pushing tag {name} to remote")
            pushed = self._backend.push_tag(self._remote, name, force=True)
            if isinstance(pushed, Err):
                return Err(BackendOperationError.from_git(pushed.error))

        return Ok(None)
