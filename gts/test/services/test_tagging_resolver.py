from __future__ import annotations

from semver import Version

from gts.core.result import Err, Ok
from gts.git.backend import GitError
from gts.git.memory import InMemoryGitBackend
from gts.output.console import MockConsole
from gts.services.tagging.errors import BackendOperationError, NoValidVersionTagsError
from gts.services.tagging.resolver import TagResolver, latest_version


def _resolver(git: InMemoryGitBackend, console: MockConsole | None = None) -> TagResolver:
    return TagResolver(git, remote="origin", console=console or MockConsole())


def test_latest_version_no_tags_is_baseline() -> None:
    assert latest_version([]) == Ok(Version(0, 0, 0))


def test_latest_version_ignores_malformed_tags() -> None:
    assert latest_version(["v1.2.3", "not-a-version", "v2.0.0"]) == Ok(Version(2, 0, 0))


def test_latest_version_all_malformed_is_an_error() -> None:
    assert latest_version(["foo", "bar"]) == Err(NoValidVersionTagsError(tags=("foo", "bar")))


def test_latest_version_ignores_floating_tags() -> None:
    assert latest_version(["v1", "v1.4", "v1.4.2", "v1.3.9"]) == Ok(Version(1, 4, 2))


def test_latest_version_only_floating_tags_is_an_error() -> None:
    result = latest_version(["v1", "v1.4"])

    assert isinstance(result, Err)
    assert result.error.tags == ("v1", "v1.4")


def test_latest_version_semantic_not_lexicographic() -> None:
    assert latest_version(["v10.0.0", "v2.0.0", "v9.9.9"]) == Ok(Version(10, 0, 0))


def test_latest_version_release_beats_its_prerelease() -> None:
    assert latest_version(["v2.0.0", "v2.0.0-rc.2"]) == Ok(Version(2, 0, 0))


def test_resolve_empty_remote() -> None:
    git = InMemoryGitBackend()

    assert _resolver(git).resolve_latest_version() == Ok(Version(0, 0, 0))
    assert git.calls == [("ls-remote", "origin", "v*")]


def test_resolve_picks_greatest_and_logs_raw_tags() -> None:
    git = InMemoryGitBackend.with_remote_tags("v1.2.3", "v2.0.0", "v2", "v2.0")
    console = MockConsole()

    assert _resolver(git, console).resolve_latest_version() == Ok(Version(2, 0, 0))
    assert console.messages == ['debug: found version tags: ["v1.2.3", "v2", "v2.0", "v2.0.0"]']


def test_resolve_only_considers_pattern() -> None:
    git = InMemoryGitBackend.with_remote_tags("release-9.0.0", "v1.0.0")

    assert _resolver(git).resolve_latest_version() == Ok(Version(1, 0, 0))


def test_resolve_backend_failure() -> None:
    git = InMemoryGitBackend(
        failures={
            "ls-remote": GitError(
                command="ls-remote --tags", message="fatal: Authentication failed", returncode=128
            )
        }
    )

    result = _resolver(git).resolve_latest_version()

    assert result == Err(
        BackendOperationError(
            command="ls-remote --tags",
            detail="fatal: Authentication failed",
            returncode=128,
        )
    )
