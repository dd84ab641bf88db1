from __future__ import annotations

import pytest
from semver import Version

from gts.core.result import Err, Ok
from gts.services.tagging.errors import InvalidReleaseTypeError
from gts.services.tagging.model import RELEASE_TYPES, ReleaseType, TagTriple
from gts.services.tagging.versioning import (
    derive_tag_triple,
    format_version_tag,
    increment,
    is_valid_version,
    parse_release_type,
    parse_version,
    sort_descending,
)


def test_parse_version() -> None:
    assert parse_version("v1.2.3") == Version(1, 2, 3)
    assert parse_version("1.2.3") == Version(1, 2, 3)
    assert parse_version("v1.2.3-rc.1") == Version(1, 2, 3, prerelease="rc.1")


@pytest.mark.parametrize("tag", ["v1", "v1.2", "not-a-version", "v1.2.3.4", "vx.y.z", ""])
def test_partial_and_malformed_tags_are_invalid(tag: str) -> None:
    assert parse_version(tag) is None
    assert is_valid_version(tag) is False


def test_sort_descending_is_semantic() -> None:
    versions = [Version.parse(v) for v in ("9.0.0", "10.0.0", "10.0.0-rc.1", "1.2.3")]
    assert [str(v) for v in sort_descending(versions)] == [
        "10.0.0",
        "10.0.0-rc.1",
        "9.0.0",
        "1.2.3",
    ]


def test_parse_release_type() -> None:
    assert parse_release_type("minor") == Ok("minor")
    assert parse_release_type(" MAJOR ") == Ok("major")


def test_parse_release_type_rejects_unknown() -> None:
    assert parse_release_type("prerelease") == Err(
        InvalidReleaseTypeError(value="prerelease", choices=RELEASE_TYPES)
    )


@pytest.mark.parametrize(
    ("current", "release_type", "expected"),
    [
        ("1.2.3", "patch", "1.2.4"),
        ("1.2.3", "minor", "1.3.0"),
        ("1.2.3", "major", "2.0.0"),
        ("1.2.3-rc.1", "patch", "1.2.3"),
        ("1.3.0-rc.1", "minor", "1.3.0"),
        ("1.2.3+build.5", "patch", "1.2.4"),
    ],
)
def test_increment(current: str, release_type: ReleaseType, expected: str) -> None:
    assert increment(Version.parse(current), release_type) == Ok(Version.parse(expected))


def test_increment_rejects_unknown_part() -> None:
    result = increment(Version(1, 2, 3), "build")  # type: ignore[arg-type]

    assert isinstance(result, Err)
    assert result.error.version == "1.2.3"
    assert result.error.release_type == "build"


class TestDeriveTagTriple:
    def test_patch(self) -> None:
        assert derive_tag_triple(Version(1, 2, 3), "patch") == Ok(
            TagTriple("v1", "v1.2", "v1.2.4")
        )

    def test_minor(self) -> None:
        assert derive_tag_triple(Version(1, 2, 3), "minor") == Ok(
            TagTriple("v1", "v1.3", "v1.3.0")
        )

    def test_major(self) -> None:
        assert derive_tag_triple(Version(1, 2, 3), "major") == Ok(
            TagTriple("v2", "v2.0", "v2.0.0")
        )

    def test_first_release(self) -> None:
        assert derive_tag_triple(Version(0, 0, 0), "minor") == Ok(
            TagTriple("v0", "v0.1", "v0.1.0")
        )

    @pytest.mark.parametrize("release_type", RELEASE_TYPES)
    def test_tags_follow_new_version(self, release_type: ReleaseType) -> None:
        current = Version(3, 7, 11)
        new = increment(current, release_type)
        assert isinstance(new, Ok)

        derived = derive_tag_triple(current, release_type)

        assert isinstance(derived, Ok)
        triple = derived.value

        assert triple.major == f"v{new.value.major}"
        assert triple.minor == f"v{new.value.major}.{new.value.minor}"
        assert triple.full == format_version_tag(new.value)
        assert triple.full.startswith(triple.minor + ".")
        assert triple.minor.startswith(triple.major + ".")

    def test_is_pure(self) -> None:
        current = Version(1, 2, 3)
        first = derive_tag_triple(current, "minor")
        second = derive_tag_triple(current, "minor")

        assert first == second
        assert current == Version(1, 2, 3)

    def test_triple_serialization(self) -> None:
        triple = TagTriple("v1", "v1.2", "v1.2.4")
        assert triple.as_list() == ["v1", "v1.2", "v1.2.4"]
        assert list(triple) == ["v1", "v1.2", "v1.2.4"]
