from __future__ import annotations

from collections.abc import Iterable

from semver import Version

from gts.core.result import Err, Ok, Result
from gts.services.tagging.errors import InvalidReleaseTypeError, InvalidVersionIncrementError
from gts.services.tagging.model import RELEASE_TYPES, ReleaseType, TagTriple


BASELINE_VERSION = Version(0, 0, 0)


def parse_version(tag: str) -> Version | None:
    """Parse a tag such as ``v1.2.3`` or ``v1.2.3-rc.1``.

    Partial (``v1``, ``v1.2``) and malformed names return None.
    """
    text = tag.strip()
    if text.startswith("v"):
        text = text[1:]
    try:
        return Version.parse(text)
    except (TypeError, ValueError):
        return None


def is_valid_version(tag: str) -> bool:
    return parse_version(tag) is not None


def sort_descending(versions: Iterable[Version]) -> list[Version]:
    return sorted(versions, reverse=True)


def parse_release_type(value: str) -> Result[ReleaseType, InvalidReleaseTypeError]:
    normalized = value.strip().lower()
    for release_type in RELEASE_TYPES:
        if release_type == normalized:
            return Ok(release_type)
    return Err(InvalidReleaseTypeError(value=value, choices=RELEASE_TYPES))


def increment(
    version: Version, release_type: ReleaseType
) -> Result[Version, InvalidVersionIncrementError]:
    """Apply a release increment.

    A prerelease is released onto its base when that base is the target,
    so a patch of ``1.2.3-rc.1`` is ``1.2.3``. Build metadata never takes part.
    """
    try:
        return Ok(version.replace(build=None).next_version(part=release_type))
    except (TypeError, ValueError) as e:
        return Err(
            InvalidVersionIncrementError(
                version=str(version),
                release_type=release_type,
                reason=str(e),
            )
        )


def format_version_tag(version: Version) -> str:
    return f"v{version}"


def tag_triple_for(version: Version) -> TagTriple:
    return TagTriple(
        major=f"v{version.major}",
        minor=f"v{version.major}.{version.minor}",
        full=format_version_tag(version),
    )


def derive_tag_triple(
    current: Version, release_type: ReleaseType
) -> Result[TagTriple, InvalidVersionIncrementError]:
    """Tags to publish when releasing ``release_type`` on top of ``current``."""
    return increment(current, release_type).map(tag_triple_for)
