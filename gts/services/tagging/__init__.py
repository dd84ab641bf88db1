"""Semantic-version tagging: resolve, derive, publish."""

from __future__ import annotations

from gts.services.tagging.errors import (
    BackendOperationError,
    InvalidReleaseTypeError,
    InvalidVersionIncrementError,
    NoValidVersionTagsError,
    TagError,
)
from gts.services.tagging.handler import TagHandler
from gts.services.tagging.model import RELEASE_TYPES, ReleaseType, TagRunResult, TagTriple
from gts.services.tagging.publisher import TagPublisher
from gts.services.tagging.resolver import TagResolver, latest_version
from gts.services.tagging.versioning import derive_tag_triple, parse_release_type

__all__ = [
    "BackendOperationError",
    "InvalidReleaseTypeError",
    "InvalidVersionIncrementError",
    "NoValidVersionTagsError",
    "RELEASE_TYPES",
    "ReleaseType",
    "TagError",
    "TagHandler",
    "TagPublisher",
    "TagResolver",
    "TagRunResult",
    "TagTriple",
    "derive_tag_triple",
    "latest_version",
    "parse_release_type",
]
