"""Typed configuration for a tagging run.

Values come from an optional TOML file (``[tagging]`` table) and are then
overridden by CLI options. Every default lives here so the services never
invent their own.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str, get_table

__all__ = [
    "DEFAULT_REF",
    "DEFAULT_REMOTE",
    "DEFAULT_TAG_PATTERN",
    "ConfigError",
    "TaggingConfig",
    "load_config",
    "load_config_or_default",
]

DEFAULT_REMOTE = "origin"
DEFAULT_TAG_PATTERN = "v*"
DEFAULT_REF = "HEAD"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class TaggingConfig:
    """Settings consumed by the tag handler.

    Attributes:
        remote: Remote name or URL that is queried and pushed to.
        tag_pattern: Glob selecting version tags on the remote.
        ref: Commit-ish the new tags point at.
        checkout_ref: Ref checked out before anything else, if any.
        dry_run: Derive tags without creating or pushing them.
        verbose: Show debug output.
        github_token: Token used to build an authenticated push URL.
        github_repository: ``owner/name`` of the repository on GitHub.
    """

    remote: str = DEFAULT_REMOTE
    tag_pattern: str = DEFAULT_TAG_PATTERN
    ref: str = DEFAULT_REF
    checkout_ref: str | None = None
    dry_run: bool = False
    verbose: bool = False
    github_token: str | None = None
    github_repository: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> TaggingConfig:
        """Create a config from a parsed TOML document."""
        tagging: StrDict = get_table(data, "tagging") or {}
        github: StrDict = get_table(data, "github") or {}

        return cls(
            remote=get_str(tagging, "remote") or DEFAULT_REMOTE,
            tag_pattern=get_str(tagging, "tag_pattern") or DEFAULT_TAG_PATTERN,
            ref=get_str(tagging, "ref") or DEFAULT_REF,
            checkout_ref=get_str(tagging, "checkout_ref"),
            dry_run=get_bool(tagging, "dry_run") or False,
            verbose=get_bool(tagging, "verbose") or False,
            github_repository=get_str(github, "repository"),
        )

    def with_overrides(self, **overrides: object) -> TaggingConfig:
        """Return a copy where every non-None override replaces the field."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)  # type: ignore[arg-type]


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[TaggingConfig, ConfigError]:
    """Load and parse a tagging configuration file.

    Args:
        path: Path to a TOML file.

    Returns:
        Ok(TaggingConfig) on success, Err(ConfigError) on failure.
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(TaggingConfig.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path | None) -> Result[TaggingConfig, ConfigError]:
    """Load ``path`` when given, otherwise return the defaults."""
    if path is None:
        return Ok(TaggingConfig())
    return load_config(path)
