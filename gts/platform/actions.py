"""GitHub Actions runner integration.

The runner hands inputs over as environment variables and collects outputs
from the file named by ``$GITHUB_OUTPUT``. This module only knows that file
format and how to build an authenticated push URL; it has no tagging logic.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from gts.core.result import Err, Ok, Result

__all__ = [
    "OutputError",
    "format_outputs",
    "github_remote_url",
    "redact",
    "write_outputs",
]

GITHUB_SERVER_URL = "https://github.com"


@dataclass(frozen=True, slots=True)
class OutputError:
    """Error when runner outputs cannot be written."""

    message: str
    path: Path


def format_outputs(outputs: Mapping[str, str]) -> str:
    """Render outputs in the ``$GITHUB_OUTPUT`` file syntax.

    Single-line values use ``name=value``. Multi-line values use the
    delimiter form with a random delimiter that cannot occur in the value.
    """
    lines: list[str] = []
    for name, value in outputs.items():
        if "\n" not in value:
            lines.append(f"{name}={value}")
            continue
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        lines.append(f"{name}<<{delimiter}")
        lines.append(value)
        lines.append(delimiter)
    return "".join(f"{line}\n" for line in lines)


def write_outputs(outputs: Mapping[str, str], path: Path) -> Result[None, OutputError]:
    """Append ``outputs`` to the runner output file at ``path``."""
    try:
        with path.open("a", encoding="utf-8") as f:
            f.write(format_outputs(outputs))
    except OSError as e:
        return Err(OutputError(f"cannot write outputs: {e}", path=path))
    return Ok(None)


def github_remote_url(token: str, repository: str, *, server: str = GITHUB_SERVER_URL) -> str:
    """Build an HTTPS remote URL that authenticates with ``token``.

    Example:
        github_remote_url("abc", "octo/widgets")
        -> "https://abc@github.com/octo/widgets.git"
    """
    scheme, _, host = server.rstrip("/").partition("://")
    if not host:
        scheme, host = "https", scheme
    return f"{scheme}://{token}@{host}/{repository.strip('/')}.git"


def redact(text: str, secret: str | None) -> str:
    """Mask every occurrence of ``secret`` in ``text``."""
    if not secret:
        return text
    return text.replace(secret, "***")
