"""Platform adapters: process execution and the CI runner environment."""

from .actions import OutputError, github_remote_url, redact, write_outputs
from .process import ProcessError, run

__all__ = [
    "OutputError",
    "ProcessError",
    "github_remote_url",
    "redact",
    "run",
    "write_outputs",
]
