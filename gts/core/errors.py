"""Exit codes for the gts CLI.

A failed tagging run always ends with one of these codes so pipelines can tell
a bad input from a broken remote.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    These values are part of the CLI contract and should remain stable:
    - 0: Success
    - 1: User error (bad release type, invalid config)
    - 2: Environment error (not a git repository, git missing)
    - 3: Version error (no valid version tag, increment rejected)
    - 4: Network error (ls-remote or push failed)
    - 5: I/O error (runner outputs could not be written)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    VERSION_ERROR = 3
    NETWORK_ERROR = 4
    IO_ERROR = 5
