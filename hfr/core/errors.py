"""Error codes for CLI exit status.

These are used as process exit codes and should remain stable:
- 0: Success (also `--help` and `--version`)
- 1: User error (bad arguments, malformed tags, aborted message)
- 2: Environment error (git or editor failures, invalid config)
- 5: I/O error (commit message file could not be written)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the `hfr` command."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 5
