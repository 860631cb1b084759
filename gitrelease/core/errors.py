"""Exit codes for the git-release CLI.

Git failures normally exit with git's own return code; GIT_ERROR is the
fallback when git did not report one (e.g. the executable is missing).
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    - 0: Success
    - 1: User error (bad argument, invalid config file)
    - 2: Environment error (repository path unusable)
    - 3: Git error without a usable return code
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    GIT_ERROR = 3

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK
