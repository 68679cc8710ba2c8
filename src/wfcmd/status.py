"""Step exit codes."""

from enum import Enum


class ExitCode(Enum):
    """The code a step exits with."""

    SUCCESS = 0  # Step completed
    FAILURE = 1  # set_failed() was called

    @property
    def code(self) -> int:
        return self.value
