"""Runner-related exceptions."""


class RunnerError(Exception):
    """Base exception for all runner errors."""

    exit_code = 1

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class MissingArgumentError(RunnerError):
    """Raised when the required command argument is absent."""


class InvalidCommandError(RunnerError):
    """Raised when the command string cannot be tokenised."""

    exit_code = 2
