"""
Exceptions raised by docker-dx.

Every error carries the exit status the CLI should end with.
"""

from typing import List


class DxError(Exception):
    """Base class for errors reported to the user."""
    exit_code = 1

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class QueryError(DxError):
    """A required query to the Docker daemon failed."""

    def __init__(self, call: str, cause: Exception):
        self.call = call
        self.cause = cause
        super().__init__(f"{call}: {cause}")


class NotFoundError(DxError):
    """No container, image or volume matched the examined argument."""

    def __init__(self, arg: str):
        self.arg = arg
        super().__init__("Found nothing matching.")


class AmbiguousMatchError(DxError):
    """More than one volume starts with the examined prefix."""
    exit_code = 2

    def __init__(self, arg: str, matches: List[str]):
        self.arg = arg
        self.matches = matches
        super().__init__(f"Found multiple volumes with prefix: {arg}")
