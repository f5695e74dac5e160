"""Errors raised while bootstrapping gti inside a repository."""


class InitializationError(Exception):
    """Base class for failures locating a usable git repository."""

    message = "initialization failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.message)


class GitNotInstalledError(InitializationError):
    """The git executable could not be spawned."""

    message = "git is not installed"


class GitValidationError(InitializationError):
    """The git executable ran but its version check failed."""

    message = "could not validate git installation; version check failed"


class RepositoryUnsearchableError(InitializationError):
    """An I/O error occurred while walking up the directory tree.

    The underlying OSError is chained as __cause__.
    """

    message = "io error searching for git directory"


class RepositoryNotFoundError(InitializationError):
    """No .git entry exists between the working directory and the filesystem root."""

    message = "git directory not found"
