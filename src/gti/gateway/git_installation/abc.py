"""Git installation abstraction.

This module provides an ABC for probing the git executable to enable
fast tests that don't depend on what is installed on the machine.
"""

from abc import ABC, abstractmethod
from enum import Enum, auto


class GitProbe(Enum):
    """Outcome of running `git --version`."""

    OK = auto()
    NOT_INSTALLED = auto()  # executable could not be spawned
    FAILED = auto()  # executable ran but exited non-zero


class GitInstallation(ABC):
    """Abstract interface for git installation checks."""

    @abstractmethod
    def probe_version(self) -> GitProbe:
        """Run a version query against the git executable.

        Only the exit status is inspected; output is discarded.

        Returns:
            GitProbe describing whether git could be spawned and succeeded
        """
        ...
