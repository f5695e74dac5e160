"""Repository discovery for gti.

Validates the git installation, then walks up from the working directory to
find the nearest `.git` entry.
"""

import logging
from pathlib import Path

from gti.cli.constants import GIT_DIR_NAME
from gti.core.errors import (
    GitNotInstalledError,
    GitValidationError,
    RepositoryNotFoundError,
    RepositoryUnsearchableError,
)
from gti.gateway.git_installation.abc import GitInstallation, GitProbe

logger = logging.getLogger(__name__)


def find_git_dir(start: Path) -> Path:
    """Find the nearest `.git` entry at or above start.

    Each directory's immediate entries are listed and the first one named
    exactly `.git` wins, whether it is a directory or a worktree `.git` file.
    The filesystem root itself is never listed.

    Args:
        start: Directory to begin the search from

    Returns:
        Path to the `.git` entry

    Raises:
        RepositoryUnsearchableError: If listing a directory fails
        RepositoryNotFoundError: If the filesystem root is reached
    """
    current = start
    while current != current.parent:
        logger.debug("Searching %s for %s", current, GIT_DIR_NAME)
        try:
            for entry in current.iterdir():
                if entry.name == GIT_DIR_NAME:
                    return entry
        except OSError as exc:
            raise RepositoryUnsearchableError() from exc
        current = current.parent

    raise RepositoryNotFoundError()


def locate_repository_root(git: GitInstallation) -> Path:
    """Validate git, then find the `.git` entry enclosing the working directory.

    Git is probed before any directory is read, so a missing installation is
    reported even outside a repository.

    Args:
        git: Gateway used to run `git --version`

    Returns:
        Path to the nearest `.git` entry

    Raises:
        GitNotInstalledError: If git could not be spawned
        GitValidationError: If git exited with a failure status
        RepositoryUnsearchableError: If the working directory or a listing is unreadable
        RepositoryNotFoundError: If no `.git` entry exists up to the filesystem root
    """
    probe = git.probe_version()
    if probe == GitProbe.NOT_INSTALLED:
        raise GitNotInstalledError()
    if probe == GitProbe.FAILED:
        raise GitValidationError()

    try:
        cwd = Path.cwd()
    except OSError as exc:
        raise RepositoryUnsearchableError() from exc

    return find_git_dir(cwd)
