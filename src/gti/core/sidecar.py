"""Provisioning of the gti sidecar directory inside `.git`."""

import errno
import logging
from dataclasses import dataclass
from pathlib import Path

from gti.cli.constants import SIDECAR_DIR_NAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SidecarManager:
    """Handle to the tool-private directory beneath a repository's `.git`.

    Attributes:
        sidecar_dir: Path to `<repo>/.git/x-gti-info`
    """

    sidecar_dir: Path

    @classmethod
    def provision(cls, repo_git_dir: Path) -> "SidecarManager":
        """Ensure the sidecar directory exists and return a manager for it.

        Idempotent: an existing sidecar directory is reused untouched. The
        directory is created non-recursively, so it is only ever made as a
        direct child of an existing `.git`.

        Args:
            repo_git_dir: Path to the repository's `.git` directory

        Returns:
            SidecarManager wrapping the sidecar path

        Raises:
            FileNotFoundError: If repo_git_dir does not exist
            OSError: If the existence check or creation fails
        """
        if not repo_git_dir.exists():
            raise FileNotFoundError(errno.ENOENT, ".git directory not found", str(repo_git_dir))

        sidecar_dir = repo_git_dir / SIDECAR_DIR_NAME
        if not sidecar_dir.exists():
            sidecar_dir.mkdir()
            logger.debug("Created sidecar directory %s", sidecar_dir)

        return cls(sidecar_dir=sidecar_dir)
