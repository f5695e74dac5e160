"""Real GitInstallation implementation using subprocess."""

import logging
import subprocess

from gti.cli.constants import GIT_EXECUTABLE, GIT_VERSION_ARG
from gti.gateway.git_installation.abc import GitInstallation, GitProbe

logger = logging.getLogger(__name__)


class RealGitInstallation(GitInstallation):
    """Production implementation that spawns the git executable."""

    def __init__(self, executable: str = GIT_EXECUTABLE) -> None:
        """Create RealGitInstallation.

        Args:
            executable: Name or path of the git executable. Defaults to `git`.
        """
        self._executable = executable

    def probe_version(self) -> GitProbe:
        """Run `git --version` with both output streams discarded."""
        try:
            result = subprocess.run(
                [self._executable, GIT_VERSION_ARG],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError as exc:
            logger.debug("Could not spawn %s: %s", self._executable, exc)
            return GitProbe.NOT_INSTALLED

        if result.returncode != 0:
            logger.debug(
                "%s %s exited with %d", self._executable, GIT_VERSION_ARG, result.returncode
            )
            return GitProbe.FAILED
        return GitProbe.OK
