"""Fake GitInstallation implementation for testing.

FakeGitInstallation returns a constructor-injected probe result, enabling
tests to simulate missing or broken git without touching PATH.
"""

from gti.gateway.git_installation.abc import GitInstallation, GitProbe


class FakeGitInstallation(GitInstallation):
    """In-memory fake that returns a configured probe result.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, probe_result: GitProbe) -> None:
        """Create FakeGitInstallation.

        Args:
            probe_result: Value to return from probe_version()
        """
        self._probe_result = probe_result
        self._probe_count = 0

    def probe_version(self) -> GitProbe:
        """Return the configured probe result and record the call."""
        self._probe_count += 1
        return self._probe_result

    @property
    def probe_count(self) -> int:
        """Number of times probe_version() was called."""
        return self._probe_count
