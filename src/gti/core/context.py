"""Application context with dependency injection."""

from dataclasses import dataclass

from gti.gateway.git_installation.abc import GitInstallation
from gti.gateway.git_installation.real import RealGitInstallation


@dataclass(frozen=True)
class GtiContext:
    """Immutable context holding all dependencies for gti operations.

    Created at CLI entry point and threaded through the application.
    """

    git: GitInstallation

    @staticmethod
    def for_test(*, git: GitInstallation | None = None) -> "GtiContext":
        """Create a context for tests, defaulting to a working fake git."""
        from gti.gateway.git_installation.abc import GitProbe
        from gti.gateway.git_installation.fake import FakeGitInstallation

        if git is None:
            git = FakeGitInstallation(probe_result=GitProbe.OK)
        return GtiContext(git=git)


def create_context() -> GtiContext:
    """Create production context with real implementations."""
    return GtiContext(git=RealGitInstallation())
