"""gti (git temp ignore) CLI entry point.

gti is a wrapper around git that streamlines temporarily ignoring file changes
while running commands, e.g. when a build script outside of your control makes
minor changes to a repository that do not need to be tracked.
"""

from gti.cli.cli import cli, main

__all__ = ["cli", "main"]
