import logging

import click

from gti.cli.output import fallback_log
from gti.core.context import GtiContext, create_context
from gti.core.errors import InitializationError
from gti.core.repo_discovery import locate_repository_root
from gti.core.sidecar import SidecarManager

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

logger = logging.getLogger(__name__)


@click.command("gti", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gti")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Temporarily ignore file changes in a git repository.

    Running gti inside a repository validates the git installation and
    prepares gti's private directory under .git.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    gti_ctx: GtiContext = ctx.obj

    try:
        repo_git_dir = locate_repository_root(gti_ctx.git)
        manager = SidecarManager.provision(repo_git_dir)
    except (InitializationError, OSError) as exc:
        logger.debug("Initialization failed", exc_info=exc)
        fallback_log(exc)
        raise SystemExit(1) from exc

    logger.debug("Using sidecar directory %s", manager.sidecar_dir)


def main() -> None:
    """CLI entry point used by the `gti` console script."""
    cli()
