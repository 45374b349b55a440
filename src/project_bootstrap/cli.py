"""CLI for the project bootstrapper."""

import sys

import click
import structlog

from project_bootstrap.config.logging import configure_logging
from project_bootstrap.config.settings import get_settings
from project_bootstrap.core.exceptions import BootstrapError
from project_bootstrap.core.models.bootstrap import BootstrapRequest
from project_bootstrap.pipelines.bootstrap import BootstrapPipeline
from project_bootstrap.services.prerequisites import PrerequisiteChecker
from project_bootstrap.services.reporter import Reporter

logger = structlog.get_logger(__name__)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """Project bootstrapper: create a repository from a template or from scratch."""
    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, log_format=settings.log_format)


@cli.command()
@click.argument("name", required=False)
@click.option("--root-path", "-r", help="Parent directory (default: BOOTSTRAP_ROOT_PATH)")
@click.option("--description", "-d", default="", help="Repository description")
@click.option("--private/--public", default=True, help="Repository visibility")
@click.option("--template", "-t", default=None, help="Template repository URL or owner/repo; '' for local init")
@click.option(
    "--template-fallback/--no-template-fallback",
    default=None,
    help="Use the configured default template when --template is not given",
)
@click.option("--open-editor/--no-open-editor", default=False, help="Open the editor when done")
@click.option("--yes", "-y", is_flag=True, help="Answer yes at the confirmation prompt")
@click.option("--no-input", is_flag=True, help="Never prompt; fail on a missing or taken name")
def new(
    name: str | None,
    root_path: str | None,
    description: str,
    private: bool,
    template: str | None,
    template_fallback: bool | None,
    open_editor: bool,
    yes: bool,
    no_input: bool,
) -> None:
    """Create a new project.

    Clones a template through gh, or initializes a local repository
    when no template is given.
    """
    request = BootstrapRequest(
        name=name,
        root_path=root_path,
        description=description,
        private=private,
        template=template,
        template_fallback=template_fallback,
        open_editor=open_editor,
        interactive=not no_input,
        assume_yes=yes,
    )
    reporter = Reporter()
    pipeline = BootstrapPipeline(get_settings(), reporter=reporter)
    try:
        pipeline.run(request)
    except BootstrapError as e:
        logger.debug("Bootstrap failed", error=e.message, **e.details)
        reporter.error(e.message)
        sys.exit(e.exit_code)


@cli.command()
def check() -> None:
    """Check that gh and git are installed."""
    reporter = Reporter()
    missing = False
    for status in PrerequisiteChecker(get_settings()).statuses():
        if status.available:
            reporter.success(f"{status.tool.label}: {status.path}")
        else:
            missing = True
            reporter.error(f"{status.tool.label}: not found, install it from {status.tool.hint}")
    if missing:
        sys.exit(1)


@cli.command()
def config() -> None:
    """Show the effective settings."""
    settings = get_settings()
    click.echo("Project Bootstrapper Settings")
    click.echo(f"  Root path:         {settings.root_path}")
    click.echo(f"  Default template:  {settings.default_template or '(none)'}")
    click.echo(f"  Template fallback: {settings.template_fallback}")
    click.echo(f"  Confirm mode:      {settings.confirm_mode}")
    click.echo(f"  Default branch:    {settings.default_branch}")
    click.echo(f"  Seed README:       {settings.seed_readme}")
    click.echo(f"  Bootstrap scripts: {', '.join(settings.bootstrap_scripts)}")
    click.echo(f"  Tools:             {settings.gh_executable}, {settings.git_executable}, {settings.editor_executable}")
    click.echo(f"  Workspace suffix:  {settings.workspace_suffix}")


if __name__ == "__main__":
    cli()
