"""Main CLI entry point for eletract."""

import logging
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from eletract import __version__
from eletract.config import (
    DEFAULT_CONFIG_PATH,
    ConfigLoadError,
    create_example_config,
    load_config,
)
from eletract.errors import CheckpointError, DestinationExistsError, ProvisionError
from eletract.models import ProvisionRequest
from eletract.provision import provision_project, read_checkpoint

logger = logging.getLogger(__name__)

# Handlers installed by configure_logging, replaced on every invocation
_installed_handlers: list[logging.Handler] = []


def configure_logging(log_level: str, log_file: Optional[str] = None) -> None:
    """Configure console logging and, optionally, a debug log file.

    Args:
        log_level: Console logging level name
        log_file: Path of a log file capturing everything at DEBUG level
    """
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root_logger.setLevel(logging.DEBUG)  # Capture everything

    # Console handler - user-specified level
    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)


def _init_config(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    """Write the default configuration file and exit."""
    if not value or ctx.resilient_parsing:
        return

    config_file = Path(DEFAULT_CONFIG_PATH).expanduser()
    if config_file.exists():
        click.echo(f"Error: {config_file} already exists", err=True)
        ctx.exit(1)

    try:
        written = create_example_config(str(config_file))
    except ConfigLoadError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    click.echo(f"Wrote default configuration to {written}")
    ctx.exit(0)


def _has_checkpoint(project_root: Path) -> bool:
    """Whether a failed run left a checkpoint that --resume can use."""
    try:
        return read_checkpoint(project_root) is not None
    except CheckpointError:
        return False


def _print_next_steps(project_directory: str) -> None:
    click.echo("")
    click.echo("Project setup complete!")
    click.echo("Next steps:")
    click.echo(f"  cd {project_directory}")
    click.echo("  npm run dev          # React dev server and Electron together")
    click.echo("")
    click.echo("Or, in two terminals:")
    click.echo("  1. npm start")
    click.echo("  2. npm run electron")


@click.command()
@click.version_option(version=__version__, prog_name="eletract")
@click.argument("project_directory")
@click.option(
    "--template",
    metavar="TEMPLATE-NAME",
    default=None,
    help="create-react-app template to use (e.g. typescript)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show the steps that would run without making changes",
)
@click.option(
    "--resume",
    is_flag=True,
    help="Continue an interrupted run in an existing project directory",
)
@click.option(
    "--config",
    type=click.Path(dir_okay=False),
    envvar="ELETRACT_CONFIG",
    default=None,
    help=f"Configuration file path [default: {DEFAULT_CONFIG_PATH} if present]",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Console logging level",
    show_default=True,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write a debug log to this file",
)
@click.option(
    "--init-config",
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_init_config,
    help=f"Write the default configuration to {DEFAULT_CONFIG_PATH} and exit",
)
@click.pass_context
def cli(
    ctx: click.Context,
    project_directory: str,
    template: Optional[str],
    dry_run: bool,
    resume: bool,
    config: Optional[str],
    log_level: str,
    log_file: Optional[str],
) -> None:
    """Create a React app wrapped in an Electron shell.

    Runs create-react-app, installs Electron, web-vitals (JavaScript template
    only), concurrently and wait-on, writes electron/electron.js and adds
    "electron" and "dev" scripts to package.json.

    \b
    Examples:
        eletract my-app
        eletract my-app --template typescript
        eletract my-app --dry-run
        eletract my-app --resume
    """
    configure_logging(log_level, log_file)

    try:
        cfg = load_config(config)
    except ConfigLoadError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    try:
        request = ProvisionRequest(target=project_directory, template=template)
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise click.BadParameter(messages, param_hint="PROJECT_DIRECTORY") from e

    if dry_run:
        click.echo(f"[DRY RUN] Would create project in {request.project_root}:")
    else:
        click.echo(f"Creating project in {request.project_root}...")

    try:
        result = provision_project(
            request,
            config=cfg,
            dry_run=dry_run,
            resume=resume,
            progress=click.echo,
        )
    except ProvisionError as e:
        logger.debug("Provisioning failed", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        partial = not isinstance(e, DestinationExistsError)
        if partial and not dry_run and _has_checkpoint(request.project_root):
            click.echo(
                f"The partially created project was left in {request.project_root}. "
                f"Run again with --resume to continue, or remove it and start over.",
                err=True,
            )
        ctx.exit(1)

    if result.steps_resumed:
        click.echo(f"Resumed after: {', '.join(result.steps_resumed)}")

    if dry_run:
        click.echo("")
        click.echo(f"[DRY RUN] {len(result.steps_completed)} steps, no changes made")
        return

    _print_next_steps(project_directory)


if __name__ == "__main__":
    cli()
