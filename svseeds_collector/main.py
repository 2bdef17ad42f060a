"""SvSeeds Collector CLI - copy, update or remove SvSeeds UI components in a Svelte project."""

import logging

import click
from pydantic import ValidationError

from . import __version__
from .config import SETTINGS_KEYS
from .config import build_config
from .console import console
from .errors import CollectorError
from .layout import DEFAULT_DIR
from .logging_setup import init_json_logging
from .paths import get_project_root
from .prompts import TerminalPrompter
from .runner import run_collector
from .settings import SettingsManager
from .source import NpmPackageSource
from .ui import Reporter
from .utils.error_format import format_error_message

logger = logging.getLogger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="svseeds-collector")
@click.argument("components", nargs=-1)
@click.option("--dir", "-d", "directory", default=None, help=f"Directory path of components (default: {DEFAULT_DIR})")
@click.option("--all", "-a", "select_all", is_flag=True, help="Copy all components")
@click.option("--update", "-u", is_flag=True, help="Update mode")
@click.option("--remove", "-r", is_flag=True, help="Remove mode")
@click.option("--uninstall", is_flag=True, help="Remove all components")
@click.option("--confirm/--no-confirm", default=None, help="Ask before acting (--no-confirm skips interactions)")
@click.option("--overwrite/--no-overwrite", default=None, help="Overwrite files that already exist")
@click.option("--style/--no-style", default=None, help="Copy the __style.ts file")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Write JSONL logs to this file")
@click.pass_context
def cli(
    ctx: click.Context,
    components: tuple[str, ...],
    directory: str | None,
    select_all: bool,
    update: bool,
    remove: bool,
    uninstall: bool,
    confirm: bool | None,
    overwrite: bool | None,
    style: bool | None,
    log_file: str | None,
):
    """Collect SvSeeds UI components into your project.

    COMPONENTS are component names such as "button" or "icon". Without
    names (and without --all) an interactive selection is shown.

    \b
    Examples:
      svseeds-collector button icon     Copy two components
      svseeds-collector -a --no-style   Copy everything except __style.ts
      svseeds-collector -u -a           Update every installed component
      svseeds-collector -r button       Remove one component
      svseeds-collector --uninstall     Remove everything and the directory
    """
    init_json_logging(log_file)
    reporter = Reporter(console)
    reporter.intro("SvSeeds Collector")

    try:
        project_root = get_project_root()
        settings = SettingsManager(project_root).get_collector_settings()
        config = build_config(
            components,
            select_all,
            update,
            remove,
            uninstall,
            directory=directory,
            confirm=confirm,
            overwrite=overwrite,
            style=style,
            settings=settings,
        )
    except CollectorError as e:
        reporter.error(format_error_message(e, include_type=False))
        ctx.exit(1)
    except ValidationError as e:
        logger.error(f"Invalid settings: {e}")
        error = e.errors()[0]
        field_name = str(error["loc"][0]) if error["loc"] else ""
        reporter.error(f"invalid settings: {SETTINGS_KEYS.get(field_name, field_name)}: {error['msg']}")
        ctx.exit(1)

    logger.info(f"Starting {config.mode.value} run in {project_root}")
    source = NpmPackageSource(config.package, config.registry_url)
    outcome = run_collector(config, project_root, source, TerminalPrompter(console), reporter)
    ctx.exit(outcome.exit_code)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
