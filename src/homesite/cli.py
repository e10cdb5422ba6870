"""Root CLI group for homesite with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from homesite import __version__
from homesite.commands import register_commands
from homesite.commands._context import AppContext
from homesite.config.settings import HomesiteSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="homesite")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--root",
    "content_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Content root directory.",
)
@click.option(
    "--disable-filter",
    is_flag=True,
    help="Include hidden (_-prefixed) documents in listings.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    content_root: Path | None,
    disable_filter: bool,
) -> None:
    """homesite: personal website content."""
    # Unset flags are left out so env vars and homesite.toml still apply.
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
        "disable_filter": disable_filter,
    }
    settings = HomesiteSettings.from_cli(
        config_path=config_path,
        content_root=content_root,
        **{name: True for name, value in flags.items() if value},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
