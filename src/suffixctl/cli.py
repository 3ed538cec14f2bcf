"""Root CLI group for suffixctl with global flags and command registration."""

from __future__ import annotations

import click

from suffixctl import __version__
from suffixctl.commands import register_commands
from suffixctl.commands._base import SuffixGroup
from suffixctl.commands._context import AppContext
from suffixctl.config.settings import SuffixSettings


@click.group(
    cls=SuffixGroup,
    invoke_without_command=True,
    examples="""\
  suffixctl parse www.example.co.uk
  suffixctl -q domain foo.bar.example.com
  suffixctl --no-private --json match foo.blogspot.com
  suffixctl --list-file ./my_list.dat rules""",
)
@click.version_option(version=__version__, prog_name="suffixctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the primary value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--list-file",
    type=click.Path(dir_okay=False, resolve_path=True),
    default=None,
    help="Load rules from this file instead of the bundled list.",
)
@click.option("--no-private", is_flag=True, help="Drop the private-domains section on load.")
@click.option("--ignore-private", is_flag=True, help="Skip private rules when matching.")
@click.option("--strict", is_flag=True, help="No default '*' rule for unlisted suffixes.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    list_file: str | None,
    no_private: bool,
    ignore_private: bool,
    strict: bool,
) -> None:
    """suffixctl: Public Suffix List domain parser."""
    settings = SuffixSettings.from_cli(
        config_path=config_path,
        list_file=list_file,
        no_private=no_private,
        ignore_private=ignore_private,
        strict=strict,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
