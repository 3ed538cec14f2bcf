"""AppContext: per-invocation state handed to every subcommand.

The root group builds it from :class:`SuffixSettings`; subcommands receive
it through ``@click.pass_obj`` and finish with :meth:`AppContext.emit`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from suffixctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from suffixctl.config.settings import SuffixSettings
    from suffixctl.core.rule_list import RuleList
    from suffixctl.services.lookup import LookupService
    from suffixctl.services.result import ServiceResult


class AppContext:
    """Settings, the rule list and output routing for one invocation.

    The rule list is read on first access, so ``--help`` and
    ``--version`` never touch it.
    """

    def __init__(self, settings: SuffixSettings) -> None:
        self.settings = settings
        self._rule_list: RuleList | None = None

        from suffixctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def rule_list(self) -> RuleList:
        """The configured rule list (loaded lazily on first access).

        The bundled list with private domains is shared with the library
        default; any other combination is loaded fresh.
        """
        if self._rule_list is None:
            from suffixctl.infrastructure.rule_source import RuleSourceError, load_rule_list

            cfg = self.settings.rules
            path = self.settings.list_path
            try:
                if path is None and cfg.private_domains:
                    from suffixctl.infrastructure.defaults import get_default_list

                    self._rule_list = get_default_list()
                else:
                    self._rule_list = load_rule_list(path, private_domains=cfg.private_domains)
            except RuleSourceError as exc:
                raise click.ClickException(str(exc)) from exc
        return self._rule_list

    @property
    def lookup(self) -> LookupService:
        """A LookupService bound to the configured list and options."""
        from suffixctl.services.lookup import LookupService

        return LookupService(
            self.rule_list,
            ignore_private=self.settings.lookup.ignore_private,
            strict=self.settings.lookup.strict,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        Results go to stdout and exit 0. Failures go to stderr and exit 1.
        Human-mode warnings go to stderr too; JSON carries them inline.
        """
        out = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        text = format_result(result, settings=out)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if not out.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
