"""ridingtally command line entry point."""

import click

from ridingtally import __version__
from ridingtally.common.logging import setup_logging
from ridingtally.infrastructure.config.settings import get_settings
from ridingtally.interfaces.cli.commands.report_commands import (
    combo,
    margins,
    party_performance,
    polls,
    totals,
)


@click.group()
@click.version_option(__version__, prog_name="ridingtally")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: RIDINGTALLY_LOG_LEVEL or INFO)",
)
@click.option(
    "--log-json/--no-log-json", default=None, help="Log as JSON lines"
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, log_json: bool | None):
    """Riding-level reports from Elections Canada poll-by-poll results."""
    settings = get_settings()
    setup_logging(
        log_level=log_level or settings.log_level,
        json_logs=settings.log_json if log_json is None else log_json,
    )
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


cli.add_command(totals)
cli.add_command(combo)
cli.add_command(margins)
cli.add_command(party_performance, "party")
cli.add_command(polls)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
