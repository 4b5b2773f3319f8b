"""Election report commands.

Every command loads one election (``--year`` under the configured data root,
or an explicit ``--data-dir``), fuses its polls and prints one report.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from ridingtally.application.dtos.election_report_dto import (
    GenerateReportInputDto,
    ReportKind,
)
from ridingtally.application.usecases.generate_election_report_usecase import (
    GenerateElectionReportUseCase,
)
from ridingtally.domain.value_objects.party import Party
from ridingtally.infrastructure.config.settings import Settings, get_settings
from ridingtally.infrastructure.importers.elections_canada_data_source import (
    ElectionsCanadaDataSource,
)
from ridingtally.interfaces.cli.base import PARTY, with_error_handling
from ridingtally.interfaces.cli.presenters.report_presenter import (
    OUTPUT_FORMATS,
    ReportPresenter,
)


def load_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options selecting the election to load and the output format."""
    options = [
        click.option(
            "--year", type=int, default=None, help="Election year to load"
        ),
        click.option(
            "--data-dir",
            type=click.Path(path_type=Path, file_okay=False),
            default=None,
            help="Directory of result files (overrides --year)",
        ),
        click.option(
            "--workers",
            type=click.IntRange(min=1),
            default=None,
            help="Parser threads",
        ),
        click.option(
            "--format",
            "output_format",
            type=click.Choice(OUTPUT_FORMATS),
            default="json",
            show_default=True,
            help="Output format",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def resolve_data_dir(
    settings: Settings, year: int | None, data_dir: Path | None
) -> Path:
    """Directory to load: ``data_dir`` if given, else the year's directory."""
    if data_dir is not None:
        return data_dir
    year = year if year is not None else settings.default_year
    if year is None:
        raise ValueError(
            "Give --year or --data-dir (or set RIDINGTALLY_DEFAULT_YEAR)"
        )
    return settings.year_directory(year)


def run_report(
    ctx: click.Context,
    kind: ReportKind,
    *,
    year: int | None,
    data_dir: Path | None,
    workers: int | None,
    output_format: str,
    party: Party | None = None,
    ally: Party | None = None,
    limit: int | None = None,
) -> None:
    settings: Settings = (ctx.obj or {}).get("settings") or get_settings()
    presenter = ReportPresenter(output_format)
    data_source = ElectionsCanadaDataSource(
        workers=workers or settings.workers,
        encoding=settings.csv_encoding,
        fallback_encoding=settings.fallback_encoding,
    )
    use_case = GenerateElectionReportUseCase(data_source)
    output = use_case.execute(
        GenerateReportInputDto(
            kind=kind,
            data_dir=resolve_data_dir(settings, year, data_dir),
            party=party,
            ally=ally,
            limit=limit,
        )
    )

    footer = f"Polls: {output.fused_polls}" if kind is ReportKind.POLLS else None
    if output_format == "json":
        # keep stdout a single JSON document
        click.echo(presenter.render(output.records))
        if footer:
            click.echo(footer, err=True)
    else:
        click.echo(presenter.render(output.records, footer))


@click.command()
@load_options
@click.pass_context
@with_error_handling
def totals(ctx: click.Context, **options: Any):
    """Popular vote, vote share and seats of every party."""
    run_report(ctx, ReportKind.TOTALS, **options)


@click.command()
@load_options
@click.option("--party", type=PARTY, default="CON", show_default=True)
@click.option(
    "--ally",
    type=PARTY,
    default="PPC",
    show_default=True,
    help="Party whose votes are added to --party",
)
@click.pass_context
@with_error_handling
def combo(ctx: click.Context, party: Party, ally: Party, **options: Any):
    """Ridings PARTY would have won with ALLY's votes added."""
    run_report(ctx, ReportKind.COMBO, party=party, ally=ally, **options)


@click.command()
@load_options
@click.option(
    "--limit", type=click.IntRange(min=0), default=None, help="Closest N races only"
)
@click.pass_context
@with_error_handling
def margins(ctx: click.Context, limit: int | None, **options: Any):
    """Victory margin of every riding, closest race first."""
    run_report(ctx, ReportKind.MARGINS, limit=limit, **options)


@click.command("party")
@load_options
@click.option("--party", type=PARTY, required=True, help="Party code or label")
@click.pass_context
@with_error_handling
def party_performance(ctx: click.Context, party: Party, **options: Any):
    """Vote share of a party's candidates, weakest riding first."""
    run_report(ctx, ReportKind.PARTY, party=party, **options)


@click.command()
@load_options
@click.pass_context
@with_error_handling
def polls(ctx: click.Context, **options: Any):
    """Fused poll of every candidate, and how many there are."""
    run_report(ctx, ReportKind.POLLS, **options)
