"""Election report generation use case.

Flow:
    1. Load raw polls from the data source
    2. Fuse the polls of each candidate
    3. Build ridings from the fused polls
    4. Run the requested report
"""

from collections.abc import Sequence

from ridingtally.application.dtos.election_report_dto import (
    GenerateReportInputDto,
    GenerateReportOutputDto,
    ReportKind,
)
from ridingtally.common.logging import get_logger
from ridingtally.domain.entities.riding import Riding
from ridingtally.domain.services.election_report_service import ElectionReportService
from ridingtally.domain.services.interfaces.poll_data_source_service import (
    IPollDataSourceService,
)
from ridingtally.domain.services.poll_fusion_service import fuse_polls
from ridingtally.domain.services.riding_builder_service import build_ridings
from ridingtally.domain.value_objects.party import Party


logger = get_logger(__name__)


class GenerateElectionReportUseCase:
    """Loads one election and produces one report from it."""

    def __init__(
        self,
        data_source: IPollDataSourceService,
        report_service: ElectionReportService | None = None,
    ) -> None:
        self._data_source = data_source
        self._report_service = report_service or ElectionReportService()

    def execute(self, input_dto: GenerateReportInputDto) -> GenerateReportOutputDto:
        """Run the pipeline and return the report records.

        Raises:
            ValueError: If the report needs a party that was not given
            DataDirectoryNotFoundError: If the data directory does not exist
        """
        self._validate(input_dto)
        output = GenerateReportOutputDto(kind=input_dto.kind)

        loaded = self._data_source.load_polls(input_dto.data_dir)
        output.raw_polls = len(loaded.polls)
        output.raw_votes = loaded.total_votes
        output.files_read = len(loaded.files_read)
        output.files_skipped = len(loaded.files_skipped)
        output.row_errors = list(loaded.row_errors)

        fused = fuse_polls(loaded.polls)
        output.fused_polls = len(fused)

        if input_dto.kind is ReportKind.POLLS:
            output.records = list(fused)
        else:
            ridings = build_ridings(fused)
            output.ridings = len(ridings)
            output.records = self._run_report(input_dto, ridings)

        if input_dto.limit is not None:
            output.records = output.records[: input_dto.limit]

        logger.info(
            "report generated",
            report=input_dto.kind.value,
            records=len(output.records),
            raw_polls=output.raw_polls,
            fused_polls=output.fused_polls,
            ridings=output.ridings,
            rows_skipped=len(output.row_errors),
        )
        return output

    def _run_report(
        self, input_dto: GenerateReportInputDto, ridings: Sequence[Riding]
    ) -> list:
        service = self._report_service
        kind = input_dto.kind
        if kind is ReportKind.TOTALS:
            return service.totals(ridings)
        if kind is ReportKind.MARGINS:
            return service.victory_margins(ridings)
        if kind is ReportKind.COMBO:
            return service.combined_victories(
                ridings, _required(input_dto.party), _required(input_dto.ally)
            )
        if kind is ReportKind.PARTY:
            return service.party_performance(ridings, _required(input_dto.party))
        raise ValueError(f"Unsupported report: {kind}")

    @staticmethod
    def _validate(input_dto: GenerateReportInputDto) -> None:
        if input_dto.kind in (ReportKind.COMBO, ReportKind.PARTY) and (
            input_dto.party is None
        ):
            raise ValueError(f"The {input_dto.kind.value} report needs a party")
        if input_dto.kind is ReportKind.COMBO:
            if input_dto.ally is None:
                raise ValueError("The combo report needs an allied party")
            if input_dto.ally == input_dto.party:
                raise ValueError("The allied party must differ from the party")
        if input_dto.limit is not None and input_dto.limit < 0:
            raise ValueError("limit must not be negative")


def _required(party: Party | None) -> Party:
    if party is None:
        raise ValueError("party is required")
    return party
