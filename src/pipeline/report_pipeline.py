"""Report pipeline orchestrating fetch, aggregation, and output.

The pipeline is the single entry point used by the CLI:

1. Fetch users and their time entries for the period
2. Build the monthly and project-wise reports from the same data
3. Optionally save both CSV files locally
4. Optionally upload the saved files to Google Drive

Both reports are fully built in memory before anything is written, so a
failure during fetching or building leaves no files behind.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from src.calculators.time_utils import ReportPeriod
from src.config.settings import ReportingSystemConfig
from src.exceptions import SinkError
from src.google_auth import get_drive_service
from src.services.clockify_service import ClockifyService
from src.services.google_drive_service import GoogleDriveUploader
from src.services.report_fetcher import MonthlyData, ReportDataFetcher
from src.services.retry_handler import RetryHandler
from src.utils.logging_utils import LogContext, generate_correlation_id
from src.writers.monthly_report_builder import MonthlyReportBuilder
from src.writers.project_report_builder import ProjectReportBuilder
from src.writers.report_file_writer import ReportFileWriter

logger = logging.getLogger(__name__)


@dataclass
class ReportBundle:
    """Both serialized reports for one period.

    Attributes:
        period: Month the reports cover
        monthly_csv: Per-user report text
        project_csv: Project-wise report text
        user_count: Number of users in the workspace
        project_count: Number of projects with tracked time
        entry_count: Number of time entries aggregated
        failed_user_ids: Users whose entries could not be fetched
    """

    period: ReportPeriod
    monthly_csv: str
    project_csv: str
    user_count: int = 0
    project_count: int = 0
    entry_count: int = 0
    failed_user_ids: List[str] = field(default_factory=list)

    @property
    def monthly_filename(self) -> str:
        return self.period.monthly_report_filename

    @property
    def project_filename(self) -> str:
        return self.period.project_report_filename


class ReportPipeline:
    """Runs a complete report generation for one period.

    Example:
        >>> pipeline = ReportPipeline.from_config(get_config(), upload=True)
        >>> bundle = pipeline.generate(ReportPeriod(2024, 10))
        >>> paths = pipeline.save(bundle)
        >>> uploads = pipeline.upload(paths)
    """

    def __init__(
        self,
        fetcher: ReportDataFetcher,
        file_writer: Optional[ReportFileWriter] = None,
        uploader: Optional[GoogleDriveUploader] = None,
    ):
        """Initialize the pipeline.

        Args:
            fetcher: Source of users and time entries
            file_writer: Local sink; defaults to the ``reports`` directory
            uploader: Google Drive sink, required only for ``upload``
        """
        self.fetcher = fetcher
        self.file_writer = file_writer or ReportFileWriter()
        self.uploader = uploader

    @classmethod
    def from_config(
        cls,
        config: ReportingSystemConfig,
        upload: bool = False,
        reports_dir: Optional[str] = None,
    ) -> "ReportPipeline":
        """Wire up services from configuration.

        All required settings are checked here, before any request is made.

        Raises:
            ConfigurationMissingError: If Clockify credentials, or Google
                credentials when ``upload`` is set, are missing
        """
        api_key, workspace_id = config.require_clockify_credentials()

        uploader = None
        if upload:
            service_account_info = config.get_google_service_account_info()
            uploader = GoogleDriveUploader(
                get_drive_service(service_account_info, config.google_scopes),
                folder_id=config.google_folder_id,
                retry_handler=RetryHandler(
                    max_retries=config.max_retries, base_delay=config.retry_delay
                ),
            )

        clockify_service = ClockifyService(
            api_key,
            base_url=config.clockify_base_url,
            page_size=config.clockify_page_size,
            timeout=config.clockify_timeout,
            retry_handler=RetryHandler(
                max_retries=config.max_retries, base_delay=config.retry_delay
            ),
        )
        fetcher = ReportDataFetcher(
            clockify_service, workspace_id, max_workers=config.max_workers
        )
        return cls(
            fetcher,
            file_writer=ReportFileWriter(reports_dir or config.reports_dir),
            uploader=uploader,
        )

    def build_reports(self, data: MonthlyData) -> ReportBundle:
        """Build both reports from already-fetched data."""
        period = data.period

        monthly_csv = MonthlyReportBuilder.from_entries(
            data.users, data.entries_by_user, period.month_name, period.year
        ).to_csv()

        project_builder = ProjectReportBuilder.from_entries(
            data.users,
            data.entries_by_user,
            self.fetcher.lookup_project_name,
            period.month_name,
            period.year,
        )
        project_csv = project_builder.to_csv()

        return ReportBundle(
            period=period,
            monthly_csv=monthly_csv,
            project_csv=project_csv,
            user_count=len(data.users),
            project_count=len(project_builder.projects),
            entry_count=data.entry_count,
            failed_user_ids=list(data.failed_user_ids),
        )

    def generate(self, period: ReportPeriod) -> ReportBundle:
        """Fetch data for ``period`` and build both reports.

        Raises:
            UpstreamFetchError: If the user list cannot be fetched
        """
        with LogContext(
            correlation_id=generate_correlation_id(),
            workspace_id=self.fetcher.workspace_id,
            report_month=period.key,
        ):
            logger.info(f"Generating reports for {period.month_name} {period.year}")
            data = self.fetcher.fetch(period)
            bundle = self.build_reports(data)
            logger.info(
                f"Generated reports: {bundle.user_count} users, "
                f"{bundle.project_count} projects, {bundle.entry_count} entries"
            )
            logger.debug(
                f"Clockify retry statistics: "
                f"{self.fetcher.clockify_service.get_retry_statistics()}"
            )
            return bundle

    def save(self, bundle: ReportBundle) -> List[Path]:
        """Write both reports to the reports directory.

        Either both files are written or neither is.

        Raises:
            SinkError: If a file cannot be written
        """
        return self.file_writer.write_all(
            [
                (bundle.monthly_filename, bundle.monthly_csv),
                (bundle.project_filename, bundle.project_csv),
            ]
        )

    def upload(self, paths: List[Path]) -> List[Dict[str, str]]:
        """Upload saved report files to Google Drive.

        If one upload fails, the sheets already created by this call are
        deleted again before the error is raised.

        Raises:
            SinkError: If no uploader is configured or an upload fails
        """
        if self.uploader is None:
            raise SinkError("Google Drive upload is not configured for this run")

        uploaded: List[Dict[str, str]] = []
        try:
            for path in paths:
                uploaded.append(self.uploader.upload_csv(path))
        except SinkError:
            self._discard_uploads(uploaded)
            raise
        return uploaded

    def _discard_uploads(self, uploaded: List[Dict[str, str]]) -> None:
        for result in uploaded:
            try:
                self.uploader.delete_file(result["id"])
            except SinkError as e:
                logger.error(
                    f"Could not remove partially uploaded sheet {result['id']}: {e}"
                )
