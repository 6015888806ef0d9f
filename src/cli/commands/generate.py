"""Generate report command."""

import time
from typing import Optional

import click

from src.calculators.time_utils import ReportPeriod, parse_month, previous_month
from src.cli.error_handlers import ErrorHandler
from src.cli.utils.formatters import format_info, format_success, format_warning
from src.cli.utils.progress import ProgressTracker
from src.config.settings import get_config
from src.pipeline.report_pipeline import ReportPipeline


def _parse_month_option(ctx, param, value: Optional[str]) -> ReportPeriod:
    """Click callback turning ``--month`` into a ReportPeriod."""
    if value is None:
        return previous_month()
    try:
        return parse_month(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


@click.command(name="generate-report")
@click.option(
    "--month",
    "period",
    type=str,
    default=None,
    callback=_parse_month_option,
    help="Month to report on (YYYY-MM). Defaults to the previous month.",
)
@click.option(
    "--save/--no-save",
    default=True,
    show_default=True,
    help="Write both CSV files to the reports directory.",
)
@click.option(
    "--upload",
    is_flag=True,
    default=False,
    help="Upload the saved CSV files to Google Drive as Google Sheets.",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Reports directory (overrides REPORTS_DIR).",
)
@click.option(
    "--print",
    "print_reports",
    is_flag=True,
    default=False,
    help="Print both reports to stdout.",
)
@click.option("--debug", is_flag=True, default=False, help="Show full stack traces.")
def generate_report(
    period: ReportPeriod,
    save: bool,
    upload: bool,
    output_dir: Optional[str],
    print_reports: bool,
    debug: bool,
):
    """Generate the monthly and project-wise reports for one month.

    Example:
        clockify-reports generate-report
        clockify-reports generate-report --month 2024-10 --upload
        clockify-reports generate-report --month 2024-10 --no-save --print
    """
    if upload and not save:
        raise click.UsageError("--upload requires the reports to be saved")

    start_time = time.time()
    click.echo(
        format_info(f"Generating reports for {period.month_name} {period.year}...")
    )
    click.echo(
        format_info(
            f"  Date range: {period.start.date()} to {period.end.date()}"
        )
    )
    click.echo()

    stages = ["Fetching Clockify data and building reports"]
    if save:
        stages.append("Saving CSV files")
    if upload:
        stages.append("Uploading to Google Drive")
    tracker = ProgressTracker(stages)

    with ErrorHandler(debug):
        settings = get_config()
        pipeline = ReportPipeline.from_config(
            settings, upload=upload, reports_dir=output_dir
        )

        tracker.start()
        bundle = pipeline.generate(period)
        tracker.advance(
            f"{bundle.entry_count} entries, {bundle.user_count} users, "
            f"{bundle.project_count} projects"
        )

        paths = []
        if save:
            tracker.start()
            paths = pipeline.save(bundle)
            tracker.advance(", ".join(str(p) for p in paths))

        uploads = []
        if upload:
            tracker.start()
            uploads = pipeline.upload(paths)
            tracker.advance(f"Uploaded {len(uploads)} files")

    if print_reports:
        click.echo()
        click.echo(bundle.monthly_csv)
        click.echo(bundle.project_csv)

    if bundle.failed_user_ids:
        click.echo(
            format_warning(
                f"Entries could not be fetched for {len(bundle.failed_user_ids)} "
                f"users: {', '.join(bundle.failed_user_ids)}"
            )
        )

    duration = time.time() - start_time
    click.echo()
    click.echo(format_success("Reports generated successfully!"))
    click.echo()
    click.echo("Summary:")
    click.echo(f"  Users:            {bundle.user_count}")
    click.echo(f"  Projects:         {bundle.project_count}")
    click.echo(f"  Entries:          {bundle.entry_count}")
    for path in paths:
        click.echo(f"  File:             {path}")
    for uploaded in uploads:
        click.echo(f"  Sheet:            {uploaded['url']}")
    click.echo(f"  Duration:         {duration:.2f}s")
