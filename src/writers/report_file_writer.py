"""Local file sink for finished reports."""

import logging
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from src.exceptions import SinkError

logger = logging.getLogger(__name__)

TEMP_SUFFIX = ".tmp"


class ReportFileWriter:
    """Write serialized reports into a reports directory.

    Example:
        >>> writer = ReportFileWriter("reports")
        >>> writer.write("report-2024-10.csv", csv_text)
        PosixPath('reports/report-2024-10.csv')
    """

    def __init__(self, reports_dir: Union[str, Path] = "reports"):
        self.reports_dir = Path(reports_dir)

    def write(self, filename: str, content: str) -> Path:
        """Write ``content`` to ``reports_dir/filename`` as UTF-8.

        Raises:
            SinkError: If the directory or file cannot be written
        """
        return self.write_all([(filename, content)])[0]

    def write_all(self, files: Sequence[Tuple[str, str]]) -> List[Path]:
        """Write several reports so that either all of them land or none do.

        Every file is first written next to its target under a ``.tmp`` name.
        Targets are replaced only once all temporary files exist; on failure
        the temporary files are removed and existing targets are untouched.
        The directory is created when missing.

        Args:
            files: ``(filename, content)`` pairs

        Returns:
            Paths of the written files, in input order

        Raises:
            SinkError: If any file cannot be written
        """
        staged: List[Tuple[Path, Path]] = []
        try:
            self.reports_dir.mkdir(parents=True, exist_ok=True)
            for filename, content in files:
                target = self.reports_dir / filename
                temp = target.with_name(target.name + TEMP_SUFFIX)
                temp.write_text(content, encoding="utf-8")
                staged.append((temp, target))

            for temp, target in staged:
                temp.replace(target)
        except OSError as e:
            for temp, _ in staged:
                temp.unlink(missing_ok=True)
            logger.error(f"Failed to write reports to {self.reports_dir}: {e}")
            raise SinkError(
                f"Could not write report file in {self.reports_dir}: {e}"
            ) from e

        paths = [target for _, target in staged]
        for path in paths:
            logger.info(f"Saved report to {path}")
        return paths
