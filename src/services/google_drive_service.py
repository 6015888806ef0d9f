"""
Google Drive uploader that turns CSV reports into Google Sheets.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

from googleapiclient.errors import HttpError
from googleapiclient.http import MediaFileUpload

from src.exceptions import SinkError
from src.services.retry_handler import RetryExhaustedException, RetryHandler

logger = logging.getLogger(__name__)

SPREADSHEET_MIME = "application/vnd.google-apps.spreadsheet"
CSV_MIME = "text/csv"


class GoogleDriveUploader:
    """
    Uploads CSV files to a Drive folder, converting them to Google Sheets.

    Features:
    - Conversion on upload via the target MIME type
    - Automatic retry with exponential backoff for rate limits and 5xx
    - Failures surfaced as ``SinkError``
- Deletion of uploaded files, used to roll back a partial upload
    """

    def __init__(
        self,
        drive_service,
        folder_id: Optional[str] = None,
        retry_handler: Optional[RetryHandler] = None,
    ):
        """
        Initialize the uploader.

        Args:
            drive_service: Authenticated Drive v3 API resource
                (see ``src.google_auth.get_drive_service``)
            folder_id: Parent folder for uploaded sheets, or None for My Drive
            retry_handler: Custom retry handler instance
        """
        self._service = drive_service
        self.folder_id = folder_id
        self.retry_handler = retry_handler or RetryHandler()

    def upload_csv(self, path: Union[str, Path]) -> Dict[str, str]:
        """
        Upload a CSV file as a Google Sheet named after the file.

        Args:
            path: Local CSV file

        Returns:
            Dictionary with the new file's ``id``, ``name`` and ``url``

        Raises:
            SinkError: If the file is missing or the upload fails
        """
        path = Path(path)
        if not path.is_file():
            raise SinkError(f"Report file not found: {path}")

        metadata = {"name": path.stem, "mimeType": SPREADSHEET_MIME}
        if self.folder_id:
            metadata["parents"] = [self.folder_id]

        def _upload_operation():
            media = MediaFileUpload(str(path), mimetype=CSV_MIME, resumable=False)
            return (
                self._service.files()
                .create(body=metadata, media_body=media, fields="id, name")
                .execute()
            )

        try:
            result = self.retry_handler.execute_with_retry(_upload_operation)
        except (HttpError, RetryExhaustedException, OSError) as e:
            logger.error(f"Failed to upload {path} to Google Drive: {e}")
            raise SinkError(f"Failed to upload {path.name} to Google Drive: {e}") from e

        file_id = result.get("id", "")
        url = f"https://docs.google.com/spreadsheets/d/{file_id}"
        logger.info(f"Uploaded {path.name} as spreadsheet {file_id}")
        return {"id": file_id, "name": result.get("name", path.stem), "url": url}

    def delete_file(self, file_id: str) -> None:
        """
        Delete a file created by an earlier upload.

        Raises:
            SinkError: If the file cannot be deleted
        """

        def _delete_operation():
            return self._service.files().delete(fileId=file_id).execute()

        try:
            self.retry_handler.execute_with_retry(_delete_operation)
        except (HttpError, RetryExhaustedException) as e:
            logger.error(f"Failed to delete Google Drive file {file_id}: {e}")
            raise SinkError(f"Failed to delete Google Drive file {file_id}: {e}") from e

        logger.info(f"Deleted Google Drive file {file_id}")
