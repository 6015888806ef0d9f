"""
Google API authentication module for the reporting system.
"""

from typing import Any, Dict, List, Optional

from google.oauth2 import service_account
from googleapiclient.discovery import build

DRIVE_SCOPES = ["https://www.googleapis.com/auth/drive"]


def get_credentials(
    service_account_info: Dict[str, Any],
    scopes: Optional[List[str]] = None,
) -> service_account.Credentials:
    """Build service account credentials from an info dictionary.

    The dictionary comes from
    ``ReportingSystemConfig.get_google_service_account_info()``.
    """
    return service_account.Credentials.from_service_account_info(
        service_account_info, scopes=scopes or DRIVE_SCOPES
    )


def get_drive_service(
    service_account_info: Dict[str, Any], scopes: Optional[List[str]] = None
):
    """Get authenticated Google Drive v3 service."""
    credentials = get_credentials(service_account_info, scopes)
    return build("drive", "v3", credentials=credentials, cache_discovery=False)
