"""
Clockify API client with pagination and retry handling.
"""

import datetime as dt
import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import requests
from pydantic import ValidationError

from src.calculators.time_utils import to_clockify_timestamp
from src.exceptions import UpstreamFetchError
from src.models.base import BaseDataModel
from src.models.clockify import Project, TimeEntry, User
from src.services.retry_handler import RetryExhaustedException, RetryHandler

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.clockify.me/api/v1"

ModelT = TypeVar("ModelT", bound=BaseDataModel)


class ClockifyService:
    """
    Clockify REST API v1 client.

    Features:
    - API key authentication via the ``X-Api-Key`` header
    - Automatic retry with exponential backoff for transient errors
    - Pagination over ``page``/``page-size`` for list endpoints
    - Validation of responses into pydantic models

    Every failure surfaces as ``UpstreamFetchError``; callers decide whether
    it is fatal.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        page_size: int = 1000,
        timeout: float = 30.0,
        retry_handler: Optional[RetryHandler] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the Clockify client.

        Args:
            api_key: Clockify API key
            base_url: API root URL
            page_size: Number of records requested per page
            timeout: Per-request timeout in seconds
            retry_handler: Custom retry handler instance
            session: Preconfigured requests session (mainly for tests)
        """
        self.base_url = base_url.rstrip("/")
        self.page_size = page_size
        self.timeout = timeout
        self.retry_handler = retry_handler or RetryHandler()

        self._session = session or requests.Session()
        self._session.headers.update(
            {"X-Api-Key": api_key, "Content-Type": "application/json"}
        )

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"

        def _get_operation():
            response = self._session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()

        try:
            return self.retry_handler.execute_with_retry(_get_operation)
        except (requests.exceptions.RequestException, RetryExhaustedException) as e:
            logger.error(f"Clockify request to {path} failed: {e}")
            raise UpstreamFetchError(f"Clockify request to {path} failed: {e}") from e
        except ValueError as e:
            logger.error(f"Clockify returned invalid JSON for {path}: {e}")
            raise UpstreamFetchError(f"Invalid response from {path}: {e}") from e

    def _get_paginated(
        self, path: str, params: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """Collect every page of a list endpoint until a short page is returned."""
        items: List[Dict[str, Any]] = []
        page = 1

        while True:
            page_params = dict(params or {})
            page_params.update({"page": page, "page-size": self.page_size})
            batch = self._get(path, page_params)

            if not isinstance(batch, list):
                raise UpstreamFetchError(
                    f"Expected a list from {path}, got {type(batch).__name__}"
                )

            items.extend(batch)
            if len(batch) < self.page_size:
                break
            page += 1

        logger.debug(f"Fetched {len(items)} records from {path} in {page} page(s)")
        return items

    @staticmethod
    def _validate(model: Type[ModelT], payload: Any, source: str) -> ModelT:
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise UpstreamFetchError(
                f"Unexpected {model.__name__} payload from {source}: {e}"
            ) from e

    def list_users(self, workspace_id: str) -> List[User]:
        """
        List all members of a workspace.

        Raises:
            UpstreamFetchError: If the request fails or a record is malformed
        """
        path = f"/workspaces/{workspace_id}/users"
        users = [self._validate(User, item, path) for item in self._get_paginated(path)]
        logger.info(f"Listed {len(users)} users in workspace {workspace_id}")
        return users

    def list_time_entries(
        self,
        workspace_id: str,
        user_id: str,
        start: dt.datetime,
        end: dt.datetime,
    ) -> List[TimeEntry]:
        """
        List one user's time entries between ``start`` and ``end``.

        Raises:
            UpstreamFetchError: If the request fails or a record is malformed
        """
        path = f"/workspaces/{workspace_id}/user/{user_id}/time-entries"
        params = {
            "start": to_clockify_timestamp(start),
            "end": to_clockify_timestamp(end),
        }
        entries = [
            self._validate(TimeEntry, item, path)
            for item in self._get_paginated(path, params)
        ]
        logger.debug(f"Fetched {len(entries)} time entries for user {user_id}")
        return entries

    def get_project(self, workspace_id: str, project_id: str) -> Project:
        """
        Get a single project.

        Raises:
            UpstreamFetchError: If the request fails or the payload is malformed
        """
        path = f"/workspaces/{workspace_id}/projects/{project_id}"
        return self._validate(Project, self._get(path), path)

    def get_retry_statistics(self) -> dict:
        return self.retry_handler.get_retry_statistics()

    def close(self):
        """Close the underlying HTTP session."""
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
