"""Base model for all Clockify payload models.

This module provides a base Pydantic model with the common configuration
used to validate responses coming back from the time-tracking API.
"""

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation of camelCase API payloads via field aliases
    - Ignoring vendor fields the reporting engine does not consume
    - Immutability (frozen models) for the duration of a report run

    Example:
        >>> class Workspace(BaseDataModel):
        ...     id: str
        ...     name: str
        >>> ws = Workspace(id="ws-1", name="Acme", memberships=[])
        >>> ws.model_dump()
        {'id': 'ws-1', 'name': 'Acme'}
    """

    model_config = ConfigDict(
        # Accept both the API's camelCase aliases and Python field names
        populate_by_name=True,
        # The API returns many fields we never read
        extra="ignore",
        # Payloads are read-only once fetched
        frozen=True,
    )
