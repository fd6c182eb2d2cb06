"""
Campus Store - The campus a SUPER_ADMIN is currently working in.
"""

import json
import logging
from typing import Optional

from boardroom_client.domain.campus import Campus
from boardroom_client.ports.storage_port import StoragePort
from boardroom_client.sdk.context import SessionContext

logger = logging.getLogger(__name__)

CAMPUS_STORAGE_KEY = "campus-storage"


class CampusStore:
    """
    Persisted campus selection.

    Selecting a campus also sets the tenant id on the SessionContext, so
    every following request carries X-Campus-Id. The selection is not
    sensitive and may live in ordinary storage.
    """

    def __init__(self, storage: StoragePort, context: SessionContext, key: str = CAMPUS_STORAGE_KEY):
        self._storage = storage
        self._context = context
        self._key = key
        self._selected: Optional[Campus] = None

    @property
    def selected_campus(self) -> Optional[Campus]:
        return self._selected

    def select(self, campus: Optional[Campus]):
        """Select a campus, or pass None to go back to the user's own scope."""
        self._selected = campus
        self._context.campus_id = campus.id if campus else None
        self._storage.set_item(
            self._key,
            json.dumps({"selectedCampus": campus.to_dict() if campus else None}),
        )

    def hydrate(self) -> Optional[Campus]:
        raw = self._storage.get_item(self._key)
        self._selected = None
        if raw:
            try:
                data = json.loads(raw).get("selectedCampus")
                self._selected = Campus.from_dict(data) if data else None
            except (ValueError, KeyError, TypeError, AttributeError) as e:
                logger.warning(f"Discarding unreadable campus selection: {e}")
        self._context.campus_id = self._selected.id if self._selected else None
        return self._selected
