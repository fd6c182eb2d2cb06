"""
Campuses Service - Campus directory and per-campus stats.

Unlike the other services these return the unwrapped entity, since
callers (registration, campus picker) never need the envelope.
"""

from typing import List, Optional

from boardroom_client.domain.campus import Campus, CampusStats
from boardroom_client.services.base import BaseService


class CampusesService(BaseService):

    async def active(self) -> List[Campus]:
        response = await self._call("GET", "/campuses/active", Campus.from_dict, many=True)
        return response.data or []

    async def my(self) -> Optional[Campus]:
        response = await self._call("GET", "/campuses/my", Campus.from_dict)
        return response.data

    async def get(self, campus_id: str) -> Campus:
        response = await self._call("GET", f"/campuses/{campus_id}", Campus.from_dict)
        return response.data

    async def stats(self, campus_id: str) -> CampusStats:
        response = await self._call("GET", f"/campuses/{campus_id}/stats", CampusStats.from_dict)
        return response.data
