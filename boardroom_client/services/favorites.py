"""
Favorites Service - Rooms the user has starred.
"""

from typing import List

from boardroom_client.domain.response import ApiResponse
from boardroom_client.domain.room import FavoriteRoom
from boardroom_client.services.base import BaseService


class FavoritesService(BaseService):

    async def list(self) -> ApiResponse[List[FavoriteRoom]]:
        return await self._call("GET", "/favorites", FavoriteRoom.from_dict, many=True)

    async def ids(self) -> List[str]:
        response = await self._call("GET", "/favorites/ids")
        return list(response.data or [])

    async def add(self, room_id: str) -> ApiResponse:
        return await self._call("POST", f"/favorites/{room_id}")

    async def remove(self, room_id: str) -> ApiResponse:
        return await self._call("DELETE", f"/favorites/{room_id}")

    async def toggle(self, room_id: str, is_favorite: bool) -> ApiResponse:
        """Remove the room if it is currently a favorite, add it otherwise."""
        if is_favorite:
            return await self.remove(room_id)
        return await self.add(room_id)
