"""
Calendar Service - Google / Microsoft calendar connections.

The OAuth consent itself happens in a browser: connect() only returns
the URL to open.
"""

from typing import List, Optional, Union

from boardroom_client.domain.calendar import CalendarConnection, CalendarProvider
from boardroom_client.domain.response import ApiResponse
from boardroom_client.services.base import BaseService


class CalendarService(BaseService):

    async def connections(self) -> ApiResponse[List[CalendarConnection]]:
        return await self._call("GET", "/calendar/connections", CalendarConnection.from_dict, many=True)

    async def is_connected(self, provider: Union[str, CalendarProvider]) -> bool:
        wanted = CalendarProvider.parse(provider)
        response = await self.connections()
        return any(c.provider == wanted for c in response.data or [])

    async def connect(self, provider: Union[str, CalendarProvider]) -> Optional[str]:
        """
        Start the OAuth flow for a provider.

        Returns:
            Authorization URL to open, or None if the backend sent none
        """
        slug = CalendarProvider.parse(provider).slug
        response = await self._call("POST", f"/calendar/connect/{slug}")
        return (response.data or {}).get("authUrl")

    async def disconnect(self, provider: Union[str, CalendarProvider]) -> ApiResponse:
        slug = CalendarProvider.parse(provider).slug
        return await self._call("DELETE", f"/calendar/connections/{slug}")
