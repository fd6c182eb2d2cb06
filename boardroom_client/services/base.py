"""
Service Base - Shared plumbing for the REST resource services.
"""

from typing import Any, Callable, Dict, Optional

from boardroom_client.domain.response import ApiResponse
from boardroom_client.sdk.gateway import GatewayClient


class BaseService:
    """A thin wrapper over one backend resource. All calls go through the gateway."""

    def __init__(self, gateway: GatewayClient):
        self._gateway = gateway

    async def _call(
        self,
        method: str,
        url: str,
        parser: Optional[Callable[[Any], Any]] = None,
        many: bool = False,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> ApiResponse:
        payload = await self._gateway.fetch(method, url, params=params, json=json)
        if payload is None:
            return ApiResponse(success=True, data=[] if many else None)
        return ApiResponse.from_payload(payload, parser=parser, many=many)
