"""
Gateway Client - Authenticated HTTP access to the booking backend.

Every request is decorated with the bearer token and, for campus-scoped
admin sessions, the X-Campus-Id header. A 401 triggers exactly one
transparent refresh-and-retry; if the refresh cannot happen the session
is ended and the original 401 is raised.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from boardroom_client.config import ClientConfig
from boardroom_client.domain.session import AuthTokens
from boardroom_client.errors import ApiError
from boardroom_client.sdk.context import SessionContext

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"
CAMPUS_HEADER = "X-Campus-Id"
RETRIED_EXTENSION = "boardroom.retried"
REFRESH_PATH = "/auth/refresh"

# Errors that mean the refresh token could not be exchanged
REFRESH_ERRORS = (ApiError, httpx.TransportError, ValueError, KeyError, TypeError)


class GatewayClient:
    """
    Async HTTP client wrapping httpx.AsyncClient.

    Refresh policy:
    - A request is retried at most once, whatever the cause of the second 401
    - The refresh call goes through a separate client and is never intercepted
    - A failed refresh (rejected, malformed, or network error) ends the session
      and raises the original 401, not the refresh error

    Concurrent 401s each run their own refresh unless coalesce_refresh is
    set, in which case they await one shared in-flight exchange.

    Example:
        context = SessionContext()
        gateway = GatewayClient(ClientConfig(), context)
        context.bind_auth_state(lambda: auth_store)

        response = await gateway.get("/rooms")
    """

    def __init__(
        self,
        config: ClientConfig,
        context: SessionContext,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        refresh_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize gateway client.

        Args:
            config: Client configuration (base URL, timeout, refresh policy)
            context: Session context holding the late-bound hooks
            transport: Optional transport for API calls (tests pass httpx.MockTransport)
            refresh_transport: Transport for the refresh exchange (defaults to transport)
        """
        self._config = config
        self._context = context
        self._coalesce_refresh = config.coalesce_refresh
        self._refresh_task: Optional[asyncio.Task] = None

        self._client = httpx.AsyncClient(**self._client_kwargs(transport))
        self._refresh_client = httpx.AsyncClient(
            **self._client_kwargs(refresh_transport or transport)
        )

    def _client_kwargs(self, transport: Optional[httpx.AsyncBaseTransport]) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            "base_url": self._config.api_url,
            "headers": {"Content-Type": "application/json"},
        }
        if self._config.timeout is not None:
            kwargs["timeout"] = self._config.timeout
        if transport is not None:
            kwargs["transport"] = transport
        return kwargs

    @property
    def context(self) -> SessionContext:
        return self._context

    def decorate(self, request: httpx.Request) -> httpx.Request:
        """
        Attach the bearer token and campus header.

        Headers are set, never appended, so decorating twice with the same
        session state leaves the request unchanged.
        """
        auth_state = self._context.auth_state()
        if auth_state is not None:
            access_token = auth_state.access_token
            if access_token:
                request.headers[AUTHORIZATION_HEADER] = f"Bearer {access_token}"

        campus_id = self._context.campus_id
        if campus_id:
            request.headers[CAMPUS_HEADER] = campus_id

        return request

    async def request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """
        Send a request through the authenticated pipeline.

        Args:
            method: HTTP method
            url: Path relative to the API base URL (e.g. "/rooms")
            params: Query parameters
            json: JSON body
            headers: Extra headers

        Returns:
            The 2xx response (possibly from the single retry)

        Raises:
            ApiError: For any non-2xx final outcome
            httpx.TransportError: For network failures
        """
        request = self._client.build_request(method, url, params=params, json=json, headers=headers)
        self.decorate(request)

        logger.debug(f"{method} {request.url.path}")
        response = await self._client.send(request)

        if response.status_code == 401 and self._should_intercept(request):
            return await self._refresh_and_retry(request, response)

        return self._check(response)

    async def fetch(self, method: str, url: str, **kwargs) -> Any:
        """Send a request and decode the JSON body (None for an empty body)."""
        response = await self.request(method, url, **kwargs)
        if not response.content:
            return None
        return response.json()

    async def get(self, url: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> httpx.Response:
        return await self.request("GET", url, params=params, **kwargs)

    async def post(self, url: str, json: Any = None, **kwargs) -> httpx.Response:
        return await self.request("POST", url, json=json, **kwargs)

    async def put(self, url: str, json: Any = None, **kwargs) -> httpx.Response:
        return await self.request("PUT", url, json=json, **kwargs)

    async def patch(self, url: str, json: Any = None, **kwargs) -> httpx.Response:
        return await self.request("PATCH", url, json=json, **kwargs)

    async def delete(self, url: str, **kwargs) -> httpx.Response:
        return await self.request("DELETE", url, **kwargs)

    def _should_intercept(self, request: httpx.Request) -> bool:
        if request.extensions.get(RETRIED_EXTENSION):
            return False
        return self._context.has_auth_state

    async def _refresh_and_retry(
        self,
        request: httpx.Request,
        response: httpx.Response,
    ) -> httpx.Response:
        request.extensions[RETRIED_EXTENSION] = True
        original_error = ApiError.from_response(response)

        auth_state = self._context.auth_state()
        refresh_token = auth_state.refresh_token if auth_state else None
        if not refresh_token:
            logger.info("Unauthorized with no refresh token, ending session")
            self._end_session()
            raise original_error

        try:
            tokens = await self._refresh(refresh_token)
        except REFRESH_ERRORS as e:
            raise original_error from e

        self._context.auth_state().set_tokens(tokens.access_token, tokens.refresh_token)
        logger.info("Access token refreshed, retrying request")

        self.decorate(request)
        retried = await self._client.send(request)
        return self._check(retried)

    async def _refresh(self, refresh_token: str) -> AuthTokens:
        if not self._coalesce_refresh:
            return await self._refresh_or_end_session(refresh_token)

        if self._refresh_task is None or self._refresh_task.done():
            self._refresh_task = asyncio.ensure_future(self._refresh_or_end_session(refresh_token))
            self._refresh_task.add_done_callback(_consume_result)
        return await asyncio.shield(self._refresh_task)

    async def _refresh_or_end_session(self, refresh_token: str) -> AuthTokens:
        """
        Exchange the refresh token, ending the session if that fails.

        Runs once per exchange, so a shared refresh logs out once however
        many requests are waiting on it.
        """
        try:
            return await self._exchange_refresh_token(refresh_token)
        except REFRESH_ERRORS as e:
            logger.warning(f"Token refresh failed, ending session: {e}")
            self._end_session()
            raise

    async def _exchange_refresh_token(self, refresh_token: str) -> AuthTokens:
        """
        POST /auth/refresh on the non-intercepted client.

        Raises:
            ApiError: Refresh token rejected
            httpx.TransportError: Network failure
            ValueError, KeyError, TypeError: Malformed response body
        """
        response = await self._refresh_client.post(REFRESH_PATH, json={"refreshToken": refresh_token})
        if not response.is_success:
            raise ApiError.from_response(response)

        payload = response.json()
        return AuthTokens.from_dict(payload["data"])

    def _end_session(self):
        auth_state = self._context.auth_state()
        if auth_state is not None:
            auth_state.logout()
        self._context.reset_navigation()

    @staticmethod
    def _check(response: httpx.Response) -> httpx.Response:
        if not response.is_success:
            raise ApiError.from_response(response)
        return response

    async def aclose(self):
        await self._client.aclose()
        await self._refresh_client.aclose()

    async def __aenter__(self) -> "GatewayClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()


def _consume_result(task: asyncio.Future):
    # Every waiter may have been cancelled
    if not task.cancelled():
        task.exception()
