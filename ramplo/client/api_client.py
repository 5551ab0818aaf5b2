from typing import Any, Optional

import httpx

from ramplo.config import API_BASE_URL, AUTH_EMAIL_HEADER


class ApiError(Exception):
    """Non-2xx response, undecodable body or transport failure.

    ``status_code`` is None when no response was received.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def retryable(self) -> bool:
        return self.status_code is None or self.status_code >= 500


class ApiClient:
    def __init__(
        self,
        base_url: str = API_BASE_URL,
        email: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        headers = {AUTH_EMAIL_HEADER: email} if email else {}
        self._client = httpx.AsyncClient(
            base_url=base_url, headers=headers, transport=transport, timeout=timeout
        )

    async def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: Optional[dict] = None,
        decode: bool = True,
    ) -> Any:
        """Send a request; with ``decode=False`` a 2xx body is ignored and None returned."""
        try:
            response = await self._client.request(method, path, json=json, params=params)
        except httpx.HTTPError as e:
            raise ApiError(str(e)) from e

        if response.is_error:
            raise ApiError(
                f"{response.status_code}: {self._error_message(response)}",
                response.status_code,
            )
        if not decode or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(
                f"{response.status_code}: response body is not JSON",
                response.status_code,
            ) from e

    async def get(self, path: str, params: Optional[dict] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def patch(self, path: str, json: Any = None, decode: bool = True) -> Any:
        return await self.request("PATCH", path, json=json, decode=decode)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(body, dict):
            return str(body.get("detail") or body.get("message") or body)
        return str(body)

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()
