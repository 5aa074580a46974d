"""HTTP existence lookups usable as validator predicates.

The endpoint is queried with ``GET <url>?<param>=<value>`` and answers a
JSON object whose ``field`` member says whether the value already exists,
e.g. ``{"result": true}`` for an e-mail address that is already taken.
Wrap a lookup with ``negate=True`` to validate availability.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


def _raise_for_error(response: httpx.Response) -> None:
    """Raise RuntimeError with the server's message on non-2xx responses."""
    if response.is_success:
        return
    try:
        error = response.json().get("error", "Request failed")
    except Exception:
        error = f"HTTP {response.status_code}"
    raise RuntimeError(error)


def _extract(payload: Any, field: str) -> bool:
    if not isinstance(payload, dict) or field not in payload:
        raise RuntimeError(f"Lookup response has no {field!r} field")
    return bool(payload[field])


class HttpLookup:
    """Sync existence lookup backed by httpx.Client."""

    def __init__(
        self,
        url: str,
        *,
        param: str = "email",
        field: str = "result",
        client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        import httpx

        self._url = url
        self._param = param
        self._field = field
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def __call__(self, value: str) -> bool:
        """Return whether value already exists."""
        response = self._client.get(self._url, params={self._param: value})
        _raise_for_error(response)
        return _extract(response.json(), self._field)

    def close(self) -> None:
        """Close the HTTP client if this lookup created it."""
        if self._owns_client:
            self._client.close()


class AsyncHttpLookup:
    """Async existence lookup backed by httpx.AsyncClient."""

    def __init__(
        self,
        url: str,
        *,
        param: str = "email",
        field: str = "result",
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        import httpx

        self._url = url
        self._param = param
        self._field = field
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def __call__(self, value: str) -> bool:
        """Return whether value already exists."""
        response = await self._client.get(self._url, params={self._param: value})
        _raise_for_error(response)
        return _extract(response.json(), self._field)

    async def aclose(self) -> None:
        """Close the HTTP client if this lookup created it."""
        if self._owns_client:
            await self._client.aclose()
