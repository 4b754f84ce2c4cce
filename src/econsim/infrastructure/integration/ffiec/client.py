"""HTTP client for the FFIEC UBPR protocol bridge.

The bridge fronts the FFIEC SOAP web service and exposes it as JSON-RPC 2.0
resources: ``resources/list`` enumerates reporting periods and
``resources/read`` returns the document behind an ``ffiec://`` URI.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class FFIECBridgeError(Exception):
    """Raised when the bridge cannot be reached or answers with an error."""


class FFIECBridgeClient:
    """HTTP client wrapper for the bridge's JSON-RPC endpoint."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        enabled: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._enabled = enabled
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._request_ids = itertools.count(1)

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={"Content-Type": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def call(self, method: str, params: dict[str, Any]) -> dict[str, Any]:
        """Invoke a JSON-RPC method and return its ``result`` object."""
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._request_ids),
            "method": method,
            "params": params,
        }
        try:
            client = await self._get_client()
            response = await client.post("", json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.ConnectError as e:
            logger.warning("FFIEC bridge connection failed: %s", e)
            msg = "FFIEC bridge is unreachable"
            raise FFIECBridgeError(msg) from e
        except httpx.TimeoutException as e:
            logger.warning("FFIEC bridge timeout on %s: %s", method, e)
            msg = "FFIEC bridge timed out"
            raise FFIECBridgeError(msg) from e
        except httpx.HTTPStatusError as e:
            logger.warning(
                "FFIEC bridge returned error %d: %s",
                e.response.status_code,
                e.response.text[:200] if e.response.text else "no body",
            )
            msg = f"FFIEC bridge returned HTTP {e.response.status_code}"
            raise FFIECBridgeError(msg) from e
        except ValueError as e:
            logger.warning("FFIEC bridge sent invalid JSON for %s: %s", method, e)
            msg = "FFIEC bridge sent an invalid response"
            raise FFIECBridgeError(msg) from e

        if not isinstance(body, dict):
            msg = "FFIEC bridge sent an invalid response"
            raise FFIECBridgeError(msg)

        error = body.get("error")
        if error:
            message = error.get("message") if isinstance(error, dict) else str(error)
            logger.warning("FFIEC bridge rejected %s: %s", method, message)
            raise FFIECBridgeError(message or "FFIEC bridge request failed")

        result = body.get("result")
        return result if isinstance(result, dict) else {}

    async def list_resources(
        self,
        reporting_period: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        params = {"reportingPeriod": reporting_period} if reporting_period else {}
        result = await self.call("resources/list", params)
        return list(result.get("resources") or [])

    async def read_resource(self, uri: str) -> list[dict[str, Any]]:
        result = await self.call("resources/read", {"uri": uri})
        return list(result.get("contents") or [])
