# Copyright 2025 DataStax Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.

"""HTTP transport used by the dispatcher."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import httpx


@runtime_checkable
class Transport(Protocol):
    """Sends a fully built request and returns the buffered response."""

    async def send(self, request: httpx.Request) -> httpx.Response: ...

    async def aclose(self) -> None: ...


class HttpxTransport:
    """Transport backed by a lazily created ``httpx.AsyncClient``.

    Args:
        timeout: Request timeout in seconds, or an ``httpx.Timeout``.
        headers: Default headers sent with every request.
        client: An existing ``httpx.AsyncClient`` to use instead of creating one.
            A supplied client is not closed by ``aclose()``.
        **client_kwargs: Extra keyword arguments for ``httpx.AsyncClient``
            (``verify``, ``limits``, ``transport``, ...).
    """

    def __init__(
        self,
        *,
        timeout: float | httpx.Timeout = 30.0,
        headers: dict[str, str] | None = None,
        client: httpx.AsyncClient | None = None,
        **client_kwargs: Any,
    ):
        self.timeout = timeout if isinstance(timeout, httpx.Timeout) else httpx.Timeout(timeout)
        self.headers = headers or {}
        self.client_kwargs = client_kwargs
        self._async_client = client
        self._owns_client = client is None

    def get_async_httpx_client(self) -> httpx.AsyncClient:
        """Get asynchronous httpx client."""
        if self._async_client is None:
            self._async_client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=self.headers,
                **self.client_kwargs,
            )
        return self._async_client

    async def send(self, request: httpx.Request) -> httpx.Response:
        for name, value in self.headers.items():
            request.headers.setdefault(name, value)
        # Non-streaming send reads the full body before returning
        return await self.get_async_httpx_client().send(request)

    async def aclose(self) -> None:
        """Close async client."""
        if self._async_client is not None and self._owns_client:
            await self._async_client.aclose()
            self._async_client = None
