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

"""Base client for fediverse platform APIs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Self

from .codec import DEFAULT_CODEC, JsonCodec
from .dispatch import Dispatcher, RequestConfig
from .paging import PageExtractor
from .results import PagedResult, Result
from .transport import HttpxTransport, Transport
from .types import HttpMethod

if TYPE_CHECKING:
    from .config import ClientConfig

BEARER_PREFIX = "Bearer "


def normalize_base_url(url: str) -> str:
    """Strip a trailing slash and default to ``https://`` when no scheme is given."""
    url = url.rstrip("/")
    return url if url.startswith(("http://", "https://")) else f"https://{url}"


def format_token(token: str | None) -> str | None:
    """Format a token for the ``Authorization`` header."""
    if token is None:
        return None
    return token if token.startswith(BEARER_PREFIX) else f"{BEARER_PREFIX}{token}"


class Client(ABC):
    """Base class for a client that talks to a fediverse platform's API.

    Subclasses provide the ``page_extractor`` that understands the platform's
    pagination scheme and expose request groups built on ``route``/``paged``.

    Args:
        base_url: Instance URL, e.g. ``"mastodon.social"`` or
            ``"https://mastodon.social"``. ``https://`` is assumed without a scheme.
        token: Access token; sent as ``Authorization: Bearer <token>`` when set.
        codec: JSON codec used for request and response bodies.
        transport: Transport used to send requests. Defaults to an
            ``HttpxTransport`` configured with ``timeout`` and ``headers``.
        timeout: Request timeout in seconds for the default transport.
        headers: Default headers for the default transport.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        *,
        codec: JsonCodec | None = None,
        transport: Transport | None = None,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
    ):
        self._base_url = normalize_base_url(base_url)
        self._token = format_token(token)
        self._codec = codec or DEFAULT_CODEC
        self._transport = transport or HttpxTransport(timeout=timeout, headers=headers)
        self._dispatcher = Dispatcher(self)

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> Self:
        """Create a client from a ``ClientConfig``."""
        return cls(
            config.base_url,
            config.token,
            timeout=config.timeout,
            headers=config.default_headers(),
            **kwargs,
        )

    @classmethod
    def from_env(cls, prefix: str = "FEDI_API_", **kwargs: Any) -> Self:
        """Create a client from ``<prefix>BASE_URL``, ``<prefix>TOKEN``, ... variables."""
        from .config import ClientConfig

        return cls.from_config(ClientConfig.from_env(prefix), **kwargs)

    @property
    @abstractmethod
    def page_extractor(self) -> PageExtractor:
        """Extracts the information needed for paging from list responses."""

    @property
    def base_url(self) -> str:
        """The base URL requests are made against."""
        return self._base_url

    @base_url.setter
    def base_url(self, url: str) -> None:
        self._base_url = normalize_base_url(url)

    @property
    def token(self) -> str | None:
        """The ``Authorization`` header value, ``None`` for public requests only."""
        return self._token

    @token.setter
    def token(self, token: str | None) -> None:
        self._token = format_token(token)

    @property
    def codec(self) -> JsonCodec:
        return self._codec

    @property
    def transport(self) -> Transport:
        return self._transport

    @transport.setter
    def transport(self, transport: Transport) -> None:
        self._transport = transport

    def configure_transport(self, **kwargs: Any) -> HttpxTransport:
        """Replace the transport with a new ``HttpxTransport`` built from ``kwargs``.

        The previous transport is not closed; call ``aclose()`` on it if needed.
        """
        transport = HttpxTransport(**kwargs)
        self._transport = transport
        return transport

    async def aclose(self) -> None:
        """Close the transport and release resources."""
        await self._transport.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    # =========================================================================
    # Dispatch
    # =========================================================================

    async def route(
        self,
        route: Any,
        method: HttpMethod | str = HttpMethod.GET,
        request: RequestConfig | None = None,
        *,
        response_type: Any = str,
        error_type: Any = str,
    ) -> Result[Any, Any]:
        """Execute a request for ``route`` and decode a single object.

        See ``Dispatcher.execute`` for how responses are classified.
        """
        return await self._dispatcher.execute(
            route, method, request, response_type=response_type, error_type=error_type
        )

    async def paged(
        self,
        route: Any,
        method: HttpMethod | str = HttpMethod.GET,
        request: RequestConfig | None = None,
        *,
        item_type: Any,
        error_type: Any = str,
    ) -> PagedResult[Any, Any]:
        """Request a list of items that can be paged through."""
        return await self._dispatcher.execute_paged(
            route, method, request, item_type=item_type, error_type=error_type
        )

    async def get(self, route: Any, request: RequestConfig | None = None, **types: Any) -> Result[Any, Any]:
        return await self.route(route, HttpMethod.GET, request, **types)

    async def post(self, route: Any, request: RequestConfig | None = None, **types: Any) -> Result[Any, Any]:
        return await self.route(route, HttpMethod.POST, request, **types)

    async def patch(self, route: Any, request: RequestConfig | None = None, **types: Any) -> Result[Any, Any]:
        return await self.route(route, HttpMethod.PATCH, request, **types)

    async def put(self, route: Any, request: RequestConfig | None = None, **types: Any) -> Result[Any, Any]:
        return await self.route(route, HttpMethod.PUT, request, **types)

    async def delete(self, route: Any, request: RequestConfig | None = None, **types: Any) -> Result[Any, Any]:
        return await self.route(route, HttpMethod.DELETE, request, **types)
