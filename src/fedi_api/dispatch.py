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

"""Dispatch of API calls and classification of their outcome.

The dispatcher never raises across its boundary. Every outcome is reported as one
of the result variants:

=========================================  =============================
Outcome                                    Result
=========================================  =============================
transport exception                        ``Failure(cause, None)``
2xx, status 204                            ``Empty()``
2xx, ``response_type is str``              ``Success(raw body)``
2xx, body decodes                          ``Success(data)``
2xx, body does not decode                  ``Failure(cause, raw body)``
status 410                                 ``Empty()``
non-2xx, ``error_type is str``             ``Error(raw body)``
non-2xx, error body decodes                ``Error(payload)``
non-2xx, error body does not decode        ``Error(None)``
=========================================  =============================

Cancellation (``asyncio.CancelledError``) is not an ``Exception`` and propagates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

import httpx

from .request import RequestBuilder
from .results import Empty, Error, Failure, PagedResult, PagedSuccess, Result, Success
from .types import HttpMethod

if TYPE_CHECKING:
    from .client import Client

logger = logging.getLogger(__name__)

RequestConfig = Callable[[RequestBuilder], Any]


class Dispatcher:
    """Executes requests on behalf of a ``Client``.

    The client's base URL, token, transport, codec and page extractor are read
    when each request is built, so changes made through the client's setters apply
    to subsequent calls. All other state is local to a single call.
    """

    def __init__(self, client: Client):
        self._client = client

    def build_request(
        self,
        route: Any,
        method: HttpMethod | str,
        request: RequestConfig | None,
    ) -> httpx.Request:
        client = self._client
        builder = RequestBuilder(method, f"{client.base_url}{route}")
        if client.token is not None:
            builder.header("Authorization", client.token)
        if request is not None:
            request(builder)
        return builder.build(client.codec)

    async def _exchange(
        self,
        route: Any,
        method: HttpMethod | str,
        request: RequestConfig | None,
    ) -> tuple[httpx.Response, str]:
        http_request = self.build_request(route, method, request)
        logger.debug("%s %s", http_request.method, http_request.url)
        response = await self._client.transport.send(http_request)
        body = response.text
        logger.debug(
            "%s %s -> %d (%d bytes)",
            http_request.method,
            http_request.url,
            response.status_code,
            len(body),
        )
        return response, body

    def _error_result(self, response: httpx.Response, body: str, error_type: Any) -> Error | Empty:
        if response.status_code == HTTPStatus.GONE:
            return Empty()
        if error_type is str:
            return Error(body, status_code=response.status_code)
        try:
            payload = self._client.codec.decode(body, error_type)
        except Exception as e:
            logger.debug("Could not decode error body for status %d: %s", response.status_code, e)
            return Error(None, status_code=response.status_code)
        return Error(payload, status_code=response.status_code)

    async def execute(
        self,
        route: Any,
        method: HttpMethod | str = HttpMethod.GET,
        request: RequestConfig | None = None,
        *,
        response_type: Any = str,
        error_type: Any = str,
    ) -> Result[Any, Any]:
        """Execute a request and decode a single object.

        Args:
            route: Path appended to the client's base URL; converted with ``str()``.
            method: HTTP method, defaults to GET.
            request: Callable that customises the ``RequestBuilder`` (params, body).
            response_type: Type to decode a 2xx body into. ``str`` returns the body
                verbatim without JSON decoding.
            error_type: Type to decode a non-2xx body into. ``str`` returns the body
                verbatim.
        """
        try:
            response, body = await self._exchange(route, method, request)
        except Exception as e:
            logger.debug("Request to %s failed: %r", route, e)
            return Failure(e, None)

        if not response.is_success:
            return self._error_result(response, body, error_type)

        if response.status_code == HTTPStatus.NO_CONTENT:
            return Empty()
        if response_type is str:
            return Success(body)
        try:
            data = self._client.codec.decode(body, response_type)
        except Exception as e:
            logger.debug("Could not decode response body from %s: %s", route, e)
            return Failure(e, body)
        return Success(data)

    async def execute_paged(
        self,
        route: Any,
        method: HttpMethod | str = HttpMethod.GET,
        request: RequestConfig | None = None,
        *,
        item_type: Any,
        error_type: Any = str,
    ) -> PagedResult[Any, Any]:
        """Execute a request that returns a list, extracting page cursors.

        The 2xx body is decoded into ``list[item_type]`` and the client's page
        extractor is run on the raw response to fill ``next_page`` and
        ``previous_page``. Other outcomes are classified as in ``execute``.
        """
        try:
            response, body = await self._exchange(route, method, request)
        except Exception as e:
            logger.debug("Request to %s failed: %r", route, e)
            return Failure(e, None)

        if not response.is_success:
            return self._error_result(response, body, error_type)

        if response.status_code == HTTPStatus.NO_CONTENT:
            return Empty()
        try:
            items = self._client.codec.decode(body, list[item_type])
            next_page, previous_page = self._client.page_extractor.get_page_info(response)
        except Exception as e:
            logger.debug("Could not decode page from %s: %s", route, e)
            return Failure(e, body)
        return PagedSuccess(items, next_page, previous_page)
