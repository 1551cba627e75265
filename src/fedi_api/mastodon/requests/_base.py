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

"""Shared plumbing for Mastodon request groups."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias, TypeVar

from ...dispatch import RequestConfig
from ...results import PagedResult, Result
from ...types import HttpMethod
from ..models import Error

if TYPE_CHECKING:
    from ..client import MastodonClient

T = TypeVar("T")

# Results carrying Mastodon's standard error model
MastodonResult: TypeAlias = Result[T, Error]
PagedMastodonResult: TypeAlias = PagedResult[T, Error]
# Endpoints that answer with a literal "{}" body
EmptyResult: TypeAlias = Result[str, Error]


class RequestGroup:
    """A set of related endpoints bound to a client."""

    def __init__(self, client: MastodonClient):
        self._client = client

    async def _call(
        self,
        method: HttpMethod,
        route: Any,
        response_type: Any,
        request: RequestConfig | None = None,
    ) -> MastodonResult[Any]:
        return await self._client.route(
            route, method, request, response_type=response_type, error_type=Error
        )

    async def _paged(
        self,
        route: Any,
        item_type: Any,
        request: RequestConfig | None = None,
    ) -> PagedMastodonResult[Any]:
        return await self._client.paged(route, request=request, item_type=item_type, error_type=Error)
