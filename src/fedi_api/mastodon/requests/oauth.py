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

from __future__ import annotations

from ...request import RequestBuilder
from ...types import HttpMethod
from ..enums import GrantType
from ..models import Token
from ..routes import Routes
from ..scopes import Scope
from ._base import EmptyResult, MastodonResult, RequestGroup


class OAuthRequests(RequestGroup):
    """Generate and manage OAuth tokens."""

    async def get_token(
        self,
        grant_type: GrantType,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        code: str | None = None,
        scopes: list[str] | None = None,
    ) -> MastodonResult[Token]:
        """Obtain an access token.

        ``GrantType.CODE`` requires the ``code`` returned by the authorization
        endpoint; when it is missing the call resolves to a ``Failure`` carrying a
        ``ValueError`` and no request is sent.
        """
        scope = " ".join(scopes or [Scope.READ])

        def request(r: RequestBuilder) -> None:
            form = r.form()
            form.append("grant_type", grant_type)
            if grant_type is GrantType.CODE:
                if code is None:
                    raise ValueError("code must be provided when using GrantType.CODE")
                form.append("code", code)
            form.append("client_id", client_id)
            form.append("client_secret", client_secret)
            form.append("redirect_uri", redirect_uri)
            form.append("scope", scope)

        return await self._call(HttpMethod.POST, Routes.OAuth.TOKEN, Token, request)

    async def revoke_token(self, client_id: str, client_secret: str, token: str) -> EmptyResult:
        """Revoke an access token to make it no longer valid for use."""

        def request(r: RequestBuilder) -> None:
            form = r.form()
            form.append("client_id", client_id)
            form.append("client_secret", client_secret)
            form.append("token", token)

        return await self._call(HttpMethod.POST, Routes.OAuth.REVOKE, str, request)
