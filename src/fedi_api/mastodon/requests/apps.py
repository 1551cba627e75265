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
from ..models import Application
from ..routes import Routes
from ..scopes import Scope
from ._base import MastodonResult, RequestGroup


class AppRequests(RequestGroup):
    """Register client applications that can be used to obtain OAuth tokens."""

    async def create_application(
        self,
        client_name: str,
        redirect_uris: str,
        scopes: list[str] | None = None,
        website: str | None = None,
    ) -> MastodonResult[Application]:
        """Create a new application to obtain OAuth2 credentials.

        Args:
            client_name: A name for your application.
            redirect_uris: Where the user should be redirected after authorization.
                Use ``urn:ietf:wg:oauth:2.0:oob`` to display the code instead.
            scopes: Scopes to request, defaults to ``read``.
            website: A URL to the homepage of your app.

        Returns:
            The ``Application`` including ``client_id`` and ``client_secret``.
        """
        scope = " ".join(scopes or [Scope.READ])

        def request(r: RequestBuilder) -> None:
            form = r.form()
            form.append("client_name", client_name)
            form.append("redirect_uris", redirect_uris)
            form.append("scopes", scope)
            form.append("website", website)

        return await self._call(HttpMethod.POST, Routes.V1.APPS, Application, request)

    async def verify_credentials(self) -> MastodonResult[Application]:
        """Confirm that the app's OAuth2 credentials work."""
        return await self._call(HttpMethod.GET, Routes.V1.APPS_VERIFY_CREDENTIALS, Application)
