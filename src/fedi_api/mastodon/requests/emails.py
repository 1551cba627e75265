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
from ..routes import Routes
from ._base import EmptyResult, RequestGroup


class EmailRequests(RequestGroup):
    """Request a new confirmation email, potentially to a new email address."""

    async def resend_confirmation(self, email: str | None = None) -> EmptyResult:
        """Resend the confirmation email for an unconfirmed account.

        Args:
            email: If provided, updates the unconfirmed user's email before resending.
        """

        def request(r: RequestBuilder) -> None:
            if email is not None:
                r.set_form_field("email", email)

        return await self._call(HttpMethod.POST, Routes.V1.EMAIL_CONFIRMATIONS, str, request)
