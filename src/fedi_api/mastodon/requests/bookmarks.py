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

from ...paging import PageCursor
from ...request import RequestBuilder
from ..models import Status
from ..routes import Routes
from ._base import PagedMastodonResult, RequestGroup


class BookmarkRequests(RequestGroup):
    """View your bookmarks."""

    async def get_bookmarks(
        self,
        page: PageCursor | None = None,
        limit: int = 20,
    ) -> PagedMastodonResult[Status]:
        """Statuses the user has bookmarked.

        Required scope: ``read:bookmarks``. Authorization: user.
        """

        def request(r: RequestBuilder) -> None:
            r.add_page_params(page)
            r.parameter("limit", limit)

        return await self._paged(Routes.V1.BOOKMARKS, Status, request)
