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

"""Client for the Mastodon API."""

from __future__ import annotations

from typing import Any

from ..client import Client
from ..paging import LinkPageExtractor, PageExtractor
from .requests import AccountRequests, AppRequests, BookmarkRequests, EmailRequests, OAuthRequests


class MastodonClient(Client):
    """Client used to interact with the Mastodon API.

    Args:
        base_url: The instance to interact with, e.g. ``"mastodon.social"``.
        token: The authorization token for a user or app. Without one only public
            requests are available.
        **kwargs: Passed to ``Client`` (``codec``, ``transport``, ``timeout``,
            ``headers``).

    Example:
        ```python
        async with MastodonClient("mastodon.social", token) as client:
            match await client.accounts.verify_credentials():
                case Success(data=me):
                    print(me.acct)
                case Error(error=err):
                    print(err.error if err else "unknown error")
        ```
    """

    def __init__(self, base_url: str, token: str | None = None, **kwargs: Any):
        super().__init__(base_url, token, **kwargs)
        self._page_extractor = LinkPageExtractor()

        self.accounts = AccountRequests(self)
        """Methods concerning accounts and profiles."""
        self.bookmarks = BookmarkRequests(self)
        """View your bookmarks."""
        self.apps = AppRequests(self)
        """Register client applications that can be used to obtain OAuth tokens."""
        self.emails = EmailRequests(self)
        """Request a new confirmation email."""
        self.oauth = OAuthRequests(self)
        """Generate and manage OAuth tokens."""

    @property
    def page_extractor(self) -> PageExtractor:
        return self._page_extractor
