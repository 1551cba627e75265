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

"""Mastodon API routes, relative to the instance base URL."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote


@dataclass(frozen=True)
class AccountRoutes:
    """Routes scoped to a single account."""

    account_id: str

    def __str__(self) -> str:
        return f"{Routes.V1.ACCOUNTS}/{quote(str(self.account_id), safe='')}"

    def _sub(self, name: str) -> str:
        return f"{self}/{name}"

    @property
    def statuses(self) -> str:
        return self._sub("statuses")

    @property
    def followers(self) -> str:
        return self._sub("followers")

    @property
    def following(self) -> str:
        return self._sub("following")

    @property
    def featured_tags(self) -> str:
        return self._sub("featured_tags")

    @property
    def lists(self) -> str:
        return self._sub("lists")

    @property
    def follow(self) -> str:
        return self._sub("follow")

    @property
    def unfollow(self) -> str:
        return self._sub("unfollow")

    @property
    def remove_from_followers(self) -> str:
        return self._sub("remove_from_followers")

    @property
    def block(self) -> str:
        return self._sub("block")

    @property
    def unblock(self) -> str:
        return self._sub("unblock")

    @property
    def mute(self) -> str:
        return self._sub("mute")

    @property
    def unmute(self) -> str:
        return self._sub("unmute")

    @property
    def pin(self) -> str:
        return self._sub("pin")

    @property
    def unpin(self) -> str:
        return self._sub("unpin")

    @property
    def note(self) -> str:
        return self._sub("note")


class Routes:
    class OAuth:
        AUTHORIZE = "/oauth/authorize"
        TOKEN = "/oauth/token"
        REVOKE = "/oauth/revoke"

    class V1:
        ACCOUNTS = "/api/v1/accounts"
        VERIFY_CREDENTIALS = f"{ACCOUNTS}/verify_credentials"
        UPDATE_CREDENTIALS = f"{ACCOUNTS}/update_credentials"
        RELATIONSHIPS = f"{ACCOUNTS}/relationships"
        FAMILIAR_FOLLOWERS = f"{ACCOUNTS}/familiar_followers"
        SEARCH = f"{ACCOUNTS}/search"
        LOOKUP = f"{ACCOUNTS}/lookup"

        APPS = "/api/v1/apps"
        APPS_VERIFY_CREDENTIALS = f"{APPS}/verify_credentials"

        BOOKMARKS = "/api/v1/bookmarks"

        EMAILS = "/api/v1/emails"
        EMAIL_CONFIRMATIONS = f"{EMAILS}/confirmations"

        @staticmethod
        def account(account_id: str) -> AccountRoutes:
            return AccountRoutes(account_id)
