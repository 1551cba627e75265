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

"""Methods concerning accounts and profiles."""

from __future__ import annotations

from collections.abc import Mapping

from ...paging import PageCursor
from ...request import RequestBuilder
from ...types import HttpMethod
from ..enums import Privacy
from ..models import (
    Account,
    CredentialAccount,
    FamiliarFollowers,
    FeaturedTag,
    Relationship,
    Status,
    Token,
    UserList,
)
from ..routes import Routes
from ._base import MastodonResult, PagedMastodonResult, RequestGroup


class AccountRequests(RequestGroup):
    """Methods concerning accounts and profiles."""

    async def register_account(
        self,
        username: str,
        email: str,
        password: str,
        agreement: bool,
        locale: str = "en-US",
        reason: str | None = None,
    ) -> MastodonResult[Token]:
        """Create a user and account records.

        Required scope: ``write:accounts``. Authorization: app.

        Args:
            username: The desired username for the account.
            email: The email address to be used for login.
            password: The password to be used for login.
            agreement: Whether the user agrees to the local rules, terms, and policies.
            locale: The language of the confirmation email that will be sent.
            reason: Text reviewed by moderators if registrations require approval.

        Returns:
            An access token for the app that initiated the request. It won't work
            until the user confirms their email.
        """

        def request(r: RequestBuilder) -> None:
            form = r.form()
            form.append("username", username)
            form.append("email", email)
            form.append("password", password)
            form.append("agreement", agreement)
            form.append("locale", locale)
            form.append("reason", reason)

        return await self._call(HttpMethod.POST, Routes.V1.ACCOUNTS, Token, request)

    async def verify_credentials(self) -> MastodonResult[CredentialAccount]:
        """Test to make sure that the user token works."""
        return await self._call(HttpMethod.GET, Routes.V1.VERIFY_CREDENTIALS, CredentialAccount)

    async def update_credentials(
        self,
        display_name: str | None = None,
        note: str | None = None,
        avatar: bytes | None = None,
        header: bytes | None = None,
        locked: bool | None = None,
        bot: bool | None = None,
        discoverable: bool | None = None,
        hide_collections: bool | None = None,
        indexable: bool | None = None,
        fields: Mapping[str, str] | None = None,
        status_privacy: Privacy | None = None,
        status_sensitive: bool | None = None,
        status_language: str | None = None,
    ) -> MastodonResult[CredentialAccount]:
        """Update the user's display and preferences.

        Only the arguments that are not ``None`` are sent. ``avatar`` and ``header``
        are raw image bytes. Pass an empty mapping as ``fields`` to clear all
        profile fields.
        """

        def request(r: RequestBuilder) -> None:
            form = r.form()
            form.append("display_name", display_name)
            form.append("note", note)
            if avatar is not None:
                form.append_file("avatar", avatar)
            if header is not None:
                form.append_file("header", header)
            form.append("locked", locked)
            form.append("bot", bot)
            form.append("discoverable", discoverable)
            form.append("hide_collections", hide_collections)
            form.append("indexable", indexable)
            if fields is not None:
                form.append_fields_hash(fields)
            form.append("source[privacy]", status_privacy)
            form.append("source[sensitive]", status_sensitive)
            form.append("source[language]", status_language)

        return await self._call(
            HttpMethod.PATCH, Routes.V1.UPDATE_CREDENTIALS, CredentialAccount, request
        )

    async def get_account(self, account_id: str) -> MastodonResult[Account]:
        """View information about a profile."""
        return await self._call(HttpMethod.GET, Routes.V1.account(account_id), Account)

    async def get_statuses(
        self,
        account_id: str,
        page: PageCursor | None = None,
        limit: int | None = 20,
        only_media: bool | None = None,
        exclude_replies: bool | None = None,
        exclude_reblogs: bool | None = None,
        pinned: bool | None = False,
        tagged: str | None = None,
    ) -> PagedMastodonResult[Status]:
        """Statuses posted to the given account."""

        def request(r: RequestBuilder) -> None:
            r.add_page_params(page)
            r.parameter("limit", limit)
            r.parameter("only_media", only_media)
            r.parameter("exclude_replies", exclude_replies)
            r.parameter("exclude_reblogs", exclude_reblogs)
            r.parameter("pinned", pinned)
            r.parameter("tagged", tagged)

        return await self._paged(Routes.V1.account(account_id).statuses, Status, request)

    async def get_followers(
        self,
        account_id: str,
        page: PageCursor | None = None,
        limit: int | None = 40,
    ) -> PagedMastodonResult[Account]:
        """Accounts which follow the given account, if network is not hidden."""

        def request(r: RequestBuilder) -> None:
            r.add_page_params(page)
            r.parameter("limit", limit)

        return await self._paged(Routes.V1.account(account_id).followers, Account, request)

    async def get_following(
        self,
        account_id: str,
        page: PageCursor | None = None,
        limit: int | None = 40,
    ) -> PagedMastodonResult[Account]:
        """Accounts which the given account is following, if network is not hidden."""

        def request(r: RequestBuilder) -> None:
            r.add_page_params(page)
            r.parameter("limit", limit)

        return await self._paged(Routes.V1.account(account_id).following, Account, request)

    async def get_featured_tags(self, account_id: str) -> MastodonResult[list[FeaturedTag]]:
        """Tags featured by this account."""
        return await self._call(
            HttpMethod.GET, Routes.V1.account(account_id).featured_tags, list[FeaturedTag]
        )

    async def get_lists(self, account_id: str) -> MastodonResult[list[UserList]]:
        """User lists that you have added this account to."""
        return await self._call(HttpMethod.GET, Routes.V1.account(account_id).lists, list[UserList])

    async def follow(
        self,
        account_id: str,
        reblogs: bool = True,
        notify: bool = False,
        languages: list[str] | None = None,
    ) -> MastodonResult[Relationship]:
        """Follow the given account. Can also be used to update follow options."""

        def request(r: RequestBuilder) -> None:
            form = r.form()
            form.append("reblogs", reblogs)
            form.append("notify", notify)
            form.append("languages[]", languages)

        return await self._call(
            HttpMethod.POST, Routes.V1.account(account_id).follow, Relationship, request
        )

    async def unfollow(self, account_id: str) -> MastodonResult[Relationship]:
        return await self._call(HttpMethod.POST, Routes.V1.account(account_id).unfollow, Relationship)

    async def remove_from_followers(self, account_id: str) -> MastodonResult[Relationship]:
        return await self._call(
            HttpMethod.POST, Routes.V1.account(account_id).remove_from_followers, Relationship
        )

    async def block(self, account_id: str) -> MastodonResult[Relationship]:
        return await self._call(HttpMethod.POST, Routes.V1.account(account_id).block, Relationship)

    async def unblock(self, account_id: str) -> MastodonResult[Relationship]:
        return await self._call(HttpMethod.POST, Routes.V1.account(account_id).unblock, Relationship)

    async def mute(
        self,
        account_id: str,
        notifications: bool = True,
        duration: int = 0,
    ) -> MastodonResult[Relationship]:
        """Mute the given account.

        Args:
            notifications: Also mute notifications from this account.
            duration: Seconds until the mute expires; 0 mutes indefinitely.
        """

        def request(r: RequestBuilder) -> None:
            form = r.form()
            form.append("notifications", notifications)
            form.append("duration", duration)

        return await self._call(HttpMethod.POST, Routes.V1.account(account_id).mute, Relationship, request)

    async def unmute(self, account_id: str) -> MastodonResult[Relationship]:
        return await self._call(HttpMethod.POST, Routes.V1.account(account_id).unmute, Relationship)

    async def pin(self, account_id: str) -> MastodonResult[Relationship]:
        """Feature the given account on your profile."""
        return await self._call(HttpMethod.POST, Routes.V1.account(account_id).pin, Relationship)

    async def unpin(self, account_id: str) -> MastodonResult[Relationship]:
        return await self._call(HttpMethod.POST, Routes.V1.account(account_id).unpin, Relationship)

    async def set_note(self, account_id: str, note: str | None) -> MastodonResult[Relationship]:
        """Set a private note on the given account; ``None`` clears it."""

        def request(r: RequestBuilder) -> None:
            if note is not None:
                r.set_form_field("comment", note)

        return await self._call(HttpMethod.POST, Routes.V1.account(account_id).note, Relationship, request)

    async def get_relationships(
        self,
        account_ids: list[str],
        with_suspended: bool = False,
    ) -> MastodonResult[list[Relationship]]:
        """Relationships of the current user to the given accounts."""

        def request(r: RequestBuilder) -> None:
            r.parameter("id[]", account_ids)
            r.parameter("with_suspended", with_suspended)

        return await self._call(HttpMethod.GET, Routes.V1.RELATIONSHIPS, list[Relationship], request)

    async def get_familiar_followers(
        self, account_ids: list[str]
    ) -> MastodonResult[list[FamiliarFollowers]]:
        """Accounts you follow that also follow each of the given accounts."""

        def request(r: RequestBuilder) -> None:
            r.parameter("id[]", account_ids)

        return await self._call(
            HttpMethod.GET, Routes.V1.FAMILIAR_FOLLOWERS, list[FamiliarFollowers], request
        )

    async def search(
        self,
        query: str,
        limit: int = 40,
        offset: int | None = None,
        resolve: bool = False,
        following: bool = False,
    ) -> MastodonResult[list[Account]]:
        """Search for matching accounts by username or display name."""

        def request(r: RequestBuilder) -> None:
            r.parameter("q", query)
            r.parameter("limit", limit)
            r.parameter("offset", offset)
            r.parameter("resolve", resolve)
            r.parameter("following", following)

        return await self._call(HttpMethod.GET, Routes.V1.SEARCH, list[Account], request)

    async def lookup(self, acct: str) -> MastodonResult[Account]:
        """Quickly look up a username to see if it is available."""

        def request(r: RequestBuilder) -> None:
            r.parameter("acct", acct)

        return await self._call(HttpMethod.GET, Routes.V1.LOOKUP, Account, request)
