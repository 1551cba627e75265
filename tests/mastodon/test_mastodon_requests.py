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

"""Tests for the requests sent by each Mastodon endpoint."""

import pytest
from helpers import form_fields, form_parts

from fedi_api import Failure, PageCursor
from fedi_api.mastodon import GrantType, Privacy, Scope

RELATIONSHIP = {"id": "1", "following": True}
TOKEN = {"access_token": "tok", "token_type": "Bearer", "scope": "read", "created_at": 1}
APP = {"name": "test app", "client_id": "cid", "client_secret": "secret"}


@pytest.fixture
def mastodon(make_mastodon, respond_with):
    """Build a client answering every request with ``status_code`` and ``json``."""

    def factory(json, status_code=200):
        return make_mastodon(respond_with(status_code, json=json))

    return factory


class TestAccounts:
    @pytest.mark.asyncio
    async def test_register_account(self, mastodon, recorded):
        result = await mastodon(TOKEN).accounts.register_account(
            "alice", "alice@example.com", "hunter22", agreement=True
        )
        assert result.get_or_raise().access_token == "tok"
        request = recorded[0]
        assert request.method == "POST"
        assert request.url.path == "/api/v1/accounts"
        assert form_fields(request) == [
            ("username", "alice"),
            ("email", "alice@example.com"),
            ("password", "hunter22"),
            ("agreement", "true"),
            ("locale", "en-US"),
        ]

    @pytest.mark.asyncio
    async def test_verify_credentials(self, mastodon, recorded):
        payload = {"id": "1", "username": "a", "acct": "a", "source": {"privacy": "private"}}
        result = await mastodon(payload).accounts.verify_credentials()
        assert result.get_or_raise().source.privacy == "private"
        assert recorded[0].url.path == "/api/v1/accounts/verify_credentials"

    @pytest.mark.asyncio
    async def test_update_credentials(self, mastodon, recorded):
        payload = {"id": "1", "username": "a", "acct": "a"}
        await mastodon(payload).accounts.update_credentials(
            display_name="Alice",
            avatar=b"\x89PNG",
            locked=True,
            fields={"site": "https://alice.example"},
            status_privacy=Privacy.UNLISTED,
        )
        request = recorded[0]
        assert request.method == "PATCH"
        assert request.url.path == "/api/v1/accounts/update_credentials"
        assert form_fields(request) == [
            ("display_name", "Alice"),
            ("locked", "true"),
            ("fields_attributes[0][name]", "site"),
            ("fields_attributes[0][value]", "https://alice.example"),
            ("source[privacy]", "unlisted"),
        ]
        assert ("avatar", "avatar", b"\x89PNG") in form_parts(request)

    @pytest.mark.asyncio
    async def test_update_credentials_clears_fields(self, mastodon, recorded):
        await mastodon({"id": "1", "username": "a", "acct": "a"}).accounts.update_credentials(
            fields={}
        )
        assert form_fields(recorded[0]) == [
            ("fields_attributes[0][name]", ""),
            ("fields_attributes[0][value]", ""),
        ]

    @pytest.mark.asyncio
    async def test_get_statuses(self, mastodon, recorded):
        await mastodon([]).accounts.get_statuses(
            "42", page=PageCursor(max="100"), exclude_reblogs=True, tagged="python"
        )
        request = recorded[0]
        assert request.url.path == "/api/v1/accounts/42/statuses"
        assert list(request.url.params.multi_items()) == [
            ("max_id", "100"),
            ("limit", "20"),
            ("exclude_reblogs", "true"),
            ("pinned", "false"),
            ("tagged", "python"),
        ]

    @pytest.mark.asyncio
    async def test_get_statuses_exclude_replies(self, mastodon, recorded):
        await mastodon([]).accounts.get_statuses("42", exclude_replies=True, limit=None)
        params = recorded[0].url.params
        assert params["exclude_replies"] == "true"
        assert "exclude_reblogs" not in params
        assert "limit" not in params

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,path", [("get_followers", "followers"), ("get_following", "following")])
    async def test_follow_lists(self, mastodon, recorded, method, path):
        await getattr(mastodon([]).accounts, method)("42")
        assert recorded[0].url.path == f"/api/v1/accounts/42/{path}"
        assert recorded[0].url.params["limit"] == "40"

    @pytest.mark.asyncio
    async def test_featured_tags(self, mastodon, recorded):
        result = await mastodon([{"id": "1", "name": "python"}]).accounts.get_featured_tags("42")
        assert result.get_or_raise()[0].name == "python"
        assert recorded[0].url.path == "/api/v1/accounts/42/featured_tags"

    @pytest.mark.asyncio
    async def test_lists(self, mastodon, recorded):
        result = await mastodon([{"id": "1", "title": "friends"}]).accounts.get_lists("42")
        assert result.get_or_raise()[0].title == "friends"
        assert recorded[0].url.path == "/api/v1/accounts/42/lists"

    @pytest.mark.asyncio
    async def test_follow(self, mastodon, recorded):
        result = await mastodon(RELATIONSHIP).accounts.follow("42", notify=True, languages=["en", "de"])
        assert result.get_or_raise().following
        request = recorded[0]
        assert request.method == "POST"
        assert request.url.path == "/api/v1/accounts/42/follow"
        assert form_fields(request) == [
            ("reblogs", "true"),
            ("notify", "true"),
            ("languages[]", "en"),
            ("languages[]", "de"),
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method",
        ["unfollow", "remove_from_followers", "block", "unblock", "unmute", "pin", "unpin"],
    )
    async def test_relationship_actions(self, mastodon, recorded, method):
        result = await getattr(mastodon(RELATIONSHIP).accounts, method)("42")
        assert result.is_success
        assert recorded[0].method == "POST"
        assert recorded[0].url.path == f"/api/v1/accounts/42/{method}"
        assert recorded[0].content == b""

    @pytest.mark.asyncio
    async def test_mute(self, mastodon, recorded):
        await mastodon(RELATIONSHIP).accounts.mute("42", notifications=False, duration=3600)
        assert recorded[0].url.path == "/api/v1/accounts/42/mute"
        assert form_fields(recorded[0]) == [("notifications", "false"), ("duration", "3600")]

    @pytest.mark.asyncio
    async def test_set_note(self, mastodon, recorded):
        await mastodon(RELATIONSHIP).accounts.set_note("42", "met at a conference")
        assert recorded[0].url.path == "/api/v1/accounts/42/note"
        assert form_fields(recorded[0]) == [("comment", "met at a conference")]

    @pytest.mark.asyncio
    async def test_clear_note(self, mastodon, recorded):
        await mastodon(RELATIONSHIP).accounts.set_note("42", None)
        assert recorded[0].content == b""

    @pytest.mark.asyncio
    async def test_relationships(self, mastodon, recorded):
        result = await mastodon([RELATIONSHIP]).accounts.get_relationships(["1", "2"])
        assert len(result.get_or_raise()) == 1
        params = recorded[0].url.params
        assert recorded[0].url.path == "/api/v1/accounts/relationships"
        assert params.get_list("id[]") == ["1", "2"]
        assert params["with_suspended"] == "false"

    @pytest.mark.asyncio
    async def test_familiar_followers(self, mastodon, recorded):
        payload = [{"id": "1", "accounts": [{"id": "2", "username": "b", "acct": "b"}]}]
        result = await mastodon(payload).accounts.get_familiar_followers(["1"])
        assert result.get_or_raise()[0].accounts[0].acct == "b"
        assert recorded[0].url.params.get_list("id[]") == ["1"]

    @pytest.mark.asyncio
    async def test_search(self, mastodon, recorded):
        await mastodon([]).accounts.search("alice", limit=5, resolve=True)
        assert recorded[0].url.path == "/api/v1/accounts/search"
        assert list(recorded[0].url.params.multi_items()) == [
            ("q", "alice"),
            ("limit", "5"),
            ("resolve", "true"),
            ("following", "false"),
        ]

    @pytest.mark.asyncio
    async def test_lookup(self, mastodon, recorded):
        payload = {"id": "1", "username": "alice", "acct": "alice@example.com"}
        result = await mastodon(payload).accounts.lookup("alice@example.com")
        assert result.get_or_raise().acct == "alice@example.com"
        assert recorded[0].url.path == "/api/v1/accounts/lookup"
        assert recorded[0].url.params["acct"] == "alice@example.com"


class TestBookmarks:
    @pytest.mark.asyncio
    async def test_get_bookmarks(self, mastodon, recorded):
        result = await mastodon([{"id": "9", "content": "<p>saved</p>"}]).bookmarks.get_bookmarks(
            page=PageCursor(min="5")
        )
        assert result.get_or_raise().data[0].content == "<p>saved</p>"
        assert recorded[0].url.path == "/api/v1/bookmarks"
        assert list(recorded[0].url.params.multi_items()) == [("min_id", "5"), ("limit", "20")]


class TestApps:
    @pytest.mark.asyncio
    async def test_create_application(self, mastodon, recorded):
        result = await mastodon(APP).apps.create_application(
            "test app",
            "urn:ietf:wg:oauth:2.0:oob",
            scopes=[Scope.READ, Scope.Write.STATUSES],
            website="https://app.example",
        )
        assert result.get_or_raise().client_secret == "secret"
        assert recorded[0].url.path == "/api/v1/apps"
        assert form_fields(recorded[0]) == [
            ("client_name", "test app"),
            ("redirect_uris", "urn:ietf:wg:oauth:2.0:oob"),
            ("scopes", "read write:statuses"),
            ("website", "https://app.example"),
        ]

    @pytest.mark.asyncio
    async def test_default_scope(self, mastodon, recorded):
        await mastodon(APP).apps.create_application("test app", "urn:ietf:wg:oauth:2.0:oob")
        assert ("scopes", "read") in form_fields(recorded[0])

    @pytest.mark.asyncio
    async def test_verify_credentials(self, mastodon, recorded):
        result = await mastodon({"name": "test app"}).apps.verify_credentials()
        assert result.get_or_raise().name == "test app"
        assert recorded[0].url.path == "/api/v1/apps/verify_credentials"


class TestEmails:
    @pytest.mark.asyncio
    async def test_resend_with_email(self, mastodon, recorded):
        await mastodon({}).emails.resend_confirmation("new@example.com")
        assert recorded[0].method == "POST"
        assert recorded[0].url.path == "/api/v1/emails/confirmations"
        assert form_fields(recorded[0]) == [("email", "new@example.com")]

    @pytest.mark.asyncio
    async def test_resend_without_email(self, mastodon, recorded):
        await mastodon({}).emails.resend_confirmation()
        assert recorded[0].content == b""


class TestOAuth:
    @pytest.mark.asyncio
    async def test_token_with_code(self, mastodon, recorded):
        result = await mastodon(TOKEN).oauth.get_token(
            GrantType.CODE, "cid", "secret", "urn:ietf:wg:oauth:2.0:oob", code="xyz"
        )
        assert result.get_or_raise().access_token == "tok"
        assert recorded[0].url.path == "/oauth/token"
        assert form_fields(recorded[0]) == [
            ("grant_type", "authorization_code"),
            ("code", "xyz"),
            ("client_id", "cid"),
            ("client_secret", "secret"),
            ("redirect_uri", "urn:ietf:wg:oauth:2.0:oob"),
            ("scope", "read"),
        ]

    @pytest.mark.asyncio
    async def test_client_credentials(self, mastodon, recorded):
        await mastodon(TOKEN).oauth.get_token(
            GrantType.APP, "cid", "secret", "urn:ietf:wg:oauth:2.0:oob", scopes=["read", "write"]
        )
        fields = dict(form_fields(recorded[0]))
        assert fields["grant_type"] == "client_credentials"
        assert fields["scope"] == "read write"
        assert "code" not in fields

    @pytest.mark.asyncio
    async def test_code_grant_without_code_fails_locally(self, mastodon, recorded):
        result = await mastodon(TOKEN).oauth.get_token(
            GrantType.CODE, "cid", "secret", "urn:ietf:wg:oauth:2.0:oob"
        )
        assert isinstance(result, Failure)
        assert isinstance(result.cause, ValueError)
        assert recorded == []

    @pytest.mark.asyncio
    async def test_revoke_token(self, mastodon, recorded):
        await mastodon({}).oauth.revoke_token("cid", "secret", "tok")
        assert recorded[0].url.path == "/oauth/revoke"
        assert form_fields(recorded[0]) == [
            ("client_id", "cid"),
            ("client_secret", "secret"),
            ("token", "tok"),
        ]
