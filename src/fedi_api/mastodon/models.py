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

"""Mastodon API entities.

Only the fields clients commonly need are declared. Unknown fields in responses
are ignored and absent fields take the declared defaults, so newer servers do not
break decoding.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import IntFlag

from msgspec import Struct, field


class Error(Struct, kw_only=True):
    """Error payload returned by the server for non-2xx responses."""

    error: str = ""
    error_description: str | None = None


class Emoji(Struct, kw_only=True):
    shortcode: str
    url: str = ""
    static_url: str = ""
    visible_in_picker: bool = True
    category: str | None = None


class Field(Struct, kw_only=True):
    """A name/value pair displayed on a profile."""

    name: str
    value: str
    verified_at: datetime | None = None


class Source(Struct, kw_only=True):
    note: str = ""
    fields: list[Field] = field(default_factory=list)
    privacy: str | None = None
    sensitive: bool = False
    language: str | None = None
    follow_requests_count: int = 0


class Permission(IntFlag):
    """Permissions that can be granted to a ``Role``."""

    ADMINISTRATOR = 0x1
    DEVOPS = 0x2
    VIEW_AUDIT_LOG = 0x4
    VIEW_DASHBOARD = 0x8
    MANAGE_REPORTS = 0x10
    MANAGE_FEDERATION = 0x20
    MANAGE_SETTINGS = 0x40
    MANAGE_BLOCKS = 0x80
    MANAGE_TAXONOMIES = 0x100
    MANAGE_APPEALS = 0x200
    MANAGE_USERS = 0x400
    MANAGE_INVITES = 0x800
    MANAGE_RULES = 0x1000
    MANAGE_ANNOUNCEMENTS = 0x2000
    MANAGE_CUSTOM_EMOJIS = 0x4000
    MANAGE_WEBHOOKS = 0x8000
    INVITE_USERS = 0x10000
    MANAGE_ROLES = 0x20000
    MANAGE_USER_ACCESS = 0x40000
    DELETE_USER_DATA = 0x80000


class Role(Struct, kw_only=True):
    """A custom user role that grants permissions."""

    id: str | int
    name: str
    color: str = ""
    # Bitmask, sent by the server as a string
    permissions: str | int = 0
    highlighted: bool = False

    @property
    def permission_flags(self) -> Permission:
        return Permission(int(self.permissions))

    def has_permission(self, permission: Permission) -> bool:
        flags = self.permission_flags
        return Permission.ADMINISTRATOR in flags or permission in flags


class Account(Struct, kw_only=True):
    id: str
    username: str
    acct: str
    url: str = ""
    display_name: str = ""
    note: str = ""
    avatar: str = ""
    avatar_static: str = ""
    header: str = ""
    header_static: str = ""
    locked: bool = False
    fields: list[Field] = field(default_factory=list)
    emojis: list[Emoji] = field(default_factory=list)
    bot: bool = False
    group: bool = False
    discoverable: bool | None = None
    noindex: bool | None = None
    moved: Account | None = None
    suspended: bool = False
    limited: bool = False
    created_at: datetime | None = None
    last_status_at: date | None = None
    statuses_count: int = 0
    followers_count: int = 0
    following_count: int = 0


class CredentialAccount(Account, kw_only=True):
    """The authenticated user's own account, including private preferences."""

    source: Source | None = None
    role: Role | None = None


class Tag(Struct, kw_only=True):
    name: str
    url: str = ""
    following: bool | None = None


class FeaturedTag(Struct, kw_only=True):
    id: str
    name: str
    url: str = ""
    statuses_count: int = 0
    last_status_at: date | None = None


class UserList(Struct, kw_only=True):
    id: str
    title: str
    replies_policy: str = "list"
    exclusive: bool = False


class Relationship(Struct, kw_only=True):
    id: str
    following: bool = False
    showing_reblogs: bool = False
    notifying: bool = False
    languages: list[str] | None = None
    followed_by: bool = False
    blocking: bool = False
    blocked_by: bool = False
    muting: bool = False
    muting_notifications: bool = False
    requested: bool = False
    requested_by: bool = False
    domain_blocking: bool = False
    endorsed: bool = False
    note: str = ""


class FamiliarFollowers(Struct, kw_only=True):
    id: str
    accounts: list[Account] = field(default_factory=list)


class Application(Struct, kw_only=True):
    name: str
    website: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    redirect_uri: str | None = None
    vapid_key: str | None = None


class Token(Struct, kw_only=True):
    access_token: str
    token_type: str = "Bearer"
    scope: str = ""
    created_at: int = 0


class Status(Struct, kw_only=True):
    id: str
    uri: str = ""
    url: str | None = None
    created_at: datetime | None = None
    account: Account | None = None
    content: str = ""
    visibility: str = "public"
    sensitive: bool = False
    spoiler_text: str = ""
    in_reply_to_id: str | None = None
    in_reply_to_account_id: str | None = None
    reblog: Status | None = None
    language: str | None = None
    text: str | None = None
    edited_at: datetime | None = None
    replies_count: int = 0
    reblogs_count: int = 0
    favourites_count: int = 0
    favourited: bool | None = None
    reblogged: bool | None = None
    bookmarked: bool | None = None
    pinned: bool | None = None
    emojis: list[Emoji] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    mentions: list[dict] = field(default_factory=list)
    media_attachments: list[dict] = field(default_factory=list)


class Context(Struct, kw_only=True):
    """The thread around a status: its parents and children."""

    ancestors: list[Status] = field(default_factory=list)
    descendants: list[Status] = field(default_factory=list)


class Conversation(Struct, kw_only=True):
    """A conversation with "direct message" visibility."""

    id: str
    unread: bool = False
    accounts: list[Account] = field(default_factory=list)
    last_status: Status | None = None


class Search(Struct, kw_only=True):
    accounts: list[Account] = field(default_factory=list)
    statuses: list[Status] = field(default_factory=list)
    hashtags: list[Tag] = field(default_factory=list)
