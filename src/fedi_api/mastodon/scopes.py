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

"""OAuth scopes understood by Mastodon.

Top-level scopes grant access to every sub-scope beneath them, e.g. ``read``
covers ``read:accounts``.
"""


class Scope:
    READ = "read"
    WRITE = "write"
    FOLLOW = "follow"  # Deprecated since Mastodon 3.5.0, use the read/write follow scopes
    PUSH = "push"

    class Read:
        ACCOUNTS = "read:accounts"
        BLOCKS = "read:blocks"
        BOOKMARKS = "read:bookmarks"
        FAVOURITES = "read:favourites"
        FILTERS = "read:filters"
        FOLLOWS = "read:follows"
        LISTS = "read:lists"
        MUTES = "read:mutes"
        NOTIFICATIONS = "read:notifications"
        SEARCH = "read:search"
        STATUSES = "read:statuses"

    class Write:
        ACCOUNTS = "write:accounts"
        BLOCKS = "write:blocks"
        BOOKMARKS = "write:bookmarks"
        CONVERSATIONS = "write:conversations"
        FAVOURITES = "write:favourites"
        FILTERS = "write:filters"
        FOLLOWS = "write:follows"
        LISTS = "write:lists"
        MEDIA = "write:media"
        MUTES = "write:mutes"
        NOTIFICATIONS = "write:notifications"
        REPORTS = "write:reports"
        STATUSES = "write:statuses"

    class Admin:
        READ = "admin:read"
        WRITE = "admin:write"

        class Read:
            ACCOUNTS = "admin:read:accounts"
            REPORTS = "admin:read:reports"
            DOMAIN_ALLOWS = "admin:read:domain_allows"
            DOMAIN_BLOCKS = "admin:read:domain_blocks"
            IP_BLOCKS = "admin:read:ip_blocks"
            EMAIL_DOMAIN_BLOCKS = "admin:read:email_domain_blocks"
            CANONICAL_EMAIL_BLOCKS = "admin:read:canonical_email_blocks"

        class Write:
            ACCOUNTS = "admin:write:accounts"
            REPORTS = "admin:write:reports"
            DOMAIN_ALLOWS = "admin:write:domain_allows"
            DOMAIN_BLOCKS = "admin:write:domain_blocks"
            IP_BLOCKS = "admin:write:ip_blocks"
            EMAIL_DOMAIN_BLOCKS = "admin:write:email_domain_blocks"
            CANONICAL_EMAIL_BLOCKS = "admin:write:canonical_email_blocks"
