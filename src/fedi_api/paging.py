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

"""Cursor-based pagination.

A ``PageCursor`` carries the opaque ids a server hands back for moving through a
list. ``PageExtractor`` implementations read them off a raw response; the
``LinkPageExtractor`` understands the ``Link`` header convention:

    <https://mastodon.example/api/v1/accounts/14715/followers?limit=2&max_id=7486869>; rel="next", <https://mastodon.example/api/v1/accounts/14715/followers?limit=2&since_id=7489740>; rel="prev"
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from typing import Protocol, runtime_checkable
from urllib.parse import parse_qs, urlsplit

import httpx
from msgspec import Struct

logger = logging.getLogger(__name__)

PageInfo = tuple["PageCursor | None", "PageCursor | None"]


class PageCursor(Struct, frozen=True):
    """Paging parameters for a list request.

    Attributes:
        since: Only fetch results newer than this id.
        min: Results immediately newer than this id (paginates forward from it).
        max: All results will be older than this id (upper bound).
    """

    since: str | None = None
    min: str | None = None
    max: str | None = None

    def to_params(self) -> Iterator[tuple[str, str]]:
        """Yield the query parameters this cursor contributes to a request."""
        if self.max is not None:
            yield "max_id", self.max
        if self.min is not None:
            yield "min_id", self.min
        if self.since is not None:
            yield "since_id", self.since


@runtime_checkable
class PageExtractor(Protocol):
    """Derives next/previous page cursors from a raw response."""

    def get_page_info(self, response: httpx.Response) -> PageInfo:
        """Return ``(next_page, previous_page)``; either may be ``None``."""
        ...


class LinkPageExtractor:
    """Extracts paging cursors from the ``Link`` response header."""

    LINK_PATTERN = re.compile(r'<(.+?)>; rel="(next|prev)"')

    def get_page_info(self, response: httpx.Response) -> PageInfo:
        link_header = response.headers.get("link")
        if link_header is None:
            return None, None

        next_page: PageCursor | None = None
        previous_page: PageCursor | None = None

        for link in link_header.split(", "):
            match = self.LINK_PATTERN.fullmatch(link)
            if match is None:
                continue
            url, rel = match.groups()
            # Duplicate rels overwrite, the last entry wins
            if rel == "next":
                next_page = self.cursor_from_url(url)
            else:
                previous_page = self.cursor_from_url(url)

        logger.debug("Extracted page info next=%r previous=%r", next_page, previous_page)
        return next_page, previous_page

    @staticmethod
    def cursor_from_url(url: str) -> PageCursor:
        """Build a cursor from the ``since_id``/``min_id``/``max_id`` query parameters."""
        params = parse_qs(urlsplit(url).query, keep_blank_values=True)

        def first(name: str) -> str | None:
            values = params.get(name)
            return values[0] if values else None

        return PageCursor(
            since=first("since_id"),
            min=first("min_id"),
            max=first("max_id"),
        )
