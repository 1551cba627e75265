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

"""Test doubles shared across test modules."""

from email.parser import BytesParser
from email.policy import HTTP

import httpx
import msgspec

from fedi_api import Client, HttpxTransport, LinkPageExtractor, PageExtractor

BASE_URL = "https://example.social"


class Item(msgspec.Struct, kw_only=True):
    id: str
    name: str = ""


class ApiError(msgspec.Struct, kw_only=True):
    error: str
    error_description: str | None = None


class ExampleClient(Client):
    """Concrete client paging with the Link header."""

    @property
    def page_extractor(self) -> PageExtractor:
        return LinkPageExtractor()


def mock_transport(handler) -> HttpxTransport:
    """Transport whose requests are answered by ``handler(request) -> httpx.Response``."""
    return HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


def form_parts(request: httpx.Request) -> list[tuple[str, str | None, bytes]]:
    """Split a multipart request body into ``(name, filename, content)`` parts."""
    head = f"Content-Type: {request.headers['content-type']}\r\n\r\n".encode()
    message = BytesParser(policy=HTTP).parsebytes(head + request.content)
    return [
        (
            part.get_param("name", header="content-disposition"),
            part.get_filename(),
            part.get_payload(decode=True),
        )
        for part in message.iter_parts()
    ]


def form_fields(request: httpx.Request) -> list[tuple[str, str]]:
    """The plain (non-file) fields of a multipart request, in order."""
    return [
        (name, content.decode())
        for name, filename, content in form_parts(request)
        if filename is None
    ]
