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

"""Request customisation handed to endpoint builders.

Every dispatched call constructs a ``RequestBuilder`` for the target URL and
passes it to the caller-supplied ``request`` callable, which adds query
parameters, headers and a body before the request is sent:

    ```python
    def request(r: RequestBuilder) -> None:
        r.add_page_params(cursor)
        r.parameter("limit", 40)

    await client.paged("/api/v1/bookmarks", request=request, item_type=Status)
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

import httpx

from .types import HttpMethod

if TYPE_CHECKING:
    from .codec import JsonCodec
    from .paging import PageCursor


def _render(value: Any) -> str:
    """Render a scalar the way the API expects it on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _expand(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_render(v) for v in value if v is not None]
    return [_render(value)]


class FormBuilder:
    """Multipart form body."""

    def __init__(self) -> None:
        # (field name, (filename, content, content type)); filename None marks a plain field
        self.parts: list[tuple[str, tuple[str | None, str | bytes, str | None]]] = []

    def append(self, key: str, value: Any) -> FormBuilder:
        """Append a field; lists become repeated fields and ``None`` is skipped."""
        for rendered in _expand(value):
            self.parts.append((key, (None, rendered, None)))
        return self

    def append_file(
        self,
        key: str,
        data: bytes,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> FormBuilder:
        """Append a file part; the filename defaults to the field name."""
        self.parts.append((key, (filename or key, data, content_type)))
        return self

    def append_fields_hash(
        self, fields: Mapping[str, str], prefix: str = "fields_attributes"
    ) -> FormBuilder:
        """Append name/value pairs as ``prefix[i][name]`` and ``prefix[i][value]``.

        An empty mapping sends one blank pair, which clears existing fields.
        """
        if not fields:
            self.append(f"{prefix}[0][name]", "")
            self.append(f"{prefix}[0][value]", "")
        for i, (name, value) in enumerate(fields.items()):
            self.append(f"{prefix}[{i}][name]", name)
            self.append(f"{prefix}[{i}][value]", value)
        return self

    def to_files(self) -> list[tuple[str, tuple]]:
        files = []
        for key, (filename, content, content_type) in self.parts:
            if content_type is None:
                files.append((key, (filename, content)))
            else:
                files.append((key, (filename, content, content_type)))
        return files


class RequestBuilder:
    """Mutable description of an outgoing request."""

    def __init__(self, method: HttpMethod | str, url: str):
        self.method = HttpMethod(method)
        self.url = url
        self.headers: dict[str, str] = {}
        self.params: list[tuple[str, str]] = []
        self._form: FormBuilder | None = None
        self._json: Any = None
        self._has_json = False
        self._content: bytes | None = None

    def header(self, name: str, value: str) -> RequestBuilder:
        self.headers[name] = value
        return self

    def parameter(self, key: str, value: Any) -> RequestBuilder:
        """Add a query parameter.

        ``None`` is skipped, lists expand into repeated keys, booleans are rendered
        as ``true``/``false`` and enums by their value.
        """
        for rendered in _expand(value):
            self.params.append((key, rendered))
        return self

    def add_page_params(self, cursor: PageCursor | None) -> RequestBuilder:
        """Apply a page cursor's ``max_id``/``min_id``/``since_id`` parameters."""
        if cursor is not None:
            self.params.extend(cursor.to_params())
        return self

    def _clear_body(self) -> None:
        self._form = None
        self._json = None
        self._has_json = False
        self._content = None

    def form(self) -> FormBuilder:
        """Replace the body with a new multipart form and return it for filling."""
        self._clear_body()
        self._form = FormBuilder()
        return self._form

    def set_form_field(self, key: str, value: Any) -> RequestBuilder:
        """Shorthand for a multipart body with a single field."""
        self.form().append(key, value)
        return self

    def set_json(self, value: Any) -> RequestBuilder:
        """Replace the body with ``value`` encoded as JSON by the client codec."""
        self._clear_body()
        self._json = value
        self._has_json = True
        return self

    def set_body(self, content: str | bytes, content_type: str) -> RequestBuilder:
        self._clear_body()
        self._content = content.encode() if isinstance(content, str) else content
        self.headers["Content-Type"] = content_type
        return self

    def build(self, codec: JsonCodec) -> httpx.Request:
        """Produce the ``httpx.Request`` to hand to the transport."""
        kwargs: dict[str, Any] = {"params": self.params, "headers": self.headers}
        if self._form is not None and self._form.parts:
            kwargs["files"] = self._form.to_files()
        elif self._has_json:
            kwargs["content"] = codec.encode(self._json)
            headers = httpx.Headers(self.headers)
            headers.setdefault("Content-Type", "application/json")
            kwargs["headers"] = headers
        elif self._content is not None:
            kwargs["content"] = self._content
        return httpx.Request(self.method.value, self.url, **kwargs)
