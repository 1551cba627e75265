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

"""Typed async client library for fediverse HTTP APIs.

Calls resolve to result values instead of raising:

    ```python
    from fedi_api import Success
    from fedi_api.mastodon import MastodonClient

    async with MastodonClient("mastodon.social") as client:
        result = await client.accounts.get_followers("14715", limit=2)
        if isinstance(result, Success):
            ...
    ```

List endpoints return ``PagedSuccess`` values whose ``next_page`` and
``previous_page`` cursors can be passed back to the same endpoint.
"""

from .client import Client
from .codec import JsonCodec
from .config import ClientConfig
from .dispatch import Dispatcher
from .errors import ApiFailure, ConfigurationError, FediApiError, UnsuccessfulResponseError
from .observability import LogConfig, setup_logging
from .paging import LinkPageExtractor, PageCursor, PageExtractor
from .request import FormBuilder, RequestBuilder
from .results import (
    Empty,
    Error,
    Failure,
    PagedResult,
    PagedSuccess,
    Result,
    Success,
    get_page_or_none,
    get_page_or_raise,
)
from .transport import HttpxTransport, Transport
from .types import HttpMethod

__version__ = "0.1.0"

__all__ = [
    # Client
    "Client",
    "ClientConfig",
    "Dispatcher",
    "HttpMethod",
    "HttpxTransport",
    "JsonCodec",
    "Transport",
    # Requests
    "FormBuilder",
    "RequestBuilder",
    # Results
    "Empty",
    "Error",
    "Failure",
    "PagedResult",
    "PagedSuccess",
    "Result",
    "Success",
    "get_page_or_none",
    "get_page_or_raise",
    # Paging
    "LinkPageExtractor",
    "PageCursor",
    "PageExtractor",
    # Errors
    "ApiFailure",
    "ConfigurationError",
    "FediApiError",
    "UnsuccessfulResponseError",
    # Logging
    "LogConfig",
    "setup_logging",
]
