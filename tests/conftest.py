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

"""Shared fixtures for fedi_api tests."""

import httpx
import pytest
from helpers import BASE_URL, ExampleClient, mock_transport

from fedi_api.mastodon import MastodonClient


@pytest.fixture
def make_client():
    """Build an ``ExampleClient`` whose transport is answered by ``handler``."""

    def factory(handler, token=None, **kwargs) -> ExampleClient:
        return ExampleClient(BASE_URL, token, transport=mock_transport(handler), **kwargs)

    return factory


@pytest.fixture
def make_mastodon():
    """Build a ``MastodonClient`` whose transport is answered by ``handler``."""

    def factory(handler, token="token", **kwargs) -> MastodonClient:
        return MastodonClient(BASE_URL, token, transport=mock_transport(handler), **kwargs)

    return factory


@pytest.fixture
def recorded():
    """Requests seen by handlers built with ``respond_with``."""
    return []


@pytest.fixture
def respond_with(recorded):
    """Build a handler that records each request and returns a fixed response."""

    def factory(status_code=200, **response_kwargs):
        def handler(request: httpx.Request) -> httpx.Response:
            request.read()
            recorded.append(request)
            return httpx.Response(status_code, **response_kwargs)

        return handler

    return factory
