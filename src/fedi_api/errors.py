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

"""Exception types.

The dispatch layer never raises these across its boundary; outcomes are
reported as result values (see ``fedi_api.results``). The exceptions here are
raised by configuration loading and by opt-in helpers such as
``Result.get_or_raise()``.
"""

from __future__ import annotations

from typing import Any


class FediApiError(Exception):
    """Base exception for all fedi_api errors."""


class ConfigurationError(FediApiError):
    """Client configuration is missing or malformed."""


class ApiFailure(FediApiError):
    """The call could not be completed on the client side.

    Args:
        cause: The exception raised while sending the request or decoding the body.
        body: The raw response body, only available if the failure happened after a
            response was received (usually an inaccurate api model).
    """

    def __init__(self, cause: BaseException, body: str | None = None):
        super().__init__(body if body is not None else str(cause))
        self.cause = cause
        self.body = body
        self.__cause__ = cause


class UnsuccessfulResponseError(FediApiError):
    """Raised when a successful result was required but another variant was returned."""

    def __init__(self, result: Any):
        super().__init__(f"Response was not successful: {result!r}")
        self.result = result
