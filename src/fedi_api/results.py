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

"""Result values returned by every dispatched call.

A call resolves to exactly one of four variants:

- ``Success`` (or ``PagedSuccess`` for list endpoints): the body was decoded.
- ``Empty``: the server answered 204 No Content or 410 Gone.
- ``Error``: the server answered with a non-2xx status; ``error`` holds the decoded
  error payload, or ``None`` if that payload could not be decoded.
- ``Failure``: the call could not be completed, or a 2xx body could not be decoded.

The variants are frozen dataclasses and are meant to be matched over:

    ```python
    match await client.accounts.get_account("1"):
        case Success(data=account):
            print(account.username)
        case Empty():
            print("gone")
        case Error(error=err):
            print(err.error if err else "unknown server error")
        case Failure(cause=cause):
            print(f"client-side failure: {cause}")
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeAlias, TypeVar, assert_never

from .errors import ApiFailure, UnsuccessfulResponseError

if TYPE_CHECKING:
    from .paging import PageCursor

T = TypeVar("T")
E = TypeVar("E")
R = TypeVar("R")


class _ResultOps:
    """Helpers shared by all result variants."""

    @property
    def is_success(self) -> bool:
        return isinstance(self, (Success, PagedSuccess))

    def fold(
        self,
        success: Callable[[Any], R] | None = None,
        empty: Callable[[], R] | None = None,
        error: Callable[[Any], R] | None = None,
        failure: Callable[[ApiFailure], R] | None = None,
    ) -> R | None:
        """Invoke the callback matching this variant and return its value.

        ``success`` receives the decoded data for ``Success`` and the whole
        ``PagedSuccess`` (items plus cursors) for paged results. Missing callbacks
        are treated as no-ops returning ``None``.
        """
        match self:
            case Success(data=data):
                return success(data) if success else None
            case PagedSuccess():
                return success(self) if success else None
            case Empty():
                return empty() if empty else None
            case Error(error=payload):
                return error(payload) if error else None
            case Failure():
                return failure(self.exception) if failure else None
            case _:
                assert_never(self)

    def fold_page(
        self,
        success: Callable[[list[Any]], R] | None = None,
        empty: Callable[[], R] | None = None,
        error: Callable[[Any], R] | None = None,
        failure: Callable[[ApiFailure], R] | None = None,
    ) -> R | None:
        """Like ``fold`` but a paged ``success`` receives only the list of items."""
        if isinstance(self, PagedSuccess):
            return success(self.data) if success else None
        return self.fold(success=success, empty=empty, error=error, failure=failure)

    def fold_fail(
        self,
        success: Callable[[Any], R] | None = None,
        fail: Callable[[Any], R] | None = None,
        empty: Callable[[], R] | None = None,
    ) -> R | None:
        """Like ``fold`` but treats ``Error`` and ``Failure`` alike.

        ``fail`` receives the error payload, or ``None`` for a ``Failure``.
        """
        if isinstance(self, Failure):
            return fail(None) if fail else None
        return self.fold(success=success, empty=empty, error=fail)

    def if_success(self, block: Callable[[Any], Any]) -> None:
        """Call ``block`` only for a successful result.

        As with ``fold``, a paged result passes the whole ``PagedSuccess``.
        """
        if self.is_success:
            self.fold(success=block)

    def if_page_success(self, block: Callable[[list[Any]], Any]) -> None:
        """Call ``block`` with the items of a ``PagedSuccess``."""
        if isinstance(self, PagedSuccess):
            block(self.data)

    def if_empty(self, block: Callable[[], Any]) -> None:
        if isinstance(self, Empty):
            block()

    def get_or_none(self) -> Any:
        """Return the decoded data if successful, otherwise ``None``.

        For paged results this returns the ``PagedSuccess`` itself.
        """
        match self:
            case Success(data=data):
                return data
            case PagedSuccess():
                return self
            case Empty() | Error() | Failure():
                return None
            case _:
                assert_never(self)

    def get_or_raise(self) -> Any:
        """Return the decoded data, raising ``UnsuccessfulResponseError`` otherwise."""
        if not self.is_success:
            cause = self.exception if isinstance(self, Failure) else None
            raise UnsuccessfulResponseError(self) from cause
        return self.get_or_none()


@dataclass(frozen=True)
class Success(_ResultOps, Generic[T]):
    """Data was returned without any issues."""

    data: T


@dataclass(frozen=True)
class PagedSuccess(_ResultOps, Generic[T]):
    """A page of items, with cursors to move forwards and backwards.

    Attributes:
        data: The items in the current page.
        next_page: Cursor used to paginate forwards, if the server returned one.
        previous_page: Cursor used to paginate backwards, if the server returned one.
    """

    data: list[T] = field(default_factory=list)
    next_page: PageCursor | None = None
    previous_page: PageCursor | None = None


@dataclass(frozen=True)
class Empty(_ResultOps):
    """The response had no body (204) or the resource is gone (410)."""


@dataclass(frozen=True)
class Error(_ResultOps, Generic[E]):
    """The server returned an error.

    ``error`` is ``None`` when the error payload itself could not be decoded.
    """

    error: E | None
    status_code: int | None = None


@dataclass(frozen=True)
class Failure(_ResultOps):
    """The call failed on the client (offline, timeout, undecodable body)."""

    cause: BaseException
    raw_body: str | None = None

    @property
    def exception(self) -> ApiFailure:
        """The failure as a raisable exception carrying the raw body."""
        return ApiFailure(self.cause, self.raw_body)


Result: TypeAlias = Success[T] | Empty | Error[E] | Failure
PagedResult: TypeAlias = PagedSuccess[T] | Empty | Error[E] | Failure


def get_page_or_none(result: PagedResult[T, Any]) -> list[T] | None:
    """Return the items of a paged result, or ``None`` if it was not successful."""
    return result.data if isinstance(result, PagedSuccess) else None


def get_page_or_raise(result: PagedResult[T, Any]) -> list[T]:
    """Return the items of a paged result, raising if it was not successful."""
    if isinstance(result, PagedSuccess):
        return result.data
    return result.get_or_raise()
