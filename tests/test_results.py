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

"""Tests for result variants and their helpers."""

import pytest

from fedi_api import (
    ApiFailure,
    Empty,
    Error,
    Failure,
    PageCursor,
    PagedSuccess,
    Success,
    UnsuccessfulResponseError,
    get_page_or_none,
    get_page_or_raise,
)

ALL_VARIANTS = [
    Success("data"),
    Empty(),
    Error("oops", status_code=422),
    Failure(ConnectionError("offline")),
]


def describe(result) -> str:
    match result:
        case Success(data=data):
            return f"success:{data}"
        case PagedSuccess(data=items):
            return f"page:{len(items)}"
        case Empty():
            return "empty"
        case Error(error=error):
            return f"error:{error}"
        case Failure(cause=cause):
            return f"failure:{type(cause).__name__}"


class TestVariants:
    def test_match_covers_every_variant(self):
        assert [describe(r) for r in ALL_VARIANTS] == [
            "success:data",
            "empty",
            "error:oops",
            "failure:ConnectionError",
        ]

    def test_exactly_one_variant_is_success(self):
        assert [r.is_success for r in ALL_VARIANTS] == [True, False, False, False]

    def test_empty_instances_are_equal(self):
        assert Empty() == Empty()

    def test_variants_are_frozen(self):
        with pytest.raises(AttributeError):
            Success("a").data = "b"

    def test_error_payload_may_be_none(self):
        assert Error(None).error is None

    def test_failure_exception_carries_body(self):
        cause = ValueError("bad json")
        failure = Failure(cause, "{not json")
        exception = failure.exception
        assert isinstance(exception, ApiFailure)
        assert exception.cause is cause
        assert exception.body == "{not json"
        assert exception.__cause__ is cause


class TestFold:
    def test_fold_calls_matching_callback(self):
        callbacks = dict(
            success=lambda data: f"s:{data}",
            empty=lambda: "e",
            error=lambda err: f"err:{err}",
            failure=lambda f: f"f:{f.cause}",
        )
        assert [r.fold(**callbacks) for r in ALL_VARIANTS] == [
            "s:data",
            "e",
            "err:oops",
            "f:offline",
        ]

    def test_fold_missing_callback_returns_none(self):
        assert Success("data").fold(empty=lambda: "e") is None

    def test_fold_fail_merges_error_and_failure(self):
        seen = []
        Error("oops").fold_fail(fail=seen.append)
        Failure(RuntimeError()).fold_fail(fail=seen.append)
        assert seen == ["oops", None]

    def test_fold_paged_success_receives_whole_page(self):
        page = PagedSuccess([1, 2], next_page=PageCursor(max="2"))
        assert page.fold(success=lambda p: p.next_page) == PageCursor(max="2")

    def test_fold_page_receives_items(self):
        page = PagedSuccess([1, 2])
        assert page.fold_page(success=lambda items: sum(items)) == 3
        assert Empty().fold_page(empty=lambda: "empty") == "empty"

    def test_if_success_runs_only_on_success(self):
        seen = []
        for result in ALL_VARIANTS:
            result.if_success(seen.append)
        assert seen == ["data"]

    def test_if_success_paged_receives_whole_page(self):
        seen = []
        page = PagedSuccess([1], next_page=PageCursor(max="1"))
        page.if_success(seen.append)
        assert seen == [page]

    def test_if_page_success_receives_items(self):
        seen = []
        PagedSuccess([1, 2]).if_page_success(seen.append)
        Success([3]).if_page_success(seen.append)
        Empty().if_page_success(seen.append)
        assert seen == [[1, 2]]

    def test_if_empty(self):
        seen = []
        for result in ALL_VARIANTS:
            result.if_empty(lambda: seen.append("empty"))
        assert seen == ["empty"]


class TestAccessors:
    def test_get_or_none(self):
        assert Success(5).get_or_none() == 5
        assert Empty().get_or_none() is None
        assert Error("x").get_or_none() is None
        assert Failure(RuntimeError()).get_or_none() is None

    def test_get_or_raise_success(self):
        assert Success(5).get_or_raise() == 5

    def test_get_or_raise_error(self):
        result = Error("x")
        with pytest.raises(UnsuccessfulResponseError) as exc_info:
            result.get_or_raise()
        assert exc_info.value.result is result

    def test_get_or_raise_failure_chains_cause(self):
        with pytest.raises(UnsuccessfulResponseError) as exc_info:
            Failure(TimeoutError("slow"), None).get_or_raise()
        assert isinstance(exc_info.value.__cause__, ApiFailure)

    def test_page_helpers(self):
        page = PagedSuccess(["a", "b"])
        assert get_page_or_none(page) == ["a", "b"]
        assert get_page_or_none(Empty()) is None
        assert get_page_or_raise(page) == ["a", "b"]
        with pytest.raises(UnsuccessfulResponseError):
            get_page_or_raise(Error(None))

    def test_paged_get_or_none_returns_page(self):
        page = PagedSuccess(["a"], previous_page=PageCursor(since="1"))
        assert page.get_or_none() is page
