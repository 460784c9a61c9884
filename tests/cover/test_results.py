# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import attr
import pytest

from falsify.results import (
    CheckFailure,
    CheckSuccess,
    Error,
    Failure,
    Outcome,
    Success,
    classify,
    format_result,
)


def test_returning_false_is_a_failure():
    assert classify(lambda x: False, 1, repr) == Failure("1")


@pytest.mark.parametrize("returned", [True, None, 0, "", 1])
def test_returning_anything_else_is_a_success(returned):
    assert classify(lambda x: returned, 1, repr) == Success("1")


def test_raising_is_an_error_carrying_the_exception():
    outcome = classify(lambda x: 1 / x, 0, repr)
    assert isinstance(outcome, Error)
    assert isinstance(outcome.error, ZeroDivisionError)
    assert outcome.value == "0"
    assert not outcome.passed


def test_returned_outcomes_are_used_verbatim():
    outcome = Failure("custom", labels=["slow"])
    assert classify(lambda x: outcome, 1, repr) is outcome


def test_values_are_rendered_with_the_given_stringify():
    assert classify(lambda x: True, 10, hex).value == "0xa"


def test_labels_are_a_frozenset():
    assert Success("1", labels=["a", "b", "a"]).labels == frozenset({"a", "b"})
    assert Success("1").labels is None


def test_only_success_passes():
    assert Success("1").passed
    assert not Failure("1").passed
    assert not Error("1", error=ValueError()).passed
    assert not Outcome("1").passed


def test_outcomes_are_immutable():
    with pytest.raises(attr.exceptions.FrozenInstanceError):
        Success("1").value = "2"


def test_format_success():
    assert format_result(CheckSuccess(1, 100)) == ["Ok passed 100 tests."]


def test_format_failure():
    result = CheckFailure(
        seed=7, trial_count=3, shrink_count=2, original_fail=[1, 2], min_fail=[0]
    )
    assert format_result(result) == [
        "Falsifiable, after 3 tests (2 shrink) (seed: 7):",
        "Original: [1, 2]",
        "Shrunk: [0]",
    ]


def test_format_failure_with_error_and_custom_rendering():
    result = CheckFailure(
        seed=7,
        trial_count=3,
        shrink_count=0,
        original_fail=255,
        min_fail=16,
        error=KeyError("k"),
        stringify=hex,
    )
    assert format_result(result) == [
        "Falsifiable, after 3 tests (0 shrink) (seed: 7):",
        "Original: 0xff",
        "Shrunk: 0x10",
        "with exception: KeyError('k')",
    ]


def test_reports_know_whether_they_passed():
    assert CheckSuccess(1, 1).passed
    assert not CheckFailure(1, 1, 0, 0, 0).passed
