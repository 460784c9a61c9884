# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import pytest
from hypothesis import given, strategies as st

from falsify import (
    CheckFailure,
    CheckSuccess,
    Failure,
    Falsified,
    InvalidArgument,
    Reporter,
    Success,
    check,
    settings,
)
from falsify.core import find_local_minimum, trial_sizes
from falsify.strategies import integers, just, text

from tests.common.utils import (
    RecordingReporter,
    always_fails,
    always_passes,
    counts_calls,
)

REFERENCE_SEED = 1873066016

REFERENCE_LOG = """\
0: 0
1: 0
2: 2
3: 1
4: 0
5: 4
6: 6
7: 5
8: 2
9: 0
10: -7
11: 0
12: -11
13: -4
14: 2
15: -14
16: -15
17: 7
18: -11
19: 18
shrink[0]: 18 => 17
shrink[1]: 18 => 9
shrink[1]: 17 => 16
shrink[2]: 17 => 8
shrink[2]: 16 => 15
shrink[3]: 16 => 8
shrink[3]: 15 => 14
shrink[4]: 15 => 7
shrink[4]: 14 => 13
shrink[5]: 14 => 7
shrink[5]: 13 => 12
shrink[6]: 13 => 6
shrink[6]: 12 => 11
shrink[7]: 12 => 6
shrink[7]: 11 => 10
Falsifiable, after 20 tests (7 shrink) (seed: 1873066016):
Original: 18
Shrunk: 11""".splitlines()


def at_most_ten(x):
    return x <= 10


def raises_above_ten(x):
    if 10 < x:
        raise ValueError("err")


def test_reference_run_is_reproduced_exactly():
    reporter = RecordingReporter()
    result = check(integers(), at_most_ten, seed=REFERENCE_SEED, reporter=reporter)
    assert reporter.lines == REFERENCE_LOG
    assert result == CheckFailure(
        seed=REFERENCE_SEED,
        trial_count=20,
        shrink_count=7,
        original_fail=18,
        min_fail=11,
    )
    assert reporter.result is result


def test_raising_tests_fail_the_same_way_and_keep_the_error():
    reporter = RecordingReporter()
    result = check(
        integers(), raises_above_ten, seed=REFERENCE_SEED, reporter=reporter
    )
    assert reporter.lines[:-1] == REFERENCE_LOG
    assert reporter.lines[-1] == "with exception: ValueError('err')"
    assert isinstance(result.error, ValueError)
    assert result.min_fail == 11


def test_default_reporter_raises_on_failure():
    def test(value):
        raise ValueError("err")

    with pytest.raises(Falsified) as err:
        check(text(), test)
    assert not err.value.result.passed
    assert isinstance(err.value.__cause__, ValueError)
    assert str(err.value).startswith("Falsifiable, after 1 tests")


def test_default_reporter_is_silent_on_success():
    result = check(integers(), always_passes)
    assert result.passed
    assert result.trial_count == settings.default.max_trials


def test_success_report():
    reporter = RecordingReporter()
    result = check(integers(), always_passes, seed=3, reporter=reporter)
    assert result == CheckSuccess(3, 100)
    assert len(reporter.lines) == 101
    assert reporter.lines[-1] == "Ok passed 100 tests."


def test_first_failure_stops_the_run():
    test = counts_calls(always_fails)
    result = check(integers(), test, reporter=Reporter())
    assert result.trial_count == 1
    assert result.shrink_count == 0
    assert test.calls == 1


def test_outcomes_returned_by_the_test_are_used():
    result = check(just(1), lambda x: Failure(repr(x)), reporter=Reporter())
    assert not result.passed
    result = check(just(1), lambda x: Success(repr(x)), reporter=Reporter())
    assert result.passed


@pytest.mark.parametrize("returned", [None, 0, "", [], True])
def test_only_false_itself_fails(returned):
    assert check(just(1), lambda x: returned, reporter=Reporter()).passed


def test_base_exceptions_propagate():
    class Stop(BaseException):
        pass

    def test(x):
        raise Stop()

    with pytest.raises(Stop):
        check(integers(), test, reporter=Reporter())


def test_same_seed_replays_the_same_run():
    runs = []
    for _ in range(2):
        reporter = RecordingReporter()
        check(text(), lambda s: len(s) < 5, seed=42, reporter=reporter)
        runs.append(reporter.lines)
    assert runs[0] == runs[1]


def test_explicit_settings_control_the_number_of_trials():
    result = check(
        integers(), always_passes, settings=settings(max_trials=7), reporter=Reporter()
    )
    assert result.trial_count == 7


def test_settings_decorator_is_picked_up():
    @settings(max_trials=3)
    def test(x):
        return True

    assert check(integers(), test).trial_count == 3


def test_strategy_check_method():
    result = integers().check(at_most_ten, seed=REFERENCE_SEED, reporter=Reporter())
    assert result.min_fail == 11


def test_check_validates_its_arguments():
    with pytest.raises(InvalidArgument):
        check(1, always_passes)
    with pytest.raises(InvalidArgument):
        check(integers(), 1)


@pytest.mark.parametrize(
    "kwargs, expected",
    [
        ({"max_trials": 4, "start_size": 0, "end_size": 10}, [3, 5, 7, 10]),
        ({"max_trials": 3, "start_size": 5, "end_size": 2}, [5, 5, 5]),
        ({"max_trials": 1, "start_size": 1, "end_size": 100}, [100]),
    ],
)
def test_trial_sizes(kwargs, expected):
    assert list(trial_sizes(settings(**kwargs))) == expected


@given(st.integers(1, 200), st.integers(0, 200), st.integers(0, 200))
def test_trial_sizes_grow_to_the_end_size(max_trials, start_size, end_size):
    sizes = list(
        trial_sizes(
            settings(max_trials=max_trials, start_size=start_size, end_size=end_size)
        )
    )
    assert len(sizes) == max_trials
    assert sizes == sorted(sizes)
    assert sizes[0] >= 1
    assert sizes[-1] == max(end_size, start_size, 1)


@given(st.integers(0, 2**32 - 1))
def test_runs_always_shrink_to_the_boundary(seed):
    result = check(integers(), at_most_ten, seed=seed, reporter=Reporter())
    if not result.passed:
        assert result.min_fail == 11


def test_find_local_minimum_without_a_run():
    result = find_local_minimum(integers(), at_most_ten, 18, seed=0, trial_count=1)
    assert result.min_fail == 11
    assert result.shrink_count == 7
    assert result.original_fail == 18
    assert result.error is None


def test_find_local_minimum_reports_each_candidate():
    reporter = RecordingReporter()
    find_local_minimum(
        integers(), at_most_ten, 18, seed=0, trial_count=1, reporter=reporter
    )
    assert reporter.lines == [line for line in REFERENCE_LOG if "shrink[" in line]


def test_find_local_minimum_stops_when_nothing_simpler_fails():
    result = find_local_minimum(integers(), lambda x: x != 5, 5, seed=0, trial_count=1)
    assert result.min_fail == 5
    assert result.shrink_count == 0


def test_find_local_minimum_stops_when_candidates_run_out():
    result = find_local_minimum(integers(), always_fails, 3, seed=0, trial_count=1)
    assert result.min_fail == 0
    assert result.shrink_count == 3


def test_find_local_minimum_keeps_the_error_of_the_minimal_value():
    def test(x):
        if x > 2:
            raise KeyError(x)

    result = find_local_minimum(integers(), test, 9, seed=0, trial_count=1)
    assert result.min_fail == 3
    assert result.error.args == (3,)


def test_find_local_minimum_keeps_the_error_when_nothing_simpler_fails():
    def test(x):
        if x > 17:
            raise ValueError(x)

    result = find_local_minimum(integers(), test, 18, seed=0, trial_count=1)
    assert result.min_fail == 18
    assert result.shrink_count == 0
    assert isinstance(result.error, ValueError)
    assert result.error.args == (18,)


def test_find_local_minimum_prefers_the_given_outcome():
    outcome = Failure("18")
    result = find_local_minimum(
        integers(), lambda x: x <= 17, 18, outcome, seed=0, trial_count=1
    )
    assert result.min_fail == 18
    assert result.error is None
