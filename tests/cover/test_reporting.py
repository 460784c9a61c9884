# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import pytest

from falsify import (
    CheckFailure,
    CheckSuccess,
    Falsified,
    FunctionReporter,
    RaiseOnFailure,
    Reporter,
    VerboseReporter,
    Verbosity,
    check,
    console,
    settings,
)
from falsify._settings import local_settings
from falsify.reporting import (
    current_reporter,
    debug_report,
    report,
    silent,
    to_text,
    verbose_report,
    with_reporter,
)
from falsify.strategies import integers

from tests.common.utils import capture_out

failure = CheckFailure(
    seed=1, trial_count=2, shrink_count=1, original_fail=4, min_fail=3
)


def test_base_reporter_ignores_everything():
    reporter = Reporter()
    reporter.on_trial(0, "1")
    reporter.on_shrink(0, "1", "0")
    reporter.on_finish(failure)


def test_function_reporter_line_formats():
    lines = []
    reporter = FunctionReporter(lines.append)
    reporter.on_trial(3, "'x'")
    reporter.on_shrink(2, "10", "9")
    reporter.on_finish(CheckSuccess(1, 5))
    assert lines == ["3: 'x'", "shrink[2]: 10 => 9", "Ok passed 5 tests."]


def test_console_prints(capsys):
    console.on_trial(0, "1")
    assert capsys.readouterr().out == "0: 1\n"


def test_verbose_reporter_only_reports_summary_at_normal_verbosity():
    with capture_out() as out:
        check(integers(), lambda x: True, reporter=VerboseReporter())
    assert out.getvalue() == "Ok passed 100 tests.\n"


def test_verbose_reporter_reports_progress_when_verbose():
    with local_settings(settings(verbosity=Verbosity.verbose)):
        with capture_out() as out:
            check(
                integers(),
                lambda x: True,
                seed=1,
                settings=settings(max_trials=2),
                reporter=VerboseReporter(),
            )
    lines = out.getvalue().splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("0: ")
    assert lines[1].startswith("1: ")
    assert lines[2] == "Ok passed 2 tests."


def test_quiet_verbosity_silences_the_summary():
    with local_settings(settings(verbosity=Verbosity.quiet)):
        with capture_out() as out:
            check(integers(), lambda x: True, reporter=VerboseReporter())
    assert out.getvalue() == ""


def test_raise_on_failure_message_is_the_summary():
    with pytest.raises(Falsified) as err:
        RaiseOnFailure().on_finish(failure)
    assert str(err.value) == (
        "Falsifiable, after 2 tests (1 shrink) (seed: 1):\nOriginal: 4\nShrunk: 3"
    )
    assert err.value.result is failure
    assert err.value.__cause__ is None


def test_falsified_is_an_assertion_error():
    with pytest.raises(AssertionError):
        RaiseOnFailure().on_finish(failure)


def test_raise_on_failure_passes_successes_through():
    RaiseOnFailure().on_finish(CheckSuccess(1, 1))


def test_report_respects_verbosity():
    messages = []
    with with_reporter(messages.append):
        report("normal")
        verbose_report("verbose")
        debug_report("debug")
        with local_settings(settings(verbosity=Verbosity.debug)):
            verbose_report("verbose")
            debug_report("debug")
    assert messages == ["normal", "verbose", "debug"]


def test_check_logs_at_debug_verbosity():
    messages = []
    with local_settings(settings(verbosity=Verbosity.debug)):
        with with_reporter(messages.append):
            check(integers(), lambda x: x < 1000, seed=5, reporter=Reporter())
    assert messages == [
        "Running 100 trials of integers() with seed 5",
        "All 100 trials passed",
    ]


def test_debug_logging_of_a_failing_run():
    messages = []
    with local_settings(settings(verbosity=Verbosity.debug)):
        with with_reporter(messages.append):
            check(integers(), lambda x: False, seed=5, reporter=Reporter())
    assert messages[1] == "Trial 0 failed, shrinking"
    assert messages[2].startswith("Shrunk ")


def test_to_text_accepts_thunks_and_bytes():
    assert to_text("a") == "a"
    assert to_text(b"b") == "b"
    assert to_text(lambda: "c") == "c"


def test_with_reporter_restores_the_previous_reporter():
    previous = current_reporter()
    with with_reporter(silent):
        assert current_reporter() is silent
    assert current_reporter() is previous


def test_silent_mutes_reports_at_any_verbosity():
    with local_settings(settings(verbosity=Verbosity.debug)):
        with capture_out() as out:
            with with_reporter(silent):
                report("hidden")
                debug_report("hidden")
    assert out.getvalue() == ""
