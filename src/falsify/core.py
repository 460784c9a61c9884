# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""This module provides the core of falsify: the trial loop which looks for
a failing value, and the shrink search which simplifies it."""

from typing import Any, Callable, Iterator

from falsify._settings import settings as Settings, settings_for
from falsify.internal.random import Random
from falsify.internal.validation import check_callable, check_strategy
from falsify.reporters import RaiseOnFailure, Reporter
from falsify.reporting import debug_report
from falsify.results import CheckFailure, CheckSuccess, Error, Outcome, classify
from falsify.strategies import SearchStrategy


def current_size(start_size: int, end_size: int, max_trials: int, index: int) -> int:
    return int(start_size + (end_size - start_size) * ((index + 1) / max_trials))


def trial_sizes(settings: Settings) -> Iterator[int]:
    """The size hint of each trial of a run, growing linearly from
    ``start_size`` (at least one) to ``end_size``."""
    min_size = max(1, settings.start_size)
    max_size = max(settings.end_size, min_size)
    for index in range(settings.max_trials):
        yield current_size(min_size, max_size, settings.max_trials, index)


def check(
    strategy: SearchStrategy,
    test: Callable[[Any], Any],
    *,
    seed: int = None,
    settings: Settings = None,
    reporter: Reporter = None,
):
    """Run ``test`` on values drawn from ``strategy`` until it fails or the
    trial budget is spent.

    ``test`` fails by returning ``False``, by raising, or by returning a
    :class:`~falsify.results.Failure` or :class:`~falsify.results.Error`.
    The first failing value is shrunk with :func:`find_local_minimum`.

    Returns a :class:`~falsify.results.CheckSuccess` or
    :class:`~falsify.results.CheckFailure`, after handing it to
    ``reporter.on_finish``. The default reporter raises
    :class:`~falsify.errors.Falsified` for failures instead. Passing the same
    ``seed`` replays exactly the same trials; when it is omitted, one is
    derived from the clock.
    """
    check_strategy(strategy, "strategy")
    check_callable(test, "test")
    if settings is None:
        settings = settings_for(test)
    if reporter is None:
        reporter = RaiseOnFailure()

    random = Random(seed)
    stringify = strategy.stringify
    debug_report(
        lambda: "Running %d trials of %r with seed %d"
        % (settings.max_trials, strategy, random.seed)
    )

    for index, size in enumerate(trial_sizes(settings)):
        value = strategy.generate(random, size)
        reporter.on_trial(index, stringify(value))
        outcome = classify(test, value, stringify)
        if outcome.passed:
            continue

        debug_report(lambda: "Trial %d failed, shrinking" % (index,))
        result = find_local_minimum(
            strategy,
            test,
            value,
            outcome,
            seed=random.seed,
            trial_count=index + 1,
            reporter=reporter,
        )
        reporter.on_finish(result)
        return result

    debug_report(lambda: "All %d trials passed" % (settings.max_trials,))
    result = CheckSuccess(random.seed, settings.max_trials, stringify=stringify)
    reporter.on_finish(result)
    return result


def find_local_minimum(
    strategy: SearchStrategy,
    test: Callable[[Any], Any],
    original_fail: Any,
    original_outcome: Outcome = None,
    *,
    seed: int,
    trial_count: int,
    reporter: Reporter = None,
) -> CheckFailure:
    """Shrink ``original_fail``, a value ``test`` fails on, to a locally
    minimal one.

    Candidates are taken from ``strategy.shrink`` in order, and every
    failing one becomes the best known failure. The first passing candidate
    after some failures restarts the walk from the best failure found so
    far; a passing candidate with no failures before it, or running out of
    candidates, ends the search. No randomness is used.

    ``original_outcome`` is how ``test`` failed on ``original_fail``; when it
    is omitted the test is run on that value once more to find out.
    """
    if reporter is None:
        reporter = Reporter()
    stringify = strategy.stringify
    if original_outcome is None:
        original_outcome = classify(test, original_fail, stringify)

    shrink_count = 0
    fail_count = 0
    max_fail = min_fail = original_fail
    min_outcome = original_outcome

    while True:
        restart = False
        for candidate in strategy.shrink(max_fail):
            reporter.on_shrink(shrink_count, stringify(max_fail), stringify(candidate))
            outcome = classify(test, candidate, stringify)
            if outcome.passed:
                if fail_count == 0:
                    break
                max_fail = min_fail
                fail_count = 0
                restart = True
                break
            fail_count += 1
            shrink_count += 1
            min_fail = candidate
            min_outcome = outcome
        if not restart:
            break

    debug_report(lambda: "Shrunk %s in %d steps" % (stringify(min_fail), shrink_count))
    return CheckFailure(
        seed=seed,
        trial_count=trial_count,
        shrink_count=shrink_count,
        original_fail=original_fail,
        min_fail=min_fail,
        error=min_outcome.error if isinstance(min_outcome, Error) else None,
        stringify=stringify,
    )
