# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Outcomes of a single evaluation of a test, and reports of whole runs."""

from typing import Any, Callable, List, Optional

import attr


def _labels(labels):
    return None if labels is None else frozenset(labels)


@attr.s(frozen=True, slots=True)
class Outcome:
    value: str = attr.ib()
    labels: Optional[frozenset] = attr.ib(default=None, converter=_labels)

    @property
    def passed(self) -> bool:
        return isinstance(self, Success)


@attr.s(frozen=True, slots=True)
class Success(Outcome):
    pass


@attr.s(frozen=True, slots=True)
class Failure(Outcome):
    pass


@attr.s(frozen=True, slots=True)
class Error(Outcome):
    """The test raised ``error`` when called on the value."""

    error: BaseException = attr.ib(kw_only=True)


def classify(test: Callable[[Any], Any], value: Any, stringify: Callable) -> Outcome:
    """Run ``test`` on ``value`` and decide what happened.

    A test may signal its result structurally by returning an
    :class:`Outcome`, which is used as is. Otherwise returning ``False``
    is a failure, raising is an error, and anything else passes.
    """
    try:
        result = test(value)
    except Exception as e:
        return Error(stringify(value), error=e)
    if isinstance(result, Outcome):
        return result
    if result is False:
        return Failure(stringify(value))
    return Success(stringify(value))


@attr.s(frozen=True, slots=True)
class CheckSuccess:
    seed: int = attr.ib()
    trial_count: int = attr.ib()
    stringify: Callable = attr.ib(default=repr, repr=False, eq=False)

    passed = True


@attr.s(frozen=True, slots=True)
class CheckFailure:
    seed: int = attr.ib()
    trial_count: int = attr.ib()
    shrink_count: int = attr.ib()
    original_fail: Any = attr.ib()
    min_fail: Any = attr.ib()
    error: Optional[BaseException] = attr.ib(default=None)
    stringify: Callable = attr.ib(default=repr, repr=False, eq=False)

    passed = False


def format_result(result) -> List[str]:
    if result.passed:
        return [f"Ok passed {result.trial_count} tests."]
    lines = [
        f"Falsifiable, after {result.trial_count} tests "
        f"({result.shrink_count} shrink) (seed: {result.seed}):",
        f"Original: {result.stringify(result.original_fail)}",
        f"Shrunk: {result.stringify(result.min_fail)}",
    ]
    if result.error is not None:
        lines.append(f"with exception: {result.error!r}")
    return lines
