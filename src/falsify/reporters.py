# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Sinks which a run reports its progress and its final result to.

A run only ever calls the three ``on_*`` methods; what they do with the
rendered values is up to the reporter.
"""

from falsify.errors import Falsified
from falsify.reporting import report, verbose_report
from falsify.results import format_result


class Reporter:
    def on_trial(self, index: int, value: str) -> None:
        pass

    def on_shrink(self, shrink_count: int, previous: str, candidate: str) -> None:
        pass

    def on_finish(self, result) -> None:
        pass


class FunctionReporter(Reporter):
    """Writes one line per event to ``log``."""

    def __init__(self, log):
        self.log = log

    def on_trial(self, index, value):
        self.log(f"{index}: {value}")

    def on_shrink(self, shrink_count, previous, candidate):
        self.log(f"shrink[{shrink_count}]: {previous} => {candidate}")

    def on_finish(self, result):
        for line in format_result(result):
            self.log(line)


class VerboseReporter(FunctionReporter):
    """Reports progress only at verbose verbosity, and the summary at
    normal verbosity, through :mod:`falsify.reporting`."""

    def __init__(self):
        super().__init__(verbose_report)

    def on_finish(self, result):
        for line in format_result(result):
            report(line)


class RaiseOnFailure(VerboseReporter):
    """The default reporter: raises :class:`~falsify.errors.Falsified` when
    a run fails, so that test runners see the failure, and stays quiet when
    it passes."""

    def on_finish(self, result):
        if result.passed:
            return
        raise Falsified("\n".join(format_result(result)), result) from result.error


console = FunctionReporter(print)
