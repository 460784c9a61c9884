# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.


class FalsifyException(Exception):
    """Generic parent class for exceptions thrown by falsify."""


class InvalidArgument(FalsifyException, TypeError):
    """Used to indicate that the arguments to a falsify function were in
    some manner incorrect.

    This covers malformed bounds handed to the random source, strategies
    built from things that are not strategies, and union branches which do
    not partition the values they are asked to shrink.
    """


class InvalidState(FalsifyException):
    """The system is not in a state where you were allowed to do that."""


class Falsified(FalsifyException, AssertionError):
    """Raised at the end of a failing run by the default reporter.

    The message is the rendered summary of the run, and the full
    :class:`~falsify.results.CheckFailure` is available as ``result``.
    """

    def __init__(self, message, result):
        super().__init__(message)
        self.result = result
