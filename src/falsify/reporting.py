# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Where falsify's own messages go.

Messages are passed to the current reporter, a callable taking one string,
unless the active verbosity is below the level they were sent at. Trial and
shrink progress is sent at ``verbose``, internal bookkeeping at ``debug``,
and run summaries at ``normal``.
"""

import inspect

from falsify._settings import Verbosity, settings
from falsify.utils.dynamicvariables import DynamicVariable


def silent(value):
    """A reporter which discards everything it is given.

    ``with with_reporter(silent): ...`` mutes falsify for the duration of
    the block, whatever the verbosity setting says.
    """


def default(value):
    try:
        print(value)
    except UnicodeEncodeError:
        print(value.encode("unicode_escape").decode("ascii"))


reporter = DynamicVariable(default)


def current_reporter():
    return reporter.value


def with_reporter(new_reporter):
    """Send messages to ``new_reporter`` for the duration of a with block.
    The setting is local to the current thread."""
    return reporter.with_value(new_reporter)


def current_verbosity() -> Verbosity:
    return settings.default.verbosity


def to_text(textish):
    """Messages may be given as thunks, so that expensive ones are only
    rendered when they will actually be reported."""
    if inspect.isfunction(textish):
        textish = textish()
    if isinstance(textish, bytes):
        textish = textish.decode()
    return textish


def _report_at(level, text):
    if current_verbosity() >= level:
        current_reporter()(to_text(text))


def report(text):
    _report_at(Verbosity.normal, text)


def verbose_report(text):
    _report_at(Verbosity.verbose, text)


def debug_report(text):
    _report_at(Verbosity.debug, text)
