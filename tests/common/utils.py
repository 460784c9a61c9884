# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import contextlib
import sys
from functools import wraps
from io import StringIO

from falsify.reporters import FunctionReporter
from falsify.reporting import default, with_reporter


@contextlib.contextmanager
def capture_out():
    old_out = sys.stdout
    try:
        new_out = StringIO()
        sys.stdout = new_out
        with with_reporter(default):
            yield new_out
    finally:
        sys.stdout = old_out


class RecordingReporter(FunctionReporter):
    """Keeps every line a run reports, and the final result."""

    def __init__(self):
        self.lines = []
        self.result = None
        super().__init__(self.lines.append)

    def on_finish(self, result):
        self.result = result
        super().on_finish(result)


def counts_calls(func):
    """A decorator that counts how many times a function was called, and
    stores that value in a ``.calls`` attribute.
    """
    assert not hasattr(func, "calls")

    @wraps(func)
    def _inner(*args, **kwargs):
        _inner.calls += 1
        return func(*args, **kwargs)

    _inner.calls = 0
    return _inner


def always_fails(value):
    return False


def always_passes(value):
    return True
