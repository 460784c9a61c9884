# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""falsify is a library for property-based testing.

A property is checked against values drawn from a strategy; when a
counterexample is found it is shrunk to a locally minimal one and reported
together with the seed that replays the whole run.
"""

from falsify import strategies
from falsify._settings import Verbosity, settings
from falsify.core import check, find_local_minimum
from falsify.errors import (
    FalsifyException,
    Falsified,
    InvalidArgument,
    InvalidState,
)
from falsify.internal.random import Random
from falsify.reporters import (
    FunctionReporter,
    RaiseOnFailure,
    Reporter,
    VerboseReporter,
    console,
)
from falsify.results import (
    CheckFailure,
    CheckSuccess,
    Error,
    Failure,
    Outcome,
    Success,
)
from falsify.version import __version__, __version_info__

__all__ = [
    "CheckFailure",
    "CheckSuccess",
    "Error",
    "Failure",
    "Falsified",
    "FalsifyException",
    "FunctionReporter",
    "InvalidArgument",
    "InvalidState",
    "Outcome",
    "RaiseOnFailure",
    "Random",
    "Reporter",
    "Success",
    "VerboseReporter",
    "Verbosity",
    "check",
    "console",
    "find_local_minimum",
    "settings",
    "strategies",
    "__version__",
    "__version_info__",
]
