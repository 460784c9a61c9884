# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from falsify.errors import InvalidArgument


def check_type(typ, arg, name=""):
    if name:
        name += "="
    if not isinstance(arg, typ) or (typ is int and isinstance(arg, bool)):
        if isinstance(typ, type):
            typ_string = typ.__name__
        else:
            typ_string = "one of %s" % (", ".join(t.__name__ for t in typ))
        raise InvalidArgument(
            "Expected %s but got %s%r (type=%s)"
            % (typ_string, name, arg, type(arg).__name__)
        )


def check_strategy(arg, name=""):
    from falsify.strategies._internal.strategies import SearchStrategy

    check_type(SearchStrategy, arg, name)


def check_valid_size(value, name):
    """Checks that value is a valid non-negative integer size.

    Otherwise raises InvalidArgument.
    """
    check_type(int, value, name)
    if value < 0:
        raise InvalidArgument("Invalid size %s=%r < 0" % (name, value))


def check_valid_interval(lower_bound, upper_bound, lower_name, upper_name):
    """Checks that lower_bound and upper_bound define a valid interval on
    the number line.

    Otherwise raises InvalidArgument.
    """
    if upper_bound < lower_bound:
        raise InvalidArgument(
            "Cannot have %s=%r < %s=%r"
            % (upper_name, upper_bound, lower_name, lower_bound)
        )


def check_callable(arg, name):
    if not callable(arg):
        raise InvalidArgument(
            "Expected %s to be callable but got %r (type=%s)"
            % (name, arg, type(arg).__name__)
        )
