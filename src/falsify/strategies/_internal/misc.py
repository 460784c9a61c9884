# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from falsify.errors import InvalidArgument
from falsify.strategies._internal.strategies import SearchStrategy


def _same_value(left, right):
    return type(left) is type(right) and left == right


class JustStrategy(SearchStrategy):
    """A strategy which always returns a single fixed value."""

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        if self.value is None:
            return "none()"
        return "just(%r)" % (self.value,)

    def generate(self, random, size):
        return self.value

    def shrink(self, value):
        return iter(())

    def is_member(self, value):
        return value is self.value or _same_value(value, self.value)


class SampledFromStrategy(SearchStrategy):
    """A strategy which returns one of a fixed sequence of values, shrinking
    towards those that come earlier in the sequence."""

    def __init__(self, elements):
        self.elements = tuple(elements)
        if not self.elements:
            raise InvalidArgument("sampled_from requires at least one value")

    def __repr__(self):
        return "sampled_from(%r)" % (list(self.elements),)

    def generate(self, random, size):
        return self.elements[int(random.next_unit() * len(self.elements))]

    def shrink(self, value):
        for i, element in enumerate(self.elements):
            if _same_value(element, value):
                for j in range(i - 1, -1, -1):
                    yield self.elements[j]
                return

    def is_member(self, value):
        return any(_same_value(element, value) for element in self.elements)
