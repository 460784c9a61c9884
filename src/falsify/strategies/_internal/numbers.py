# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import math

from falsify.strategies._internal.strategies import SearchStrategy

# Largest numerator/denominator magnitude used to build reals.
PRECISION = 9_999_999_999_999


def truncated_half(n: int) -> int:
    return n // 2 if n >= 0 else -(-n // 2)


def shrink_integer(n: int):
    """Step towards zero by one, then jump halfway, then to zero itself."""
    if n == 0:
        return
    yield n - (1 if n > 0 else -1)
    yield truncated_half(n)
    yield 0


class IntegersStrategy(SearchStrategy):
    """Integers in (-size, size), shrinking towards zero."""

    def __repr__(self):
        return "integers()"

    def generate(self, random, size):
        return int(random.range(-size, size))

    def shrink(self, value):
        return shrink_integer(int(value))


class RealsStrategy(SearchStrategy):
    """Finite floats built as the ratio of two random integers. The
    numerator grows with size; the denominator does not."""

    def __repr__(self):
        return "reals()"

    def generate(self, random, size):
        numerator = math.trunc(random.range(-size * PRECISION, size * PRECISION))
        denominator = math.trunc(random.range(1, PRECISION))
        return numerator / denominator

    def shrink(self, value):
        if value < 0:
            yield -value
        for simpler in shrink_integer(math.trunc(value)):
            yield float(simpler)
