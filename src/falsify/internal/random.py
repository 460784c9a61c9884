# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""The deterministic pseudo-random source every run draws from.

This is Marsaglia's xorshift128.  The exact bit recurrence matters: a run
is reproduced from nothing but its seed, so two sources built from the same
seed must agree on every word they ever produce.
"""

import time

from falsify.internal.validation import check_type, check_valid_interval

MASK = 0xFFFFFFFF
UINT32_RANGE = 2**32


def seed_of_now() -> int:
    """A seed derived from the wall clock, in milliseconds."""
    return int(time.time() * 1000) & MASK


class Random:
    """A seeded source of uniform 32-bit words and of reals derived from
    them.

    Not thread-safe. Each run owns its own instance.
    """

    def __init__(self, seed: int = None) -> None:
        if seed is None:
            seed = seed_of_now()
        check_type(int, seed, "seed")
        self.seed = seed & MASK
        self._x = 123456789
        self._y = 362436069
        self._z = 521288629
        self._w = self.seed

    def __repr__(self):
        return "Random(%d)" % (self.seed,)

    def next_uint32(self) -> int:
        x, w = self._x, self._w
        t = (x ^ (x << 11)) & MASK
        self._x = self._y
        self._y = self._z
        self._z = w
        self._w = (w ^ (w >> 19)) ^ (t ^ (t >> 8))
        return self._w

    def next_unit(self) -> float:
        """A real in [0, 1)."""
        return self.next_uint32() / UINT32_RANGE

    def range(self, min_value, max_value) -> float:
        """A real in [min_value, max_value).

        When the bounds are equal the interval is degenerate and min_value
        is returned, still consuming one word.
        """
        check_valid_interval(min_value, max_value, "min_value", "max_value")
        lo = min(min_value, max_value)
        hi = max(min_value, max_value)
        return lo + self.next_unit() * (hi - lo)
