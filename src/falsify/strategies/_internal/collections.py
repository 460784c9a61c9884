# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from falsify.internal.validation import check_strategy, check_valid_size
from falsify.strategies._internal.strategies import SearchStrategy


class ListStrategy(SearchStrategy):
    """A strategy for lists which takes a strategy for its elements and a
    minimum length.

    Lists are shrunk by halving: each shorter prefix is offered first,
    followed by that prefix with any one of its elements shrunk.

        [1, 2, 3, 4]
        => [1, 2]
          => [0, 2]
          => [1, 1]
          => [1, 0]
        => [1]
          => [0]
        => []
    """

    def __init__(self, elements, min_size=0):
        check_strategy(elements, "elements")
        check_valid_size(min_size, "min_size")
        self.element_strategy = elements
        self.min_size = min_size

    def __repr__(self):
        if self.min_size:
            return "lists(%r, min_size=%d)" % (self.element_strategy, self.min_size)
        return "lists(%r)" % (self.element_strategy,)

    def generate(self, random, size):
        count = max(self.min_size, int(random.range(0, size)))
        return [self.element_strategy.generate(random, size) for _ in range(count)]

    def shrink(self, value):
        if len(value) <= self.min_size:
            return
        i = len(value) // 2
        while i >= self.min_size:
            prefix = list(value[:i])
            yield prefix
            for j in range(i):
                for simpler in self.element_strategy.shrink(value[j]):
                    candidate = list(prefix)
                    candidate[j] = simpler
                    yield candidate
            if i == 0:
                return
            i //= 2

    def stringify(self, value):
        return "[%s]" % ", ".join(map(self.element_strategy.stringify, value))


class TupleStrategy(SearchStrategy):
    """A strategy responsible for fixed length tuples based on heterogeneous
    strategies for each of their elements."""

    def __init__(self, strategies):
        for i, strategy in enumerate(strategies):
            check_strategy(strategy, "strategies[%d]" % (i,))
        self.element_strategies = tuple(strategies)

    def __repr__(self):
        return "tuples(%s)" % ", ".join(map(repr, self.element_strategies))

    def generate(self, random, size):
        return tuple(s.generate(random, size) for s in self.element_strategies)

    def shrink(self, value):
        value = tuple(value)
        if len(value) != len(self.element_strategies):
            return
        for i, strategy in enumerate(self.element_strategies):
            for simpler in strategy.shrink(value[i]):
                yield value[:i] + (simpler,) + value[i + 1 :]

    def stringify(self, value):
        if len(value) != len(self.element_strategies):
            return repr(value)
        bits = [s.stringify(v) for s, v in zip(self.element_strategies, value)]
        if len(bits) == 1:
            return "(%s,)" % (bits[0],)
        return "(%s)" % ", ".join(bits)


class FixedDictStrategy(SearchStrategy):
    """A strategy which produces dicts with a fixed set of keys, given a
    strategy for each of their values.

    Keys are always visited in sorted order, so that generation draws from
    the random source in the same order however the mapping was built.
    """

    def __init__(self, mapping):
        for key, strategy in mapping.items():
            check_strategy(strategy, "mapping[%r]" % (key,))
        self.keys = tuple(sorted(mapping))
        self.mapping = {key: mapping[key] for key in self.keys}

    def __repr__(self):
        return "fixed_dictionaries(%r)" % (self.mapping,)

    def generate(self, random, size):
        return {key: self.mapping[key].generate(random, size) for key in self.keys}

    def shrink(self, value):
        if set(self.keys) - value.keys():
            return
        for key in self.keys:
            for simpler in self.mapping[key].shrink(value[key]):
                candidate = dict(value)
                candidate[key] = simpler
                yield candidate

    def stringify(self, value):
        if set(self.keys) - value.keys():
            return repr(value)
        bits = []
        for key in self.keys:
            bits.append("%r: %s" % (key, self.mapping[key].stringify(value[key])))
        return "{%s}" % ", ".join(bits)
