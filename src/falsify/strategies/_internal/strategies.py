# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from typing import Any, Callable, Generic, Iterator, List, TypeVar

from falsify.internal.random import Random
from falsify.internal.reflection import get_pretty_function_description
from falsify.internal.validation import check_callable, check_type

Ex = TypeVar("Ex")
T = TypeVar("T")


def identity(x):
    return x


class SearchStrategy(Generic[Ex]):
    """A SearchStrategy is an object that knows how to produce random values
    of some type and how to offer simpler versions of a value it produced.

    ``generate`` and ``shrink`` are all a strategy has to provide; the rest
    of the methods here are conveniences built on top of them. Strategies
    are immutable once built and may be freely shared between runs.
    """

    def generate(self, random: Random, size: int) -> Ex:
        raise NotImplementedError("%s.generate" % (type(self).__name__,))

    def shrink(self, value: Ex) -> Iterator[Ex]:
        """Return a finite iterator over values simpler than ``value``,
        simplest first. Must not consume any randomness."""
        raise NotImplementedError("%s.shrink" % (type(self).__name__,))

    def stringify(self, value: Ex) -> str:
        return repr(value)

    def map(
        self, pack: Callable[[Ex], T], unpack: Callable[[T], Ex] = None
    ) -> "SearchStrategy[T]":
        """Returns a new strategy that generates values by generating a value
        from this strategy and then calling pack() on the result, giving that.

        To shrink a mapped value it is first turned back into a value of
        this strategy with unpack(), which defaults to the identity. unpack
        must undo pack on every value this strategy generates.
        """
        return MappedStrategy(self, pack, unpack)

    def filter(self, condition: Callable[[Ex], Any]) -> "SearchStrategy[Ex]":
        """Returns a new strategy that generates values from this strategy
        which satisfy the provided condition.

        Generation retries until the condition holds, with no limit, so a
        condition that is never satisfied makes generation hang.
        """
        return FilteredStrategy(self, condition)

    def lists(self, *, min_size: int = 0) -> "SearchStrategy[List[Ex]]":
        from falsify.strategies._internal.collections import ListStrategy

        return ListStrategy(self, min_size=min_size)

    def optional(self, absent: Any = None) -> "SearchStrategy":
        from falsify.strategies._internal.sums import optional

        return optional(self, absent)

    def nullable(self) -> "SearchStrategy":
        return self.optional(None)

    def with_printer(self, stringify: Callable[[Ex], str]) -> "SearchStrategy[Ex]":
        """Returns the same strategy, rendering its values in reports with
        ``stringify`` instead of repr."""
        return PrintedStrategy(self, stringify)

    def sample(self, count=100, *, initial_size=0, delta=2, seed=None) -> List[Ex]:
        """Generate ``count`` values, the i-th one at size
        ``initial_size + i * delta``.

        This is for exploring what a strategy produces, not for testing.
        """
        check_type(int, count, "count")
        random = Random(seed)
        return [self.generate(random, initial_size + i * delta) for i in range(count)]

    def example(self, seed=None) -> Ex:
        """Provide an example of the sort of value that this strategy
        generates."""
        return self.sample(1, initial_size=10, seed=seed)[0]

    def check(self, test, *, seed=None, settings=None, reporter=None):
        """Run ``test`` against values from this strategy. See
        :func:`falsify.core.check`."""
        from falsify.core import check

        return check(self, test, seed=seed, settings=settings, reporter=reporter)

    def is_member(self, value: Any) -> bool:
        """Whether ``value`` is recognisably one of this strategy's values.

        Only strategies which can answer this exactly implement it; it lets
        them be used as unannotated branches of one_of.
        """
        raise NotImplementedError("%s.is_member" % (type(self).__name__,))

    @property
    def discriminates(self) -> bool:
        return type(self).is_member is not SearchStrategy.is_member


class MappedStrategy(SearchStrategy[T]):
    """A strategy which is defined purely by conversion to and from another
    strategy."""

    def __init__(self, strategy, pack, unpack=None):
        check_callable(pack, "pack")
        if unpack is not None:
            check_callable(unpack, "unpack")
        self.mapped_strategy = strategy
        self.pack = pack
        self.unpack = unpack or identity

    def __repr__(self):
        if not hasattr(self, "_cached_repr"):
            self._cached_repr = "%r.map(%s)" % (
                self.mapped_strategy,
                get_pretty_function_description(self.pack),
            )
        return self._cached_repr

    def generate(self, random, size):
        return self.pack(self.mapped_strategy.generate(random, size))

    def shrink(self, value):
        for simpler in self.mapped_strategy.shrink(self.unpack(value)):
            yield self.pack(simpler)


class FilteredStrategy(SearchStrategy[Ex]):
    def __init__(self, strategy, condition):
        check_callable(condition, "condition")
        self.filtered_strategy = strategy
        self.condition = condition

    def __repr__(self):
        if not hasattr(self, "_cached_repr"):
            self._cached_repr = "%r.filter(%s)" % (
                self.filtered_strategy,
                get_pretty_function_description(self.condition),
            )
        return self._cached_repr

    def generate(self, random, size):
        while True:
            value = self.filtered_strategy.generate(random, size)
            if self.condition(value):
                return value

    def shrink(self, value):
        for simpler in self.filtered_strategy.shrink(value):
            if self.condition(simpler):
                yield simpler

    def stringify(self, value):
        return self.filtered_strategy.stringify(value)


class PrintedStrategy(SearchStrategy[Ex]):
    def __init__(self, strategy, stringify):
        check_callable(stringify, "stringify")
        self.wrapped_strategy = strategy
        self._stringify = stringify

    def __repr__(self):
        return "%r.with_printer(%s)" % (
            self.wrapped_strategy,
            get_pretty_function_description(self._stringify),
        )

    def generate(self, random, size):
        return self.wrapped_strategy.generate(random, size)

    def shrink(self, value):
        return self.wrapped_strategy.shrink(value)

    def stringify(self, value):
        return self._stringify(value)

    def is_member(self, value):
        return self.wrapped_strategy.is_member(value)

    @property
    def discriminates(self):
        return self.wrapped_strategy.discriminates
