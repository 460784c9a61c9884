# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""The strategies falsify builds values from, and the combinators which
build new strategies out of existing ones."""

from typing import Any, Callable, Dict, Hashable, Sequence, Tuple, TypeVar, Union

from falsify.internal.validation import check_strategy, check_type
from falsify.strategies._internal.collections import (
    FixedDictStrategy,
    ListStrategy,
    TupleStrategy,
)
from falsify.strategies._internal.deferred import DeferredStrategy
from falsify.strategies._internal.misc import JustStrategy, SampledFromStrategy
from falsify.strategies._internal.numbers import IntegersStrategy, RealsStrategy
from falsify.strategies._internal.strategies import (
    FilteredStrategy,
    MappedStrategy,
    SearchStrategy,
)
from falsify.strategies._internal.strings import CodePointStrategy, TextStrategy
from falsify.strategies._internal.sums import (
    Branch,
    OneOfStrategy,
    Variant,
    VariantStrategy,
    optional as _optional,
)

__all__ = [
    "Branch",
    "SearchStrategy",
    "Variant",
    "code_points",
    "deferred",
    "filter",
    "fixed_dictionaries",
    "forward_declaration",
    "integers",
    "just",
    "lists",
    "map",
    "none",
    "nullable",
    "one_of",
    "optional",
    "reals",
    "sampled_from",
    "text",
    "tuples",
    "variants",
]

Ex = TypeVar("Ex")
T = TypeVar("T")

_integers = IntegersStrategy()
_reals = RealsStrategy()
_code_points = CodePointStrategy()
_text = TextStrategy()


def just(value: T) -> SearchStrategy[T]:
    """Return a strategy which only generates ``value``, and never shrinks
    it."""
    return JustStrategy(value)


def none() -> SearchStrategy[None]:
    """Return a strategy which only generates None."""
    return JustStrategy(None)


def sampled_from(elements: Sequence[T]) -> SearchStrategy[T]:
    """Returns a strategy which generates any value present in ``elements``.

    Values shrink towards the start of the sequence, so put the simplest
    choices first.
    """
    return SampledFromStrategy(elements)


def integers() -> SearchStrategy[int]:
    """Integers strictly between ``-size`` and ``size``, shrinking towards
    zero."""
    return _integers


def reals() -> SearchStrategy[float]:
    """Finite floats, shrinking first to their absolute value and then
    through the integers towards zero."""
    return _reals


def code_points() -> SearchStrategy[int]:
    """Code points from the ASCII and Latin-1 ranges.

    These shrink towards lowercase letters, then uppercase letters, then
    digits, then other ASCII characters, then the rest.
    """
    return _code_points


def text() -> SearchStrategy[str]:
    """Strings of :func:`code_points`, shrinking like :func:`lists` of
    them."""
    return _text


def lists(elements: SearchStrategy[Ex], *, min_size: int = 0) -> SearchStrategy[list]:
    """Lists of at least ``min_size`` values from ``elements``, and of at most
    about ``size`` of them.

    Shrinking only ever offers shorter lists: each halved prefix, and that
    prefix with one element shrunk. It never goes below ``min_size``.
    """
    return ListStrategy(elements, min_size=min_size)


def tuples(*strategies: SearchStrategy) -> SearchStrategy[tuple]:
    """Tuples with one element drawn from each of ``strategies``, shrinking
    one position at a time."""
    return TupleStrategy(strategies)


def fixed_dictionaries(
    mapping: Dict[Hashable, SearchStrategy],
) -> SearchStrategy[dict]:
    """Dicts with exactly the keys of ``mapping``, the value for each key
    drawn from the strategy it maps to.

    Keys must be sortable: they are always generated and shrunk in sorted
    order.
    """
    check_type(dict, mapping, "mapping")
    return FixedDictStrategy(mapping)


def map(
    strategy: SearchStrategy[Ex], pack: Callable[[Ex], T], unpack: Callable = None
) -> SearchStrategy[T]:
    """Functional form of :meth:`SearchStrategy.map`."""
    check_strategy(strategy, "strategy")
    return MappedStrategy(strategy, pack, unpack)


def filter(strategy: SearchStrategy[Ex], condition: Callable) -> SearchStrategy[Ex]:
    """Functional form of :meth:`SearchStrategy.filter`."""
    check_strategy(strategy, "strategy")
    return FilteredStrategy(strategy, condition)


def variants(*strategies: SearchStrategy) -> SearchStrategy[Variant]:
    """Generates :class:`Variant` values: the index of a uniformly chosen
    strategy, and a value drawn from it.

    The tag is kept through shrinking, so a variant only ever shrinks
    within the branch that produced it.
    """
    return VariantStrategy(strategies)


BranchLike = Union[Branch, Tuple[SearchStrategy, Callable[[Any], bool]], SearchStrategy]


def one_of(*branches: BranchLike) -> SearchStrategy:
    """Return a strategy which generates values from any of the branches,
    chosen uniformly.

    Each branch is a ``(strategy, predicate)`` pair, where the predicate
    recognises the values of that branch. The predicates must partition the
    values of the union: each value has to be recognised by exactly one of
    them, and a value which is not raises InvalidArgument when it is shrunk.
    Strategies that can recognise their own values, such as :func:`just`
    and :func:`sampled_from`, may be passed without a predicate.
    """
    return OneOfStrategy(branches)


def optional(strategy: SearchStrategy[Ex], absent: Any = None) -> SearchStrategy:
    """Either ``absent`` or a value from ``strategy``."""
    return _optional(strategy, absent)


def nullable(strategy: SearchStrategy[Ex]) -> SearchStrategy:
    """Either None or a value from ``strategy``."""
    return _optional(strategy, None)


def deferred(definition: Callable[[], SearchStrategy[Ex]]) -> SearchStrategy[Ex]:
    """A strategy which is defined by calling ``definition`` the first time it
    is used. This allows strategies to refer to themselves, for recursive
    data such as trees.

    >>> trees = deferred(lambda: one_of(
    ...     (integers(), lambda x: isinstance(x, int)),
    ...     (tuples(trees), lambda x: isinstance(x, tuple)),
    ... ))
    """
    return DeferredStrategy(definition)


def forward_declaration() -> DeferredStrategy:
    """A strategy to be defined later with its ``define`` method. Using it
    before then raises InvalidState."""
    return DeferredStrategy()
