# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Unions of strategies.

The primitive here is :class:`VariantStrategy`, whose values remember which
branch produced them, so shrinking goes straight back to that branch.
:func:`one_of` builds the familiar untagged union on top of it by asking
each branch's predicate which branch a value belongs to.
"""

from typing import Any, Callable

import attr

from falsify.errors import InvalidArgument
from falsify.internal.reflection import get_pretty_function_description
from falsify.internal.validation import check_callable, check_strategy
from falsify.strategies._internal.misc import JustStrategy
from falsify.strategies._internal.strategies import MappedStrategy, SearchStrategy


@attr.s(frozen=True, slots=True)
class Variant:
    tag: int = attr.ib()
    value: Any = attr.ib()


@attr.s(frozen=True, slots=True)
class Branch:
    strategy: SearchStrategy = attr.ib()
    predicate: Callable[[Any], bool] = attr.ib()


class VariantStrategy(SearchStrategy):
    """Picks a branch uniformly, then draws from it, producing Variant values
    tagged with the index of the branch."""

    def __init__(self, strategies):
        strategies = tuple(strategies)
        if not strategies:
            raise InvalidArgument("A union requires at least one branch")
        for i, strategy in enumerate(strategies):
            check_strategy(strategy, "branches[%d]" % (i,))
        self.element_strategies = strategies

    def __repr__(self):
        return "variants(%s)" % ", ".join(map(repr, self.element_strategies))

    def generate(self, random, size):
        tag = int(random.next_unit() * len(self.element_strategies))
        return Variant(tag, self.element_strategies[tag].generate(random, size))

    def shrink(self, value):
        for simpler in self.element_strategies[value.tag].shrink(value.value):
            yield Variant(value.tag, simpler)

    def stringify(self, value):
        return self.element_strategies[value.tag].stringify(value.value)


def as_branch(branch):
    if isinstance(branch, Branch):
        return branch
    if isinstance(branch, tuple):
        if len(branch) != 2:
            raise InvalidArgument(
                "Expected a (strategy, predicate) pair but got %r" % (branch,)
            )
        strategy, predicate = branch
        check_strategy(strategy, "strategy")
        check_callable(predicate, "predicate")
        return Branch(strategy, predicate)
    check_strategy(branch, "branch")
    if not branch.discriminates:
        raise InvalidArgument(
            "%r cannot tell which values belong to it, so it must be given "
            "to one_of as a (strategy, predicate) pair" % (branch,)
        )
    return Branch(branch, branch.is_member)


def _variant_value(variant):
    return variant.value


class OneOfStrategy(MappedStrategy):
    """A union over branches whose predicates partition the values of the
    union: every value must be recognised by exactly one branch.

    Values which break that rule are reported with InvalidArgument when
    they are shrunk or rendered, rather than being shrunk by whichever
    branch happens to claim them first.
    """

    def __init__(self, branches):
        self.branches = tuple(map(as_branch, branches))
        super().__init__(
            VariantStrategy(b.strategy for b in self.branches),
            pack=_variant_value,
            unpack=self.to_variant,
        )

    def __repr__(self):
        bits = []
        for branch in self.branches:
            if branch.predicate == branch.strategy.is_member:
                bits.append(repr(branch.strategy))
            else:
                description = get_pretty_function_description(branch.predicate)
                bits.append("(%r, %s)" % (branch.strategy, description))
        return "one_of(%s)" % ", ".join(bits)

    def tag_of(self, value):
        tags = [i for i, b in enumerate(self.branches) if b.predicate(value)]
        if len(tags) != 1:
            raise InvalidArgument(
                "The branches of %r must recognise every value exactly once, "
                "but %r was recognised by %d of them" % (self, value, len(tags))
            )
        return tags[0]

    def to_variant(self, value):
        return Variant(self.tag_of(value), value)

    def stringify(self, value):
        return self.mapped_strategy.stringify(self.to_variant(value))

    def is_member(self, value):
        return any(b.predicate(value) for b in self.branches)


def optional(strategy, absent=None):
    """Either ``absent`` or a value from ``strategy``, which must never
    produce ``absent`` itself. Present values never shrink to ``absent``."""
    check_strategy(strategy, "strategy")
    return OneOfStrategy(
        [
            Branch(JustStrategy(absent), lambda value: value is absent),
            Branch(strategy, lambda value: value is not absent),
        ]
    )
