# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from falsify.errors import InvalidArgument, InvalidState
from falsify.internal.reflection import get_pretty_function_description
from falsify.internal.validation import check_callable
from falsify.strategies._internal.strategies import SearchStrategy


class DeferredStrategy(SearchStrategy):
    """A strategy which may be used before it is fully defined.

    The real strategy comes either from a zero-argument ``definition``
    called on first use, or from a single later call to :meth:`define`.
    Either way it is resolved exactly once, and using the strategy while it
    is still unresolved raises InvalidState.
    """

    def __init__(self, definition=None):
        if definition is not None:
            check_callable(definition, "definition")
        self.__wrapped_strategy = None
        self.__in_repr = False
        self.__definition = definition

    def define(self, strategy):
        """Resolve this strategy to ``strategy``. May only be called once, and
        only when no definition function was given."""
        if self.__wrapped_strategy is not None or self.__definition is not None:
            raise InvalidState("%r has already been defined" % (self,))
        self.__wrapped_strategy = self.__validate(strategy)

    def __validate(self, result):
        if result is self:
            raise InvalidArgument("Cannot define a deferred strategy to be itself")
        if not isinstance(result, SearchStrategy):
            raise InvalidArgument(
                "Expected definition to return a SearchStrategy but returned "
                "%r of type %s" % (result, type(result).__name__)
            )
        return result

    @property
    def wrapped_strategy(self):
        if self.__wrapped_strategy is None:
            if self.__definition is None:
                raise InvalidState(
                    "A forward declaration was used before define() was called"
                )
            self.__wrapped_strategy = self.__validate(self.__definition())
        return self.__wrapped_strategy

    @property
    def is_defined(self):
        return self.__wrapped_strategy is not None

    def __repr__(self):
        if self.__wrapped_strategy is not None:
            if self.__in_repr:
                return "(deferred@%r)" % (id(self),)
            try:
                self.__in_repr = True
                return repr(self.__wrapped_strategy)
            finally:
                self.__in_repr = False
        elif self.__definition is not None:
            return "deferred(%s)" % (
                get_pretty_function_description(self.__definition),
            )
        return "forward_declaration()"

    def generate(self, random, size):
        return self.wrapped_strategy.generate(random, size)

    def shrink(self, value):
        return self.wrapped_strategy.shrink(value)

    def stringify(self, value):
        return self.wrapped_strategy.stringify(value)

    def is_member(self, value):
        return self.wrapped_strategy.is_member(value)

    @property
    def discriminates(self):
        return self.wrapped_strategy.discriminates
