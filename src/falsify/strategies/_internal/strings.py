# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from enum import IntEnum

from falsify.strategies._internal.collections import ListStrategy
from falsify.strategies._internal.strategies import MappedStrategy, SearchStrategy

MIN_CODEPOINT = 0
MAX_CODEPOINT = 0x10FFFF
ASCII_MAX = 0x7F
LATIN1_MAX = 0xFF


class Category(IntEnum):
    """Code point classes, simplest first."""

    lowercase = 0
    uppercase = 1
    digit = 2
    other_ascii = 3
    latin1 = 4
    beyond_latin1 = 5


def category(c: int) -> Category:
    if c <= ASCII_MAX:
        if ord("a") <= c <= ord("z"):
            return Category.lowercase
        if ord("A") <= c <= ord("Z"):
            return Category.uppercase
        if ord("0") <= c <= ord("9"):
            return Category.digit
        return Category.other_ascii
    if c <= LATIN1_MAX:
        return Category.latin1
    return Category.beyond_latin1


def simplicity_key(c: int):
    return (category(c), c)


class CodePointStrategy(SearchStrategy):
    """Code points, half of them ASCII and the rest from Latin-1."""

    def __repr__(self):
        return "code_points()"

    def generate(self, random, size):
        if random.next_unit() < 0.5:
            return int(random.range(MIN_CODEPOINT, ASCII_MAX))
        return int(random.range(MIN_CODEPOINT, LATIN1_MAX))

    def shrink(self, value):
        c = max(MIN_CODEPOINT, min(MAX_CODEPOINT, int(value)))
        key = simplicity_key(c)
        candidates = (
            max(MIN_CODEPOINT, c - 1),
            c // 2,
            ord(" "),
            ord("\n"),
            ord("0"),
            ord("a"),
        )
        for candidate in candidates:
            if simplicity_key(candidate) < key:
                yield candidate


def _from_code_points(code_points):
    return "".join(map(chr, code_points))


def _to_code_points(string):
    return list(map(ord, string))


class TextStrategy(MappedStrategy):
    """Strings, generated and shrunk as lists of code points."""

    def __init__(self):
        super().__init__(
            ListStrategy(CodePointStrategy()),
            pack=_from_code_points,
            unpack=_to_code_points,
        )

    def __repr__(self):
        return "text()"
