# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Helpers for describing user supplied functions in reprs and reports."""

import ast
import inspect
import textwrap
import types
from functools import partial
from typing import Any

LAMBDA_DESCRIPTION_CACHE: "dict[Any, str]" = {}


def extract_all_lambdas(tree):
    lambdas = []

    class Visitor(ast.NodeVisitor):
        def visit_Lambda(self, node):
            lambdas.append(node)
            self.generic_visit(node)

    Visitor().visit(tree)
    return lambdas


def _lambda_description(f):
    sig = inspect.signature(f)

    def format_lambda(body):
        return (
            f"lambda {str(sig)[1:-1]}: {body}" if sig.parameters else f"lambda: {body}"
        )

    if_confused = format_lambda("<unknown>")

    try:
        source_lines, lineno0 = inspect.findsource(f)
    except (OSError, TypeError):
        return if_confused

    local_block = textwrap.dedent("".join(inspect.getblock(source_lines[lineno0:])))
    if local_block.startswith("."):
        # The common ".map(lambda x: ...)" continuation line is not valid
        # syntax on its own, but is once the leading dot is gone.
        local_block = local_block[1:]
    try:
        tree = ast.parse(local_block)
    except SyntaxError:
        return if_confused

    n_args = len(sig.parameters)
    sources = {
        format_lambda(ast.unparse(candidate.body))
        for candidate in extract_all_lambdas(tree)
        if len(candidate.args.args) + len(candidate.args.kwonlyargs) == n_args
    }
    if len(sources) == 1:
        return next(iter(sources))
    return if_confused


def lambda_description(f):
    try:
        return LAMBDA_DESCRIPTION_CACHE[f]
    except KeyError:
        pass
    description = _lambda_description(f)
    LAMBDA_DESCRIPTION_CACHE[f] = description
    return description


def get_pretty_function_description(f: object) -> str:
    if isinstance(f, partial):
        return "partial(%s)" % (get_pretty_function_description(f.func),)
    if not hasattr(f, "__name__"):
        return repr(f)
    name = f.__name__  # type: ignore
    if name == "<lambda>":
        return lambda_description(f)
    elif isinstance(f, (types.MethodType, types.BuiltinMethodType)):
        self = f.__self__
        if not (self is None or inspect.isclass(self) or inspect.ismodule(self)):
            return f"{self!r}.{name}"
    return name
