# This file is part of minicheck, a small property-based testing library.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

"""This file can approximately be considered the collection of minicheck
going to unreasonable lengths to produce pretty output."""

import ast
import types
import hashlib
import inspect


def function_digest(function):
    """Returns a string that is stable across multiple invocations across
    multiple processes and is prone to changing significantly in response to
    minor changes to the function.

    No guarantee of uniqueness though it usually will be.

    """
    hasher = hashlib.md5()
    try:
        hasher.update(inspect.getsource(function).encode('utf-8'))
    except (OSError, TypeError):
        pass
    try:
        hasher.update(function.__name__.encode('utf-8'))
    except AttributeError:
        pass
    try:
        hasher.update(function.__module__.encode('utf-8'))
    except (AttributeError, TypeError):
        pass
    return hasher.digest()


lambda_source_cache = {}


def extract_lambda_source(f):
    try:
        return lambda_source_cache[f.__code__]
    except KeyError:
        pass
    result = _extract_lambda_source(f)
    lambda_source_cache[f.__code__] = result
    return result


def _unknown_lambda(f):
    args = inspect.signature(f).parameters
    return 'lambda %s: <unknown>' % (', '.join(args),)


def _extract_lambda_source(f):
    """Extracts a single lambda expression from the source of the line it
    was defined on. Returns a string indicating an unknown body if it gets
    confused in any way.

    When several lambdas share a line the first one wins, which is not
    always the right one.

    """
    try:
        source = inspect.getsource(f)
    except (OSError, TypeError):
        return _unknown_lambda(f)
    source = ' '.join(source.split())
    start = source.find('lambda')
    if start < 0:
        return _unknown_lambda(f)
    source = source[start:]
    for end in range(len(source), 0, -1):
        candidate = source[:end].strip()
        try:
            tree = ast.parse(candidate)
        except SyntaxError:
            continue
        if (
            len(tree.body) == 1 and
            isinstance(tree.body[0], ast.Expr) and
            isinstance(tree.body[0].value, ast.Lambda)
        ):
            return ast.unparse(tree.body[0].value)
    return _unknown_lambda(f)


def get_pretty_function_description(f):
    if not hasattr(f, '__name__'):
        return repr(f)
    name = f.__name__
    if name == '<lambda>':
        return extract_lambda_source(f)
    elif isinstance(f, types.MethodType):
        self = f.__self__
        if not (self is None or inspect.isclass(self)):
            return '%r.%s' % (self, name)
    return name


def nicerepr(v):
    if inspect.isfunction(v):
        return get_pretty_function_description(v)
    elif isinstance(v, type):
        return v.__name__
    else:
        return repr(v)


def impersonate(target):
    """Decorator to update the attributes of a function so that to external
    introspectors it will appear to be the target function, apart from its
    signature.

    Unlike functools.wraps this does not set ``__wrapped__``, so pytest
    does not go looking for fixtures named after the target's arguments.

    """
    def accept(f):
        f.__name__ = target.__name__
        f.__qualname__ = getattr(target, '__qualname__', target.__name__)
        f.__module__ = target.__module__
        f.__doc__ = target.__doc__
        return f
    return accept
