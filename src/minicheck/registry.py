# This file is part of minicheck, a small property-based testing library.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

"""Looking up the binding to use for a specifier.

A specifier is either a binding, a type, or a structure built from them:
``(int, str)`` means a tuple of an int and a string, ``[int]`` a list of
ints. ``typing.List[int]``, ``list[int]`` and ``typing.Tuple[int, str]`` mean
the same as their literal counterparts.

Types get a binding in one of two ways. Either it was registered with
register_binding, or the type declares its own: a classmethod
``arbitrary(random)`` returning a fresh instance and a method ``smaller()``
returning a smaller instance or None.

"""

import typing

from minicheck.errors import InvalidArgument, NoBindingAvailable
from minicheck.arbitrary import Arbitrary
from minicheck.bindings import text, lists, floats, tuples, booleans, \
    integers
from minicheck.internal.validation import check_type, check_binding

__all__ = [
    'binding_for', 'register_binding', 'has_intrinsic_binding',
]


registered_bindings = {}


def register_binding(typ, binding):
    """Use binding for every value of typ from now on.

    Subclasses of typ are not covered: a binding for a parent class would
    generate values that are not instances of the subclass.

    """
    check_type(type, typ, 'typ')
    check_binding(binding, 'binding')
    registered_bindings[typ] = binding


def has_intrinsic_binding(typ):
    return (
        callable(getattr(typ, 'arbitrary', None)) and
        callable(getattr(typ, 'smaller', None))
    )


def intrinsic_binding(typ):
    def shrink(value):
        return value.smaller()

    return Arbitrary(typ.arbitrary, shrink, name=typ.__name__)


def binding_for(specifier):
    """Returns the Arbitrary binding described by specifier, raising
    NoBindingAvailable if there is none."""
    if isinstance(specifier, Arbitrary):
        return specifier
    if isinstance(specifier, tuple):
        return tuples(*specifier)
    if isinstance(specifier, list):
        if len(specifier) != 1:
            raise InvalidArgument(
                'List specifiers must contain exactly one element '
                'specifier, but got %r' % (specifier,))
        return lists(specifier[0])

    origin = typing.get_origin(specifier)
    if origin is not None:
        return _binding_for_generic(specifier, origin)

    if isinstance(specifier, type):
        try:
            return registered_bindings[specifier]
        except KeyError:
            pass
        if has_intrinsic_binding(specifier):
            binding = intrinsic_binding(specifier)
            registered_bindings[specifier] = binding
            return binding
    raise NoBindingAvailable(specifier)


def _binding_for_generic(specifier, origin):
    args = typing.get_args(specifier)
    if origin is list and len(args) == 1:
        return lists(args[0])
    if origin is tuple and Ellipsis not in args:
        return tuples(*args)
    raise NoBindingAvailable(specifier)


register_binding(int, integers())
register_binding(bool, booleans())
register_binding(float, floats())
register_binding(str, text())
