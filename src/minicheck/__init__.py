# This file is part of minicheck, a small property-based testing library.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

"""minicheck is a small library for property-based testing.

It checks a property against randomly generated values and, when one of
them falsifies it, shrinks that value to a smaller one that still does
before reporting it.

"""

from minicheck._settings import settings, Verbosity
from minicheck.version import __version_info__, __version__
from minicheck.arbitrary import Arbitrary
from minicheck.bindings import just, text, lists, builds, floats, tuples, \
    booleans, integers, characters
from minicheck.registry import binding_for, register_binding
from minicheck.core import Failed, Passed, find, check, for_all
from minicheck.internal.shrinker import shrink_loop


__all__ = [
    'settings',
    'Verbosity',
    'Arbitrary',
    'binding_for',
    'register_binding',
    'check',
    'for_all',
    'find',
    'shrink_loop',
    'Passed',
    'Failed',
    'integers',
    'floats',
    'characters',
    'text',
    'lists',
    'booleans',
    'just',
    'tuples',
    'builds',
    '__version__',
    '__version_info__',
]
