# This file is part of minicheck, a small property-based testing library.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

import math
from numbers import Real

from minicheck.errors import InvalidArgument


def check_type(typ, arg, name=''):
    if name:
        name += '='
    if not isinstance(arg, typ):
        if isinstance(typ, type):
            typ_string = typ.__name__
        else:
            typ_string = 'one of %s' % (
                ', '.join(t.__name__ for t in typ))
        raise InvalidArgument('Expected %s but got %s%r (type=%s)'
                              % (typ_string, name, arg, type(arg).__name__))


def check_integer(value, name):
    # bool is an int subclass, but max_examples=True is never intended.
    if isinstance(value, bool):
        raise InvalidArgument(
            'Expected int but got %s=%r (type=bool)' % (name, value))
    check_type(int, value, name)


def check_valid_bound(value, name):
    """Checks that value is a finite real number usable as an interval
    bound.

    Otherwise raises InvalidArgument.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgument(
            'Expected a number but got %s=%r (type=%s)' % (
                name, value, type(value).__name__))
    if math.isnan(value) or math.isinf(value):
        raise InvalidArgument(u'Invalid end point %s=%r' % (name, value))


def check_valid_interval(lower_bound, upper_bound, lower_name, upper_name):
    """Checks that lower_bound and upper_bound define a valid interval on the
    number line.

    Otherwise raises InvalidArgument.
    """
    if upper_bound < lower_bound:
        raise InvalidArgument(
            'Cannot have %s=%r < %s=%r' % (
                upper_name, upper_bound, lower_name, lower_bound
            ))


def check_valid_size(value, name):
    """Checks that value is an exclusive upper bound on a length, i.e. an
    integer >= 1 so that at least the empty collection can be drawn."""
    check_integer(value, name)
    if value < 1:
        raise InvalidArgument(u'Invalid size %s=%r < 1' % (name, value))


def check_valid_examples(value, name='max_examples'):
    check_integer(value, name)
    if value < 1:
        raise InvalidArgument(
            '%s=%r should be at least one. A property checked against no '
            'examples has not been checked at all.' % (name, value))


def check_binding(arg, name=''):
    from minicheck.arbitrary import Arbitrary
    check_type(Arbitrary, arg, name)
