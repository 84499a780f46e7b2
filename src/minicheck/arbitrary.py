# This file is part of minicheck, a small property-based testing library.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

"""The Arbitrary binding: a pair of independent functions, one to generate
values of some type from a random source and one to propose a smaller
version of a given value.

Bindings are immutable once built. Anything that can be described as "how
do I make one of these, and how do I make it smaller" can be checked,
whether or not the type itself knows how to do either.

"""

from random import Random

import attr

from minicheck.internal.reflection import get_pretty_function_description


def never_shrink(value):
    return None


@attr.s(frozen=True, repr=False, eq=False)
class Arbitrary(object):
    """How to produce and shrink values of one type.

    ``generate`` is called with a :class:`random.Random` instance and must
    take all of its randomness from it. ``shrink`` is called with a value
    and returns a strictly smaller value, or None if the value is already
    as small as it gets. Repeatedly shrinking must always reach None.

    """

    generate = attr.ib()
    shrink = attr.ib(default=never_shrink)
    name = attr.ib(default=None)

    def __repr__(self):
        if self.name is not None:
            return self.name
        return 'Arbitrary(generate=%s, shrink=%s)' % (
            get_pretty_function_description(self.generate),
            get_pretty_function_description(self.shrink),
        )

    def example(self, random=None):
        """Returns a single value from this binding.

        This is intended for interactive exploration: use check() to
        actually test things.

        """
        return self.generate(random or Random())

    def map(self, pack, unpack=None):
        """Returns a binding for the values ``pack(x)`` where x comes from
        this binding.

        If ``unpack`` is given it must undo ``pack``, and the new binding
        shrinks by unpacking, shrinking and packing again. Without it the
        new binding never shrinks.

        """
        base = self

        def generate(random):
            return pack(base.generate(random))

        if unpack is None:
            shrink = never_shrink
        else:
            def shrink(value):
                smaller = base.shrink(unpack(value))
                if smaller is None:
                    return None
                return pack(smaller)

        return Arbitrary(
            generate, shrink,
            name='%r.map(%s)' % (self, get_pretty_function_description(pack)),
        )
