# This file is part of minicheck, a small property-based testing library.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

from minicheck.bindings import just, text, lists, floats, tuples, \
    booleans, integers, characters

__all__ = ['standard_bindings']


standard_bindings = [
    integers(),
    integers(min_value=-3, max_value=3),
    floats(),
    floats(min_value=0.5, max_value=2.5),
    characters(),
    text(),
    lists(integers()),
    lists(text(), max_size=5),
    booleans(),
    just(u'hello'),
    tuples(integers(), text()),
    tuples(booleans(), lists(floats())),
]
