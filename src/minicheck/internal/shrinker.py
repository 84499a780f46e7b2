# This file is part of minicheck, a small property-based testing library.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

from minicheck.errors import ShrinkLoopExceeded


def shrink_loop(initial, still_fails, shrink, max_shrinks=None,
                on_shrink=None):
    """Starting from a value known to fail, repeatedly replace it with its
    shrink for as long as the shrink still fails, and return the last value
    that did.

    This is a greedy descent down a single path: once a shrink stops
    failing we stop, without trying anything else from the current value.

    If more than max_shrinks shrinks in a row keep failing the shrink
    function is presumed not to terminate and ShrinkLoopExceeded is raised.
    on_shrink, if given, is called with every accepted shrink.

    """
    if max_shrinks is None:
        from minicheck._settings import settings
        max_shrinks = settings.default.max_shrinks

    candidate = initial
    steps = 0
    while True:
        smaller = shrink(candidate)
        if smaller is None or not still_fails(smaller):
            return candidate
        if steps >= max_shrinks:
            raise ShrinkLoopExceeded(smaller, steps)
        candidate = smaller
        steps += 1
        if on_shrink is not None:
            on_shrink(candidate)
