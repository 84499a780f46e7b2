# This file is part of minicheck, a small property-based testing library.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

import sys
import contextlib
from io import StringIO

from minicheck.reporting import default, with_reporter


@contextlib.contextmanager
def capture_out():
    old_out = sys.stdout
    try:
        new_out = StringIO()
        sys.stdout = new_out
        with with_reporter(default):
            yield new_out
    finally:
        sys.stdout = old_out


def shrink_chain(binding, value):
    """Every value reached by repeatedly shrinking value, in order, not
    including value itself."""
    chain = []
    current = binding.shrink(value)
    while current is not None:
        chain.append(current)
        current = binding.shrink(current)
    return chain


def halve_toward_zero(n, times):
    for _ in range(times):
        n = n // 2 if n >= 0 else -((-n) // 2)
    return n
