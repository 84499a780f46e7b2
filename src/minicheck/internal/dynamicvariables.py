# This file is part of minicheck, a small property-based testing library.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

import threading
from contextlib import contextmanager


class DynamicVariable(object):
    """A value that can be rebound for the duration of a with block.

    Bindings are per thread. A thread that has never bound the variable sees
    ``default``, or, if ``compute_default`` is given, the result of calling
    it. A computed default is remembered for the thread unless it is None.

    """

    def __init__(self, default=None, compute_default=None):
        self.default = default
        self.compute_default = compute_default
        self.data = threading.local()

    @property
    def value(self):
        try:
            return self.data.value
        except AttributeError:
            pass
        if self.compute_default is None:
            return self.default
        result = self.compute_default()
        if result is not None:
            self.data.value = result
        return result

    @value.setter
    def value(self, value):
        self.data.value = value

    @contextmanager
    def with_value(self, value):
        old_value = self.value
        try:
            self.data.value = value
            yield
        finally:
            self.data.value = old_value
