# This file is part of minicheck, a small property-based testing library.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

class MinicheckException(Exception):

    """Generic parent class for exceptions thrown by minicheck."""
    pass


class InvalidArgument(MinicheckException, TypeError):

    """Used to indicate that the arguments to a minicheck function were in
    some manner incorrect."""


class NoBindingAvailable(InvalidArgument):

    """No arbitrary binding is registered for the requested type, and none
    was supplied explicitly."""

    def __init__(self, specifier):
        super(NoBindingAvailable, self).__init__(
            'No binding available for %r. Register one with '
            'minicheck.registry.register_binding or pass an Arbitrary '
            'instance instead.' % (specifier,)
        )
        self.specifier = specifier


class InvalidState(MinicheckException):

    """The system is not in a state where you were allowed to do that."""


class PropertyError(MinicheckException):

    """The property under test raised an exception, or returned something
    other than a bool, instead of answering the question it was asked.

    This is a defect in the property, not a counterexample: the original
    exception (if any) is available as ``__cause__``.

    """

    def __init__(self, message, value):
        super(PropertyError, self).__init__(message)
        self.value = value


class ShrinkLoopExceeded(MinicheckException):

    """A shrink function kept producing failing candidates for longer than
    max_shrinks allows. This usually means the shrink function does not
    terminate, e.g. it returns its argument unchanged."""

    def __init__(self, last_value, steps):
        super(ShrinkLoopExceeded, self).__init__(
            'Shrinking did not terminate after %d steps. Last candidate '
            'was %r' % (steps, last_value)
        )
        self.last_value = last_value
        self.steps = steps


class Falsified(MinicheckException, AssertionError):

    """Raised by tests decorated with for_all when a counterexample was
    found. The full result is available as ``result``."""

    def __init__(self, result):
        super(Falsified, self).__init__(result.message)
        self.result = result


class NoSuchExample(MinicheckException):

    """The condition we have been asked to satisfy appears to be always false.

    This does not guarantee that no example exists, only that we were
    unable to find one.

    """

    def __init__(self, condition_string, extra=''):
        super(NoSuchExample, self).__init__(
            'No examples found of condition %s%s' % (
                condition_string, extra)
        )
