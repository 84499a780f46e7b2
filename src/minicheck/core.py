# This file is part of minicheck, a small property-based testing library.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

"""This module provides the core primitives of minicheck: check, for_all
and find."""

from random import Random, getrandbits

import attr

from minicheck.errors import Falsified, PropertyError, NoSuchExample, \
    InvalidArgument
from minicheck._settings import settings as Settings
from minicheck.bindings import tuples
from minicheck.registry import binding_for
from minicheck.reporting import report, debug_report, verbose_report
from minicheck.internal.shrinker import shrink_loop
from minicheck.internal.reflection import nicerepr, impersonate, \
    function_digest, get_pretty_function_description
from minicheck.internal.validation import check_valid_examples


def new_random():
    return Random(getrandbits(128))


@attr.s(frozen=True)
class Passed(object):
    """Every one of ``trials`` generated examples satisfied the property."""

    label = attr.ib()
    trials = attr.ib()
    seed = attr.ib(default=None)

    is_success = True

    @property
    def message(self):
        return u'"%s" passed %d tests.' % (self.label, self.trials)


@attr.s(frozen=True)
class Failed(object):
    """The property was falsified.

    ``counterexample`` is the smallest falsifying value shrinking found and
    ``original`` the value that first falsified it, on trial number
    ``trials``. ``shrinks`` counts the steps between the two.

    """

    label = attr.ib()
    counterexample = attr.ib()
    original = attr.ib()
    trials = attr.ib()
    shrinks = attr.ib()
    seed = attr.ib(default=None)

    is_success = False

    @property
    def message(self):
        return u'"%s" doesn\'t hold: %s' % (
            self.label, nicerepr(self.counterexample))


def get_random_for_property(property, settings, random=None, seed=None):
    """Returns a pair of the random source to check property with and the
    seed it was built from, if we built it."""
    if random is not None:
        if seed is not None:
            raise InvalidArgument(
                'Cannot pass both random=%r and seed=%r' % (random, seed))
        return random, None
    if seed is None:
        if settings.derandomize:
            seed = function_digest(property)
        else:
            seed = getrandbits(128)
    return Random(seed), seed


def _holds(property, value, label):
    try:
        result = property(value)
    except Exception as e:
        raise PropertyError(
            'Property %s raised %s on %s' % (
                label, type(e).__name__, nicerepr(value)),
            value,
        ) from e
    if not isinstance(result, bool):
        raise PropertyError(
            'Property %s returned %s of type %s on %s, but properties must '
            'return a bool' % (
                label, nicerepr(result), type(result).__name__,
                nicerepr(value)),
            value,
        )
    return result


def check(
    specifier, property, max_examples=None, label=None, settings=None,
    random=None, seed=None,
):
    """Check property against max_examples values generated from the
    binding for specifier, returning Passed or Failed.

    The first value that falsifies the property is shrunk for as long as
    its shrinks keep falsifying it, and the result carries the last one.
    An exception raised by the property is not a falsification: it is
    reported as a PropertyError.

    """
    binding = binding_for(specifier)
    if not callable(property):
        raise InvalidArgument(
            'Expected a callable property but got %r' % (property,))
    settings = settings or Settings.default
    if max_examples is None:
        max_examples = settings.max_examples
    check_valid_examples(max_examples)
    if label is None:
        label = get_pretty_function_description(property)

    random, seed = get_random_for_property(property, settings, random, seed)

    with settings:
        debug_report(lambda: u'Checking %s with seed %r' % (label, seed))
        for trial in range(1, max_examples + 1):
            value = binding.generate(random)
            verbose_report(lambda: u'Trying example %s' % (nicerepr(value),))
            if _holds(property, value, label):
                continue

            verbose_report(
                lambda: u'Falsified on trial %d by %s' % (
                    trial, nicerepr(value)))
            shrinks = [0]

            def note_shrink(smaller):
                shrinks[0] += 1
                verbose_report(
                    lambda: u'Shrunk example to %s' % (nicerepr(smaller),))

            minimal = shrink_loop(
                value,
                lambda v: not _holds(property, v, label),
                binding.shrink,
                max_shrinks=settings.max_shrinks,
                on_shrink=note_shrink,
            )
            result = Failed(
                label=label, counterexample=minimal, original=value,
                trials=trial, shrinks=shrinks[0], seed=seed,
            )
            report(result.message)
            return result

        result = Passed(label=label, trials=max_examples, seed=seed)
        report(result.message)
        return result


def find(specifier, condition, settings=None, random=None):
    """Returns the smallest example from the binding for ``specifier``
    that satisfies the predicate function ``condition``, as far as
    shrinking can tell."""
    settings = settings or Settings(max_examples=2000)
    binding = binding_for(specifier)
    random = random or new_random()
    label = get_pretty_function_description(condition)

    with settings:
        for _ in range(settings.max_examples):
            value = binding.generate(random)
            if _holds(condition, value, label):
                return shrink_loop(
                    value,
                    lambda v: _holds(condition, v, label),
                    binding.shrink,
                    max_shrinks=settings.max_shrinks,
                )
    raise NoSuchExample(label)


def is_minicheck_test(test):
    return getattr(test, 'is_minicheck_test', False)


def for_all(*specifiers, **kwargs):
    """A decorator for turning a property into a test that takes no
    arguments.

    The decorated function is called with one positional argument per
    specifier. It may either return a bool or, in the style of a normal
    test, return None and make assertions: a failed assertion counts as a
    falsification. When the property is falsified the test raises
    Falsified with the shrunk counterexample.

    Any keyword arguments are passed through to check(). A settings
    argument takes priority over a settings decorator on the test.

    """
    if not specifiers:
        raise InvalidArgument('for_all() needs at least one specifier')
    if len(specifiers) == 1:
        binding = binding_for(specifiers[0])
    else:
        binding = tuples(*specifiers)
    arity = len(specifiers)
    label = kwargs.pop('label', None)
    given_settings = kwargs.pop('settings', None)

    def accept(test):
        def property(value):
            args = value if arity > 1 else (value,)
            try:
                result = test(*args)
            except AssertionError:
                return False
            if result is None:
                return True
            return result

        @impersonate(test)
        def wrapped_test():
            settings = given_settings or getattr(
                wrapped_test, '_minicheck_internal_use_settings',
                getattr(test, '_minicheck_internal_use_settings', None)
            ) or Settings.default
            check_kwargs = dict(kwargs)
            if settings.derandomize and not (
                'seed' in check_kwargs or 'random' in check_kwargs
            ):
                check_kwargs['seed'] = function_digest(test)
            result = check(
                binding, property,
                label=label or get_pretty_function_description(test),
                settings=settings, **check_kwargs
            )
            if not result.is_success:
                raise Falsified(result)

        wrapped_test.is_minicheck_test = True
        wrapped_test.minicheck_binding = binding
        return wrapped_test
    return accept
