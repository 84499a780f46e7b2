# This file is part of minicheck, a small property-based testing library.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

"""Built-in bindings for the types minicheck knows about out of the box.

Default ranges are small, so failures stay readable and arithmetic in
properties stays well clear of overflow.

"""

from minicheck.errors import InvalidArgument
from minicheck.arbitrary import Arbitrary, never_shrink
from minicheck.internal.reflection import nicerepr
from minicheck.internal.validation import check_type, check_binding, \
    check_valid_size, check_valid_bound, check_valid_interval

__all__ = [
    'integers', 'floats', 'characters', 'text', 'lists', 'booleans',
    'just', 'tuples', 'builds',
]


DEFAULT_MIN_INT = -10000
DEFAULT_MAX_INT = 10000

DEFAULT_MIN_FLOAT = -10000.0
DEFAULT_MAX_FLOAT = 10000.0

# '0' to 'y'. Digits, letters and a handful of punctuation only, so that
# counterexamples can be read at a glance.
DEFAULT_MIN_CODEPOINT = 48
DEFAULT_MAX_CODEPOINT = 121

MAX_UNICODE = 0x10ffff

DEFAULT_MAX_TEXT_SIZE = 40
DEFAULT_MAX_LIST_SIZE = 50


def _shrink_target(min_value, max_value, zero):
    """The point of the interval closest to zero."""
    return min(max(zero, min_value), max_value)


def integers(min_value=DEFAULT_MIN_INT, max_value=DEFAULT_MAX_INT):
    """Returns a binding which generates integers uniformly between
    min_value and max_value inclusive.

    Examples from this binding shrink by halving their distance to zero
    (or to whichever bound is closest to zero, if zero is out of range),
    rounding toward it, so a value n reaches zero in floor(log2(|n|)) + 1
    steps.

    """
    check_type(int, min_value, 'min_value')
    check_type(int, max_value, 'max_value')
    check_valid_bound(min_value, 'min_value')
    check_valid_bound(max_value, 'max_value')
    check_valid_interval(min_value, max_value, 'min_value', 'max_value')

    target = _shrink_target(min_value, max_value, 0)

    def generate(random):
        return random.randint(min_value, max_value)

    def shrink(value):
        if value == target:
            return None
        distance = value - target
        if distance >= 0:
            return target + distance // 2
        else:
            return target - (-distance) // 2

    return Arbitrary(
        generate, shrink,
        name='integers(min_value=%r, max_value=%r)' % (min_value, max_value),
    )


def floats(min_value=DEFAULT_MIN_FLOAT, max_value=DEFAULT_MAX_FLOAT):
    """Returns a binding which generates floats uniformly between
    min_value and max_value.

    Examples from this binding shrink by halving their distance to zero
    (or to the bound closest to zero). Halving a float eventually underflows
    to exactly zero, so this always terminates.

    """
    check_valid_bound(min_value, 'min_value')
    check_valid_bound(max_value, 'max_value')
    check_valid_interval(min_value, max_value, 'min_value', 'max_value')
    min_value = float(min_value)
    max_value = float(max_value)

    target = _shrink_target(min_value, max_value, 0.0)

    def generate(random):
        return random.uniform(min_value, max_value)

    def shrink(value):
        if value == target:
            return None
        smaller = target + (value - target) / 2
        if smaller == value:
            # Less than one ulp away from a non-zero target.
            return target
        return smaller

    return Arbitrary(
        generate, shrink,
        name='floats(min_value=%r, max_value=%r)' % (min_value, max_value),
    )


def characters(
    min_codepoint=DEFAULT_MIN_CODEPOINT, max_codepoint=DEFAULT_MAX_CODEPOINT
):
    """Returns a binding which generates single character strings with code
    points uniformly between min_codepoint and max_codepoint inclusive.

    Characters do not shrink.

    """
    check_type(int, min_codepoint, 'min_codepoint')
    check_type(int, max_codepoint, 'max_codepoint')
    check_valid_interval(0, min_codepoint, '0', 'min_codepoint')
    check_valid_interval(min_codepoint, max_codepoint,
                         'min_codepoint', 'max_codepoint')
    check_valid_interval(max_codepoint, MAX_UNICODE,
                         'max_codepoint', str(MAX_UNICODE))

    def generate(random):
        return chr(random.randint(min_codepoint, max_codepoint))

    return Arbitrary(
        generate, never_shrink,
        name='characters(min_codepoint=%r, max_codepoint=%r)' % (
            min_codepoint, max_codepoint),
    )


def text(alphabet=None, max_size=DEFAULT_MAX_TEXT_SIZE):
    """Returns a binding which generates strings whose length is uniform in
    [0, max_size), with each character drawn from alphabet (characters()
    by default).

    Examples from this binding shrink by dropping their first character.

    """
    if alphabet is None:
        alphabet = characters()
    check_binding(alphabet, 'alphabet')
    check_valid_size(max_size, 'max_size')

    def generate(random):
        length = random.randint(0, max_size - 1)
        return ''.join(alphabet.generate(random) for _ in range(length))

    def shrink(value):
        if not value:
            return None
        return value[1:]

    return Arbitrary(
        generate, shrink,
        name='text(alphabet=%r, max_size=%r)' % (alphabet, max_size),
    )


def lists(elements, max_size=DEFAULT_MAX_LIST_SIZE):
    """Returns a binding which generates lists whose length is uniform in
    [0, max_size), with every element drawn independently from elements.

    elements may be anything binding_for accepts, e.g. ``int`` or another
    binding.

    Examples from this binding shrink by dropping their last element.

    """
    from minicheck.registry import binding_for

    elements = binding_for(elements)
    check_valid_size(max_size, 'max_size')

    def generate(random):
        length = random.randint(0, max_size - 1)
        return [elements.generate(random) for _ in range(length)]

    def shrink(value):
        if not value:
            return None
        return list(value[:-1])

    return Arbitrary(
        generate, shrink,
        name='lists(%r, max_size=%r)' % (elements, max_size),
    )


def booleans():
    """Returns a binding which generates True and False with equal
    probability. True shrinks to False."""

    def generate(random):
        return random.randint(0, 1) == 1

    def shrink(value):
        if value:
            return False
        return None

    return Arbitrary(generate, shrink, name='booleans()')


def just(value):
    """Returns a binding which always generates value, and never
    shrinks."""

    def generate(random):
        return value

    return Arbitrary(generate, never_shrink, name='just(%s)' % (
        nicerepr(value),))


def tuples(*args):
    """Returns a binding which generates a tuple of the same length as args
    by generating the value at index i from args[i].

    Each component shrinks independently: a single shrink of the tuple
    shrinks every component that still can and leaves the others as they
    are. The tuple is minimal only once every component is.

    """
    from minicheck.registry import binding_for

    components = tuple(binding_for(a) for a in args)

    def generate(random):
        return tuple(c.generate(random) for c in components)

    def shrink(value):
        if len(value) != len(components):
            raise InvalidArgument(
                'Cannot shrink %r with a binding for tuples of length %d' % (
                    value, len(components)))
        smaller = [c.shrink(v) for c, v in zip(components, value)]
        if all(s is None for s in smaller):
            return None
        return tuple(
            v if s is None else s
            for v, s in zip(value, smaller)
        )

    return Arbitrary(generate, shrink, name='tuples(%s)' % (
        ', '.join(map(repr, components)),))


def builds(target, *args, unbuild=None):
    """Returns a binding which generates ``target(*values)`` where each of
    the values is drawn from the corresponding entry of args.

    Pass ``unbuild``, a function from a target value back to the tuple of
    arguments that built it, to make the result shrinkable.

    """
    from minicheck.registry import binding_for

    if not callable(target):
        raise InvalidArgument('Expected a callable but got target=%r' % (
            target,))
    components = [binding_for(a) for a in args]

    def pack(values):
        return target(*values)

    binding = tuples(*components).map(pack, unbuild)
    return Arbitrary(binding.generate, binding.shrink, name='builds(%s)' % (
        ', '.join([nicerepr(target)] + [repr(c) for c in components]),))
