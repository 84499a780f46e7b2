# This file is part of minicheck, a small property-based testing library.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

import enum
import typing
from random import Random

import pytest

from minicheck import Arbitrary, check
from minicheck.errors import InvalidArgument, NoBindingAvailable
from minicheck.bindings import just, integers
from minicheck.registry import binding_for, register_binding, \
    has_intrinsic_binding, registered_bindings


class Fraction(object):
    """Declares its own binding."""

    def __init__(self, numerator, denominator):
        self.numerator = numerator
        self.denominator = denominator

    @classmethod
    def arbitrary(cls, random):
        return cls(random.randint(0, 100), random.randint(1, 100))

    def smaller(self):
        if self.numerator == 0:
            return None
        return Fraction(self.numerator // 2, self.denominator)

    def __repr__(self):
        return 'Fraction(%d, %d)' % (self.numerator, self.denominator)


def test_arbitrary_instances_are_returned_unchanged():
    binding = integers()
    assert binding_for(binding) is binding


@pytest.mark.parametrize('typ', [int, float, str, bool])
def test_builtin_types_have_bindings(typ):
    value = binding_for(typ).generate(Random(0))
    assert type(value) is typ


def test_bool_is_not_generated_as_int():
    random = Random(0)
    assert {binding_for(bool).generate(random) for _ in range(50)} == {
        True, False}


def test_tuple_specifiers():
    value = binding_for((int, str)).generate(Random(0))
    assert isinstance(value, tuple)
    assert isinstance(value[0], int)
    assert isinstance(value[1], str)


def test_list_specifiers():
    value = binding_for([int]).generate(Random(0))
    assert isinstance(value, list)
    assert all(isinstance(x, int) for x in value)


def test_nested_specifiers():
    value = binding_for([(bool, [str])]).generate(Random(1))
    for flag, strings in value:
        assert isinstance(flag, bool)
        assert all(isinstance(s, str) for s in strings)


@pytest.mark.parametrize('specifier', [
    typing.List[int], list[int],
])
def test_generic_list_specifiers(specifier):
    binding = binding_for(specifier)
    assert binding.shrink([1, 2]) == [1]


def test_generic_tuple_specifiers():
    binding = binding_for(typing.Tuple[int, str])
    assert binding.shrink((4, u'ab')) == (2, u'b')


def test_variable_length_tuple_specifiers_are_rejected():
    with pytest.raises(NoBindingAvailable):
        binding_for(typing.Tuple[int, ...])


@pytest.mark.parametrize('specifier', [[], [int, str]])
def test_list_specifiers_need_exactly_one_element(specifier):
    with pytest.raises(InvalidArgument):
        binding_for(specifier)


@pytest.mark.parametrize('specifier', [object, complex, 3, None, {int: str}])
def test_unknown_specifiers_are_rejected(specifier):
    with pytest.raises(NoBindingAvailable) as e:
        binding_for(specifier)
    assert e.value.specifier == specifier


def test_no_binding_available_is_an_invalid_argument():
    assert issubclass(NoBindingAvailable, InvalidArgument)


def test_intrinsic_bindings_are_used():
    assert has_intrinsic_binding(Fraction)
    binding = binding_for(Fraction)
    value = binding.generate(Random(0))
    assert isinstance(value, Fraction)
    assert binding.shrink(Fraction(0, 3)) is None
    assert binding.shrink(Fraction(5, 3)).numerator == 2


def test_intrinsic_bindings_are_built_once():
    assert binding_for(Fraction) is binding_for(Fraction)


def test_intrinsic_bindings_shrink_in_checks():
    result = check(
        Fraction, lambda f: f.numerator < 10, max_examples=200, seed=0)
    assert not result.is_success
    assert 10 <= result.counterexample.numerator < 20


def test_can_register_a_binding_for_a_new_type():
    class Colour(object):
        def __init__(self, name):
            self.name = name

    register_binding(Colour, just(Colour(u'red')))
    assert binding_for(Colour).generate(Random(0)).name == u'red'


class Meters(int):
    pass


class Colour(enum.IntEnum):
    red = 1
    green = 2


@pytest.mark.parametrize('typ', [Meters, Colour])
def test_subclasses_of_builtin_types_have_no_binding(typ):
    with pytest.raises(NoBindingAvailable) as e:
        binding_for(typ)
    assert e.value.specifier is typ


def test_subclasses_do_not_inherit_a_registered_binding():
    class Base(object):
        pass

    class Child(Base):
        pass

    register_binding(Base, just(Base()))
    with pytest.raises(NoBindingAvailable):
        binding_for(Child)


def test_subclasses_can_be_registered_separately():
    register_binding(Meters, integers(min_value=0).map(Meters, int))
    try:
        value = binding_for(Meters).generate(Random(0))
        assert type(value) is Meters
    finally:
        del registered_bindings[Meters]


def test_intrinsic_bindings_are_inherited_with_their_class():
    class ProperFraction(Fraction):
        pass

    value = binding_for(ProperFraction).generate(Random(0))
    assert type(value) is ProperFraction


def test_register_binding_validates_arguments():
    with pytest.raises(InvalidArgument):
        register_binding(u'int', integers())
    with pytest.raises(InvalidArgument):
        register_binding(int, lambda random: 1)


def test_registered_bindings_can_be_arbitrary_instances():
    class Token(object):
        pass

    binding = Arbitrary(lambda random: Token())
    register_binding(Token, binding)
    assert binding_for([Token]).generate(Random(0)) is not None
