# This file is part of minicheck, a small property-based testing library.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

import threading

import pytest

from minicheck.errors import InvalidState, InvalidArgument
from minicheck._settings import settings, Verbosity


def test_has_docstrings():
    assert settings.verbosity.__doc__
    assert 'default value: 10' in settings.max_examples.__doc__


original_default = settings.get_profile('default').max_examples


def setup_function(fn):
    settings.load_profile('default')
    settings.register_profile('test_settings', settings())
    settings.load_profile('test_settings')


def test_default_number_of_examples_is_ten():
    assert original_default == 10


def test_cannot_set_non_settings():
    s = settings()
    with pytest.raises(AttributeError):
        s.max_exampels = 3


def test_settings_uses_defaults():
    s = settings()
    assert s.max_examples == settings.default.max_examples


def test_raises_attribute_error():
    with pytest.raises(AttributeError):
        settings().kittens


def test_settings_are_immutable():
    s = settings()
    with pytest.raises(AttributeError):
        s.max_examples = 3


def test_cannot_delete_settings():
    s = settings()
    with pytest.raises(AttributeError):
        del s.max_examples


def test_settings_can_be_used_as_context_manager_to_change_defaults():
    with settings(max_examples=12):
        assert settings.default.max_examples == 12
    assert settings.default.max_examples == original_default


def test_can_repeatedly_push_the_same_thing():
    s = settings(max_examples=12)
    t = settings(max_examples=17)
    assert settings().max_examples == original_default
    with s:
        assert settings().max_examples == 12
        with t:
            assert settings().max_examples == 17
            with s:
                assert settings().max_examples == 12
                with t:
                    assert settings().max_examples == 17
                assert settings().max_examples == 12
            assert settings().max_examples == 17
        assert settings().max_examples == 12
    assert settings().max_examples == original_default


def test_threads_entering_the_same_settings_restore_their_own_defaults():
    shared = settings(max_examples=5)
    outer = {'a': settings(max_examples=2), 'b': settings(max_examples=3)}
    barrier = threading.Barrier(2, timeout=10)
    seen = {}

    def run(name, first):
        with outer[name]:
            if not first:
                barrier.wait()
            with shared:
                if first:
                    barrier.wait()
                barrier.wait()
                if not first:
                    barrier.wait()
            if first:
                barrier.wait()
            seen[name] = settings.default

    threads = [
        threading.Thread(target=run, args=('a', True)),
        threading.Thread(target=run, args=('b', False)),
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert seen == outer


def test_new_threads_see_the_loaded_profile():
    settings.register_profile('threaded', settings(max_examples=21))
    settings.load_profile('threaded')
    seen = []
    thread = threading.Thread(
        target=lambda: seen.append(settings.default.max_examples))
    thread.start()
    thread.join()
    assert seen == [21]


def test_inherits_from_parent():
    parent = settings(max_examples=3, max_shrinks=7)
    child = settings(parent, max_examples=5)
    assert child.max_examples == 5
    assert child.max_shrinks == 7


def test_cannot_create_settings_with_invalid_options():
    with pytest.raises(InvalidArgument):
        settings(verbosity=u'loud')


def test_rejects_unknown_settings():
    with pytest.raises(InvalidArgument):
        settings(max_exampels=3)


@pytest.mark.parametrize('n', [0, -5, 2.5, True])
def test_rejects_bad_max_examples(n):
    with pytest.raises(InvalidArgument):
        settings(max_examples=n)


def test_rejects_bad_max_shrinks():
    with pytest.raises(InvalidArgument):
        settings(max_shrinks=0)


def test_cannot_define_settings_once_locked():
    with pytest.raises(InvalidState):
        settings.define_setting('fish', default=3, description='Fish')


def test_cannot_assign_default():
    with pytest.raises(AttributeError):
        settings.default = settings()


def test_can_load_profiles():
    settings.register_profile('few', settings(max_examples=2))
    settings.load_profile('few')
    assert settings.default.max_examples == 2


def test_loading_an_unknown_profile_fails():
    with pytest.raises(InvalidArgument):
        settings.load_profile('nonsense')


def test_repr_lists_every_setting():
    r = repr(settings(max_examples=3))
    assert r.startswith('settings(')
    assert 'max_examples=3' in r
    assert 'verbosity=Verbosity.normal' in r


def test_verbosity_ordering():
    assert Verbosity.quiet < Verbosity.normal < Verbosity.verbose
    assert Verbosity.debug >= Verbosity.verbose
    assert Verbosity.by_name('debug') is Verbosity.debug


def test_unknown_verbosity_name_fails():
    with pytest.raises(InvalidArgument):
        Verbosity.by_name('chatty')
