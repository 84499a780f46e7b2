# This file is part of minicheck, a small property-based testing library.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

"""A module controlling settings for minicheck to use when checking
properties.

Either an explicit settings object can be used or the default object on
this module can be modified.

"""

import os
import inspect
import threading

import attr

from minicheck.errors import InvalidState, InvalidArgument
from minicheck.internal.validation import check_valid_examples
from minicheck.internal.dynamicvariables import DynamicVariable

__all__ = [
    'settings',
]


all_settings = {}

not_set = object()


class settingsProperty(object):

    def __init__(self, name):
        self.name = name

    def __get__(self, obj, type=None):
        if obj is None:
            return self
        else:
            try:
                return obj.__dict__[self.name]
            except KeyError:
                raise AttributeError(self.name)

    def __set__(self, obj, value):
        obj.__dict__[self.name] = value

    def __delete__(self, obj):
        raise AttributeError('Cannot delete attribute %s' % (self.name,))

    @property
    def __doc__(self):
        description = all_settings[self.name].description
        default = repr(getattr(settings.default, self.name))
        return '\n\n'.join([description, 'default value: %s' % (default,)])


def _current_profile_settings():
    name = getattr(settings, '_current_profile', None)
    if name is None:
        return None
    return settings.get_profile(name)


default_variable = DynamicVariable(compute_default=_current_profile_settings)


class settingsMeta(type):

    @property
    def default(self):
        return default_variable.value

    @default.setter
    def default(self, value):
        raise AttributeError('Cannot assign settings.default')

    def _assign_default_internal(self, value):
        default_variable.value = value


class settings(metaclass=settingsMeta):
    """A settings object controls the parameters used when checking a
    property: how many examples to try, how far to shrink, and how much to
    report.

    Default values are picked up from the settings.default object and
    changes made there will be picked up in newly created settings.

    """

    _WHITELISTED_REAL_PROPERTIES = [
        '_construction_complete', 'storage',
    ]
    __definitions_are_locked = False
    _profiles = {}

    def __getattr__(self, name):
        if name in all_settings:
            d = all_settings[name].default
            if inspect.isfunction(d):
                d = d()
            return d
        else:
            raise AttributeError('settings has no attribute %s' % (name,))

    def __init__(self, parent=None, **kwargs):
        self._construction_complete = False
        defaults = parent or settings.default
        for name in kwargs:
            if name not in all_settings:
                raise InvalidArgument('Invalid argument %s' % (name,))
        for setting in all_settings.values():
            if kwargs.get(setting.name, not_set) is not_set:
                if defaults is not None:
                    kwargs[setting.name] = getattr(defaults, setting.name)
                else:
                    kwargs[setting.name] = setting.default
            elif setting.validator:
                kwargs[setting.name] = setting.validator(kwargs[setting.name])
        for name, value in kwargs.items():
            setattr(self, name, value)
        self.storage = threading.local()
        self._construction_complete = True

    def defaults_stack(self):
        try:
            return self.storage.defaults_stack
        except AttributeError:
            self.storage.defaults_stack = []
            return self.storage.defaults_stack

    def __call__(self, test):
        test._minicheck_internal_use_settings = self
        return test

    @classmethod
    def define_setting(
        cls, name, description, default, options=None, validator=None,
    ):
        """Add a new setting.

        - name is the name of the property that will be used to access the
          setting. This must be a valid python identifier.
        - description will appear in the property's docstring
        - default is the default value. This may be a zero argument
          function in which case it is evaluated and its result is stored
          the first time it is accessed on any given settings object.

        """
        if settings.__definitions_are_locked:
            raise InvalidState(
                'settings have been locked and may no longer be defined.'
            )
        if options is not None:
            options = tuple(options)
            assert default in options

        all_settings[name] = Setting(
            name, description.strip(), default, options, validator,
        )
        setattr(settings, name, settingsProperty(name))

    @classmethod
    def lock_further_definitions(cls):
        settings.__definitions_are_locked = True

    def __setattr__(self, name, value):
        if name in settings._WHITELISTED_REAL_PROPERTIES:
            return object.__setattr__(self, name, value)
        elif name in all_settings:
            if self._construction_complete:
                raise AttributeError(
                    'settings objects are immutable and may not be assigned to'
                    ' after construction.'
                )
            else:
                setting = all_settings[name]
                if (
                    setting.options is not None and
                    value not in setting.options
                ):
                    raise InvalidArgument(
                        'Invalid %s, %r. Valid options: %r' % (
                            name, value, setting.options
                        )
                    )
                return object.__setattr__(self, name, value)
        else:
            raise AttributeError('No such setting %s' % (name,))

    def __repr__(self):
        bits = []
        for name in all_settings:
            value = getattr(self, name)
            bits.append('%s=%r' % (name, value))
        bits.sort()
        return 'settings(%s)' % ', '.join(bits)

    def __enter__(self):
        default_context_manager = default_variable.with_value(self)
        self.defaults_stack().append(default_context_manager)
        default_context_manager.__enter__()
        return self

    def __exit__(self, *args, **kwargs):
        default_context_manager = self.defaults_stack().pop()
        return default_context_manager.__exit__(*args, **kwargs)

    @staticmethod
    def register_profile(name, settings):
        """Registers a collection of values to be used as a settings profile.

        These settings can be loaded in by name. Enable different
        defaults for different settings.  ``settings`` must be a
        settings object.

        """
        settings._profiles[name] = settings

    @staticmethod
    def get_profile(name):
        """Return the profile with the given name.

        An InvalidArgument exception will be thrown if the profile does
        not exist.

        """
        try:
            return settings._profiles[name]
        except KeyError:
            raise InvalidArgument(
                "Profile '{0}' has not been registered".format(
                    name
                )
            )

    @staticmethod
    def load_profile(name):
        """Loads in the settings defined in the profile provided. If the
        profile does not exist an InvalidArgument will be thrown.

        Any setting not defined in the profile will be the library
        defined default for that setting.

        """
        settings._current_profile = name
        settings._assign_default_internal(settings.get_profile(name))


@attr.s()
class Setting(object):
    name = attr.ib()
    description = attr.ib()
    default = attr.ib()
    options = attr.ib()
    validator = attr.ib()


def _validate_examples(n):
    check_valid_examples(n, 'max_examples')
    return n


settings.define_setting(
    'max_examples',
    default=10,
    description="""
Once this many examples have been tried without finding a counterexample,
the property is considered to have passed.
""",
    validator=_validate_examples,
)


def _validate_shrinks(n):
    check_valid_examples(n, 'max_shrinks')
    return n


settings.define_setting(
    'max_shrinks',
    default=10000,
    description="""
Once this many successful shrinks have been performed in a row, minicheck
will assume that the shrink function does not terminate and raise
ShrinkLoopExceeded rather than continuing to shrink the example. Halving a
float all the way to zero takes a little over a thousand steps.
""",
    validator=_validate_shrinks,
)

settings.define_setting(
    'derandomize',
    default=False,
    description="""
If this is True then minicheck will run in deterministic mode, where each
check uses a random number generator that is seeded based on the property
being checked, which will be consistent across multiple runs.
"""
)


class Verbosity(object):

    def __repr__(self):
        return 'Verbosity.%s' % (self.name,)

    def __init__(self, name, level):
        self.name = name
        self.level = level

    def __eq__(self, other):
        return isinstance(other, Verbosity) and (
            self.level == other.level
        )

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return self.level

    def __lt__(self, other):
        return self.level < other.level

    def __le__(self, other):
        return self.level <= other.level

    def __gt__(self, other):
        return self.level > other.level

    def __ge__(self, other):
        return self.level >= other.level

    @classmethod
    def by_name(cls, key):
        result = getattr(cls, key, None)
        if isinstance(result, Verbosity):
            return result
        raise InvalidArgument('No such verbosity level %r' % (key,))


Verbosity.quiet = Verbosity('quiet', 0)
Verbosity.normal = Verbosity('normal', 1)
Verbosity.verbose = Verbosity('verbose', 2)
Verbosity.debug = Verbosity('debug', 3)
Verbosity.all = [
    Verbosity.quiet, Verbosity.normal, Verbosity.verbose, Verbosity.debug
]


ENVIRONMENT_VERBOSITY_OVERRIDE = os.getenv('MINICHECK_VERBOSITY_LEVEL')

if ENVIRONMENT_VERBOSITY_OVERRIDE:  # pragma: no cover
    DEFAULT_VERBOSITY = Verbosity.by_name(ENVIRONMENT_VERBOSITY_OVERRIDE)
else:
    DEFAULT_VERBOSITY = Verbosity.normal

settings.define_setting(
    'verbosity',
    options=Verbosity.all,
    default=DEFAULT_VERBOSITY,
    description='Control the verbosity level of minicheck messages',
)

settings.lock_further_definitions()

settings.register_profile('default', settings())
settings.load_profile('default')
assert settings.default is not None
