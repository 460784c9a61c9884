# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""A module controlling settings for falsify to use in a run.

Either an explicit settings object can be used or the default object on
this module can be modified.
"""

import contextlib
import inspect
from enum import IntEnum, unique
from typing import Any, Dict

import attr

from falsify.errors import InvalidArgument, InvalidState
from falsify.internal.reflection import get_pretty_function_description
from falsify.internal.validation import check_type
from falsify.utils.conventions import not_set
from falsify.utils.dynamicvariables import DynamicVariable

__all__ = ["settings"]

all_settings: Dict[str, "Setting"] = {}


class settingsProperty:
    def __init__(self, name):
        self.name = name

    def __get__(self, obj, type=None):
        if obj is None:
            return self
        else:
            try:
                return obj.__dict__[self.name]
            except KeyError:
                raise AttributeError(self.name) from None

    def __set__(self, obj, value):
        obj.__dict__[self.name] = value

    def __delete__(self, obj):
        raise AttributeError("Cannot delete attribute %s" % (self.name,))

    @property
    def __doc__(self):
        setting = all_settings[self.name]
        return "%s\n\ndefault value: ``%r``" % (setting.description, setting.default)


default_variable = DynamicVariable(None)


class settingsMeta(type):
    @property
    def default(self):
        v = default_variable.value
        if v is not None:
            return v
        if hasattr(settings, "_current_profile"):
            settings.load_profile(settings._current_profile)
            assert default_variable.value is not None
        return default_variable.value

    def _assign_default_internal(self, value):
        default_variable.value = value

    def __setattr__(self, name, value):
        if name == "default":
            raise AttributeError(
                "Cannot assign to the property settings.default - "
                "consider using settings.load_profile instead."
            )
        elif not (isinstance(value, settingsProperty) or name.startswith("_")):
            raise AttributeError(
                "Cannot assign falsify.settings.%s=%r - the settings "
                "class is immutable.  You can change the global default "
                "settings with settings.load_profile, or use @settings(...) "
                "to decorate your test instead." % (name, value)
            )
        return type.__setattr__(self, name, value)


class settings(metaclass=settingsMeta):
    """A settings object controls how many trials a run makes and how large
    the generated values grow over the course of the run.

    Default values are picked up from the settings.default object and
    changes made there will be picked up in newly created settings.
    """

    _WHITELISTED_REAL_PROPERTIES = ["_construction_complete"]
    __definitions_are_locked = False
    _profiles: dict = {}
    __module__ = "falsify"

    def __getattr__(self, name):
        if name in all_settings:
            return all_settings[name].default
        else:
            raise AttributeError("settings has no attribute %s" % (name,))

    def __init__(self, parent: "settings" = None, **kwargs: Any) -> None:
        if parent is not None and not isinstance(parent, settings):
            raise InvalidArgument(
                "Invalid argument: parent=%r is not a settings instance" % (parent,)
            )
        self._construction_complete = False
        defaults = parent or settings.default
        for setting in all_settings.values():
            if kwargs.get(setting.name, not_set) is not_set:
                if defaults is not None:
                    kwargs[setting.name] = getattr(defaults, setting.name)
                else:
                    kwargs[setting.name] = setting.default
            elif setting.validator:
                kwargs[setting.name] = setting.validator(kwargs[setting.name])
        for name, value in kwargs.items():
            if name not in all_settings:
                raise InvalidArgument(
                    "Invalid argument: %r is not a valid setting" % (name,)
                )
            setattr(self, name, value)
        self._construction_complete = True

    def __call__(self, test):
        """Make the settings object (self) an attribute of the test.

        The settings are later discovered by looking them up on the test itself.
        """
        if not callable(test) or inspect.isclass(test):
            raise InvalidArgument(
                "@settings(...) can only be used as a decorator on functions, "
                "but decorated test=%r is not a function." % (test,)
            )
        if hasattr(test, "_falsify_internal_settings_applied"):
            raise InvalidArgument(
                "%s has already been decorated with a settings object."
                "\n    Previous:  %r\n    This:  %r"
                % (
                    get_pretty_function_description(test),
                    test._falsify_internal_use_settings,
                    self,
                )
            )

        test._falsify_internal_use_settings = self
        test._falsify_internal_settings_applied = True
        return test

    @classmethod
    def _define_setting(cls, name, description, default, options=None, validator=None):
        """Add a new setting.

        - name is the name of the property that will be used to access the
          setting. This must be a valid python identifier.
        - description will appear in the property's docstring
        - default is the default value.
        """
        if settings.__definitions_are_locked:
            raise InvalidState(
                "settings have been locked and may no longer be defined."
            )
        if options is not None:
            options = tuple(options)
            assert default in options
        else:
            assert validator is not None

        all_settings[name] = Setting(
            name=name,
            description=description.strip(),
            default=default,
            options=options,
            validator=validator,
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
                    "settings objects are immutable and may not be assigned to"
                    " after construction."
                )
            else:
                setting = all_settings[name]
                if setting.options is not None and value not in setting.options:
                    raise InvalidArgument(
                        "Invalid %s, %r. Valid options: %r"
                        % (name, value, setting.options)
                    )
                return object.__setattr__(self, name, value)
        else:
            raise AttributeError("No such setting %s" % (name,))

    def __repr__(self):
        bits = ("%s=%r" % (name, getattr(self, name)) for name in all_settings)
        return "settings(%s)" % ", ".join(sorted(bits))

    def show_changed(self):
        bits = []
        for name, setting in all_settings.items():
            value = getattr(self, name)
            if value != setting.default:
                bits.append("%s=%r" % (name, value))
        return ", ".join(sorted(bits, key=len))

    @staticmethod
    def register_profile(name: str, parent: "settings" = None, **kwargs: Any) -> None:
        """Registers a collection of values to be used as a settings profile.

        The arguments to this method are exactly as for
        :class:`~falsify.settings`: optional ``parent`` settings, and
        keyword arguments for each setting that will be set differently to
        parent (or settings.default, if parent is None).
        """
        check_type(str, name, "name")
        settings._profiles[name] = settings(parent=parent, **kwargs)

    @staticmethod
    def get_profile(name: str) -> "settings":
        """Return the profile with the given name."""
        check_type(str, name, "name")
        try:
            return settings._profiles[name]
        except KeyError:
            raise InvalidArgument("Profile %r is not registered" % (name,)) from None

    @staticmethod
    def load_profile(name: str) -> None:
        """Loads in the settings defined in the profile provided.

        If the profile does not exist, InvalidArgument will be raised.
        Any setting not defined in the profile will be the library
        defined default for that setting.
        """
        check_type(str, name, "name")
        settings._current_profile = name
        settings._assign_default_internal(settings.get_profile(name))


@contextlib.contextmanager
def local_settings(s):
    with default_variable.with_value(s):
        yield s


def settings_for(test):
    """Return the settings a test was decorated with, or the current
    default."""
    return getattr(test, "_falsify_internal_use_settings", None) or settings.default


@attr.s()
class Setting:
    name = attr.ib()
    description = attr.ib()
    default = attr.ib()
    options = attr.ib()
    validator = attr.ib()


def _max_trials_validator(x):
    check_type(int, x, name="max_trials")
    if x < 1:
        raise InvalidArgument("max_trials=%r should be at least one." % (x,))
    return x


settings._define_setting(
    "max_trials",
    default=100,
    validator=_max_trials_validator,
    description="""
Once this many trials have passed without finding a counterexample, the run
terminates successfully.
""",
)


def _size_validator(name):
    def accept(x):
        check_type(int, x, name=name)
        if x < 0:
            raise InvalidArgument("%s=%r should not be negative." % (name, x))
        return x

    accept.__name__ = "validate_%s" % (name,)
    return accept


settings._define_setting(
    "start_size",
    default=1,
    validator=_size_validator("start_size"),
    description="""
The size hint used for the first trial of a run.  Sizes below one are raised
to one when the run starts.
""",
)


settings._define_setting(
    "end_size",
    default=100,
    validator=_size_validator("end_size"),
    description="""
The size hint used for the last trial of a run.  Sizes for the trials in
between are interpolated linearly between start_size and end_size.  An
end_size smaller than start_size is treated as equal to it.
""",
)


@unique
class Verbosity(IntEnum):
    quiet = 0
    normal = 1
    verbose = 2
    debug = 3

    def __repr__(self):
        return "Verbosity.%s" % (self.name,)


settings._define_setting(
    "verbosity",
    options=tuple(Verbosity),
    default=Verbosity.normal,
    description="""
Control the verbosity level of falsify messages.  At ``verbose`` every trial
and every shrink step is reported as it happens.
""",
)


settings.lock_further_definitions()

settings.register_profile("default", settings())
settings.register_profile("ci", settings(max_trials=1000))
settings.load_profile("default")
