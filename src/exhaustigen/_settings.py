# This file is part of Exhaustigen, an exhaustive choice generator for tests.
#
# Copyright the Exhaustigen Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Settings control how an enumeration is run: how many paths it may visit
and how much it reports while doing so.

A settings object is an immutable record. Anything not given explicitly is
inherited from a parent, which defaults to ``settings.default``: the loaded
profile, unless the current thread has overridden it with
:func:`local_settings`.
"""

import contextlib
import inspect
from enum import IntEnum, unique
from typing import Dict, Optional

import attr

from exhaustigen.errors import InvalidArgument
from exhaustigen.internal import scope
from exhaustigen.internal.validation import check_type

__all__ = ["Verbosity", "settings", "local_settings"]


@unique
class Verbosity(IntEnum):
    quiet = 0
    normal = 1
    verbose = 2
    debug = 3

    def __repr__(self):
        return f"Verbosity.{self.name}"


def _validate_max_runs(instance, attribute, value):
    if value is None:
        return
    check_type(int, value, attribute.name)
    if isinstance(value, bool) or value < 1:
        raise InvalidArgument(
            f"max_runs={value!r} should be at least one, or None to visit "
            "every path."
        )


def _validate_verbosity(instance, attribute, value):
    if not isinstance(value, Verbosity):
        raise InvalidArgument(
            f"Invalid verbosity={value!r}. Valid options: {list(Verbosity)!r}"
        )


class settingsMeta(type):
    @property
    def default(cls) -> "settings":
        override = scope.current.settings
        if override is not None:
            return override
        return cls._profiles.get(cls._current_profile)


@attr.s(frozen=True, init=False, repr=False)
class settings(metaclass=settingsMeta):
    """Controls how an exhaustive enumeration is run.

    ``max_runs`` stops enumeration after that many runs, even if there are
    paths left that have not been visited. Stopping early is reported but is
    not an error, and the default of None visits every path.

    ``verbosity`` controls how much Exhaustigen reports: failing paths at
    ``normal``, every path at ``verbose`` and the full choice stack at
    ``debug``.
    """

    max_runs: Optional[int] = attr.ib(default=None, validator=_validate_max_runs)
    verbosity: Verbosity = attr.ib(
        default=Verbosity.normal, validator=_validate_verbosity
    )

    _profiles: Dict[str, "settings"] = {}
    _current_profile = "default"

    def __init__(self, parent: Optional["settings"] = None, **kwargs) -> None:
        if parent is not None and not isinstance(parent, settings):
            raise InvalidArgument(
                f"Invalid argument: parent={parent!r} is not a settings instance"
            )
        names = {a.name for a in attr.fields(settings)}
        for name in kwargs:
            if name not in names:
                raise InvalidArgument(
                    f"Invalid argument: {name!r} is not a valid setting"
                )
        parent = parent or settings.default
        # Only the library defaults exist before the default profile does.
        inherited = {} if parent is None else attr.asdict(parent, recurse=False)
        self.__attrs_init__(**{**inherited, **kwargs})

    def __call__(self, test):
        """Attaches these settings to ``test``, above or below
        ``@exhaustive``."""
        if not callable(test) or inspect.isclass(test):
            raise InvalidArgument(
                "settings objects can be called as a decorator with "
                f"@exhaustive, but decorated test={test!r} is not a function."
            )
        previous = getattr(test, "_exhaustigen_internal_use_settings", None)
        if previous is not None:
            raise InvalidArgument(
                f"{getattr(test, '__name__', test)} has already been decorated "
                f"with {previous!r}, so cannot also use {self!r}"
            )
        test._exhaustigen_internal_use_settings = self
        return test

    def __repr__(self):
        bits = sorted(
            f"{a.name}={getattr(self, a.name)!r}" for a in attr.fields(settings)
        )
        return "settings({})".format(", ".join(bits))

    @staticmethod
    def register_profile(
        name: str, parent: Optional["settings"] = None, **kwargs
    ) -> None:
        """Registers settings under ``name``, built from ``parent`` (or
        settings.default) and ``kwargs`` exactly as the constructor would.

        For example, a 'ci' profile might cap ``max_runs`` while local runs
        keep the unbounded 'default' profile.
        """
        check_type(str, name, "name")
        settings._profiles[name] = settings(parent, **kwargs)

    @staticmethod
    def get_profile(name: str) -> "settings":
        check_type(str, name, "name")
        try:
            return settings._profiles[name]
        except KeyError:
            raise InvalidArgument(f"Profile {name!r} is not registered") from None

    @staticmethod
    def load_profile(name: str) -> None:
        """Makes the profile called ``name`` the default for every thread
        that has not overridden it."""
        settings.get_profile(name)
        settings._current_profile = name


@contextlib.contextmanager
def local_settings(s):
    with scope.scoped(settings=s):
        yield s


settings.register_profile("default")
