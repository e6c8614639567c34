# This file is part of Exhaustigen, an exhaustive choice generator for tests.
#
# Copyright the Exhaustigen Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Everything Exhaustigen prints goes through here. Messages are gated by the
verbosity of ``settings.default`` and handed to the current thread's
reporter, which prints them unless something (e.g. the pytest plugin) has
swapped it out with :func:`with_reporter`.

A message may be a zero-argument function, in which case it is only built if
it is going to be reported.
"""

from exhaustigen._settings import Verbosity, settings
from exhaustigen.internal import scope
from exhaustigen.internal.compat import escape_unicode_characters


def silent(value):
    pass


def default(value):
    try:
        print(value)
    except UnicodeEncodeError:
        print(escape_unicode_characters(value))


def current_reporter():
    return scope.current.reporter or default


def with_reporter(new_reporter):
    return scope.scoped(reporter=new_reporter)


def current_verbosity():
    return settings.default.verbosity


def _report_at(level, text):
    if current_verbosity() >= level:
        current_reporter()(text() if callable(text) else text)


def report(text):
    _report_at(Verbosity.normal, text)


def verbose_report(text):
    _report_at(Verbosity.verbose, text)


def debug_report(text):
    _report_at(Verbosity.debug, text)


def describe_path(choices):
    """The values ``choices`` has returned so far in the current run, as a
    tuple literal."""
    return repr(choices.choices)


def replay_frames(choices):
    """The ``(chosen, bound)`` pairs that ``ChoiceSequence.from_frames`` needs
    to replay the current run up to where it has got to."""
    return [(f.chosen, f.bound) for f in choices.frames[: choices.cursor]]


def report_path(message, choices, *, level=Verbosity.normal):
    _report_at(level, lambda: f"{message}: {describe_path(choices)}")
