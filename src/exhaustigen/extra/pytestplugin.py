# This file is part of Exhaustigen, an exhaustive choice generator for tests.
#
# Copyright the Exhaustigen Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""The Exhaustigen pytest plugin, registered through the ``pytest11`` entry
point.

It lets a run pick a settings profile and verbosity from the command line,
marks every ``@exhaustive`` test with ``exhaustigen``, and attaches what each
test reported, plus how far its enumeration got, to the test's report.
"""

import pytest

from exhaustigen import Verbosity, settings
from exhaustigen.internal.scope import scoped

LOAD_PROFILE_OPTION = "--exhaustigen-profile"
VERBOSITY_OPTION = "--exhaustigen-verbosity"


def pytest_addoption(parser):
    group = parser.getgroup("exhaustigen", "Exhaustigen")
    group.addoption(
        LOAD_PROFILE_OPTION,
        action="store",
        help="Load a registered exhaustigen.settings profile before running",
    )
    group.addoption(
        VERBOSITY_OPTION,
        action="store",
        choices=[v.name for v in Verbosity],
        help="Report at this verbosity, whatever the profile says",
    )


def pytest_configure(config):
    profile = config.getoption(LOAD_PROFILE_OPTION)
    if profile:
        settings.load_profile(profile)
    verbosity = config.getoption(VERBOSITY_OPTION)
    if verbosity:
        # A derived profile, so max_runs still comes from the chosen one.
        name = f"{settings._current_profile}-{verbosity}"
        settings.register_profile(name, verbosity=Verbosity[verbosity])
        settings.load_profile(name)
    config.addinivalue_line(
        "markers", "exhaustigen: Tests which are run once per path of choices."
    )


def pytest_report_header(config):
    current = settings.default
    if config.option.verbose < 1 and current.verbosity < Verbosity.verbose:
        return None
    profile = config.getoption(LOAD_PROFILE_OPTION) or "default"
    max_runs = "unbounded" if current.max_runs is None else current.max_runs
    return (
        f"exhaustigen profile {profile!r}: max_runs={max_runs}, "
        f"verbosity={current.verbosity.name}"
    )


def pytest_collection_modifyitems(items):
    for item in items:
        if isinstance(item, pytest.Function) and getattr(
            item.obj, "is_exhaustigen_test", False
        ):
            item.add_marker("exhaustigen")


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_call(item):
    if not item.get_closest_marker("exhaustigen"):
        yield
        return
    lines = []
    runs = []
    with scoped(reporter=lines.append, run_log=runs):
        yield
    item.exhaustigen_report = lines + [run.describe() for run in runs]


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    report = (yield).get_result()
    lines = getattr(item, "exhaustigen_report", None)
    if lines:
        report.sections.append(("Exhaustigen", "\n".join(lines)))
