# This file is part of Exhaustigen, an exhaustive choice generator for tests.
#
# Copyright the Exhaustigen Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import pytest

from exhaustigen.extra.pytestplugin import LOAD_PROFILE_OPTION, VERBOSITY_OPTION

pytest_plugins = "pytester"


CONFTEST = """
from exhaustigen import settings
settings.register_profile("test", settings(max_runs=1))
"""

TESTSUITE = """
from exhaustigen import exhaustive, settings
from exhaustigen.generators import flip

def test_this_one_is_ok():
    assert settings().max_runs == 1

@exhaustive
def test_flips(choices):
    flip(choices)
    flip(choices)

def test_bar():
    pass
"""


def test_does_not_run_reporting_hook_by_default(testdir):
    script = testdir.makepyfile(TESTSUITE)
    testdir.makeconftest(CONFTEST)
    result = testdir.runpytest(script, LOAD_PROFILE_OPTION, "test")
    out = "\n".join(result.stdout.lines)
    assert "3 passed" in out
    assert "exhaustigen profile" not in out


@pytest.mark.parametrize("option", ["-v", f"{VERBOSITY_OPTION}=verbose"])
def test_runs_reporting_hook_in_any_verbose_mode(testdir, option):
    script = testdir.makepyfile(TESTSUITE)
    testdir.makeconftest(CONFTEST)
    result = testdir.runpytest(script, LOAD_PROFILE_OPTION, "test", option)
    out = "\n".join(result.stdout.lines)
    assert "3 passed" in out
    assert "max_runs=1" in out
    assert "exhaustigen profile 'test'" in out


def test_can_select_mark(testdir):
    script = testdir.makepyfile(TESTSUITE)
    result = testdir.runpytest(
        script, "--verbose", "--strict-markers", "-m", "exhaustigen"
    )
    out = "\n".join(result.stdout.lines)
    assert "1 passed, 2 deselected" in out


FAILING_SUITE = """
from exhaustigen import exhaustive
from exhaustigen.generators import flip

@exhaustive
def test_fails_on_second_flip(choices):
    assert not (flip(choices) and flip(choices))
"""


def test_reports_failing_path(testdir):
    script = testdir.makepyfile(FAILING_SUITE)
    result = testdir.runpytest(script)
    result.assert_outcomes(failed=1)
    out = "\n".join(result.stdout.lines)
    assert "Failing path: (1, 1)" in out
    assert "Exhaustigen" in out
    assert "Interrupted after 2 passing paths" in out
    assert "Captured stdout call" not in out


VERBOSE_SUITE = """
from exhaustigen import exhaustive
from exhaustigen.generators import flip

@exhaustive
def test_fails_eventually(choices):
    assert not flip(choices)
"""


def test_verbosity_option_shows_every_path(testdir):
    script = testdir.makepyfile(VERBOSE_SUITE)
    result = testdir.runpytest(script, f"{VERBOSITY_OPTION}=verbose")
    result.assert_outcomes(failed=1)
    out = "\n".join(result.stdout.lines)
    assert "Ran path: (0,)" in out
    assert "Failing path: (1,)" in out


FIXTURE_SUITE = """
import pytest
from exhaustigen import exhaustive

@pytest.fixture
def limit():
    return 3

@exhaustive
def test_uses_fixture(choices, limit):
    assert choices.next(limit) <= limit
"""


def test_exhaustive_tests_can_request_fixtures(testdir):
    script = testdir.makepyfile(FIXTURE_SUITE)
    result = testdir.runpytest(script)
    result.assert_outcomes(passed=1)


STOPPED_SUITE = """
from exhaustigen import exhaustive, settings

@settings(max_runs=2)
@exhaustive
def test_stops_early(choices):
    choices.next(10)
"""


def test_report_section_summarises_the_enumeration(testdir):
    script = testdir.makepyfile(STOPPED_SUITE)
    result = testdir.runpytest(script, "-rP")
    result.assert_outcomes(passed=1)
    out = "\n".join(result.stdout.lines)
    assert "Stopped after 2 paths without exhausting the search space" in out


def test_header_shows_unbounded_max_runs(testdir):
    script = testdir.makepyfile(STOPPED_SUITE)
    result = testdir.runpytest(script, "-v")
    out = "\n".join(result.stdout.lines)
    assert "exhaustigen profile 'default': max_runs=unbounded" in out
