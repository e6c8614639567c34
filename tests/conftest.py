# This file is part of Exhaustigen, an exhaustive choice generator for tests.
#
# Copyright the Exhaustigen Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import pytest

from exhaustigen import settings


@pytest.fixture(scope="function", autouse=True)
def _restore_settings_profile():
    """Tests which load profiles, directly or through an in-process pytester
    run, must not leak them into later tests."""
    profile = settings._current_profile
    yield
    settings.load_profile(profile)
