# This file is part of Exhaustigen, an exhaustive choice generator for tests.
#
# Copyright the Exhaustigen Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import contextlib
import sys
from io import StringIO

from pytest import raises

from exhaustigen.reporting import default, with_reporter


@contextlib.contextmanager
def capture_out():
    old_out = sys.stdout
    try:
        new_out = StringIO()
        sys.stdout = new_out
        with with_reporter(default):
            yield new_out
    finally:
        sys.stdout = old_out


def fails_with(e, *, match=None):
    def accepts(f):
        def inverted_test(*arguments, **kwargs):
            with raises(e, match=match):
                f(*arguments, **kwargs)

        inverted_test.__name__ = f.__name__
        return inverted_test

    return accepts


fails = fails_with(AssertionError)
