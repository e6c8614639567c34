# This file is part of Exhaustigen, an exhaustive choice generator for tests.
#
# Copyright the Exhaustigen Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""State that belongs to whichever thread is currently enumerating: the
settings overriding the active profile, where reports go, and where finished
runs are summarised. Each thread starts with nothing overridden."""

import contextlib
import threading


class _Scope(threading.local):
    def __init__(self):
        self.settings = None
        self.reporter = None
        self.run_log = None


current = _Scope()


@contextlib.contextmanager
def scoped(**values):
    """Overrides attributes of the current thread's scope for the duration of
    the ``with`` block."""
    previous = {name: getattr(current, name) for name in values}
    for name, value in values.items():
        setattr(current, name, value)
    try:
        yield current
    finally:
        for name, value in previous.items():
            setattr(current, name, value)
