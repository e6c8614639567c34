# This file is part of Exhaustigen, an exhaustive choice generator for tests.
#
# Copyright the Exhaustigen Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Exhaustigen is a library for writing tests which are run once for every
combination of some small, bounded choices.

Instead of sampling random values, a test asks a
:class:`~exhaustigen.ChoiceSequence` for integers up to small inclusive
bounds, which may depend on values it has already received. Exhaustigen then
reruns the test until every reachable combination has been visited exactly
once.
"""

from exhaustigen._settings import Verbosity, settings
from exhaustigen.core import all_values, exhaustive, find
from exhaustigen.internal.choices import ChoiceSequence, Frame
from exhaustigen.version import __version__, __version_info__

__all__ = [
    "ChoiceSequence",
    "Frame",
    "Verbosity",
    "all_values",
    "exhaustive",
    "find",
    "settings",
    "__version__",
    "__version_info__",
]
