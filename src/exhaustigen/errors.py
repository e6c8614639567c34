# This file is part of Exhaustigen, an exhaustive choice generator for tests.
#
# Copyright the Exhaustigen Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.


class ExhaustigenException(Exception):
    """Generic parent class for exceptions thrown by Exhaustigen."""


class InvalidArgument(ExhaustigenException, TypeError):
    """Used to indicate that the arguments to an Exhaustigen function were in
    some manner incorrect."""


class DeterminismViolation(ExhaustigenException):
    """The test body asked a different question than it did last time at the
    same position along the current path.

    Exhaustive enumeration relies on the test body being a pure function of
    the values previously returned by ``next``: replaying a path must make the
    same sequence of requests with the same bounds. Common causes are:

    1. The test depends on external state, e.g. a global random number
       generator, the clock, or data left over by a previous run.
    2. The test mutates an argument shared between runs, so that a later run
       computes its bounds from a different starting point.
    """


class ProtocolViolation(ExhaustigenException):
    """The driving loop called ``next`` or ``advance`` at a point where the
    contract does not allow it: after the search space has been exhausted, or
    ``advance`` twice without running the test body in between."""


class NoSuchExample(ExhaustigenException):
    """No path visited satisfied the condition.

    Unlike a random search, this is a definite answer once every path has
    been visited. If ``max_runs`` stopped the search early, the message says
    how far it got.
    """

    def __init__(self, condition_string, extra=""):
        super().__init__(f"No examples found of condition {condition_string}{extra}")


class ExhaustigenWarning(ExhaustigenException, Warning):
    """A generic warning issued by Exhaustigen."""
