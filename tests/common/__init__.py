# This file is part of Exhaustigen, an exhaustive choice generator for tests.
#
# Copyright the Exhaustigen Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from exhaustigen import ChoiceSequence


def run_to_exhaustion(test_body, choices=None):
    """Drives ``test_body`` with the canonical loop and returns the list of
    whatever it returned on each run."""
    if choices is None:
        choices = ChoiceSequence()
    results = []
    while not choices.is_done():
        results.append(test_body(choices))
        choices.advance()
    return results


def paths_of(shape, prefix=()):
    """Lists every path through the tree described by ``shape`` in
    lexicographic order, without going through a ChoiceSequence.

    ``shape(prefix)`` returns the bound asked for after ``prefix``, or None if
    a run ends there."""
    bound = shape(prefix)
    if bound is None:
        return [prefix]
    result = []
    for v in range(bound + 1):
        result.extend(paths_of(shape, prefix + (v,)))
    return result


def body_for(shape):
    """A test body which makes the choices described by ``shape`` and returns
    the path it took."""

    def body(choices):
        prefix = ()
        bound = shape(prefix)
        while bound is not None:
            prefix += (choices.next(bound),)
            bound = shape(prefix)
        return prefix

    return body
