# This file is part of Exhaustigen, an exhaustive choice generator for tests.
#
# Copyright the Exhaustigen Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Convenience generators built on top of :meth:`ChoiceSequence.next`.

Each of these takes the ChoiceSequence as its first argument and only ever
calls ``next`` on it, so over a full enumeration every one of them eventually
returns every value in its domain. Because they consume choices in a fixed
order they can be freely combined inside a single test body.
"""

from exhaustigen.errors import InvalidArgument
from exhaustigen.internal.validation import check_valid_bound, check_valid_size


def flip(choices):
    """Returns False, then True."""
    return choices.next(1) == 1


def pick(choices, values):
    """Selects an element (eventually every element) from ``values``."""
    values = list(values)
    if not values:
        raise InvalidArgument("Cannot pick from an empty collection of values")
    return values[choices.next(len(values) - 1)]


def fixed_by(choices, size, f):
    """Returns a list of exactly ``size`` results of calling ``f(choices)``."""
    check_valid_size(size, "size")
    return [f(choices) for _ in range(size)]


def bounded_by(choices, max_size, f):
    """Returns a list (eventually every such list) of at most ``max_size``
    results of calling ``f(choices)``.

    Shorter lists come first: the size is chosen before any of the elements.
    """
    check_valid_size(max_size, "max_size")
    return fixed_by(choices, choices.next(max_size), f)


def elements(choices, max_size, max_element):
    """Returns a list (eventually every such list) of at most ``max_size``
    integers, each between 0 and ``max_element`` inclusive."""
    check_valid_bound(max_element, "max_element")
    return bounded_by(choices, max_size, lambda c: c.next(max_element))


def fixed_combination(choices, size, values):
    """Returns a list of exactly ``size`` elements of ``values``, each picked
    independently, so elements may repeat."""
    values = list(values)
    return fixed_by(choices, size, lambda c: pick(c, values))


def bounded_combination(choices, max_size, values):
    """Like :func:`fixed_combination`, but the size (eventually every size) is
    at most ``max_size``."""
    check_valid_size(max_size, "max_size")
    return fixed_combination(choices, choices.next(max_size), values)


def combination(choices, values):
    """Returns a combination (eventually every combination) of elements of
    ``values`` of any size up to ``len(values)``, with repetition."""
    values = list(values)
    return bounded_combination(choices, len(values), values)


def permutation(choices, values):
    """Returns a permutation (eventually every permutation) of ``values``."""
    remaining = list(values)
    result = []
    while remaining:
        result.append(remaining.pop(choices.next(len(remaining) - 1)))
    return result


def subset(choices, values):
    """Returns a subset (eventually every subset) of ``values``, preserving
    their order. Each element is included or not by one :func:`flip`."""
    return [v for v in values if flip(choices)]
