# This file is part of Exhaustigen, an exhaustive choice generator for tests.
#
# Copyright the Exhaustigen Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from exhaustigen.errors import InvalidArgument


def check_type(typ, arg, name):
    if not isinstance(arg, typ):
        if isinstance(typ, tuple):
            assert len(typ) >= 2, "Use bare type instead of len-1 tuple"
            typ_string = "one of " + ", ".join(t.__name__ for t in typ)
        else:
            typ_string = typ.__name__
        raise InvalidArgument(
            f"Expected {typ_string} but got {name}={arg!r} (type={type(arg).__name__})"
        )


def check_valid_integer(value, name):
    """Checks that value is an integer and not a boolean.

    Otherwise raises InvalidArgument.
    """
    # bool is a subclass of int, but passing True as a bound is always a typo.
    if isinstance(value, bool):
        raise InvalidArgument(f"Expected int but got {name}={value!r} (type=bool)")
    check_type(int, value, name)


def check_valid_bound(value, name):
    """Checks that value is a valid inclusive upper bound for a choice, i.e.
    a non-negative integer.

    Otherwise raises InvalidArgument.
    """
    check_valid_integer(value, name)
    if value < 0:
        raise InvalidArgument(f"Invalid bound {name}={value!r} < 0")


def check_valid_size(value, name):
    """Checks that value is a valid non-negative size.

    Otherwise raises InvalidArgument.
    """
    check_valid_integer(value, name)
    if value < 0:
        raise InvalidArgument(f"Invalid size {name}={value!r} < 0")
