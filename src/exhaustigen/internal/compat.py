# This file is part of Exhaustigen, an exhaustive choice generator for tests.
#
# Copyright the Exhaustigen Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import codecs


def escape_unicode_characters(s):
    return codecs.encode(s, "unicode_escape").decode("ascii")


def add_note(exc, note):
    try:
        exc.add_note(note)
    except AttributeError:
        # Python < 3.11 has no add_note, but pytest and exceptiongroup both
        # know to display a __notes__ list if one is present.
        if not hasattr(exc, "__notes__"):
            try:
                exc.__notes__ = []
            except AttributeError:
                return  # exception might be immutable, e.g. from a C extension
        exc.__notes__.append(note)
