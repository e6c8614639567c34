# This file is part of Exhaustigen, an exhaustive choice generator for tests.
#
# Copyright the Exhaustigen Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""The search engine behind exhaustive enumeration.

A test body repeatedly calls :meth:`ChoiceSequence.next` with a small
inclusive upper bound, and the bounds it asks for may depend on the values it
has already received. That means the tree of possible runs cannot be
enumerated up front: we only discover how many children a node has when a run
reaches it.

Rather than materialising that tree, we keep a single path through it: a stack
of :class:`Frame` objects recording the value chosen and the bound asked for
at each position. A run replays the stack from the root, extending it with
the minimum value whenever it goes deeper than any previous run along this
path. Between runs, :meth:`ChoiceSequence.advance` treats the stack as a
mixed-radix counter whose digits' radices were discovered on the fly, and
adds one to it. The deepest choice varies fastest, and every path through the
tree is produced exactly once.
"""

from typing import Iterable, List, Tuple, Union

import attr

from exhaustigen.errors import DeterminismViolation, InvalidArgument, ProtocolViolation
from exhaustigen.internal.validation import check_valid_bound, check_valid_integer


@attr.s(slots=True, frozen=True)
class Frame:
    """One position along the current path: the value returned for it in the
    most recent run, and the inclusive bound the test body asked for."""

    chosen: int = attr.ib()
    bound: int = attr.ib()

    @property
    def is_exhausted(self) -> bool:
        return self.chosen == self.bound


FrameLike = Union[Frame, Tuple[int, int]]


def _as_frame(frame: FrameLike, index: int) -> Frame:
    if not isinstance(frame, Frame):
        try:
            chosen, bound = frame
        except (TypeError, ValueError):
            raise InvalidArgument(
                f"Expected a Frame or a (chosen, bound) pair but got "
                f"frames[{index}]={frame!r}"
            ) from None
        frame = Frame(chosen, bound)
    check_valid_integer(frame.chosen, f"frames[{index}].chosen")
    check_valid_bound(frame.bound, f"frames[{index}].bound")
    if not 0 <= frame.chosen <= frame.bound:
        raise InvalidArgument(
            f"Invalid frames[{index}]={frame!r}: chosen must be between "
            f"0 and bound={frame.bound} inclusive"
        )
    return frame


class ChoiceSequence:
    """Drives an exhaustive enumeration of every sequence of choices a test
    body can make.

    The intended usage is::

        choices = ChoiceSequence()
        while not choices.is_done():
            test_body(choices)
            choices.advance()

    where ``test_body`` only gets its data by calling ``choices.next(bound)``.
    A ChoiceSequence belongs to exactly one such loop and is not safe to share
    between threads.
    """

    def __init__(self) -> None:
        self.__frames: List[Frame] = []
        self.__cursor = 0
        self.__exhausted = False
        # Set by advance() when it leaves a path that the next run has to
        # replay, and cleared by the first call to next() in that run.
        self.__pending = False

    @classmethod
    def from_frames(cls, frames: Iterable[FrameLike]) -> "ChoiceSequence":
        """Returns a ChoiceSequence whose first run replays ``frames``.

        Each element may be a :class:`Frame` or a ``(chosen, bound)`` pair, as
        found in a reported failure. Enumeration continues from that path in
        the usual order, so paths that sort before it are not visited.
        """
        result = cls()
        result.__frames = [_as_frame(f, i) for i, f in enumerate(frames)]
        result.__pending = bool(result.__frames)
        return result

    @property
    def frames(self) -> Tuple[Frame, ...]:
        """The path from the root to the deepest point reached so far."""
        return tuple(self.__frames)

    @property
    def choices(self) -> Tuple[int, ...]:
        """The values returned by ``next`` so far in the current run."""
        return tuple(f.chosen for f in self.__frames[: self.__cursor])

    @property
    def cursor(self) -> int:
        return self.__cursor

    @property
    def exhausted(self) -> bool:
        return self.__exhausted

    def is_done(self) -> bool:
        """Returns True once every path through the tree has been visited."""
        return self.__exhausted

    def __assert_not_exhausted(self, name):
        if self.__exhausted:
            raise ProtocolViolation(
                f"Cannot call {name} on a ChoiceSequence after every path has "
                "been visited."
            )

    def next(self, bound: int) -> int:
        """Returns a value (eventually every value) between 0 and ``bound``
        inclusive.

        If this position has been reached before along the current path, the
        recorded value is returned again; otherwise the path is extended and
        the minimum value, zero, is returned.
        """
        self.__assert_not_exhausted("next")
        check_valid_bound(bound, "bound")
        self.__pending = False
        i = self.__cursor
        if i < len(self.__frames):
            frame = self.__frames[i]
            if frame.bound != bound:
                raise DeterminismViolation(
                    f"Inconsistent bounds at position {i} along the path "
                    f"{self.choices}: previously asked for a value in "
                    f"[0, {frame.bound}] but now asked for one in [0, {bound}]. "
                    "Does the test depend on state other than the values it "
                    "has received?"
                )
        else:
            assert i == len(self.__frames)
            frame = Frame(0, bound)
            self.__frames.append(frame)
        self.__cursor = i + 1
        return frame.chosen

    def advance(self) -> None:
        """Moves on to the next path, to be replayed by the next run.

        Must be called exactly once after each run that completed normally.
        Sets the sequence to done if the run just finished was the last one.
        """
        self.__assert_not_exhausted("advance")
        if self.__pending:
            raise ProtocolViolation(
                "advance() called twice without running the test in between. "
                f"The path {tuple(f.chosen for f in self.__frames)} has not "
                "been replayed yet."
            )
        # A run may take a shorter route than an earlier one through the same
        # prefix, in which case anything it did not reach is stale.
        del self.__frames[self.__cursor :]
        while self.__frames:
            last = self.__frames[-1]
            if not last.is_exhausted:
                self.__frames[-1] = attr.evolve(last, chosen=last.chosen + 1)
                break
            self.__frames.pop()
        self.__exhausted = not self.__frames
        self.__pending = not self.__exhausted
        self.__cursor = 0

    def __repr__(self):
        state = "exhausted" if self.__exhausted else f"cursor={self.__cursor}"
        frames = ", ".join(f"({f.chosen}, {f.bound})" for f in self.__frames)
        return f"ChoiceSequence(frames=[{frames}], {state})"
