# This file is part of Exhaustigen, an exhaustive choice generator for tests.
#
# Copyright the Exhaustigen Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""This module provides the driving loop that turns a test body taking a
:class:`~exhaustigen.ChoiceSequence` into a test that is run once for every
path through its choices."""

import functools
import inspect
import warnings
from typing import Any, Callable, Iterator, Optional, TypeVar

import attr

from exhaustigen._settings import Verbosity, local_settings, settings as Settings
from exhaustigen.errors import (
    ExhaustigenException,
    ExhaustigenWarning,
    InvalidArgument,
    NoSuchExample,
)
from exhaustigen.internal import scope
from exhaustigen.internal.choices import ChoiceSequence
from exhaustigen.internal.compat import add_note
from exhaustigen.reporting import (
    debug_report,
    describe_path,
    replay_frames,
    report,
    report_path,
    verbose_report,
)

T = TypeVar("T")


@attr.s()
class ExhaustigenHandle:
    """This object is provided as the .exhaustigen attribute on @exhaustive
    tests."""

    inner_test = attr.ib()
    choices_parameter = attr.ib()


@attr.s()
class RunSummary:
    """How far one enumeration got. ``status`` is ``"exhausted"`` once every
    path has been visited, ``"stopped"`` if max_runs cut it short, and
    ``"interrupted"`` while running or if a run raised."""

    paths = attr.ib(default=0)
    status = attr.ib(default="interrupted")
    max_runs = attr.ib(default=None)

    @property
    def exhausted(self):
        return self.status == "exhausted"

    def describe(self):
        if self.status == "exhausted":
            return f"Exhausted the search space after {self.paths} paths"
        if self.status == "stopped":
            return (
                f"Stopped after {self.paths} paths without exhausting the "
                f"search space (max_runs={self.max_runs})"
            )
        return f"Interrupted after {self.paths} passing paths"


def _record_run(summary):
    if scope.current.run_log is not None:
        scope.current.run_log.append(summary)


def _execute_once(test_function, choices):
    """Runs ``test_function`` along the path currently recorded in
    ``choices``, annotating any exception with that path."""
    debug_report(lambda: f"Replaying {choices!r}")
    try:
        result = test_function(choices)
    except ExhaustigenException as e:
        # Raised by the choice sequence itself, so the path is only a prefix
        # of one we can replay.
        add_note(e, f"Path so far: {describe_path(choices)}")
        raise
    except Exception as e:
        report_path("Failing path", choices)
        add_note(e, f"Failing path: {describe_path(choices)}")
        add_note(
            e,
            "Reproduce with ChoiceSequence.from_frames("
            f"{replay_frames(choices)!r})",
        )
        raise
    report_path("Ran path", choices, level=Verbosity.verbose)
    return result


def _run_paths(test_function, settings, summary):
    """Yields the result of each run in enumeration order, keeping
    ``summary`` up to date as it goes."""
    choices = ChoiceSequence()
    summary.max_runs = settings.max_runs
    while True:
        with local_settings(settings):
            if choices.is_done():
                summary.status = "exhausted"
                verbose_report(summary.describe)
                return
            if settings.max_runs is not None and summary.paths >= settings.max_runs:
                summary.status = "stopped"
                report(summary.describe)
                return
            result = _execute_once(test_function, choices)
            summary.paths += 1
            choices.advance()
        yield result


def _check_settings(settings):
    if settings is None:
        return Settings.default
    if not isinstance(settings, Settings):
        raise InvalidArgument(
            f"Expected a settings object but got settings={settings!r} "
            f"(type={type(settings).__name__})"
        )
    return settings


def _choices_parameter(test):
    """Returns the name of the parameter that receives the ChoiceSequence,
    and whether it comes after a ``self`` or ``cls`` receiver."""
    try:
        params = list(inspect.signature(test).parameters.values())
    except (TypeError, ValueError):
        raise InvalidArgument(f"Cannot inspect the signature of {test!r}") from None
    # The receiver of a method defined in a class body is already bound by
    # the time the wrapper is called.
    has_receiver = bool(params) and params[0].name in ("self", "cls")
    if has_receiver:
        params = params[1:]
    if not params or params[0].kind not in (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    ):
        raise InvalidArgument(
            f"{getattr(test, '__name__', test)} must accept the ChoiceSequence "
            "as its first argument, after self if it is a method."
        )
    return params[0].name, has_receiver


def exhaustive(test: Callable[..., Any]) -> Callable[..., None]:
    """A decorator for turning a test body into a test that is run once for
    every combination of choices it can make.

    The test body receives a :class:`~exhaustigen.ChoiceSequence` as its first
    argument (after ``self`` for methods) and gets its data by calling
    ``choices.next(bound)``, directly or through
    :mod:`exhaustigen.generators`. Any other arguments are passed through
    from the caller, so the wrapped test can still take pytest fixtures.

    If a run fails, the exception propagates with notes describing the
    failing path and how to replay it.
    """
    if not callable(test) or inspect.isclass(test):
        raise InvalidArgument(
            f"@exhaustive can only decorate functions, but got test={test!r}"
        )
    name = getattr(test, "__name__", repr(test))
    if getattr(test, "is_exhaustigen_test", False):
        raise InvalidArgument(f"{name} has already been decorated with @exhaustive.")
    choices_parameter, has_receiver = _choices_parameter(test)
    original_signature = inspect.signature(test)

    @functools.wraps(test)
    def wrapped_test(*args, **kwargs):
        __tracebackhide__ = True
        test_settings = getattr(
            wrapped_test, "_exhaustigen_internal_use_settings", None
        )
        warned = False

        def run(choices):
            if has_receiver:
                return test(args[0], choices, *args[1:], **kwargs)
            return test(choices, *args, **kwargs)

        summary = RunSummary()
        try:
            for result in _run_paths(run, _check_settings(test_settings), summary):
                if result is not None and not warned:
                    warned = True
                    warnings.warn(
                        f"Returning a non-None value from {name} has no "
                        f"effect; got {result!r}. Did you mean to assert it?",
                        ExhaustigenWarning,
                        stacklevel=2,
                    )
        finally:
            _record_run(summary)

    # pytest looks at the signature to decide which fixtures to request, and
    # must not see the ChoiceSequence parameter.
    wrapped_test.__signature__ = original_signature.replace(
        parameters=[
            p
            for p in original_signature.parameters.values()
            if p.name != choices_parameter
        ]
    )
    wrapped_test.is_exhaustigen_test = True
    wrapped_test.exhaustigen = ExhaustigenHandle(
        inner_test=test, choices_parameter=choices_parameter
    )
    return wrapped_test


def all_values(
    generate: Callable[[ChoiceSequence], T], *, settings: Optional[Settings] = None
) -> Iterator[T]:
    """Returns an iterator over ``generate(choices)`` for every path through
    the choices ``generate`` makes, in enumeration order."""
    if not callable(generate):
        raise InvalidArgument(f"Expected a callable but got generate={generate!r}")
    return _run_paths(generate, _check_settings(settings), RunSummary())


def find(
    generate: Callable[[ChoiceSequence], T],
    condition: Callable[[T], bool],
    *,
    settings: Optional[Settings] = None,
) -> T:
    """Returns the first value produced by ``generate``, in enumeration order,
    that matches the predicate function ``condition``.

    Raises :class:`~exhaustigen.errors.NoSuchExample` if no value matched.
    That is a definite answer unless ``max_runs`` stopped the search first,
    which the error message then says.
    """
    if not callable(generate):
        raise InvalidArgument(f"Expected a callable but got generate={generate!r}")
    if not callable(condition):
        raise InvalidArgument(f"Expected a callable but got condition={condition!r}")
    summary = RunSummary()
    for value in _run_paths(generate, _check_settings(settings), summary):
        if condition(value):
            return value
    extra = ""
    if not summary.exhausted:
        extra = (
            f" in the first {summary.paths} paths (stopped by "
            f"max_runs={summary.max_runs} before exhausting the search space)"
        )
    raise NoSuchExample(getattr(condition, "__name__", repr(condition)), extra)
