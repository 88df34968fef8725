"""Loading tests into groups and running each one with its outcome isolated."""

from __future__ import annotations

import operator
import signal
import sys
import traceback
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, ClassVar, TextIO

from libunit.report import (
    GREEN,
    MAGENTA,
    RED,
    YELLOW,
    Counter,
    render_local_counter,
    render_test_line,
    render_title,
)

EXIT_OK = 1
EXIT_KO = 0
_EXIT_UNKNOWN = 2


class Outcome(Enum):
    """How a test ended, with the label and colour it is reported with."""

    OK = ("OK", GREEN)
    KO = ("KO", RED)
    SIGSEGV = ("SIGSEGV", YELLOW)
    SIGBUS = ("SIGBUS", YELLOW)
    UNKNOWN = ("unknown error", MAGENTA)

    def __init__(self, label: str, color: str) -> None:
        self.label = label
        self.color = color

    @property
    def passed(self) -> bool:
        return self is Outcome.OK


@dataclass(frozen=True)
class TestCase:
    """A named test function; it returns 1 on success and 0 on failure."""

    __test__: ClassVar[bool] = False

    name: str
    function: Callable[[], int]


def _exit_code(result: object) -> int:
    try:
        return operator.index(result) & 0xFF
    except TypeError:
        return _EXIT_UNKNOWN


def _outcome_from_code(code: int) -> Outcome:
    if code == EXIT_OK:
        return Outcome.OK
    if code == EXIT_KO:
        return Outcome.KO
    return Outcome.UNKNOWN


def _outcome_from_exit(code: object) -> Outcome:
    """Map a SystemExit code; a negative signal number means killed by it."""
    if code is None:
        return _outcome_from_code(0)
    try:
        number = operator.index(code)
    except TypeError:
        return Outcome.UNKNOWN
    if number < 0:
        if -number == signal.SIGSEGV:
            return Outcome.SIGSEGV
        if -number == getattr(signal, "SIGBUS", None):
            return Outcome.SIGBUS
        return Outcome.UNKNOWN
    return _outcome_from_code(number & 0xFF)


def run_isolated(function: Callable[[], int]) -> Outcome:
    """Run function, shielding the caller from anything it raises.

    A returned 1 is OK and 0 is KO. A SystemExit is read like an exit
    status, a negative code naming the signal that ended the test.
    Any other exception is reported on stderr as an unknown error.
    """
    try:
        result = function()
    except SystemExit as stop:
        return _outcome_from_exit(stop.code)
    except KeyboardInterrupt:
        raise
    except BaseException:
        traceback.print_exc()
        return Outcome.UNKNOWN
    return _outcome_from_code(_exit_code(result))


@dataclass
class TestGroup:
    """A titled list of tests that are launched together."""

    __test__: ClassVar[bool] = False

    title: str
    cases: list[TestCase] = field(default_factory=list)

    def load(self, name: str, function: Callable[[], int]) -> None:
        """Add a test at the end of the group."""
        self.cases.append(TestCase(name, function))

    def launch(self, counter: Counter, stream: TextIO | None = None) -> bool:
        """Run every test, report each result, and empty the group.

        The group's results are added to counter. Returns True when all
        tests passed.
        """
        out = sys.stdout if stream is None else stream
        out.write(render_title(self.title))
        local = Counter()
        for case in self.cases:
            outcome = run_isolated(case.function)
            out.write(render_test_line(case.name, outcome.label, outcome.color))
            local.add(int(outcome.passed), 1)
        self.cases.clear()
        out.write(render_local_counter(local.success, local.total))
        counter.add(local.success, local.total)
        return local.all_passed