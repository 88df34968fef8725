"""Counters and the framed, coloured report lines of a test run."""

from __future__ import annotations

from dataclasses import dataclass

from libunit.printf import sformat

RESET = "\x1b[0m"
RGB_START = "\x1b[38;2;"
RGB_END = ";0m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
GREEN = "\x1b[38;2;0;200;0m"
YELLOW = "\x1b[38;2;200;200;0m"
RED = "\x1b[38;2;200;0;0m"

_FRAME_WIDTH = 80
_RIGHT_EDGE = 71
_BORDER = "====="


@dataclass
class Counter:
    """Number of tests run and number of them that passed."""

    total: int = 0
    success: int = 0

    def add(self, success: int, total: int) -> None:
        """Add the results of another batch of tests."""
        self.success += success
        self.total += total

    @property
    def all_passed(self) -> bool:
        return self.success == self.total


def render_close_frame_right(already_printed: int) -> str:
    """Pad a line that has already_printed columns, then close the frame."""
    return " " * max(_RIGHT_EDGE - already_printed, 0) + _BORDER + "\n"


def render_frame_line(empty: int) -> str:
    """A full line of '=' or, when empty is 1, a frame with blank middle."""
    if empty == 1:
        return sformat("=====% 70c=====\n", " ")
    return "=" * _FRAME_WIDTH + "\n"


def render_test_line(name: str, msg: str, color: str) -> str:
    """One result line: the coloured status followed by the test name."""
    line = sformat("=====   [%s%s%s]  %s", color, msg, RESET, name)
    return line + render_close_frame_right(8 + len(msg) + len(name))


def render_title(title: str) -> str:
    """A title block for a group of tests."""
    fill = max(_FRAME_WIDTH - (len(title) + 10), 0)
    return (
        "\n"
        + render_frame_line(0)
        + "=" * fill
        + sformat(" %s ========\n", title)
        + render_frame_line(1)
    )


def _counter_colour(success: int, total: int) -> tuple[int, int]:
    green = int(success / total * 120) if total else 0
    red = 255 - green
    if success == total:
        green = 255
    if not success:
        red = 255
    return red, green


def render_local_counter(success: int, total: int) -> str:
    """The summary of one group, coloured from red to green."""
    red, green = _counter_colour(success, total)
    body = sformat(
        "%s%s;%s%s% 4i success      % 4i fails      % 4i total%s",
        RGB_START, str(red), str(green), RGB_END,
        success, total - success, total, RESET,
    )
    return (
        render_frame_line(1)
        + "=====           "
        + body
        + render_close_frame_right(8 + 48)
        + render_frame_line(0)
    )


def render_final_counter(counter: Counter) -> str:
    """The closing summary of all groups, headed by a coloured TOTAL."""
    letters = (
        ("255;0", "T"),
        ("200;50", "O"),
        ("150;100", "T"),
        ("100;150", "A"),
        ("50;200", "L"),
    )
    heading = "".join(f"{RGB_START}{rgb}{RGB_END}{char}" for rgb, char in letters)
    heading += f"{RGB_START}0;255{RGB_END}{RESET}"
    return (
        "=" * 41
        + "=" * 24
        + " "
        + heading
        + " ========\n"
        + render_local_counter(counter.success, counter.total)
    )