"""Command that runs the bundled test groups and prints a summary."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from libunit.report import Counter, render_final_counter
from libunit.runner import EXIT_OK, TestGroup


def template_test() -> int:
    """A sample test that always passes."""
    return EXIT_OK


def template_launcher(counter: Counter, stream: TextIO | None = None) -> bool:
    """Load and launch the sample group of tests."""
    group = TestGroup("GROUP NAME")
    group.load("template name", template_test)
    return group.launch(counter, stream)


def main(argv: Sequence[str] | None = None) -> int:
    """Run every group, print the final summary and return the exit status."""
    counter = Counter()
    template_launcher(counter, sys.stdout)
    sys.stdout.write(render_final_counter(counter))
    sys.stdout.flush()
    if counter.success != counter.total:
        return -1
    return 0


if __name__ == "__main__":
    sys.exit(main())