"""Progress reporter.

Prints one character per example as it finishes (``.`` passed, ``F``
assertion failure, ``E`` error) and a summary listing each failure with
its location.
"""

import sys
from typing import TextIO

from unitbridge.core.models import Example, Outcome

from .base import BaseReporter

_PROGRESS_MARKS = {
    Outcome.PASSED: ".",
    Outcome.FAILED: "F",
    Outcome.ERRORED: "E",
}


class ProgressReporter(BaseReporter):
    """Writes run progress and a failure summary to a text stream."""

    def __init__(self, output: TextIO | None = None, verbose: bool = False):
        """Initialize progress reporter.

        Args:
            output: Stream to write to. Defaults to stdout.
            verbose: If True, include exception types in the summary.
        """
        super().__init__()
        self.output = output if output is not None else sys.stdout
        self.verbose = verbose

    def example_passed(self, example: Example) -> None:
        super().example_passed(example)
        self._write(_PROGRESS_MARKS[Outcome.PASSED])

    def example_failed(self, example: Example, exception: BaseException) -> None:
        super().example_failed(example, exception)
        self._write(_PROGRESS_MARKS[Outcome.from_exception(exception)])

    def finish(self) -> None:
        super().finish()
        self._write("\n" + self._format_summary() + "\n")
        self.output.flush()

    def _write(self, text: str) -> None:
        self.output.write(text)

    def _format_summary(self) -> str:
        """Format the failure list and totals."""
        lines = []
        if self.failures:
            lines.extend(["", "Failures:", ""])
            for index, (example, exception) in enumerate(self.failures, 1):
                lines.append(f"  {index}) {example.full_description}")
                message = str(exception) or exception.__class__.__name__
                if self.verbose:
                    message = f"{exception.__class__.__name__}: {message}"
                lines.append(f"     {message}")
                if example.location:
                    lines.append(f"     # {example.location}")
                lines.append("")

        total = len(self.examples)
        failed = len(self.failures)
        noun = "example" if total == 1 else "examples"
        failure_noun = "failure" if failed == 1 else "failures"
        lines.append(f"{total} {noun}, {failed} {failure_noun}")
        return "\n".join(lines)
