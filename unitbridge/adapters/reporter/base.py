"""Collecting reporter.

Implements ReporterPort by remembering every notification so hosts and
tests can inspect outcomes after a run.
"""

from unitbridge.core.models import Example
from unitbridge.core.ports import ReporterPort


class BaseReporter(ReporterPort):
    """Records examples and failures without producing output."""

    def __init__(self) -> None:
        self.example_count = 0
        self.examples: list[Example] = []
        self.passed_examples: list[Example] = []
        self.failures: list[tuple[Example, BaseException]] = []
        self.finished = False

    def start(self, example_count: int) -> None:
        self.example_count += example_count
        self.finished = False

    def example_started(self, example: Example) -> None:
        self.examples.append(example)

    def example_passed(self, example: Example) -> None:
        self.passed_examples.append(example)

    def example_failed(self, example: Example, exception: BaseException) -> None:
        self.failures.append((example, exception))

    def finish(self) -> None:
        self.finished = True

    @property
    def failed_examples(self) -> list[Example]:
        return [example for example, _ in self.failures]
