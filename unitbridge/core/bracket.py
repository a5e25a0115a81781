"""Execution bracketing for examples.

Runs each example of a group as:

    setup -> before hooks -> body -> after hooks -> teardown

Every failure is contained at the example boundary. Teardown always
runs, even when setup failed or a BaseException is unwinding.
"""

import logging
import time
from collections.abc import Callable, Iterable
from typing import Any

from .models import Example, ExampleResult, Outcome
from .ports import ReporterPort

logger = logging.getLogger(__name__)


def _call_optional(instance: Any, name: str) -> None:
    hook = getattr(instance, name, None)
    if callable(hook):
        hook()


class ExecutionBracket:
    """Runs the examples of a group with their hooks.

    Args:
        reporter: Receives per-example notifications (optional).
    """

    def __init__(self, reporter: ReporterPort | None = None):
        self.reporter = reporter

    def run_all(self, group: type, instance: Any = None) -> list[ExampleResult]:
        """Run every example of ``group`` in discovery order.

        Args:
            group: The example group class.
            instance: Reuse this instance for every example instead of
                creating a fresh one each time.

        Returns:
            One ExampleResult per example.
        """
        return self.run_groups([group], instance)

    def run_groups(
        self, groups: Iterable[type], instance: Any = None
    ) -> list[ExampleResult]:
        """Run several groups as one reporter run."""
        batches = [(group, group.examples()) for group in groups]
        if self.reporter is not None:
            self.reporter.start(sum(len(examples) for _, examples in batches))

        results = []
        for group, examples in batches:
            results.extend(self._run_group(group, examples, instance))

        if self.reporter is not None:
            self.reporter.finish()
        return results

    def _run_group(
        self, group: type, examples: list[Example], instance: Any
    ) -> list[ExampleResult]:
        before_hooks = group.before_hooks()
        after_hooks = group.after_hooks()
        results = []
        for example in examples:
            try:
                target = instance if instance is not None else group()
            except Exception as e:
                logger.debug(
                    f"Could not instantiate {group.__name__} for {example.full_description}: {e}",
                    exc_info=True,
                )
                results.append(self._without_instance(example, e))
                continue
            results.append(
                self.run_example(example, target, before_hooks, after_hooks)
            )

        failed = sum(1 for result in results if not result.passed)
        logger.debug(
            f"Ran {len(results)} examples of {group.__name__}, {failed} failed"
        )
        return results

    def run_example(
        self,
        example: Example,
        instance: Any,
        before_hooks: list[Callable[[Any], Any]] | None = None,
        after_hooks: list[Callable[[Any], Any]] | None = None,
    ) -> ExampleResult:
        """Run one example against ``instance`` and report its outcome."""
        if self.reporter is not None:
            self.reporter.example_started(example)
        logger.debug(f"Running {example.full_description}")

        started = time.perf_counter()
        failure: BaseException | None = None
        try:
            self._mark_instance(instance, None)
            failure = self._run_inside_teardown(
                example, instance, before_hooks or [], after_hooks or []
            )
            self._mark_instance(instance, failure is None)
        finally:
            try:
                _call_optional(instance, "teardown")
            except Exception as e:
                logger.debug(
                    f"teardown failed for {example.full_description}: {e}",
                    exc_info=True,
                )
                failure = failure or e

        result = ExampleResult(
            example=example,
            outcome=Outcome.from_exception(failure),
            exception=failure,
            duration_seconds=time.perf_counter() - started,
        )
        self._report(result)
        return result

    def _run_inside_teardown(
        self,
        example: Example,
        instance: Any,
        before_hooks: list[Callable[[Any], Any]],
        after_hooks: list[Callable[[Any], Any]],
    ) -> BaseException | None:
        """Run setup, hooks and body; return the first failure seen."""
        try:
            _call_optional(instance, "setup")
        except Exception as e:
            logger.debug(
                f"setup failed for {example.full_description}: {e}", exc_info=True
            )
            return e

        failure: BaseException | None = None
        try:
            for hook in before_hooks:
                hook(instance)
            example.body(instance)
        except Exception as e:
            logger.debug(f"{example.full_description} failed: {e}", exc_info=True)
            failure = e

        for hook in after_hooks:
            try:
                hook(instance)
            except Exception as e:
                logger.debug(
                    f"after hook failed for {example.full_description}: {e}",
                    exc_info=True,
                )
                failure = failure or e
        return failure

    def _without_instance(self, example: Example, failure: Exception) -> ExampleResult:
        if self.reporter is not None:
            self.reporter.example_started(example)
        result = ExampleResult(
            example=example,
            outcome=Outcome.from_exception(failure),
            exception=failure,
            duration_seconds=0.0,
        )
        self._report(result)
        return result

    @staticmethod
    def _mark_instance(instance: Any, passed: bool | None) -> None:
        marker = getattr(instance, "_record_outcome", None)
        if callable(marker):
            marker(passed)

    def _report(self, result: ExampleResult) -> None:
        if self.reporter is None:
            return
        if result.exception is None:
            self.reporter.example_passed(result.example)
        else:
            self.reporter.example_failed(result.example, result.exception)
