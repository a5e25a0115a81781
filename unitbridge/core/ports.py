"""Port interfaces for the unitbridge adapter.

These abstract base classes define the boundaries between the core
discovery/execution engine and the host runner around it. The default
registry lives in core/world.py; reporters live in the adapters/ package.

Port Interface Categories:

1. **Registry** (core registers groups, the host iterates them)
   - RegistryPort: Global ordered collection of example groups

2. **Reporting** (core pushes outcomes, the host renders them)
   - ReporterPort: Per-example pass/fail notifications
"""

from abc import ABC, abstractmethod

from .models import Example


class RegistryPort(ABC):
    """Port for the host's global example-group registry.

    The registration bridge calls ``register`` once for every example
    group class created, in declaration order. The collection is
    append-only from the core's point of view.
    """

    @abstractmethod
    def register(self, group: type) -> None:
        """Append an example group class to the registry.

        Args:
            group: The newly created example group class.
        """

    @property
    @abstractmethod
    def example_groups(self) -> list[type]:
        """All registered example groups, in registration order."""

    @abstractmethod
    def reset(self) -> None:
        """Forget every registered example group."""


class ReporterPort(ABC):
    """Port for receiving example outcomes.

    Adapters implementing this port render progress or collect results.
    The execution bracket calls the methods in this order for each run:

    - start(count) once
    - example_started(example), then exactly one of example_passed or
      example_failed, for every example
    - finish() once
    """

    @abstractmethod
    def start(self, example_count: int) -> None:
        """A run of ``example_count`` examples is about to begin."""

    @abstractmethod
    def example_started(self, example: Example) -> None:
        """An example is about to run."""

    @abstractmethod
    def example_passed(self, example: Example) -> None:
        """An example finished without failure."""

    @abstractmethod
    def example_failed(self, example: Example, exception: BaseException) -> None:
        """An example failed or raised.

        Args:
            example: The example that did not pass.
            exception: The first failure seen while running it.
        """

    @abstractmethod
    def finish(self) -> None:
        """The run is complete."""

    @property
    @abstractmethod
    def failed_examples(self) -> list[Example]:
        """Examples reported as failed so far, in reporting order."""


__all__ = ["RegistryPort", "ReporterPort"]
