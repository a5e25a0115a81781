"""Domain models for the unitbridge adapter.

All models in this module use only Python standard library types,
keeping the core free of external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class Location:
    """A point in source code where a class or method was defined."""

    file_path: str
    line_number: int

    def __post_init__(self) -> None:
        """Validate location invariants on creation."""
        if not self.file_path:
            raise ValueError("file_path must be a non-empty string")
        if self.line_number < 0:
            raise ValueError(
                f"line_number must be non-negative, got {self.line_number}"
            )

    def __str__(self) -> str:
        return f"{self.file_path}:{self.line_number}"


@dataclass(frozen=True, eq=False)
class Example:
    """One runnable unit of an example group.

    Built fresh by the discovery engine on every query, so two calls to
    ``examples()`` return equal but distinct objects.
    """

    description: str
    example_group: type
    metadata: dict[str, Any]
    body: Callable[[Any], Any]  # receives the group instance
    method_name: str | None = None  # None for fluent declarations

    @property
    def full_description(self) -> str:
        return self.metadata["full_description"]

    @property
    def location(self) -> str | None:
        return self.metadata.get("location")

    def __repr__(self) -> str:
        return f"<Example {self.full_description!r}>"


class Outcome(Enum):
    """Result of running one example.

    - PASSED: body and every hook completed
    - FAILED: an AssertionError was raised
    - ERRORED: any other exception was raised
    """

    PASSED = "passed"
    FAILED = "failed"
    ERRORED = "errored"

    @classmethod
    def from_exception(cls, exception: BaseException | None) -> "Outcome":
        """Classify the first failure seen while running an example."""
        if exception is None:
            return cls.PASSED
        if isinstance(exception, AssertionError):
            return cls.FAILED
        return cls.ERRORED


@dataclass(frozen=True)
class ExampleResult:
    """Outcome of executing a single example."""

    example: Example
    outcome: Outcome
    exception: BaseException | None
    duration_seconds: float

    def __post_init__(self) -> None:
        """Validate result invariants on creation."""
        if self.duration_seconds < 0:
            raise ValueError(
                f"duration_seconds must be non-negative, got {self.duration_seconds}"
            )
        if (self.outcome == Outcome.PASSED) != (self.exception is None):
            raise ValueError(
                f"outcome {self.outcome} is inconsistent with exception {self.exception!r}"
            )

    @property
    def passed(self) -> bool:
        return self.outcome == Outcome.PASSED
