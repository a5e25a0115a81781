"""Run xUnit-style test classes as behaviour-style example groups."""

from unitbridge.core import (
    Example,
    ExampleGroup,
    ExampleResult,
    Location,
    Outcome,
    TestCase,
    World,
    current_world,
    nottest,
    use_world,
)

__all__ = [
    "Example",
    "ExampleGroup",
    "ExampleResult",
    "Location",
    "Outcome",
    "TestCase",
    "World",
    "current_world",
    "nottest",
    "use_world",
]
