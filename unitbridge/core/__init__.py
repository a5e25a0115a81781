"""Core discovery, metadata and execution logic for unitbridge.

This package contains zero external dependencies. Reporters and the
composition root live outside it.
"""

from .example_group import ExampleGroup
from .models import Example, ExampleResult, Location, Outcome
from .test_case import TestCase, nottest
from .world import World, current_world, use_world

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
