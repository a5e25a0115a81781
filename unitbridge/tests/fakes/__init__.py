"""Fake implementations of core ports for testing.

These in-memory implementations allow the adapter core to be tested
without a real host runner:

- FakeRegistryPort: Captured example-group registrations
- FakeReporterPort: Captured per-example notifications
"""

from .registry import FakeRegistryPort
from .reporter import FakeReporterPort

__all__ = [
    "FakeRegistryPort",
    "FakeReporterPort",
]
