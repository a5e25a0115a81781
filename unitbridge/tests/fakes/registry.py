"""Fake RegistryPort implementation for testing."""

from unitbridge.core.ports import RegistryPort


class FakeRegistryPort(RegistryPort):
    """In-memory example-group registry for testing.

    Captures every registration so tests can assert on what the
    registration bridge did.
    """

    def __init__(self):
        """Initialize with no registered groups."""
        self.registered: list[type] = []
        self.register_call_count = 0

    def register(self, group: type) -> None:
        self.register_call_count += 1
        self.registered.append(group)

    @property
    def example_groups(self) -> list[type]:
        return list(self.registered)

    def reset(self) -> None:
        self.registered.clear()
        self.register_call_count = 0
