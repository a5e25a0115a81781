"""Process-wide registry of example groups.

The registration bridge registers every new example group class with the
current world. Hosts read ``world.example_groups`` to decide what to run.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from .ports import RegistryPort

logger = logging.getLogger(__name__)


class World(RegistryPort):
    """In-memory, append-only registry of example group classes."""

    def __init__(self) -> None:
        self._example_groups: list[type] = []

    def register(self, group: type) -> None:
        self._example_groups.append(group)
        logger.debug(f"Registered example group {group.__name__}")

    @property
    def example_groups(self) -> list[type]:
        return list(self._example_groups)

    def reset(self) -> None:
        self._example_groups.clear()


world: RegistryPort = World()


def current_world() -> RegistryPort:
    """Return the registry new example groups are registered with."""
    return world


@contextmanager
def use_world(registry: RegistryPort) -> Iterator[RegistryPort]:
    """Register example groups with ``registry`` for the duration of the block."""
    global world
    previous = world
    world = registry
    try:
        yield registry
    finally:
        world = previous
