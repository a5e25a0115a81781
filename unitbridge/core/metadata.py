"""Metadata records for example groups and examples.

A group's record has the shape ``{"example_group": {...}}``. An example's
record holds the computed required keys plus any user keys staged with
``test_info`` for that one example. Required keys always win over user
keys with the same name.
"""

import logging
from typing import Any

from .models import Location

logger = logging.getLogger(__name__)

REQUIRED_EXAMPLE_KEYS = frozenset(
    {
        "description",
        "full_description",
        "file_path",
        "line_number",
        "location",
        "example_group",
        "behaviour",
        "test_unit",
    }
)

RESERVED_GROUP_KEYS = frozenset(
    {
        "description",
        "full_description",
        "file_path",
        "line_number",
        "location",
        "block",
        "describes",
        "test_unit",
    }
)


class PendingInfo:
    """One-shot metadata batch for the next qualifying declaration.

    ``stage`` replaces whatever batch is waiting; ``consume`` hands the
    batch out once and clears the slot.
    """

    def __init__(self) -> None:
        self._batch: dict[str, Any] | None = None

    def stage(self, **info: Any) -> None:
        if self._batch is not None:
            logger.debug(f"Discarding unconsumed test_info {sorted(self._batch)}")
        self._batch = user_keys(info, REQUIRED_EXAMPLE_KEYS)

    def consume(self) -> dict[str, Any]:
        batch, self._batch = self._batch, None
        return batch or {}

    @property
    def waiting(self) -> bool:
        return self._batch is not None


def user_keys(info: dict[str, Any], reserved: frozenset[str]) -> dict[str, Any]:
    """Drop reserved keys from ``info``, logging each one dropped."""
    accepted = {}
    for key, value in info.items():
        if key in reserved:
            logger.warning(f"Ignoring reserved metadata key {key!r}")
            continue
        accepted[key] = value
    return accepted


def build_group_metadata(
    description: str,
    location: Location | None,
    inherited: dict[str, Any],
    test_unit: bool,
) -> dict[str, Any]:
    """Build the record for a newly created example group.

    Args:
        description: Class name, or the anonymous placeholder.
        location: Where the class statement (or factory call) was.
        inherited: User keys copied from the parent group.
        test_unit: Whether the group is an xUnit-style TestCase.
    """
    group: dict[str, Any] = {
        "description": description,
        "full_description": description,
        "file_path": location.file_path if location else None,
        "line_number": location.line_number if location else None,
        "location": str(location) if location else None,
        "block": None,
        "describes": None,
    }
    if test_unit:
        group["test_unit"] = True
    for key, value in inherited.items():
        group.setdefault(key, value)
    return {"example_group": group}


def merge_group_info(metadata: dict[str, Any], info: dict[str, Any]) -> None:
    """Merge user keys into a group record in place. Reserved keys are skipped."""
    metadata["example_group"].update(user_keys(info, RESERVED_GROUP_KEYS))


def inheritable_info(metadata: dict[str, Any]) -> dict[str, Any]:
    """User keys of a group record, as copied into subclasses."""
    return {
        key: value
        for key, value in metadata["example_group"].items()
        if key not in RESERVED_GROUP_KEYS
    }


def build_example_metadata(
    group_metadata: dict[str, Any],
    description: str,
    full_description: str,
    location: Location | None,
    info: dict[str, Any],
) -> dict[str, Any]:
    """Build the record for one example.

    The group record is copied, so later ``test_case_info`` calls do not
    change examples that were already built.
    """
    group = dict(group_metadata["example_group"])
    metadata: dict[str, Any] = {
        "description": description,
        "full_description": full_description,
        "file_path": location.file_path if location else None,
        "line_number": location.line_number if location else None,
        "location": str(location) if location else None,
        "example_group": group,
        "behaviour": group,
    }
    if group.get("test_unit"):
        metadata["test_unit"] = True
    for key, value in info.items():
        metadata.setdefault(key, value)
    return metadata
