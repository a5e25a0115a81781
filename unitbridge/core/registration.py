"""Class creation machinery for example groups.

Every example group class is built by ExampleGroupMeta, which:

- gives the class body a namespace where ``example``, ``test_info``,
  ``before`` and friends are available as bare names
- captures where the class and each of its methods were defined
- keeps a GroupRecord in the class's own ``__dict__``
- registers the finished class with the current world
- keeps recording when methods are assigned to the class later
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .discovery import is_test_method
from .location import caller_location, code_location
from .metadata import (
    REQUIRED_EXAMPLE_KEYS,
    PendingInfo,
    build_group_metadata,
    inheritable_info,
    merge_group_info,
    user_keys,
)
from .models import Location
from .world import current_world

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeclaredExample:
    """An example declared by description rather than by method name."""

    description: str
    body: Callable[[Any], Any]
    location: Location | None
    info: dict[str, Any]


@dataclass
class GroupRecord:
    """Per-class registry entry.

    Only holds what the class itself declared; inherited state is found
    by walking the MRO and reading each ancestor's record.
    """

    location: Location | None = None
    anonymous: bool = False
    definitions: dict[str, Location] = field(default_factory=dict)
    method_info: dict[str, dict[str, Any]] = field(default_factory=dict)
    declared_examples: dict[str, DeclaredExample] = field(default_factory=dict)
    before_hooks: list[Callable[[Any], Any]] = field(default_factory=list)
    after_hooks: list[Callable[[Any], Any]] = field(default_factory=list)
    aliases: list[str] = field(default_factory=list)
    pending: PendingInfo = field(default_factory=PendingInfo)
    metadata: dict[str, Any] = field(default_factory=dict)

    def declare(self, name: str, value: Any, prefixes: tuple[str, ...]) -> None:
        """Record a class attribute as it is bound."""
        if not callable(value) and code_location(value) is None:
            return
        location = code_location(value) or caller_location()
        if location is not None:
            self.definitions[name] = location
        if is_test_method(name, value, prefixes):
            self.method_info[name] = self.pending.consume()

    def add_example(
        self, description: str, body: Callable[[Any], Any], info: dict[str, Any]
    ) -> None:
        if not callable(body):
            raise TypeError(
                f"example body for {description!r} must be callable, got {body!r}"
            )
        info = user_keys(info, REQUIRED_EXAMPLE_KEYS)
        self.declared_examples[description] = DeclaredExample(
            description=description,
            body=body,
            location=code_location(body) or caller_location(),
            info={**self.pending.consume(), **info},
        )

    def add_alias(self, name: str) -> None:
        if not name.isidentifier():
            raise ValueError(f"example alias must be an identifier, got {name!r}")
        if name not in self.aliases:
            self.aliases.append(name)


def own_record(group: type) -> GroupRecord:
    """The record stored on ``group`` itself, not inherited."""
    record = vars(group).get("_record")
    if record is None:
        raise TypeError(f"{group.__name__} is not an example group")
    return record


def inherited_aliases(bases: tuple[type, ...]) -> list[str]:
    aliases: list[str] = []
    for base in bases:
        for klass in reversed(base.__mro__):
            record = vars(klass).get("_record")
            if record is None:
                continue
            aliases.extend(a for a in record.aliases if a not in aliases)
    return aliases


class ClassBodyNamespace(dict):
    """Namespace a class body executes in.

    Pre-binds the declaration helpers so a class body can call
    ``test_info(...)`` or decorate with ``@example("...")``. Helpers the
    body did not overwrite are dropped before the class is created.
    """

    def __init__(self, bases: tuple[type, ...]) -> None:
        super().__init__()
        self.bases = bases
        self.record = GroupRecord()
        self.class_info: dict[str, Any] = {}
        self._helpers: dict[str, Any] = {}
        self._declared_bodies: list[Any] = []

        self._bind("example", self.example)
        self._bind("before", self.before)
        self._bind("after", self.after)
        self._bind("alias_example_to", self.alias_example_to)
        self._bind("test_info", self.test_info)
        self._bind("test_case_info", self.test_case_info)
        for alias in inherited_aliases(bases):
            self._bind(alias, self.example)

    def _bind(self, name: str, helper: Any) -> None:
        self._helpers[name] = helper
        dict.__setitem__(self, name, helper)

    def __setitem__(self, key: str, value: Any) -> None:
        if any(value is body for body in self._declared_bodies):
            return
        super().__setitem__(key, value)
        if not key.startswith("__"):
            self.record.declare(key, value, self.prefixes())

    def prefixes(self) -> tuple[str, ...]:
        if "test_method_prefixes" in self:
            return tuple(self["test_method_prefixes"])
        for base in self.bases:
            prefixes = getattr(base, "test_method_prefixes", None)
            if prefixes is not None:
                return tuple(prefixes)
        return ()

    def class_body(self) -> dict[str, Any]:
        """Namespace contents minus the helpers."""
        return {
            key: value
            for key, value in self.items()
            if not (key in self._helpers and value is self._helpers[key])
        }

    def example(
        self, description: str, body: Callable[[Any], Any] | None = None, **info: Any
    ) -> Any:
        if body is None:
            def decorator(function: Callable[[Any], Any]) -> Callable[[Any], Any]:
                self.record.add_example(description, function, info)
                self._declared_bodies.append(function)
                return function

            return decorator
        self.record.add_example(description, body, info)
        return body

    def before(self, hook: Callable[[Any], Any]) -> Callable[[Any], Any]:
        self.record.before_hooks.append(hook)
        return hook

    def after(self, hook: Callable[[Any], Any]) -> Callable[[Any], Any]:
        self.record.after_hooks.append(hook)
        return hook

    def alias_example_to(self, name: str) -> None:
        self.record.add_alias(name)
        self._bind(name, self.example)

    def test_info(self, **info: Any) -> None:
        self.record.pending.stage(**info)

    def test_case_info(self, **info: Any) -> None:
        self.class_info.update(info)


class ExampleGroupMeta(type):
    """Metaclass that turns classes into registered example groups."""

    @classmethod
    def __prepare__(mcls, name: str, bases: tuple[type, ...], **kwargs: Any) -> ClassBodyNamespace:  # type: ignore[override]
        return ClassBodyNamespace(bases)

    def __new__(
        mcls,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        *,
        anonymous: bool = False,
        **kwargs: Any,
    ) -> "ExampleGroupMeta":
        if isinstance(namespace, ClassBodyNamespace):
            record = namespace.record
            body = namespace.class_body()
            class_info = namespace.class_info
        else:
            record = GroupRecord()
            body = dict(namespace)
            class_info = {}
            prefixes = ClassBodyNamespace(bases).prefixes()
            for key, value in body.items():
                if not key.startswith("__"):
                    record.declare(key, value, prefixes)
        body["_record"] = record

        cls = super().__new__(mcls, name, bases, body, **kwargs)
        record.location = caller_location()
        record.anonymous = anonymous

        parent = next(
            (vars(k)["_record"] for k in cls.__mro__[1:] if "_record" in vars(k)),
            None,
        )
        description = cls.anonymous_description if anonymous else name
        record.metadata = build_group_metadata(
            description,
            record.location,
            inheritable_info(parent.metadata) if parent is not None else {},
            test_unit=bool(getattr(cls, "xunit_style", False)),
        )
        merge_group_info(record.metadata, class_info)

        if not vars(cls).get("__group_root__", False):
            current_world().register(cls)
        return cls

    def __init__(
        cls,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        **kwargs: Any,
    ) -> None:
        super().__init__(name, bases, namespace)

    @property
    def metadata(cls) -> dict[str, Any]:
        return vars(cls)["_record"].metadata

    def __setattr__(cls, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        record = vars(cls).get("_record")
        if record is None or name.startswith("__") or name == "_record":
            return
        record.declare(name, value, tuple(getattr(cls, "test_method_prefixes", ())))

    def __getattr__(cls, name: str) -> Any:
        if not name.startswith("_"):
            for klass in cls.__mro__:
                record = vars(klass).get("_record")
                if record is not None and name in record.aliases:
                    return cls.example
        raise AttributeError(f"type object {cls.__name__!r} has no attribute {name!r}")
