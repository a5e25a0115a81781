"""Host example-group base.

ExampleGroup is the behaviour-style container the xUnit adapter builds
on: examples declared by description, before/after hooks, metadata, and
a place in the global registry.

    class Checkout(ExampleGroup):
        @before
        def _(self):
            self.cart = []

        @it("starts empty")
        def _(self):
            assert self.cart == []
"""

from collections.abc import Callable
from typing import Any

from .bracket import ExecutionBracket
from .discovery import discover_examples
from .location import find_definition
from .models import Example, ExampleResult, Location
from .ports import ReporterPort
from .registration import ExampleGroupMeta, own_record


class ExampleGroup(metaclass=ExampleGroupMeta):
    """Root of every example group. Never registered itself."""

    __group_root__ = True
    __test__ = False  # keep pytest from collecting groups as test classes

    test_method_prefixes: tuple[str, ...] = ()
    anonymous_description = "<Anonymous ExampleGroup>"
    xunit_style = False

    alias_example_to("it")  # noqa: F821
    alias_example_to("specify")  # noqa: F821

    @classmethod
    def example(
        cls, description: str, body: Callable[[Any], Any] | None = None, **info: Any
    ) -> Any:
        """Declare an example by description.

        Works as a call with a body or as a decorator. The body receives
        the group instance.
        """
        record = own_record(cls)
        if body is None:
            def decorator(function: Callable[[Any], Any]) -> Callable[[Any], Any]:
                record.add_example(description, function, info)
                return function

            return decorator
        record.add_example(description, body, info)
        return body

    @classmethod
    def alias_example_to(cls, name: str) -> None:
        """Make ``name`` another way to declare examples on this group."""
        own_record(cls).add_alias(name)

    @classmethod
    def before(cls, hook: Callable[[Any], Any]) -> Callable[[Any], Any]:
        own_record(cls).before_hooks.append(hook)
        return hook

    @classmethod
    def after(cls, hook: Callable[[Any], Any]) -> Callable[[Any], Any]:
        own_record(cls).after_hooks.append(hook)
        return hook

    @classmethod
    def examples(cls) -> list[Example]:
        return discover_examples(cls)

    @classmethod
    def ancestors(cls) -> list[type]:
        """``[cls, *example-group ancestors]``, stopping before the root."""
        chain = []
        for klass in cls.__mro__:
            if vars(klass).get("__group_root__", False):
                break
            if isinstance(klass, ExampleGroupMeta):
                chain.append(klass)
        return chain

    @classmethod
    def before_hooks(cls) -> list[Callable[[Any], Any]]:
        """Before hooks, root-most class first."""
        hooks = []
        for klass in reversed(cls.__mro__):
            record = vars(klass).get("_record")
            if record is not None:
                hooks.extend(record.before_hooks)
        return hooks

    @classmethod
    def after_hooks(cls) -> list[Callable[[Any], Any]]:
        """After hooks, most-derived class first."""
        hooks = []
        for klass in cls.__mro__:
            record = vars(klass).get("_record")
            if record is not None:
                hooks.extend(record.after_hooks)
        return hooks

    @classmethod
    def find_definition(cls, name: str) -> Location | None:
        return find_definition(cls, name)

    @classmethod
    def find_caller_lines(cls, name: str) -> list[str]:
        """Formatted definition location of ``name``, or an empty list."""
        location = find_definition(cls, name)
        return [str(location)] if location is not None else []

    @classmethod
    def run_all(
        cls, reporter: ReporterPort | None = None, instance: Any = None
    ) -> list[ExampleResult]:
        """Run every example of this group and return one result each."""
        return ExecutionBracket(reporter).run_all(cls, instance)
