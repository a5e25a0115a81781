"""Tests for the registration bridge and group hierarchy queries."""

import pytest

from unitbridge.core.example_group import ExampleGroup
from unitbridge.core.registration import GroupRecord, own_record
from unitbridge.core.test_case import TestCase
from unitbridge.core.world import World, current_world, use_world
from unitbridge.tests.fakes import FakeRegistryPort


# ============================================================================
# registration with the world
# ============================================================================


def test_registers_test_cases_in_creation_order(registry: FakeRegistryPort) -> None:
    foo = TestCase.anonymous()

    class SampleTestCase(TestCase):
        pass

    assert registry.example_groups == [foo, SampleTestCase]


def test_roots_are_never_registered(registry: FakeRegistryPort) -> None:
    class Checkout(ExampleGroup):
        pass

    assert TestCase not in registry.registered
    assert ExampleGroup not in registry.registered
    assert registry.registered == [Checkout]


def test_subclasses_register_too(registry: FakeRegistryPort) -> None:
    class Foo(TestCase):
        pass

    class Bar(Foo):
        pass

    assert registry.registered == [Foo, Bar]
    assert registry.register_call_count == 2


def test_reopening_does_not_register_again(registry: FakeRegistryPort) -> None:
    class Foo(TestCase):
        pass

    def test_bar(self):
        pass

    Foo.test_bar = test_bar
    assert registry.register_call_count == 1


def test_use_world_restores_the_previous_registry(registry: FakeRegistryPort) -> None:
    inner = World()
    with use_world(inner) as active:
        assert active is inner
        assert current_world() is inner

        class Foo(TestCase):
            pass

    assert current_world() is registry
    assert inner.example_groups == [Foo]
    assert Foo not in registry.registered


def test_use_world_restores_after_errors(registry: FakeRegistryPort) -> None:
    with pytest.raises(RuntimeError):
        with use_world(World()):
            raise RuntimeError("boom")
    assert current_world() is registry


def test_world_reset_and_copy() -> None:
    world = World()
    world.register(TestCase)
    groups = world.example_groups
    groups.clear()
    assert world.example_groups == [TestCase]
    world.reset()
    assert world.example_groups == []


# ============================================================================
# hierarchy queries
# ============================================================================


def test_ancestors_excludes_the_root_classes() -> None:
    class Foo(TestCase):
        pass

    class Bar(Foo):
        pass

    assert Bar.ancestors() == [Bar, Foo]
    assert Foo.ancestors() == [Foo]


def test_ancestors_skips_plain_mixins() -> None:
    class Behaviour:
        pass

    class Foo(TestCase):
        pass

    class Bar(Behaviour, Foo):
        pass

    assert Bar.ancestors() == [Bar, Foo]


def test_hook_lists_follow_the_hierarchy() -> None:
    def foo_before(self):
        pass

    def bar_before(self):
        pass

    def foo_after(self):
        pass

    def bar_after(self):
        pass

    class Foo(TestCase):
        before(foo_before)  # noqa: F821
        after(foo_after)  # noqa: F821

    class Bar(Foo):
        before(bar_before)  # noqa: F821
        after(bar_after)  # noqa: F821

    assert Bar.before_hooks() == [foo_before, bar_before]
    assert Bar.after_hooks() == [bar_after, foo_after]
    assert Foo.before_hooks() == [foo_before]


# ============================================================================
# per-class records
# ============================================================================


def test_each_group_owns_its_record() -> None:
    class Foo(TestCase):
        pass

    class Bar(Foo):
        pass

    assert isinstance(own_record(Foo), GroupRecord)
    assert own_record(Foo) is not own_record(Bar)


def test_own_record_rejects_plain_classes() -> None:
    class Plain:
        pass

    with pytest.raises(TypeError, match="not an example group"):
        own_record(Plain)


def test_declaration_helpers_do_not_leak_into_the_class() -> None:
    class Foo(TestCase):
        test_info(foo="bar")  # noqa: F821

        def test_baz(self):
            pass

    assert "test_info" not in vars(Foo)
    assert "example" not in vars(Foo)
    assert "test_baz" in vars(Foo)


def test_class_body_may_shadow_a_helper_name() -> None:
    class Foo(TestCase):
        def after(self):
            return "mine"

    assert Foo().after() == "mine"


def test_types_new_class_body_is_recorded() -> None:
    def body(namespace):
        namespace["test_bar"] = lambda self: None

    foo = TestCase.anonymous(body)
    assert [e.description for e in foo.examples()] == ["test_bar"]
    assert foo.find_definition("test_bar") is not None
