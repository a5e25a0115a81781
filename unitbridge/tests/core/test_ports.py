"""Unit tests for domain models and port interface contracts.

Tests verify model invariants and that port abstract base classes cannot
be used without implementing the full interface.
"""

import pytest

from unitbridge.core.models import Example, ExampleResult, Location, Outcome
from unitbridge.core.ports import RegistryPort, ReporterPort
from unitbridge.core.world import World
from unitbridge.tests.fakes import FakeRegistryPort, FakeReporterPort


# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture
def example() -> Example:
    """Create a sample example for testing."""
    return Example(
        description="test_bar",
        example_group=object,
        metadata={"full_description": "Foo#test_bar", "location": "foo.py:3"},
        body=lambda instance: None,
        method_name="test_bar",
    )


# ============================================================================
# Models
# ============================================================================


class TestLocation:
    """Test Location validation and formatting."""

    def test_valid_location(self) -> None:
        location = Location("foo.py", 3)
        assert location.file_path == "foo.py"
        assert str(location) == "foo.py:3"

    def test_line_zero_is_allowed(self) -> None:
        assert Location("<string>", 0).line_number == 0

    def test_locations_compare_by_value(self) -> None:
        assert Location("foo.py", 3) == Location("foo.py", 3)
        assert len({Location("foo.py", 3), Location("foo.py", 3)}) == 1


class TestExample:
    """Test Example convenience accessors."""

    def test_full_description_and_location(self, example: Example) -> None:
        assert example.full_description == "Foo#test_bar"
        assert example.location == "foo.py:3"
        assert repr(example) == "<Example 'Foo#test_bar'>"

    def test_missing_location_is_none(self) -> None:
        example = Example(
            description="x",
            example_group=object,
            metadata={"full_description": "Foo x"},
            body=lambda instance: None,
        )
        assert example.location is None
        assert example.method_name is None


class TestOutcome:
    """Test outcome classification."""

    @pytest.mark.parametrize(
        "exception, expected",
        [
            (None, Outcome.PASSED),
            (AssertionError("no"), Outcome.FAILED),
            (ValueError("bad"), Outcome.ERRORED),
            (KeyboardInterrupt(), Outcome.ERRORED),
        ],
    )
    def test_from_exception(self, exception, expected) -> None:
        assert Outcome.from_exception(exception) is expected


class TestExampleResult:
    """Test ExampleResult validation."""

    def test_passed_result(self, example: Example) -> None:
        result = ExampleResult(example, Outcome.PASSED, None, 0.1)
        assert result.passed

    def test_failed_result(self, example: Example) -> None:
        result = ExampleResult(example, Outcome.FAILED, AssertionError("x"), 0.1)
        assert not result.passed

    def test_negative_duration_rejected(self, example: Example) -> None:
        with pytest.raises(ValueError, match="duration_seconds"):
            ExampleResult(example, Outcome.PASSED, None, -1.0)

    def test_outcome_must_match_exception(self, example: Example) -> None:
        with pytest.raises(ValueError, match="inconsistent"):
            ExampleResult(example, Outcome.PASSED, RuntimeError("x"), 0.0)
        with pytest.raises(ValueError, match="inconsistent"):
            ExampleResult(example, Outcome.FAILED, None, 0.0)


# ============================================================================
# Ports
# ============================================================================


class TestPortContracts:
    """Ports are abstract and their implementations satisfy them."""

    def test_registry_port_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            RegistryPort()  # type: ignore[abstract]

    def test_reporter_port_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            ReporterPort()  # type: ignore[abstract]

    def test_partial_reporter_cannot_be_instantiated(self) -> None:
        class HalfReporter(ReporterPort):
            def start(self, example_count: int) -> None:
                pass

        with pytest.raises(TypeError):
            HalfReporter()  # type: ignore[abstract]

    @pytest.mark.parametrize("registry", [World(), FakeRegistryPort()])
    def test_registries_implement_the_port(self, registry: RegistryPort) -> None:
        assert isinstance(registry, RegistryPort)
        registry.register(int)
        assert registry.example_groups == [int]
        registry.reset()
        assert registry.example_groups == []

    def test_fake_reporter_implements_the_port(self, example: Example) -> None:
        reporter = FakeReporterPort()
        assert isinstance(reporter, ReporterPort)
        reporter.example_failed(example, AssertionError("x"))
        assert reporter.failed_examples == [example]
        reporter.reset()
        assert reporter.events == []
