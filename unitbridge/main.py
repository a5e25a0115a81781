"""Composition root for unitbridge.

This module is the ONLY location that imports both core logic and
concrete adapter implementations. All wiring of dependencies happens
here, creating a clear entry point for the runner.

Module Structure:
- Configuration loading via config module
- Logging setup
- Test file loading (classes register themselves with a fresh world)
- Reporter selection and the run itself
"""

import importlib.util
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from types import ModuleType

from unitbridge.adapters.reporter.base import BaseReporter
from unitbridge.adapters.reporter.progress import ProgressReporter
from unitbridge.config import Settings, load_settings
from unitbridge.core.bracket import ExecutionBracket
from unitbridge.core.ports import ReporterPort
from unitbridge.core.test_case import TestCase
from unitbridge.core.world import World, use_world

logger = logging.getLogger(__name__)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure runner logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.WARNING)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def apply_settings(settings: Settings) -> None:
    """Push discovery settings onto the TestCase root."""
    TestCase.test_method_prefixes = tuple(settings.test_method_prefixes)
    TestCase.anonymous_description = settings.anonymous_description


def build_reporter(settings: Settings) -> ReporterPort:
    if settings.reporter == "silent":
        return BaseReporter()
    return ProgressReporter(verbose=settings.debug)


def load_test_files(paths: Sequence[str | Path]) -> list[ModuleType]:
    """Import each file so the example groups it declares register.

    Raises:
        FileNotFoundError: If a path does not exist.
        ImportError: If a file cannot be loaded as a module.
    """
    modules = []
    for index, path in enumerate(paths):
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Test file not found: {path}")
        module_name = f"unitbridge_suite_{index}_{path.stem}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load test file: {path}")
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        spec.loader.exec_module(module)
        logger.info(f"Loaded {path}")
        modules.append(module)
    return modules


def run(
    paths: Sequence[str | Path],
    settings: Settings | None = None,
    reporter: ReporterPort | None = None,
) -> int:
    """Load test files, run every group they declare, return an exit code.

    Returns:
        0 if every example passed, 1 otherwise.
    """
    settings = settings or load_settings()
    apply_settings(settings)
    reporter = reporter or build_reporter(settings)

    with use_world(World()) as registry:
        load_test_files(paths)
        groups = registry.example_groups

    logger.info(f"Running {len(groups)} example groups")
    results = ExecutionBracket(reporter).run_groups(groups)
    return 0 if all(result.passed for result in results) else 1


def main() -> None:
    """Runner entry point.

    Exit codes:
        0: Every example passed
        1: At least one example failed, or a fatal error occurred
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    settings = load_settings()
    configure_logging(settings.log_level, settings.log_format)
    try:
        exit_code = run(sys.argv[1:], settings)
    except KeyboardInterrupt:
        logger.warning("Run interrupted by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
