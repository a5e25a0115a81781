"""Reporter adapters for rendering example outcomes.

Implementations:
- BaseReporter (collects outcomes, prints nothing)
- ProgressReporter (one character per example, then a failure summary)
"""

from .base import BaseReporter
from .progress import ProgressReporter

__all__ = ["BaseReporter", "ProgressReporter"]
