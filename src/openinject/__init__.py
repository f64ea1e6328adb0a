"""Open-workload injection schedules for load testing."""

from __future__ import annotations

from openinject.errors import ConfigurationError

__all__ = ["ConfigurationError"]
