from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when an injection profile is built with invalid parameters."""
