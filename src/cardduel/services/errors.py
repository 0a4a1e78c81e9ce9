"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a runtime entity or combat cannot be created."""
