"""
Error types for hotel-topology.

The system has no transient failures; the only errors are configuration
mistakes, raised at construction time.
"""


class InvalidConfigurationError(ValueError):
    """Raised when the topology or controller configuration is invalid."""
