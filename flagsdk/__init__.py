"""User descriptions and client configuration for a feature flag SDK."""

__version__ = "2.4.8"
__all__ = ["config", "user"]