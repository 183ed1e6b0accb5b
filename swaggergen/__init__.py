"""Angular API client generator for Swagger 2.0 schemas."""

from .pipeline import generate

__all__ = ["generate"]
__version__ = "0.1.0"
