"""Blog records API and interactive CLI client."""

__version__ = "1.0.0"
