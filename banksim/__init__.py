"""Threaded bank simulation contrasting locked and unsynchronised shared state."""

__version__ = "0.1.0"
__all__ = ["__version__"]