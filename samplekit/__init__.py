"""Small building blocks for concurrency, feed searching, JSON, logging and HTTP."""

__version__ = "0.1.0"