"""CRUD HTTP service for products."""

__version__ = "0.1.0"
