"""
Services Layer

Business logic services used by the API endpoints.
"""

from .core import ProductService

__all__ = ["ProductService"]
