"""
Core Services Module

Provides the CRUD data-access service for products.
"""

from .product_service import ProductService

__all__ = ["ProductService"]
