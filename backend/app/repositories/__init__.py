"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from the request handlers.
"""
from app.repositories.product_repository import ProductRepository, PostgresProductRepository

__all__ = [
    'ProductRepository',
    'PostgresProductRepository'
]
