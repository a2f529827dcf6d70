"""
Services Package - Business Logic Layer

This package contains service classes that encapsulate business logic,
keeping route handlers thin and focused on HTTP concerns.
"""

from .blog_service import BlogService
from .listing_service import ListingService
from .profile_service import ProfileService

__all__ = ['BlogService', 'ListingService', 'ProfileService']
