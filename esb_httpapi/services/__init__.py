"""
Services package.

Provides the route resolution and CORS merging passes.
"""

from .cors_merger import merge_cors
from .route_resolver import RouteTableBuilder, resolve_routes

__all__ = [
    "RouteTableBuilder",
    "merge_cors",
    "resolve_routes",
]
