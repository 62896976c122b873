"""
Data model definitions package.

Aggregates route and CORS models for use in other modules.
"""

from .cors import CorsPolicy, CorsSettings
from .route import (
    ANY_METHOD,
    CATCH_ALL_ROUTE_KEY,
    SUPPORTED_METHODS,
    RouteBinding,
    RouteEntry,
    RouteTable,
    RouteTarget,
    TargetAlias,
)

__all__ = [
    "ANY_METHOD",
    "CATCH_ALL_ROUTE_KEY",
    "SUPPORTED_METHODS",
    "CorsPolicy",
    "CorsSettings",
    "RouteBinding",
    "RouteEntry",
    "RouteTable",
    "RouteTarget",
    "TargetAlias",
]
