"""
Core logic package.

Provides shared helpers such as logical-ID naming and logging setup.
"""

from .naming import (
    get_http_api_integration_logical_id,
    get_http_api_route_logical_id,
    get_lambda_logical_id,
)

__all__ = [
    "get_http_api_integration_logical_id",
    "get_http_api_route_logical_id",
    "get_lambda_logical_id",
]
