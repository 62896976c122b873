"""
esb-httpapi: compile httpApi route declarations into a routing table and CORS policy.
"""

from .compiler import CompiledHttpApi, compile_http_api
from .exceptions import (
    DuplicateRoute,
    HttpApiConfigError,
    InvalidCatchAllMethod,
    MalformedRouteSyntax,
    MissingMethod,
    MissingPath,
    ServiceConfigError,
    UnsupportedMethod,
)
from .models import CorsPolicy, RouteTable, RouteTarget, TargetAlias
from .services import merge_cors, resolve_routes

__all__ = [
    "CompiledHttpApi",
    "CorsPolicy",
    "DuplicateRoute",
    "HttpApiConfigError",
    "InvalidCatchAllMethod",
    "MalformedRouteSyntax",
    "MissingMethod",
    "MissingPath",
    "RouteTable",
    "RouteTarget",
    "ServiceConfigError",
    "TargetAlias",
    "UnsupportedMethod",
    "compile_http_api",
    "merge_cors",
    "resolve_routes",
]
