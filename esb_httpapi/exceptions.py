"""
Custom exception classes.

Represent errors in user-declared httpApi routes and service configuration.
Every error is a configuration error: the only remedy is to fix the input
and compile again.
"""

from typing import Any, Optional


class HttpApiConfigError(Exception):
    """Base exception class for invalid httpApi configuration."""

    kind = "HttpApiConfigError"
    code = "INVALID_HTTP_API_CONFIG"

    def __init__(self, message: str, function_name: Optional[str] = None, value: Any = None):
        self.function_name = function_name
        self.value = value
        super().__init__(message)


class MalformedRouteSyntax(HttpApiConfigError):
    """Raised when a string route is neither "<METHOD> <path>" nor "*"."""

    kind = "MalformedRouteSyntax"
    code = "INVALID_HTTP_API_ROUTE"

    def __init__(self, function_name: str, value: Any):
        super().__init__(
            f'Invalid "<method> <path>" route {value!r} in function {function_name} '
            "for httpApi event",
            function_name,
            value,
        )


class MissingPath(HttpApiConfigError):
    """Raised when no path could be resolved for a route."""

    kind = "MissingPath"
    code = "MISSING_HTTP_API_PATH"

    def __init__(self, function_name: str, value: Any):
        super().__init__(
            f'Missing "path" property in function {function_name} for httpApi event '
            f"(got {value!r})",
            function_name,
            value,
        )


class MissingMethod(HttpApiConfigError):
    """Raised when a non catch-all route has no method."""

    kind = "MissingMethod"
    code = "MISSING_HTTP_API_METHOD"

    def __init__(self, function_name: str, path: str):
        super().__init__(
            f'Missing "method" property for "{path}" path in function {function_name} '
            "for httpApi event",
            function_name,
            path,
        )


class InvalidCatchAllMethod(HttpApiConfigError):
    """Raised when a method other than "*" is combined with the "*" path."""

    kind = "InvalidCatchAllMethod"
    code = "INVALID_HTTP_API_PATH"

    def __init__(self, function_name: str, method: str):
        super().__init__(
            f'Invalid "path" property in function {function_name} for httpApi event: '
            f'catch-all path "*" cannot be bound to method {method!r}',
            function_name,
            method,
        )


class UnsupportedMethod(HttpApiConfigError):
    """Raised when the method is neither a supported HTTP method nor ANY."""

    kind = "UnsupportedMethod"
    code = "INVALID_HTTP_API_METHOD"

    def __init__(self, function_name: str, method: str):
        super().__init__(
            f'Invalid "method" property {method!r} in function {function_name} '
            "for httpApi event",
            function_name,
            method,
        )


class DuplicateRoute(HttpApiConfigError):
    """Raised when two routes resolve to the same route key, or ANY shadows a method."""

    kind = "DuplicateRoute"
    code = "DUPLICATE_HTTP_API_ROUTE"

    def __init__(self, function_name: str, route_key: str, message: Optional[str] = None):
        self.route_key = route_key
        super().__init__(
            message
            or f"Duplicate route '{route_key}' configuration in function {function_name} "
            "for httpApi event",
            function_name,
            route_key,
        )


class DuplicateMethod(DuplicateRoute):
    """ANY and an explicit method were both bound to the same path."""

    code = "DUPLICATE_HTTP_API_METHOD"

    def __init__(self, function_name: str, route_key: str, path: str):
        self.path = path
        super().__init__(
            function_name,
            route_key,
            f'Duplicate method for "{path}" path in function {function_name} '
            f"for httpApi event ('{route_key}' conflicts with an existing route)",
        )


class ServiceConfigError(HttpApiConfigError):
    """Raised when the service configuration document cannot be read."""

    kind = "InvalidServiceConfig"
    code = "INVALID_SERVICE_CONFIG"

    def __init__(self, detail: str, cause: Optional[Exception] = None):
        self.cause = cause
        super().__init__(f"Invalid service configuration: {detail}")
