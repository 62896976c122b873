"""
Where: esb_httpapi/core/naming.py
What: Derive stable logical IDs from function names and route keys.
Why: Rendered manifests need identifiers that stay the same across compiles.
"""

import re

_NON_ALPHANUMERIC = re.compile(r"[^0-9A-Za-z]+")

HTTP_API_LOGICAL_ID = "HttpApi"


def normalize_name(name: str) -> str:
    """Upper-case the first character, keep the rest as-is."""
    return name[:1].upper() + name[1:]


def normalize_function_name(function_name: str) -> str:
    """
    Normalize a function name into an identifier-safe form.

    Example: "hello-world_v2" -> "HelloDashworldUnderscorev2"
    """
    return normalize_name(function_name.replace("-", "Dash").replace("_", "Underscore"))


def normalize_alphanumeric(name: str) -> str:
    """Drop every non-alphanumeric run and capitalize each remaining word."""
    return "".join(normalize_name(part) for part in _NON_ALPHANUMERIC.split(name) if part)


def get_lambda_logical_id(function_name: str) -> str:
    return f"{normalize_function_name(function_name)}LambdaFunction"


def get_http_api_integration_logical_id(function_name: str) -> str:
    return f"{HTTP_API_LOGICAL_ID}Integration{normalize_function_name(function_name)}"


def get_http_api_route_logical_id(route_key: str) -> str:
    """
    Logical ID for a compiled route.

    Example: "GET /users/{id}" -> "HttpApiRouteGetUsersId", "*" -> "HttpApiRouteDefault"
    """
    if route_key == "*":
        return f"{HTTP_API_LOGICAL_ID}RouteDefault"
    method, _, path = route_key.partition(" ")
    return f"{HTTP_API_LOGICAL_ID}Route{normalize_name(method.lower())}{normalize_alphanumeric(path)}"
