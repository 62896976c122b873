"""
CORS policy merger.

Turns the optional user CORS configuration into a fully materialized
CorsPolicy. When the user does not list allowedMethods, they are derived
from the methods the route resolver actually bound.
"""

import logging
from collections.abc import Mapping
from typing import Any, FrozenSet, Iterable, Optional, Union

from ..models.cors import CorsPolicy, CorsSettings
from ..models.route import ANY_METHOD, SUPPORTED_METHODS

logger = logging.getLogger(__name__)

DEFAULT_ALLOWED_ORIGINS = frozenset({"*"})
DEFAULT_ALLOWED_HEADERS = frozenset(
    {
        "Content-Type",
        "X-Amz-Date",
        "Authorization",
        "X-Api-Key",
        "X-Amz-Security-Token",
        "X-Amz-User-Agent",
    }
)
PREFLIGHT_METHOD = "OPTIONS"

# Fields whose user value is coerced to a set (a scalar becomes one element).
_SET_FIELDS = frozenset(
    {"allowed_origins", "allowed_headers", "allowed_methods", "exposed_response_headers"}
)


def to_set(value: Union[str, Iterable[str]]) -> FrozenSet[str]:
    if isinstance(value, str):
        return frozenset({value})
    return frozenset(value)


def resolve_field(name: str, user_value: Any, default: Any = None) -> Any:
    """
    Resolve a single CORS field against its default.

    Absent user values fall back to `default`; set fields are de-duplicated.
    """
    if user_value is None:
        return default
    if name in _SET_FIELDS:
        return to_set(user_value)
    return user_value


def derive_allowed_methods(bound_methods: Iterable[str]) -> FrozenSet[str]:
    """OPTIONS plus every method a route was bound to (ANY expands to all)."""
    methods = {PREFLIGHT_METHOD}
    for method in bound_methods:
        if method == ANY_METHOD:
            methods.update(SUPPORTED_METHODS)
        else:
            methods.add(method)
    return frozenset(methods)


def merge_cors(
    user_cors: Union[None, bool, Mapping, CorsSettings],
    bound_methods: Iterable[str],
) -> Optional[CorsPolicy]:
    """
    Build the CORS policy for a compiled API.

    Args:
        user_cors: None/False (no CORS), True (defaults), or a settings object
        bound_methods: methods reported by the route resolver

    Returns:
        CorsPolicy, or None when CORS was not requested.
    """
    # An empty mapping still requests CORS with defaults.
    if user_cors is None or user_cors is False:
        return None

    if user_cors is True:
        settings = CorsSettings()
    elif isinstance(user_cors, CorsSettings):
        settings = user_cors
    else:
        settings = CorsSettings.model_validate(dict(user_cors))

    allowed_methods = resolve_field("allowed_methods", settings.allowed_methods)
    if allowed_methods is None:
        allowed_methods = derive_allowed_methods(bound_methods)

    policy = CorsPolicy(
        allowed_origins=resolve_field(
            "allowed_origins", settings.allowed_origins, DEFAULT_ALLOWED_ORIGINS
        ),
        allowed_headers=resolve_field(
            "allowed_headers", settings.allowed_headers, DEFAULT_ALLOWED_HEADERS
        ),
        allowed_methods=allowed_methods,
        exposed_response_headers=resolve_field(
            "exposed_response_headers", settings.exposed_response_headers
        ),
        allow_credentials=True if settings.allow_credentials else None,
        max_age=resolve_field("max_age", settings.max_age),
    )
    logger.debug("Resolved CORS policy", extra={"cors": policy.to_manifest()})
    return policy
