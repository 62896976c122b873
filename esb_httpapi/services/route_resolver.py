"""
Route resolution service.

Normalizes declared httpApi events into canonical route keys and builds the
RouteTable.

Note:
    Paths are opaque strings. Only the literal "*" path has a meaning
    (the catch-all route); "{param}" segments are not interpreted.
"""

import logging
from typing import Any, Dict, Iterable, Set, Tuple

from ..exceptions import (
    DuplicateMethod,
    DuplicateRoute,
    InvalidCatchAllMethod,
    MissingMethod,
    MissingPath,
    UnsupportedMethod,
)
from ..models.route import (
    ANY_METHOD,
    CATCH_ALL_ROUTE_KEY,
    SUPPORTED_METHODS,
    WILDCARD,
    RouteBinding,
    RouteTable,
    RouteTarget,
)

logger = logging.getLogger(__name__)


class RouteTableBuilder:
    """
    Accumulates routes for a single resolution pass.

    The builder is thrown away when a binding fails validation; only build()
    hands out a RouteTable.
    """

    def __init__(self):
        self._routes: Dict[str, RouteTarget] = {}
        self._bound_methods: Set[str] = set()

    def add(self, target: RouteTarget, binding: RouteBinding) -> str:
        """
        Validate one binding against the routes collected so far and register it.

        Returns:
            The canonical route key.
        """
        function_name = target.function_name
        if not binding.path:
            raise MissingPath(function_name, binding)

        if binding.path == WILDCARD:
            if binding.method and binding.method != WILDCARD:
                raise InvalidCatchAllMethod(function_name, binding.method)
            route_key = CATCH_ALL_ROUTE_KEY
            method = ANY_METHOD
        else:
            method = self._resolve_method(function_name, binding)
            route_key = f"{method} {binding.path}"

        if route_key in self._routes:
            raise DuplicateRoute(function_name, route_key)

        self._routes[route_key] = target
        if method == ANY_METHOD:
            self._bound_methods.update(SUPPORTED_METHODS)
        else:
            self._bound_methods.add(method)

        logger.debug(
            "Registered route %s -> %s",
            route_key,
            target.qualified_name,
            extra={"route_key": route_key, "function_name": function_name},
        )
        return route_key

    def _resolve_method(self, function_name: str, binding: RouteBinding) -> str:
        if not binding.method:
            raise MissingMethod(function_name, binding.path)

        path = binding.path
        method = binding.method.upper()
        if method in (WILDCARD, ANY_METHOD):
            method = ANY_METHOD
            # ANY would shadow every explicit method already bound to this path.
            for allowed_method in SUPPORTED_METHODS:
                if f"{allowed_method} {path}" in self._routes:
                    raise DuplicateMethod(function_name, f"{method} {path}", path)
            return method

        if method not in SUPPORTED_METHODS:
            raise UnsupportedMethod(function_name, binding.method)
        if f"{ANY_METHOD} {path}" in self._routes:
            raise DuplicateMethod(function_name, f"{method} {path}", path)
        return method

    def build(self) -> RouteTable:
        return RouteTable(self._routes, frozenset(self._bound_methods))


def resolve_routes(targets: Iterable[Tuple[RouteTarget, Iterable[Any]]]) -> RouteTable:
    """
    Resolve every declared route into a RouteTable.

    Args:
        targets: ordered (target, raw bindings) pairs. A raw binding is a
            {"method", "path"} mapping, a "<METHOD> <path>" string or "*".

    Returns:
        RouteTable in declaration order.

    Raises:
        HttpApiConfigError: on the first invalid or conflicting binding.
    """
    builder = RouteTableBuilder()
    for target, raw_bindings in targets:
        for raw in raw_bindings:
            binding = RouteBinding.parse(raw, target.function_name)
            builder.add(target, binding)

    table = builder.build()
    logger.info(
        f"Resolved {len(table)} route(s)"
        + (" including catch-all" if table.has_catch_all else "")
    )
    return table
