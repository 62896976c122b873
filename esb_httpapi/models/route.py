"""
Route domain models.

RouteBinding is the canonical shape of one declared httpApi event,
RouteTarget is the backend function a route points at, and RouteTable is the
read-only result of a resolution pass.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.naming import get_http_api_route_logical_id, get_lambda_logical_id
from ..exceptions import MalformedRouteSyntax

# Order matters: it is the order methods are reported in.
SUPPORTED_METHODS = ("GET", "POST", "PUT", "PATCH", "OPTIONS", "HEAD", "DELETE")
ANY_METHOD = "ANY"
WILDCARD = "*"
CATCH_ALL_ROUTE_KEY = WILDCARD

_METHOD_PATH_PATTERN = re.compile(r"^([a-zA-Z]+|\*) (.+)$")


class TargetAlias(BaseModel):
    """Named version of a function (e.g. a Lambda alias) routes should hit."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    logical_id: Optional[str] = Field(default=None, alias="logicalId")


class RouteTarget(BaseModel):
    """Backend function a route resolves to. Never mutated by the compiler."""

    model_config = ConfigDict(frozen=True)

    function_name: str
    alias: Optional[TargetAlias] = None

    @property
    def logical_id(self) -> str:
        return get_lambda_logical_id(self.function_name)

    @property
    def qualified_name(self) -> str:
        if self.alias is None:
            return self.function_name
        return f"{self.function_name}:{self.alias.name}"


@dataclass(frozen=True)
class RouteBinding:
    """
    One declared route in canonical form.

    Both fields are optional here; the resolver decides which combinations
    are valid.
    """

    method: Optional[str] = None
    path: Optional[str] = None

    @classmethod
    def parse(cls, raw: Any, function_name: str) -> "RouteBinding":
        """
        Build a binding from the raw httpApi event value.

        Accepted shapes:
        - mapping with optional "method" and "path" keys
        - "<METHOD> <path>" string (e.g. "GET /users"), surrounding
          whitespace ignored
        - "*" for the catch-all route
        """
        if isinstance(raw, RouteBinding):
            return raw
        if isinstance(raw, Mapping):
            return cls(method=_optional_str(raw.get("method")), path=_optional_str(raw.get("path")))

        # Surrounding whitespace is insignificant: "* " is the catch-all.
        method_path = str(raw).strip()
        if method_path == WILDCARD:
            return cls(path=WILDCARD)

        match = _METHOD_PATH_PATTERN.match(method_path)
        if not match:
            raise MalformedRouteSyntax(function_name, method_path)
        return cls(method=match.group(1), path=match.group(2))


def _optional_str(value: Any) -> Optional[str]:
    # Empty values count as absent.
    if value is None or value == "":
        return None
    return str(value)


def split_route_key(route_key: str) -> tuple[str, str]:
    """Return (method, path) for a route key. The catch-all key reports ANY."""
    if route_key == CATCH_ALL_ROUTE_KEY:
        return ANY_METHOD, WILDCARD
    method, _, path = route_key.partition(" ")
    return method, path


@dataclass(frozen=True)
class RouteEntry:
    """A single row of a RouteTable, expanded for renderers."""

    route_key: str
    method: str
    path: str
    target: RouteTarget

    @property
    def logical_id(self) -> str:
        return get_http_api_route_logical_id(self.route_key)


class RouteTable(Mapping):
    """
    Ordered, read-only mapping of route key -> RouteTarget.

    Iteration follows declaration order. Also carries the set of concrete
    methods that were bound, which CORS derivation needs.
    """

    __slots__ = ("_routes", "_bound_methods")

    def __init__(self, routes: Dict[str, RouteTarget], bound_methods: FrozenSet[str]):
        self._routes = MappingProxyType(dict(routes))
        self._bound_methods = frozenset(bound_methods)

    def __getitem__(self, route_key: str) -> RouteTarget:
        return self._routes[route_key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RouteTable):
            return NotImplemented
        return (
            list(self._routes.items()) == list(other._routes.items())
            and self._bound_methods == other._bound_methods
        )

    def __hash__(self):
        return hash((tuple(self._routes.items()), self._bound_methods))

    def __repr__(self) -> str:
        return f"RouteTable({list(self._routes)!r})"

    @property
    def bound_methods(self) -> FrozenSet[str]:
        return self._bound_methods

    @property
    def has_catch_all(self) -> bool:
        return CATCH_ALL_ROUTE_KEY in self._routes

    @property
    def catch_all_target(self) -> Optional[RouteTarget]:
        return self._routes.get(CATCH_ALL_ROUTE_KEY)

    def entries(self) -> Iterator[RouteEntry]:
        for route_key, target in self._routes.items():
            method, path = split_route_key(route_key)
            yield RouteEntry(route_key=route_key, method=method, path=path, target=target)
