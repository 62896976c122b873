"""
HTTP API compiler.

Runs the route resolver, then the CORS merger, and returns both results
together. Either everything compiles or an HttpApiConfigError is raised; no
partial result is ever returned.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from .models.cors import CorsPolicy, CorsSettings
from .models.route import RouteTable, RouteTarget
from .services.cors_merger import merge_cors
from .services.route_resolver import resolve_routes


@dataclass(frozen=True)
class CompiledHttpApi:
    """Result of one compile pass."""

    routes: RouteTable
    cors: Optional[CorsPolicy] = None

    @property
    def is_empty(self) -> bool:
        return not self.routes


def compile_http_api(
    targets: Iterable[Tuple[RouteTarget, Iterable[Any]]],
    cors: Union[None, bool, Mapping, CorsSettings] = None,
) -> CompiledHttpApi:
    """
    Compile declared routes and CORS settings.

    Args:
        targets: ordered (target, raw bindings) pairs
        cors: raw CORS configuration (None, True, or a settings mapping)
    """
    routes = resolve_routes(targets)
    return CompiledHttpApi(routes=routes, cors=merge_cors(cors, routes.bound_methods))
