"""
CORS models.

CorsSettings mirrors the user-facing `provider.httpApi.cors` object.
CorsPolicy is the fully materialized result handed to renderers.
"""

from typing import Any, Dict, FrozenSet, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

StrOrList = Union[str, List[str]]


class CorsSettings(BaseModel):
    """User CORS configuration. Every field is optional."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    allowed_origins: Optional[StrOrList] = Field(default=None, alias="allowedOrigins")
    allowed_headers: Optional[StrOrList] = Field(default=None, alias="allowedHeaders")
    allowed_methods: Optional[StrOrList] = Field(default=None, alias="allowedMethods")
    allow_credentials: Optional[bool] = Field(default=None, alias="allowCredentials")
    exposed_response_headers: Optional[StrOrList] = Field(
        default=None, alias="exposedResponseHeaders"
    )
    max_age: Optional[int] = Field(default=None, alias="maxAge", ge=0)


class CorsPolicy(BaseModel):
    """Resolved CORS policy. Sets carry no order; renderers sort them."""

    model_config = ConfigDict(frozen=True)

    allowed_origins: FrozenSet[str]
    allowed_headers: FrozenSet[str]
    allowed_methods: FrozenSet[str]
    exposed_response_headers: Optional[FrozenSet[str]] = None
    allow_credentials: Optional[bool] = None
    max_age: Optional[int] = None

    def to_manifest(self) -> Dict[str, Any]:
        """Camel-cased dict with sorted lists, absent fields omitted."""
        manifest: Dict[str, Any] = {
            "allowedOrigins": sorted(self.allowed_origins),
            "allowedHeaders": sorted(self.allowed_headers),
            "allowedMethods": sorted(self.allowed_methods),
        }
        if self.exposed_response_headers is not None:
            manifest["exposedResponseHeaders"] = sorted(self.exposed_response_headers)
        if self.allow_credentials is not None:
            manifest["allowCredentials"] = self.allow_credentials
        if self.max_age is not None:
            manifest["maxAge"] = self.max_age
        return manifest
