"""
Service Config Parser

Parse a serverless.yml-style service definition (YAML) and extract the
httpApi routes declared on each function plus the provider CORS settings.
Safely handle CloudFormation intrinsic functions (!Sub, !Ref, etc.) that may
appear in the `resources` section.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from .exceptions import ServiceConfigError
from .models.cors import CorsSettings
from .models.route import RouteTarget, TargetAlias

logger = logging.getLogger(__name__)


class CfnLoader(yaml.SafeLoader):
    """YAML loader that handles CloudFormation intrinsic functions."""

    pass


def cfn_constructor(loader: yaml.Loader, node: yaml.Node) -> Any:
    """Constructor for CloudFormation tags."""
    if isinstance(node, yaml.ScalarNode):
        return loader.construct_scalar(node)
    elif isinstance(node, yaml.SequenceNode):
        return loader.construct_sequence(node)
    elif isinstance(node, yaml.MappingNode):
        return loader.construct_mapping(node)
    return ""


# Register CloudFormation tags.
for tag in ["!Ref", "!Sub", "!GetAtt", "!ImportValue", "!If", "!Join", "!Select", "!Split"]:
    yaml.add_constructor(tag, cfn_constructor, Loader=CfnLoader)


@dataclass
class ServiceDefinition:
    """Compiler input extracted from a service definition."""

    service: Optional[str] = None
    targets: List[Tuple[RouteTarget, List[Any]]] = field(default_factory=list)
    cors: Union[None, bool, CorsSettings] = None

    @property
    def route_count(self) -> int:
        return sum(len(bindings) for _, bindings in self.targets)


def parse_service_config(content: str) -> ServiceDefinition:
    """
    Parse a service definition string.

    Args:
        content: serverless.yml content

    Returns:
        ServiceDefinition with targets in declaration order, e.g.
        targets=[(RouteTarget(function_name="hello"), ["GET /hello"])]
    """
    try:
        data = yaml.load(content, Loader=CfnLoader) or {}
    except yaml.YAMLError as e:
        raise ServiceConfigError(f"YAML parse error: {e}", e) from e

    if not isinstance(data, dict):
        raise ServiceConfigError("top-level document must be a mapping")

    provider = _mapping_section(data.get("provider"), "provider")
    http_api_config = _mapping_section(provider.get("httpApi"), "provider.httpApi")

    targets = []
    functions = _mapping_section(data.get("functions"), "functions")
    for function_name, function_data in functions.items():
        function_data = _mapping_section(function_data, f"functions.{function_name}")
        target = RouteTarget(
            function_name=str(function_name),
            alias=_parse_alias(function_name, function_data.get("targetAlias")),
        )

        events = function_data.get("events") or []
        if not isinstance(events, list):
            raise ServiceConfigError(
                f"functions.{function_name}.events must be a list, got {type(events).__name__}"
            )

        # Only handle httpApi events; other event types are ignored.
        bindings = [
            event["httpApi"]
            for event in events
            if isinstance(event, dict) and event.get("httpApi")
        ]
        targets.append((target, bindings))

    definition = ServiceDefinition(
        service=data.get("service"),
        targets=targets,
        cors=_parse_cors(http_api_config.get("cors")),
    )
    logger.info(
        f"Parsed {len(targets)} function(s) with {definition.route_count} httpApi event(s)"
    )
    return definition


def _mapping_section(raw: Any, section: str) -> dict:
    """Return a section as a dict; absent or empty sections become {}."""
    if not raw:
        return {}
    if not isinstance(raw, dict):
        raise ServiceConfigError(f"{section} must be a mapping, got {type(raw).__name__}")
    return raw


def _parse_alias(function_name: str, raw: Any) -> Optional[TargetAlias]:
    if not raw:
        return None
    if isinstance(raw, str):
        return TargetAlias(name=raw)
    try:
        return TargetAlias.model_validate(raw)
    except ValidationError as e:
        raise ServiceConfigError(f"invalid targetAlias for function {function_name}: {e}", e) from e


def _parse_cors(raw: Any) -> Union[None, bool, CorsSettings]:
    if raw is None or raw is False:
        return None
    if raw is True:
        return True
    try:
        return CorsSettings.model_validate(raw)
    except ValidationError as e:
        raise ServiceConfigError(f"invalid provider.httpApi.cors: {e}", e) from e
