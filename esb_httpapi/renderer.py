"""
routing.yml Renderer

Generate the gateway routing manifest from a compiled HTTP API.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .compiler import CompiledHttpApi

TEMPLATE_DIR = Path(__file__).parent / "templates"


def render_routing_yml(compiled: CompiledHttpApi) -> str:
    """
    Render routing.yml.

    Args:
        compiled: result of compile_http_api

    Returns:
        routing.yml string. Routes keep declaration order and CORS sets are
        sorted, so identical input renders identical output.
    """
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    template = env.get_template("routing.yml.j2")

    routes = [
        {
            "path": entry.path,
            "method": entry.method,
            "function": entry.target.function_name,
            "alias": entry.target.alias.name if entry.target.alias else None,
            "logical_id": entry.logical_id,
        }
        for entry in compiled.routes.entries()
    ]
    cors = compiled.cors.to_manifest() if compiled.cors else None

    return template.render(routes=routes, cors=cors)
