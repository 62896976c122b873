#!/usr/bin/env python3
"""
httpApi Route Compiler

Compile the httpApi routes and CORS settings of a service definition into the
gateway routing manifest (routing.yml).

Usage:
    python -m esb_httpapi.main [options]

Options:
    --config PATH       Service definition path (default: SERVICE_CONFIG_PATH)
    --output PATH       routing.yml output path (default: ROUTING_YML_PATH)
    --dry-run           Show what would be generated without writing files
    --verbose           Verbose output
"""

import argparse
import logging
import sys
from pathlib import Path

from .compiler import CompiledHttpApi, compile_http_api
from .config import config
from .core.logging_config import setup_logging
from .exceptions import HttpApiConfigError, ServiceConfigError
from .parser import parse_service_config
from .renderer import render_routing_yml

logger = logging.getLogger(__name__)


def generate_routing(
    config_path: Path,
    output_path: Path,
    dry_run: bool = False,
    verbose: bool = False,
) -> CompiledHttpApi:
    """
    Compile a service definition and write routing.yml.

    Args:
        config_path: service definition (serverless.yml) path
        output_path: routing.yml path; relative paths resolve from the
            service definition's directory
        dry_run: when True, print output without writing files
        verbose: verbose output
    """
    if not config_path.exists():
        raise ServiceConfigError(f"service definition not found: {config_path}")

    if verbose:
        print(f"Loading service definition: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ServiceConfigError(f"cannot read service definition {config_path}: {e}", e) from e

    definition = parse_service_config(content)

    compiled = compile_http_api(definition.targets, definition.cors)

    if verbose:
        print(f"Compiled {len(compiled.routes)} route(s) for {len(definition.targets)} function(s)")
        if compiled.cors:
            print(f"CORS allowed methods: {', '.join(sorted(compiled.cors.allowed_methods))}")

    if not output_path.is_absolute():
        output_path = (config_path.parent / output_path).resolve()

    routing_yml_content = render_routing_yml(compiled)

    if dry_run:
        print(f"\n[DryRun] Target: {output_path}")
        print("-" * 60)
        print(routing_yml_content.strip())
        print("-" * 60)
        return compiled

    if verbose:
        print(f"Generating: {output_path}")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(routing_yml_content)

    print(f"Generated routing.yml with {len(compiled.routes)} route(s)")
    return compiled


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Compile httpApi routes into the gateway routing manifest"
    )
    parser.add_argument(
        "--config", default=config.SERVICE_CONFIG_PATH, help="Service definition path"
    )
    parser.add_argument("--output", default=config.ROUTING_YML_PATH, help="routing.yml path")
    parser.add_argument(
        "--dry-run", action="store_true", help="Show what would be generated without writing files"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)

    setup_logging(config.LOG_CONFIG_PATH or None, "DEBUG" if args.verbose else config.LOG_LEVEL)

    try:
        generate_routing(
            Path(args.config),
            Path(args.output),
            dry_run=args.dry_run,
            verbose=args.verbose,
        )
    except HttpApiConfigError as e:
        logger.debug("Compilation failed", exc_info=True)
        print(f"Error [{e.kind}]: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
