#!/usr/bin/env python3
"""
Main entry point for the install script generator.
"""

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

from .config.settings import Settings
from .core import registry
from .core.errors import DxshError
from .core.generator import ScriptGenerator
from .core.hosting import serve
from .utils.logging import setup_root_logger


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="dxsh",
        description="Generate bash install scripts for developer tools from their latest GitHub release"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: from settings, INFO)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Print the install script for a tool")
    generate.add_argument("tool", help="Tool name, e.g. kubectl")

    subparsers.add_parser("list", help="List supported tools")

    serve_parser = subparsers.add_parser("serve", help="Serve scripts over HTTP at /{tool}")
    serve_parser.add_argument("--host", type=str, help="Bind address (default: from settings)")
    serve_parser.add_argument("--port", type=int, help="Bind port (default: from settings)")

    return parser.parse_args(argv)


def load_settings(args) -> Settings:
    """Load settings from environment and .env, then apply command line overrides."""
    settings = Settings()
    if args.log_level:
        settings.logging.level = args.log_level
    if getattr(args, "host", None):
        settings.server.host = args.host
    if getattr(args, "port", None):
        settings.server.port = args.port
    return settings


async def generate(tool: str, settings: Settings) -> str:
    generator = ScriptGenerator(settings=settings)
    return await generator.generate(tool)


def main(argv=None) -> int:
    """Run the CLI and return an exit code."""
    load_dotenv()
    args = parse_arguments(argv)
    settings = load_settings(args)

    setup_root_logger(
        log_file=settings.logging.file_path,
        level=settings.logging.level
    )
    logger = logging.getLogger(__name__)

    if args.command == "list":
        for name in registry.list_supported_names():
            print(name)
        return 0

    if args.command == "serve":
        serve(settings)
        return 0

    try:
        script = asyncio.run(generate(args.tool, settings))
    except DxshError as e:
        logger.error(str(e))
        return 1

    sys.stdout.write(script)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
