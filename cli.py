#!/usr/bin/env python3
"""
Blog API CLI.

Primary entry point. Starts the API server, the interactive client
shell, or both in one process (the default).

Usage:
    python cli.py --help
    python cli.py                              # server + shell
    python cli.py --service server --verbose   # API only
    python cli.py --service shell              # shell against a running server
    python cli.py --service config
    python cli.py --service info
"""

import asyncio
import sys
from pathlib import Path

import click
import structlog
import uvicorn

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from blogapi.backend.core.logging import get_logger, setup_logging


def validate_project_root() -> Path:
    """Validate that we're running from the project root."""
    if not (PROJECT_ROOT / ".project_root").exists():
        click.echo(
            click.style("Error: .project_root not found. Run from project root.", fg="red"),
            err=True,
        )
        sys.exit(1)
    return PROJECT_ROOT


def _resolve_address(logger, host: str | None, port: int | None) -> tuple[str, int]:
    """Fill in host and port from application.yaml where not given."""
    from blogapi.backend.core.config import get_app_config

    try:
        server_config = get_app_config().application.server
    except Exception as e:
        logger.error("Failed to load configuration.", extra={"error": str(e)})
        click.echo(
            click.style("Error: Could not load config/settings/application.yaml.", fg="red"),
            err=True,
        )
        sys.exit(1)

    return host or server_config.host, port or server_config.port


@click.command()
@click.option(
    "--service", "-s",
    type=click.Choice(["app", "server", "shell", "config", "info"]),
    default="app",
    help="What to run. 'app' starts the server and the shell together.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output (INFO level logging).",
)
@click.option(
    "--debug", "-d",
    is_flag=True,
    help="Enable debug output (DEBUG level logging).",
)
@click.option(
    "--host",
    default=None,
    help="Server host.",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Server port.",
)
def main(
    service: str,
    verbose: bool,
    debug: bool,
    host: str | None,
    port: int | None,
) -> None:
    """
    Blog API CLI.

    Runs the blog API and its interactive client. In the default 'app'
    mode both share one process: the shell talks to the server over
    HTTP on the configured port.

    \b
    Examples:
        python cli.py
        python cli.py --service server --port 3001 --verbose
        python cli.py --service shell --port 3001
        python cli.py --service config
        python cli.py --service info
    """
    validate_project_root()

    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = "WARNING"

    setup_logging(level=log_level, format_type="console")

    structlog.contextvars.bind_contextvars(source="cli")

    logger = get_logger(__name__)

    logger.debug("CLI invoked", extra={"service": service, "log_level": log_level})

    if service == "app":
        run_app(logger, host, port)
    elif service == "server":
        run_server(logger, host, port)
    elif service == "shell":
        run_client_shell(logger, host, port)
    elif service == "config":
        show_config(logger)
    elif service == "info":
        show_info(logger)


def run_server(logger, host: str | None, port: int | None) -> None:
    """Serve the API in the foreground."""
    from blogapi.backend.main import get_app

    server_host, server_port = _resolve_address(logger, host, port)

    logger.info("Starting server", extra={"host": server_host, "port": server_port})
    click.echo(f"Server running on http://{server_host}:{server_port}")
    click.echo("Press Ctrl+C to stop\n")

    uvicorn.run(get_app(), host=server_host, port=server_port, log_config=None)


def run_client_shell(logger, host: str | None, port: int | None) -> None:
    """Run the interactive shell against an already running server."""
    from blogapi.cli.client import APIClient
    from blogapi.cli.shell import run_shell

    client = None
    if host is not None or port is not None:
        server_host, server_port = _resolve_address(logger, host, port)
        client = APIClient(base_url=f"http://{server_host}:{server_port}")

    asyncio.run(run_shell(client))


def run_app(logger, host: str | None, port: int | None) -> None:
    """Run the server and the interactive shell in one process."""
    server_host, server_port = _resolve_address(logger, host, port)

    try:
        asyncio.run(_serve_with_shell(logger, server_host, server_port))
    except KeyboardInterrupt:
        logger.info("Stopped by user")


async def _serve_with_shell(logger, host: str, port: int) -> None:
    """Start uvicorn on this loop, then drive it from the shell until it exits."""
    from blogapi.backend.main import get_app
    from blogapi.cli.client import APIClient
    from blogapi.cli.shell import run_shell

    config = uvicorn.Config(get_app(), host=host, port=port, log_config=None)
    server = uvicorn.Server(config)
    server_task = asyncio.create_task(server.serve())

    while not server.started:
        if server_task.done():
            # serve() returned without binding; surface its error, if any
            server_task.result()
            logger.error("Server failed to start", extra={"host": host, "port": port})
            sys.exit(1)
        await asyncio.sleep(0.05)

    click.echo(f"Server running on port {port}")

    try:
        await run_shell(APIClient(base_url=f"http://{host}:{port}"))
    finally:
        server.should_exit = True
        await server_task


def show_config(logger) -> None:
    """Display loaded configuration."""
    click.echo("Application Configuration:\n")

    try:
        from blogapi.backend.core.config import get_app_config

        app_config = get_app_config()

        sections = [
            ("Application Settings", app_config.application),
            ("Storage Settings", app_config.storage),
            ("Logging Settings", app_config.logging),
        ]
        for title, section in sections:
            click.echo(f"{title} (from YAML):")
            click.echo("-" * 40)
            _echo_mapping(section.model_dump())
            click.echo()

        logger.info("Configuration displayed successfully")

    except Exception as e:
        logger.error("Failed to load configuration", extra={"error": str(e)})
        click.echo(click.style(f"Error loading configuration: {e}", fg="red"))
        sys.exit(1)


def _echo_mapping(values: dict, indent: int = 2) -> None:
    for key, value in values.items():
        if isinstance(value, dict):
            click.echo(f"{' ' * indent}{key}:")
            _echo_mapping(value, indent + 2)
        else:
            click.echo(f"{' ' * indent}{key}: {value}")


def show_info(logger) -> None:
    """Display application information."""
    click.echo("Blog API")
    click.echo("=" * 40)

    try:
        from blogapi.backend.core.config import get_app_config
        app_settings = get_app_config().application
        click.echo(f"Name: {app_settings.name}")
        click.echo(f"Version: {app_settings.version}")
        click.echo(f"Description: {app_settings.description}")
    except Exception as e:
        logger.warning("Could not load application config", extra={"error": str(e)})
        from blogapi import __version__
        click.echo(f"Version: {__version__}")

    click.echo()
    click.echo("Available Services:")
    click.echo("  --service app      Server and interactive shell (default)")
    click.echo("  --service server   Start the API server only")
    click.echo("  --service shell    Interactive shell against a running server")
    click.echo("  --service config   Display configuration")
    click.echo("  --service info     Show this information")
    click.echo()
    click.echo("Shell Commands:")
    click.echo("  GET, POST, PUT, DELETE, HELP, QUIT")

    logger.debug("Info displayed")


if __name__ == "__main__":
    main()
