"""
Command line entry point: ``showgraph serve``.
"""

import os
import sys

import click
import uvicorn

from showgraph import __version__
from showgraph.config import settings
from showgraph.logging import configure_logging, get_logger

logger = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="showgraph")
def cli() -> None:
    """ShowGraph - GraphQL facade over the TVmaze API."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, show_default=True, help="Host to bind to")
@click.option(
    "--port", default=settings.api_port, type=int, show_default=True, help="Port to bind to"
)
@click.option(
    "--upstream-url",
    default=settings.upstream_base_url,
    show_default=True,
    help="Base URL of the TVmaze API",
)
@click.option(
    "--schedule-date",
    default=settings.schedule_date,
    show_default=True,
    help="Date (YYYY-MM-DD) served by the schedule query",
)
@click.option(
    "--log-level",
    default=settings.log_level.upper(),
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    show_default=True,
)
@click.option("--json-logs/--console-logs", default=settings.log_json, help="Log output format")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--workers", default=1, type=int, show_default=True, help="Number of worker processes"
)
def serve(
    host: str,
    port: int,
    upstream_url: str,
    schedule_date: str,
    log_level: str,
    json_logs: bool,
    reload: bool,
    workers: int,
) -> None:
    """Start the ShowGraph API server."""
    overrides = {
        "api_host": host,
        "api_port": port,
        "upstream_base_url": upstream_url,
        "schedule_date": schedule_date,
        "log_level": log_level.upper(),
        "log_json": json_logs,
    }
    config = settings.model_copy(update=overrides)
    configure_logging(config.log_level, json_logs=config.log_json)

    logger.info(
        "Starting ShowGraph API server",
        host=host,
        port=port,
        upstream_url=upstream_url,
        schedule_date=schedule_date,
        reload=reload,
        workers=workers,
    )

    uvicorn_options = {
        "host": host,
        "port": port,
        "log_level": config.log_level.lower(),
        "access_log": True,
    }

    try:
        if reload or workers > 1:
            # Child processes build their own Settings, so hand the overrides over the environment
            for name, value in overrides.items():
                env_value = str(value).lower() if isinstance(value, bool) else str(value)
                os.environ[f"SHOWGRAPH_{name.upper()}"] = env_value

            uvicorn.run(
                "showgraph.api.app:create_app",
                factory=True,
                reload=reload,
                workers=1 if reload else workers,
                **uvicorn_options,
            )
        else:
            from showgraph.api.app import create_app

            uvicorn.run(create_app(config), **uvicorn_options)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


def main() -> None:
    """Entry point for the showgraph console script."""
    cli()


if __name__ == "__main__":
    main()
