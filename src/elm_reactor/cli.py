"""CLI interface for elm reactor.

Interactive development tool that makes it easy to develop and debug Elm
programs.
"""

import logging
import sys
from pathlib import Path

import click

from elm_reactor import __version__
from elm_reactor.config import Config


@click.command()
@click.version_option(__version__, "--version", prog_name="elm reactor")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover reactor.toml)",
)
@click.option(
    "--address",
    "-a",
    default=None,
    help="Address to bind to, e.g. 0.0.0.0 to try things on your phone (default: localhost)",
)
@click.option(
    "--port",
    "-p",
    type=click.IntRange(0, 65535),
    default=None,
    help="Port to bind to (default: 8000)",
)
@click.option(
    "--root",
    "-r",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory to serve (overrides config, default: current directory)",
)
@click.option(
    "--compiler",
    default=None,
    help="Elm executable used to compile sources (overrides config)",
)
@click.option(
    "--live-reload/--no-live-reload",
    default=None,
    help="Enable/disable the change notification socket (overrides config, default: enabled)",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Enable debug logging and the access log",
)
def cli(
    config_path: Path | None,
    address: str | None,
    port: int | None,
    root: Path | None,
    compiler: str | None,
    live_reload: bool | None,
    verbose: bool,
) -> None:
    """Serve an Elm project, compiling .elm files on request."""
    from elm_reactor.server import run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config.load(config_path).with_overrides(
            host=address,
            port=port,
            root=root,
            executable=compiler,
            live_reload_enabled=live_reload,
        )
    except (OSError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(f"elm reactor {__version__}")
    click.echo(f"Serving {config.project.root.resolve()}")
    click.echo(f"Listening on http://{config.server.host}:{config.server.port}")
    if not config.live_reload.enabled:
        click.echo("Live reload: disabled")

    try:
        run_server(config, verbose=verbose)
    except OSError as e:
        click.echo(
            click.style(
                f"Error: could not start server on {config.server.host}:{config.server.port}: {e}",
                fg="red",
            ),
            err=True,
        )
        sys.exit(1)


if __name__ == "__main__":
    cli()
