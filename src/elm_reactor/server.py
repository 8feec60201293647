"""aiohttp server for elm reactor.

Application factory and the request dispatcher. Every GET goes through one
catch-all route that tries the handlers in a fixed order and falls back to
the 404 page.
"""

import logging
import weakref
from collections.abc import Awaitable, Callable

from aiohttp import WSCloseCode, web

from elm_reactor.app_keys import (
    compiler_key,
    live_reload_enabled_key,
    notifier_key,
    root_key,
    sockets_key,
    static_assets_key,
)
from elm_reactor.assets import load_static_assets
from elm_reactor.config import Config
from elm_reactor.core.compiler import Compiler, ElmCompiler
from elm_reactor.core.paths import sanitize
from elm_reactor.core.types import RequestPath
from elm_reactor.handlers.directory import serve_directory
from elm_reactor.handlers.errors import not_found
from elm_reactor.handlers.files import serve_files
from elm_reactor.handlers.socket import serve_socket
from elm_reactor.live.notifier import ChangeNotifier, WatchFunction

logger = logging.getLogger(__name__)

Handler = Callable[[web.Request, RequestPath | None], Awaitable[web.StreamResponse | None]]

# First handler to return a response wins
HANDLERS: tuple[Handler, ...] = (
    serve_files,
    serve_socket,
    serve_directory,
)


async def dispatch(request: web.Request) -> web.StreamResponse:
    path = sanitize(request.match_info["path"])
    if path is None:
        logger.debug(f"Rejected unsafe path: {request.match_info['path']!r}")

    for handler in HANDLERS:
        response = await handler(request, path)
        if response is not None:
            return response

    return not_found()


def create_app(
    config: Config,
    *,
    compiler: Compiler | None = None,
    watch: WatchFunction | None = None,
) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        compiler: Compiler to use instead of `elm make` (mainly for tests)
        watch: awatch-compatible watcher to use instead of watchfiles

    Returns:
        Configured aiohttp application

    Raises:
        FileNotFoundError: If bundled static assets are missing
    """
    app = web.Application()

    root = config.project.root.resolve()
    if compiler is None:
        compiler = ElmCompiler(root, executable=config.compiler.executable)

    app[root_key] = root
    app[static_assets_key] = load_static_assets()
    app[compiler_key] = compiler
    app[live_reload_enabled_key] = config.live_reload.enabled
    if watch is None:
        app[notifier_key] = ChangeNotifier(compiler)
    else:
        app[notifier_key] = ChangeNotifier(compiler, watch=watch)
    app[sockets_key] = weakref.WeakSet()
    app.on_shutdown.append(_close_sockets)

    app.router.add_get("/{path:.*}", dispatch)

    return app


async def _close_sockets(app: web.Application) -> None:
    """Close open notification sockets so their handlers can finish on shutdown."""
    for ws in list(app[sockets_key]):
        await ws.close(code=WSCloseCode.GOING_AWAY, message=b"Server shutdown")


def run_server(config: Config, *, verbose: bool = False) -> None:
    """Run the server until interrupted.

    Args:
        config: Application configuration
        verbose: Enable the access log

    Raises:
        OSError: If the configured address and port cannot be bound
    """
    app = create_app(config)
    web.run_app(
        app,
        host=config.server.host,
        port=config.server.port,
        access_log=logging.getLogger("aiohttp.access") if verbose else None,
        print=None,
    )
