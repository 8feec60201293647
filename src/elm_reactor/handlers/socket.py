"""Websocket bridge between a client and change notifications for one file.

The subscription (socket plus watch task) lives exactly as long as the handler
invocation that created it. Open sockets are only tracked so that server
shutdown can close them.
"""

import asyncio
import logging
from pathlib import Path

from aiohttp import WSMsgType, web

from elm_reactor.app_keys import live_reload_enabled_key, notifier_key, root_key, sockets_key
from elm_reactor.core.paths import resolve, sanitize
from elm_reactor.core.types import RequestPath
from elm_reactor.handlers.errors import bad_request
from elm_reactor.live.notifier import ChangeNotifier

logger = logging.getLogger(__name__)

SOCKET_PATH = RequestPath("socket")


async def serve_socket(request: web.Request, path: RequestPath | None) -> web.StreamResponse | None:
    """Upgrade /socket?file=<path> to a change notification websocket.

    Returns:
        Websocket response, 400 without a usable file parameter, or None for
        any other path
    """
    if path != SOCKET_PATH or not request.app[live_reload_enabled_key]:
        return None

    file_param = request.query.get("file")
    if not file_param:
        return bad_request("Missing required query parameter: file")

    file = sanitize(file_param)
    # "" is the root directory itself, which is not a file to watch
    if file is None or file == "":
        return bad_request(f"Invalid file parameter: {file_param}")

    target = await asyncio.to_thread(resolve, request.app[root_key], file)
    if target is None:
        return bad_request(f"Invalid file parameter: {file_param}")

    ws = web.WebSocketResponse()
    await ws.prepare(request)
    logger.info(f"Watching {file} for {request.remote}")

    sockets = request.app[sockets_key]
    sockets.add(ws)
    watch_task = asyncio.create_task(_run_subscription(request.app[notifier_key], file, target, ws))
    try:
        async for msg in ws:
            if msg.type == WSMsgType.ERROR:
                break
    finally:
        sockets.discard(ws)
        watch_task.cancel()
        try:
            await watch_task
        except asyncio.CancelledError:
            pass
        logger.info(f"Stopped watching {file} for {request.remote}")

    return ws


async def _run_subscription(
    notifier: ChangeNotifier,
    file: RequestPath,
    target: Path,
    ws: web.WebSocketResponse,
) -> None:
    try:
        await notifier.stream(file, target, ws)
    except OSError as e:
        # the socket stays open until the client goes away; it just goes quiet
        logger.warning(f"Watching {file} failed: {e}")
        message = {"type": "error", "path": file, "message": f"Cannot watch {file}: {e.strerror or e}"}
        try:
            await ws.send_json(message)
        except ConnectionResetError:
            pass
