"""File change notifications for a single watched file.

Each websocket subscription runs its own watch over the file's directory and
gets one message per batch of changes to that file. Elm sources are
recompiled and the fresh JavaScript is pushed for hot swapping. Any other file
just gets a reload message.
"""

import json
import logging
from collections.abc import AsyncIterator, Callable
from pathlib import Path
from typing import Any

from aiohttp import web
from watchfiles import Change, awatch

from elm_reactor.core.compiler import CompileError, Compiler, is_source
from elm_reactor.core.types import RequestPath

logger = logging.getLogger(__name__)

WatchFunction = Callable[..., AsyncIterator[set[tuple[Change, str]]]]


class ChangeNotifier:
    """Streams change events for one file to one websocket.

    Holds no per-connection state of its own; every call to stream() is an
    independent subscription that ends when its task is cancelled.
    """

    def __init__(
        self,
        compiler: Compiler,
        *,
        watch: WatchFunction = awatch,
    ) -> None:
        """Initialize the notifier.

        Args:
            compiler: Compiler used to rebuild Elm sources on change
            watch: awatch-compatible watcher (injectable for tests)
        """
        self._compiler = compiler
        self._watch = watch

    async def stream(self, file: RequestPath, target: Path, ws: web.WebSocketResponse) -> None:
        """Send change messages for a file until cancelled.

        Elm sources get an initial build right away so that a freshly opened
        debugger has something to run.

        Args:
            file: Sanitized request path of the watched file
            target: Resolved filesystem path of the file, inside the served root
            ws: Prepared websocket to send messages on
        """
        if is_source(target):
            await self._notify(file, target, ws)

        def only_target(change: Change, path: str) -> bool:
            return change != Change.deleted and Path(path) == target

        logger.debug(f"Watching {target}")
        async for _changes in self._watch(
            target.parent,
            watch_filter=only_target,
            recursive=False,
        ):
            if ws.closed:
                return
            await self._notify(file, target, ws)

    async def _notify(self, file: RequestPath, target: Path, ws: web.WebSocketResponse) -> None:
        message = await self._message(file, target)
        logger.debug(f"Sending {message['type']} for {file}")
        try:
            await ws.send_str(json.dumps(message))
        except ConnectionResetError:
            # Client went away mid-send; the bridge cancels us on close
            pass

    async def _message(self, file: RequestPath, target: Path) -> dict[str, Any]:
        if not is_source(target):
            return {"type": "reload", "path": file}

        outcome = await self._compiler.compile(target, javascript=True)
        if isinstance(outcome, CompileError):
            return {
                "type": "hotswap",
                "path": file,
                "success": False,
                "diagnostics": outcome.diagnostics,
            }
        return {"type": "hotswap", "path": file, "success": True, "code": outcome.output}
