"""Asset resolution for files.

Decides, in order, whether a path is an embedded static asset, an Elm source
to compile (or to open in the debugger), a text file to show as code, or a
binary file to send as-is.
"""

import asyncio
import logging
from pathlib import Path

from aiohttp import web

from elm_reactor.app_keys import compiler_key, root_key, static_assets_key
from elm_reactor.core import mime, pages
from elm_reactor.core.compiler import CompileError, is_source
from elm_reactor.core.paths import resolve
from elm_reactor.core.types import RequestPath

logger = logging.getLogger(__name__)


def html_response(html: str) -> web.Response:
    return web.Response(text=html, content_type="text/html", charset="utf-8")


async def serve_files(request: web.Request, path: RequestPath | None) -> web.StreamResponse | None:
    """Serve a static asset or an existing file, or pass.

    Returns:
        Response, or None when the path is neither an asset nor a regular file
    """
    if path is None:
        return None

    asset = request.app[static_assets_key].get(path)
    if asset is not None:
        return web.Response(body=asset.content, content_type=asset.mime_type, charset="utf-8")

    file = await asyncio.to_thread(resolve, request.app[root_key], path)
    if file is None or not await asyncio.to_thread(file.is_file):
        return None

    try:
        if is_source(path):
            return await _serve_elm(request, path, file)
        return await _serve_file_pretty(path, file)
    except OSError as e:
        logger.error(f"Failed to serve {file}: {e}")
        raise web.HTTPInternalServerError() from e


async def _serve_elm(request: web.Request, path: RequestPath, file: Path) -> web.Response:
    if "debug" in request.query:
        host = f"{request.scheme}://{request.host}"
        return html_response(pages.debugger_page(path, host))

    outcome = await request.app[compiler_key].compile(file)
    if isinstance(outcome, CompileError):
        # still a 200: diagnostics are page content
        return html_response(pages.compile_error_page(path, outcome.diagnostics))
    return html_response(outcome.output)


async def _serve_file_pretty(path: RequestPath, file: Path) -> web.StreamResponse:
    mime_type = mime.resolve(path)
    if mime_type is None or mime.is_textual(mime_type):
        code = await asyncio.to_thread(file.read_text, encoding="utf-8", errors="replace")
        return html_response(pages.code_page(path, code))

    return web.FileResponse(file, headers={"Content-Type": mime_type})
