"""Directory listings.

Directories are always listed explicitly; an index.html inside one is shown
as an entry, never served in place of the listing.
"""

import asyncio

from aiohttp import web

from elm_reactor.app_keys import root_key
from elm_reactor.core import pages
from elm_reactor.core.directory import gather_info
from elm_reactor.core.paths import resolve
from elm_reactor.core.types import RequestPath
from elm_reactor.handlers.files import html_response


async def serve_directory(request: web.Request, path: RequestPath | None) -> web.Response | None:
    if path is None:
        return None

    directory = await asyncio.to_thread(resolve, request.app[root_key], path)
    if directory is None or not await asyncio.to_thread(directory.is_dir):
        return None

    info = await asyncio.to_thread(gather_info, directory, path)
    return html_response(pages.directory_page(info))
