"""Fallback responses."""

from aiohttp import web

from elm_reactor.core import pages


def not_found() -> web.Response:
    return web.Response(
        text=pages.not_found_page(),
        status=404,
        content_type="text/html",
        charset="utf-8",
    )


def bad_request(reason: str) -> web.Response:
    return web.Response(text=reason, status=400)
