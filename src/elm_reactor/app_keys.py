"""Application keys for type-safe app configuration access."""

import weakref
from pathlib import Path

from aiohttp import web

from elm_reactor.assets import StaticAssetTable
from elm_reactor.core.compiler import Compiler
from elm_reactor.live.notifier import ChangeNotifier

root_key = web.AppKey("root", Path)
static_assets_key = web.AppKey("static_assets", StaticAssetTable)
compiler_key = web.AppKey("compiler", Compiler)
notifier_key = web.AppKey("notifier", ChangeNotifier)
live_reload_enabled_key = web.AppKey("live_reload_enabled", bool)
sockets_key = web.AppKey("sockets", weakref.WeakSet[web.WebSocketResponse])
