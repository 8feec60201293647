"""Embedded static assets.

Loads the files bundled into the elm_reactor package at build time and maps
them to the virtual paths the generated pages refer to.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from importlib.resources import files
from types import MappingProxyType

from elm_reactor.core.types import RequestPath

ASSET_PREFIX = "_reactor"

FAVICON_PATH = RequestPath(f"{ASSET_PREFIX}/favicon.ico")
WAITING_PATH = RequestPath(f"{ASSET_PREFIX}/waiting.gif")
INDEX_PATH = RequestPath(f"{ASSET_PREFIX}/index.js")
NOT_FOUND_PATH = RequestPath(f"{ASSET_PREFIX}/notFound.js")
DEBUGGER_PATH = RequestPath(f"{ASSET_PREFIX}/debug.js")

# virtual path -> (bundled file name, content type)
_BUNDLED: dict[RequestPath, tuple[str, str]] = {
    FAVICON_PATH: ("favicon.ico", "image/x-icon"),
    WAITING_PATH: ("waiting.gif", "image/gif"),
    INDEX_PATH: ("index.js", "application/javascript"),
    NOT_FOUND_PATH: ("notFound.js", "application/javascript"),
    DEBUGGER_PATH: ("debug.js", "application/javascript"),
}


@dataclass(frozen=True)
class StaticAsset:
    """A payload served from memory under a virtual path."""

    path: RequestPath
    content: bytes
    mime_type: str


class StaticAssetTable:
    """Read-only lookup of static assets by virtual path."""

    def __init__(self, assets: list[StaticAsset]) -> None:
        self._assets = MappingProxyType({asset.path: asset for asset in assets})

    def get(self, path: str) -> StaticAsset | None:
        return self._assets.get(RequestPath(path))

    def __contains__(self, path: object) -> bool:
        return path in self._assets

    def __iter__(self) -> Iterator[StaticAsset]:
        return iter(self._assets.values())

    def __len__(self) -> int:
        return len(self._assets)


def load_static_assets() -> StaticAssetTable:
    """Read bundled assets into memory.

    Returns:
        Table of every bundled asset

    Raises:
        FileNotFoundError: If the static directory or one of its files is missing.
    """
    static = files("elm_reactor").joinpath("static")
    if not static.is_dir():
        msg = "Bundled static assets not found. Reinstall elm-reactor with its package data."
        raise FileNotFoundError(msg)

    assets: list[StaticAsset] = []
    for path, (name, mime_type) in _BUNDLED.items():
        resource = static.joinpath(name)
        if not resource.is_file():
            raise FileNotFoundError(f"Bundled static asset not found: {name}")
        assets.append(StaticAsset(path=path, content=resource.read_bytes(), mime_type=mime_type))

    return StaticAssetTable(assets)
