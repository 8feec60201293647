"""Content type lookup by compound file extension.

Some formats are only unambiguous by their full extension (``.tar.gz`` is a
compressed tarball, ``.gz`` alone is any gzip stream), so lookup tries the
longest dotted suffix of the file name first and falls back to shorter ones.
"""

from collections.abc import Iterator
from types import MappingProxyType

MIME_TYPES = MappingProxyType(
    {
        ".asc": "text/plain",
        ".asf": "video/x-ms-asf",
        ".asx": "video/x-ms-asf",
        ".avi": "video/x-msvideo",
        ".bmp": "image/bmp",
        ".bz2": "application/x-bzip",
        ".c": "text/plain",
        ".class": "application/octet-stream",
        ".conf": "text/plain",
        ".cpp": "text/plain",
        ".css": "text/css",
        ".csv": "text/csv",
        ".cxx": "text/plain",
        ".dtd": "text/xml",
        ".dvi": "application/x-dvi",
        ".eot": "application/vnd.ms-fontobject",
        ".gif": "image/gif",
        ".gz": "application/x-gzip",
        ".hs": "text/plain",
        ".htm": "text/html",
        ".html": "text/html",
        ".ico": "image/x-icon",
        ".jar": "application/x-java-archive",
        ".jpeg": "image/jpeg",
        ".jpg": "image/jpeg",
        ".js": "text/javascript",
        ".json": "application/json",
        ".log": "text/plain",
        ".m3u": "audio/x-mpegurl",
        ".md": "text/markdown",
        ".mjs": "text/javascript",
        ".mov": "video/quicktime",
        ".mp3": "audio/mpeg",
        ".mp4": "video/mp4",
        ".mpeg": "video/mpeg",
        ".mpg": "video/mpeg",
        ".ogg": "application/ogg",
        ".otf": "font/otf",
        ".pac": "application/x-ns-proxy-autoconfig",
        ".pdf": "application/pdf",
        ".png": "image/png",
        ".ps": "application/postscript",
        ".qt": "video/quicktime",
        ".sig": "application/pgp-signature",
        ".spl": "application/futuresplash",
        ".svg": "image/svg+xml",
        ".swf": "application/x-shockwave-flash",
        ".tar": "application/x-tar",
        ".tar.bz2": "application/x-bzip-compressed-tar",
        ".tar.gz": "application/x-tgz",
        ".tar.xz": "application/x-xz-compressed-tar",
        ".tbz": "application/x-bzip-compressed-tar",
        ".text": "text/plain",
        ".tgz": "application/x-tgz",
        ".torrent": "application/x-bittorrent",
        ".ttf": "font/ttf",
        ".txt": "text/plain",
        ".wasm": "application/wasm",
        ".wav": "audio/x-wav",
        ".wax": "audio/x-ms-wax",
        ".webm": "video/webm",
        ".webp": "image/webp",
        ".wma": "audio/x-ms-wma",
        ".wmv": "video/x-ms-wmv",
        ".woff": "font/woff",
        ".woff2": "font/woff2",
        ".xbm": "image/x-xbitmap",
        ".xml": "text/xml",
        ".xpm": "image/x-xpixmap",
        ".xwd": "image/x-xwindowdump",
        ".xz": "application/x-xz",
        ".zip": "application/zip",
    }
)


def candidate_extensions(path: str) -> Iterator[str]:
    """Yield the dotted suffixes of a file name, longest first.

    ``"dist/archive.tar.gz"`` yields ``".tar.gz"`` then ``".gz"``.
    A name without a dot yields nothing.
    """
    name = path.rsplit("/", 1)[-1]
    while True:
        dot = name.find(".")
        if dot < 0:
            return
        extension = name[dot:]
        if extension == ".":
            return
        yield extension.lower()
        name = extension[1:]


def resolve(path: str) -> str | None:
    """Return the content type for a file path, or None if unknown."""
    for extension in candidate_extensions(path):
        mime_type = MIME_TYPES.get(extension)
        if mime_type is not None:
            return mime_type
    return None


def is_textual(mime_type: str) -> bool:
    """Whether a content type's primary category is text."""
    return mime_type.startswith("text")
