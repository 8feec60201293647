"""Request path sanitizing and resolution against the served root."""

from pathlib import Path

from elm_reactor.core.types import RequestPath


def sanitize(raw: str) -> RequestPath | None:
    """Turn a raw URL path into a request path.

    Empty and "." segments are dropped. Paths that try to climb out of the
    root with ".." segments, or that contain NUL bytes or backslashes, are
    rejected.

    Args:
        raw: Decoded URL path, with or without a leading slash

    Returns:
        Sanitized request path ("" for the root), or None if rejected
    """
    if "\x00" in raw or "\\" in raw:
        return None

    segments = [segment for segment in raw.split("/") if segment not in ("", ".")]
    if ".." in segments:
        return None

    return RequestPath("/".join(segments))


def resolve(root: Path, path: RequestPath) -> Path | None:
    """Resolve a request path to a filesystem path inside root.

    Symlinks are followed, and anything that ends up outside root is rejected.

    Args:
        root: Served root directory
        path: Sanitized request path

    Returns:
        Absolute path inside root, or None if it escapes root
    """
    base = root.resolve()
    candidate = (base / path).resolve()
    if candidate != base and base not in candidate.parents:
        return None
    return candidate
