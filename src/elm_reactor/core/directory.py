"""Directory information for listing pages.

Collects the entries of a served directory, plus the project description from
elm.json when listing the root.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from elm_reactor.core.compiler import is_source
from elm_reactor.core.types import RequestPath

logger = logging.getLogger(__name__)

PROJECT_FILE = "elm.json"

_HIDDEN_DIRECTORIES = frozenset({"elm-stuff", "node_modules"})


@dataclass(frozen=True)
class FileEntry:
    """A file shown in a listing."""

    name: str
    path: RequestPath
    is_source: bool


@dataclass(frozen=True)
class DirectoryEntry:
    """A subdirectory shown in a listing."""

    name: str
    path: RequestPath


@dataclass(frozen=True)
class Breadcrumb:
    """One step of the path from the root to the listed directory."""

    name: str
    path: RequestPath


@dataclass
class ProjectInfo:
    """Summary of an elm.json project file."""

    kind: str
    elm_version: str | None
    dependencies: dict[str, str] = field(default_factory=dict)


@dataclass
class DirectoryInfo:
    """Everything a listing page shows for one directory."""

    path: RequestPath
    breadcrumbs: list[Breadcrumb]
    directories: list[DirectoryEntry]
    files: list[FileEntry]
    project: ProjectInfo | None = None


def gather_info(directory: Path, path: RequestPath) -> DirectoryInfo:
    """Collect listing information for a directory.

    Hidden entries (dotfiles) and build output directories are skipped.
    Entries are sorted by name.

    Args:
        directory: Filesystem directory to list
        path: Request path of that directory ("" for the root)

    Returns:
        DirectoryInfo for the listing page
    """
    directories: list[DirectoryEntry] = []
    files: list[FileEntry] = []

    for child in sorted(directory.iterdir(), key=lambda p: p.name.lower()):
        if child.name.startswith("."):
            continue
        child_path = RequestPath(f"{path}/{child.name}" if path else child.name)
        if child.is_dir():
            if child.name in _HIDDEN_DIRECTORIES:
                continue
            directories.append(DirectoryEntry(name=child.name, path=child_path))
        else:
            files.append(FileEntry(name=child.name, path=child_path, is_source=is_source(child)))

    project = read_project(directory / PROJECT_FILE) if not path else None

    return DirectoryInfo(
        path=path,
        breadcrumbs=_breadcrumbs(path),
        directories=directories,
        files=files,
        project=project,
    )


def read_project(project_file: Path) -> ProjectInfo | None:
    """Read project information from elm.json.

    A missing file gives None. A malformed one is logged and also gives None,
    since the listing is still useful without it.
    """
    if not project_file.is_file():
        return None

    try:
        data = json.loads(project_file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning(f"Could not read {project_file}: {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"Ignoring {project_file}: top level must be an object")
        return None

    kind = data.get("type", "application")
    elm_version = data.get("elm-version")

    dependencies: dict[str, str] = {}
    raw = data.get("dependencies", {})
    if isinstance(raw, dict):
        # applications nest dependencies under "direct"/"indirect"
        direct = raw.get("direct", raw) if kind == "application" else raw
        if isinstance(direct, dict):
            dependencies = {str(k): str(v) for k, v in direct.items()}

    return ProjectInfo(
        kind=str(kind),
        elm_version=str(elm_version) if elm_version is not None else None,
        dependencies=dependencies,
    )


def _breadcrumbs(path: RequestPath) -> list[Breadcrumb]:
    crumbs = [Breadcrumb(name="~", path=RequestPath(""))]
    if not path:
        return crumbs

    parts = path.split("/")
    for i, part in enumerate(parts):
        crumbs.append(Breadcrumb(name=part, path=RequestPath("/".join(parts[: i + 1]))))
    return crumbs
