"""HTML pages served by the reactor.

Every page is a complete document. Text that comes from the filesystem or the
compiler is escaped before it is embedded.
"""

import json
from html import escape
from urllib.parse import quote

from elm_reactor.assets import DEBUGGER_PATH, FAVICON_PATH, INDEX_PATH, NOT_FOUND_PATH, WAITING_PATH
from elm_reactor.core.directory import DirectoryInfo, ProjectInfo
from elm_reactor.core.types import RequestPath

HIGHLIGHT_JS_VERSION = "11.9.0"
_HIGHLIGHT_CDN = f"https://cdnjs.cloudflare.com/ajax/libs/highlight.js/{HIGHLIGHT_JS_VERSION}"

_STYLE = """
body { margin: 0; font-family: 'Source Sans Pro', 'Trebuchet MS', 'Lucida Grande', sans-serif; color: #293c4b; }
a { color: #60b5cc; text-decoration: none; }
a:hover { text-decoration: underline; }
header { padding: 12px 24px; background: #f7f7f7; border-bottom: 1px solid #eaeaea; font-size: 1.2em; }
main { padding: 12px 24px; }
pre { margin: 0; padding: 12px 24px; font-size: 14px; }
ul.listing { list-style: none; padding: 0; }
ul.listing li { padding: 4px 0; }
.debug { margin-left: 8px; font-size: 0.8em; color: #999; }
.project { float: right; width: 280px; padding: 0 16px; border-left: 1px solid #eaeaea; }
.reactor-errors { display: none; white-space: pre-wrap; font-family: monospace; color: #c33; padding: 12px 24px; }
"""


def _document(title: str, body: str, *, head: str = "") -> str:
    return (
        "<!DOCTYPE html>\n"
        "<html>\n<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escape(title)}</title>\n"
        f'<link rel="icon" type="image/x-icon" href="/{FAVICON_PATH}">\n'
        f"<style>{_STYLE}</style>\n"
        f"{head}"
        "</head>\n<body>\n"
        f"{body}\n"
        "</body>\n</html>\n"
    )


def _script_json(value: object) -> str:
    """JSON for embedding inside a <script> element."""
    return json.dumps(value).replace("</", "<\\/")


def _virtual(path: RequestPath) -> str:
    return f"~/{path}"


def _href(path: RequestPath) -> str:
    return escape("/" + quote(path))


def code_page(path: RequestPath, code: str) -> str:
    """Show a file's contents as highlighted code.

    Args:
        path: Request path of the file, shown as ~/path
        code: File contents
    """
    title = _virtual(path)
    # highlightAll waits for DOMContentLoaded, so the script can sit in <head>
    head = (
        f'<link rel="stylesheet" href="{_HIGHLIGHT_CDN}/styles/default.min.css">\n'
        f'<script src="{_HIGHLIGHT_CDN}/highlight.min.js"></script>\n'
        "<script>if (window.hljs) { hljs.highlightAll(); }</script>\n"
    )
    body = (
        f"<header>{escape(title)}</header>\n"
        f"<pre><code>{escape(code)}</code></pre>"
    )
    return _document(title, body, head=head)


def debugger_page(path: RequestPath, host: str) -> str:
    """Debugger harness for an Elm file.

    Nothing is compiled here. The page loads debug.js, which opens the change
    socket for the file and runs whatever builds arrive over it.

    Args:
        path: Request path of the .elm file
        host: Base URL of the server as seen by the client (e.g. "http://localhost:8000")
    """
    title = _virtual(path)
    options = {"title": title, "host": host, "file": path}
    body = (
        '<div id="elm-reactor">\n'
        f'<header><img src="/{WAITING_PATH}" alt=""> '
        '<span class="reactor-status"></span></header>\n'
        '<div class="reactor-errors"></div>\n'
        '<div class="reactor-program"></div>\n'
        "</div>\n"
        f'<script src="/{DEBUGGER_PATH}"></script>\n'
        f"<script>ElmReactor.debug({_script_json(options)});</script>"
    )
    return _document(title, body)


def compile_error_page(path: RequestPath, diagnostics: str) -> str:
    """Show compiler diagnostics for a file that failed to compile."""
    title = _virtual(path)
    body = (
        f"<header>Problem compiling {escape(title)}</header>\n"
        f'<pre class="diagnostics">{escape(diagnostics)}</pre>'
    )
    return _document(title, body)


def not_found_page() -> str:
    body = (
        "<header>Page Not Found</header>\n"
        '<main id="reactor-not-found">\n'
        "<noscript><p>Nothing is served at this address.</p></noscript>\n"
        "</main>\n"
        f'<script src="/{NOT_FOUND_PATH}"></script>'
    )
    return _document("Page Not Found", body)


def directory_page(info: DirectoryInfo) -> str:
    """Listing of a directory with links to its entries."""
    title = _virtual(info.path)

    crumbs = " / ".join(
        f'<a href="{_href(crumb.path)}">{escape(crumb.name)}</a>' for crumb in info.breadcrumbs
    )

    items: list[str] = []
    for directory in info.directories:
        items.append(
            f'<li data-entry="{escape(directory.name)}">'
            f'<a href="{_href(directory.path)}">{escape(directory.name)}/</a></li>'
        )
    for file in info.files:
        link = f'<a href="{_href(file.path)}">{escape(file.name)}</a>'
        if file.is_source:
            link += f'<a class="debug" href="{_href(file.path)}?debug">debug</a>'
        items.append(f'<li data-entry="{escape(file.name)}">{link}</li>')

    listing = "\n".join(items)
    sidebar = _project_sidebar(info.project) if info.project is not None else ""

    body = (
        f"<header>{crumbs}</header>\n"
        "<main>\n"
        f"{sidebar}"
        '<input id="reactor-filter" type="search" placeholder="Filter (press /)">\n'
        f'<ul class="listing">\n{listing}\n</ul>\n'
        "</main>\n"
        f'<script src="/{INDEX_PATH}"></script>'
    )
    return _document(title, body)


def _project_sidebar(project: ProjectInfo) -> str:
    rows = "".join(
        f"<li>{escape(name)} <small>{escape(version)}</small></li>"
        for name, version in sorted(project.dependencies.items())
    )
    version = f"<p>Elm {escape(project.elm_version)}</p>" if project.elm_version else ""
    return (
        '<aside class="project">\n'
        f"<h3>{escape(project.kind.capitalize())}</h3>\n"
        f"{version}"
        f"<h4>Dependencies</h4>\n<ul>{rows}</ul>\n"
        "</aside>\n"
    )
