"""Application shell, WSGI entry point and development server."""

from __future__ import annotations

import argparse
import logging
import mimetypes
import os
from collections.abc import Callable, Iterable
from html import escape
from pathlib import Path
from wsgiref.simple_server import make_server

from radixui.demo import render_demo_page
from radixui.demo_style import document_classes
from radixui.markup import render_element
from radixui.themes import ThemeContext, theme_provider, use_theme

logger = logging.getLogger(__name__)

TITLE = "Leptos Radix UI - Live Demo"
STYLESHEETS = (
    ("radixui", "/pkg/radixui.css"),
    ("checkbox", "/styles/checkbox.css"),
    ("label", "/styles/label.css"),
    ("progress", "/styles/progress.css"),
    ("separator", "/styles/separator.css"),
    ("switch", "/styles/switch.css"),
)
DEFAULT_ADDR = "127.0.0.1:3000"
DEFAULT_SITE_ROOT = "target/site"
SITE_ROOT_KEY = "radixui.site_root"

StartResponse = Callable[..., object]


def render_app(theme: ThemeContext | None = None) -> tuple[str, str]:
    """Render the application; returns the head additions and the body content."""
    if theme is None:
        theme = use_theme()
    links = [
        render_element("link", {"id": sheet_id, "rel": "stylesheet", "href": href})
        for sheet_id, href in STYLESHEETS
    ]
    head = "".join(links) + render_element("title", {}, escape(TITLE))
    return head, render_demo_page(theme)


def shell(theme: ThemeContext | None = None) -> str:
    """Render the complete HTML document."""
    with theme_provider(theme) as active:
        head, body = render_app(active)
    head_markup = render_element(
        "head",
        {},
        [
            render_element("meta", {"charset": "utf-8"}),
            render_element(
                "meta",
                {"name": "viewport", "content": "width=device-width, initial-scale=1"},
            ),
            head,
        ],
    )
    html = render_element(
        "html",
        {"lang": "en", "class": " ".join(document_classes(active.mode))},
        [head_markup, render_element("body", {}, body)],
    )
    return "<!DOCTYPE html>" + html


def _static_file(site_root: str, path: str) -> Path | None:
    root = Path(site_root).resolve()
    candidate = (root / path.lstrip("/")).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        return None
    return candidate


def _respond(
    start_response: StartResponse,
    status: str,
    body: bytes,
    content_type: str,
    send_body: bool,
    extra_headers: Iterable[tuple[str, str]] = (),
) -> list[bytes]:
    headers = [("Content-Type", content_type), ("Content-Length", str(len(body)))]
    headers.extend(extra_headers)
    start_response(status, headers)
    return [body] if send_body else [b""]


def application(environ: dict, start_response: StartResponse) -> list[bytes]:
    """WSGI application serving the demo page and the static site files."""
    method = environ.get("REQUEST_METHOD", "GET").upper()
    raw_path = environ.get("PATH_INFO") or "/"
    path = raw_path.encode("latin-1", "replace").decode("utf-8", "replace")
    send_body = method != "HEAD"
    html_type = "text/html; charset=utf-8"

    if method not in ("GET", "HEAD"):
        return _respond(
            start_response,
            "405 Method Not Allowed",
            b"Method Not Allowed",
            "text/plain; charset=utf-8",
            send_body,
            [("Allow", "GET, HEAD")],
        )

    if path == "/":
        return _respond(
            start_response, "200 OK", shell().encode("utf-8"), html_type, send_body
        )

    site_root = environ.get(SITE_ROOT_KEY) or os.environ.get(
        "RADIXUI_SITE_ROOT", DEFAULT_SITE_ROOT
    )
    found = _static_file(site_root, path)
    if found is None:
        return _respond(
            start_response,
            "404 Not Found",
            shell().encode("utf-8"),
            html_type,
            send_body,
        )
    content_type = mimetypes.guess_type(found.name)[0] or "application/octet-stream"
    return _respond(start_response, "200 OK", found.read_bytes(), content_type, send_body)


def _parse_addr(parser: argparse.ArgumentParser, addr: str) -> tuple[str, int]:
    host, sep, port = addr.rpartition(":")
    if not sep or not host or not port.isdigit() or not 0 <= int(port) <= 65535:
        parser.error(f"invalid address {addr!r}; expected HOST:PORT")
    return host, int(port)


def main(argv: list[str] | None = None) -> int:
    """Serve the application until interrupted."""
    parser = argparse.ArgumentParser(description="Serve the component demo site.")
    parser.add_argument(
        "--addr",
        default=os.environ.get("RADIXUI_SITE_ADDR", DEFAULT_ADDR),
        help="address to listen on, as HOST:PORT",
    )
    parser.add_argument(
        "--site-root",
        default=os.environ.get("RADIXUI_SITE_ROOT", DEFAULT_SITE_ROOT),
        help="directory holding the static site files",
    )
    args = parser.parse_args(argv)
    host, port = _parse_addr(parser, args.addr)
    site_root = args.site_root

    def app(environ: dict, start_response: StartResponse) -> list[bytes]:
        environ.setdefault(SITE_ROOT_KEY, site_root)
        return application(environ, start_response)

    logging.basicConfig(level=logging.INFO)
    logger.info("listening on http://%s", args.addr)
    with make_server(host, port, app) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0