"""Page layout and response rendering."""

from __future__ import annotations

from typing import TypeVar

from flask import Response, request

T = TypeVar("T")

_LAYOUT_HEAD = (
    '<!doctype html><html lang="en"><head>'
    '<meta name="viewport" content="width=device-width, initial-scale=1">'
    '<meta name="description" content="HIP-Forge is a DDNS for Hetzner.">'
    "<title>HIP-Forge</title>"
    '<script src="/assets/js/htmx.min.js"></script>'
    '<link rel="stylesheet" href="/assets/css/main.css">'
    '<link rel="stylesheet" href="/assets/css/inter.css">'
    '<link rel="stylesheet" href="/assets/icons/lucide.css">'
    "</head>"
    '<body class="grid grid-rows-[min-content_auto] text-white bg-gray-950 h-dvh" '
    'hx-target="main" hx-boost="true">'
    '<header class="bg-zinc-950 h-min border-b-2 border-rose-700">'
    '<h1 class="text-2xl font-bold p-4 w-fit">HIP-Forge</h1></header>'
    '<main hx-boost="false" class="bg-zinc-950 w-full overflow-scroll flex justify-center">'
)
_LAYOUT_TAIL = "</main></body></html>"

_ESCAPES = str.maketrans(
    {"&": "&amp;", "'": "&#39;", "<": "&lt;", ">": "&gt;", '"': "&#34;"}
)

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def _escape(value: object) -> str:
    """Escape a value for use in HTML text or a quoted attribute."""
    if isinstance(value, bool):
        value = "true" if value else "false"
    return str(value).translate(_ESCAPES)


def layout(content: str | None = None) -> str:
    """Wrap a fragment in the full page."""
    return f"{_LAYOUT_HEAD}{content or ''}{_LAYOUT_TAIL}"


def render(fragment: str | None, status: int = 200) -> Response:
    """Answer with the fragment alone for htmx requests, else the whole page."""
    body = fragment or ""
    if request.headers.get("HX-Request") != "true":
        body = layout(body)
    response = Response(body, status=status, mimetype="text/html")
    response.headers.add("Vary", "HX-Request")
    return response


def parse_bool(value: str | None, default: bool = False) -> bool:
    """Read a boolean spelled the usual ways; default for anything else."""
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return default


def if_else(condition: bool, then: T, otherwise: T) -> T:
    """Pick then when condition holds, else otherwise."""
    return then if condition else otherwise