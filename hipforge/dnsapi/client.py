"""HTTP plumbing shared by the DNS API calls."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone
from typing import Any

import requests

BASE_URL = "https://dns.hetzner.com/api/v1"
TIMEOUT = 20.0

_HETZNER_LAYOUT = re.compile(
    r"(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2}):(\d{2})\.(\d{2,3}) ([+-])(\d{2})(\d{2}) \S+"
)
_RFC3339_LAYOUT = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(?:(Z)|([+-])(\d{2}):(\d{2}))"
)


class ApiError(Exception):
    """Raised when a DNS API request fails or returns an unexpected answer."""

    def __init__(self, message: str, status_code: int | None = None, body: bytes = b"") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


def _build_datetime(
    date_parts: Iterable[str], fraction: str | None, sign: str, hours: str, minutes: str
) -> datetime:
    year, month, day, hour, minute, second = (int(part) for part in date_parts)
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
    offset = timedelta(hours=int(hours), minutes=int(minutes))
    if sign == "-":
        offset = -offset
    return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=timezone(offset))


def _parse_hetzner_layout(text: str) -> datetime | None:
    match = _HETZNER_LAYOUT.fullmatch(text)
    if match is None:
        return None
    groups = match.groups()
    return _build_datetime(groups[:6], groups[6], groups[7], groups[8], groups[9])


def _parse_rfc3339(text: str) -> datetime | None:
    match = _RFC3339_LAYOUT.fullmatch(text)
    if match is None:
        return None
    groups = match.groups()
    if groups[7] == "Z":
        return _build_datetime(groups[:6], groups[6], "+", "00", "00")
    return _build_datetime(groups[:6], groups[6], groups[8], groups[9], groups[10])


def parse_hetzner_time(value: str) -> datetime | None:
    """Parse a timestamp as the DNS API writes it; an empty string gives None."""
    text = value
    if len(text) > 1 and text[0] == '"' and text[-1] == '"':
        text = text[1:-1]
    if not text:
        return None
    for parser in (_parse_hetzner_layout, _parse_rfc3339):
        try:
            parsed = parser(text)
        except ValueError:
            continue
        if parsed is not None:
            return parsed
    raise ValueError(f"failed to parse time string {text}")


def create_session() -> requests.Session:
    """Create an HTTP session for API requests."""
    return requests.Session()


def api_url(path: str) -> str:
    """Return the full endpoint URL for an API path."""
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{BASE_URL}{path}"


def send_request(
    method: str,
    path: str,
    token: str,
    body: Any = None,
    accept_json: bool = False,
    accepted_status_codes: Iterable[int] = (200,),
) -> bytes:
    """Send an authenticated request and return the raw response body."""
    headers = {}
    data = None
    if body is not None:
        headers["Content-Type"] = "application/json"
        data = json.dumps(body, separators=(",", ":")).encode("utf-8")
    if accept_json:
        headers["Accept"] = "application/json"
    headers["Auth-API-Token"] = token

    with create_session() as session:
        try:
            response = session.request(
                method, api_url(path), headers=headers, data=data, timeout=TIMEOUT
            )
        except requests.RequestException as exc:
            raise ApiError(str(exc)) from exc

    if response.status_code not in set(accepted_status_codes):
        raise ApiError(
            f"API request failed with response status of {response.status_code}: {response.text}",
            status_code=response.status_code,
            body=response.content,
        )
    return response.content