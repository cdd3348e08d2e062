"""Zone endpoints of the DNS API."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any

from hipforge.dnsapi.client import ApiError, parse_hetzner_time, send_request


@dataclass
class ZoneType:
    """The pricing type of a zone."""

    id: str = ""
    name: str = ""
    description: str = ""
    prices: str = ""


@dataclass
class TxtVerification:
    """TXT record used to verify zone ownership."""

    name: str = ""
    token: str = ""


@dataclass
class Zone:
    """A DNS zone as returned by the API."""

    id: str = ""
    name: str = ""
    ttl: int = 0
    registrar: str = ""
    legacy_dns_host: str = ""
    legacy_ns: list[str] = field(default_factory=list)
    ns: list[str] = field(default_factory=list)
    created: datetime | None = None
    verified: datetime | None = None
    modified: datetime | None = None
    project: str = ""
    owner: str = ""
    permission: str = ""
    zone_type: ZoneType = field(default_factory=ZoneType)
    status: str = ""
    paused: bool = False
    is_secondary_dns: bool = False
    txt_verification: TxtVerification = field(default_factory=TxtVerification)
    records_count: int = 0


@dataclass
class ZoneCreateBody:
    """Payload for creating a zone."""

    name: str = ""
    ttl: int | None = None

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object sent to the API."""
        return asdict(self)


@dataclass
class ZoneUpdateBody:
    """Payload for updating a zone."""

    name: str = ""
    ttl: int | None = None

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object sent to the API."""
        return asdict(self)


def _load(payload: bytes) -> dict[str, Any]:
    try:
        data = json.loads(payload)
    except ValueError as exc:
        raise ApiError(f"invalid JSON in response: {exc}") from exc
    if not isinstance(data, dict):
        raise ApiError("unexpected JSON in response")
    return data


def _object(value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ApiError("unexpected JSON in response")
    return value


def _get(data: dict[str, Any], key: str, default: Any) -> Any:
    value = data.get(key)
    return default if value is None else value


def _strings(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ApiError("unexpected JSON in response")
    return list(value)


def _time(value: Any) -> datetime | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ApiError(f"failed to parse time string {value}")
    try:
        return parse_hetzner_time(value)
    except ValueError as exc:
        raise ApiError(str(exc)) from exc


def _zone(value: Any) -> Zone:
    data = _object(value)
    zone_type = _object(data.get("zone_type"))
    verification = _object(data.get("txt_verification"))
    return Zone(
        id=_get(data, "id", ""),
        name=_get(data, "name", ""),
        ttl=_get(data, "ttl", 0),
        registrar=_get(data, "registrar", ""),
        legacy_dns_host=_get(data, "legacy_dns_host", ""),
        legacy_ns=_strings(data, "legacy_ns"),
        ns=_strings(data, "ns"),
        created=_time(data.get("created")),
        verified=_time(data.get("verified")),
        modified=_time(data.get("modified")),
        project=_get(data, "project", ""),
        owner=_get(data, "owner", ""),
        permission=_get(data, "permission", ""),
        zone_type=ZoneType(
            id=_get(zone_type, "id", ""),
            name=_get(zone_type, "name", ""),
            description=_get(zone_type, "description", ""),
            prices=_get(zone_type, "prices", ""),
        ),
        status=_get(data, "status", ""),
        paused=_get(data, "paused", False),
        is_secondary_dns=_get(data, "is_secondary_dns", False),
        txt_verification=TxtVerification(
            name=_get(verification, "name", ""),
            token=_get(verification, "token", ""),
        ),
        records_count=_get(data, "records_count", 0),
    )


def _zones(data: dict[str, Any]) -> list[Zone]:
    value = data.get("zones")
    if value is None:
        return []
    if not isinstance(value, list):
        raise ApiError("unexpected JSON in response")
    return [_zone(item) for item in value]


def get_zones(token: str) -> list[Zone]:
    """List all zones the token can see."""
    return _zones(_load(send_request("GET", "/zones", token, accept_json=True)))


def get_zone(token: str, zone_id: str) -> Zone:
    """Fetch one zone; an empty Zone is returned when the request fails."""
    try:
        payload = send_request("GET", f"/zones/{zone_id}", token, accept_json=True)
    except ApiError:
        return Zone()
    return _zone(_load(payload).get("zone"))


def create_zone(token: str, zone: ZoneCreateBody) -> Zone:
    """Create a zone."""
    payload = send_request("POST", "/zones", token, zone.to_json(), accepted_status_codes=(201,))
    return _zone(_load(payload).get("zone"))


def update_zone(token: str, zone_id: str, zone: ZoneUpdateBody) -> Zone:
    """Replace a zone's name and TTL."""
    payload = send_request("PUT", f"zones/{zone_id}", token, zone.to_json())
    return _zone(_load(payload).get("zone"))


def delete_zone(token: str, zone_id: str) -> None:
    """Delete a zone."""
    send_request("DELETE", f"/zones/{zone_id}", token)