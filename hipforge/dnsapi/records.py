"""Record endpoints of the DNS API."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any

from hipforge.dnsapi.client import ApiError, parse_hetzner_time, send_request


@dataclass
class Record:
    """A DNS record as returned by the API."""

    id: str = ""
    name: str = ""
    ttl: int = 0
    type: str = ""
    value: str = ""
    zone_id: str = ""
    created: datetime | None = None
    modified: datetime | None = None


@dataclass
class RecordCreateBody:
    """Payload for creating a record."""

    name: str = ""
    ttl: int | None = None
    type: str = ""
    value: str = ""
    zone_id: str = ""

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object sent to the API."""
        return asdict(self)


@dataclass
class RecordUpdateBody:
    """Payload for updating a record."""

    name: str = ""
    ttl: int | None = None
    type: str = ""
    value: str = ""
    zone_id: str = ""

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object sent to the API."""
        return asdict(self)


@dataclass
class BulkCreateResponse:
    """Answer to a bulk record creation."""

    records: list[Record] = field(default_factory=list)
    valid_records: list[RecordCreateBody] = field(default_factory=list)
    invalid_records: list[RecordCreateBody] = field(default_factory=list)


@dataclass
class BulkUpdateResponse:
    """Answer to a bulk record update."""

    records: list[Record] = field(default_factory=list)
    failed_records: list[RecordUpdateBody] = field(default_factory=list)


def _load(payload: bytes) -> dict[str, Any]:
    try:
        data = json.loads(payload)
    except ValueError as exc:
        raise ApiError(f"invalid JSON in response: {exc}") from exc
    if not isinstance(data, dict):
        raise ApiError("unexpected JSON in response")
    return data


def _get(data: dict[str, Any], key: str, default: Any) -> Any:
    value = data.get(key)
    return default if value is None else value


def _object(value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ApiError("unexpected JSON in response")
    return value


def _items(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ApiError("unexpected JSON in response")
    return [_object(item) for item in value]


def _time(value: Any) -> datetime | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ApiError(f"failed to parse time string {value}")
    try:
        return parse_hetzner_time(value)
    except ValueError as exc:
        raise ApiError(str(exc)) from exc


def _record(value: Any) -> Record:
    data = _object(value)
    return Record(
        id=_get(data, "id", ""),
        name=_get(data, "name", ""),
        ttl=_get(data, "ttl", 0),
        type=_get(data, "type", ""),
        value=_get(data, "value", ""),
        zone_id=_get(data, "zone_id", ""),
        created=_time(data.get("created")),
        modified=_time(data.get("modified")),
    )


def _body_fields(data: dict[str, Any]) -> dict[str, Any]:
    return {
        "name": _get(data, "name", ""),
        "ttl": data.get("ttl"),
        "type": _get(data, "type", ""),
        "value": _get(data, "value", ""),
        "zone_id": _get(data, "zone_id", ""),
    }


def get_records(token: str, zone_id: str | None = None) -> list[Record]:
    """List records, optionally only those of one zone."""
    path = "/records" if zone_id is None else f"/records?zone_id={zone_id}"
    data = _load(send_request("GET", path, token))
    return [_record(item) for item in _items(data, "records")]


def get_record(token: str, record_id: str) -> Record:
    """Fetch one record."""
    data = _load(send_request("GET", f"/records/{record_id}", token))
    return _record(data.get("record"))


def create_record(token: str, record: RecordCreateBody) -> Record:
    """Create a record; an empty Record is returned when the call fails."""
    try:
        data = _load(send_request("POST", "/records", token, record.to_json()))
        return _record(data.get("record"))
    except ApiError:
        return Record()


def update_record(token: str, record_id: str, record: RecordUpdateBody) -> Record:
    """Replace a record's fields."""
    data = _load(send_request("PUT", f"/records/{record_id}", token, record.to_json()))
    return _record(data.get("record"))


def delete_record(token: str, record_id: str) -> None:
    """Delete a record."""
    send_request("DELETE", f"/records/{record_id}", token)


def bulk_create_records(token: str, records: Iterable[RecordCreateBody]) -> BulkCreateResponse:
    """Create several records in one call."""
    body = {"records": [record.to_json() for record in records]}
    data = _load(send_request("POST", "/records/bulk", token, body))
    return BulkCreateResponse(
        records=[_record(item) for item in _items(data, "records")],
        valid_records=[RecordCreateBody(**_body_fields(item)) for item in _items(data, "valid_records")],
        invalid_records=[
            RecordCreateBody(**_body_fields(item)) for item in _items(data, "invalid_records")
        ],
    )


def bulk_update_records(token: str, records: Iterable[RecordUpdateBody]) -> BulkUpdateResponse:
    """Update several records in one call."""
    body = {"records": [record.to_json() for record in records]}
    data = _load(send_request("PUT", "/records/bulk", token, body))
    return BulkUpdateResponse(
        records=[_record(item) for item in _items(data, "records")],
        failed_records=[
            RecordUpdateBody(**_body_fields(item)) for item in _items(data, "failed_records")
        ],
    )