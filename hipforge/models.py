"""Records, zones and accounts kept in the local database."""

from __future__ import annotations

import enum
import sqlite3
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hipforge.database import Database


class RecordType(str, enum.Enum):
    """DNS record types the API knows."""

    A = "A"
    AAAA = "AAAA"
    NS = "NS"
    MX = "MX"
    CNAME = "CNAME"
    RP = "RP"
    TXT = "TXT"
    SOA = "SOA"
    HINFO = "HINFO"
    SRV = "SRV"
    DANE = "DANE"
    TLSA = "TLSA"
    DS = "DS"
    CAA = "CAA"

    def __str__(self) -> str:
        return self.value

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)


@dataclass
class ZoneType:
    """The pricing type of a zone."""

    id: str = ""
    name: str = ""
    description: str = ""
    prices: str = ""
    zones: list[Zone] = field(default_factory=list)


@dataclass
class Zone:
    """A zone stored for an account."""

    id: str = ""
    name: str = ""
    ttl: int = 0
    registrar: str = ""
    legacy_dns_host: str = ""
    created: datetime | None = None
    verified: datetime | None = None
    modified: datetime | None = None
    project: str = ""
    owner: str = ""
    permission: str = ""
    status: str = ""
    paused: bool = False
    is_secondary_dns: bool = False
    records: list[Record] = field(default_factory=list)
    account_id: int = 0
    zone_type_id: int = 0
    zone_type: ZoneType | None = None
    nameservers: list[Nameserver] = field(default_factory=list)
    legacy_nameservers: list[Nameserver] = field(default_factory=list)


@dataclass
class Nameserver:
    """A name server that serves one or more zones."""

    name: str = ""
    zones: list[Zone] = field(default_factory=list)
    legacy_zones: list[Zone] = field(default_factory=list)


@dataclass
class Account:
    """An API token together with the zone and records it manages."""

    id: int = 0
    name: str = ""
    token: str = ""
    zone_id: int = 0
    zone: Zone | None = None
    records: list[Record] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    def unhidden_records(self, db: Database) -> list[Record] | None:
        """Records queried as not hidden; None when the query fails."""
        try:
            return db.records(self.id, False)
        except sqlite3.Error:
            return None

    def hidden_records(self, db: Database) -> list[Record] | None:
        """Records queried as hidden; None when the query fails."""
        try:
            return db.records(self.id, True)
        except sqlite3.Error:
            return None


@dataclass
class Record:
    """A DNS record shown for an account."""

    id: str = ""
    name: str = ""
    ttl: int = 0
    type: RecordType | str = ""
    value: str = ""
    created: datetime | None = None
    updated: datetime | None = None
    zone_id: int = 0
    zone: Zone | None = None
    account_id: int = 0
    account: Account | None = None
    hidden: bool = False