# hipforge

hipforge holds the building blocks for a small web interface that manages DNS
records of zones hosted with the Hetzner DNS service:

- `hipforge.dnsapi` – a client for the Hetzner DNS API (zones and records),
- `hipforge.database` and `hipforge.models` – SQLite storage for accounts,
  zones and records,
- `hipforge.views` – HTML fragments for htmx, and a renderer that wraps them
  in a full page layout for ordinary requests.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## The DNS API client

`hipforge.dnsapi.zones` offers `get_zones`, `get_zone`, `create_zone`,
`update_zone` and `delete_zone`; `hipforge.dnsapi.records` offers
`get_records`, `get_record`, `create_record`, `update_record`,
`delete_record`, `bulk_create_records` and `bulk_update_records`. Every call
takes the Auth-API-Token as its first argument.

```python
from hipforge.dnsapi.zones import get_zones
from hipforge.dnsapi.records import get_records

token = "token"
for zone in get_zones(token):
    print(zone.id, zone.name)
    for record in get_records(token, zone.id):
        print("  ", record.type, record.name, record.value)
```

Failed requests raise `hipforge.dnsapi.client.ApiError`, which carries the
response status in `status_code` and the raw body in `body`. Two calls
behave differently: `create_record` returns an empty `Record` when the call
fails, and `get_zone` returns an empty `Zone` when the request fails.
Timestamps in answers are parsed by `parse_hetzner_time`, which turns an
empty string into `None`.

## Storage

```python
from hipforge.database import open_database

with open_database("hip-forge.db") as db:
    for account in db.accounts():
        print(account.name, len(account.unhidden_records(db) or []))
```

`open_database` defaults to `db/hip-forge.db` and creates any missing tables.
The directory holding the file must already exist.

## Views

The functions in `hipforge.views.home`, `hipforge.views.accounts`,
`hipforge.views.records` and `hipforge.views.zones` return HTML strings.
`hipforge.views.render.render(fragment, status)` turns a fragment into a Flask
`Response`: it sends the fragment alone when the request carries
`HX-Request: true` and the whole page from `layout` otherwise, and always adds
`Vary: HX-Request`. It must be called inside a Flask request context.

## What is not included

The package has no web server, no routes and no command to start one. It
provides the views, storage and API client, but wiring them into a running
application – routing requests, reading form data and serving the static
assets the page layout refers to (`/assets/js/htmx.min.js`,
`/assets/css/main.css` and so on) – is left to the code that uses it.