"""Record table fragments."""

from __future__ import annotations

from collections.abc import Iterable

from hipforge.models import Record
from hipforge.views.render import _escape

_CELL = '<td class="border-2 border-rose-700 px-2 py-1">'
_BUTTON_CLASS = (
    "h-fit border-2 border-rose-700 hover:bg-rose-700 active:bg-rose-900 "
    "active:border-rose-900 focus-visible:outline-2 focus-visible:outline-offset-4 "
    "focus-visible:outline-rose-700 transition duration-75 px-2 rounded cursor-pointer "
    "flex items-center gap-1"
)
_INCLUDE_ID = 'hx-include="previous [name=&#39;id&#39;]"'

_HEADER = (
    "<thead><tr>"
    '<th class="w-20 border-2 border-t-0 border-rose-700 px-2 py-1">Type</th>'
    '<th class="w-95 border-2 border-t-0 border-rose-700 px-2 py-1">Domain</th>'
    '<th class="w-107 border-2 border-t-0 border-rose-700 px-2 py-1">Resolves to</th>'
    '<th class="border-2 border-t-0 border-e-0 border-rose-700 px-2 py-1"></th>'
    "</tr></thead>"
)

_ACTIONS = (
    '<td class="flex gap-2 border-2 border-rose-700 px-2 py-1">'
    f'<button type="submit" hx-post="/records" {_INCLUDE_ID} class="{_BUTTON_CLASS}">'
    '<i class="icon-save"></i></button> '
    f'<button type="button" hx-post="/records/refresh" {_INCLUDE_ID} class="{_BUTTON_CLASS}">'
    '<i class="icon-refresh-cw"></i></button> '
    f'<button type="button" hx-post="/records/hide" {_INCLUDE_ID} class="{_BUTTON_CLASS}">'
    '<i class="icon-eye-off"></i></button> '
    f'<button type="button" hx-delete="/records" {_INCLUDE_ID} '
    'hx-target="closest .record-row" hx-swap="outerHTML" '
    'hx-confirm="Are you sure you want to delete this record?" '
    f'class="{_BUTTON_CLASS}"><i class="icon-trash"></i></button>'
    "</td></tr>"
)


def record_table_header() -> str:
    """The column headings of a record table."""
    return _HEADER


def record_row(record: Record) -> str:
    """One editable table row for a record."""
    return (
        '<tr class="record-row">'
        f'<input type="hidden" name="id" value="{_escape(record.id)}"> '
        f'<input type="hidden" name="hidden" value="{_escape(bool(record.hidden))}">'
        f"{_CELL}{_escape(record.type)}</td>"
        f'{_CELL}<input type="text" placeholder="Domain" name="domain" '
        f'value="{_escape(record.name)}" class="w-full border-b-2 border-rose-700 '
        'focus-visible:border-rose-500 focus:outline-0"></td>'
        f"{_CELL}{_escape(record.value)}</td>"
        f"{_ACTIONS}"
    )


def record_rows(records: Iterable[Record] | None, row_class: str) -> str:
    """A table body holding a row for each record."""
    rows = "".join(record_row(record) for record in records or ())
    return f'<tbody class="{_escape(row_class)}">{rows}</tbody>'


def record_table(records: Iterable[Record] | None) -> str:
    """The table of records that are shown."""
    return f"<table>{record_table_header()}{record_rows(records, 'record-list')}</table>"


def record_hidden_table(records: Iterable[Record] | None) -> str:
    """The table of records that are hidden."""
    return f"<table>{record_table_header()}{record_rows(records, 'record-hidden-list')}</table>"