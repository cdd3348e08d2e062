"""Account card fragments."""

from __future__ import annotations

from hipforge.database import Database
from hipforge.models import Account
from hipforge.views.records import record_hidden_table, record_table
from hipforge.views.render import _escape, if_else, parse_bool
from hipforge.views.zones import zone_input

_BUTTON_CLASS = (
    "border-2 border-rose-700 hover:bg-rose-700 active:bg-rose-900 "
    "active:border-rose-900 focus-visible:outline-2 focus-visible:outline-offset-4 "
    "focus-visible:outline-rose-700 transition duration-75 px-2 rounded cursor-pointer "
    "flex items-center gap-1"
)

_CARD_OPEN = (
    '<li class="border-2 border-rose-900 rounded">'
    '<form class="flex flex-col" action="/accounts" method="post" hx-target="main" '
    'enctype="multipart/form-data">'
    '<div class="border-b-2 border-rose-900 py-2 px-16 relative">'
    '<h2 class="font-bold text-xl">'
    '<input type="text" placeholder="Name" required value="'
)

_AFTER_NAME = (
    '" name="name" class="w-full border-b-2 border-rose-700 '
    'focus-visible:border-rose-500 focus:outline-0 text-center"></h2>'
    f'<button type="submit" class="absolute border-2 top-2 right-2 {_BUTTON_CLASS}">'
    '<i class="icon-save"></i></button></div>'
    '<div class="grid grid-rows-2 grid-cols-[min-content_auto] gap-2 p-2">'
    '<label for="token" class="text-nowrap">Auth-API-Token</label>'
    '<div class="ml-26">'
)

_BEFORE_ZONE = (
    '</div><label for="zone" class="text-nowrap">Zone</label><div class="ml-26">'
)

_AFTER_ZONE = (
    '</div></div><div class="flex flex-col gap-2 p-2"><div class="flex justify-end">'
    f'<button type="button" class="{_BUTTON_CLASS}" hx-target="next .record-list" '
    'hx-post="/records" hx-swap="beforeend">'
    '<i class="icon-plus"></i> <span>Domain</span></button></div>'
)

_BEFORE_HIDDEN = "</div><div><details><summary>Hidden records</summary>"
_CARD_CLOSE = "</details></div></form></li>"

_FIELD_ATTRIBUTES = (
    ' class="block w-125 border-b-2 border-rose-700 focus-visible:border-rose-500 '
    'focus:outline-0" hx-post="/accounts/token-changed" '
    'hx-trigger="input changed throttle:1s" hx-target="next .zone-select" '
    'hx-swap="outerHTML">'
)

_TOGGLE_BUTTON_OPEN = (
    '<button type="button" hx-post="/accounts/toggle-token-input" '
    'hx-target="closest span" '
    'hx-include="[name=&#39;token&#39;],[name=&#39;hidden-token&#39;]" '
    f'hx-swap="outerHTML" class="{_BUTTON_CLASS}">'
)


def account_token_input(token: str, hide_token: bool) -> str:
    """The token field with a button that shows or hides its content."""
    input_type = if_else(hide_token, "password", "text")
    icon = if_else(hide_token, '<i class="icon-eye"></i>', '<i class="icon-eye-off"></i>')
    return (
        '<span class="flex gap-2"><div class="w-full">'
        f'<input type="{_escape(input_type)}" placeholder="Token" required '
        f'name="token" id="token" value="{_escape(token)}"'
        f"{_FIELD_ATTRIBUTES} "
        f'<input type="hidden" value="{_escape(bool(hide_token))}" name="hidden-token">'
        "</div>"
        f"{_TOGGLE_BUTTON_OPEN}{icon}</button></span>"
    )


def account(account: Account, db: Database) -> str:
    """The editable card for one account with its record tables."""
    return (
        f"{_CARD_OPEN}{_escape(account.name)}{_AFTER_NAME}"
        f"{account_token_input(account.token, True)}"
        f"{_BEFORE_ZONE}"
        f"{zone_input(parse_bool(account.token))}"
        f"{_AFTER_ZONE}"
        f"{record_table(account.unhidden_records(db))}"
        f"{_BEFORE_HIDDEN}"
        f"{record_hidden_table(account.hidden_records(db))}"
        f"{_CARD_CLOSE}"
    )