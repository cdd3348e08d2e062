"""The start page listing every account."""

from __future__ import annotations

from collections.abc import Iterable

from hipforge.database import Database
from hipforge.models import Account
from hipforge.views.accounts import account

_HOME_OPEN = (
    '<div class="w-275 flex flex-col gap-4 py-8 h-fit"><div class="flex justify-end">'
    '<button hx-post="/accounts/new" hx-target="next ul" hx-swap="beforeend" '
    'class="border-2 border-rose-700 hover:bg-rose-700 active:bg-rose-900 '
    "active:border-rose-900 focus-visible:outline-2 focus-visible:outline-offset-4 "
    "focus-visible:outline-rose-700 transition duration-75 px-2 rounded cursor-pointer "
    'flex items-center gap-1"><i class="icon-plus"></i> <span>Account</span></button>'
    '</div><ul class="grid gap-4">'
)
_HOME_CLOSE = "</ul></div>"


def home(accounts: Iterable[Account] | None, db: Database) -> str:
    """The page body with a card for each account."""
    cards = "".join(account(item, db) for item in accounts or ())
    return f"{_HOME_OPEN}{cards}{_HOME_CLOSE}"