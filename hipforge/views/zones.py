"""Zone selection fragments."""

from __future__ import annotations

from collections.abc import Iterable

from hipforge.models import Zone
from hipforge.views.render import _escape

_SELECT_OPEN = (
    '<select required hx-trigger="click once" hx-get="/zones" hx-swap="innerHTML" '
    'hx-target="this" hx-include="previous [name=&#39;token&#39;]" name="zone" id="zone" '
    'class="zone-select w-125 border-b-2 border-rose-700 focus-visible:border-rose-500 '
    'focus:outline-0"'
)
_OPTION_ATTRIBUTES = (
    ' hx-trigger="click" hx-get="/records" hx-target="next .record-list" '
    'hx-swap="outerHTML" '
    'hx-include="closest [name=&#39;zone&#39;], previous [name=&#39;token&#39;]"'
)


def zone_default_option() -> str:
    """The empty placeholder option."""
    return '<option value="">-- Please select a zone --</option>'


def zone_input(has_token: bool) -> str:
    """The zone select box, disabled until a token is entered."""
    disabled = "" if has_token else " disabled"
    return f"{_SELECT_OPEN}{disabled}>{zone_default_option()}</select>"


def zone_options(zones: Iterable[Zone] | None) -> str:
    """Options for each zone, after the placeholder option."""
    options = "".join(
        f'<option value="{_escape(zone.id)}"{_OPTION_ATTRIBUTES}>{_escape(zone.name)}</option>'
        for zone in zones or ()
    )
    return zone_default_option() + options