import json
from datetime import datetime, timezone

import pytest
import requests
import responses

from hipforge.dnsapi.client import ApiError, api_url, parse_hetzner_time, send_request


@pytest.fixture
def api():
    with responses.RequestsMock() as mock:
        yield mock


def test_hetzner_layout_three_digit_fraction():
    assert parse_hetzner_time("2020-06-04 09:17:42.427 +0000 UTC") == datetime(
        2020, 6, 4, 9, 17, 42, 427000, tzinfo=timezone.utc
    )


def test_hetzner_layout_two_digit_fraction_matches_rfc3339():
    short = parse_hetzner_time("2021-01-02 03:04:05.12 +0200 CEST")
    rfc = parse_hetzner_time("2021-01-02T03:04:05.12+02:00")
    assert short == rfc
    assert short.utcoffset() == rfc.utcoffset()


def test_two_and_three_digit_fractions_agree():
    assert parse_hetzner_time("2021-01-02 03:04:05.12 +0000 UTC") == parse_hetzner_time(
        "2021-01-02 03:04:05.120 +0000 UTC"
    )


def test_rfc3339_without_fraction():
    assert parse_hetzner_time("2020-06-04T09:17:42Z") == parse_hetzner_time(
        "2020-06-04 09:17:42.000 +0000 UTC"
    )


def test_rfc3339_nano_truncated_to_microseconds():
    parsed = parse_hetzner_time("2020-01-01T00:00:00.123456789Z")
    assert parsed.microsecond == 123456


def test_negative_offset():
    parsed = parse_hetzner_time("2020-01-01T10:00:00-05:00")
    assert parsed == parse_hetzner_time("2020-01-01T15:00:00Z")


def test_quoted_value_is_unwrapped():
    assert parse_hetzner_time('"2020-06-04T09:17:42Z"') == parse_hetzner_time(
        "2020-06-04T09:17:42Z"
    )


@pytest.mark.parametrize("value", ["", '""'])
def test_empty_gives_none(value):
    assert parse_hetzner_time(value) is None


@pytest.mark.parametrize(
    "value",
    [
        "not a time",
        "2020-06-04 09:17:42.4271 +0000 UTC",
        "2020-13-01T00:00:00Z",
        "2020-06-04T09:17:42",
    ],
)
def test_unparseable_raises(value):
    with pytest.raises(ValueError, match="failed to parse time string"):
        parse_hetzner_time(value)


def test_api_url_adds_leading_slash():
    assert api_url("records") == "https://dns.hetzner.com/api/v1/records"
    assert api_url("/records") == api_url("records")


def test_send_request_sets_token_and_accept(api):
    api.add(responses.GET, api_url("/zones"), body=b'{"ok":true}', status=200)
    result = send_request("GET", "/zones", "token", accept_json=True)
    assert result == b'{"ok":true}'
    headers = api.calls[0].request.headers
    assert headers["Auth-API-Token"] == "token"
    assert headers["Accept"] == "application/json"
    assert "Content-Type" not in headers


def test_send_request_serialises_body(api):
    api.add(responses.POST, api_url("/zones"), body=b"{}", status=200)
    send_request("POST", "/zones", "token", {"name": "example.com", "ttl": None})
    request = api.calls[0].request
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.body) == {"name": "example.com", "ttl": None}


def test_send_request_rejects_unexpected_status(api):
    api.add(responses.GET, api_url("/zones"), body="unauthorized", status=401)
    with pytest.raises(ApiError) as excinfo:
        send_request("GET", "/zones", "token")
    assert excinfo.value.status_code == 401
    assert str(excinfo.value) == "API request failed with response status of 401: unauthorized"


def test_send_request_accepts_listed_status(api):
    api.add(responses.POST, api_url("/zones"), body=b"created", status=201)
    assert send_request("POST", "/zones", "token", {}, accepted_status_codes=[201]) == b"created"


def test_send_request_wraps_connection_errors(api):
    api.add(responses.GET, api_url("/zones"), body=requests.ConnectionError("down"))
    with pytest.raises(ApiError) as excinfo:
        send_request("GET", "/zones", "token")
    assert excinfo.value.status_code is None