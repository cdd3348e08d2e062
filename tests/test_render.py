import flask
import pytest

from hipforge.views.render import _escape, if_else, layout, parse_bool, render


@pytest.fixture
def app():
    return flask.Flask(__name__)


def test_layout_wraps_content_in_main(app):
    page = layout("<p>hi</p>")
    assert page.startswith("<!doctype html>")
    assert page.endswith("<p>hi</p></main></body></html>")
    assert "<title>HIP-Forge</title>" in page


def test_layout_without_content():
    assert layout(None) == layout("")
    assert layout().endswith("justify-center\"></main></body></html>")


def test_render_htmx_returns_fragment_only(app):
    with app.test_request_context(headers={"HX-Request": "true"}):
        response = render("<li>x</li>", 201)
    assert response.status_code == 201
    assert response.get_data(as_text=True) == "<li>x</li>"
    assert response.headers.get_all("Vary") == ["HX-Request"]


def test_render_plain_request_returns_full_page(app):
    with app.test_request_context():
        response = render("<li>x</li>")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == layout("<li>x</li>")
    assert response.mimetype == "text/html"


def test_render_none_fragment(app):
    with app.test_request_context(headers={"HX-Request": "true"}):
        response = render(None, 400)
    assert response.status_code == 400
    assert response.get_data(as_text=True) == ""


def test_render_other_hx_values_get_layout(app):
    with app.test_request_context(headers={"HX-Request": "True"}):
        response = render("frag")
    assert response.get_data(as_text=True) == layout("frag")


@pytest.mark.parametrize("value", ["1", "t", "T", "TRUE", "true", "True"])
def test_parse_bool_true(value):
    assert parse_bool(value) is True
    assert parse_bool(value, False) is True


@pytest.mark.parametrize("value", ["0", "f", "F", "FALSE", "false", "False"])
def test_parse_bool_false(value):
    assert parse_bool(value, True) is False


@pytest.mark.parametrize("value", ["", "yes", "tRuE", None, "2"])
def test_parse_bool_falls_back_to_default(value):
    assert parse_bool(value) is False
    assert parse_bool(value, True) is True


def test_if_else():
    assert if_else(True, "password", "text") == "password"
    assert if_else(False, "password", "text") == "text"


def test_escape_html_characters():
    assert _escape("<a href=\"x\">'&'</a>") == "&lt;a href=&#34;x&#34;&gt;&#39;&amp;&#39;&lt;/a&gt;"
    assert _escape(True) == "true"
    assert _escape(False) == "false"