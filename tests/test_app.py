"""End-to-end tests through the assembled FastAPI app."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from modules.unitconvert.tool import app as unitconvert_app

VALID_PAIRS = {
    "/length": ("meter", "kilometer"),
    "/weight": ("gram", "kilogram"),
    "/temperature": ("Celsius", "Kelvin"),
}


# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------


def test_root_redirects_to_length(client):
    response = client.get("/", follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == "/length"


def test_no_json_api_surface(client):
    assert client.get("/openapi.json").status_code == 404
    assert client.get("/docs").status_code == 404


@pytest.mark.parametrize("path", ["/length", "/weight", "/temperature"])
def test_get_renders_form_without_result(client, path):
    response = client.get(path)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert f'href="{path}" class="active"' in response.text
    assert "Result:" not in response.text
    assert 'class="error"' not in response.text


def test_get_preselects_defaults(client):
    response = client.get("/temperature")
    assert '<option value="Celsius" selected>' in response.text
    assert '<option value="Fahrenheit" selected>' in response.text


def test_get_echoes_query_without_converting(client):
    response = client.get("/length", params={"value": "5", "from": "mile", "to": "yard"})
    assert 'value="5"' in response.text
    assert '<option value="mile" selected>' in response.text
    assert '<option value="yard" selected>' in response.text
    assert "Result:" not in response.text


# ---------------------------------------------------------------------------
# Form submissions
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "path, form, expected",
    [
        ("/length", {"value": "100", "from": "meter", "to": "kilometer"}, "Result: 0.100000"),
        ("/weight", {"value": "2500", "from": "gram", "to": "kilogram"}, "Result: 2.500000"),
        ("/temperature", {"value": "37", "from": "Celsius", "to": "Fahrenheit"}, "Result: 98.600000"),
        ("/length", {"value": "1,000", "from": "millimeter", "to": "meter"}, "Result: 1.000000"),
    ],
)
def test_post_shows_result(client, path, form, expected):
    response = client.post(path, data=form)
    assert response.status_code == 200
    assert expected in response.text
    assert f'href="{path}" class="active"' in response.text


def test_post_uses_defaults_when_units_missing(client):
    response = client.post("/weight", data={"value": "2500"})
    assert "Result: 2.500000" in response.text


@pytest.mark.parametrize("path", ["/length", "/weight", "/temperature"])
def test_invalid_value_shows_error(client, path):
    from_unit, to_unit = VALID_PAIRS[path]
    response = client.post(path, data={"value": "abc", "from": from_unit, "to": to_unit})
    assert response.status_code == 200
    assert "Invalid number." in response.text
    assert "Result:" not in response.text
    assert 'value="abc"' in response.text


@pytest.mark.parametrize("path", ["/length", "/weight", "/temperature"])
def test_empty_value_shows_error(client, path):
    response = client.post(path, data={"value": "   "})
    assert response.status_code == 200
    assert "Please enter a value." in response.text
    assert "Result:" not in response.text


@pytest.mark.parametrize(
    "path, category",
    [("/length", "length"), ("/weight", "weight"), ("/temperature", "temperature")],
)
def test_unsupported_unit_shows_error(client, path, category):
    response = client.post(path, data={"value": "1", "from": "cubit", "to": "cubit"})
    assert response.status_code == 200
    assert f"Unsupported {category} unit." in response.text


@pytest.mark.parametrize(
    "path, form, expected",
    [
        ("/length", {"value": "1e308", "from": "mile", "to": "millimeter"}, "Result: +Inf"),
        ("/temperature", {"value": "-1e308", "from": "Fahrenheit", "to": "Kelvin"}, "Result: -Inf"),
    ],
)
def test_overflowing_conversion_still_renders(client, path, form, expected):
    response = client.post(path, data=form)
    assert response.status_code == 200
    assert expected in response.text


def test_echoed_value_is_escaped(client):
    response = client.post("/length", data={"value": '"><script>x</script>'})
    assert "<script>x</script>" not in response.text
    assert "Invalid number." in response.text


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


def test_render_failure_returns_500(app, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("template exploded")

    monkeypatch.setattr(unitconvert_app.templates, "TemplateResponse", boom)
    client = TestClient(app)
    response = client.post("/length", data={"value": "1"})
    assert response.status_code == 500
    assert response.text == "Internal Server Error"
    assert "template exploded" not in response.text
