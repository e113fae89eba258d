import pytest
from httpx import ASGITransport, AsyncClient

from markup_profiles.config import get_settings
from markup_profiles.main import create_application
from markup_profiles.profiles.registry import get_profile_registry


@pytest.fixture
def test_app(registry):
    app = create_application()
    app.dependency_overrides[get_profile_registry] = lambda: registry
    return app


def _client(app):
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver")


@pytest.mark.anyio
async def test_healthz(test_app):
    async with _client(test_app) as client:
        response = await client.get("/healthz")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["profiles"] == 4
    assert body["environment"] == get_settings().environment


@pytest.mark.anyio
async def test_list_profiles(test_app):
    async with _client(test_app) as client:
        response = await client.get("/v1/profiles")
    assert response.status_code == 200
    names = [p["name"] for p in response.json()]
    assert sorted(names) == ["html", "plain", "xhtml", "xml"]


@pytest.mark.anyio
async def test_get_profile_resolves_with_fallback(test_app):
    async with _client(test_app) as client:
        known = await client.get("/v1/profiles/XML")
        unknown = await client.get("/v1/profiles/nonexistent")
        via_syntax = await client.get("/v1/profiles/xhtml", params={"syntax": "xsl"})

    assert known.json()["name"] == "xml"
    assert known.json()["options"]["self_closing_tag"] is True
    assert unknown.json()["name"] == "plain"
    assert via_syntax.json()["name"] == "xml"


@pytest.mark.anyio
async def test_put_then_delete_profile(test_app, registry):
    async with _client(test_app) as client:
        created = await client.put(
            "/v1/profiles/Custom", json={"self_closing_tag": True, "tag_case": "upper"}
        )
        assert created.status_code == 200
        assert created.json()["name"] == "custom"
        assert created.json()["options"]["attr_quotes"] == "double"
        assert registry.get("custom").self_closing() == "/"

        deleted = await client.delete("/v1/profiles/custom")
        missing = await client.delete("/v1/profiles/custom")

    assert deleted.status_code == 204
    assert missing.status_code == 204
    assert "custom" not in registry


@pytest.mark.anyio
async def test_render_with_named_profile(test_app):
    async with _client(test_app) as client:
        response = await client.post(
            "/v1/render",
            json={"profile": "xhtml", "tag": "DIV", "attribute": "CLASS"},
        )
    assert response.status_code == 200
    assert response.json() == {
        "tag": "div",
        "attribute": "class",
        "quote": '"',
        "self_closing": " /",
        "cursor": "|",
    }


@pytest.mark.anyio
async def test_render_with_inline_options(test_app):
    async with _client(test_app) as client:
        response = await client.post(
            "/v1/render",
            json={
                "profile": {"tag_case": "upper", "attr_quotes": "single"},
                "tag": "span",
            },
        )
    body = response.json()
    assert body["tag"] == "SPAN"
    assert body["attribute"] is None
    assert body["quote"] == "'"


@pytest.mark.anyio
async def test_render_validation_error(test_app):
    async with _client(test_app) as client:
        response = await client.post("/v1/render", json={"profile": "xml"})
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"


@pytest.mark.anyio
async def test_delete_fallback_profile_rejected(test_app, registry):
    async with _client(test_app) as client:
        deleted = await client.delete("/v1/profiles/PLAIN")
        unknown = await client.get("/v1/profiles/nonexistent")

    assert deleted.status_code == 409
    assert deleted.json()["error"] == "fallback_profile"
    assert "plain" in registry
    assert unknown.status_code == 200
    assert unknown.json()["name"] == "plain"
