"""Integration tests for the home page, static files and error pages."""

from httpx import ASGITransport, AsyncClient

from beepboard.beeps.router import get_beep_log
from beepboard.config import get_settings
from beepboard.errors import NOT_FOUND_MESSAGE, SERVER_ERROR_MESSAGE
from beepboard.main import app
from beepboard.rendering import STATIC_DIR, get_renderer
from tests.fixtures import post_beep


class TestHomePage:
    async def test_empty(self, client):
        resp = await client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "No beeps yet." in resp.text

    async def test_newest_first(self, client):
        for text in ["beep-a", "beep-b", "beep-c"]:
            await post_beep(client, text)

        body = (await client.get("/")).text
        assert body.index("beep-c") < body.index("beep-b") < body.index("beep-a")

    async def test_shows_timestamps(self, client):
        await post_beep(client, "hi")
        body = (await client.get("/")).text
        assert "<time>Mon, 19 Oct 2026 06:23:00 +0000</time>" in body

    async def test_text_is_escaped(self, client):
        await post_beep(client, "<script>alert(1)</script>")
        body = (await client.get("/")).text
        assert "<script>alert(1)</script>" not in body
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in body

    async def test_reading_does_not_reorder_log(self, client, beep_log):
        for text in ["a", "b", "c"]:
            await post_beep(client, text)
        await client.get("/")
        await client.get("/")
        assert [b.text for b in await beep_log.snapshot()] == ["a", "b", "c"]

    async def test_links_hashed_stylesheet(self, client):
        body = (await client.get("/")).text
        assert get_renderer().assets.url_for("style.css") in body

    async def test_footer_links(self, client):
        body = (await client.get("/")).text
        assert "https://fastapi.tiangolo.com/" in body


class TestStaticFiles:
    async def test_serves_hashed_file(self, client):
        url = get_renderer().assets.url_for("style.css")
        resp = await client.get(url)

        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/css")
        assert "expires" in resp.headers
        assert resp.headers["expires"].endswith(" GMT")
        assert resp.content == (STATIC_DIR / "style.css").read_bytes()

    async def test_unhashed_name_not_found(self, client):
        resp = await client.get("/static/style.css")
        assert resp.status_code == 404
        assert NOT_FOUND_MESSAGE in resp.text

    async def test_unknown_file_not_found(self, client):
        resp = await client.get("/static/nope-00000000.js")
        assert resp.status_code == 404
        assert NOT_FOUND_MESSAGE in resp.text


class TestErrorPages:
    async def test_unknown_route(self, client):
        resp = await client.get("/no/such/page")
        assert resp.status_code == 404
        assert resp.headers["content-type"].startswith("text/html")
        assert NOT_FOUND_MESSAGE in resp.text
        assert "404 Not Found" in resp.text

    async def test_wrong_method_on_beeps_looks_like_unknown_route(self, client):
        resp = await client.get("/beeps")
        unknown = await client.get("/no/such/page")
        assert resp.status_code == 404
        assert resp.text == unknown.text

    async def test_unhandled_error_renders_500(self, settings):
        class BrokenLog:
            async def snapshot(self):
                raise RuntimeError("boom")

        app.dependency_overrides[get_beep_log] = lambda: BrokenLog()
        app.dependency_overrides[get_settings] = lambda: settings
        try:
            async with AsyncClient(
                transport=ASGITransport(app=app, raise_app_exceptions=False),
                base_url="http://test",
            ) as client:
                resp = await client.get("/")
        finally:
            app.dependency_overrides.clear()

        assert resp.status_code == 500
        assert SERVER_ERROR_MESSAGE in resp.text
        assert "boom" not in resp.text
