"""
Tests for the static asset service as wired into the gateway.
Run with: pytest oran_gateway/test_assets.py -v
"""

import pytest
from fastapi.testclient import TestClient

from oran_gateway import config
from oran_gateway.assets import StaticAssetService
from oran_gateway.bindings import Env, get_env
from oran_gateway.main import app

client = TestClient(app)


class NoAI:
    async def run(self, model, inputs, *, return_raw_response=False):
        raise AssertionError("asset requests must not reach the model")


@pytest.fixture
def site(tmp_path):
    (tmp_path / "index.html").write_text("<h1>classifier</h1>")
    (tmp_path / "js").mkdir()
    (tmp_path / "js" / "chat.js").write_text("console.log('hi')")
    return tmp_path


@pytest.fixture
def serve(site):
    def _install(spa_fallback=False, directory=None):
        assets = StaticAssetService(directory or site, spa_fallback=spa_fallback)
        app.dependency_overrides[get_env] = lambda: Env(ai=NoAI(), assets=assets)

    yield _install
    app.dependency_overrides.clear()


def test_root_serves_index(serve):
    serve()
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.text == "<h1>classifier</h1>"
    assert resp.headers["access-control-allow-origin"] == "*"


def test_nested_file(serve):
    serve()
    resp = client.get("/js/chat.js")
    assert resp.status_code == 200
    assert "console.log" in resp.text
    assert resp.headers["access-control-allow-methods"] == "GET, POST, PUT, DELETE, OPTIONS"


def test_missing_file_is_404(serve):
    serve()
    resp = client.get("/nope.png")
    assert resp.status_code == 404
    assert resp.text == "Not found"
    assert resp.headers["access-control-allow-origin"] == "*"


def test_spa_fallback_serves_index(serve):
    serve(spa_fallback=True)
    resp = client.get("/some/client/route")
    assert resp.status_code == 200
    assert resp.text == "<h1>classifier</h1>"


def test_post_to_asset_is_405(serve):
    serve()
    resp = client.post("/index.html")
    assert resp.status_code == 405
    assert resp.text == "Method not allowed"


def test_path_traversal_is_404(serve, site):
    (site.parent / "secret.txt").write_text("top secret")
    serve()
    resp = client.get("/../secret.txt")
    assert resp.status_code == 404


def test_missing_directory_is_404(serve, tmp_path):
    serve(directory=tmp_path / "does-not-exist")
    assert client.get("/").status_code == 404


def test_packaged_frontend_is_default(serve):
    assert config.ASSETS_DIR == config.PACKAGE_DIR / "public"
    serve(directory=config.PACKAGE_DIR / "public")
    resp = client.get("/")
    assert resp.status_code == 200
    assert "O-RAN Traffic Classifier" in resp.text
