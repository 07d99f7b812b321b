"""Tests for API endpoints."""

from __future__ import annotations

import io
import zipfile

import pytest
from fastapi.testclient import TestClient

from svgrecolor.config import Settings
from svgrecolor.dependencies import get_settings, get_store
from svgrecolor.main import app
from svgrecolor.storage import UploadStore
from tests.conftest import MIXED_COLORS_SVG, RED_RECT_DATA_URI, RED_RECT_SVG


client = TestClient(app)


@pytest.fixture(autouse=True)
def store(tmp_path):
    upload_store = UploadStore(tmp_path / "uploads")
    app.dependency_overrides[get_store] = lambda: upload_store
    yield upload_store
    app.dependency_overrides.clear()


def _svg_file(name: str, text: str, field: str = "svgFile"):
    return (field, (name, text.encode("utf-8"), "image/svg+xml"))


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_convert_text_with_crop():
    response = client.post("/api/convert", json={"svg": RED_RECT_SVG, "crop": True})
    assert response.status_code == 200
    data = response.json()
    assert 'fill="currentColor"' in data["svg"]
    assert data["colors_replaced"] == 1
    assert data["bbox"]["viewbox"] == "10 10 30 20"
    assert data["envelope"] is False


def test_convert_text_envelope():
    response = client.post("/api/convert", json={"svg": RED_RECT_DATA_URI})
    data = response.json()
    assert data["envelope"] is True
    assert data["svg"].startswith("data:image/svg+xml;charset=utf-8;base64,")
    assert data["bbox"] is None


def test_convert_text_invalid_markup():
    response = client.post("/api/convert", json={"svg": "<svg><g></svg>"})
    assert response.status_code == 422
    assert "request body" in response.json()["detail"]


def test_single_upload_and_download():
    response = client.post("/api/convert/single", files=[_svg_file("icon.svg", RED_RECT_SVG)])
    assert response.status_code == 200
    data = response.json()
    assert data["originalName"] == "icon.svg"
    assert data["convertedPath"].startswith("converted-")

    download = client.get(f"/api/download/{data['convertedPath']}")
    assert download.status_code == 200
    assert download.headers["content-type"].startswith("image/svg+xml")
    assert "attachment" in download.headers["content-disposition"]
    assert 'fill="currentColor"' in download.text


def test_single_upload_with_crop():
    response = client.post(
        "/api/convert/single",
        files=[_svg_file("icon.svg", RED_RECT_SVG)],
        data={"crop": "true"},
    )
    converted = response.json()["convertedPath"]
    assert 'viewBox="10 10 30 20"' in client.get(f"/api/download/{converted}").text


def test_single_upload_rejects_other_types():
    response = client.post("/api/convert/single", files=[("svgFile", ("icon.png", b"\x89PNG", "image/png"))])
    assert response.status_code == 400


def test_single_upload_requires_file():
    response = client.post("/api/convert/single")
    assert response.status_code == 400


def test_single_upload_malformed_svg(store):
    response = client.post("/api/convert/single", files=[_svg_file("broken.svg", "<svg>")])
    assert response.status_code == 422
    assert list(store.root.iterdir()) == []


def test_single_upload_too_large():
    app.dependency_overrides[get_settings] = lambda: Settings(max_upload_bytes=10)
    response = client.post("/api/convert/single", files=[_svg_file("icon.svg", RED_RECT_SVG)])
    assert response.status_code == 413


def test_multiple_reports_each_item():
    files = [
        _svg_file("a.svg", RED_RECT_SVG, "svgFiles"),
        _svg_file("broken.svg", "<svg>", "svgFiles"),
        _svg_file("b.svg", MIXED_COLORS_SVG, "svgFiles"),
    ]
    response = client.post("/api/convert/multiple", files=files)
    assert response.status_code == 200
    results = response.json()["results"]
    assert [r["originalName"] for r in results] == ["a.svg", "broken.svg", "b.svg"]
    assert results[0]["convertedPath"].startswith("converted-")
    assert results[1]["convertedPath"] is None
    assert "broken.svg" in results[1]["error"]
    assert results[2]["error"] is None


def test_multiple_batch_limit():
    app.dependency_overrides[get_settings] = lambda: Settings(max_batch_files=1)
    files = [_svg_file("a.svg", RED_RECT_SVG, "svgFiles"), _svg_file("b.svg", RED_RECT_SVG, "svgFiles")]
    response = client.post("/api/convert/multiple", files=files)
    assert response.status_code == 400


def test_download_missing_file():
    assert client.get("/api/download/converted-nope.svg").status_code == 404


def test_download_zip():
    converted = client.post("/api/convert/single", files=[_svg_file("icon.svg", RED_RECT_SVG)]).json()[
        "convertedPath"
    ]
    response = client.get("/api/download-zip", params={"files": converted, converted: "icon.svg"})
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/zip"
    with zipfile.ZipFile(io.BytesIO(response.content)) as archive:
        assert archive.namelist() == ["icon.svg"]


def test_download_zip_requires_files():
    assert client.get("/api/download-zip").status_code == 400
    assert client.get("/api/download-zip", params={"files": "missing.svg"}).status_code == 400


def test_cleanup(store):
    converted = client.post("/api/convert/single", files=[_svg_file("icon.svg", RED_RECT_SVG)]).json()[
        "convertedPath"
    ]
    response = client.post("/api/cleanup", json={"files": [converted]})
    assert response.status_code == 200
    data = response.json()
    assert len(data["deleted"]) == 2
    assert data["failed"] == []
    assert list(store.root.iterdir()) == []
    assert client.get(f"/api/download/{converted}").status_code == 404


def test_cleanup_requires_files():
    assert client.post("/api/cleanup", json={"files": []}).status_code == 400
