"""Tests for the early rejection of oversized uploads."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from filegate.interfaces.api.middleware import UploadSizeLimitMiddleware

TOO_LARGE = {"success": False, "message": "File too large. Maximum size is 1KB."}


def _app(max_bytes: int) -> tuple[FastAPI, list]:
    app = FastAPI()
    app.add_middleware(UploadSizeLimitMiddleware, upload_path="/upload", max_bytes=max_bytes)
    handled = []

    @app.post("/upload")
    async def upload(request: Request) -> dict:
        body = await request.body()
        handled.append(len(body))
        return {"success": True}

    @app.post("/other")
    async def other(request: Request) -> dict:
        await request.body()
        return {"success": True}

    return app, handled


def test_oversized_upload_is_rejected_before_the_handler() -> None:
    app, handled = _app(max_bytes=1024)
    client = TestClient(app)

    response = client.post("/upload", content=b"x" * (128 * 1024))

    assert response.status_code == 400
    assert response.json() == TOO_LARGE
    assert handled == []


def test_chunked_upload_without_content_length_is_cut_off() -> None:
    app, handled = _app(max_bytes=1024)
    client = TestClient(app)
    chunks = iter([b"x" * (64 * 1024), b"x" * (64 * 1024)])

    response = client.post("/upload", content=chunks)

    assert response.status_code == 400
    assert response.json() == TOO_LARGE
    assert handled == []


def test_small_uploads_and_other_paths_pass_through() -> None:
    app, handled = _app(max_bytes=1024)
    client = TestClient(app)

    assert client.post("/upload", content=b"x" * 1024).status_code == 200
    assert client.post("/upload", content=iter([b"x" * 512, b"x" * 512])).status_code == 200
    assert client.post("/other", content=b"x" * (128 * 1024)).status_code == 200
    assert handled == [1024, 1024]
