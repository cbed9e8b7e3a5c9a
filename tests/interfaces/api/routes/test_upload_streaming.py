"""The upload route reads the body as a stream and stops at the first rejection."""

from __future__ import annotations

import io

import anyio
import httpx

from main import create_app

FILE_SIZE = 3 * 1024 * 1024


def _counting(app, received: list[int]):
    async def wrapper(scope, receive, send):
        async def counted_receive():
            message = await receive()
            if message["type"] == "http.request":
                received.append(len(message.get("body", b"")))
            return message

        await app(scope, counted_receive, send)

    return wrapper


def _post_upload(name: str, *, as_admin: bool) -> tuple[httpx.Response, int]:
    """Upload ``FILE_SIZE`` bytes as ``name`` and count the body bytes the app received."""

    received: list[int] = []
    transport = httpx.ASGITransport(app=_counting(create_app(), received))

    async def run() -> httpx.Response:
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            headers = {}
            category_id = "unknown"
            if as_admin:
                login = await client.post(
                    "/api/login", json={"username": "admin", "password": "admin123"}
                )
                headers["Authorization"] = f"Bearer {login.json()['token']}"
                categories = await client.get("/api/admin/categories", headers=headers)
                category_id = categories.json()["categories"][0]["id"]
            received.clear()
            return await client.post(
                "/api/admin/upload",
                headers=headers,
                data={"categoryId": category_id},
                files={"file": (name, io.BytesIO(b"x" * FILE_SIZE), "application/octet-stream")},
            )

    response = anyio.run(run)
    return response, sum(received)


def test_upload_without_token_is_refused_before_the_body_is_read(storage) -> None:
    response, received = _post_upload("notes.txt", as_admin=False)

    assert response.status_code == 401
    assert received < FILE_SIZE
    assert list(storage.root.iterdir()) == []


def test_unsupported_type_is_refused_before_the_body_is_read(storage) -> None:
    response, received = _post_upload("notes.txt", as_admin=True)

    assert response.status_code == 400
    assert response.json()["message"] == (
        "Invalid file type. Only .zip, .rar, .exe, .dll, .data, .7z files are allowed."
    )
    assert received < FILE_SIZE
    assert list(storage.root.iterdir()) == []


def test_allowed_upload_is_streamed_to_storage(storage) -> None:
    response, received = _post_upload("pack.zip", as_admin=True)

    assert response.status_code == 200
    assert response.json()["file"]["sizeBytes"] == FILE_SIZE
    assert received > FILE_SIZE
    stored = list(storage.root.iterdir())
    assert len(stored) == 1
    assert stored[0].stat().st_size == FILE_SIZE
