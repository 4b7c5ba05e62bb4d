import logging

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient

from scdemo_api.app.core.text import remove_unrecognized_chars
from scdemo_api.app.schemas.final import FinalClass, FinalRequest
from scdemo_api.app.services.arithmetic_service import ArithmeticService, NumberProvider
from scdemo_api.app.services.final_service import FinalService
from scdemo_api.app.services.shape_service import Circle, Rectangle, Triangle


def test_shapes():
    assert Rectangle(1.0, 2.0).area() == 2.0
    assert Triangle(1.0, 2.0).area() == 1.0
    assert Circle(1.0).area() == pytest.approx(3.14159, rel=1e-4)
    assert Circle(1.0).name == "Circle"


def test_shapes_endpoint(client):
    payload = client.get("/api/shapes").json()["payload"]

    assert [shape["name"] for shape in payload] == ["Circle", "Rectangle", "Triangle"]
    assert payload[1]["area"] == 2.0


def test_final_defaults():
    assert FinalRequest().to_final_class() == FinalClass(name="default", age=999)


def test_final_service():
    response = FinalService.call(FinalClass(name="yun", age=30))
    assert (response.name, response.age) == ("yun", 30)


def test_final_endpoint(client):
    assert client.post("/final/test", json={"name": "yun", "age": 30}).json() == {
        "payload": {"name": "yun", "age": 30}
    }
    assert client.post("/final/test", json={}).json() == {"payload": {"name": "default", "age": 999}}


def test_remove_unrecognized_chars():
    assert remove_unrecognized_chars("report_한글😀.txt") == "report_한글.txt"
    assert remove_unrecognized_chars("abc123!@#😀:😀:") == "abc123!@#::"
    assert remove_unrecognized_chars("") == ""


def test_upload(client):
    files = [
        ("data", ("a😀.txt", b"hello", "text/plain")),
        ("data", ("b.bin", b"\x00\x01", "application/octet-stream")),
    ]

    response = client.post("/api/upload", files=files)

    assert response.status_code == 200
    assert response.text == ""


def test_upload_requires_files(client):
    assert client.post("/api/upload").status_code == 422


def test_arithmetic():
    assert ArithmeticService.add(2, 3) == 5
    assert ArithmeticService.subtract(2, 3) == -1
    assert NumberProvider().get_number() == 1
    with pytest.raises(RuntimeError, match="runtime exception"):
        NumberProvider().raise_error()


def test_request_id_header(client):
    assert client.get("/api/shapes", headers={"requestId": "abc-123"}).headers["requestId"] == "abc-123"
    assert client.get("/api/shapes").headers["requestId"]


def test_unhandled_error_returns_500(fake_redis, database, caplog):
    from scdemo_api.app.main import create_app

    app = create_app()
    router = APIRouter()

    @router.get("/boom")
    async def boom():
        NumberProvider().raise_error()

    app.include_router(router)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/boom")

    assert response.status_code == 500
    errors = [r for r in caplog.records if r.name == "scdemo_api.app.core.middleware" and r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].exc_info[0] is RuntimeError
    assert response.json() == {
        "errorCode": "INTERNAL_SERVER_ERROR",
        "errorMessage": "This is a runtime exception",
    }
