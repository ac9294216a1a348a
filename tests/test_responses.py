import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from fastapi_hal import (
    ErrorHandlerMiddleware,
    HalRenderer,
    HalResource,
    hal_response,
    install_problem_handlers,
)


@pytest.fixture
def app(hal_options):
    renderer = HalRenderer({**hal_options, "build_link_header": True})
    app = FastAPI()
    app.add_middleware(ErrorHandlerMiddleware)
    install_problem_handlers(app)

    @app.get("/fizzes/{fizz_id}")
    def get_fizz(fizz_id: str):
        if fizz_id == "missing":
            raise HTTPException(status_code=404, detail="No such fizz")
        return hal_response(renderer, HalResource("fizz", {"FID": fizz_id, "fizzName": "manchuck"}))

    @app.get("/buzzes/{buzz_id}")
    def get_buzz(buzz_id: int):
        return hal_response(renderer, HalResource("buzz", {"BID": buzz_id}))

    @app.get("/unconfigured")
    def get_unconfigured():
        return hal_response(renderer, HalResource("manchuck", {}))

    @app.get("/broken")
    def get_broken():
        raise RuntimeError("boom")

    return app


@pytest.fixture
def client(app):
    return TestClient(app)


def test_hal_response(client):
    response = client.get("/fizzes/42")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/hal+json")
    assert response.headers["link"] == '<https://api.example.com/fizzes/42>; rel="self"'
    assert response.json() == {
        "fizz_id": "42",
        "name": "manchuck",
        "_links": {"self": {"href": "https://api.example.com/fizzes/42"}},
    }


def test_http_exception_becomes_problem(client):
    response = client.get("/fizzes/missing")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("application/problem+json")
    assert response.json()["detail"] == "No such fizz"


def test_hal_error_becomes_problem(client):
    response = client.get("/unconfigured")

    assert response.status_code == 415
    assert response.json() == {
        "type": "http://docs.nterprise.com/docs/api/errors/UnsupportedEntityType",
        "detail": "Invalid resource type: manchuck",
        "status": 415,
        "title": "Unsupported Entity Type",
    }


def test_unhandled_error_becomes_problem(client):
    response = client.get("/broken")

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/problem+json")
    assert response.json()["title"] == "Internal Server Error"
    assert response.json()["detail"] == "boom"


def test_request_validation_error_becomes_problem(client):
    response = client.get("/buzzes/abc")

    assert response.status_code == 422
    assert response.headers["content-type"].startswith("application/problem+json")
    body = response.json()
    assert body["type"] == "http://docs.nterprise.com/docs/api/errors/RequestValidationFailed"
    assert body["title"] == "Request Validation Failed"
    assert body["status"] == 422
    assert body["validation_messages"][0]["loc"] == ["path", "buzz_id"]
