import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.errors import (
    DecodeError,
    MissingFieldError,
    NotFoundError,
    PostsError,
    UnknownVariantError,
    ValidationError,
    error_body,
    log_and_sanitize_error,
    register_error_handlers,
)


def test_error_hierarchy_status_codes():
    assert NotFoundError("x").status_code == 404
    assert ValidationError("x").status_code == 500
    assert DecodeError("x").status_code == 400
    assert isinstance(UnknownVariantError("bogus"), DecodeError)
    assert isinstance(MissingFieldError("title"), DecodeError)
    assert all(
        issubclass(cls, PostsError)
        for cls in (NotFoundError, ValidationError, DecodeError)
    )


def test_error_messages_name_the_problem():
    assert str(UnknownVariantError("bogus", "contents.2")) == (
        "Unknown content block type 'bogus' at contents.2"
    )
    assert str(MissingFieldError("contents.0.tip.level")) == (
        "Missing required field 'contents.0.tip.level'"
    )


def test_error_body_shape():
    body = error_body(404, "Not Found", "gone", "/x")

    assert set(body) == {"timestamp", "status", "error", "message", "path"}
    assert body["status"] == 404
    assert "validationErrors" not in body

    body = error_body(422, "Validation Failed", "bad", "/x", {"query.page": "bad"})
    assert body["validationErrors"] == {"query.page": "bad"}


def test_log_and_sanitize_error_logs_and_returns_id(caplog):
    with caplog.at_level(logging.ERROR, logger="app.errors"):
        message, error_id = log_and_sanitize_error(RuntimeError("secret"), "Load post")

    assert len(error_id) == 8
    assert message == (
        f"Load post failed. Please try again later. (Error ID: {error_id})"
    )
    assert "secret" not in message
    assert any(
        error_id in rec.message and "secret" in rec.message for rec in caplog.records
    )


def test_log_and_sanitize_error_uses_custom_message():
    message, error_id = log_and_sanitize_error(ValueError("x"), "ctx", "Try later")

    assert message == f"Try later (Error ID: {error_id})"


def make_app():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    @app.get("/missing")
    def missing():
        raise NotFoundError("p1")

    return app


def test_unhandled_exception_returns_sanitized_500():
    client = TestClient(make_app(), raise_server_exceptions=False)

    res = client.get("/boom")

    assert res.status_code == 500
    body = res.json()
    assert body["error"] == "Internal Server Error"
    assert "kaboom" not in body["message"]
    assert "Error ID" in body["message"]


def test_posts_error_handler():
    client = TestClient(make_app())

    res = client.get("/missing")

    assert res.status_code == 404
    assert res.json()["message"] == "Post 'p1' not found"


def test_unknown_route_uses_structured_body():
    client = TestClient(make_app())

    res = client.get("/nowhere")

    assert res.status_code == 404
    body = res.json()
    assert body["error"] == "Not Found"
    assert body["path"] == "/nowhere"
