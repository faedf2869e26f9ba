import logging

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.api.v1.dependencies import get_todo_repository
from app.core.errors import (
    ConflictError,
    FileReadError,
    InternalError,
    InvalidPayloadError,
    InvariantViolationError,
    NotFoundError,
    TaskFailureError,
    error_to_status,
)
from app.main import app


class TestErrorToStatus:
    def test_each_kind_maps_to_its_status(self):
        assert error_to_status(NotFoundError("nf")) == (404, "nf")
        assert error_to_status(InvalidPayloadError("bad")) == (400, "bad")
        assert error_to_status(ConflictError("dup")) == (409, "dup")
        assert error_to_status(InternalError("db")) == (500, "db")
        assert error_to_status(InvariantViolationError("2 rows")) == (500, "2 rows")
        assert error_to_status(FileReadError("io")) == (500, "io")
        assert error_to_status(TaskFailureError("task")) == (500, "task")

    def test_unknown_exception_hides_details(self):
        assert error_to_status(RuntimeError("secret")) == (500, "Internal server error")


class BrokenRepository:
    def __getattr__(self, name):
        def _fail(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("could not connect to server"))

        return _fail


class TestStoreUnavailable:
    def test_store_error_becomes_500_and_server_keeps_serving(self, client: TestClient):
        app.dependency_overrides[get_todo_repository] = lambda: BrokenRepository()

        res = client.get("/todos/5")
        assert res.status_code == 500
        assert res.json() == {"message": "Failed to fetch the todo with id 5"}

        res = client.put("/todos/5", json={"title": "x", "done": False})
        assert res.status_code == 500
        assert res.json() == {"message": "Failed to update todo 5"}

        del app.dependency_overrides[get_todo_repository]
        assert client.get("/todos/").status_code == 200


class TestUnhandledError:
    def test_unexpected_exception_is_500_message(self, client: TestClient):
        class Exploding:
            def list(self):
                raise RuntimeError("boom")

        app.dependency_overrides[get_todo_repository] = lambda: Exploding()
        # l'ASGI ServerErrorMiddleware relance l'exception après la réponse
        raw_client = TestClient(app, raise_server_exceptions=False)
        res = raw_client.get("/todos/")
        assert res.status_code == 500
        assert res.json() == {"message": "Internal server error"}


class TestErrorLogging:
    def test_store_failure_is_logged_once(self, client: TestClient, caplog):
        app.dependency_overrides[get_todo_repository] = lambda: BrokenRepository()

        with caplog.at_level(logging.ERROR):
            res = client.get("/todos/5")
        assert res.status_code == 500

        errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert len(errors) == 1
        assert errors[0].exc_info is not None
