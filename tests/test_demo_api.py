import asyncio
import threading
import time
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.features.demo import services
from app.main import app


class TestWorldAndConfig:
    def test_world(self, client: TestClient):
        res = client.get("/world")
        assert res.status_code == 200
        assert res.text == "Hello, world!"
        assert res.headers["content-type"].startswith("text/plain")

    def test_config_echo(self, client: TestClient):
        res = client.get("/config")
        assert res.status_code == 200
        assert res.text == "Hello, Ferris! You are 8 years old."


class TestDelay:
    def test_delay_zero(self, client: TestClient):
        res = client.get("/delay/0")
        assert res.status_code == 200
        assert res.text == "Waited for 0 seconds"

    def test_negative_delay_is_bad_request(self, client: TestClient):
        res = client.get("/delay/-1")
        assert res.status_code == 400

    @pytest.mark.anyio
    async def test_delay_does_not_block_world(self):
        finished = []
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:

            async def call(path: str) -> httpx.Response:
                res = await ac.get(path)
                finished.append(path)
                return res

            start = time.monotonic()
            delayed, world = await asyncio.gather(call("/delay/2"), call("/world"))
            elapsed = time.monotonic() - start

        assert finished == ["/world", "/delay/2"]
        assert world.text == "Hello, world!"
        assert delayed.text == "Waited for 2 seconds"
        assert 1.9 <= elapsed < 5


class TestBlockingTask:
    def test_returns_raw_bytes(self, client: TestClient, test_settings: Settings):
        Path(test_settings.DATA_FILE).write_bytes(b"\x00hello\xff")

        res = client.get("/blocking_task")
        assert res.status_code == 200
        assert res.content == b"\x00hello\xff"
        assert res.headers["content-type"] == "application/octet-stream"

    def test_missing_file_is_server_error_and_server_keeps_serving(self, client: TestClient):
        res = client.get("/blocking_task")
        assert res.status_code == 500
        assert "could not be read" in res.json()["message"]

        assert client.get("/world").status_code == 200

    def test_worker_failure_is_distinct_from_io_error(self, client: TestClient, monkeypatch):
        def explode(path: str) -> bytes:
            raise RuntimeError("worker crashed")

        monkeypatch.setattr(services, "read_file_bytes", explode)

        res = client.get("/blocking_task")
        assert res.status_code == 500
        message = res.json()["message"]
        assert "did not complete" in message
        assert "could not be read" not in message

    @pytest.mark.anyio
    async def test_read_runs_off_the_event_loop(self, tmp_path: Path):
        target = tmp_path / "data.txt"
        target.write_bytes(b"abc")
        seen = {}

        def reader(path: str) -> bytes:
            seen["thread"] = threading.current_thread()
            return Path(path).read_bytes()

        assert await services.read_blocking_file(str(target), reader=reader) == b"abc"
        assert seen["thread"] is not threading.main_thread()
