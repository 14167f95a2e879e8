"""Pytest fixtures: capturing logger and an in-process JSON-RPC endpoint."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

import jsonrpc_post.logging_sink as log_module
from jsonrpc_post.transport import HttpxTransport

ENDPOINT = "https://rpc.example.test/backend/jsonrpc/Article/12565484"


class CaptureLogger:
    """Stores every message; has debug/info/warning/error like a stdlib logger."""

    def __init__(self):
        self.records: list[tuple[str, str]] = []

    @property
    def logs(self) -> list[str]:
        return [message for _, message in self.records]

    def debug(self, message: str) -> None:
        self.records.append(("debug", message))

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def warning(self, message: str) -> None:
        self.records.append(("warning", message))

    def error(self, message: str) -> None:
        self.records.append(("error", message))


class FakeEndpoint:
    """Answers JSON-RPC posts through httpx.MockTransport and records them."""

    def __init__(self, responder: Callable[[dict[str, Any]], Any]):
        self.responder = responder
        self.requests: list[httpx.Request] = []
        self.transport = HttpxTransport(transport=httpx.MockTransport(self._handle))

    @property
    def bodies(self) -> list[dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]

    async def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.responder(json.loads(request.content))
        if hasattr(reply, "__await__"):
            reply = await reply
        if isinstance(reply, httpx.Response):
            return reply
        if isinstance(reply, str):
            return httpx.Response(200, text=reply)
        return httpx.Response(200, json=reply)


def result_reply(result: Any) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": "jsonrpc", "result": result}


def error_reply(code: int, message: str, data: Any = None) -> dict[str, Any]:
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "id": "jsonrpc", "error": error}


@pytest.fixture
def capture_logger() -> CaptureLogger:
    return CaptureLogger()


@pytest.fixture
def make_endpoint() -> Callable[[Callable[[dict[str, Any]], Any]], FakeEndpoint]:
    return FakeEndpoint


@pytest.fixture(autouse=True)
def _restore_default_logger():
    saved = log_module.default_logger()
    yield
    log_module.set_default_logger(saved)
