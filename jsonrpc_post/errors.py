"""
Exception hierarchy for jsonrpc_post.

Provides:
- Standard JSON-RPC 2.0 error codes
- RpcError, raised by synchronous calls and handed to errbacks by asynchronous ones
- SyncContextError for synchronous calls made outside run_sync()
- TransportError raised by HTTP transports
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Error codes defined by the JSON-RPC 2.0 specification."""
    # Invalid JSON was received. Also used for local parse and transport failures.
    INVALID_JSON = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


INVALID_JSON = ErrorCode.INVALID_JSON
INVALID_REQUEST = ErrorCode.INVALID_REQUEST
METHOD_NOT_FOUND = ErrorCode.METHOD_NOT_FOUND
INVALID_PARAMS = ErrorCode.INVALID_PARAMS
INTERNAL_ERROR = ErrorCode.INTERNAL_ERROR


class RpcError(Exception):
    """A JSON-RPC error object, either returned by the server or built locally.

    Parse and transport failures are reported with the same type so callers
    handle a single error shape.
    """

    def __init__(self, message: str, code: int | None = None, data: Any = None):
        super().__init__(message)
        self._message = message
        self._code = None if code is None else int(code)
        self._data = data

    @property
    def message(self) -> str:
        return self._message

    @property
    def code(self) -> int | None:
        return self._code

    @property
    def data(self) -> Any:
        return self._data

    @classmethod
    def from_payload(cls, payload: Any) -> RpcError:
        """Build from the ``error`` member of a response (a dict or a symbolic Record)."""
        if isinstance(payload, dict):
            message = payload.get("message")
            code = payload.get("code")
            return cls(
                "" if message is None else str(message),
                code if isinstance(code, int) and not isinstance(code, bool) else None,
                payload.get("data"),
            )
        return cls(str(payload))

    def to_dict(self) -> dict[str, Any]:
        return {"code": self._code, "message": self._message, "data": self._data}

    def to_diagnostic_string(self) -> str:
        return f"{type(self).__name__}: {self._message}, code: {self._code!r}, data: {self._data!r}"

    def __repr__(self) -> str:
        return self.to_diagnostic_string()

    def __str__(self) -> str:
        return self._message


class SyncContextError(RuntimeError):
    """Synchronous call attempted outside a run_sync() worker."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "Synchronous JSON-RPC calls must run inside run_sync(); "
            "use call_async() or await the PendingCall on the event loop instead."
        )


class TransportError(Exception):
    """The HTTP exchange itself failed (network, DNS, malformed URL)."""
