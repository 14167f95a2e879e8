"""Client configuration using Pydantic."""

from __future__ import annotations

from enum import Enum
from typing import Any
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, field_validator


class CallMode(str, Enum):
    """How JsonRpcClient.call() surfaces results."""
    ASYNC = "async"  # returns a PendingCall
    SYNC = "sync"  # blocks the run_sync() worker and returns the value


class DecodeKeys(str, Enum):
    """How object keys of decoded responses are exposed."""
    SYMBOLIC = "symbolic"  # attribute records: result.uid
    LITERAL = "literal"  # plain dicts: result["uid"]


def validate_endpoint(value: Any) -> str:
    """Return ``value`` as an absolute http(s) URI string or raise ValueError."""
    text = str(value).strip()
    parts = urlsplit(text)
    if parts.scheme.lower() not in {"http", "https"}:
        raise ValueError(f"endpoint must be an http(s) URI: {text!r}")
    if not parts.netloc:
        raise ValueError(f"endpoint has no host: {text!r}")
    return text


class ClientOptions(BaseModel):
    """Connection settings of one JsonRpcClient. Assignments are validated."""

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    endpoint: str
    call_mode: CallMode = CallMode.ASYNC
    decode_keys: DecodeKeys = DecodeKeys.SYMBOLIC
    logger: Any = None  # any object with debug/info/warn/error methods

    @field_validator("endpoint", mode="before")
    @classmethod
    def _check_endpoint(cls, value: Any) -> str:
        return validate_endpoint(value)
