"""JSON-RPC 2.0 envelopes and response decoding."""

from __future__ import annotations

import json
from typing import Any

from jsonrpc_post.config import DecodeKeys

JSONRPC_VERSION = "2.0"
REQUEST_ID = "jsonrpc"

Params = list[Any] | dict[str, Any]


def normalize_params(params: Any) -> Params:
    if params is None:
        return []
    if isinstance(params, dict):
        return params
    if isinstance(params, (list, tuple)):
        return list(params)
    raise TypeError(f"params must be a list, tuple or dict, not {type(params).__name__}")


def encode(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def encode_request(method: str, params: Any) -> str:
    return encode(
        {
            "method": method,
            "params": normalize_params(params),
            "id": REQUEST_ID,
            "jsonrpc": JSONRPC_VERSION,
        }
    )


def encode_notification(method: str, params: Any) -> str:
    return encode(
        {
            "method": method,
            "params": normalize_params(params),
            "jsonrpc": JSONRPC_VERSION,
        }
    )


class Record(dict):
    """A decoded JSON object whose members are also readable as attributes.

    Still a ``dict``, so ``in``, ``.get``, iteration and ``json.dumps`` keep
    working. Members whose names clash with dict methods (``items``, ``keys``)
    are only reachable by subscription.
    """

    __slots__ = ()

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __repr__(self) -> str:
        return f"Record({dict.__repr__(self)})"


def decode(text: str, decode_keys: DecodeKeys = DecodeKeys.SYMBOLIC) -> Any:
    """Parse ``text``; objects become Records under the symbolic policy.

    Raises ValueError (json.JSONDecodeError, or an integer literal too long to
    convert) and RecursionError on pathologically nested input.
    """
    if DecodeKeys(decode_keys) is DecodeKeys.SYMBOLIC:
        return json.loads(text, object_hook=Record)
    return json.loads(text)


def is_object(value: Any) -> bool:
    return isinstance(value, dict)
