"""JSON-RPC 2.0 client over HTTP POST with asynchronous and synchronous calls."""

from loguru import logger as _logger

from jsonrpc_post.client import JsonRpcClient
from jsonrpc_post.codec import Record
from jsonrpc_post.config import CallMode, ClientOptions, DecodeKeys
from jsonrpc_post.dispatch import CallDispatcher, CallTarget, in_sync_context, run_sync
from jsonrpc_post.errors import (
    INTERNAL_ERROR,
    INVALID_JSON,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    ErrorCode,
    RpcError,
    SyncContextError,
    TransportError,
)
from jsonrpc_post.logging_sink import default_logger, log, set_default_logger
from jsonrpc_post.outcome import Outcome
from jsonrpc_post.pending import PendingCall
from jsonrpc_post.transport import HttpResponse, HttpTransport, HttpxTransport

__version__ = "0.1.0"

# Library records stay silent until the application opts in.
_logger.disable("jsonrpc_post")

__all__ = [
    "CallDispatcher",
    "CallMode",
    "CallTarget",
    "ClientOptions",
    "DecodeKeys",
    "ErrorCode",
    "HttpResponse",
    "HttpTransport",
    "HttpxTransport",
    "INTERNAL_ERROR",
    "INVALID_JSON",
    "INVALID_PARAMS",
    "INVALID_REQUEST",
    "JsonRpcClient",
    "METHOD_NOT_FOUND",
    "Outcome",
    "PendingCall",
    "Record",
    "RpcError",
    "SyncContextError",
    "TransportError",
    "default_logger",
    "in_sync_context",
    "log",
    "run_sync",
    "set_default_logger",
]
