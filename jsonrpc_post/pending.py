"""One in-flight JSON-RPC request and its single-assignment outcome."""

from __future__ import annotations

import asyncio
from typing import Any, Callable

from loguru import logger

from jsonrpc_post import codec
from jsonrpc_post.config import DecodeKeys
from jsonrpc_post.errors import ErrorCode, RpcError, TransportError
from jsonrpc_post.logging_sink import log
from jsonrpc_post.outcome import Outcome
from jsonrpc_post.transport import HttpTransport

Observer = Callable[[Outcome], Any]


class PendingCall:
    """A JSON-RPC request whose HTTP exchange starts on construction.

    Resolves exactly once, to success with the ``result`` member or to failure
    with an RpcError. Observers added before resolution fire once when it
    happens; observers added afterwards fire immediately. Must be created on
    the event loop thread.
    """

    def __init__(
        self,
        *,
        endpoint: str,
        method: str,
        params: Any,
        transport: HttpTransport,
        decode_keys: DecodeKeys = DecodeKeys.SYMBOLIC,
        logger: Any = None,
    ):
        self.endpoint = endpoint
        self.method = method
        self.params = codec.normalize_params(params)
        self.decode_keys = DecodeKeys(decode_keys)
        self.logger = logger
        self._transport = transport
        self._outcome: Outcome | None = None
        self._observers: list[Observer] = []

        self.body = codec.encode_request(method, self.params)
        self._task = asyncio.get_running_loop().create_task(self._exchange())
        log("debug", f"NEW REQUEST: {endpoint} --> {self.body}", logger)

    def __repr__(self) -> str:
        state = "pending" if self._outcome is None else ("succeeded" if self._outcome.ok else "failed")
        return f"<PendingCall {self.method} {self.endpoint} {state}>"

    @property
    def outcome(self) -> Outcome | None:
        return self._outcome

    def done(self) -> bool:
        return self._outcome is not None

    def add_observer(self, observer: Observer) -> PendingCall:
        """Call ``observer(outcome)`` once the call resolves (immediately if it has)."""
        if self._outcome is not None:
            observer(self._outcome)
        else:
            self._observers.append(observer)
        return self

    def add_callback(self, callback: Callable[[Any], Any]) -> PendingCall:
        def on_outcome(outcome: Outcome) -> None:
            if outcome.ok:
                callback(outcome.value)

        return self.add_observer(on_outcome)

    def add_errback(self, errback: Callable[[RpcError], Any]) -> PendingCall:
        def on_outcome(outcome: Outcome) -> None:
            if outcome.error is not None:
                errback(outcome.error)

        return self.add_observer(on_outcome)

    def __await__(self):
        future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()

        def settle(outcome: Outcome) -> None:
            if future.done():
                return
            if outcome.error is not None:
                future.set_exception(outcome.error)
            else:
                future.set_result(outcome.value)

        self.add_observer(settle)
        return future.__await__()

    def _resolve(self, outcome: Outcome) -> None:
        if self._outcome is not None:
            return
        self._outcome = outcome
        observers, self._observers = self._observers, []
        for observer in observers:
            try:
                observer(outcome)
            except Exception:
                logger.exception(f"Observer of {self.method} raised")

    async def _exchange(self) -> None:
        try:
            response = await self._transport.post(self.endpoint, self.body)
        except TransportError as exc:
            log("error", f"Error in http request: {exc}", self.logger)
            self._resolve(Outcome.failure(RpcError(str(exc), ErrorCode.INVALID_JSON)))
            return
        except Exception as exc:
            # Transports outside this package may leak their own errors.
            log("error", f"Unexpected failure in http request: {exc!r}", self.logger)
            self._resolve(Outcome.failure(RpcError(str(exc) or type(exc).__name__, ErrorCode.INVALID_JSON)))
            return
        self._resolve(self._parse(response.text))

    def _parse(self, text: str) -> Outcome:
        try:
            resp = codec.decode(text, self.decode_keys)
        except (ValueError, RecursionError) as exc:
            log("error", f"Got exception during parsing of {text!r}: {exc}", self.logger)
            return Outcome.failure(RpcError(str(exc), ErrorCode.INVALID_JSON, exc))

        if not codec.is_object(resp):
            log("error", f"Response from {self.endpoint} is not a JSON-RPC object: {text!r}", self.logger)
            return Outcome.failure(
                RpcError("Response is not a JSON-RPC object", ErrorCode.INVALID_JSON, resp)
            )

        error = resp.get("error")
        if error is not None:
            log("error", f"Error in response from {self.endpoint}: {error}", self.logger)
            return Outcome.failure(RpcError.from_payload(error))

        log(
            "debug",
            f"REQUEST FINISH: {self.endpoint} METHOD: {self.method} RESULT: {resp}",
            self.logger,
        )
        return Outcome.success(resp.get("result"))
