"""Asynchronous and synchronous call paths over a single PendingCall.

Synchronous calls block the calling thread until the exchange finishes, so
they are only allowed inside ``run_sync()``: a worker thread bound to the
event loop. The loop keeps driving other exchanges while the worker waits.
"""

from __future__ import annotations

import asyncio
import threading
from concurrent.futures import Future
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from jsonrpc_post.config import CallMode, DecodeKeys
from jsonrpc_post.errors import SyncContextError
from jsonrpc_post.outcome import Outcome
from jsonrpc_post.pending import PendingCall
from jsonrpc_post.transport import HttpTransport

T = TypeVar("T")


@dataclass(frozen=True)
class SyncContext:
    loop: asyncio.AbstractEventLoop
    thread: threading.Thread


# Set only inside run_sync() workers.
_sync_context: ContextVar[SyncContext | None] = ContextVar("jsonrpc_post_sync_context", default=None)


def _on_loop_thread() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


def current_sync_context() -> SyncContext | None:
    context = _sync_context.get()
    if context is None or context.thread is not threading.current_thread():
        return None
    if _on_loop_thread():
        return None
    return context


def in_sync_context() -> bool:
    """True when synchronous calls may be made from the current code."""
    return current_sync_context() is not None


async def run_sync(func: Callable[..., T], /, *args: Any, **kwargs: Any) -> T:
    """Run ``func`` in a worker thread where synchronous calls are allowed."""
    loop = asyncio.get_running_loop()

    def enter() -> T:
        token = _sync_context.set(SyncContext(loop=loop, thread=threading.current_thread()))
        try:
            return func(*args, **kwargs)
        finally:
            _sync_context.reset(token)

    return await asyncio.to_thread(enter)


@dataclass(frozen=True)
class CallTarget:
    """Client settings captured at the moment a call is issued."""
    endpoint: str
    transport: HttpTransport
    decode_keys: DecodeKeys = DecodeKeys.SYMBOLIC
    logger: Any = None

    def open(self, method: str, params: Any) -> PendingCall:
        return PendingCall(
            endpoint=self.endpoint,
            method=method,
            params=params,
            transport=self.transport,
            decode_keys=self.decode_keys,
            logger=self.logger,
        )


class CallDispatcher:
    """Turns ``(method, params)`` into a PendingCall or a resolved value."""

    def dispatch(self, mode: CallMode, target: CallTarget, method: str, params: Any) -> Any:
        if CallMode(mode) is CallMode.SYNC:
            return self.call_sync(target, method, params)
        return self.call_async(target, method, params)

    def call_async(self, target: CallTarget, method: str, params: Any) -> PendingCall:
        return target.open(method, params)

    def call_sync(self, target: CallTarget, method: str, params: Any) -> Any:
        """Block the current run_sync() worker until the call resolves.

        Returns the result or raises the RpcError.
        """
        context = current_sync_context()
        if context is None:
            raise SyncContextError()

        resumption: Future[Outcome] = Future()

        def resume(outcome: Outcome) -> None:
            if not resumption.done():
                resumption.set_result(outcome)

        async def start() -> None:
            pending = target.open(method, params)
            pending.add_callback(lambda value: resume(Outcome.success(value)))
            pending.add_errback(lambda error: resume(Outcome.failure(error)))

        # Errors raised while issuing the request propagate from here.
        asyncio.run_coroutine_threadsafe(start(), context.loop).result()

        # Returns at once when the call resolved before we got here.
        return resumption.result().unwrap()
