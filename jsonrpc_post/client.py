"""JSON-RPC 2.0 over HTTP POST client."""

from __future__ import annotations

import asyncio
from typing import Any

from jsonrpc_post import codec
from jsonrpc_post.config import CallMode, ClientOptions, DecodeKeys
from jsonrpc_post.dispatch import CallDispatcher, CallTarget, current_sync_context
from jsonrpc_post.logging_sink import log
from jsonrpc_post.pending import PendingCall
from jsonrpc_post.transport import HttpTransport, HttpxTransport


class JsonRpcClient:
    """Calls remote methods on one JSON-RPC endpoint.

    Every remote method goes through ``call(method, params)``. With
    ``call_mode="async"`` it returns a PendingCall; with ``call_mode="sync"``
    it returns the result (or raises RpcError) and must run inside
    ``run_sync()``.

    Example::

        wallet = JsonRpcClient("https://wallet.example:8332/")
        pending = wallet.call("getbalance")
        pending.add_callback(print).add_errback(print)

        def fetch_name():
            article = JsonRpcClient(url, call_mode="sync")
            return article.call("get", [{"name": True}])

        name = await run_sync(fetch_name)

    Settings are read when each call is issued, so changing them affects
    later calls only.
    """

    def __init__(
        self,
        endpoint: str | ClientOptions,
        *,
        call_mode: CallMode | str = CallMode.ASYNC,
        decode_keys: DecodeKeys | str = DecodeKeys.SYMBOLIC,
        logger: Any = None,
        transport: HttpTransport | None = None,
    ):
        if isinstance(endpoint, ClientOptions):
            self.options = endpoint
        else:
            self.options = ClientOptions(
                endpoint=endpoint,
                call_mode=call_mode,
                decode_keys=decode_keys,
                logger=logger,
            )
        self.transport: HttpTransport = transport or HttpxTransport()
        self._dispatcher = CallDispatcher()
        self._notifications: set[asyncio.Task[Any]] = set()

    def __repr__(self) -> str:
        return f"JsonRpcClient({self.endpoint!r}, call_mode={self.call_mode.value!r})"

    @property
    def endpoint(self) -> str:
        return self.options.endpoint

    @endpoint.setter
    def endpoint(self, value: str) -> None:
        self.options.endpoint = value

    @property
    def call_mode(self) -> CallMode:
        return self.options.call_mode

    @call_mode.setter
    def call_mode(self, value: CallMode | str) -> None:
        self.options.call_mode = value

    @property
    def decode_keys(self) -> DecodeKeys:
        return self.options.decode_keys

    @decode_keys.setter
    def decode_keys(self, value: DecodeKeys | str) -> None:
        self.options.decode_keys = value

    @property
    def logger(self) -> Any:
        return self.options.logger

    @logger.setter
    def logger(self, value: Any) -> None:
        self.options.logger = value

    def _target(self) -> CallTarget:
        return CallTarget(
            endpoint=self.endpoint,
            transport=self.transport,
            decode_keys=self.decode_keys,
            logger=self.logger,
        )

    def call(self, method: str, params: Any = None) -> Any:
        """Invoke ``method`` with positional (list) or keyed (dict) params."""
        return self._dispatcher.dispatch(self.call_mode, self._target(), method, params)

    def call_async(self, method: str, params: Any = None) -> PendingCall:
        return self._dispatcher.call_async(self._target(), method, params)

    def call_sync(self, method: str, params: Any = None) -> Any:
        return self._dispatcher.call_sync(self._target(), method, params)

    def notify(self, method: str, params: Any = None) -> None:
        """Send a notification (no ``id``) and return immediately.

        Nothing about the response is reported back. Works on the event loop
        thread and inside run_sync().
        """
        endpoint, logger = self.endpoint, self.logger
        body = codec.encode_notification(method, params)
        context = current_sync_context()
        if context is not None:
            context.loop.call_soon_threadsafe(self._send_notification, endpoint, body, logger)
        else:
            self._send_notification(endpoint, body, logger)
        log("debug", f"NOTIFY: {endpoint} --> {body}", logger)

    def _send_notification(self, endpoint: str, body: str, logger: Any) -> None:
        task = asyncio.get_running_loop().create_task(self.transport.post(endpoint, body))
        self._notifications.add(task)

        def finished(done: asyncio.Task[Any]) -> None:
            self._notifications.discard(done)
            if done.cancelled():
                return
            exc = done.exception()
            if exc is not None:
                log("debug", f"Notification to {endpoint} failed: {exc}", logger)

        task.add_done_callback(finished)

    async def wait_notifications(self) -> None:
        """Wait until every notification sent so far has left the client."""
        while self._notifications:
            await asyncio.gather(*list(self._notifications), return_exceptions=True)
