"""
Watch: a live change feed for one key over the bidirectional Watch RPC.

The outbound half is a queue drained by the call's request iterator. It
carries exactly one create request and then idles until the subscription is
closed; no cancel request is ever sent. The inbound half is read one
response at a time through message() or async iteration.

State machine: UNOPENED -> OPEN -> CLOSED. A stream failure is terminal:
every poll after it raises the same StreamError. An event that events()
cannot decode is terminal in the same way, with the DecodeError kept.
Dropping the last reference to an open Watch cancels its call.
"""

import asyncio
import logging
import weakref
from enum import Enum
from typing import AsyncIterator, Optional

import grpc

from . import rpc_pb2
from .exceptions import DecodeError, EtcdKVError, StaleHandleError, StreamError
from .types import WatchEvent

logger = logging.getLogger(__name__)

_CLOSE = object()


async def _drain(outbound: asyncio.Queue):
    while True:
        request = await outbound.get()
        if request is _CLOSE:
            return
        yield request


class WatchState(Enum):
    UNOPENED = "unopened"
    OPEN = "open"
    CLOSED = "closed"


class Watch:
    """单键变更订阅"""

    def __init__(self, session, key: str):
        self._session = session
        self.key = key
        self.state = WatchState.UNOPENED
        self.watch_id: Optional[int] = None
        self._outbound: asyncio.Queue = asyncio.Queue()
        self._call = None
        self._finalizer: Optional[weakref.finalize] = None
        self._error: Optional[EtcdKVError] = None

    def __repr__(self):
        return f"<Watch {self.key!r} {self.state.value}>"

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
        return False

    def __aiter__(self):
        return self

    async def __anext__(self):
        response = await self.message()
        if response is None:
            raise StopAsyncIteration
        return response

    async def open(self):
        """发送创建请求并建立双向流"""
        if self.state is not WatchState.UNOPENED:
            raise StaleHandleError(f"{self!r} was already opened")
        self._session._ensure_open()

        create = rpc_pb2.WatchCreateRequest(key=self._session.encode(self.key))
        self._outbound.put_nowait(rpc_pb2.WatchRequest(create_request=create))
        # 请求迭代器只持有队列，Watch被丢弃时由finalizer取消调用
        self._call = self._session._watch_stub.Watch(_drain(self._outbound))
        self._finalizer = weakref.finalize(self, self._call.cancel)
        self._finalizer.atexit = False
        self.state = WatchState.OPEN

        try:
            await self._call.wait_for_connection()
        except grpc.aio.AioRpcError as e:
            raise self._fail(StreamError(
                f"Failed to open watch on {self.key!r}: {e.code().name}: {e.details()}",
                code=e.code(), details=e.details(),
            )) from e
        except BaseException:
            self._shutdown()
            raise
        logger.debug("Opened watch on %r", self.key)

    def _shutdown(self):
        self.state = WatchState.CLOSED
        if self._finalizer is not None:
            self._finalizer()
        self._outbound.put_nowait(_CLOSE)

    def _fail(self, error: EtcdKVError) -> EtcdKVError:
        self._error = error
        self._shutdown()
        return error

    async def message(self) -> Optional[rpc_pb2.WatchResponse]:
        """等待下一批变更；流结束返回None，流失败抛出StreamError"""
        if self._error is not None:
            raise self._error
        if self.state is WatchState.UNOPENED:
            raise StaleHandleError(f"{self!r} is not open")
        if self.state is WatchState.CLOSED:
            return None

        try:
            response = await self._call.read()
        except grpc.aio.AioRpcError as e:
            if self.state is WatchState.CLOSED and self._error is None:
                return None
            raise self._fail(StreamError(
                f"Watch on {self.key!r} failed: {e.code().name}: {e.details()}",
                code=e.code(), details=e.details(),
            )) from e
        except asyncio.CancelledError:
            # 其他任务调用了close()
            if self.state is WatchState.CLOSED and self._error is None:
                return None
            raise

        if response is grpc.aio.EOF:
            if self.state is not WatchState.CLOSED:
                self._shutdown()
                logger.debug("Watch on %r ended by server", self.key)
            return None
        if response.canceled:
            raise self._fail(StreamError(
                f"Watch on {self.key!r} canceled by server: {response.cancel_reason}",
                details=response.cancel_reason,
            ))
        if response.created:
            self.watch_id = response.watch_id
        return response

    async def events(self) -> AsyncIterator[WatchEvent]:
        """逐个产出解码后的变更事件，保持服务端顺序；解码失败同样终止订阅"""
        encoding = self._session.config.encoding
        async for response in self:
            for event in response.events:
                try:
                    decoded = WatchEvent.from_pb(event, encoding)
                except DecodeError as e:
                    self._fail(e)
                    raise
                yield decoded

    async def close(self):
        """取消订阅，释放入站流"""
        if self.state is WatchState.CLOSED:
            return
        self._shutdown()
        logger.debug("Closed watch on %r", self.key)
