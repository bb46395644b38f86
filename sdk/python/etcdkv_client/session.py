"""
Session: one gRPC channel shared by every etcd service stub.

Range, Cluster and Watch handles borrow a Session; they never dial on their
own. Handles hold a strong reference to the session, and every operation
checks that the session has not been closed.
"""

import logging
import weakref
from typing import Optional

import grpc

from . import rpc_pb2_grpc
from .cluster import Cluster
from .exceptions import StaleHandleError
from .range import Range
from .watch import Watch

logger = logging.getLogger(__name__)


class Session:
    """单一连接会话：一个通道加上每个服务一个stub"""

    def __init__(self, channel: grpc.aio.Channel, target: str, config):
        self._channel = channel
        self.target = target
        self.config = config
        self._closed = False
        self._watches = weakref.WeakSet()

        self._auth_stub = rpc_pb2_grpc.AuthStub(channel)
        self._cluster_stub = rpc_pb2_grpc.ClusterStub(channel)
        self._kv_stub = rpc_pb2_grpc.KVStub(channel)
        self._lease_stub = rpc_pb2_grpc.LeaseStub(channel)
        self._maintenance_stub = rpc_pb2_grpc.MaintenanceStub(channel)
        self._watch_stub = rpc_pb2_grpc.WatchStub(channel)

    def __repr__(self):
        state = "closed" if self._closed else "open"
        return f"<Session {self.target} {state}>"

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
        return False

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self):
        if self._closed:
            raise StaleHandleError(f"Session to {self.target} is closed")

    def encode(self, text: str) -> bytes:
        return text.encode(self.config.encoding)

    def range(self, start: str, end: Optional[str] = None) -> Range:
        """创建键范围句柄，不访问网络"""
        self._ensure_open()
        return Range(self, start, end)

    def cluster(self) -> Cluster:
        """创建集群信息句柄，不访问网络"""
        self._ensure_open()
        return Cluster(self)

    async def watch(self, key: str) -> Watch:
        """订阅单个键的变更"""
        self._ensure_open()
        watch = Watch(self, key)
        self._watches.add(watch)
        try:
            await watch.open()
        except BaseException:
            self._watches.discard(watch)
            raise
        return watch

    async def close(self):
        """关闭会话及其上所有未关闭的订阅"""
        if self._closed:
            return
        self._closed = True
        for watch in list(self._watches):
            await watch.close()
        await self._channel.close()
        logger.debug("Closed session to %s", self.target)
