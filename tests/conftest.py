"""Pytest fixtures: an in-process fake etcd served over real gRPC.

The fake implements the subset of etcd v3 semantics the SDK relies on:
exact-key and half-open range reads, puts with previous values, range
deletes, a global revision counter, single-key watches, and a member list.
"""
import asyncio
from typing import Dict, List, Optional, Tuple

import grpc
import pytest

from etcdkv_client import ClientConfig, EventType, connect
from etcdkv_client import rpc_pb2, rpc_pb2_grpc


class FakeEtcd:
    """In-memory store shared by the fake servicers."""

    def __init__(self):
        self.data: Dict[bytes, rpc_pb2.KeyValue] = {}
        self.revision = 1
        self.requests: List[object] = []
        self.watch_requests: List[rpc_pb2.WatchRequest] = []
        self.watchers: List[Tuple[bytes, asyncio.Queue]] = []
        self.members = [
            rpc_pb2.Member(
                ID=0x8E9E05C52164694D,
                name="default",
                peerURLs=["http://localhost:2380"],
                clientURLs=["http://localhost:2379"],
            ),
        ]
        self.fail_with: Optional[Tuple[grpc.StatusCode, str]] = None
        self.reject_watches: Optional[Tuple[grpc.StatusCode, str]] = None
        self.endpoint = ""
        self._watch_ids = 0

    def header(self):
        return rpc_pb2.ResponseHeader(cluster_id=1, member_id=1, revision=self.revision, raft_term=2)

    async def check(self, context, request):
        self.requests.append(request)
        if self.fail_with is not None:
            code, details = self.fail_with
            await context.abort(code, details)

    def select(self, key: bytes, range_end: bytes) -> List[bytes]:
        if not range_end:
            return [key] if key in self.data else []
        return sorted(k for k in self.data if key <= k < range_end)

    def notify(self, event):
        for watched, queue in self.watchers:
            if watched == event.kv.key:
                queue.put_nowait(("event", event))

    def next_watch_id(self) -> int:
        self._watch_ids += 1
        return self._watch_ids

    def _broadcast(self, item):
        for _, queue in self.watchers:
            queue.put_nowait(item)

    def end_watches(self):
        self._broadcast(("end", None))

    def abort_watches(self, code: grpc.StatusCode, details: str):
        self._broadcast(("abort", (code, details)))

    def cancel_watches(self, reason: str):
        self._broadcast(("cancel", reason))


class FakeKV(rpc_pb2_grpc.KVServicer):
    def __init__(self, etcd: FakeEtcd):
        self.etcd = etcd

    async def Range(self, request, context):
        await self.etcd.check(context, request)
        kvs = [self.etcd.data[k] for k in self.etcd.select(request.key, request.range_end)]
        return rpc_pb2.RangeResponse(header=self.etcd.header(), kvs=kvs, count=len(kvs))

    async def Put(self, request, context):
        etcd = self.etcd
        await etcd.check(context, request)
        prev = etcd.data.get(request.key)
        etcd.revision += 1
        kv = rpc_pb2.KeyValue(
            key=request.key,
            value=request.value,
            create_revision=prev.create_revision if prev is not None else etcd.revision,
            mod_revision=etcd.revision,
            version=prev.version + 1 if prev is not None else 1,
        )
        etcd.data[request.key] = kv
        etcd.notify(rpc_pb2.Event(type=EventType.PUT.value, kv=kv))

        response = rpc_pb2.PutResponse(header=etcd.header())
        if request.prev_kv and prev is not None:
            response.prev_kv.CopyFrom(prev)
        return response

    async def DeleteRange(self, request, context):
        etcd = self.etcd
        await etcd.check(context, request)
        keys = etcd.select(request.key, request.range_end)
        if keys:
            etcd.revision += 1
        for key in keys:
            del etcd.data[key]
            tombstone = rpc_pb2.KeyValue(key=key, mod_revision=etcd.revision)
            etcd.notify(rpc_pb2.Event(type=EventType.DELETE.value, kv=tombstone))
        return rpc_pb2.DeleteRangeResponse(header=etcd.header(), deleted=len(keys))


class FakeWatch(rpc_pb2_grpc.WatchServicer):
    def __init__(self, etcd: FakeEtcd):
        self.etcd = etcd

    async def Watch(self, request_iterator, context):
        etcd = self.etcd
        if etcd.reject_watches is not None:
            await context.abort(*etcd.reject_watches)
        create = None
        async for request in request_iterator:
            etcd.watch_requests.append(request)
            if request.WhichOneof("request_union") == "create_request":
                create = request.create_request
                break
        if create is None:
            return

        watch_id = etcd.next_watch_id()
        entry = (create.key, asyncio.Queue())
        etcd.watchers.append(entry)
        try:
            yield rpc_pb2.WatchResponse(header=etcd.header(), watch_id=watch_id, created=True)
            while True:
                kind, payload = await entry[1].get()
                if kind == "end":
                    return
                if kind == "abort":
                    await context.abort(*payload)
                if kind == "cancel":
                    yield rpc_pb2.WatchResponse(
                        header=etcd.header(), watch_id=watch_id,
                        canceled=True, cancel_reason=payload,
                    )
                    continue
                yield rpc_pb2.WatchResponse(header=etcd.header(), watch_id=watch_id, events=[payload])
        finally:
            etcd.watchers.remove(entry)


class FakeCluster(rpc_pb2_grpc.ClusterServicer):
    def __init__(self, etcd: FakeEtcd):
        self.etcd = etcd

    async def MemberList(self, request, context):
        await self.etcd.check(context, request)
        return rpc_pb2.MemberListResponse(header=self.etcd.header(), members=self.etcd.members)


class FakeLease(rpc_pb2_grpc.LeaseServicer):
    async def LeaseGrant(self, request, context):
        return rpc_pb2.LeaseGrantResponse(ID=request.ID or 1, TTL=request.TTL)


class FakeAuth(rpc_pb2_grpc.AuthServicer):
    async def AuthStatus(self, request, context):
        return rpc_pb2.AuthStatusResponse(enabled=False)


class FakeMaintenance(rpc_pb2_grpc.MaintenanceServicer):
    async def Status(self, request, context):
        return rpc_pb2.StatusResponse(version="3.5.0")


@pytest.fixture
async def etcd_server():
    """Start a fake etcd on an ephemeral port (port 0)."""
    etcd = FakeEtcd()
    server = grpc.aio.server()
    rpc_pb2_grpc.add_KVServicer_to_server(FakeKV(etcd), server)
    rpc_pb2_grpc.add_WatchServicer_to_server(FakeWatch(etcd), server)
    rpc_pb2_grpc.add_ClusterServicer_to_server(FakeCluster(etcd), server)
    rpc_pb2_grpc.add_LeaseServicer_to_server(FakeLease(), server)
    rpc_pb2_grpc.add_AuthServicer_to_server(FakeAuth(), server)
    rpc_pb2_grpc.add_MaintenanceServicer_to_server(FakeMaintenance(), server)
    port = server.add_insecure_port("127.0.0.1:0")
    await server.start()

    etcd.endpoint = f"http://127.0.0.1:{port}"
    try:
        yield etcd
    finally:
        await server.stop(grace=None)


@pytest.fixture
def config():
    return ClientConfig(connection_timeout=5.0, request_timeout=5.0)


@pytest.fixture
async def session(etcd_server, config):
    session = await connect(etcd_server.endpoint, config)
    try:
        yield session
    finally:
        await session.close()
