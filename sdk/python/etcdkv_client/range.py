"""
Range: key operations scoped to one key or a half-open key interval.
"""

from typing import Dict, List, Optional, Union

from . import rpc_pb2
from .exceptions import DecodeError, StaleHandleError, rpc_error_handler
from .types import KeyValue, decode_bytes


class Range:
    """键范围句柄，end为None时表示单个键，否则为 [start, end)"""

    def __init__(self, session, start: str, end: Optional[str] = None):
        self._session = session
        self.start = start
        self.end = end
        self._consumed = False

    def __repr__(self):
        if self.end is None:
            return f"<Range {self.start!r}>"
        return f"<Range [{self.start!r}, {self.end!r})>"

    @property
    def consumed(self) -> bool:
        return self._consumed

    def _check(self):
        if self._consumed:
            raise StaleHandleError(f"{self!r} was consumed by delete()")
        self._session._ensure_open()

    @property
    def _encoding(self) -> str:
        return self._session.config.encoding

    @property
    def _timeout(self) -> Optional[float]:
        return self._session.config.request_timeout

    def _key(self) -> bytes:
        return self._session.encode(self.start)

    def _range_end(self) -> bytes:
        # 空的range_end表示只查询start这一个键
        if self.end is None:
            return b""
        return self._session.encode(self.end)

    @rpc_error_handler
    async def put(self, value: str) -> Optional[Union[str, bytes]]:
        """写入start键，返回之前的值；不存在时为None，无法解码时返回原始字节"""
        self._check()
        request = rpc_pb2.PutRequest(
            key=self._key(),
            value=self._session.encode(value),
            prev_kv=True,
        )
        response = await self._session._kv_stub.Put(request, timeout=self._timeout)
        if not response.HasField("prev_kv"):
            return None
        # 写入已生效，之前的值解码失败不能让put报错
        raw = response.prev_kv.value
        try:
            return decode_bytes(raw, self._encoding)
        except DecodeError:
            return raw

    @rpc_error_handler
    async def _fetch(self):
        self._check()
        request = rpc_pb2.RangeRequest(key=self._key(), range_end=self._range_end())
        response = await self._session._kv_stub.Range(request, timeout=self._timeout)
        return response.kvs

    async def get(self) -> Dict[str, str]:
        """读取范围内所有键值，任一记录无法解码时抛出DecodeError"""
        out = {}
        for kv in await self._fetch():
            key = decode_bytes(kv.key, self._encoding)
            out[key] = decode_bytes(kv.value, self._encoding)
        return out

    async def get_raw(self) -> Dict[bytes, bytes]:
        """读取范围内所有键值，不解码"""
        return {kv.key: kv.value for kv in await self._fetch()}

    async def get_kvs(self) -> List[KeyValue]:
        """读取范围内所有记录（含版本信息），保持服务端顺序"""
        return [KeyValue.from_pb(kv, self._encoding) for kv in await self._fetch()]

    @rpc_error_handler
    async def delete(self) -> int:
        """删除范围内所有键，返回删除数量；调用后该句柄失效"""
        self._check()
        self._consumed = True
        request = rpc_pb2.DeleteRangeRequest(key=self._key(), range_end=self._range_end())
        response = await self._session._kv_stub.DeleteRange(request, timeout=self._timeout)
        return response.deleted
