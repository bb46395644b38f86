"""
etcdkv Python Client Types
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .exceptions import DecodeError


def decode_bytes(raw: bytes, encoding: str = "utf-8") -> str:
    """按指定编码解码，失败时抛出DecodeError"""
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise DecodeError(f"Cannot decode {raw!r} as {encoding}: {e.reason}", raw=raw) from e


@dataclass
class KeyValue:
    """键值对"""
    key: str
    value: str
    create_revision: int = 0
    mod_revision: int = 0
    version: int = 0
    lease: int = 0

    @classmethod
    def from_pb(cls, kv, encoding: str = "utf-8") -> "KeyValue":
        return cls(
            key=decode_bytes(kv.key, encoding),
            value=decode_bytes(kv.value, encoding),
            create_revision=kv.create_revision,
            mod_revision=kv.mod_revision,
            version=kv.version,
            lease=kv.lease,
        )


class EventType(Enum):
    """变更事件类型"""
    PUT = 0
    DELETE = 1


@dataclass
class WatchEvent:
    """Watch变更事件"""
    type: EventType
    key: str
    value: Optional[str]
    mod_revision: int = 0

    @classmethod
    def from_pb(cls, event, encoding: str = "utf-8") -> "WatchEvent":
        event_type = EventType(event.type)
        # 删除事件不携带值
        value = None
        if event_type is EventType.PUT:
            value = decode_bytes(event.kv.value, encoding)
        return cls(
            type=event_type,
            key=decode_bytes(event.kv.key, encoding),
            value=value,
            mod_revision=event.kv.mod_revision,
        )

    def __str__(self):
        return f"WatchEvent({self.type.name} {self.key}={self.value})"
