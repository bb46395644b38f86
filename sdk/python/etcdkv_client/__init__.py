"""
etcdkv Python Client SDK

An asyncio client for etcd v3 compatible key-value stores over gRPC.
"""

from .client import ClientConfig, connect, parse_endpoint
from .cluster import Cluster
from .exceptions import (
    AuthenticationError,
    ConnectionError,
    DecodeError,
    EtcdKVError,
    InvalidArgumentError,
    PermissionError,
    RequestError,
    StaleHandleError,
    StreamError,
    TimeoutError,
)
from .range import Range
from .session import Session
from .types import EventType, KeyValue, WatchEvent
from .watch import Watch, WatchState

__version__ = "0.1.0"
__all__ = [
    "connect",
    "parse_endpoint",
    "ClientConfig",
    "Session",
    "Range",
    "Cluster",
    "Watch",
    "WatchState",
    "EtcdKVError",
    "ConnectionError",
    "RequestError",
    "TimeoutError",
    "AuthenticationError",
    "PermissionError",
    "InvalidArgumentError",
    "DecodeError",
    "StreamError",
    "StaleHandleError",
    "KeyValue",
    "EventType",
    "WatchEvent",
]
