import pytest

from etcdkv_client import ClientConfig, ConnectionError, parse_endpoint
from etcdkv_client import rpc_pb2
from etcdkv_client.types import EventType, WatchEvent


@pytest.mark.parametrize("destination,expected", [
    ("127.0.0.1:2379", ("127.0.0.1:2379", False)),
    ("http://127.0.0.1:2379", ("127.0.0.1:2379", False)),
    ("http://localhost", ("localhost:2379", False)),
    ("https://etcd.example.com:2379/", ("etcd.example.com:2379", True)),
    ("http://[::1]:2379", ("[::1]:2379", False)),
])
def test_parse_endpoint(destination, expected):
    assert parse_endpoint(destination) == expected


@pytest.mark.parametrize("destination", [
    "",
    "   ",
    "unix:///tmp/etcd.sock",
    "http://127.0.0.1:port",
    "http://127.0.0.1:2379/v3/kv",
    "http://bad host:2379",
])
def test_parse_endpoint_rejects(destination):
    with pytest.raises(ConnectionError):
        parse_endpoint(destination)


def test_config_defaults():
    config = ClientConfig()
    assert config.parse_endpoint() == ("127.0.0.1:2379", False)
    assert config.parse_endpoint("https://10.0.0.1:2380") == ("10.0.0.1:2380", True)
    assert config.encoding == "utf-8"


@pytest.mark.parametrize("kwargs", [
    {"connection_timeout": 0},
    {"request_timeout": -1},
    {"encoding": "no-such-codec"},
])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        ClientConfig(**kwargs)


def test_range_request_wire_format():
    # key = 1, range_end = 2
    request = rpc_pb2.RangeRequest(key=b"a", range_end=b"b")
    assert request.SerializeToString() == b"\n\x01a\x12\x01b"


def test_watch_create_request_wire_format():
    request = rpc_pb2.WatchRequest(create_request=rpc_pb2.WatchCreateRequest(key=b"foo"))
    assert request.WhichOneof("request_union") == "create_request"
    assert request.SerializeToString() == b"\n\x05\n\x03foo"


def test_watch_event_from_pb():
    event = rpc_pb2.Event(
        type=EventType.PUT.value,
        kv=rpc_pb2.KeyValue(key=b"k", value="värde".encode("utf-8"), mod_revision=7),
    )
    decoded = WatchEvent.from_pb(event)
    assert (decoded.type, decoded.key, decoded.value, decoded.mod_revision) == (
        EventType.PUT, "k", "värde", 7,
    )
