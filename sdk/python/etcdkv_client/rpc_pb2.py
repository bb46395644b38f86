"""
etcd v3 wire schema (mvccpb / etcdserverpb messages)

Declares the subset of kv.proto and rpc.proto used by this SDK. Field numbers
match the upstream .proto files; fields not declared here are kept as unknown
fields when parsed.
"""

from google.protobuf import descriptor_pb2
from google.protobuf import descriptor_pool
from google.protobuf import message_factory

_F = descriptor_pb2.FieldDescriptorProto

BYTES = _F.TYPE_BYTES
STRING = _F.TYPE_STRING
BOOL = _F.TYPE_BOOL
INT64 = _F.TYPE_INT64
UINT64 = _F.TYPE_UINT64
ENUM = _F.TYPE_ENUM
MESSAGE = _F.TYPE_MESSAGE

OPTIONAL = _F.LABEL_OPTIONAL
REPEATED = _F.LABEL_REPEATED


def _message(file_proto, name, fields, oneofs=()):
    """在文件描述中追加一个消息定义"""
    message = file_proto.message_type.add(name=name)
    for oneof in oneofs:
        message.oneof_decl.add(name=oneof)
    for spec in fields:
        _add_field(message, *spec)
    return message


def _add_field(message, name, number, kind, type_name=None, label=OPTIONAL, oneof_index=None):
    field = message.field.add(name=name, number=number, type=kind, label=label)
    if type_name is not None:
        field.type_name = type_name
    if oneof_index is not None:
        field.oneof_index = oneof_index
    return field


def _service(file_proto, name, methods):
    """在文件描述中追加一个服务定义"""
    service = file_proto.service.add(name=name)
    for method_name, input_type, output_type, streaming in methods:
        service.method.add(
            name=method_name,
            input_type=input_type,
            output_type=output_type,
            client_streaming=streaming,
            server_streaming=streaming,
        )
    return service


def _build_kv_file():
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="etcdkv_client/kv.proto", package="mvccpb", syntax="proto3"
    )
    _message(file_proto, "KeyValue", [
        ("key", 1, BYTES),
        ("create_revision", 2, INT64),
        ("mod_revision", 3, INT64),
        ("version", 4, INT64),
        ("value", 5, BYTES),
        ("lease", 6, INT64),
    ])
    event = _message(file_proto, "Event", [
        ("type", 1, ENUM, ".mvccpb.Event.EventType"),
        ("kv", 2, MESSAGE, ".mvccpb.KeyValue"),
        ("prev_kv", 3, MESSAGE, ".mvccpb.KeyValue"),
    ])
    event_type = event.enum_type.add(name="EventType")
    event_type.value.add(name="PUT", number=0)
    event_type.value.add(name="DELETE", number=1)
    return file_proto


def _build_rpc_file():
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="etcdkv_client/rpc.proto",
        package="etcdserverpb",
        syntax="proto3",
        dependency=["etcdkv_client/kv.proto"],
    )
    header = ".etcdserverpb.ResponseHeader"
    keyvalue = ".mvccpb.KeyValue"

    _message(file_proto, "ResponseHeader", [
        ("cluster_id", 1, UINT64),
        ("member_id", 2, UINT64),
        ("revision", 3, INT64),
        ("raft_term", 4, UINT64),
    ])

    # KV
    _message(file_proto, "RangeRequest", [
        ("key", 1, BYTES),
        ("range_end", 2, BYTES),
        ("limit", 3, INT64),
        ("revision", 4, INT64),
        ("serializable", 7, BOOL),
        ("keys_only", 8, BOOL),
        ("count_only", 9, BOOL),
    ])
    _message(file_proto, "RangeResponse", [
        ("header", 1, MESSAGE, header),
        ("kvs", 2, MESSAGE, keyvalue, REPEATED),
        ("more", 3, BOOL),
        ("count", 4, INT64),
    ])
    _message(file_proto, "PutRequest", [
        ("key", 1, BYTES),
        ("value", 2, BYTES),
        ("lease", 3, INT64),
        ("prev_kv", 4, BOOL),
        ("ignore_value", 5, BOOL),
        ("ignore_lease", 6, BOOL),
    ])
    _message(file_proto, "PutResponse", [
        ("header", 1, MESSAGE, header),
        ("prev_kv", 2, MESSAGE, keyvalue),
    ])
    _message(file_proto, "DeleteRangeRequest", [
        ("key", 1, BYTES),
        ("range_end", 2, BYTES),
        ("prev_kv", 3, BOOL),
    ])
    _message(file_proto, "DeleteRangeResponse", [
        ("header", 1, MESSAGE, header),
        ("deleted", 2, INT64),
        ("prev_kvs", 3, MESSAGE, keyvalue, REPEATED),
    ])

    # Watch
    _message(file_proto, "WatchRequest", [
        ("create_request", 1, MESSAGE, ".etcdserverpb.WatchCreateRequest", OPTIONAL, 0),
        ("cancel_request", 2, MESSAGE, ".etcdserverpb.WatchCancelRequest", OPTIONAL, 0),
        ("progress_request", 3, MESSAGE, ".etcdserverpb.WatchProgressRequest", OPTIONAL, 0),
    ], oneofs=["request_union"])
    _message(file_proto, "WatchCreateRequest", [
        ("key", 1, BYTES),
        ("range_end", 2, BYTES),
        ("start_revision", 3, INT64),
        ("progress_notify", 4, BOOL),
        ("prev_kv", 6, BOOL),
        ("watch_id", 7, INT64),
        ("fragment", 8, BOOL),
    ])
    _message(file_proto, "WatchCancelRequest", [
        ("watch_id", 1, INT64),
    ])
    _message(file_proto, "WatchProgressRequest", [])
    _message(file_proto, "WatchResponse", [
        ("header", 1, MESSAGE, header),
        ("watch_id", 2, INT64),
        ("created", 3, BOOL),
        ("canceled", 4, BOOL),
        ("compact_revision", 5, INT64),
        ("cancel_reason", 6, STRING),
        ("fragment", 7, BOOL),
        ("events", 11, MESSAGE, ".mvccpb.Event", REPEATED),
    ])

    # Cluster
    _message(file_proto, "Member", [
        ("ID", 1, UINT64),
        ("name", 2, STRING),
        ("peerURLs", 3, STRING, None, REPEATED),
        ("clientURLs", 4, STRING, None, REPEATED),
        ("isLearner", 5, BOOL),
    ])
    _message(file_proto, "MemberListRequest", [
        ("linearizable", 1, BOOL),
    ])
    _message(file_proto, "MemberListResponse", [
        ("header", 1, MESSAGE, header),
        ("members", 2, MESSAGE, ".etcdserverpb.Member", REPEATED),
    ])

    # Lease / Auth / Maintenance，仅保留连接时需要的最小方法
    _message(file_proto, "LeaseGrantRequest", [
        ("TTL", 1, INT64),
        ("ID", 2, INT64),
    ])
    _message(file_proto, "LeaseGrantResponse", [
        ("header", 1, MESSAGE, header),
        ("ID", 2, INT64),
        ("TTL", 3, INT64),
        ("error", 4, STRING),
    ])
    _message(file_proto, "AuthStatusRequest", [])
    _message(file_proto, "AuthStatusResponse", [
        ("header", 1, MESSAGE, header),
        ("enabled", 2, BOOL),
        ("authRevision", 3, UINT64),
    ])
    _message(file_proto, "StatusRequest", [])
    _message(file_proto, "StatusResponse", [
        ("header", 1, MESSAGE, header),
        ("version", 2, STRING),
        ("dbSize", 3, INT64),
        ("leader", 4, UINT64),
        ("raftIndex", 5, UINT64),
        ("raftTerm", 6, UINT64),
    ])

    _service(file_proto, "KV", [
        ("Range", ".etcdserverpb.RangeRequest", ".etcdserverpb.RangeResponse", False),
        ("Put", ".etcdserverpb.PutRequest", ".etcdserverpb.PutResponse", False),
        ("DeleteRange", ".etcdserverpb.DeleteRangeRequest", ".etcdserverpb.DeleteRangeResponse", False),
    ])
    _service(file_proto, "Watch", [
        ("Watch", ".etcdserverpb.WatchRequest", ".etcdserverpb.WatchResponse", True),
    ])
    _service(file_proto, "Cluster", [
        ("MemberList", ".etcdserverpb.MemberListRequest", ".etcdserverpb.MemberListResponse", False),
    ])
    _service(file_proto, "Lease", [
        ("LeaseGrant", ".etcdserverpb.LeaseGrantRequest", ".etcdserverpb.LeaseGrantResponse", False),
    ])
    _service(file_proto, "Auth", [
        ("AuthStatus", ".etcdserverpb.AuthStatusRequest", ".etcdserverpb.AuthStatusResponse", False),
    ])
    _service(file_proto, "Maintenance", [
        ("Status", ".etcdserverpb.StatusRequest", ".etcdserverpb.StatusResponse", False),
    ])
    return file_proto


# 使用独立的描述符池，避免与其他包注册的同名 etcd 协议冲突
_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_kv_file().SerializeToString())
DESCRIPTOR = _pool.AddSerializedFile(_build_rpc_file().SerializeToString())


def _get(full_name):
    return message_factory.GetMessageClass(_pool.FindMessageTypeByName(full_name))


KeyValue = _get("mvccpb.KeyValue")
Event = _get("mvccpb.Event")

ResponseHeader = _get("etcdserverpb.ResponseHeader")
RangeRequest = _get("etcdserverpb.RangeRequest")
RangeResponse = _get("etcdserverpb.RangeResponse")
PutRequest = _get("etcdserverpb.PutRequest")
PutResponse = _get("etcdserverpb.PutResponse")
DeleteRangeRequest = _get("etcdserverpb.DeleteRangeRequest")
DeleteRangeResponse = _get("etcdserverpb.DeleteRangeResponse")
WatchRequest = _get("etcdserverpb.WatchRequest")
WatchCreateRequest = _get("etcdserverpb.WatchCreateRequest")
WatchCancelRequest = _get("etcdserverpb.WatchCancelRequest")
WatchProgressRequest = _get("etcdserverpb.WatchProgressRequest")
WatchResponse = _get("etcdserverpb.WatchResponse")
Member = _get("etcdserverpb.Member")
MemberListRequest = _get("etcdserverpb.MemberListRequest")
MemberListResponse = _get("etcdserverpb.MemberListResponse")
LeaseGrantRequest = _get("etcdserverpb.LeaseGrantRequest")
LeaseGrantResponse = _get("etcdserverpb.LeaseGrantResponse")
AuthStatusRequest = _get("etcdserverpb.AuthStatusRequest")
AuthStatusResponse = _get("etcdserverpb.AuthStatusResponse")
StatusRequest = _get("etcdserverpb.StatusRequest")
StatusResponse = _get("etcdserverpb.StatusResponse")
