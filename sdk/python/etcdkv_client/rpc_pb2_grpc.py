# Hand-written client stubs and servicer bases for the etcd v3 services.
# Method paths and message types match etcd's rpc.proto.
import grpc

from . import rpc_pb2 as rpc__pb2


class KVStub(object):
    """etcdserverpb.KV服务客户端stub（键值读写）"""

    def __init__(self, channel):
        """在共享通道上注册各方法的调用对象"""
        self.Range = channel.unary_unary(
                '/etcdserverpb.KV/Range',
                request_serializer=rpc__pb2.RangeRequest.SerializeToString,
                response_deserializer=rpc__pb2.RangeResponse.FromString,
                )
        self.Put = channel.unary_unary(
                '/etcdserverpb.KV/Put',
                request_serializer=rpc__pb2.PutRequest.SerializeToString,
                response_deserializer=rpc__pb2.PutResponse.FromString,
                )
        self.DeleteRange = channel.unary_unary(
                '/etcdserverpb.KV/DeleteRange',
                request_serializer=rpc__pb2.DeleteRangeRequest.SerializeToString,
                response_deserializer=rpc__pb2.DeleteRangeResponse.FromString,
                )


class KVServicer(object):
    """etcdserverpb.KV服务端基类，子类覆盖需要的方法"""

    def Range(self, request, context):
        """Range gets the keys in the range from the key-value store.
        """
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')

    def Put(self, request, context):
        """Put puts the given key into the key-value store.
        """
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')

    def DeleteRange(self, request, context):
        """DeleteRange deletes the given range from the key-value store.
        """
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')


def add_KVServicer_to_server(servicer, server):
    rpc_method_handlers = {
            'Range': grpc.unary_unary_rpc_method_handler(
                    servicer.Range,
                    request_deserializer=rpc__pb2.RangeRequest.FromString,
                    response_serializer=rpc__pb2.RangeResponse.SerializeToString,
            ),
            'Put': grpc.unary_unary_rpc_method_handler(
                    servicer.Put,
                    request_deserializer=rpc__pb2.PutRequest.FromString,
                    response_serializer=rpc__pb2.PutResponse.SerializeToString,
            ),
            'DeleteRange': grpc.unary_unary_rpc_method_handler(
                    servicer.DeleteRange,
                    request_deserializer=rpc__pb2.DeleteRangeRequest.FromString,
                    response_serializer=rpc__pb2.DeleteRangeResponse.SerializeToString,
            ),
    }
    generic_handler = grpc.method_handlers_generic_handler(
            'etcdserverpb.KV', rpc_method_handlers)
    server.add_generic_rpc_handlers((generic_handler,))


class WatchStub(object):
    """etcdserverpb.Watch服务客户端stub（键变更订阅）"""

    def __init__(self, channel):
        """在共享通道上注册各方法的调用对象"""
        self.Watch = channel.stream_stream(
                '/etcdserverpb.Watch/Watch',
                request_serializer=rpc__pb2.WatchRequest.SerializeToString,
                response_deserializer=rpc__pb2.WatchResponse.FromString,
                )


class WatchServicer(object):
    """etcdserverpb.Watch服务端基类，子类覆盖需要的方法"""

    def Watch(self, request_iterator, context):
        """Watch watches for events happening or that have happened. Both input and output
        are streams; the input stream is for creating and canceling watchers and the output
        stream sends events.
        """
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')


def add_WatchServicer_to_server(servicer, server):
    rpc_method_handlers = {
            'Watch': grpc.stream_stream_rpc_method_handler(
                    servicer.Watch,
                    request_deserializer=rpc__pb2.WatchRequest.FromString,
                    response_serializer=rpc__pb2.WatchResponse.SerializeToString,
            ),
    }
    generic_handler = grpc.method_handlers_generic_handler(
            'etcdserverpb.Watch', rpc_method_handlers)
    server.add_generic_rpc_handlers((generic_handler,))


class ClusterStub(object):
    """etcdserverpb.Cluster服务客户端stub（集群成员）"""

    def __init__(self, channel):
        """在共享通道上注册各方法的调用对象"""
        self.MemberList = channel.unary_unary(
                '/etcdserverpb.Cluster/MemberList',
                request_serializer=rpc__pb2.MemberListRequest.SerializeToString,
                response_deserializer=rpc__pb2.MemberListResponse.FromString,
                )


class ClusterServicer(object):
    """etcdserverpb.Cluster服务端基类，子类覆盖需要的方法"""

    def MemberList(self, request, context):
        """MemberList lists all the members in the cluster.
        """
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')


def add_ClusterServicer_to_server(servicer, server):
    rpc_method_handlers = {
            'MemberList': grpc.unary_unary_rpc_method_handler(
                    servicer.MemberList,
                    request_deserializer=rpc__pb2.MemberListRequest.FromString,
                    response_serializer=rpc__pb2.MemberListResponse.SerializeToString,
            ),
    }
    generic_handler = grpc.method_handlers_generic_handler(
            'etcdserverpb.Cluster', rpc_method_handlers)
    server.add_generic_rpc_handlers((generic_handler,))


class LeaseStub(object):
    """etcdserverpb.Lease服务客户端stub（租约）"""

    def __init__(self, channel):
        """在共享通道上注册各方法的调用对象"""
        self.LeaseGrant = channel.unary_unary(
                '/etcdserverpb.Lease/LeaseGrant',
                request_serializer=rpc__pb2.LeaseGrantRequest.SerializeToString,
                response_deserializer=rpc__pb2.LeaseGrantResponse.FromString,
                )


class LeaseServicer(object):
    """etcdserverpb.Lease服务端基类，子类覆盖需要的方法"""

    def LeaseGrant(self, request, context):
        """LeaseGrant creates a lease which expires if the server does not receive a
        keepAlive within a given time to live period.
        """
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')


def add_LeaseServicer_to_server(servicer, server):
    rpc_method_handlers = {
            'LeaseGrant': grpc.unary_unary_rpc_method_handler(
                    servicer.LeaseGrant,
                    request_deserializer=rpc__pb2.LeaseGrantRequest.FromString,
                    response_serializer=rpc__pb2.LeaseGrantResponse.SerializeToString,
            ),
    }
    generic_handler = grpc.method_handlers_generic_handler(
            'etcdserverpb.Lease', rpc_method_handlers)
    server.add_generic_rpc_handlers((generic_handler,))


class AuthStub(object):
    """etcdserverpb.Auth服务客户端stub（认证）"""

    def __init__(self, channel):
        """在共享通道上注册各方法的调用对象"""
        self.AuthStatus = channel.unary_unary(
                '/etcdserverpb.Auth/AuthStatus',
                request_serializer=rpc__pb2.AuthStatusRequest.SerializeToString,
                response_deserializer=rpc__pb2.AuthStatusResponse.FromString,
                )


class AuthServicer(object):
    """etcdserverpb.Auth服务端基类，子类覆盖需要的方法"""

    def AuthStatus(self, request, context):
        """AuthStatus displays authentication status.
        """
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')


def add_AuthServicer_to_server(servicer, server):
    rpc_method_handlers = {
            'AuthStatus': grpc.unary_unary_rpc_method_handler(
                    servicer.AuthStatus,
                    request_deserializer=rpc__pb2.AuthStatusRequest.FromString,
                    response_serializer=rpc__pb2.AuthStatusResponse.SerializeToString,
            ),
    }
    generic_handler = grpc.method_handlers_generic_handler(
            'etcdserverpb.Auth', rpc_method_handlers)
    server.add_generic_rpc_handlers((generic_handler,))


class MaintenanceStub(object):
    """etcdserverpb.Maintenance服务客户端stub（维护与状态）"""

    def __init__(self, channel):
        """在共享通道上注册各方法的调用对象"""
        self.Status = channel.unary_unary(
                '/etcdserverpb.Maintenance/Status',
                request_serializer=rpc__pb2.StatusRequest.SerializeToString,
                response_deserializer=rpc__pb2.StatusResponse.FromString,
                )


class MaintenanceServicer(object):
    """etcdserverpb.Maintenance服务端基类，子类覆盖需要的方法"""

    def Status(self, request, context):
        """Status gets the status of the member.
        """
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')


def add_MaintenanceServicer_to_server(servicer, server):
    rpc_method_handlers = {
            'Status': grpc.unary_unary_rpc_method_handler(
                    servicer.Status,
                    request_deserializer=rpc__pb2.StatusRequest.FromString,
                    response_serializer=rpc__pb2.StatusResponse.SerializeToString,
            ),
    }
    generic_handler = grpc.method_handlers_generic_handler(
            'etcdserverpb.Maintenance', rpc_method_handlers)
    server.add_generic_rpc_handlers((generic_handler,))
