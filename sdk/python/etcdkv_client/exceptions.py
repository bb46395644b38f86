"""
etcdkv Python Client Exceptions
"""

import functools

import grpc


class EtcdKVError(Exception):
    """etcdkv基础异常"""
    pass


class ConnectionError(EtcdKVError):
    """连接异常"""
    pass


class StaleHandleError(EtcdKVError):
    """句柄已失效（会话已关闭或范围已删除）"""
    pass


class RequestError(EtcdKVError):
    """RPC请求异常"""

    def __init__(self, message, code=None, details=None):
        super().__init__(message)
        self.code = code
        self.details = details


class TimeoutError(RequestError):
    """超时异常"""
    pass


class AuthenticationError(RequestError):
    """认证异常"""
    pass


class PermissionError(RequestError):
    """权限异常"""
    pass


class InvalidArgumentError(RequestError):
    """无效参数异常"""
    pass


class DecodeError(EtcdKVError):
    """键或值无法解码为文本"""

    def __init__(self, message, raw=None):
        super().__init__(message)
        self.raw = raw


class StreamError(EtcdKVError):
    """Watch流异常"""

    def __init__(self, message, code=None, details=None):
        super().__init__(message)
        self.code = code
        self.details = details


_STATUS_ERRORS = {
    grpc.StatusCode.DEADLINE_EXCEEDED: TimeoutError,
    grpc.StatusCode.INVALID_ARGUMENT: InvalidArgumentError,
    grpc.StatusCode.OUT_OF_RANGE: InvalidArgumentError,
    grpc.StatusCode.UNAUTHENTICATED: AuthenticationError,
    grpc.StatusCode.PERMISSION_DENIED: PermissionError,
}


def match_rpc_error(e: grpc.aio.AioRpcError) -> RequestError:
    """将gRPC错误映射为SDK异常"""
    code = e.code()
    details = e.details()
    error_class = _STATUS_ERRORS.get(code, RequestError)
    return error_class(f"gRPC error: {code.name}: {details}", code=code, details=details)


def rpc_error_handler(func):
    """包装异步RPC方法，把AioRpcError转换为RequestError"""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except grpc.aio.AioRpcError as e:
            raise match_rpc_error(e) from e

    return wrapper
