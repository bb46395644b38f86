"""
Cluster: membership queries against the session's Cluster service.
"""

from typing import List

from . import rpc_pb2
from .exceptions import rpc_error_handler


class Cluster:
    """集群信息句柄"""

    def __init__(self, session):
        self._session = session

    @rpc_error_handler
    async def members(self) -> List[rpc_pb2.Member]:
        """列出集群成员，保持服务端返回顺序"""
        self._session._ensure_open()
        response = await self._session._cluster_stub.MemberList(
            rpc_pb2.MemberListRequest(),
            timeout=self._session.config.request_timeout,
        )
        return list(response.members)
