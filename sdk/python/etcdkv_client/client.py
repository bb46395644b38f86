"""
etcdkv Python Client Implementation
"""

import asyncio
import codecs
import logging
from dataclasses import dataclass
from typing import Optional, Tuple
from urllib.parse import urlparse

import grpc

from .exceptions import ConnectionError
from .session import Session

logger = logging.getLogger(__name__)

DEFAULT_PORT = 2379


@dataclass
class ClientConfig:
    """客户端配置"""
    endpoint: str = f"http://127.0.0.1:{DEFAULT_PORT}"
    connection_timeout: Optional[float] = 5.0
    request_timeout: Optional[float] = 30.0
    encoding: str = "utf-8"

    # 通道配置
    max_message_length: int = 64 * 1024 * 1024
    enable_compression: bool = False

    # TLS配置（仅https地址使用）
    root_certificates: Optional[str] = None

    def __post_init__(self):
        if self.connection_timeout is not None and self.connection_timeout <= 0:
            raise ValueError(f"connection_timeout must be positive: {self.connection_timeout}")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ValueError(f"request_timeout must be positive: {self.request_timeout}")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding}") from e

    def parse_endpoint(self, destination: Optional[str] = None) -> Tuple[str, bool]:
        """解析目标地址，返回 (host:port, 是否使用TLS)"""
        return parse_endpoint(self.endpoint if destination is None else destination)


def parse_endpoint(destination: str) -> Tuple[str, bool]:
    """解析 host:port、http://host:port 或 https://host:port"""
    if not isinstance(destination, str) or not destination.strip():
        raise ConnectionError(f"Invalid endpoint: {destination!r}")
    text = destination.strip()
    if any(c.isspace() for c in text):
        raise ConnectionError(f"Invalid endpoint: {destination!r}")
    if "://" not in text:
        text = f"http://{text}"

    try:
        parsed = urlparse(text)
        port = parsed.port
    except ValueError as e:
        raise ConnectionError(f"Invalid endpoint {destination!r}: {e}") from e

    if parsed.scheme not in ("http", "https"):
        raise ConnectionError(f"Unsupported endpoint scheme {parsed.scheme!r} in {destination!r}")
    host = parsed.hostname
    if not host or parsed.path not in ("", "/") or parsed.query or parsed.fragment:
        raise ConnectionError(f"Invalid endpoint: {destination!r}")
    if port is None:
        port = DEFAULT_PORT
    if ":" in host:
        host = f"[{host}]"
    return f"{host}:{port}", parsed.scheme == "https"


def build_channel(target: str, secure: bool, config: ClientConfig) -> grpc.aio.Channel:
    """初始化gRPC通道"""
    options = [
        ('grpc.max_receive_message_length', config.max_message_length),
        ('grpc.max_send_message_length', config.max_message_length),
    ]
    compression = grpc.Compression.Gzip if config.enable_compression else None

    if not secure:
        return grpc.aio.insecure_channel(target, options=options, compression=compression)

    root_certificates = None
    if config.root_certificates:
        with open(config.root_certificates, "rb") as f:
            root_certificates = f.read()
    credentials = grpc.ssl_channel_credentials(root_certificates=root_certificates)
    return grpc.aio.secure_channel(target, credentials, options=options, compression=compression)


async def connect(destination: Optional[str] = None, config: Optional[ClientConfig] = None) -> Session:
    """连接到服务器，返回共享一个通道的会话"""
    config = config or ClientConfig()
    target, secure = config.parse_endpoint(destination)

    try:
        channel = build_channel(target, secure, config)
    except (OSError, ValueError) as e:
        raise ConnectionError(f"Failed to create channel to {target}: {e}") from e

    try:
        await asyncio.wait_for(channel.channel_ready(), timeout=config.connection_timeout)
    except asyncio.TimeoutError as e:
        await channel.close()
        raise ConnectionError(
            f"Failed to connect to {target}: not ready after {config.connection_timeout}s"
        ) from e
    except BaseException:
        await channel.close()
        raise

    # 所有服务stub共享同一通道，任一失败则整个会话失败
    try:
        session = Session(channel, target, config)
    except Exception as e:
        await channel.close()
        raise ConnectionError(f"Failed to initialize service stubs for {target}: {e}") from e

    logger.debug("Connected to %s (secure=%s)", target, secure)
    return session
