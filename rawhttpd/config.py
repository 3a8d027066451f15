from dataclasses import dataclass

from .constants import (
    DEFAULT_ADDRESS,
    DEFAULT_DIRECTORY,
    DEFAULT_PORT,
    RECV_BUFFER_SIZE,
    SOCKET_TIMEOUT,
)


@dataclass(frozen=True)
class ServerConfig:
    """Process-wide settings, fixed at startup and shared read-only by all connections."""
    host: str = DEFAULT_ADDRESS
    port: int = DEFAULT_PORT
    directory: str = DEFAULT_DIRECTORY
    socket_timeout: float | None = SOCKET_TIMEOUT
    recv_buffer_size: int = RECV_BUFFER_SIZE
