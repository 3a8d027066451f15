"""A minimal HTTP/1.1 server written directly against stream sockets."""

from .config import ServerConfig
from .connection import dispatch, handle_connection
from .http_request import HTTPRequest
from .http_response import HTTPResponse
from .router import Router, default_router
from .server import HTTPServer

__version__ = "0.1.0"

__all__ = [
    "HTTPRequest",
    "HTTPResponse",
    "HTTPServer",
    "Router",
    "ServerConfig",
    "default_router",
    "dispatch",
    "handle_connection",
]
