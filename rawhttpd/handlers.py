import os
import gzip
import logging
from typing import Optional

from .config import ServerConfig
from .http_request import HTTPRequest
from .http_response import HTTPResponse
from .constants import HTTPStatus, HTTPHeader, ContentType, GZIP
from .exceptions import FileReadError, FileWriteError, RouteNotFound

logger = logging.getLogger(__name__)


def handle_root(request: HTTPRequest, param: str, config: ServerConfig) -> HTTPResponse:
    """Handles requests to the root path ('/')."""
    return HTTPResponse(status_code=HTTPStatus.OK)

def handle_echo(request: HTTPRequest, param: str, config: ServerConfig) -> HTTPResponse:
    """Handles requests to '/echo/...' paths."""
    response_body = param.encode('utf-8')
    content_encoding = None

    if accepts_gzip(request.get_header(HTTPHeader.ACCEPT_ENCODING)):
        response_body = gzip.compress(response_body)
        content_encoding = GZIP

    return HTTPResponse(status_code=HTTPStatus.OK,
                        body=response_body,
                        content_type=ContentType.TEXT_PLAIN,
                        content_encoding=content_encoding)

def handle_user_agent(request: HTTPRequest, param: str, config: ServerConfig) -> HTTPResponse:
    """Handles requests to '/user-agent'."""
    user_agent = request.get_header(HTTPHeader.USER_AGENT, "Unknown")
    return HTTPResponse(status_code=HTTPStatus.OK, body=user_agent, content_type=ContentType.TEXT_PLAIN)

def handle_file_get(request: HTTPRequest, param: str, config: ServerConfig) -> HTTPResponse:
    """Handles GET requests to '/files/...'."""
    full_file_path = resolve_file_path(config.directory, param)
    if full_file_path is None:
        raise FileReadError(f"Path escapes the file root: {param}")

    try:
        with open(full_file_path, "rb") as f:
            file_data = f.read()
    except OSError as e:
        logger.warning(f"Error reading file '{full_file_path}': {e}")
        raise FileReadError(f"File not readable: {param}") from e

    return HTTPResponse(status_code=HTTPStatus.OK, body=file_data, content_type=ContentType.APP_OCTET_STREAM)

def handle_file_post(request: HTTPRequest, param: str, config: ServerConfig) -> HTTPResponse:
    """Handles POST requests to '/files/...'.

    The request body is written verbatim, creating or truncating the target.
    Missing parent directories under the file root are created.
    """
    full_file_path = resolve_file_path(config.directory, param)
    if full_file_path is None:
        raise FileWriteError(f"Path escapes the file root: {param}")

    try:
        os.makedirs(os.path.dirname(full_file_path), exist_ok=True)
        with open(full_file_path, "wb") as f:
            f.write(request.body or b"")
    except OSError as e:
        logger.error(f"Error writing file '{full_file_path}': {e}")
        raise FileWriteError(f"File not writable: {param}") from e

    return HTTPResponse(status_code=HTTPStatus.CREATED)

def handle_not_found(request: HTTPRequest, param: str, config: ServerConfig) -> HTTPResponse:
    """Default handler for unmatched routes (404 Not Found)."""
    raise RouteNotFound(f"No route for {request.method} {request.path}")


def accepts_gzip(accept_encoding: Optional[str]) -> bool:
    """Tells whether an Accept-Encoding value lists gzip.

    Tokens are comma-separated and compared case-insensitively after trimming.
    A ``;q=0`` parameter on the gzip token counts as a refusal.
    """
    if not accept_encoding:
        return False
    for token in accept_encoding.split(","):
        coding, _, params = token.partition(";")
        if coding.strip().lower() != GZIP:
            continue
        name, _, value = params.partition("=")
        if name.strip().lower() == "q":
            try:
                return float(value) > 0
            except ValueError:
                return False
        return True
    return False

def resolve_file_path(directory: str, name: str) -> Optional[str]:
    """Joins ``name`` onto the file root, or returns None if it would land outside it.

    Names the filesystem cannot represent (e.g. an embedded NUL) also give None.
    """
    root = os.path.realpath(directory or ".")
    try:
        full_file_path = os.path.realpath(os.path.join(root, name))
    except ValueError:
        return None
    if full_file_path == root or os.path.commonpath([root, full_file_path]) != root:
        return None
    return full_file_path
