import socket
import logging
from enum import Enum
from typing import Callable, Optional

from .config import ServerConfig
from .constants import HTTPStatus
from .http_request import HTTPRequest
from .http_response import HTTPResponse
from .router import Router
from .exceptions import HTTPException

logger = logging.getLogger(__name__)


class ConnectionState(Enum):
    """Lifecycle of a connection. Each connection serves exactly one request."""
    AWAITING_DATA = "awaiting_data"
    PARSING = "parsing"
    DISPATCHING = "dispatching"
    RESPONDING = "responding"
    CLOSED = "closed"


def error_response(exc: HTTPException) -> HTTPResponse:
    """Header-only response carrying the status of an HTTP error."""
    return HTTPResponse(status_code=exc.status_code)

def respond(request: HTTPRequest, router: Router, config: ServerConfig) -> HTTPResponse:
    """Runs the handler matching ``request``. Never raises."""
    handler, param = router.find_handler(request)
    try:
        return handler(request, param, config)
    except HTTPException as e:
        logger.info(f"{request.method} {request.path} failed: {e}")
        return error_response(e)
    except Exception as e:
        logger.exception(f"Unexpected error handling {request.method} {request.path}: {e}")
        return HTTPResponse(status_code=HTTPStatus.INTERNAL_SERVER_ERROR)

def dispatch(request_bytes: bytes, router: Router, config: ServerConfig,
             on_state: Optional[Callable[[ConnectionState], None]] = None) -> HTTPResponse:
    """Turns the raw bytes of one request into the response to send back.

    ``on_state`` is told when parsing and dispatching begin.
    """
    if on_state:
        on_state(ConnectionState.PARSING)
    try:
        request = HTTPRequest.from_bytes(request_bytes)
    except HTTPException as e:
        logger.warning(f"Rejected request: {e}")
        return error_response(e)

    logger.info(f"Received request: {request.method} {request.path}")
    if on_state:
        on_state(ConnectionState.DISPATCHING)
    return respond(request, router, config)


class Connection:
    """Serves a single request on an accepted client socket, then closes it."""

    def __init__(self, client_socket: socket.socket, address: tuple,
                 router: Router, config: ServerConfig):
        self.socket = client_socket
        self.peername = f"{address[0]}:{address[1]}" if address else "unknown client"
        self.router = router
        self.config = config
        self.state = ConnectionState.AWAITING_DATA
        self.headers_sent = False

    def _transition(self, state: ConnectionState):
        logger.debug(f"{self.peername}: {self.state.value} -> {state.value}")
        self.state = state

    def run(self) -> Optional[HTTPResponse]:
        """Reads, parses, dispatches and answers one request.

        Returns:
            The response written to the client, or None when nothing could be
            sent (peer closed early or the socket failed mid-write).
        """
        logger.info(f"Connection established with {self.peername}")
        try:
            try:
                self.socket.settimeout(self.config.socket_timeout)
                request_bytes = self.socket.recv(self.config.recv_buffer_size)
            except OSError as e:
                logger.warning(f"Error reading from {self.peername}: {e}")
                return self._send_server_error()

            if not request_bytes:
                logger.info(f"Client {self.peername} closed connection before sending a request.")
                return None

            response = dispatch(request_bytes, self.router, self.config, on_state=self._transition)
            return self._send(response)
        finally:
            self.close()

    def _send(self, response: HTTPResponse) -> Optional[HTTPResponse]:
        self._transition(ConnectionState.RESPONDING)
        try:
            self.headers_sent = True
            self.socket.sendall(response.to_bytes())
        except OSError as e:
            logger.warning(f"Error writing response to {self.peername}, abandoning: {e}")
            return None
        logger.info(f"Sent response to {self.peername}: {int(response.status_code)} {response.status_text}")
        return response

    def _send_server_error(self) -> Optional[HTTPResponse]:
        if self.headers_sent:
            return None
        return self._send(HTTPResponse(status_code=HTTPStatus.INTERNAL_SERVER_ERROR))

    def close(self):
        if self.state is ConnectionState.CLOSED:
            return
        try:
            self.socket.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass # peer already gone
        self.socket.close()
        self._transition(ConnectionState.CLOSED)
        logger.debug(f"Socket for {self.peername} closed.")


def handle_connection(client_socket: socket.socket, address: tuple,
                      router: Router, config: ServerConfig) -> Optional[HTTPResponse]:
    """Per-connection task run by the listener for every accepted socket."""
    return Connection(client_socket, address, router, config).run()
