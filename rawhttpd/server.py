import socket
import threading
import logging
from typing import Optional

from .config import ServerConfig
from .constants import ACCEPT_TIMEOUT
from .connection import handle_connection
from .router import Router, default_router

logger = logging.getLogger(__name__)


class HTTPServer:
    """A basic HTTP/1.1 server answering one request per connection."""

    def __init__(self, config: Optional[ServerConfig] = None, router: Optional[Router] = None):
        """Initializes the HTTP server.

        Args:
            config: Listening address, file root and socket settings.
            router: A Router instance. If None, the built-in routes are served.
        """
        self.config = config if config is not None else ServerConfig()
        self.router = router if router is not None else default_router()
        self._server_socket: Optional[socket.socket] = None
        self._address: Optional[tuple] = None
        self._is_running = False
        self._ready = threading.Event()

        logger.info(f"Serving files from directory: {self.config.directory}")

    @property
    def server_address(self) -> Optional[tuple]:
        """The bound (host, port), or None when not listening."""
        return self._address

    def wait_until_ready(self, timeout: Optional[float] = None) -> bool:
        """Blocks until the listening socket is bound."""
        return self._ready.wait(timeout)

    def bind(self) -> socket.socket:
        """Binds and listens on the configured address.

        The server is only marked ready once the socket is fully set up, so a
        concurrent stop() never sees a half-initialised listener.
        """
        server_socket = socket.create_server((self.config.host, self.config.port),
                                             reuse_port=hasattr(socket, "SO_REUSEPORT"))
        server_socket.settimeout(ACCEPT_TIMEOUT)
        address = server_socket.getsockname()[:2]
        logger.info(f"Server started on {self.config.host}:{address[1]}")

        self._server_socket = server_socket
        self._address = address
        self._is_running = True
        self._ready.set()
        return server_socket

    def serve_forever(self, server_socket: Optional[socket.socket] = None):
        """Accepts connections and handles each in its own thread until stopped."""
        server_socket = server_socket or self._server_socket
        if server_socket is None:
            logger.info("Server already stopped, not accepting connections.")
            return
        while self._is_running:
            try:
                client_socket, address = server_socket.accept()
            except socket.timeout:
                continue
            except OSError as e:
                # stop() closes the socket under a pending accept()
                if self._is_running:
                    logger.error(f"Error accepting connection: {e}")
                    continue
                logger.info("Server socket closed, stopping accept loop.")
                break

            # Daemon threads so a stuck client never blocks process exit
            thread = threading.Thread(
                target=handle_connection,
                args=(client_socket, address, self.router, self.config),
                daemon=True,
                name=f"Client-{address[0]}:{address[1]}"
            )
            thread.start()

    def start(self):
        """Starts the server, listens for connections, and handles them in threads."""
        try:
            server_socket = self.bind()
        except OSError as e:
            logger.error(f"Failed to start server on {self.config.host}:{self.config.port}: {e}")
            raise
        try:
            self.serve_forever(server_socket)
        except KeyboardInterrupt:
            logger.info("Server shutting down due to KeyboardInterrupt...")
        finally:
            self.stop()

    def stop(self):
        """Stops the server and closes the server socket. Safe to call more than once."""
        self._is_running = False
        server_socket, self._server_socket = self._server_socket, None
        self._address = None
        if server_socket:
            logger.info("Closing server socket...")
            try:
                server_socket.close()
            except OSError as e:
                logger.warning(f"Error closing server socket: {e}")
        logger.info("Server stopped.")
