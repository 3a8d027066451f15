import argparse
import logging
import sys

from .config import ServerConfig
from .constants import DEFAULT_ADDRESS, DEFAULT_DIRECTORY, DEFAULT_PORT, SOCKET_TIMEOUT
from .server import HTTPServer

LOG_FORMAT = '%(asctime)s - %(threadName)s - %(levelname)s - %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rawhttpd", description="A tiny HTTP/1.1 server built on raw sockets")
    parser.add_argument("--directory", "-d", type=str, default=DEFAULT_DIRECTORY,
                        help="directory served and written by /files/ (default: current directory)")
    parser.add_argument("--host", "-H", type=str, default=DEFAULT_ADDRESS, help="host to listen on")
    parser.add_argument("--port", "-p", type=int, default=DEFAULT_PORT, help="port to listen on")
    parser.add_argument("--timeout", "-t", type=float, default=SOCKET_TIMEOUT,
                        help="per-connection socket timeout in seconds, 0 to disable")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging verbosity")
    return parser


def config_from_args(args: argparse.Namespace) -> ServerConfig:
    return ServerConfig(host=args.host,
                        port=args.port,
                        directory=args.directory,
                        socket_timeout=args.timeout or None)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    server = HTTPServer(config_from_args(args))
    try:
        server.start()
    except OSError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
