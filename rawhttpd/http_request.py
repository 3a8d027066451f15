from typing import Dict, Optional

from .constants import HTTPMethod, HTTPVersion, CRLF, HEADER_TERMINATOR
from .exceptions import MalformedRequestLine, MalformedHeaderLine

class HTTPRequest:
    """Represents a parsed HTTP request."""

    def __init__(self,
                 method: HTTPMethod | str,
                 path: str,
                 headers: Optional[Dict[str, str]] = None,
                 body: bytes | None = None,
                 version: HTTPVersion | str = HTTPVersion.HTTP_1_1):
        """Initializes an HTTPRequest object."""
        self.method = method
        self.path = path
        self.version = version
        # Keys are lower-cased so lookups through get_header ignore case
        self.headers = {k.lower(): v for k, v in (headers or {}).items()}
        self.body = body

    @classmethod
    def from_bytes(cls, request_bytes: bytes, strict: bool = False) -> "HTTPRequest":
        """Parses the first chunk read from a connection into an HTTPRequest.

        The chunk is taken to be the whole request. Everything after the first
        blank line is the body, kept as raw bytes. Method and version tokens
        outside the known enums are passed through as plain strings.

        Args:
            request_bytes: Raw bytes as received from the socket.
            strict: Reject header lines without a ':' instead of skipping them.

        Raises:
            MalformedRequestLine: The first line has fewer than three tokens.
            MalformedHeaderLine: Only in strict mode, for a header without ':'.
        """
        head, sep, body = request_bytes.partition(HEADER_TERMINATOR)

        # Undecodable bytes in header values are replaced, not rejected
        head_text = head.decode('utf-8', errors='replace')

        request_lines = head_text.split(CRLF)
        start_line = request_lines[0]
        tokens = start_line.split(" ", 2)
        if len(tokens) < 3:
            raise MalformedRequestLine(f"Malformed request line: {start_line!r}")
        method_str, path, version_str = tokens

        headers: Dict[str, str] = {}
        for line in request_lines[1:]:
            if line == "":
                break
            if ":" not in line:
                if strict:
                    raise MalformedHeaderLine(f"Malformed header line: {line!r}")
                continue
            key, value = line.split(":", 1)
            headers[key.strip()] = value.strip()

        return cls(method=_coerce(HTTPMethod, method_str),
                   path=path,
                   headers=headers,
                   body=body if sep else None,
                   version=_coerce(HTTPVersion, version_str))

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Gets a header value by name (case-insensitive)."""
        return self.headers.get(name.lower(), default)

    def __repr__(self) -> str:
        return f"HTTPRequest(method={self.method}, path='{self.path}', headers={self.headers}, body_len={len(self.body) if self.body else 0})"


def _coerce(enum_cls, token: str):
    try:
        return enum_cls(token)
    except ValueError:
        return token
