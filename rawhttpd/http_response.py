from typing import Optional, Union

from .constants import HTTPStatus, HTTPVersion, HTTPHeader, STATUS_TEXT, CRLF, PROTOCOL_VERSION

class HTTPResponse:
    """Represents an HTTP response to be sent.

    A response built without a body is header-only: the status line followed
    by the blank line. With a body (even an empty one) the Content-Type,
    Content-Length and Content-Encoding headers are written in that order.
    """

    def __init__(self,
                 status_code: HTTPStatus,
                 body: Optional[Union[str, bytes]] = None,
                 content_type: Optional[str] = None,
                 content_encoding: Optional[str] = None,
                 status_text: Optional[str] = None,
                 version: HTTPVersion | str = PROTOCOL_VERSION):
        """Initializes an HTTPResponse object.

        ``body`` is stored exactly as it will be transmitted, so a gzip body
        must already be compressed when passed in.
        """
        self.status_code = status_code
        self.status_text = status_text or STATUS_TEXT.get(status_code, "Unknown")
        self.version = version
        self.content_type = content_type
        self.content_encoding = content_encoding
        self.body = body.encode('utf-8') if isinstance(body, str) else body

    @property
    def content_length(self) -> Optional[int]:
        """Byte length of the transmitted body, None for header-only responses."""
        return None if self.body is None else len(self.body)

    @property
    def headers(self) -> dict[str, str]:
        """Response headers in wire order."""
        if self.body is None:
            return {}
        headers = {}
        if self.content_type:
            headers[HTTPHeader.CONTENT_TYPE.value] = str(self.content_type)
        headers[HTTPHeader.CONTENT_LENGTH.value] = str(self.content_length)
        if self.content_encoding:
            headers[HTTPHeader.CONTENT_ENCODING.value] = str(self.content_encoding)
        return headers

    def to_bytes(self) -> bytes:
        """Builds the full HTTP response as bytes, ready for a single write."""
        response_line = f"{self.version} {int(self.status_code)} {self.status_text}{CRLF}"

        response_headers = ""
        for key, value in self.headers.items():
            response_headers += f"{key}: {value}{CRLF}"

        headers_part = response_headers + CRLF # End of headers

        response = response_line.encode('ascii') + headers_part.encode('latin-1')

        if self.body:
            response += self.body

        return response

    def __repr__(self) -> str:
        return f"HTTPResponse(status={int(self.status_code)}, headers={self.headers}, body_len={self.content_length or 0})"
