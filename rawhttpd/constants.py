from enum import IntEnum, StrEnum

# HTTP Methods
class HTTPMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"

# Protocol versions a request line may carry
class HTTPVersion(StrEnum):
    HTTP_1_0 = "HTTP/1.0"
    HTTP_1_1 = "HTTP/1.1"
    HTTP_2_0 = "HTTP/2.0"
    HTTP_3_0 = "HTTP/3.0"

# HTTP Status Codes
class HTTPStatus(IntEnum):
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404

    INTERNAL_SERVER_ERROR = 500

STATUS_TEXT = {
    HTTPStatus.OK: "OK",
    HTTPStatus.CREATED: "Created",
    HTTPStatus.NO_CONTENT: "No Content",
    HTTPStatus.BAD_REQUEST: "Bad Request",
    HTTPStatus.UNAUTHORIZED: "Unauthorized",
    HTTPStatus.FORBIDDEN: "Forbidden",
    HTTPStatus.NOT_FOUND: "Not Found",
    HTTPStatus.INTERNAL_SERVER_ERROR: "Internal Server Error",
}

# Header names as written on the wire. Lookups on requests are case-insensitive.
class HTTPHeader(StrEnum):
    CONTENT_TYPE = "Content-Type"
    CONTENT_LENGTH = "Content-Length"
    CONTENT_ENCODING = "Content-Encoding"
    USER_AGENT = "User-Agent"
    ACCEPT_ENCODING = "Accept-Encoding"

class ContentType(StrEnum):
    TEXT_PLAIN = "text/plain"
    APP_JSON = "application/json"
    TEXT_HTML = "text/html"
    APP_OCTET_STREAM = "application/octet-stream"
    IMAGE_JPEG = "image/jpeg"
    APP_XML = "application/xml"
    MULTIPART_FORM_DATA = "multipart/form-data"

GZIP = "gzip"

# Other Constants
CRLF = "\r\n"
HEADER_TERMINATOR = b"\r\n\r\n"
PROTOCOL_VERSION = HTTPVersion.HTTP_1_1
DEFAULT_PORT = 4221
DEFAULT_ADDRESS = "localhost"
DEFAULT_DIRECTORY = "."
SOCKET_TIMEOUT = 10 # seconds
ACCEPT_TIMEOUT = 0.5 # seconds, bounds how long stop() waits for the accept loop
RECV_BUFFER_SIZE = 65536
