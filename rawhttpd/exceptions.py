from .constants import HTTPStatus, STATUS_TEXT

class HTTPException(Exception):
    """Base class for HTTP related exceptions."""
    def __init__(self, status_code: HTTPStatus, message: str | None = None):
        self.status_code = status_code
        self.message = message or STATUS_TEXT.get(status_code, "Unknown Error")
        super().__init__(f"{self.status_code} {self.message}")

class HTTPBadRequestError(HTTPException):
    """Exception for 400 Bad Request."""
    def __init__(self, message: str | None = None):
        super().__init__(HTTPStatus.BAD_REQUEST, message)

class HTTPNotFoundError(HTTPException):
    """Exception for 404 Not Found."""
    def __init__(self, message: str | None = None):
        super().__init__(HTTPStatus.NOT_FOUND, message)

class HTTPInternalServerError(HTTPException):
    """Exception for 500 Internal Server Error."""
    def __init__(self, message: str | None = None):
        super().__init__(HTTPStatus.INTERNAL_SERVER_ERROR, message)

class MalformedRequestLine(HTTPBadRequestError):
    """The request line does not carry method, path and version."""

class MalformedHeaderLine(HTTPBadRequestError):
    """A header line has no ':' separator (strict parsing only)."""

class RouteNotFound(HTTPNotFoundError):
    """No route matches the request's method and path."""

class FileReadError(HTTPNotFoundError):
    """A file under the static root could not be read.

    Every cause (missing file, directory, permissions, a path outside the
    root) is reported to the client as 404.
    """

class FileWriteError(HTTPInternalServerError):
    """A file under the static root could not be written."""
