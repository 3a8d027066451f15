from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, NamedTuple, Optional

from .config import ServerConfig
from .http_request import HTTPRequest
from .http_response import HTTPResponse
from .constants import HTTPMethod
from . import handlers

# Type alias for the handler function signature
HandlerFunction = Callable[[HTTPRequest, str, ServerConfig], HTTPResponse]


class MatchKind(Enum):
    EXACT = "exact"
    PREFIX = "prefix"


@dataclass(frozen=True)
class Route:
    """One entry of the routing table."""
    method: HTTPMethod
    kind: MatchKind
    pattern: str
    handler: HandlerFunction

    def match(self, method, path: str) -> Optional[str]:
        """Returns the captured path segment on a match, None otherwise.

        Exact routes capture the empty string; prefix routes capture whatever
        follows the prefix, which may itself be empty.
        """
        if method != self.method:
            return None
        if self.kind is MatchKind.EXACT:
            return "" if path == self.pattern else None
        if path.startswith(self.pattern):
            return path[len(self.pattern):]
        return None


class RouteMatch(NamedTuple):
    handler: HandlerFunction
    param: str


class Router:
    """Manages route definitions and dispatches requests to handlers."""

    def __init__(self):
        """Initializes the Router with an empty list of routes."""
        self._routes: List[Route] = []
        self.default_handler: HandlerFunction = handlers.handle_not_found

    @property
    def routes(self) -> List[Route]:
        return list(self._routes)

    def add_route(self, method: HTTPMethod, pattern: str, handler: HandlerFunction,
                  kind: MatchKind = MatchKind.EXACT):
        """
        Adds a route to the router.

        Routes are tried in the order they were added; the first match wins.

        Args:
            method: The HTTP method (e.g., HTTPMethod.GET).
            pattern: The full path for exact routes, or the prefix to strip
                for prefix routes (e.g., '/echo/').
            handler: The function to handle requests matching the method and path.
            kind: How ``pattern`` is compared against the request path.
        """
        if not pattern.startswith("/"):
            raise ValueError(f"Route pattern must start with '/': {pattern!r}")
        self._routes.append(Route(method, kind, pattern, handler))

    def find_handler(self, request: HTTPRequest) -> RouteMatch:
        """
        Finds the handler for the given request.

        Args:
            request: The incoming HTTPRequest object.

        Returns:
            The matching handler and its captured path segment, or the
            default (404) handler when no route matches.
        """
        for route in self._routes:
            param = route.match(request.method, request.path)
            if param is not None:
                return RouteMatch(route.handler, param)
        return RouteMatch(self.default_handler, "")


def default_router() -> Router:
    """Builds the router serving the built-in routes."""
    router = Router()
    router.add_route(HTTPMethod.GET, "/", handlers.handle_root)
    router.add_route(HTTPMethod.GET, "/echo/", handlers.handle_echo, MatchKind.PREFIX)
    router.add_route(HTTPMethod.GET, "/user-agent", handlers.handle_user_agent)
    router.add_route(HTTPMethod.GET, "/files/", handlers.handle_file_get, MatchKind.PREFIX)
    router.add_route(HTTPMethod.POST, "/files/", handlers.handle_file_post, MatchKind.PREFIX)
    return router
