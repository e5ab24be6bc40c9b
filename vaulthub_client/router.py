import logging
from typing import Optional

from .exceptions import NavigationError
from .guard import NavigationGuard
from .routes import Route, RouteTable

logger = logging.getLogger("vaulthub.router")


class Router:
    """Runs every view transition through the navigation guard.

    Static ``redirect`` routes are followed without a guard run; guard
    redirects start a new evaluation for the redirect target. Navigations are
    not cancellable: concurrent ones evaluate independently and the one that
    completes last decides the current route.
    """

    def __init__(
        self,
        routes: RouteTable,
        guard: NavigationGuard,
        max_redirects: int = 10,
    ):
        self._routes = routes
        self._guard = guard
        self._max_redirects = max_redirects
        self._current: Optional[Route] = None
        self._pending: set[str] = set()
        self.history: list[str] = []

    def __repr__(self) -> str:
        return f'<Router current={self.current_path!r} pending={sorted(self._pending)}>'

    @property
    def routes(self) -> RouteTable:
        return self._routes

    @property
    def current(self) -> Optional[Route]:
        return self._current

    @property
    def current_path(self) -> Optional[str]:
        return self._current.path if self._current else None

    async def push(self, path: str) -> Optional[Route]:
        """Navigate to ``path``.

        Navigating to the current route, or to a route whose navigation is
        already in flight, does nothing.

        Returns:
            The route committed as current.

        Raises:
            RouteNotFound: the path, or a redirect target, is not declared.
            NavigationError: the redirect chain exceeded ``max_redirects``.
        """
        route = self._routes.resolve(path)
        if route.path == self.current_path or route.path in self._pending:
            logger.debug("Navigation to %s ignored", route.path)
            return self._current
        self._pending.add(route.path)
        try:
            target = await self._resolve(route)
        finally:
            self._pending.discard(route.path)
        self._commit(target)
        return target

    replace = push

    async def _resolve(self, route: Route) -> Route:
        hops = 0
        while True:
            if route.redirect:
                next_path = route.redirect
            else:
                decision = await self._guard.evaluate(route)
                if decision.allowed:
                    return route
                logger.info(
                    "Navigation to %s redirected to %s (%s)",
                    route.path, decision.redirect, decision.reason,
                )
                next_path = decision.redirect
            hops += 1
            if hops > self._max_redirects:
                raise NavigationError(
                    f"Too many redirects while navigating to {route.path}"
                )
            route = self._routes.resolve(next_path)

    def _commit(self, route: Route) -> None:
        if route.path == self.current_path:
            return
        self._current = route
        self.history.append(route.path)
        logger.debug("Navigated to %s", route.path)
