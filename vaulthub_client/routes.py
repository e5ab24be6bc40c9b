"""
Route table — declarative list of views and their access policy.

Each :class:`Route` carries a :class:`RouteMeta` policy read by the navigation
guard. The table is static and owned by the presentation layer.
"""
from collections.abc import Iterable, Iterator
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import RouteNotFound
from .models import Role


class RouteMeta(BaseModel):
    """Access policy declared by a route."""

    model_config = ConfigDict(frozen=True)

    requires_auth: bool = False
    requires_role: Optional[Union[Role, str]] = None
    skip_security_pin_check: bool = False


class Route(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    name: Optional[str] = None
    meta: RouteMeta = Field(default_factory=RouteMeta)
    redirect: Optional[str] = None


class RouteTable:
    """Exact-path lookup over a list of routes."""

    def __init__(self, routes: Iterable[Route]):
        self._routes: dict[str, Route] = {}
        for route in routes:
            if route.path in self._routes:
                raise ValueError(f"Duplicate route path {route.path!r}")
            self._routes[route.path] = route

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes.values())

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, path: object) -> bool:
        return self._normalize(str(path)) in self._routes

    @staticmethod
    def _normalize(path: str) -> str:
        path = path.split("?", 1)[0].split("#", 1)[0] or "/"
        if len(path) > 1:
            path = path.rstrip("/")
        return path

    def resolve(self, path: str) -> Route:
        """Return the route declared for ``path``.

        Query strings, fragments and trailing slashes are ignored.

        Raises:
            RouteNotFound: if no route is declared for the path.
        """
        try:
            return self._routes[self._normalize(path)]
        except KeyError:
            raise RouteNotFound(path) from None


DEFAULT_ROUTES = RouteTable([
    Route(path="/login", name="Login"),
    Route(path="/register", name="Register"),
    Route(path="/forgot-password", name="ForgotPassword"),
    Route(path="/reset-password", name="ResetPassword"),
    Route(
        path="/setup-security-pin",
        name="SetupSecurityPin",
        meta=RouteMeta(requires_auth=True, skip_security_pin_check=True),
    ),
    Route(path="/reset-security-pin", name="ResetSecurityPin"),
    Route(path="/", redirect="/vault"),
    Route(
        path="/vault",
        name="Vault",
        meta=RouteMeta(requires_auth=True),
    ),
    Route(
        path="/user",
        name="User",
        meta=RouteMeta(requires_auth=True),
    ),
    Route(
        path="/system/config",
        name="SystemConfig",
        meta=RouteMeta(requires_auth=True, requires_role=Role.ADMIN),
    ),
])
