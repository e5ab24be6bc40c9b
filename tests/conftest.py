"""Shared fixtures: recording notifier, in-memory stores and a fake VaultHub API."""
import asyncio

import pytest
from aiohttp import web

from vaulthub_client.api.auth import CURRENT_USER_PATH
from vaulthub_client.api.keys import SECURITY_PIN_STATUS_PATH
from vaulthub_client.client import CallResult
from vaulthub_client.conf import ClientConfig
from vaulthub_client.context import VaultContext
from vaulthub_client.session import SessionState
from vaulthub_client.storage import CredentialStore, MemoryStorage


class RecordingNotifier:
    """Notifier keeping every notice for assertions."""

    def __init__(self):
        self.errors = []
        self.warnings = []
        self.successes = []

    def error(self, message):
        self.errors.append(message)

    def warning(self, message):
        self.warnings.append(message)

    def success(self, message):
        self.successes.append(message)


class FakeClient:
    """Stands in for TransportClient in guard and router tests.

    ``responses`` maps an API path to the CallResult returned for it.
    """

    def __init__(self, session, responses=None):
        self.session = session
        self.responses = dict(responses or {})
        self.calls = []

    async def call(self, method, path, payload=None, params=None, notify=True):
        self.calls.append((method, path, notify))
        return self.responses[path]


def envelope(data=None, code=200, message="success"):
    return {"code": code, "data": data, "message": message}


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def credentials(storage):
    return CredentialStore(storage)


@pytest.fixture
def session(credentials):
    return SessionState(credentials)


@pytest.fixture
def config():
    return ClientConfig(base_url="http://vault.test/api", timeout=1)


# --- Fake VaultHub service ---

def build_service() -> web.Application:
    app = web.Application()
    app["requests"] = []
    app["state"] = {"pin": True, "role": "user"}

    async def record(request: web.Request) -> None:
        body = await request.read()
        request.app["requests"].append({
            "method": request.method,
            "path": request.path,
            "query": dict(request.query),
            "authorization": request.headers.get("Authorization"),
            "body": body,
        })

    async def echo(request: web.Request) -> web.Response:
        await record(request)
        payload = await request.json() if await request.read() else None
        return web.json_response(envelope({
            "method": request.method,
            "path": request.path,
            "query": dict(request.query),
            "authorization": request.headers.get("Authorization"),
            "payload": payload,
        }))

    async def login(request: web.Request) -> web.Response:
        await record(request)
        body = await request.json()
        if body.get("password") != "S3cret!pass":
            return web.json_response(
                envelope(code=20004, message="invalid credentials")
            )
        return web.json_response(envelope({
            "token": "token-for-" + body["username"],
            "user": {"id": 1, "username": body["username"], "role": request.app["state"]["role"]},
        }))

    async def current_user(request: web.Request) -> web.Response:
        await record(request)
        return web.json_response(envelope({
            "id": 1, "uuid": "u-1", "username": "alice", "role": request.app["state"]["role"],
        }))

    async def pin_status(request: web.Request) -> web.Response:
        await record(request)
        return web.json_response(envelope({"has_security_pin": request.app["state"]["pin"]}))

    async def logout(request: web.Request) -> web.Response:
        await record(request)
        status = request.app["state"].get("logout_status", 200)
        if status != 200:
            return web.json_response({"message": "logout failed"}, status=status)
        return web.json_response(envelope(None))

    async def envelope_401(request: web.Request) -> web.Response:
        await record(request)
        return web.json_response(envelope(code=401, message="expired"))

    async def envelope_error(request: web.Request) -> web.Response:
        await record(request)
        return web.json_response(envelope(code=40001, message="secret not found"))

    async def status(request: web.Request) -> web.Response:
        await record(request)
        code = int(request.match_info["code"])
        return web.json_response({"message": "custom failure"}, status=code)

    async def slow(request: web.Request) -> web.Response:
        await asyncio.sleep(2)
        return web.json_response(envelope(None))

    async def not_json(request: web.Request) -> web.Response:
        return web.Response(text="<html>maintenance</html>", content_type="text/html")

    app.router.add_post("/api/v1/auth/login", login)
    app.router.add_post("/api/v1/auth/logout", logout)
    app.router.add_get("/api/v1/auth/current", current_user)
    app.router.add_get("/api/v1/auth/security-pin-status", pin_status)
    app.router.add_get("/api/test/envelope-401", envelope_401)
    app.router.add_get("/api/test/envelope-error", envelope_error)
    app.router.add_get("/api/test/status/{code}", status)
    app.router.add_get("/api/test/slow", slow)
    app.router.add_get("/api/test/not-json", not_json)
    app.router.add_route("*", "/api/{tail:.*}", echo)
    return app


@pytest.fixture
async def service(aiohttp_server):
    return await aiohttp_server(build_service())


@pytest.fixture
async def context(service, notifier):
    config = ClientConfig(base_url=str(service.make_url("/api")), timeout=0.5)
    ctx = VaultContext(config, storage=MemoryStorage(), notifier=notifier)
    await ctx.start()
    yield ctx
    await ctx.close()


@pytest.fixture
def fake_client(session):
    """FakeClient answering as a plain user with a security PIN set."""
    return FakeClient(session, {
        CURRENT_USER_PATH: CallResult(data={"id": 2, "username": "bob", "role": "user"}),
        SECURITY_PIN_STATUS_PATH: CallResult(data={"has_security_pin": True}),
    })
