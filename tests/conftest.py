import json

import pytest

from roster.client.cache import QueryCache
from roster.client.http import ApiClient
from roster.client.notifications import Notifier
from roster.config import RosterConfig
from roster.server import create_app
from roster.server.store import RosterStore


class FlaskTestResponse:
    """requests.Response look-alike over a Flask test response."""

    def __init__(self, response):
        self.status_code = response.status_code
        self.headers = response.headers
        self.content = response.get_data()
        self.text = response.get_data(as_text=True)
        self.reason = response.status.split(" ", 1)[-1]
        self.ok = self.status_code < 400

    def json(self):
        if not self.content:
            raise ValueError("No JSON body")
        return json.loads(self.text)


class FlaskTestSession:
    """Minimal requests.Session stand-in that routes through app.test_client()."""

    def __init__(self, client):
        self.client = client
        self.sent: list[tuple[str, str, object]] = []

    def request(self, method, url, json=None, timeout=None):
        self.sent.append((method, url, json))
        return FlaskTestResponse(self.client.open(url, method=method, json=json))

    def sent_with(self, method: str) -> list:
        return [(url, body) for m, url, body in self.sent if m == method]


class FakeTimer:
    def __init__(self, interval, function):
        self.interval = interval
        self.function = function
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function()


class FakeTimerFactory:
    """Records timers instead of scheduling them; tests fire them by hand."""

    def __init__(self):
        self.timers: list[FakeTimer] = []

    def __call__(self, interval, function):
        timer = FakeTimer(interval, function)
        self.timers.append(timer)
        return timer

    @property
    def live(self) -> list[FakeTimer]:
        return [t for t in self.timers if t.started and not t.cancelled]

    def fire_all(self) -> None:
        for timer in self.live:
            timer.fire()


@pytest.fixture
def store(tmp_path):
    """Store persisted under tmp_path with one admin and one member."""
    store = RosterStore(tmp_path / "roster.json")
    store.create_user("Jane", "Smith", is_admin=True)
    store.create_user("John", "Doe")
    return store


@pytest.fixture
def app(store, tmp_path):
    """Create and configure a Flask app for testing."""
    config = RosterConfig(secret_key="test-secret", data_dir=tmp_path)
    return create_app(config, store=store)


def login(client, user_id: int) -> None:
    with client.session_transaction() as sess:
        sess["user_id"] = user_id


@pytest.fixture
def admin_session(app):
    client = app.test_client()
    login(client, 1)
    return FlaskTestSession(client)


@pytest.fixture
def member_session(app):
    client = app.test_client()
    login(client, 2)
    return FlaskTestSession(client)


@pytest.fixture
def admin_api(admin_session):
    return ApiClient(session=admin_session)


@pytest.fixture
def member_api(member_session):
    return ApiClient(session=member_session)


@pytest.fixture
def cache():
    return QueryCache()


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def timers():
    return FakeTimerFactory()
