"""Tests for the REST API client."""

from unittest.mock import Mock

import pytest
import requests

from roster.client.http import ApiClient
from roster.config import RosterConfig
from roster.exceptions import ApiError, NetworkError


def make_response(status_code=200, json_data=None, text="", content_type="application/json"):
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.text = text
    response.content = text.encode()
    response.reason = "Reason"
    response.headers = {"Content-Type": content_type}
    if json_data is None:
        response.json.side_effect = ValueError("No JSON")
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def session():
    return Mock()


@pytest.fixture
def client(session):
    return ApiClient("http://roster.test/", session=session, timeout=3)


def test_get_decodes_json(client, session):
    session.request.return_value = make_response(
        json_data={"nameFormat": "full"}, text='{"nameFormat": "full"}'
    )
    assert client.get("/api/admin/settings") == {"nameFormat": "full"}
    session.request.assert_called_once_with(
        "GET", "http://roster.test/api/admin/settings", timeout=3
    )


def test_put_sends_json_body(client, session):
    session.request.return_value = make_response(json_data={}, text="{}")
    client.put("/api/admin/settings", {"deadlineDay": 15})
    session.request.assert_called_once_with(
        "PUT", "http://roster.test/api/admin/settings", timeout=3, json={"deadlineDay": 15}
    )


def test_empty_response_returns_none(client, session):
    session.request.return_value = make_response(status_code=204, content_type="text/html")
    assert client.delete("/api/admin/special-days/1") is None


def test_non_json_response_returns_text(client, session):
    session.request.return_value = make_response(text="pong", content_type="text/plain")
    assert client.get("/ping") == "pong"


def test_error_uses_server_message(client, session):
    session.request.return_value = make_response(
        status_code=400,
        json_data={"message": "Deadline day must be between 1 and 28"},
        text='{"message": "Deadline day must be between 1 and 28"}',
    )
    with pytest.raises(ApiError) as exc_info:
        client.put("/api/admin/settings", {"deadlineDay": 40})
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Deadline day must be between 1 and 28"


def test_error_without_json_keeps_body(client, session):
    session.request.return_value = make_response(
        status_code=500, text="Internal Server Error", content_type="text/html"
    )
    with pytest.raises(ApiError) as exc_info:
        client.get("/api/special-days")
    assert exc_info.value.message is None
    assert str(exc_info.value) == "500: Internal Server Error"


def test_transport_failure_raises_network_error(client, session):
    session.request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(NetworkError):
        client.get("/api/special-days")


def test_from_config_sets_session_cookie():
    config = RosterConfig(
        api_base_url="http://roster.test",
        session_cookie="signed-value",
        session_cookie_name="connect.sid",
        request_timeout=4,
    )
    client = ApiClient.from_config(config)
    assert client.base_url == "http://roster.test"
    assert client.timeout == 4
    assert client.session.cookies.get("connect.sid") == "signed-value"
