# test_switch_client.py

import io
import json
import urllib.error

import pytest

import switch_client
from controllers import PowerState
from errors import InvalidDeviceRecord, MalformedUpstreamResponse, UpstreamUnavailable
from switch_client import SwitchClient
from switch_device import SwitchDevice

DEVICE = SwitchDevice({"id": "dev-1", "name": "Laborlicht", "apiUrl": "http://x/api", "apiKey": "k1"})


class FakeResponse(io.BytesIO):
    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


@pytest.fixture
def urlopen(monkeypatch):
    """Ersetzt urlopen und merkt sich alle Requests."""
    calls = []
    replies = []

    def fake_urlopen(req, timeout=None):
        calls.append((req, timeout))
        reply = replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return FakeResponse(reply)

    monkeypatch.setattr(switch_client.urllib.request, "urlopen", fake_urlopen)
    fake_urlopen.calls = calls
    fake_urlopen.replies = replies
    return fake_urlopen


def test_get_power_state(urlopen):
    urlopen.replies.append(b'{"state": "ON"}')

    state = SwitchClient(timeout=2.5).get_power_state(DEVICE)

    assert state is PowerState.ON
    req, timeout = urlopen.calls[0]
    assert req.get_method() == "GET"
    assert req.full_url == "http://x/api"
    assert req.get_header("Authorization") == "Api-Key k1"
    assert req.data is None
    assert timeout == 2.5


def test_set_power_state(urlopen):
    urlopen.replies.append(b'')

    SwitchClient().set_power_state(DEVICE, PowerState.ON)

    req, timeout = urlopen.calls[0]
    assert req.get_method() == "PUT"
    assert req.full_url == "http://x/api"
    assert req.get_header("Authorization") == "Api-Key k1"
    assert req.get_header("Content-type") == "application/json"
    assert json.loads(req.data) == {"state": "ON"}
    assert timeout == 5.0


@pytest.mark.parametrize("body", [b'{"power": "ON"}', b'not json', b'["ON"]', b'{"state": "DIMMED"}'])
def test_malformed_state_response(urlopen, body):
    urlopen.replies.append(body)

    with pytest.raises(MalformedUpstreamResponse):
        SwitchClient().get_power_state(DEVICE)


@pytest.mark.parametrize("error", [
    urllib.error.HTTPError("http://x/api", 503, "Service Unavailable", {}, None),
    urllib.error.URLError("connection refused"),
    TimeoutError("timed out"),
])
def test_unreachable_device(urlopen, error):
    urlopen.replies.append(error)

    with pytest.raises(UpstreamUnavailable):
        SwitchClient().get_power_state(DEVICE)


def test_http_error_message_contains_status(urlopen):
    urlopen.replies.append(urllib.error.HTTPError("http://x/api", 401, "Unauthorized", {}, None))

    with pytest.raises(UpstreamUnavailable, match="HTTP 401"):
        SwitchClient().set_power_state(DEVICE, PowerState.OFF)


def test_device_without_url_is_never_called(urlopen):
    device = SwitchDevice({"id": "dev-2", "apiKey": "k2"})

    with pytest.raises(InvalidDeviceRecord):
        SwitchClient().get_power_state(device)
    assert urlopen.calls == []
