# switch_client.py

import json
import logging
import urllib.error
import urllib.request

from controllers import PowerController
from errors import MalformedUpstreamResponse, UpstreamUnavailable

logger = logging.getLogger(__name__)


class SwitchClient:
    """
    HTTP-Zugriff auf die Steuer-URL eines Geräts.
    Jeder Aufruf hat ein eigenes Timeout, es gibt keine Retries.
    """

    def __init__(self, timeout=5.0):
        self.timeout = timeout

    def _request(self, device, method, body=None):
        device.require_control()

        data = None
        if body is not None:
            data = json.dumps(body).encode("utf-8")

        req = urllib.request.Request(device.api_url, data=data, method=method)
        req.add_header("Authorization", f"Api-Key {device.api_key}")
        req.add_header("Accept", "application/json")
        if data is not None:
            req.add_header("Content-Type", "application/json")

        logger.info(f"{method} {device.api_url} für {device.endpoint_id}")
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                return response.read()
        except urllib.error.HTTPError as e:
            raise UpstreamUnavailable(
                f"Gerät {device.endpoint_id} antwortet mit HTTP {e.code}"
            ) from e
        except urllib.error.URLError as e:
            raise UpstreamUnavailable(
                f"Gerät {device.endpoint_id} nicht erreichbar: {e.reason}"
            ) from e
        except (TimeoutError, OSError) as e:
            raise UpstreamUnavailable(
                f"Gerät {device.endpoint_id} nicht erreichbar: {e}"
            ) from e

    def get_power_state(self, device):
        """GET auf die Steuer-URL, erwartet {"state": "ON"|"OFF"}."""
        raw = self._request(device, "GET")

        try:
            body = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as e:
            raise MalformedUpstreamResponse(
                f"Gerät {device.endpoint_id} liefert kein JSON"
            ) from e

        if not isinstance(body, dict) or "state" not in body:
            raise MalformedUpstreamResponse(
                f"Gerät {device.endpoint_id} liefert kein Feld 'state'"
            )

        state = PowerController.parse_state(body["state"])
        if state is None:
            raise MalformedUpstreamResponse(
                f"Gerät {device.endpoint_id} liefert unbekannten Zustand: {body['state']!r}"
            )
        return state

    def set_power_state(self, device, state):
        """PUT auf die Steuer-URL mit {"state": "ON"|"OFF"}."""
        self._request(device, "PUT", {"state": state.value})
