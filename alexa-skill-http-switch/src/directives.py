# directives.py

from dataclasses import dataclass
from typing import Optional, Union

from controllers import PowerController, PowerState
from errors import InvalidDirective, UnsupportedDirective


@dataclass(frozen=True)
class Discover:
    pass


@dataclass(frozen=True)
class AcceptGrant:
    pass


@dataclass(frozen=True)
class ReportState:
    endpoint_id: str
    correlation_token: Optional[str] = None


@dataclass(frozen=True)
class PowerChange:
    endpoint_id: str
    state: PowerState
    correlation_token: Optional[str] = None


Directive = Union[Discover, AcceptGrant, ReportState, PowerChange]


def _get_directive(request):
    directive = request.get("directive") if isinstance(request, dict) else None
    return directive if isinstance(directive, dict) else {}


def get_header(request):
    header = _get_directive(request).get("header")
    return header if isinstance(header, dict) else {}


def get_endpoint_id(request):
    """endpointId aus dem Request, falls vorhanden. Sonst None."""
    endpoint = _get_directive(request).get("endpoint")
    if not isinstance(endpoint, dict):
        return None
    endpoint_id = endpoint.get("endpointId")
    return endpoint_id if isinstance(endpoint_id, str) and endpoint_id else None


def _require_endpoint_id(request, namespace, name):
    endpoint_id = get_endpoint_id(request)
    if endpoint_id is None:
        raise InvalidDirective(f"{namespace}.{name} ohne endpoint.endpointId")
    return endpoint_id


def _parse_discover(request, header):
    return Discover()


def _parse_accept_grant(request, header):
    return AcceptGrant()


def _parse_report_state(request, header):
    return ReportState(
        endpoint_id=_require_endpoint_id(request, header["namespace"], header["name"]),
        correlation_token=header.get("correlationToken")
    )


def _parse_power_change(request, header):
    return PowerChange(
        endpoint_id=_require_endpoint_id(request, header["namespace"], header["name"]),
        state=PowerController.handle_directive(header["name"]),
        correlation_token=header.get("correlationToken")
    )


DIRECTIVE_MAPPING = {
    ("Alexa.Discovery", "Discover"): _parse_discover,
    ("Alexa.Authorization", "AcceptGrant"): _parse_accept_grant,
    ("Alexa", "ReportState"): _parse_report_state,
    ("Alexa.PowerController", "TurnOn"): _parse_power_change,
    ("Alexa.PowerController", "TurnOff"): _parse_power_change,
}


def parse_directive(request):
    """
    Übersetzt den Alexa-Request in genau eine der unterstützten Direktiven.
    Alles andere ist eine UnsupportedDirective.
    """
    header = get_header(request)
    namespace = header.get("namespace")
    name = header.get("name")

    parser = DIRECTIVE_MAPPING.get((namespace, name))
    if parser is None:
        raise UnsupportedDirective(namespace, name)
    return parser(request, header)
