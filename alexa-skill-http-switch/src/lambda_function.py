# lambda_function.py
import atexit
import copy
import json
import logging

from alexa_auth import handle_accept_grant
from alexa_response import AlexaResponse, format_time_of_sample
from config import Settings
from controllers import PowerController
from device_registry import DeviceRegistry
from directives import (
    AcceptGrant, Discover, PowerChange, ReportState, get_endpoint_id, get_header, parse_directive
)
from errors import DeviceNotFound, SkillError
from switch_client import SwitchClient

settings = Settings.from_env()

logger = logging.getLogger()
logger.setLevel(settings.log_level)

# Einmal pro Prozess, bei Warm-Starts wiederverwendet
_registry = None


def get_registry():
    global _registry
    if _registry is None:
        _registry = DeviceRegistry.from_settings(settings)
        atexit.register(shutdown)
    return _registry


def shutdown():
    global _registry
    if _registry is not None:
        _registry.close()
        _registry = None


def handle_discovery(directive, registry, manufacturer_name):
    """
    Erstellt die Antwort auf den Alexa.Discovery / Discover Request.
    Jeder Eintrag der Tabelle wird ein Endpunkt, in Scan-Reihenfolge.
    """
    adr = AlexaResponse(namespace="Alexa.Discovery", name="Discover.Response")

    endpoints = [device.get_discovery_payload(manufacturer_name) for device in registry.scan()]
    logger.info(f"Discovery: {len(endpoints)} Geräte")

    adr.set_payload_endpoints(endpoints)
    return adr.get()


def _lookup(registry, endpoint_id):
    device = registry.get(endpoint_id)
    if device is None:
        raise DeviceNotFound(endpoint_id)
    return device.require_control()


def _state_response(name, directive, state, clock):
    adr = AlexaResponse(
        namespace="Alexa",
        name=name,
        correlation_token=directive.correlation_token,
        endpoint_id=directive.endpoint_id
    )
    for prop in PowerController.get_properties(state, format_time_of_sample(clock())):
        adr.add_context_property(**prop)
    return adr.get()


def handle_report_state(directive, registry, switch_client, clock):
    """
    Antwortet auf Alexa.ReportState mit dem Zustand, den das Gerät selbst meldet.
    https://developer.amazon.com/docs/alexa/device-apis/alexa-powercontroller.html#state-report
    """
    device = _lookup(registry, directive.endpoint_id)
    state = switch_client.get_power_state(device)
    return _state_response("StateReport", directive, state, clock)


def handle_power_change(directive, registry, switch_client, clock):
    """
    TurnOn / TurnOff. Der neue Zustand wird nicht zurückgelesen,
    die Antwort enthält den angeforderten Zustand.
    https://developer.amazon.com/docs/alexa/device-apis/alexa-powercontroller.html#directives
    """
    device = _lookup(registry, directive.endpoint_id)
    switch_client.set_power_state(device, directive.state)
    return _state_response("Response", directive, directive.state, clock)


def handle_error(request, error, detailed_errors=False):
    """Jeder Fehler wird zu einer Alexa.ErrorResponse."""
    logger.error(f"[error] {error}")

    error_type = "INTERNAL_ERROR"
    if detailed_errors and isinstance(error, SkillError):
        error_type = error.alexa_error_type

    adr = AlexaResponse(
        namespace="Alexa",
        name="ErrorResponse",
        endpoint_id=get_endpoint_id(request),
        payload={"type": error_type, "message": str(error)}
    )
    return adr.get()


def dispatch(request, registry, switch_client, clock, manufacturer_name, detailed_errors=False):
    """Genau ein Handler pro Direktive. Fehler kommen immer als ErrorResponse zurück."""
    header = get_header(request)
    logger.info(f"[request] {header.get('namespace')} {header.get('name')}")

    try:
        directive = parse_directive(request)

        if isinstance(directive, Discover):
            response = handle_discovery(directive, registry, manufacturer_name)
        elif isinstance(directive, AcceptGrant):
            response = handle_accept_grant(directive)
        elif isinstance(directive, ReportState):
            response = handle_report_state(directive, registry, switch_client, clock)
        elif isinstance(directive, PowerChange):
            response = handle_power_change(directive, registry, switch_client, clock)
        else:
            raise TypeError(f"Unbekannte Direktive: {directive!r}")
    except SkillError as e:
        response = handle_error(request, e, detailed_errors)
    except Exception as e:
        logger.exception("Unerwarteter Fehler")
        response = handle_error(request, e, detailed_errors)

    response_header = response["event"]["header"]
    logger.info(f"[response] {response_header['namespace']} {response_header['name']}")
    return response


def redact_request(request):
    """Kopie des Requests ohne Bearer-Tokens und Grant-Code, für das Log."""
    redacted = copy.deepcopy(request)
    directive = redacted.get("directive") if isinstance(redacted, dict) else None
    if not isinstance(directive, dict):
        return redacted

    for section in (directive.get("endpoint"), directive.get("payload")):
        if not isinstance(section, dict):
            continue
        for key in ("scope", "grantee"):
            if isinstance(section.get(key), dict) and "token" in section[key]:
                section[key]["token"] = "***"
        if isinstance(section.get("grant"), dict) and "code" in section["grant"]:
            section["grant"]["code"] = "***"
    return redacted


def lambda_handler(request, context):
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("FULL REQUEST: %s", json.dumps(redact_request(request), default=str))

    if "directive" not in request:
        return {}

    return dispatch(
        request,
        registry=get_registry(),
        switch_client=SwitchClient(timeout=settings.switch_timeout),
        clock=settings.clock(),
        manufacturer_name=settings.manufacturer_name,
        detailed_errors=settings.detailed_errors
    )
