# alexa_response.py

import uuid


def format_time_of_sample(moment):
    """ISO 8601 mit Millisekunden, z.B. 2024-05-01T12:00:00.000+09:00"""
    return moment.isoformat(timespec="milliseconds")


class AlexaResponse:
    """
    Baut die Antwort-Struktur (event / context) für die Alexa Smart Home API v3.
    Jede Instanz bekommt eine eigene messageId.
    """

    def __init__(self, namespace="Alexa", name="Response", correlation_token=None,
                 endpoint_id=None, payload=None):
        self.context_properties = []
        self.payload_endpoints = []

        header = {
            "namespace": namespace,
            "name": name,
            "messageId": str(uuid.uuid4()),
            "payloadVersion": "3"
        }
        if correlation_token is not None:
            header["correlationToken"] = correlation_token

        self.event = {"header": header}
        if endpoint_id is not None:
            self.event["endpoint"] = {"endpointId": endpoint_id}
        self.event["payload"] = payload if payload is not None else {}

    def add_context_property(self, namespace, name, value, timeOfSample=None,
                             uncertaintyInMilliseconds=0):
        prop = {
            "namespace": namespace,
            "name": name,
            "value": value,
            "uncertaintyInMilliseconds": uncertaintyInMilliseconds
        }
        if timeOfSample is not None:
            prop["timeOfSample"] = timeOfSample
        self.context_properties.append(prop)

    def set_payload_endpoints(self, endpoints):
        self.payload_endpoints = list(endpoints)

    def get(self):
        response = {"event": self.event}

        # Discovery: Endpunkte auch dann setzen, wenn die Liste leer ist
        if self.event["header"]["name"] == "Discover.Response":
            self.event["payload"]["endpoints"] = self.payload_endpoints

        if self.context_properties:
            response["context"] = {"properties": self.context_properties}

        return response
