# switch_device.py

from controllers import PowerController
from errors import InvalidDeviceRecord


class SwitchDevice:
    """
    Ein Eintrag aus der Geräte-Tabelle.
    Die Tabelle gehört nicht uns: wir lesen nur und prüfen beim Einlesen.
    """

    controllers = [PowerController]

    def __init__(self, record):
        if not isinstance(record, dict):
            raise InvalidDeviceRecord(f"Geräte-Eintrag ist kein Objekt: {type(record).__name__}")
        if not record.get('id'):
            # Nur Feldnamen melden, Werte können den apiKey enthalten
            raise InvalidDeviceRecord(f"Geräte-Eintrag ohne id (Felder: {sorted(record)})")

        self.endpoint_id = str(record['id'])
        self.name = record.get('name') or self.endpoint_id
        self.category = record.get('category') or 'OTHER'
        self.api_url = record.get('apiUrl') or ''
        self.api_key = record.get('apiKey') or ''

    def __repr__(self):
        # apiKey nie ausgeben
        return f"SwitchDevice(endpoint_id={self.endpoint_id!r}, name={self.name!r})"

    def require_control(self):
        """Ohne URL und Key kann das Gerät weder gelesen noch geschaltet werden."""
        if not self.api_url or not self.api_key:
            raise InvalidDeviceRecord(
                f"Gerät {self.endpoint_id} hat keine apiUrl oder keinen apiKey"
            )
        return self

    def get_discovery_capabilities(self):
        """Erstellt die Liste aller Capabilities für die Discovery."""
        caps = [{
            "type": "AlexaInterface",
            "interface": "Alexa",
            "version": "3"
        }]
        for ctrl in self.controllers:
            caps.append(ctrl.get_capability(proactive=False, retrievable=True))
        return caps

    def get_discovery_payload(self, manufacturer_name):
        """Erzeugt das Objekt für einen Endpunkt im Discovery-Payload."""
        return {
            "endpointId": self.endpoint_id,
            "manufacturerName": manufacturer_name,
            "friendlyName": self.name,
            "description": self.name,
            # https://developer.amazon.com/docs/alexa/device-apis/alexa-discovery.html#display-categories
            "displayCategories": [self.category],
            "capabilities": self.get_discovery_capabilities()
        }
