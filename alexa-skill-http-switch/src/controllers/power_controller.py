# controllers/power_controller.py

import enum
import logging
from .alexa_controller import AlexaController

logger = logging.getLogger(__name__)


class PowerState(str, enum.Enum):
    ON = "ON"
    OFF = "OFF"


class PowerController(AlexaController):
    namespace = "Alexa.PowerController"
    directives = ("TurnOn", "TurnOff")

    @staticmethod
    def get_capability(proactive=False, retrievable=True):
        return {
            "type": "AlexaInterface",
            "interface": "Alexa.PowerController",
            "version": "3",
            "properties": {
                "supported": [{"name": "powerState"}],
                "proactivelyReported": proactive,
                "retrievable": retrievable
            }
        }

    @staticmethod
    def get_properties(value, time_of_sample):
        return [{
            "namespace": "Alexa.PowerController",
            "name": "powerState",
            "value": PowerState(value).value,
            "timeOfSample": time_of_sample,
            "uncertaintyInMilliseconds": 0
        }]

    @staticmethod
    def handle_directive(name):
        logger.info(f"PowerController: Handling '{name}'")

        if name not in PowerController.directives:
            logger.warning(f"PowerController: Directive '{name}' not supported.")
            return None

        return PowerState.ON if name == "TurnOn" else PowerState.OFF

    @staticmethod
    def parse_state(raw):
        """Liest den Zustand, den der Switch liefert. Unbekannte Werte -> None."""
        try:
            return PowerState(raw)
        except (ValueError, TypeError):
            return None
