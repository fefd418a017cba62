# controllers/__init__.py

from .alexa_controller import AlexaController
from .power_controller import PowerController, PowerState

__all__ = [
    'AlexaController',
    'PowerController',
    'PowerState'
]
