# controllers/alexa_controller.py

from abc import ABC, abstractmethod


class AlexaController(ABC):
    @property
    @abstractmethod
    def namespace(self):
        pass

    @property
    @abstractmethod
    def directives(self):
        """Namen der Direktiven, die dieser Controller versteht."""
        pass

    @staticmethod
    @abstractmethod
    def get_capability(proactive=False, retrievable=True):
        """Gibt das Discovery-JSON zurück."""
        pass

    @staticmethod
    @abstractmethod
    def get_properties(value, time_of_sample):
        """Gibt die Liste der Properties für StateReport / Response zurück."""
        pass

    @staticmethod
    def handle_directive(name):
        """Übersetzt eine Direktive in den gewünschten Zielzustand."""
        return None
