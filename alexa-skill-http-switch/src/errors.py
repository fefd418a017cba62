# errors.py


class SkillError(Exception):
    """Basisklasse für alle Fehler, die der Skill selbst erkennt."""
    alexa_error_type = "INTERNAL_ERROR"


class UnsupportedDirective(SkillError):
    alexa_error_type = "INVALID_DIRECTIVE"

    def __init__(self, namespace, name):
        super().__init__(f"namespace: {namespace}, name: {name}")
        self.namespace = namespace
        self.name = name


class InvalidDirective(SkillError):
    alexa_error_type = "INVALID_DIRECTIVE"


class RegistryUnavailable(SkillError):
    pass


class DeviceNotFound(SkillError):
    alexa_error_type = "NO_SUCH_ENDPOINT"

    def __init__(self, endpoint_id):
        super().__init__(f"Gerät nicht gefunden: {endpoint_id}")
        self.endpoint_id = endpoint_id


class InvalidDeviceRecord(SkillError):
    pass


class UpstreamUnavailable(SkillError):
    alexa_error_type = "ENDPOINT_UNREACHABLE"


class MalformedUpstreamResponse(SkillError):
    pass
