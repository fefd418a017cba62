# config.py

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

DEFAULT_TABLE = "alexa_home_switch_devices"
DEFAULT_MANUFACTURER = "Alexa Smart Home Skill HTTP Switch"


def _env_flag(value):
    return str(value).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    device_table: str = DEFAULT_TABLE
    region: str = None
    switch_timeout: float = 5.0
    ddb_timeout: float = 3.0
    time_zone: str = "UTC"
    manufacturer_name: str = DEFAULT_MANUFACTURER
    detailed_errors: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None):
        """Liest die Konfiguration aus den Umgebungsvariablen der Lambda."""
        env = os.environ if environ is None else environ
        return cls(
            device_table=env.get("DEVICE_TABLE", DEFAULT_TABLE),
            region=env.get("AWS_REGION") or env.get("AWS_DEFAULT_REGION"),
            switch_timeout=float(env.get("SWITCH_TIMEOUT", "5")),
            ddb_timeout=float(env.get("DDB_TIMEOUT", "3")),
            time_zone=env.get("TIME_ZONE", "UTC"),
            manufacturer_name=env.get("MANUFACTURER_NAME", DEFAULT_MANUFACTURER),
            detailed_errors=_env_flag(env.get("DETAILED_ERRORS", "false")),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )

    def tzinfo(self):
        if self.time_zone.upper() == "UTC":
            return timezone.utc
        return ZoneInfo(self.time_zone)

    def clock(self):
        """Uhr für timeOfSample, explizit in der konfigurierten Zeitzone."""
        tz = self.tzinfo()
        return lambda: datetime.now(tz)
