# device_registry.py

import logging

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from errors import RegistryUnavailable
from switch_device import SwitchDevice

logger = logging.getLogger(__name__)


class DeviceRegistry:
    """
    Lesezugriff auf die DynamoDB-Tabelle mit den Geräten.
    Wird einmal pro Prozess erzeugt und bei Warm-Starts wiederverwendet.
    Die Verbindung entsteht beim ersten Zugriff.
    """

    def __init__(self, table=None, settings=None):
        self.table = table
        self.settings = settings

    @classmethod
    def from_settings(cls, settings):
        return cls(settings=settings)

    def _connect(self):
        # Keine Retries: ein fehlgeschlagener Aufruf lässt die Direktive scheitern
        config = Config(
            connect_timeout=self.settings.ddb_timeout,
            read_timeout=self.settings.ddb_timeout,
            retries={"max_attempts": 1, "mode": "standard"}
        )
        db_resource = boto3.resource("dynamodb", region_name=self.settings.region, config=config)
        logger.info(f"DynamoDB Tabelle: {self.settings.device_table}")
        return db_resource.Table(self.settings.device_table)

    def _get_table(self):
        if self.table is None:
            self.table = self._connect()
        return self.table

    def scan(self):
        """Alle Geräte in Scan-Reihenfolge. Eine leere Liste ist ein gültiges Ergebnis."""
        try:
            response = self._get_table().scan()
        except (BotoCoreError, ClientError) as e:
            raise RegistryUnavailable(f"Geräte-Tabelle nicht lesbar: {e}") from e

        items = response.get('Items')
        if items is None:
            raise RegistryUnavailable("Scan der Geräte-Tabelle lieferte kein Ergebnis")

        return [SwitchDevice(item) for item in items]

    def get(self, endpoint_id):
        try:
            response = self._get_table().get_item(Key={'id': endpoint_id})
        except (BotoCoreError, ClientError) as e:
            raise RegistryUnavailable(f"Geräte-Tabelle nicht lesbar: {e}") from e

        record = response.get('Item')
        if not record:
            logger.info(f"Device {endpoint_id} nicht in Datenbank gefunden")
            return None
        return SwitchDevice(record)

    def close(self):
        """Schließt den HTTP-Pool des boto3 Clients."""
        if self.table is not None:
            logger.debug("Schließe DynamoDB Client")
            self.table.meta.client.close()
            self.table = None
