from datetime import timedelta, timezone

from config import DEFAULT_TABLE, Settings


def test_defaults():
    settings = Settings.from_env({})

    assert settings.device_table == DEFAULT_TABLE
    assert settings.switch_timeout == 5.0
    assert settings.detailed_errors is False
    assert settings.log_level == "INFO"
    assert settings.region is None


def test_from_env():
    settings = Settings.from_env({
        "DEVICE_TABLE": "geraete",
        "AWS_REGION": "eu-central-1",
        "SWITCH_TIMEOUT": "1.5",
        "DDB_TIMEOUT": "2",
        "TIME_ZONE": "Asia/Tokyo",
        "MANUFACTURER_NAME": "redfive",
        "DETAILED_ERRORS": "true",
        "LOG_LEVEL": "debug"
    })

    assert settings.device_table == "geraete"
    assert settings.region == "eu-central-1"
    assert settings.switch_timeout == 1.5
    assert settings.ddb_timeout == 2.0
    assert settings.manufacturer_name == "redfive"
    assert settings.detailed_errors is True
    assert settings.log_level == "DEBUG"


def test_clock_uses_configured_zone():
    now = Settings(time_zone="Asia/Tokyo").clock()()
    assert now.utcoffset() == timedelta(hours=9)

    assert Settings().clock()().tzinfo is timezone.utc
