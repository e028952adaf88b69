"""Tests for connector constants."""

from etl_drone_sense.constants import (
    DRONE_COT_TYPE,
    DRONE_SENSE_API_KEY_HEADER,
    DRONE_SENSE_URL,
    EARTH_RADIUS_METERS,
    LAYER_COT_PATH,
    SERVICE_NAME,
    SERVICE_VERSION,
)


class TestServiceConstants:
    def test_service_name(self):
        assert SERVICE_NAME == "etl-drone-sense"

    def test_service_version(self):
        assert SERVICE_VERSION == "0.1.0"


class TestDroneSenseConstants:
    def test_endpoint(self):
        assert DRONE_SENSE_URL == "https://external.dronesense.com/v1/drones/with-sensors"

    def test_api_key_header(self):
        assert DRONE_SENSE_API_KEY_HEADER == "X-API-KEY"


class TestFeatureConstants:
    def test_cot_type(self):
        assert DRONE_COT_TYPE == "a-f-A-M-H-Q"

    def test_earth_radius(self):
        assert EARTH_RADIUS_METERS == 6371000

    def test_layer_path(self):
        assert LAYER_COT_PATH.format(layer="3") == "/api/layer/3/cot"
