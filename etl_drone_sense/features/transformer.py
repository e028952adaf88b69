"""Convert DroneSense drone locations into layer features."""

from etl_drone_sense.constants import (
    CAMERA_SENSOR_SUFFIX,
    DRONE_COT_TYPE,
    VIEWER_LINK_MIME_TYPE,
    VIEWER_LINK_RELATION,
    VIEWER_LINK_REMARKS,
)
from etl_drone_sense.features.models import (
    Feature,
    FeatureProperties,
    Link,
    Point,
    SensorCone,
    VideoAttachment,
    VideoConnection,
)
from etl_drone_sense.geo.calculations import haversine_distance, initial_bearing
from etl_drone_sense.vendor.models import DroneLocation, Sensor


def to_feature(location: DroneLocation) -> Feature:
    """Build the feature for one drone location.

    Never fails on a validated record. The video attachment and viewer link
    come from the first sensor with a raw stream; the field-of-view cone is
    only added when the drone reports a SPOI.

    Args:
        location: Validated drone location.

    Returns:
        Feature with the drone's id, position and attachments.
    """
    properties = FeatureProperties(
        type=DRONE_COT_TYPE,
        callsign=location.call_sign,
        speed=location.speed,
        course=location.heading,
        links=[],
        metadata=location.to_metadata(),
    )

    sensor = select_video_sensor(location.sensors)
    if sensor is not None:
        properties.video = _build_video(location, sensor)
        if sensor.video_url:
            properties.links.append(_build_viewer_link(location, sensor.video_url))

    if location.has_spoi:
        properties.sensor = _build_sensor_cone(location)

    return Feature(
        id=location.id,
        properties=properties,
        geometry=Point(
            coordinates=[location.longitude, location.latitude, location.altitude_agl],
        ),
    )


def select_video_sensor(sensors: list[Sensor]) -> Sensor | None:
    """Return the first sensor with a raw stream address.

    Sensors without an ``rtsp_url`` are skipped entirely, even when they
    have a viewer ``video_url``. Later sensors are ignored once one is found.
    """
    for sensor in sensors:
        if not sensor.rtsp_url:
            continue
        return sensor
    return None


def _build_video(location: DroneLocation, sensor: Sensor) -> VideoAttachment:
    # select_video_sensor guarantees a non-empty rtsp_url
    rtsp_url = sensor.rtsp_url or ""
    return VideoAttachment(
        uid=location.id,
        sensor=f"{location.call_sign}{CAMERA_SENSOR_SUFFIX}",
        url=rtsp_url,
        connection=VideoConnection(
            uid=location.id,
            address=rtsp_url,
            alias=location.call_sign,
        ),
    )


def _build_viewer_link(location: DroneLocation, video_url: str) -> Link:
    return Link(
        uid=location.id,
        relation=VIEWER_LINK_RELATION,
        type=VIEWER_LINK_MIME_TYPE,
        url=video_url,
        remarks=VIEWER_LINK_REMARKS,
    )


def _build_sensor_cone(location: DroneLocation) -> SensorCone:
    """Point the cone from the drone toward its SPOI, reaching exactly that far."""
    coordinates = {
        "latitude_1": location.latitude,
        "longitude_1": location.longitude,
        "latitude_2": location.spoi_lat,
        "longitude_2": location.spoi_lng,
    }
    return SensorCone(
        azimuth=initial_bearing(**coordinates),
        range=haversine_distance(**coordinates),
    )
