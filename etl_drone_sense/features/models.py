"""GeoJSON feature models submitted to the downstream TAK layer.

Attribute names are snake_case; the serialized names are the camelCase keys
the layer expects (``networkTimeout``, ``fovRed``, ...).
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from etl_drone_sense.constants import (
    SENSOR_FOV_ALPHA,
    SENSOR_FOV_BLUE,
    SENSOR_FOV_DEGREES,
    SENSOR_FOV_GREEN,
    SENSOR_FOV_RED,
    SENSOR_RANGE_LINE_STROKE_COLOR,
    SENSOR_RANGE_LINE_STROKE_WEIGHT,
    SENSOR_RANGE_LINES,
    SENSOR_STROKE_COLOR,
    SENSOR_STROKE_WEIGHT,
    SENSOR_VFOV_DEGREES,
    VIDEO_BUFFER_TIME_UNSET,
    VIDEO_NETWORK_TIMEOUT_MS,
    VIDEO_PORT_UNSET,
    VIDEO_PROTOCOL,
)


class _LayerModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Point(_LayerModel):
    """GeoJSON point, ``[longitude, latitude, altitude]``."""

    type: Literal["Point"] = "Point"
    coordinates: list[float]


class Link(_LayerModel):
    """Related link shown with the feature."""

    uid: str
    relation: str
    type: str
    url: str
    remarks: str


class VideoConnection(_LayerModel):
    """Connection profile for a raw video stream."""

    uid: str
    network_timeout: int = Field(default=VIDEO_NETWORK_TIMEOUT_MS, alias="networkTimeout")
    path: str = ""
    protocol: str = VIDEO_PROTOCOL
    buffer_time: int = Field(default=VIDEO_BUFFER_TIME_UNSET, alias="bufferTime")
    address: str
    port: int = VIDEO_PORT_UNSET
    rover_port: int = Field(default=VIDEO_PORT_UNSET, alias="roverPort")
    rtsp_reliable: int = Field(default=0, alias="rtspReliable")
    ignore_embedded_klv: bool = Field(default=False, alias="ignoreEmbeddedKLV")
    alias: str


class VideoAttachment(_LayerModel):
    """Video feed attached to a feature."""

    uid: str
    sensor: str
    url: str
    connection: VideoConnection


class SensorCone(_LayerModel):
    """Camera field-of-view cone.

    Only ``azimuth`` and ``range`` are derived; everything else is a fixed
    rendering constant.
    """

    azimuth: float
    range: float
    fov: float = SENSOR_FOV_DEGREES
    vfov: float = SENSOR_VFOV_DEGREES
    elevation: float = 0.0
    roll: float = 0.0
    display_magnetic_reference: int = Field(default=0, alias="displayMagneticReference")
    stroke_color: int = Field(default=SENSOR_STROKE_COLOR, alias="strokeColor")
    stroke_weight: float = Field(default=SENSOR_STROKE_WEIGHT, alias="strokeWeight")
    fov_red: float = Field(default=SENSOR_FOV_RED, alias="fovRed")
    fov_green: float = Field(default=SENSOR_FOV_GREEN, alias="fovGreen")
    fov_blue: float = Field(default=SENSOR_FOV_BLUE, alias="fovBlue")
    fov_alpha: float = Field(default=SENSOR_FOV_ALPHA, alias="fovAlpha")
    range_lines: int = Field(default=SENSOR_RANGE_LINES, alias="rangeLines")
    range_line_stroke_color: int = Field(
        default=SENSOR_RANGE_LINE_STROKE_COLOR, alias="rangeLineStrokeColor"
    )
    range_line_stroke_weight: float = Field(
        default=SENSOR_RANGE_LINE_STROKE_WEIGHT, alias="rangeLineStrokeWeight"
    )


class FeatureProperties(_LayerModel):
    """Feature properties understood by the layer's CoT conversion."""

    type: str
    callsign: str
    speed: float
    course: float
    links: list[Link] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
    video: VideoAttachment | None = None
    sensor: SensorCone | None = None


class Feature(_LayerModel):
    """One drone, as a GeoJSON feature."""

    id: str
    type: Literal["Feature"] = "Feature"
    properties: FeatureProperties
    geometry: Point


class FeatureCollection(_LayerModel):
    """Ordered set of features submitted as one unit."""

    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[Feature] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Serialize with layer key names, omitting absent attachments."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
