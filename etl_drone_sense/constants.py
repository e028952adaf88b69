"""Connector-wide constants."""

# Service identification
SERVICE_NAME = "etl-drone-sense"
SERVICE_VERSION = "0.1.0"

# DroneSense API
DRONE_SENSE_URL = "https://external.dronesense.com/v1/drones/with-sensors"
DRONE_SENSE_API_KEY_HEADER = "X-API-KEY"

# CoT classification: friendly, air, military, rotary wing, UAV
DRONE_COT_TYPE = "a-f-A-M-H-Q"

# Geodesy
EARTH_RADIUS_METERS = 6371000.0

# Video attachment connection profile
VIDEO_NETWORK_TIMEOUT_MS = 12000
VIDEO_PROTOCOL = "raw"
VIDEO_BUFFER_TIME_UNSET = -1
VIDEO_PORT_UNSET = -1
CAMERA_SENSOR_SUFFIX = "-camera"

# Viewer link
VIEWER_LINK_RELATION = "r-u"
VIEWER_LINK_MIME_TYPE = "text/html"
VIEWER_LINK_REMARKS = "DroneSense Viewer"

# Field-of-view cone rendering
SENSOR_FOV_DEGREES = 45.0
SENSOR_VFOV_DEGREES = 45.0
SENSOR_STROKE_COLOR = -16777216
SENSOR_STROKE_WEIGHT = 0.5
SENSOR_FOV_RED = 1.0
SENSOR_FOV_GREEN = 0.5
SENSOR_FOV_BLUE = 0.0
SENSOR_FOV_ALPHA = 0.3
SENSOR_RANGE_LINES = 100
SENSOR_RANGE_LINE_STROKE_COLOR = -16777216
SENSOR_RANGE_LINE_STROKE_WEIGHT = 1.0

# Downstream layer endpoint, relative to ETL_API
LAYER_COT_PATH = "/api/layer/{layer}/cot"
