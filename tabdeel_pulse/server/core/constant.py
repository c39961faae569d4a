"""Application-wide constants for the Tabdeel Pulse server."""

PROJECT_NAME = "Tabdeel Pulse"
API_PREFIX = "/api"
VERSION = "0.1.0"
SCHEMA_VERSION = "v1"
ROOT_MESSAGE = "Tabdeel Pulse Backend API is running."
