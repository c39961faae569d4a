"""Domain enums and API I/O models for Tabdeel Pulse."""
