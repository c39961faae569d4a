"""HTTP API for the Tabdeel Pulse dashboard."""
