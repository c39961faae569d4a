"""
Core utilities for Tabdeel Pulse.

This package provides logging configuration, permissions, password hashing,
formatting helpers and the database layer shared by the server.
"""

from tabdeel_pulse.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
