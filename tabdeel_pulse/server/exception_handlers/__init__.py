"""
Exception handlers for the Tabdeel Pulse server.

Expected failures surface as ``HTTPException`` from the endpoints; anything
else reaches the global handler registered here.
"""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
