"""
Version 1 API routers.

Each module exposes a ``router`` that ``tabdeel_pulse.server.main`` mounts
under ``/api``.
"""
